from __future__ import annotations

import os
from functools import lru_cache

from pydantic import BaseModel, Field, field_validator


def _env(name: str, default: str):
    return Field(default_factory=lambda: os.getenv(name, default), validate_default=True)


class Settings(BaseModel):
    """Environment values are read and validated when Settings is created, not at import."""

    max_depth: int = _env("FORM_BUILDER_MAX_DEPTH", "200")
    json_indent: int = _env("FORM_BUILDER_JSON_INDENT", "2")
    server_name: str = _env("FORM_BUILDER_SERVER_NAME", "127.0.0.1")
    server_port: int = _env("FORM_BUILDER_SERVER_PORT", "7860")
    log_level: str = _env("FORM_BUILDER_LOG_LEVEL", "INFO")

    @field_validator("max_depth")
    @classmethod
    def _positive_depth(cls, value: int) -> int:
        if value < 1:
            raise ValueError("max_depth must be at least 1")
        return value


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    return Settings()
