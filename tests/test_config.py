import pytest
from pydantic import ValidationError

from form_builder.config import Settings


def test_defaults(monkeypatch):
    monkeypatch.delenv("FORM_BUILDER_MAX_DEPTH", raising=False)
    monkeypatch.delenv("FORM_BUILDER_JSON_INDENT", raising=False)
    settings = Settings()
    assert settings.max_depth == 200
    assert settings.json_indent == 2


def test_environment_values_are_coerced(monkeypatch):
    monkeypatch.setenv("FORM_BUILDER_MAX_DEPTH", "300")
    monkeypatch.setenv("FORM_BUILDER_SERVER_PORT", "8080")
    settings = Settings()
    assert settings.max_depth == 300
    assert settings.server_port == 8080


def test_malformed_environment_value_names_the_field(monkeypatch):
    monkeypatch.setenv("FORM_BUILDER_MAX_DEPTH", "deep")
    with pytest.raises(ValidationError, match="max_depth"):
        Settings()


def test_max_depth_must_be_positive():
    with pytest.raises(ValidationError):
        Settings(max_depth=0)
