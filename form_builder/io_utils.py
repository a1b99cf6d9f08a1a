from __future__ import annotations

import json
from typing import Any, Optional

from .config import get_settings
from .errors import EmptyInputError, JsonParseError, NestingTooDeepError


def _reject_constant(name: str):
    raise ValueError(f"Unexpected token {name}")


def load_json_text(text: str) -> Any:
    """Parse editor text as strict JSON.

    NaN and Infinity literals are rejected, as browsers reject them.
    """
    if text is None or not text.strip():
        raise EmptyInputError()

    try:
        return json.loads(text, parse_constant=_reject_constant)
    except RecursionError:
        raise NestingTooDeepError() from None
    except ValueError as exc:
        raise JsonParseError(str(exc)) from exc


def dump_json_text(value: Any, indent: Optional[int] = None) -> str:
    if indent is None:
        indent = get_settings().json_indent
    return json.dumps(value, indent=indent, ensure_ascii=False)


def read_json_text(file_obj) -> str:
    """Read the text of an uploaded file or file path."""
    if file_obj is None:
        raise ValueError("No file uploaded.")

    if hasattr(file_obj, 'read'):
        if hasattr(file_obj, 'seek'):
            file_obj.seek(0)
        content = file_obj.read()
        if isinstance(content, bytes):
            content = content.decode('utf-8')
        return content

    path = file_obj.name if hasattr(file_obj, 'name') else file_obj
    with open(path, 'r', encoding='utf-8') as f:
        return f.read()
