from __future__ import annotations

from typing import Any, Dict

from .errors import EmptyInputError, JsonParseError, NestingTooDeepError
from .io_utils import load_json_text


def validate_json(text: Any) -> Dict[str, Any]:
    """Check editor text and return {"valid": True, "parsed": ...} or {"valid": False, "error": ...}."""
    if text is None:
        return {"valid": False, "error": "Input is null or undefined"}
    if not isinstance(text, str):
        return {"valid": False, "error": "Input must be a string"}

    try:
        parsed = load_json_text(text)
    except EmptyInputError:
        return {"valid": False, "error": "Input is empty or contains only whitespace"}
    except JsonParseError as exc:
        return {"valid": False, "error": f"JSON Syntax Error: {exc.detail}"}
    except NestingTooDeepError as exc:
        return {"valid": False, "error": str(exc)}

    return {"valid": True, "parsed": parsed}
