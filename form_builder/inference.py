from __future__ import annotations

from typing import Any, Dict, List, Optional

from .config import get_settings
from .errors import NestingTooDeepError
from .formats import detect_format

JSON_SCHEMA_DRAFT = "https://json-schema.org/draft-07/schema#"


def infer_schema(data: Any, max_depth: Optional[int] = None) -> Dict[str, Any]:
    """Infer a draft-07 JSON Schema describing `data`.

    The root fragment is returned with `$schema` as its first key. Values
    nested deeper than `max_depth`, or deeper than the interpreter stack
    allows, raise NestingTooDeepError; everything else always yields a
    schema.
    """
    if max_depth is None:
        max_depth = get_settings().max_depth

    schema: Dict[str, Any] = {"$schema": JSON_SCHEMA_DRAFT}
    try:
        schema.update(infer_type(data, max_depth=max_depth))
    except RecursionError:
        raise NestingTooDeepError() from None
    return schema


def infer_type(value: Any, depth: int = 0, max_depth: int = 200) -> Dict[str, Any]:
    """Return the schema fragment for a single value."""
    if depth > max_depth:
        raise NestingTooDeepError()

    if value is None:
        return {"type": "null"}
    if isinstance(value, list):
        return infer_array_schema(value, depth, max_depth)
    if isinstance(value, dict):
        return infer_object_schema(value, depth, max_depth)
    if isinstance(value, str):
        return infer_string_schema(value)
    # bool subclasses int, so it has to be checked first.
    if isinstance(value, bool):
        return {"type": "boolean"}
    if isinstance(value, (int, float)):
        return {"type": "number"}

    return {"type": "string"}


def infer_object_schema(obj: Dict[str, Any], depth: int = 0, max_depth: int = 200) -> Dict[str, Any]:
    properties: Dict[str, Any] = {}
    for key, value in obj.items():
        properties[key] = infer_type(value, depth + 1, max_depth)
    return {"type": "object", "properties": properties}


def infer_array_schema(arr: List[Any], depth: int = 0, max_depth: int = 200) -> Dict[str, Any]:
    """Infer an array schema assuming the items share one shape.

    The first item decides the item schema. When that item is an object and
    there are more items, the properties of every object item are merged,
    later items overwriting earlier ones on the same key.
    """
    if not arr:
        return {"type": "array", "items": {}}

    item_schema = infer_type(arr[0], depth + 1, max_depth)

    if len(arr) > 1 and item_schema.get("type") == "object":
        merged: Dict[str, Any] = {}
        for item in arr:
            if isinstance(item, dict):
                merged.update(infer_object_schema(item, depth + 1, max_depth)["properties"])
        return {"type": "array", "items": {"type": "object", "properties": merged}}

    return {"type": "array", "items": item_schema}


def infer_string_schema(value: str) -> Dict[str, Any]:
    schema: Dict[str, Any] = {"type": "string"}
    fmt = detect_format(value)
    if fmt:
        schema["format"] = fmt
    return schema
