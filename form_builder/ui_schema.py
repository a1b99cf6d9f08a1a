from __future__ import annotations

from typing import Any, Dict, List, Mapping, Optional


def generate_ui_schema(json_schema: Optional[Mapping[str, Any]]) -> Dict[str, Any]:
    """Build a vertical layout with one Control per top-level property.

    Property schemas are not inspected: the form renderer picks the widget
    from each property's type, format and enum. Nested objects are not
    expanded into nested layouts.
    """
    elements: List[Dict[str, Any]] = []

    if not isinstance(json_schema, Mapping):
        return {"type": "VerticalLayout", "elements": elements}

    properties = json_schema.get("properties")
    if not isinstance(properties, Mapping):
        return {"type": "VerticalLayout", "elements": elements}

    for name in properties:
        elements.append(create_control(name))

    return {"type": "VerticalLayout", "elements": elements}


def create_control(property_name: str) -> Dict[str, str]:
    return {"type": "Control", "scope": f"#/properties/{property_name}"}
