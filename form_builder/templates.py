"""Contact form shown to new users before they load or generate anything."""
from __future__ import annotations

import json

_CONTACT_FORM_SCHEMA = {
    "$schema": "http://json-schema.org/draft-07/schema#",
    "type": "object",
    "title": "Contact Form",
    "properties": {
        "firstName": {"type": "string", "title": "First Name", "minLength": 1},
        "lastName": {"type": "string", "title": "Last Name", "minLength": 1},
        "email": {"type": "string", "format": "email", "title": "Email Address"},
        "age": {"type": "integer", "title": "Age", "minimum": 0, "maximum": 150},
        "birthdate": {"type": "string", "format": "date", "title": "Birth Date"},
        "country": {
            "type": "string",
            "title": "Country",
            "enum": ["USA", "Canada", "UK", "Australia", "Other"],
        },
        "subscribe": {"type": "boolean", "title": "Subscribe to Newsletter"},
    },
    "required": ["firstName", "lastName", "email"],
}

_CONTACT_FORM_UI_SCHEMA = {
    "type": "VerticalLayout",
    "elements": [
        {"type": "Control", "scope": "#/properties/firstName"},
        {"type": "Control", "scope": "#/properties/lastName"},
        {"type": "Control", "scope": "#/properties/email"},
        {
            "type": "HorizontalLayout",
            "elements": [
                {"type": "Control", "scope": "#/properties/age"},
                {"type": "Control", "scope": "#/properties/birthdate"},
            ],
        },
        {"type": "Control", "scope": "#/properties/country"},
        {"type": "Control", "scope": "#/properties/subscribe"},
    ],
}

_CONTACT_FORM_DATA = {
    "firstName": "John",
    "lastName": "Doe",
    "email": "john.doe@example.com",
    "age": 30,
    "birthdate": "1993-06-15",
    "country": "USA",
    "subscribe": True,
}

DEFAULT_JSON_SCHEMA = json.dumps(_CONTACT_FORM_SCHEMA, indent=2)
DEFAULT_UI_SCHEMA = json.dumps(_CONTACT_FORM_UI_SCHEMA, indent=2)
DEFAULT_DATA = json.dumps(_CONTACT_FORM_DATA, indent=2)
