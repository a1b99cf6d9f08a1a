from __future__ import annotations

import logging
from typing import Dict

from .config import get_settings
from .errors import DataShapeError, FormBuilderError, NestingTooDeepError
from .inference import infer_schema
from .io_utils import dump_json_text, load_json_text
from .ui_schema import generate_ui_schema

logger = logging.getLogger("form_builder.generation")


def generate_from_data(data_text: str) -> Dict[str, str]:
    """Generate a JSON Schema and a UI Schema from sample data text.

    Returns {"jsonSchema": ..., "uiSchema": ...} as pretty-printed JSON
    text, or {"error": message} when the input is empty, is not valid JSON,
    is not an object or is nested too deeply. Never raises for string input.
    """
    settings = get_settings()
    try:
        data = load_json_text(data_text)
        if not isinstance(data, dict):
            raise DataShapeError()

        json_schema = infer_schema(data, max_depth=settings.max_depth)
        ui_schema = generate_ui_schema(json_schema)
        try:
            # the schema nests about twice as deep as the data it describes
            json_schema_text = dump_json_text(json_schema, settings.json_indent)
        except RecursionError:
            raise NestingTooDeepError() from None
    except FormBuilderError as exc:
        logger.info("Schema generation rejected input: %s", exc)
        return {"error": str(exc)}

    logger.debug("Generated schemas for %d top-level properties", len(ui_schema["elements"]))
    return {
        "jsonSchema": json_schema_text,
        "uiSchema": dump_json_text(ui_schema, settings.json_indent),
    }
