"""Core logic for the Form Builder.

The Gradio UI lives in `app.py`. This package contains pure functions that:
- infer a JSON Schema from sample data
- generate a default UI Schema from a JSON Schema
- validate editor text and keep saved projects
"""

from .generation import generate_from_data
from .inference import infer_schema
from .ui_schema import generate_ui_schema

__all__ = ["generate_from_data", "generate_ui_schema", "infer_schema"]
