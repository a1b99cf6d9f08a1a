from __future__ import annotations

import logging
from datetime import datetime
from typing import Any, Dict, List, Optional

import gradio as gr

from .generation import generate_from_data
from .io_utils import read_json_text
from .projects import ProjectRepository, create_project
from .templates import DEFAULT_DATA, DEFAULT_JSON_SCHEMA, DEFAULT_UI_SCHEMA
from .validation import validate_json

logger = logging.getLogger("form_builder.handlers")

EDITOR_LABELS = ("JSON Schema", "UI Schema", "Data")


def describe_editor_status(json_schema_text, ui_schema_text, data_text) -> str:
    lines = []
    for label, text in zip(EDITOR_LABELS, (json_schema_text, ui_schema_text, data_text)):
        result = validate_json(text)
        if result["valid"]:
            lines.append(f"- **{label}**: valid")
        else:
            lines.append(f"- **{label}**: {result['error']}")
    return "\n".join(lines)


def generate_schemas_handler(data_text):
    """Replace both schema editors with schemas generated from the data editor.

    On error the editors are left as they are and only the status changes.
    """
    result = generate_from_data(data_text)
    if "error" in result:
        return gr.update(), gr.update(), f"Could not generate schemas. {result['error']}"

    return result["jsonSchema"], result["uiSchema"], "Generated JSON Schema and UI Schema from data."


def load_sample_file_handler(file_obj):
    if file_obj is None:
        return gr.update(), "No file uploaded."

    try:
        text = read_json_text(file_obj)
    except (OSError, UnicodeDecodeError) as e:
        return gr.update(), f"Error reading file: {str(e)}"

    result = validate_json(text)
    if not result["valid"]:
        return gr.update(), f"Error parsing JSON: {result['error']}"
    return text, "Sample data loaded."


def reset_template_handler():
    return DEFAULT_JSON_SCHEMA, DEFAULT_UI_SCHEMA, DEFAULT_DATA, "Restored the default contact form."


def _format_timestamp(ms: int) -> str:
    return datetime.fromtimestamp(ms / 1000).strftime("%Y-%m-%d %H:%M")


def build_project_views(storage: Dict[str, Any], query: Optional[str] = None):
    """Return the project table rows and the project picker update."""
    projects = ProjectRepository(storage).search_projects(query)
    rows: List[List[str]] = [[p.name, _format_timestamp(p.last_modified), p.id] for p in projects]
    choices = [(p.name, p.id) for p in projects]
    return rows, gr.update(choices=choices, value=None)


def save_project_handler(storage, name, json_schema_text, ui_schema_text, data_text, query=None):
    storage = storage if storage is not None else {}
    if not name or not name.strip():
        rows, picker = build_project_views(storage, query)
        return storage, rows, picker, "Enter a project name before saving."

    project = create_project(name.strip(), json_schema_text or "", ui_schema_text or "", data_text or "")
    ProjectRepository(storage).save_project(project)
    logger.info("Saved project %s (%s)", project.name, project.id)

    rows, picker = build_project_views(storage, query)
    return storage, rows, picker, f"Saved project '{project.name}'."


def load_project_handler(storage, project_id):
    if not project_id:
        return gr.update(), gr.update(), gr.update(), "Select a project to load."

    project = ProjectRepository(storage if storage is not None else {}).get_project(project_id)
    if project is None:
        return gr.update(), gr.update(), gr.update(), "Project not found."

    return project.json_schema, project.ui_schema, project.data, f"Loaded project '{project.name}'."


def delete_project_handler(storage, project_id, query=None):
    storage = storage if storage is not None else {}
    if not project_id:
        rows, picker = build_project_views(storage, query)
        return storage, rows, picker, "Select a project to delete."

    repo = ProjectRepository(storage)
    project = repo.get_project(project_id)
    repo.delete_project(project_id)

    rows, picker = build_project_views(storage, query)
    if project is None:
        return storage, rows, picker, "Project not found."
    logger.info("Deleted project %s (%s)", project.name, project.id)
    return storage, rows, picker, f"Deleted project '{project.name}'."


def search_projects_handler(storage, query):
    return build_project_views(storage if storage is not None else {}, query)


def autosave_handler(storage, json_schema_text, ui_schema_text, data_text):
    storage = storage if storage is not None else {}
    ProjectRepository(storage).save_current(json_schema_text or "", ui_schema_text or "", data_text or "")
    return storage


def restore_session_handler(storage):
    """Fill the editors from the autosaved work in progress, or the default template."""
    current = ProjectRepository(storage if storage is not None else {}).get_current()
    if current is None:
        return DEFAULT_JSON_SCHEMA, DEFAULT_UI_SCHEMA, DEFAULT_DATA
    return current.json_schema, current.ui_schema, current.data
