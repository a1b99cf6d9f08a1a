import json

import gradio as gr

from form_builder.handlers import (
    autosave_handler,
    delete_project_handler,
    describe_editor_status,
    generate_schemas_handler,
    load_project_handler,
    load_sample_file_handler,
    reset_template_handler,
    restore_session_handler,
    save_project_handler,
    search_projects_handler,
)
from form_builder.templates import DEFAULT_DATA, DEFAULT_JSON_SCHEMA, DEFAULT_UI_SCHEMA


def test_generate_schemas_handler_success():
    json_schema, ui_schema, status = generate_schemas_handler('{"name": "John"}')

    assert json.loads(json_schema)["properties"] == {"name": {"type": "string"}}
    assert json.loads(ui_schema)["elements"] == [{"type": "Control", "scope": "#/properties/name"}]
    assert status.startswith("Generated")


def test_generate_schemas_handler_keeps_editors_on_error():
    json_schema, ui_schema, status = generate_schemas_handler("[1, 2]")

    assert json_schema == gr.update()
    assert ui_schema == gr.update()
    assert "must be an object" in status


def test_describe_editor_status():
    text = describe_editor_status("{}", "", "{bad")
    lines = text.splitlines()

    assert lines[0] == "- **JSON Schema**: valid"
    assert "empty" in lines[1]
    assert "JSON Syntax Error" in lines[2]


def test_load_sample_file_handler(tmp_path):
    good = tmp_path / "good.json"
    good.write_text('{"a": 1}', encoding="utf-8")
    bad = tmp_path / "bad.json"
    bad.write_text("{nope", encoding="utf-8")

    assert load_sample_file_handler(str(good)) == ('{"a": 1}', "Sample data loaded.")

    value, status = load_sample_file_handler(str(bad))
    assert value == gr.update()
    assert status.startswith("Error parsing JSON")

    value, status = load_sample_file_handler(None)
    assert status == "No file uploaded."


def test_reset_and_restore_use_template():
    assert reset_template_handler()[:3] == (DEFAULT_JSON_SCHEMA, DEFAULT_UI_SCHEMA, DEFAULT_DATA)
    assert restore_session_handler({}) == (DEFAULT_JSON_SCHEMA, DEFAULT_UI_SCHEMA, DEFAULT_DATA)


def test_autosave_then_restore():
    storage = autosave_handler({}, "s", "u", "d")
    assert restore_session_handler(storage) == ("s", "u", "d")


def test_project_lifecycle():
    storage, rows, picker, status = save_project_handler({}, "  Contact  ", "s", "u", "d")

    assert status == "Saved project 'Contact'."
    assert len(rows) == 1 and rows[0][0] == "Contact"
    project_id = rows[0][2]
    assert picker["choices"] == [("Contact", project_id)]

    assert load_project_handler(storage, project_id) == ("s", "u", "d", "Loaded project 'Contact'.")

    rows, picker = search_projects_handler(storage, "nothing")
    assert rows == []

    storage, rows, picker, status = delete_project_handler(storage, project_id)
    assert status == "Deleted project 'Contact'."
    assert rows == []

    *_, status = load_project_handler(storage, project_id)
    assert status == "Project not found."


def test_save_requires_name():
    storage, rows, picker, status = save_project_handler({}, "   ", "s", "u", "d")
    assert storage == {}
    assert status == "Enter a project name before saving."


def test_load_and_delete_require_selection():
    *_, status = load_project_handler({}, None)
    assert status == "Select a project to load."
    *_, status = delete_project_handler({}, None)
    assert status == "Select a project to delete."
