import logging

import gradio as gr

from form_builder.config import get_settings
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

PROJECT_STORAGE_KEY = "form-builder"

settings = get_settings()

logging.basicConfig(
    level=settings.log_level.upper(),
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
    datefmt='%Y-%m-%d %H:%M:%S',
)

# --- UI Definition ---
with gr.Blocks(title="Form Builder") as demo:
    gr.Markdown("# Form Builder")
    gr.Markdown("Edit a JSON Schema, a UI Schema and sample data, or generate both schemas from the data.")

    # Saved projects and the autosaved editors, kept in the browser across reloads
    project_store_state = gr.BrowserState(default_value={}, storage_key=PROJECT_STORAGE_KEY)

    with gr.Tab("Editors"):
        with gr.Row():
            with gr.Column(scale=1):
                json_schema_editor = gr.Code(label="JSON Schema", language="json", value=DEFAULT_JSON_SCHEMA)
            with gr.Column(scale=1):
                ui_schema_editor = gr.Code(label="UI Schema", language="json", value=DEFAULT_UI_SCHEMA)
            with gr.Column(scale=1):
                data_editor = gr.Code(label="Data", language="json", value=DEFAULT_DATA)
                sample_file = gr.File(label="Load Sample Data", file_types=[".json"])

        with gr.Row():
            generate_btn = gr.Button("Generate Schemas from Data", variant="primary")
            reset_btn = gr.Button("Reset to Template")

        status_msg = gr.Textbox(label="Status", interactive=False)
        editor_status = gr.Markdown(describe_editor_status(DEFAULT_JSON_SCHEMA, DEFAULT_UI_SCHEMA, DEFAULT_DATA))

    with gr.Tab("Projects"):
        with gr.Row():
            with gr.Column(scale=1):
                project_name = gr.Textbox(label="Project Name", placeholder="My form")
                save_btn = gr.Button("Save Project", variant="primary")
                project_search = gr.Textbox(label="Search Projects", placeholder="Filter by name")
                project_picker = gr.Dropdown(label="Project", choices=[], value=None, interactive=True)
                with gr.Row():
                    load_btn = gr.Button("Load")
                    delete_btn = gr.Button("Delete", variant="stop")
                project_status = gr.Textbox(label="Project Status", interactive=False)
            with gr.Column(scale=2):
                project_table = gr.Dataframe(
                    headers=["Name", "Last Modified", "ID"],
                    datatype=["str", "str", "str"],
                    col_count=(3, "fixed"),
                    interactive=False,
                    label="Saved Projects",
                )

    editors = [json_schema_editor, ui_schema_editor, data_editor]

    demo.load(
        fn=restore_session_handler,
        inputs=[project_store_state],
        outputs=editors,
    )

    demo.load(
        fn=search_projects_handler,
        inputs=[project_store_state, project_search],
        outputs=[project_table, project_picker],
    )

    for editor in editors:
        editor.change(
            fn=describe_editor_status,
            inputs=editors,
            outputs=[editor_status],
        )
        editor.change(
            fn=autosave_handler,
            inputs=[project_store_state] + editors,
            outputs=[project_store_state],
        )

    generate_btn.click(
        fn=generate_schemas_handler,
        inputs=[data_editor],
        outputs=[json_schema_editor, ui_schema_editor, status_msg],
    )

    reset_btn.click(
        fn=reset_template_handler,
        inputs=[],
        outputs=editors + [status_msg],
    )

    sample_file.upload(
        fn=load_sample_file_handler,
        inputs=[sample_file],
        outputs=[data_editor, status_msg],
    )

    save_btn.click(
        fn=save_project_handler,
        inputs=[project_store_state, project_name] + editors + [project_search],
        outputs=[project_store_state, project_table, project_picker, project_status],
    )

    load_btn.click(
        fn=load_project_handler,
        inputs=[project_store_state, project_picker],
        outputs=editors + [project_status],
    )

    delete_btn.click(
        fn=delete_project_handler,
        inputs=[project_store_state, project_picker, project_search],
        outputs=[project_store_state, project_table, project_picker, project_status],
    )

    project_search.change(
        fn=search_projects_handler,
        inputs=[project_store_state, project_search],
        outputs=[project_table, project_picker],
    )

if __name__ == "__main__":
    demo.launch(server_name=settings.server_name, server_port=settings.server_port)
