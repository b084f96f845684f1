"""
Gen-Forms UI - describe, build, share and fill forms.

This Gradio app:
1. Turns a plain-text description into a form preview
2. Saves the form and lists saved forms with their submissions
3. Renders a saved form and records validated answers

Usage:
    gen-forms ui --port 7860

    # Against a running RPC server instead of a local store
    GEN_FORMS_API_URL=http://localhost:2022 gen-forms ui
"""

import logging

import gradio as gr

from gen_forms.config import get_config
from gen_forms.models.field_definitions import FormField
from gen_forms.models.forms import Form
from gen_forms.ui.handlers import EXAMPLE_DESCRIPTIONS, FormsBackend, FormsUI

logger = logging.getLogger("gen-forms-ui")


def _control_for(field: FormField):
    """Create the input component for one field."""
    label = f"{field.label} *" if field.required else field.label

    if field.type == "textarea":
        return gr.Textbox(label=label, placeholder=field.placeholder or "", lines=4)
    if field.type == "number":
        return gr.Number(label=label, value=None, info=field.placeholder)
    if field.type == "select":
        return gr.Dropdown(
            label=label,
            choices=field.options or [],
            value=None,
            info=field.placeholder or "Select an option",
        )
    if field.type == "radio":
        return gr.Radio(label=label, choices=field.options or [], value=None)
    if field.type == "checkbox":
        return gr.Checkbox(label=label, value=False)
    return gr.Textbox(label=label, placeholder=field.placeholder or "")


def build_app(backend: FormsBackend) -> gr.Blocks:
    """
    Build the Gradio Blocks app.

    Args:
        backend: ``FormService`` or ``FormsClient`` the handlers talk to.
    """
    ui = FormsUI(backend)

    async def refresh_choices():
        return gr.Dropdown(choices=await ui.form_choices(), value=None)

    with gr.Blocks(title="Gen-Forms") as app:
        gr.Markdown("""
# 📝 Gen-Forms

**How it works:**
1. Describe the form you need in plain words
2. Check the detected fields, adjust the title and create the form
3. Share the form id and collect responses in the Fill tab
        """)

        with gr.Tab("🛠️ Builder"):
            with gr.Row():
                with gr.Column(scale=1):
                    description_input = gr.Textbox(
                        label="📝 Describe your form",
                        placeholder="Example: I need a contact form with name, email, and message fields",
                        lines=4,
                    )
                    gr.Examples(
                        examples=[[example] for example in EXAMPLE_DESCRIPTIONS],
                        inputs=description_input,
                        label="💡 Try these examples",
                    )
                    preview_btn = gr.Button("✨ Generate Preview", variant="primary", size="lg")

                with gr.Column(scale=1):
                    preview_status = gr.Markdown()
                    title_input = gr.Textbox(label="🏷️ Form title", interactive=True)
                    fields_md = gr.Markdown()
                    parsed_state = gr.State(None)
                    create_btn = gr.Button("💾 Create Form", variant="secondary")
                    create_status = gr.Markdown()
                    created_id = gr.Textbox(label="Form id (share this)", interactive=False)

            preview_btn.click(
                fn=ui.preview,
                inputs=description_input,
                outputs=[preview_status, title_input, fields_md, parsed_state],
            )
            create_btn.click(
                fn=ui.save,
                inputs=[parsed_state, title_input],
                outputs=[create_status, created_id],
            )

        with gr.Tab("📚 Forms"):
            with gr.Row():
                with gr.Column(scale=1):
                    forms_dropdown = gr.Dropdown(label="Saved forms", choices=[], value=None)
                    refresh_btn = gr.Button("🔄 Refresh")
                    form_details = gr.Markdown()
                    with gr.Row():
                        submissions_btn = gr.Button("📬 View Submissions")
                        delete_btn = gr.Button("🗑️ Delete Form", variant="stop")
                    delete_status = gr.Markdown()

                with gr.Column(scale=1):
                    submissions_status = gr.Markdown()
                    submissions_json = gr.JSON(label="Submitted Data")

            refresh_btn.click(fn=refresh_choices, outputs=forms_dropdown)
            forms_dropdown.change(fn=ui.describe_form, inputs=forms_dropdown, outputs=form_details)
            submissions_btn.click(
                fn=ui.submissions,
                inputs=forms_dropdown,
                outputs=[submissions_status, submissions_json],
            )
            delete_btn.click(
                fn=ui.delete,
                inputs=forms_dropdown,
                outputs=delete_status,
            ).then(fn=refresh_choices, outputs=forms_dropdown)

        with gr.Tab("✍️ Fill"):
            fill_dropdown = gr.Dropdown(label="Form to fill", choices=[], value=None)
            fill_refresh_btn = gr.Button("🔄 Refresh")
            form_state = gr.State(None)

            fill_refresh_btn.click(fn=refresh_choices, outputs=fill_dropdown)
            fill_dropdown.change(fn=ui.load_form, inputs=fill_dropdown, outputs=form_state)

            @gr.render(inputs=form_state)
            def render_form(form_json):
                if not form_json:
                    gr.Markdown("*Select a form to fill it in.*")
                    return

                form = Form.model_validate(form_json)
                header = f"### 📋 {form.title}"
                if form.description:
                    header += f"\n\n{form.description}"
                gr.Markdown(header)

                controls = [_control_for(field) for field in form.fields]
                submit_btn = gr.Button("📨 Submit", variant="primary")
                result_md = gr.Markdown()

                async def on_submit(*values):
                    status, _ = await ui.submit(form_json, list(values))
                    return status

                submit_btn.click(fn=on_submit, inputs=controls, outputs=result_md)

        app.load(fn=refresh_choices, outputs=forms_dropdown)
        app.load(fn=refresh_choices, outputs=fill_dropdown)

    return app


def launch_ui(host: str = "0.0.0.0", port: int | None = None) -> None:
    """Launch the UI against the configured backend."""
    config = get_config()
    port = port or config.ui_port

    if config.api_url:
        from gen_forms.client import FormsClient

        backend: FormsBackend = FormsClient(config.api_url)
        logger.info(f"UI using RPC server at {config.api_url}")
    else:
        from gen_forms.service import FormService

        backend = FormService.from_config()
        logger.info(f"UI using local {config.store_backend} store")

    build_app(backend).launch(server_name=host, server_port=port)
