"""
Gradio UI for Gen-Forms.

``gen_forms.ui.app`` imports gradio; the handlers do not.
"""

from gen_forms.ui.handlers import EXAMPLE_DESCRIPTIONS, FormsUI, collect_values, render_field_summary

__all__ = [
    "EXAMPLE_DESCRIPTIONS",
    "FormsUI",
    "collect_values",
    "render_field_summary",
]
