"""Helpers for preparing HTML snippets before rendering in Streamlit."""
from html import escape
from textwrap import dedent


def html_block(template: str) -> str:
    """
    Flatten indented HTML so Streamlit's Markdown renderer keeps it as markup.

    Lines indented by four or more spaces would otherwise become code blocks.
    """
    lines = dedent(template).splitlines()
    return "\n".join(line.lstrip() for line in lines).strip()


def field_error_html(message: str) -> str:
    """Inline error shown directly under a form field."""
    return f"<div class='field-error'>⚠️ {escape(message)}</div>"
