"""Helpers for building HTML snippets rendered through st.markdown."""
from html import escape
from textwrap import dedent


def html_block(template: str) -> str:
    """
    Flatten multi-line HTML for st.markdown.

    Lines indented by four or more spaces would otherwise be rendered as
    Markdown code blocks, so every line is dedented and left-stripped.
    """
    lines = dedent(template).splitlines()
    return "\n".join(line.lstrip() for line in lines).strip()


def escape_text(value: str) -> str:
    """Escape attendee-supplied text before embedding it in markup."""
    return escape(value or "", quote=True)
