"""Helpers for HTML snippets rendered through st.markdown."""
from html import escape
from textwrap import dedent


def html_block(template: str) -> str:
    """
    Flatten indented HTML so Markdown doesn't render it as a code block.

    Lines indented by four or more spaces are code in Markdown, so every
    line is left-stripped after dedenting.
    """
    return "\n".join(line.lstrip() for line in dedent(template).splitlines()).strip()


def field_error_html(message: str) -> str:
    """Small red message shown under an invalid form field."""
    return html_block(
        f"""
        <div class="field-error">{escape(message)}</div>
        """
    )


def stat_card_html(title: str, value: int, caption: str = "") -> str:
    """Dashboard stats card."""
    caption_html = f'<div class="stat-card__caption">{escape(caption)}</div>' if caption else ""
    return html_block(
        f"""
        <div class="stat-card">
            <div class="stat-card__title">{escape(title)}</div>
            <div class="stat-card__value">{value}</div>
            {caption_html}
        </div>
        """
    )
