"""HTML-specific rendering utilities.

This module contains the HTML generation helpers:
- CSS class computation from message role
- HTML escaping and line-break conversion
- Collapsible code block rendering
- Template environment management

The functions here transform format-neutral TemplateMessage data into
HTML-specific output.
"""

import functools
import html
from pathlib import Path
from typing import TYPE_CHECKING

from jinja2 import Environment, FileSystemLoader, select_autoescape

from ..models import MessageRole

if TYPE_CHECKING:
    from ..renderer import TemplateMessage


# -- CSS and Message Display --------------------------------------------------

CSS_CLASS_REGISTRY: dict[MessageRole, str] = {
    MessageRole.HUMAN: "human",
    MessageRole.ASSISTANT: "assistant",
}


def css_class_from_message(msg: "TemplateMessage") -> str:
    """Return the role CSS class for a message ("human" or "assistant")."""
    return CSS_CLASS_REGISTRY.get(msg.role, "assistant")


# -- HTML Utilities -----------------------------------------------------------


def escape_html(text: str) -> str:
    """Escape HTML special characters in text.

    Also normalizes line endings (CRLF -> LF) to prevent double spacing in <pre> blocks.
    """
    normalized = text.replace("\r\n", "\n").replace("\r", "\n")
    return html.escape(normalized)


def render_line_breaks(text: str) -> str:
    """Escape text and turn every newline into an explicit <br>."""
    return escape_html(text).replace("\n", "<br>")


# -- Collapsible Content Rendering --------------------------------------------


def render_collapsible_code(code_html: str, language: str) -> str:
    """Render a code block as a collapsed details element.

    The summary is the clickable header showing the language (or "code");
    the body holds the already-escaped or highlighted code.

    Args:
        code_html: HTML for the code body (escaped text or highlighted markup)
        language: Language tag from the fence, may be empty

    Returns:
        HTML string with collapsible details element
    """
    display_language = escape_html(language) if language else "code"
    return (
        "<details class='code-block'>"
        f"<summary class='code-header'>{display_language}</summary>"
        f"<div class='code-body'>{code_html}</div>"
        "</details>"
    )


def render_plain_code(code: str, language: str) -> str:
    """Wrap code verbatim in <pre><code>, escaping only what HTML requires."""
    language_class = f" class='language-{escape_html(language)}'" if language else ""
    return f"<pre><code{language_class}>{escape_html(code)}</code></pre>"


# -- Template Environment -----------------------------------------------------


@functools.lru_cache(maxsize=1)
def get_template_environment() -> Environment:
    """Get cached Jinja2 template environment for HTML rendering.

    Creates a Jinja2 environment configured with:
    - Template loading from the templates directory
    - HTML auto-escaping

    Returns:
        Configured Jinja2 Environment (cached after first call)
    """
    templates_dir = Path(__file__).parent / "templates"
    return Environment(
        loader=FileSystemLoader(templates_dir),
        autoescape=select_autoescape(["html", "xml"]),
    )
