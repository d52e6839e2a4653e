"""HTML-specific rendering utilities package.

Re-exports the helpers from utils and renderer_code alongside the renderer.
"""

from .utils import (
    css_class_from_message,
    escape_html,
    get_template_environment,
    render_collapsible_code,
    render_line_breaks,
    render_plain_code,
)
from .renderer_code import get_highlight_css, highlight_code_block
from .renderer import HtmlRenderer, generate_html

__all__ = [
    # utils
    "css_class_from_message",
    "escape_html",
    "get_template_environment",
    "render_collapsible_code",
    "render_line_breaks",
    "render_plain_code",
    # renderer_code
    "get_highlight_css",
    "highlight_code_block",
    # renderer
    "HtmlRenderer",
    "generate_html",
]
