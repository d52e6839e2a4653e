"""HTML renderer implementation for conversation transcripts."""

from typing import Optional

from ..models import CodeBlock, Message
from ..renderer import Renderer, TemplateMessage, generate_template_messages
from .renderer_code import get_highlight_css, highlight_code_block
from .utils import (
    css_class_from_message,
    get_template_environment,
    render_collapsible_code,
    render_line_breaks,
    render_plain_code,
)

DEFAULT_TITLE = "Conversation Log"


class HtmlRenderer(Renderer):
    """HTML renderer for conversation transcripts."""

    def __init__(self, highlight: bool = False):
        """Initialize the HTML renderer.

        Args:
            highlight: Use Pygments to highlight code blocks instead of
                embedding them as plain escaped text.
        """
        super().__init__()
        self.highlight = highlight

    def format_code_block(self, block: CodeBlock) -> str:
        if self.highlight:
            code_html = highlight_code_block(block.body, block.language)
        else:
            code_html = render_plain_code(block.body, block.language)
        return render_collapsible_code(code_html, block.language)

    def format_content(self, message: TemplateMessage) -> str:
        """Render a message body: code blocks collapsed, other newlines as <br>.

        Code blocks are substituted first, so newlines inside code bodies are
        never converted.
        """
        parts: list[str] = []
        for segment in message.segments:
            if isinstance(segment, CodeBlock):
                parts.append(self.format_code_block(segment))
            else:
                parts.append(render_line_breaks(segment.text))
        return "".join(parts)

    def generate(
        self,
        messages: list[Message],
        title: Optional[str] = None,
        source_info: str = "",
    ) -> str:
        """Generate a self-contained HTML document from messages."""
        if not title:
            title = DEFAULT_TITLE

        rendered = [
            (msg, css_class_from_message(msg), self.format_content(msg))
            for msg in generate_template_messages(messages)
        ]

        env = get_template_environment()
        template = env.get_template("transcript.html")
        return str(
            template.render(
                title=title,
                source_info=source_info,
                messages=rendered,
                highlight_css=get_highlight_css() if self.highlight else "",
            )
        )


def generate_html(
    messages: list[Message],
    title: Optional[str] = None,
    source_info: str = "",
    highlight: bool = False,
) -> str:
    """Generate HTML from transcript messages using Jinja2 templates."""
    return HtmlRenderer(highlight=highlight).generate(messages, title, source_info)
