"""Markdown renderer implementation for conversation transcripts."""

import re
from typing import Optional

from ..models import Message
from ..renderer import Renderer, TemplateMessage, generate_template_messages

DEFAULT_TITLE = "Conversation Log"


class MarkdownRenderer(Renderer):
    """Markdown renderer for conversation transcripts.

    Message content is copied verbatim: transcripts are usually Markdown
    already, and code fences survive unchanged.
    """

    # -------------------------------------------------------------------------
    # Private Utility Methods
    # -------------------------------------------------------------------------

    def _quote(self, text: str) -> str:
        """Prefix each line with '> ' to create a blockquote.

        Also escapes <summary> tags that would interfere with <details> rendering.
        """
        text = re.sub(r"^(</?summary>)$", r"\\\1", text, flags=re.MULTILINE)
        return "\n".join(f"> {line}" for line in text.split("\n"))

    def _escape_brackets(self, text: str) -> str:
        """Escape square brackets so labels are not read as link references."""
        return text.replace("[", "\\[").replace("]", "\\]")

    # -------------------------------------------------------------------------
    # Formatting
    # -------------------------------------------------------------------------

    def format_message(self, message: TemplateMessage) -> str:
        parts = [f"## {message.display_label}", message.content]
        for point in message.continuation_points:
            label = self._escape_brackets(point.label)
            parts.append(self._quote(f"**Continuation Point:** \\[{label}\\]"))
        return "\n\n".join(part for part in parts if part)

    def generate(
        self,
        messages: list[Message],
        title: Optional[str] = None,
        source_info: str = "",
    ) -> str:
        """Generate a Markdown document from messages."""
        header = f"# {title or DEFAULT_TITLE}"
        if source_info:
            header += f"\n\n_{source_info}_"
        sections = [header]
        sections.extend(
            self.format_message(msg) for msg in generate_template_messages(messages)
        )
        return "\n\n---\n\n".join(sections) + "\n"
