#!/usr/bin/env python3
"""Format-neutral preparation of parsed messages for rendering.

This module extracts the structure every output format needs:
- code blocks (``` fences), split out of the surrounding text
- continuation points (CONTINUATION_POINT: [label] markers)

Format-specific renderers (html/, markdown/) subclass Renderer and turn
the resulting TemplateMessage list into their output.
"""

import re
from dataclasses import dataclass, field
from typing import Optional

from .models import (
    CodeBlock,
    ContentSegment,
    ContinuationPoint,
    Message,
    MessageRole,
    TextSegment,
)

CODE_FENCE_PATTERN = re.compile(r"```(?P<language>\w*)\n(?P<body>.*?)```", re.DOTALL)
CONTINUATION_PATTERN = re.compile(r"CONTINUATION_POINT:\s*\[(?P<label>[^\]]+)\]")


def extract_continuation_points(content: str) -> list[ContinuationPoint]:
    """Collect every continuation marker in content, left to right.

    The markers are not removed from the content: they stay visible inline
    and are additionally shown as separate blocks after the message.
    """
    return [
        ContinuationPoint(label=match.group("label"))
        for match in CONTINUATION_PATTERN.finditer(content)
    ]


def split_code_blocks(content: str) -> list[ContentSegment]:
    """Split content into text segments and fenced code blocks, in order.

    Every character outside a matched fence ends up in exactly one
    TextSegment; empty text between adjacent fences is dropped. An
    unterminated fence is left as plain text.
    """
    segments: list[ContentSegment] = []
    cursor = 0
    for match in CODE_FENCE_PATTERN.finditer(content):
        if match.start() > cursor:
            segments.append(TextSegment(content[cursor : match.start()]))
        segments.append(
            CodeBlock(language=match.group("language"), body=match.group("body"))
        )
        cursor = match.end()
    if cursor < len(content):
        segments.append(TextSegment(content[cursor:]))
    return segments


@dataclass
class TemplateMessage:
    """Structured message data for template rendering."""

    index: int
    role: MessageRole
    display_label: str
    content: str
    segments: list[ContentSegment] = field(default_factory=list)
    continuation_points: list[ContinuationPoint] = field(default_factory=list)

    @property
    def code_blocks(self) -> list[CodeBlock]:
        return [s for s in self.segments if isinstance(s, CodeBlock)]


def generate_template_messages(messages: list[Message]) -> list[TemplateMessage]:
    """Prepare messages for rendering, preserving conversation order.

    Each message is processed independently; no state carries over from
    one message to the next.
    """
    return [
        TemplateMessage(
            index=index,
            role=message.role,
            display_label=message.display_label,
            content=message.content,
            segments=split_code_blocks(message.content),
            continuation_points=extract_continuation_points(message.content),
        )
        for index, message in enumerate(messages, start=1)
    ]


class Renderer:
    """Base class for transcript renderers.

    Subclasses implement format-specific rendering (HTML, Markdown).
    """

    def generate(
        self,
        messages: list[Message],
        title: Optional[str] = None,
        source_info: str = "",
    ) -> Optional[str]:
        """Generate a complete document from messages.

        Returns None by default; subclasses override to return formatted output.
        """
        return None


def get_renderer(format: str, highlight: bool = False) -> Renderer:
    """Get a renderer instance for the specified format.

    Args:
        format: The output format ("html", "md" or "markdown").
        highlight: Apply Pygments syntax highlighting to HTML code blocks.

    Returns:
        A Renderer instance for the specified format.

    Raises:
        ValueError: If the format is not supported.
    """
    if format == "html":
        from .html.renderer import HtmlRenderer

        return HtmlRenderer(highlight=highlight)
    if format in ("md", "markdown"):
        from .markdown.renderer import MarkdownRenderer

        return MarkdownRenderer()
    raise ValueError(f"Unsupported format: {format}")
