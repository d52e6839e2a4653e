#!/usr/bin/env python3
"""Tests for renderer.py - code block and continuation point extraction."""

import pytest

from claude_chat_log.models import (
    CodeBlock,
    ContinuationPoint,
    Message,
    MessageRole,
    TextSegment,
)
from claude_chat_log.renderer import (
    Renderer,
    extract_continuation_points,
    generate_template_messages,
    get_renderer,
    split_code_blocks,
)


class TestSplitCodeBlocks:
    """Tests for splitting message content around ``` fences."""

    def test_no_fences(self):
        assert split_code_blocks("plain\ntext") == [TextSegment("plain\ntext")]

    def test_empty_content(self):
        assert split_code_blocks("") == []

    def test_fence_with_language(self):
        segments = split_code_blocks("before\n```python\nprint(1)\n```\nafter")
        assert segments == [
            TextSegment("before\n"),
            CodeBlock(language="python", body="print(1)\n"),
            TextSegment("\nafter"),
        ]

    def test_fence_without_language(self):
        segments = split_code_blocks("```\nls -la\n```")
        assert segments == [CodeBlock(language="", body="ls -la\n")]
        assert segments[0].display_language == "code"

    def test_multiple_fences_in_order(self):
        content = "a\n```js\nx()\n```\nb\n```sh\necho hi\n```"
        segments = split_code_blocks(content)
        assert [type(s).__name__ for s in segments] == [
            "TextSegment",
            "CodeBlock",
            "TextSegment",
            "CodeBlock",
        ]
        assert [b.language for b in segments if isinstance(b, CodeBlock)] == ["js", "sh"]

    def test_adjacent_fences_have_no_empty_text_between(self):
        segments = split_code_blocks("```a\n1\n``````b\n2\n```")
        assert segments == [CodeBlock("a", "1\n"), CodeBlock("b", "2\n")]

    def test_unterminated_fence_stays_text(self):
        content = "look:\n```python\nprint(1)\n"
        assert split_code_blocks(content) == [TextSegment(content)]

    def test_fence_language_must_be_followed_by_newline(self):
        content = "```python print(1)```"
        assert split_code_blocks(content) == [TextSegment(content)]

    def test_no_content_lost_or_duplicated(self):
        content = "intro ```\ncode here\n``` middle ```py\nmore\n``` end"
        segments = split_code_blocks(content)
        rebuilt = "".join(
            s.text
            if isinstance(s, TextSegment)
            else f"```{s.language}\n{s.body}```"
            for s in segments
        )
        assert rebuilt == content

    def test_body_is_verbatim(self):
        body = "if a < b and c > d:\n    print('&')\n"
        segments = split_code_blocks(f"```python\n{body}```")
        assert segments == [CodeBlock("python", body)]


class TestContinuationPoints:
    """Tests for CONTINUATION_POINT marker extraction."""

    def test_single_marker(self):
        points = extract_continuation_points("text CONTINUATION_POINT: [resume-here] more")
        assert points == [ContinuationPoint("resume-here")]

    def test_multiple_markers_in_order(self):
        content = "CONTINUATION_POINT: [first]\nmiddle\nCONTINUATION_POINT:[second]"
        assert extract_continuation_points(content) == [
            ContinuationPoint("first"),
            ContinuationPoint("second"),
        ]

    def test_whitespace_after_colon(self):
        assert extract_continuation_points("CONTINUATION_POINT:\n  [x y]") == [
            ContinuationPoint("x y")
        ]

    def test_no_markers(self):
        assert extract_continuation_points("nothing to see [here]") == []

    def test_empty_label_not_matched(self):
        assert extract_continuation_points("CONTINUATION_POINT: []") == []

    def test_label_stops_at_first_closing_bracket(self):
        assert extract_continuation_points("CONTINUATION_POINT: [a]b]") == [
            ContinuationPoint("a")
        ]


class TestTemplateMessages:
    """Tests for format-neutral message preparation."""

    def test_order_and_indices(self):
        messages = [
            Message(role=MessageRole.HUMAN, content="q"),
            Message(role=MessageRole.ASSISTANT, content="a"),
            Message(role=MessageRole.ASSISTANT, content="b"),
        ]
        template_messages = generate_template_messages(messages)
        assert [m.index for m in template_messages] == [1, 2, 3]
        assert [m.content for m in template_messages] == ["q", "a", "b"]
        assert [m.display_label for m in template_messages] == ["You", "Claude", "Claude"]

    def test_marker_kept_in_content(self):
        content = "Done. CONTINUATION_POINT: [step-2]"
        [msg] = generate_template_messages(
            [Message(role=MessageRole.ASSISTANT, content=content)]
        )
        assert msg.content == content
        assert msg.segments == [TextSegment(content)]
        assert msg.continuation_points == [ContinuationPoint("step-2")]

    def test_code_blocks_property(self):
        [msg] = generate_template_messages(
            [Message(role=MessageRole.ASSISTANT, content="x\n```py\n1\n```")]
        )
        assert msg.code_blocks == [CodeBlock("py", "1\n")]


class TestGetRenderer:
    """Tests for the renderer factory."""

    def test_html(self):
        from claude_chat_log.html.renderer import HtmlRenderer

        renderer = get_renderer("html", highlight=True)
        assert isinstance(renderer, HtmlRenderer)
        assert renderer.highlight is True

    @pytest.mark.parametrize("format", ["md", "markdown"])
    def test_markdown(self, format: str):
        from claude_chat_log.markdown.renderer import MarkdownRenderer

        assert isinstance(get_renderer(format), MarkdownRenderer)

    def test_unsupported(self):
        with pytest.raises(ValueError, match="Unsupported format"):
            get_renderer("pdf")

    def test_base_renderer_returns_none(self):
        assert Renderer().generate([Message(role=MessageRole.HUMAN, content="x")]) is None
