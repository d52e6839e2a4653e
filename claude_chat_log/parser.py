#!/usr/bin/env python3
"""Parse plain-text conversation transcripts into ordered messages.

Two strategies are tried in order:

- Labelled turns: each turn starts on a line beginning with a speaker
  label and a colon (``Human:`` / ``Claude:`` by default). The turn runs
  until the next label line or the end of the text.
- Paragraphs: used only when no label line exists. The text is split on
  blank lines and roles alternate, starting with the human.

If neither strategy finds a message, TranscriptParseError is raised.
"""

import logging
import re
from typing import Iterator

from .exceptions import TranscriptParseError
from .models import Message, MessageRole, Transcript

logger = logging.getLogger(__name__)

DEFAULT_HUMAN_LABEL = "Human"
DEFAULT_ASSISTANT_LABEL = "Claude"

PARAGRAPH_SEPARATOR = re.compile(r"\n\n+")


def normalize_line_endings(text: str) -> str:
    """Convert CRLF and lone CR line endings to LF."""
    return text.replace("\r\n", "\n").replace("\r", "\n")


class TranscriptParser:
    """Split transcript text into messages.

    Labels are matched case-sensitively and only at the start of a line.
    """

    def __init__(
        self,
        human_label: str = DEFAULT_HUMAN_LABEL,
        assistant_label: str = DEFAULT_ASSISTANT_LABEL,
    ):
        if not human_label or not assistant_label:
            raise ValueError("Speaker labels must not be empty")
        if human_label == assistant_label:
            raise ValueError("Human and assistant labels must differ")
        self.human_label = human_label
        self.assistant_label = assistant_label
        self._label_pattern = re.compile(
            rf"^(?P<label>{re.escape(human_label)}|{re.escape(assistant_label)}):",
            re.MULTILINE,
        )

    def _role_for_label(self, label: str) -> MessageRole:
        if label == self.human_label:
            return MessageRole.HUMAN
        return MessageRole.ASSISTANT

    def _iter_labelled_segments(self, text: str) -> Iterator[tuple[str, str]]:
        """Yield (label, content) for every label line, left to right.

        The cursor only moves forward: each search starts where the previous
        turn's content begins, so turns never overlap.
        """
        match = self._label_pattern.search(text)
        while match is not None:
            content_start = match.end()
            next_match = self._label_pattern.search(text, content_start)
            content_end = next_match.start() if next_match else len(text)
            yield match.group("label"), text[content_start:content_end].strip()
            match = next_match

    def parse_labelled(self, text: str) -> list[Message]:
        """Parse ``Label: content`` turns. Roles follow the labels verbatim."""
        return [
            Message(role=self._role_for_label(label), content=content, label=label)
            for label, content in self._iter_labelled_segments(
                normalize_line_endings(text)
            )
        ]

    def parse_paragraphs(self, text: str) -> list[Message]:
        """Treat each blank-line separated paragraph as one alternating turn."""
        messages: list[Message] = []
        is_human = True
        for paragraph in PARAGRAPH_SEPARATOR.split(normalize_line_endings(text)):
            content = paragraph.strip()
            if not content:
                continue
            role = MessageRole.HUMAN if is_human else MessageRole.ASSISTANT
            messages.append(Message(role=role, content=content))
            is_human = not is_human
        return messages

    def parse(self, text: str) -> Transcript:
        """Parse text into a Transcript.

        Raises:
            TranscriptParseError: If neither strategy yields a message.
        """
        messages = self.parse_labelled(text)
        if messages:
            logger.debug("Parsed %d labelled messages", len(messages))
            return Transcript(messages=tuple(messages), strategy="labelled")

        logger.info(
            "No '%s:' / '%s:' lines found, falling back to paragraph parsing",
            self.human_label,
            self.assistant_label,
        )
        messages = self.parse_paragraphs(text)
        if messages:
            logger.debug("Parsed %d paragraph messages", len(messages))
            return Transcript(messages=tuple(messages), strategy="paragraphs")

        raise TranscriptParseError()


def parse_transcript(
    text: str,
    human_label: str = DEFAULT_HUMAN_LABEL,
    assistant_label: str = DEFAULT_ASSISTANT_LABEL,
) -> list[Message]:
    """Parse transcript text into an ordered, non-empty list of messages.

    Raises:
        TranscriptParseError: If no messages could be parsed.
    """
    parser = TranscriptParser(human_label, assistant_label)
    return list(parser.parse(text).messages)
