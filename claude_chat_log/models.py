"""Models for parsed conversation transcripts.

Parsed data (Message, Transcript) is validated with Pydantic and frozen
after creation. Render-time structures (TextSegment, CodeBlock,
ContinuationPoint) are plain dataclasses derived from message content.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Literal, Optional, Union

from pydantic import BaseModel, field_validator


HUMAN_DISPLAY_LABEL = "You"
ASSISTANT_DISPLAY_LABEL = "Claude"


class MessageRole(str, Enum):
    """Speaker of a conversation turn.

    Using str as base class keeps plain string comparisons working
    (``message.role == "human"``) and gives the CSS class for free.
    """

    HUMAN = "human"
    ASSISTANT = "assistant"


class Message(BaseModel):
    """A single conversation turn, in conversation order.

    ``content`` is the raw turn text: not escaped and not transformed.
    ``label`` is the speaker label the turn was introduced with
    (e.g. "Claude"), or None when the role was assigned by alternation.
    """

    model_config = {"frozen": True}

    role: MessageRole
    content: str
    label: Optional[str] = None

    @property
    def display_label(self) -> str:
        if self.role == MessageRole.HUMAN:
            return HUMAN_DISPLAY_LABEL
        return ASSISTANT_DISPLAY_LABEL


ParseStrategy = Literal["labelled", "paragraphs"]


class Transcript(BaseModel):
    """Result of a successful parse: a non-empty, ordered message sequence."""

    model_config = {"frozen": True}

    messages: tuple[Message, ...]
    strategy: ParseStrategy

    @field_validator("messages")
    @classmethod
    def _require_messages(cls, value: tuple[Message, ...]) -> tuple[Message, ...]:
        if not value:
            raise ValueError("a transcript needs at least one message")
        return value


# =============================================================================
# Render-time content segments
# =============================================================================


@dataclass(frozen=True)
class TextSegment:
    """Plain text between (or around) code fences."""

    text: str


@dataclass(frozen=True)
class CodeBlock:
    """A triple-backtick fenced region of a message.

    ``language`` is the tag written right after the opening fence, or an
    empty string. ``body`` is the code exactly as written.
    """

    language: str
    body: str

    @property
    def display_language(self) -> str:
        return self.language or "code"


@dataclass(frozen=True)
class ContinuationPoint:
    """An inline ``CONTINUATION_POINT: [label]`` marker."""

    label: str


ContentSegment = Union[TextSegment, CodeBlock]
