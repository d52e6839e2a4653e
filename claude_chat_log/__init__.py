"""Convert plain-text Claude conversation transcripts to HTML or Markdown."""

from .exceptions import ChatLogError, OutputWriteError, TranscriptParseError
from .models import Message, MessageRole, Transcript
from .parser import TranscriptParser, parse_transcript

__all__ = [
    "ChatLogError",
    "Message",
    "MessageRole",
    "OutputWriteError",
    "Transcript",
    "TranscriptParseError",
    "TranscriptParser",
    "parse_transcript",
]
