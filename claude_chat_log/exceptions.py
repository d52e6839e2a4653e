"""Exceptions raised while converting transcripts."""


class ChatLogError(Exception):
    """Base class for conversion failures reported by the CLI."""


class TranscriptParseError(ChatLogError):
    """Neither the labelled format nor the paragraph fallback found a message."""

    def __init__(self, message: str = "No parseable messages found in transcript"):
        super().__init__(message)


class OutputWriteError(ChatLogError):
    """The output directory could not be created or the file could not be written."""
