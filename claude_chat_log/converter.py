#!/usr/bin/env python3
"""Convert plain-text conversation transcripts to HTML or Markdown files."""

import logging
import time
from datetime import datetime
from pathlib import Path
from typing import Optional

from .exceptions import OutputWriteError
from .models import Message
from .parser import DEFAULT_ASSISTANT_LABEL, DEFAULT_HUMAN_LABEL, parse_transcript
from .renderer import get_renderer
from .renderer_timings import log_timing

logger = logging.getLogger(__name__)


def get_file_extension(format: str) -> str:
    """Get the file extension for a format.

    Normalizes 'markdown' to 'md' for consistent file extensions.
    """
    return "md" if format in ("md", "markdown") else format


def title_for_transcript(input_path: Path) -> str:
    """Build the document title from the input's base name (extension stripped)."""
    return f"Conversation Log - {input_path.stem}"


def format_source_info(input_path: Path, generated_at: Optional[datetime] = None) -> str:
    """Describe where and when the document was generated."""
    generated_at = generated_at or datetime.now()
    return f"Generated from: {input_path} on {generated_at.strftime('%Y-%m-%d %H:%M:%S')}"


def load_transcript(
    input_path: Path,
    human_label: str = DEFAULT_HUMAN_LABEL,
    assistant_label: str = DEFAULT_ASSISTANT_LABEL,
) -> list[Message]:
    """Read a UTF-8 transcript file and parse it into messages.

    Raises:
        FileNotFoundError: If the input file does not exist.
        TranscriptParseError: If no messages could be parsed.
    """
    if not input_path.is_file():
        raise FileNotFoundError(f"Input file not found: {input_path}")
    text = input_path.read_text(encoding="utf-8")
    return parse_transcript(text, human_label, assistant_label)


def write_output(content: str, output_dir: Path, filename: str) -> Path:
    """Write content to output_dir/filename, creating the directory if needed.

    Raises:
        OutputWriteError: If the directory cannot be created or the file
            cannot be written.
    """
    if not output_dir.exists():
        logger.info("Output directory %s doesn't exist, creating it", output_dir)
        try:
            output_dir.mkdir(parents=True, exist_ok=True)
        except OSError as e:
            raise OutputWriteError(
                f"Could not create output directory {output_dir}: {e}"
            ) from e

    output_path = output_dir / filename
    try:
        output_path.write_text(content, encoding="utf-8")
    except OSError as e:
        raise OutputWriteError(f"Error writing to {output_path}: {e}") from e
    return output_path


def convert_transcript_to(
    format: str,
    input_path: Path,
    output_dir: Optional[Path] = None,
    human_label: str = DEFAULT_HUMAN_LABEL,
    assistant_label: str = DEFAULT_ASSISTANT_LABEL,
    highlight: bool = False,
) -> Path:
    """Convert a transcript file to the specified format.

    Args:
        format: Output format ("html", "md", or "markdown").
        input_path: Path to the plain-text transcript.
        output_dir: Directory for the output file. Defaults to the input
            file's directory.
        human_label: Speaker label introducing human turns.
        assistant_label: Speaker label introducing assistant turns.
        highlight: Syntax-highlight code blocks (HTML only).

    Returns:
        Path of the written file, named after the input with the format's
        extension.
    """
    renderer = get_renderer(format, highlight=highlight)
    t_start = time.time()

    messages: list[Message] = []
    with log_timing(lambda: f"Load and parse ({len(messages)} messages)", t_start):
        messages = load_transcript(input_path, human_label, assistant_label)

    with log_timing("Render", t_start):
        content = renderer.generate(
            messages,
            title_for_transcript(input_path),
            format_source_info(input_path),
        )
    if content is None:
        raise ValueError(f"Renderer for {format} produced no output")

    if output_dir is None:
        output_dir = input_path.parent
    filename = f"{input_path.stem}.{get_file_extension(format)}"
    with log_timing("Write", t_start):
        return write_output(content, output_dir, filename)


def convert_transcript_to_html(
    input_path: Path,
    output_dir: Optional[Path] = None,
    human_label: str = DEFAULT_HUMAN_LABEL,
    assistant_label: str = DEFAULT_ASSISTANT_LABEL,
    highlight: bool = False,
) -> Path:
    """Convert a transcript to HTML.

    Convenience wrapper around convert_transcript_to() for HTML format.
    """
    return convert_transcript_to(
        "html", input_path, output_dir, human_label, assistant_label, highlight
    )
