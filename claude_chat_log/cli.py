#!/usr/bin/env python3
"""CLI interface for claude-chat-log."""

import logging
import sys
from pathlib import Path
from typing import Optional

import click

from .converter import convert_transcript_to
from .exceptions import ChatLogError, OutputWriteError, TranscriptParseError
from .parser import DEFAULT_ASSISTANT_LABEL, DEFAULT_HUMAN_LABEL


def prompt_output_dir(input_path: Path) -> Path:
    """Ask once for the output directory; blank means the input's directory."""
    answer = click.prompt(
        "Enter output directory (leave blank for same as input)",
        default="",
        show_default=False,
    )
    answer = answer.strip()
    return Path(answer) if answer else input_path.parent


@click.command()
@click.argument("input_path", type=click.Path(path_type=Path))
@click.option(
    "-o",
    "--output-dir",
    type=click.Path(path_type=Path, file_okay=False),
    help="Directory for the generated file (prompted for when omitted; blank means the input file's directory)",
)
@click.option(
    "-f",
    "--format",
    "output_format",
    type=click.Choice(["html", "md", "markdown"]),
    default="html",
    help="Output format (default: html). Supports html, md, or markdown.",
)
@click.option(
    "--human-label",
    default=DEFAULT_HUMAN_LABEL,
    show_default=True,
    help="Line prefix (before the colon) that starts a human turn",
)
@click.option(
    "--assistant-label",
    default=DEFAULT_ASSISTANT_LABEL,
    show_default=True,
    help="Line prefix (before the colon) that starts an assistant turn",
)
@click.option(
    "--highlight",
    is_flag=True,
    help="Syntax-highlight code blocks with Pygments (HTML only)",
)
@click.option(
    "--open-browser",
    is_flag=True,
    help="Open the generated file in the default browser",
)
@click.option(
    "--debug",
    is_flag=True,
    default=False,
    help="Show debug logging and full traceback on errors.",
)
def main(
    input_path: Path,
    output_dir: Optional[Path],
    output_format: str,
    human_label: str,
    assistant_label: str,
    highlight: bool,
    open_browser: bool,
    debug: bool,
) -> None:
    """Convert a plain-text Claude conversation transcript to HTML or Markdown.

    INPUT_PATH: Path to a text file with "Human:" / "Claude:" turns, or with
    one paragraph per turn.
    """
    logging.basicConfig(
        level=logging.DEBUG if debug else logging.WARNING,
        format="%(levelname)s: %(message)s",
    )

    try:
        if not input_path.is_file():
            raise FileNotFoundError(f"Input file not found: {input_path}")

        click.echo(f"Input file: {input_path}")
        if output_dir is None:
            output_dir = prompt_output_dir(input_path)

        output_path = convert_transcript_to(
            output_format,
            input_path,
            output_dir,
            human_label=human_label,
            assistant_label=assistant_label,
            highlight=highlight,
        )
        click.echo(f"Conversation has been saved to {output_path}")
        click.echo("Conversion complete!")

        if open_browser:
            click.launch(str(output_path))

    except FileNotFoundError as e:
        click.echo(f"Error: {e}", err=True)
        _exit_with_traceback(debug)
    except TranscriptParseError as e:
        click.echo(f"Error: {e}. Please check the transcript format.", err=True)
        _exit_with_traceback(debug)
    except OutputWriteError as e:
        click.echo(f"Error: {e}", err=True)
        _exit_with_traceback(debug)
    except (ChatLogError, OSError, ValueError) as e:
        click.echo(f"Error converting file: {e}", err=True)
        _exit_with_traceback(debug)


def _exit_with_traceback(debug: bool) -> None:
    if debug:
        import traceback

        traceback.print_exc()
    click.echo("Conversion failed. Please check the error messages above.", err=True)
    sys.exit(1)


if __name__ == "__main__":
    main()
