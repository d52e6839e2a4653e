#!/usr/bin/env python3
"""Syntax highlighting for fenced code blocks.

Highlighting is optional (``--highlight``). Without it, code bodies are
embedded verbatim; with it, Pygments tokenizes the body using the lexer
named by the fence's language tag.
"""

import functools

from pygments import highlight  # type: ignore[reportUnknownVariableType]
from pygments.formatters import HtmlFormatter  # type: ignore[reportUnknownVariableType]
from pygments.lexers import TextLexer, get_lexer_by_name  # type: ignore[reportUnknownVariableType]
from pygments.util import ClassNotFound  # type: ignore[reportUnknownVariableType]

LIGHT_STYLE = "default"
DARK_STYLE = "monokai"
DARK_THEME_SELECTOR = '[data-theme="dark"] .highlight'


def highlight_code_block(code: str, language: str) -> str:
    """Highlight code using the Pygments lexer for the fence language.

    Unknown or missing languages fall back to TextLexer, which escapes the
    code without adding token markup.

    Args:
        code: The source code to highlight
        language: Language tag from the fence (e.g. "python"), may be empty

    Returns:
        HTML string with syntax-highlighted code
    """
    try:
        # stripall=False keeps leading indentation intact
        lexer = get_lexer_by_name(language, stripall=False) if language else TextLexer()  # type: ignore[reportUnknownVariableType]
    except ClassNotFound:
        lexer = TextLexer()  # type: ignore[reportUnknownVariableType]

    formatter = HtmlFormatter(  # type: ignore[reportUnknownVariableType]
        linenos=False,
        cssclass="highlight",
        wrapcode=True,
    )
    return str(highlight(code, lexer, formatter))  # type: ignore[reportUnknownArgumentType]


@functools.lru_cache(maxsize=1)
def get_highlight_css() -> str:
    """Return token CSS for both themes.

    Light rules apply to ``.highlight``; dark rules are scoped under the
    dark theme attribute so the page toggle switches both.
    """
    light = HtmlFormatter(style=LIGHT_STYLE).get_style_defs(".highlight")  # type: ignore[reportUnknownMemberType]
    dark = HtmlFormatter(style=DARK_STYLE).get_style_defs(DARK_THEME_SELECTOR)  # type: ignore[reportUnknownMemberType]
    return f"{light}\n{dark}"
