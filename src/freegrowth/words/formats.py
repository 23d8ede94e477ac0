from __future__ import annotations

from enum import Enum

from freegrowth.errors import UnsupportedFormatError


class OutputFormat(Enum):
    TEXT = "text"
    LATEX = "latex"
    HTML = "html"


_FORMAT_NAMES = {
    "txt": OutputFormat.TEXT,
    "text": OutputFormat.TEXT,
    "plain-text": OutputFormat.TEXT,
    "tex": OutputFormat.LATEX,
    "latex": OutputFormat.LATEX,
    "html": OutputFormat.HTML,
}


def get_format(name: str) -> OutputFormat:
    """Look up an output format by case-insensitive name (e.g. "txt", "LaTeX", "html")."""
    if name is None:
        raise TypeError("Cannot look up None as output format")
    try:
        return _FORMAT_NAMES[name.lower()]
    except KeyError:
        raise UnsupportedFormatError(f"invalid output format: {name}") from None
