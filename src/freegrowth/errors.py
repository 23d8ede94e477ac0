"""Exception types raised by freegrowth."""
from __future__ import annotations


class MalformedWordError(ValueError):
    """Word text that is not a contiguous run of factors."""


class UnsupportedFormatError(ValueError):
    """Output format name that is unknown, or not available for a given output."""
