from .formats import OutputFormat, get_format
from .word import Factor, Word, parse_word, IDENTITY, X, Y

__all__ = [
    "OutputFormat",
    "get_format",
    "Factor",
    "Word",
    "parse_word",
    "IDENTITY",
    "X",
    "Y",
]
