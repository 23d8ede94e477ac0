"""
freegrowth: reduced-word algebra, spherical growth and Cayley graphs/tables
of finitely generated free groups.
"""

from .words import OutputFormat, get_format, Word, parse_word, IDENTITY, X, Y
from .levels import ConnectHook, LevelGenerator, generate_levels, CayleyGraphRecorder, cayley_graph
from .table import CayleyTable
from .calculate import add_inverses, parse_words, level_sizes, ratios, cayley_table
from .io.html import write_html_table
from .errors import MalformedWordError, UnsupportedFormatError

__all__ = [
    # Words
    "OutputFormat",
    "get_format",
    "Word",
    "parse_word",
    "IDENTITY",
    "X",
    "Y",
    # Levels
    "ConnectHook",
    "LevelGenerator",
    "generate_levels",
    "CayleyGraphRecorder",
    "cayley_graph",
    # Tables
    "CayleyTable",
    # Client API
    "add_inverses",
    "parse_words",
    "level_sizes",
    "ratios",
    "cayley_table",
    "write_html_table",
    # Errors
    "MalformedWordError",
    "UnsupportedFormatError",
]
