"""
Client-facing helpers working on generator strings.

Unlike the core classes, these usually include generator inverses
automatically and return plain lists and strings.
"""
from __future__ import annotations

from typing import Iterable, List

from freegrowth.errors import UnsupportedFormatError
from freegrowth.levels.generator import generate_levels
from freegrowth.table.cayley import CayleyTable
from freegrowth.words.formats import OutputFormat, get_format
from freegrowth.words.word import Word, parse_word


def add_inverses(words: List[Word]) -> List[Word]:
    """
    Append the inverse of each word not already in the list, in place.

    Only the words originally in the list are inverted, so
    [x, y, X] becomes [x, y, X, Y].
    """
    for w in list(words):
        inv = w.inverse()
        if inv not in words:
            words.append(inv)
    return words


def parse_words(texts: Iterable[str], include_inverses: bool = False) -> List[Word]:
    """Parse each string as a Word, optionally adding missing inverses."""
    words = [parse_word(t) for t in texts]
    if include_inverses:
        add_inverses(words)
    return words


def level_sizes(generating_set: Iterable[str], num_levels: int) -> List[int]:
    """Spherical growth values for levels 0..num_levels, inverses included."""
    return generate_levels(parse_words(generating_set, True), num_levels).level_sizes()


def ratios(generating_set: Iterable[str], num_levels: int) -> List[float]:
    """
    Successive ratios of spherical growth values, inverses included.

    ratios(["x", "y"], 3) == [4.0, 3.0, 3.0] since F2 has spheres 1, 4, 12, 36.
    """
    return generate_levels(parse_words(generating_set, True), num_levels).level_ratios()


def cayley_table(
    generating_set: Iterable[str],
    fmt: str = "html",
    include_inverses: bool = True,
) -> str:
    """Cayley table of the generating set.  Only "html" output is available."""
    if get_format(fmt) is not OutputFormat.HTML:
        raise UnsupportedFormatError("only HTML tables are available at the moment")
    return CayleyTable.symmetric(parse_words(generating_set, include_inverses)).to_html()
