"""Reduced words in a free group.

A word is stored as a tuple of factors (letter, exponent) with lowercase
letters only.  The reduced form has no two adjacent factors sharing a letter
and no zero exponents; the empty tuple is the identity.
"""
from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Iterable, Iterator, List, Sequence, Tuple

from freegrowth.errors import MalformedWordError
from freegrowth.words.formats import OutputFormat

Factor = Tuple[str, int]

_FACTOR_RE = re.compile(r"([a-zA-Z])([-+]?)([0-9]*)")
_EXPONENT_RE = re.compile(r"[-+]?[0-9]+")


def _reduce_append(stack: List[Factor], letter: str, exponent: int) -> None:
    """Push one factor onto an already reduced stack, collapsing at the boundary."""
    if exponent == 0:
        return
    # uppercase denotes the inverse generator
    if letter.isupper():
        letter = letter.lower()
        exponent = -exponent

    if stack and stack[-1][0] == letter:
        total = stack.pop()[1] + exponent
        if total != 0:
            stack.append((letter, total))
    else:
        stack.append((letter, exponent))


@dataclass(frozen=True, repr=False)
class Word:
    """
    Immutable reduced word.  Build with parse_word, from_factors or algebra.

    The constructor only accepts factors already in reduced form (lowercase
    letters, nonzero exponents, no repeated adjacent letters); use
    from_factors to reduce raw input.
    """

    factors: Tuple[Factor, ...] = ()

    def __post_init__(self) -> None:
        factors = tuple(self.factors)
        prev = None
        for factor in factors:
            if not (isinstance(factor, tuple) and len(factor) == 2):
                raise ValueError(f"factor must be a (letter, exponent) pair: {factor!r}")
            letter, exponent = factor
            if not (isinstance(letter, str) and len(letter) == 1 and "a" <= letter <= "z"):
                raise ValueError(f"letter must be a single lowercase letter: {letter!r}")
            if isinstance(exponent, bool) or not isinstance(exponent, int) or exponent == 0:
                raise ValueError(f"exponent must be a nonzero integer: {exponent!r}")
            if letter == prev:
                raise ValueError(f"adjacent factors share the letter {letter!r}; use Word.from_factors")
            prev = letter
        object.__setattr__(self, "factors", factors)

    @classmethod
    def from_factors(cls, factors: Iterable[Factor]) -> "Word":
        """Reduce an arbitrary sequence of (letter, exponent) pairs."""
        stack: List[Factor] = []
        for letter, exponent in factors:
            _reduce_append(stack, letter, exponent)
        return cls(tuple(stack))

    def multiply(self, other: "Word") -> "Word":
        stack = list(self.factors)
        for letter, exponent in other.factors:
            _reduce_append(stack, letter, exponent)
        return Word(tuple(stack))

    def inverse(self) -> "Word":
        return Word(tuple((letter, -exponent) for letter, exponent in reversed(self.factors)))

    def __mul__(self, other: "Word") -> "Word":
        if not isinstance(other, Word):
            return NotImplemented
        return self.multiply(other)

    def __invert__(self) -> "Word":
        return self.inverse()

    def __len__(self) -> int:
        return len(self.factors)

    def __iter__(self) -> Iterator[Factor]:
        return iter(self.factors)

    @property
    def length(self) -> int:
        """Word length in letters, i.e. the sum of |exponent|."""
        return sum(abs(e) for _, e in self.factors)

    def is_identity(self) -> bool:
        return not self.factors

    def equals_factors(self, letters: Sequence[str], exponents: Sequence[int]) -> bool:
        """Compare against a reduced word given as parallel letter/exponent sequences."""
        return (
            tuple(letter for letter, _ in self.factors) == tuple(letters)
            and tuple(e for _, e in self.factors) == tuple(exponents)
        )

    def render(self, fmt: OutputFormat = OutputFormat.TEXT) -> str:
        """
        Render as text, LaTeX or HTML.

        Text writes each letter followed by its exponent unless it is 1;
        the identity is "1".  LaTeX and HTML wrap exponents as superscripts.
        """
        if fmt is OutputFormat.TEXT:
            return self._text()
        if fmt is OutputFormat.LATEX:
            return "$" + self._with_exponents(r"^{\g<0>}") + "$"
        if fmt is OutputFormat.HTML:
            return self._with_exponents(r"<sup>\g<0></sup>")
        raise NotImplementedError(f"unsupported format: {fmt!r}")

    def _text(self) -> str:
        parts = []
        for letter, exponent in self.factors:
            parts.append(letter if exponent == 1 else f"{letter}{exponent}")
        return "".join(parts) or "1"

    def _with_exponents(self, template: str) -> str:
        text = self._text()
        if text == "1":
            return text
        return _EXPONENT_RE.sub(template, text)

    def __str__(self) -> str:
        return self._text()

    def __repr__(self) -> str:
        return f"Word({self._text()!r})"


def parse_word(text: str) -> Word:
    """
    Parse text such as "xyX", "x2y3y-2" or "" into a reduced Word.

    Each factor is a letter, an optional sign and optional digits; a missing
    magnitude means 1.  Uppercase letters are inverses.  The whole string must
    be covered by factors.
    """
    if text is None:
        raise TypeError("Cannot parse None as word")

    stack: List[Factor] = []
    last_end = 0
    for m in _FACTOR_RE.finditer(text):
        if m.start() != last_end:
            raise MalformedWordError(f"Word malformed at position {last_end}: {text!r}")
        last_end = m.end()
        letter, sign, digits = m.groups()
        exponent = int(digits) if digits else 1
        if sign == "-":
            exponent = -exponent
        _reduce_append(stack, letter, exponent)

    if last_end != len(text):
        raise MalformedWordError(f"Word has extra garbage on the end: {text!r}")
    return Word(tuple(stack))


IDENTITY = Word()
X = parse_word("x")
Y = parse_word("y")
