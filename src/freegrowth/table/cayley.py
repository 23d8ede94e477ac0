from __future__ import annotations

import logging
import threading
from typing import List, Sequence, Tuple

from freegrowth.words.formats import OutputFormat
from freegrowth.words.word import Word

logger = logging.getLogger(__name__)


class CayleyTable:
    """
    Dense table of products: entry(i, j) = row_headers[i] * column_headers[j].

    The table is built once at construction, under a lock, and is read-only
    afterwards.
    """

    def __init__(self, row_headers: Sequence[Word], column_headers: Sequence[Word]) -> None:
        self._row_headers: Tuple[Word, ...] = tuple(row_headers)
        self._column_headers: Tuple[Word, ...] = tuple(column_headers)
        self._lock = threading.Lock()
        self._table: List[List[Word]] = []
        self._build()

    @classmethod
    def table(cls, row_headers: Sequence[Word], column_headers: Sequence[Word]) -> "CayleyTable":
        return cls(row_headers, column_headers)

    @classmethod
    def symmetric(cls, words: Sequence[Word]) -> "CayleyTable":
        """Table whose row headers are the same as its column headers."""
        return cls(words, words)

    def _build(self) -> None:
        with self._lock:
            self._table = [
                [r.multiply(c) for c in self._column_headers] for r in self._row_headers
            ]
        logger.debug("built %dx%d Cayley table", self.height, self.width)

    @property
    def row_headers(self) -> Tuple[Word, ...]:
        return self._row_headers

    @property
    def column_headers(self) -> Tuple[Word, ...]:
        return self._column_headers

    @property
    def height(self) -> int:
        return len(self._row_headers)

    @property
    def width(self) -> int:
        return len(self._column_headers)

    def entry(self, i: int, j: int) -> Word:
        return self._table[i][j]

    def to_html(self) -> str:
        html = OutputFormat.HTML
        lines = ["<table>"]
        header = "".join(
            f'<th scope="col">{w.render(html)}</th>' for w in self._column_headers
        )
        lines.append(f"<tr><th></th>{header}</tr>")
        for r, row in zip(self._row_headers, self._table):
            cells = "".join(f"<td>{w.render(html)}</td>" for w in row)
            lines.append(f'<tr><th scope="row">{r.render(html)}</th>{cells}</tr>')
        return "\n".join(lines) + "\n</table>"
