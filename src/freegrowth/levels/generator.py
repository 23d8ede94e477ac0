"""Breadth-first level generation in the Cayley graph of a free group.

Level 0 is [identity].  Level k+1 holds the products w*g (w in level k, g a
generator) not seen at any earlier level, in discovery order.  Inverses are
NOT added to the generating list; that is the caller's job.
"""
from __future__ import annotations

import logging
from typing import Callable, Dict, Iterable, List, Optional, Tuple

from freegrowth.words.word import IDENTITY, Word

logger = logging.getLogger(__name__)

# connect(parent, parent_level, child, child_level, edge, is_new)
ConnectHook = Callable[[Word, int, Word, int, Word, bool], None]


def _no_connect(
    parent: Word, parent_level: int, child: Word, child_level: int, edge: Word, is_new: bool
) -> None:
    pass


class LevelGenerator:
    """
    Incremental spheres of a free group w.r.t. a fixed generating list.

    The generator does not store edges.  Pass *connect* to observe every
    (word, generator) product as it is computed; it is called once per pair,
    with is_new telling whether the product was discovered by this call.
    The only element added without a call is the identity at level 0.

    Not safe for concurrent generate_up_to calls; serialize externally.
    """

    def __init__(self, generators: Iterable[Word], connect: Optional[ConnectHook] = None) -> None:
        self._generators: Tuple[Word, ...] = tuple(generators)
        self._connect: ConnectHook = connect if connect is not None else _no_connect
        self._levels: List[List[Word]] = []
        self._seen: Dict[Word, int] = {}

    @property
    def generators(self) -> Tuple[Word, ...]:
        return self._generators

    def generate_up_to(self, last_level: int) -> None:
        """Ensure levels 0..last_level exist, computing only the missing ones."""
        if not self._levels:
            self._levels.append([IDENTITY])
            self._seen[IDENTITY] = 0

        while len(self._levels) < last_level + 1:
            self._generate_next_level()

    def _generate_next_level(self) -> None:
        k = len(self._levels) - 1
        current = self._levels[k]
        nxt: List[Word] = []
        seen = self._seen
        connect = self._connect

        for w in current:
            for g in self._generators:
                child = w.multiply(g)
                child_level = seen.get(child)
                if child_level is None:
                    nxt.append(child)
                    seen[child] = k + 1
                    connect(w, k, child, k + 1, g, True)
                else:
                    connect(w, k, child, child_level, g, False)

        self._levels.append(nxt)
        logger.debug("level %d: %d new words (%d seen)", k + 1, len(nxt), len(seen))

    @property
    def num_levels(self) -> int:
        return len(self._levels)

    @property
    def levels(self) -> Tuple[Tuple[Word, ...], ...]:
        return tuple(tuple(level) for level in self._levels)

    def level(self, i: int) -> Tuple[Word, ...]:
        return tuple(self._levels[i])

    def level_of(self, word: Word) -> Optional[int]:
        """Level at which *word* was first discovered, or None."""
        return self._seen.get(word)

    @property
    def seen_count(self) -> int:
        return len(self._seen)

    def __contains__(self, word: object) -> bool:
        return word in self._seen

    def level_sizes(self) -> List[int]:
        """Sizes of all computed levels, starting from level 0."""
        return [len(level) for level in self._levels]

    def level_ratios(self) -> List[float]:
        """
        Successive ratios |L1|/|L0|, |L2|/|L1|, ...

        A ratio over an empty level is nan.
        """
        sizes = self.level_sizes()
        return [
            sizes[i] / sizes[i - 1] if sizes[i - 1] else float("nan")
            for i in range(1, len(sizes))
        ]


def generate_levels(
    generators: Iterable[Word],
    num_levels: int,
    connect: Optional[ConnectHook] = None,
) -> LevelGenerator:
    """Build a LevelGenerator and generate levels 0..num_levels."""
    gen = LevelGenerator(generators, connect=connect)
    gen.generate_up_to(num_levels)
    return gen
