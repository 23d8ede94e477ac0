from __future__ import annotations

from typing import Iterable

import networkx as nx

from freegrowth.levels.generator import LevelGenerator
from freegrowth.words.word import IDENTITY, Word


class CayleyGraphRecorder:
    """
    Connection hook that records edges into a networkx MultiDiGraph.

    Nodes are Words with a "level" attribute.  Each (parent, generator)
    product becomes its own edge parent -> child (networkx assigns the key),
    with attributes "generator" (the Word), "label" (its text) and "new".
    """

    def __init__(self) -> None:
        self.graph = nx.MultiDiGraph()
        self.graph.add_node(IDENTITY, level=0)

    def __call__(
        self,
        parent: Word,
        parent_level: int,
        child: Word,
        child_level: int,
        edge: Word,
        is_new: bool,
    ) -> None:
        if is_new:
            self.graph.add_node(child, level=child_level)
        self.graph.add_edge(parent, child, generator=edge, label=str(edge), new=is_new)


def cayley_graph(generators: Iterable[Word], num_levels: int) -> nx.MultiDiGraph:
    """
    Cayley graph ball of radius num_levels.

    Edges leaving the last level are not included since that level has not
    been expanded.
    """
    recorder = CayleyGraphRecorder()
    LevelGenerator(generators, connect=recorder).generate_up_to(num_levels)
    return recorder.graph
