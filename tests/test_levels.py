"""Tests for freegrowth.levels."""
import math

from freegrowth.levels.generator import LevelGenerator, generate_levels
from freegrowth.levels.graph import CayleyGraphRecorder, cayley_graph
from freegrowth.words.word import IDENTITY, X, Y, parse_word

F2 = [X, X.inverse(), Y, Y.inverse()]


class Recorder:
    def __init__(self):
        self.calls = []

    def __call__(self, parent, parent_level, child, child_level, edge, is_new):
        self.calls.append((parent, parent_level, child, child_level, edge, is_new))


def test_free_group_rank2_sizes():
    levels = generate_levels(F2, 3)
    assert levels.level_sizes() == [1, 4, 12, 36]
    assert levels.level_ratios() == [4.0, 3.0, 3.0]


def test_positive_generators_only():
    levels = generate_levels([X, Y], 3)
    assert levels.level_sizes() == [1, 2, 4, 8]
    assert levels.level(2) == (parse_word("x2"), parse_word("xy"), parse_word("yx"), parse_word("y2"))


def test_level_zero_only():
    levels = LevelGenerator(F2)
    assert levels.num_levels == 0
    levels.generate_up_to(0)
    assert levels.levels == ((IDENTITY,),)
    assert levels.level_ratios() == []


def test_negative_last_level_seeds_identity():
    levels = LevelGenerator(F2)
    levels.generate_up_to(-1)
    assert levels.level_sizes() == [1]


def test_generate_up_to_is_incremental():
    levels = LevelGenerator(F2)
    levels.generate_up_to(2)
    assert levels.seen_count == 17
    first = levels.levels
    levels.generate_up_to(1)
    assert levels.level_sizes() == [1, 4, 12]
    levels.generate_up_to(3)
    assert levels.level_sizes() == [1, 4, 12, 36]
    assert levels.levels[:3] == first
    assert levels.seen_count == 53


def test_seen_map_matches_levels():
    levels = generate_levels(F2, 3)
    assert levels.seen_count == sum(levels.level_sizes())
    for i, level in enumerate(levels.levels):
        for w in level:
            assert levels.level_of(w) == i
            assert w in levels
    assert levels.level_of(IDENTITY) == 0
    assert levels.level_of(parse_word("xY")) == 2
    assert levels.level_of(parse_word("x9")) is None


def test_generators_are_copied():
    gens = [X, Y]
    levels = LevelGenerator(gens)
    gens.append(X.inverse())
    assert levels.generators == (X, Y)
    levels.generate_up_to(1)
    assert levels.level_sizes() == [1, 2]


def test_trivial_generator_ratios():
    levels = generate_levels([IDENTITY], 2)
    assert levels.level_sizes() == [1, 0, 0]
    ratios = levels.level_ratios()
    assert ratios[0] == 0.0
    assert math.isnan(ratios[1])


# --- connection hook ---

def test_hook_not_called_for_level_zero():
    rec = Recorder()
    LevelGenerator(F2, connect=rec).generate_up_to(0)
    assert rec.calls == []


def test_hook_order_and_levels():
    Xi = X.inverse()
    rec = Recorder()
    levels = LevelGenerator([X, Xi], connect=rec)
    levels.generate_up_to(1)
    assert rec.calls == [
        (IDENTITY, 0, X, 1, X, True),
        (IDENTITY, 0, Xi, 1, Xi, True),
    ]
    levels.generate_up_to(2)
    assert rec.calls[2:] == [
        (X, 1, parse_word("x2"), 2, X, True),
        (X, 1, IDENTITY, 0, Xi, False),
        (Xi, 1, IDENTITY, 0, X, False),
        (Xi, 1, parse_word("x-2"), 2, Xi, True),
    ]


def test_hook_seen_in_same_pass():
    rec = Recorder()
    LevelGenerator([X, X], connect=rec).generate_up_to(1)
    assert rec.calls == [
        (IDENTITY, 0, X, 1, X, True),
        (IDENTITY, 0, X, 1, X, False),
    ]


def test_hook_call_counts_per_level():
    rec = Recorder()
    gens = F2 + [parse_word("xy")]
    levels = LevelGenerator(gens, connect=rec)
    levels.generate_up_to(3)
    sizes = levels.level_sizes()
    for k in range(3):
        calls = [c for c in rec.calls if c[1] == k]
        assert len(calls) == sizes[k] * len(gens)
        new = [c for c in calls if c[5]]
        assert len(new) == sizes[k + 1]


# --- recorded graph ---

def test_cayley_graph_recorder():
    G = cayley_graph(F2, 2)
    assert G.number_of_nodes() == 17
    assert G.number_of_edges() == 1 * 4 + 4 * 4
    assert G.nodes[IDENTITY]["level"] == 0
    assert G.nodes[parse_word("xy")]["level"] == 2
    assert [d["label"] for d in G[IDENTITY][X].values()] == ["x"]
    assert [d["generator"] for d in G[X][IDENTITY].values()] == [X.inverse()]
    tree = [e for e in G.edges(data="new") if e[2]]
    assert len(tree) == 16


def test_recorder_as_hook():
    rec = CayleyGraphRecorder()
    levels = LevelGenerator([X, Y], connect=rec)
    levels.generate_up_to(2)
    assert set(rec.graph.nodes()) == {w for level in levels.levels for w in level}
    (data,) = rec.graph[X][parse_word("xy")].values()
    assert data["generator"] == Y


def test_cayley_graph_repeated_generator_keeps_every_edge():
    G = cayley_graph([X, X], 1)
    edges = list(G.edges(data="new"))
    assert edges == [(IDENTITY, X, True), (IDENTITY, X, False)]
    assert G.number_of_edges() == 2


def test_cayley_graph_edges_match_hook_calls():
    gens = [X, X, Y, Y.inverse()]
    rec = Recorder()
    LevelGenerator(gens, connect=rec).generate_up_to(2)
    G = cayley_graph(gens, 2)
    assert G.number_of_edges() == len(rec.calls)
    assert sum(1 for _, _, new in G.edges(data="new") if new) == G.number_of_nodes() - 1
