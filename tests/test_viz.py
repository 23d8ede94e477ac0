"""Tests for freegrowth.viz."""
import matplotlib

matplotlib.use("Agg")

from freegrowth.levels.graph import cayley_graph
from freegrowth.viz.draw import draw_cayley_graph
from freegrowth.viz.layouts import level_layout
from freegrowth.words.word import IDENTITY, X, Y

F2 = [X, X.inverse(), Y, Y.inverse()]


def test_level_layout_covers_nodes():
    G = cayley_graph(F2, 2)
    pos = level_layout(G)
    assert set(pos) == set(G.nodes())
    # one column per level, left to right
    assert pos[IDENTITY][0] < pos[X][0] < pos[X * Y][0]


def test_draw_cayley_graph_saves(tmp_path):
    G = cayley_graph(F2, 2)
    path = tmp_path / "cayley.png"
    draw_cayley_graph(G, tree_edges_only=True, save_path=str(path))
    assert path.exists()


def test_draw_too_large(tmp_path):
    G = cayley_graph(F2, 2)
    path = tmp_path / "big.png"
    draw_cayley_graph(G, max_nodes_to_draw=3, save_path=str(path))
    assert path.exists()
