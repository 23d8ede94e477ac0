from __future__ import annotations

import networkx as nx
import matplotlib.pyplot as plt

from freegrowth.words.formats import OutputFormat
from .layouts import level_layout


def draw_cayley_graph(
    G: nx.MultiDiGraph,
    *,
    node_size: int = 300,
    edge_width: float = 1.0,
    max_nodes_to_draw: int = 400,
    tree_edges_only: bool = False,
    save_path: str | None = None,
):
    """
    Draw a recorded Cayley graph with one band per level.

    Nodes are labelled with their LaTeX rendering.  With tree_edges_only,
    only the edges that discovered a new element are drawn (a BFS tree).
    If save_path is set, saves a PNG there instead of showing the figure.

    Returns the matplotlib Figure.
    """
    fig, ax = plt.subplots(figsize=(10, 6))
    ax.set_axis_off()
    ax.set_title(f"Cayley graph   |V|={G.number_of_nodes()}  |E|={G.number_of_edges()}")

    if G.number_of_nodes() <= max_nodes_to_draw:
        pos = level_layout(G)
        if tree_edges_only:
            edges = [(u, v) for u, v, new in G.edges(data="new") if new]
        else:
            edges = list(G.edges())
        nx.draw_networkx_nodes(G, pos=pos, ax=ax, node_size=node_size)
        nx.draw_networkx_edges(G, pos=pos, ax=ax, edgelist=edges, width=edge_width)
        labels = {w: w.render(OutputFormat.LATEX) for w in G.nodes()}
        nx.draw_networkx_labels(G, pos=pos, ax=ax, labels=labels, font_size=8)
    else:
        ax.text(
            0.5,
            0.5,
            f"Too large to draw\n(|V|={G.number_of_nodes()})",
            ha="center",
            va="center",
            transform=ax.transAxes,
        )

    plt.tight_layout()

    if save_path:
        fig.savefig(save_path, dpi=200)
        plt.close(fig)
    else:
        plt.show()
    return fig
