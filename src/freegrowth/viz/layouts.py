from __future__ import annotations

import networkx as nx


def level_layout(G: nx.Graph, align: str = "vertical", scale: float = 1.0):
    """
    Place nodes in bands by their "level" attribute, identity first.

    Nodes without a level attribute go into band 0.
    """
    H = nx.Graph()
    nodes = sorted(G.nodes(data="level", default=0), key=lambda item: item[1])
    for v, level in nodes:
        H.add_node(v, level=level)
    return nx.multipartite_layout(H, subset_key="level", align=align, scale=scale)
