from .layouts import level_layout
from .draw import draw_cayley_graph

__all__ = [
    "level_layout",
    "draw_cayley_graph",
]
