from .generator import ConnectHook, LevelGenerator, generate_levels
from .graph import CayleyGraphRecorder, cayley_graph

__all__ = [
    "ConnectHook",
    "LevelGenerator",
    "generate_levels",
    "CayleyGraphRecorder",
    "cayley_graph",
]
