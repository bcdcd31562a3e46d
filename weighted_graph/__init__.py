from .graph import WeightedGraph
from .algorithms import dijkstra, shortest_path, UNREACHABLE

__all__ = [
    "WeightedGraph", "dijkstra", "shortest_path", "UNREACHABLE",
]
