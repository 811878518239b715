"""
Shortest weighted paths in directed graphs with Dijkstra's algorithm.

Graphs are plain mappings of node -> {neighbor: weight} with non-negative
weights:

    from pathfinding import shortest_path

    graph = {'A': {'B': 5, 'C': 1}, 'C': {'B': 1}}
    shortest_path(graph, 'A', 'B')   # ['A', 'C', 'B']
    shortest_path(graph, 'B', 'A')   # None
"""

from pathfinding.dijkstra import (
    backtrack,
    get_next_node,
    progress,
    shortest_distance,
    shortest_path,
)
from pathfinding.exceptions import (
    InconsistentOriginError,
    InvalidGraphError,
    PathfindingError,
)

__version__ = "0.1.0"

__all__ = [
    "backtrack",
    "get_next_node",
    "progress",
    "shortest_distance",
    "shortest_path",
    "InconsistentOriginError",
    "InvalidGraphError",
    "PathfindingError",
]
