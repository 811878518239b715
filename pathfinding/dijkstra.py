import heapq
import itertools
import logging
import math

from pathfinding import config
from pathfinding.exceptions import InconsistentOriginError

logger = logging.getLogger(__name__)


def get_next_node(progression, visited):
    """
    Pick the unvisited node with the smallest tentative distance.

    Linear scan over the distance map. On ties the first node in the map's
    iteration order wins, i.e. the node that was reached first.

    Returns:
        (node, distance), or None when every reached node is visited
    """
    best = None
    for node, distance in progression.items():
        if node in visited:
            continue
        if best is None or distance < best[1]:
            best = (node, distance)
    return best


class Frontier:
    """
    Min heap of (distance, node) entries for the heap selection policy.

    Entries are never removed on update; outdated ones are skipped when
    popped. Ties are broken by push order.
    """

    def __init__(self):
        self._heap = []
        self._counter = itertools.count()

    def __len__(self):
        return len(self._heap)

    def push(self, node, distance):
        heapq.heappush(self._heap, (distance, next(self._counter), node))

    def pop(self, progression, visited):
        """Same contract as get_next_node()."""
        while self._heap:
            distance, _, node = heapq.heappop(self._heap)
            # skip outdated elements
            if node in visited or distance > progression[node]:
                continue
            return node, distance
        return None


def progress(graph, source, destination, strategy=None):
    """
    Run the relaxation loop until the destination is finalized.

    Args:
        graph: mapping node -> {neighbor: weight}, weights non-negative.
            Nodes missing from the mapping have no outgoing edges.
        source: start node
        destination: node to finalize
        strategy: "heap" or "scan", defaults to config.SELECTION_STRATEGY

    Returns:
        (progression, origin) when the destination was reached, where
        progression maps reached nodes to tentative distances and origin maps
        each reached node but the source to its predecessor. None when the
        destination is unreachable.
    """
    strategy = strategy or config.SELECTION_STRATEGY
    if strategy not in config.SELECTION_STRATEGIES:
        raise ValueError(
            f"unknown selection strategy {strategy!r}, "
            f"expected one of {config.SELECTION_STRATEGIES}"
        )

    progression = {source: 0}
    origin = {}
    visited = set()

    frontier = None
    if strategy == "heap":
        frontier = Frontier()
        frontier.push(source, 0)

    while True:
        if frontier is None:
            selected = get_next_node(progression, visited)
        else:
            selected = frontier.pop(progression, visited)

        if selected is None:
            logger.debug(
                f"{destination!r} unreachable from {source!r} "
                f"({len(visited)} nodes visited)"
            )
            return None

        node, current = selected
        if node == destination:
            return progression, origin

        for neighbor, weight in graph.get(node, {}).items():
            candidate = current + weight
            # dv > du + w, strict so equal-cost routes keep their first origin
            if neighbor not in progression or progression[neighbor] > candidate:
                progression[neighbor] = candidate
                origin[neighbor] = node
                if frontier is not None:
                    frontier.push(neighbor, candidate)

        visited.add(node)


def backtrack(origin, source, destination):
    """
    Rebuild the source-to-destination path from the origin map.

    Returns None if the walk hits a node without an origin before reaching
    the source, or runs longer than the map allows (cyclic origins).
    """
    path = []
    location = destination
    for _ in range(len(origin) + 1):
        if location == source:
            path.append(source)
            path.reverse()
            return path
        if location not in origin:
            return None
        path.append(location)
        location = origin[location]
    return None


def _search(graph, source, destination, strategy):
    result = progress(graph, source, destination, strategy)
    if result is None:
        return None, math.inf

    progression, origin = result
    path = backtrack(origin, source, destination)
    if path is None:
        raise InconsistentOriginError(source, destination)
    return path, progression[destination]


def shortest_path(graph, source, destination, strategy=None):
    """
    Shortest weighted path from source to destination.

    Returns:
        List of nodes starting with source and ending with destination,
        or None if no path exists.
    """
    logger.debug(f"Searching path {source!r} -> {destination!r}")
    path, _ = _search(graph, source, destination, strategy)
    return path


def shortest_distance(graph, source, destination, strategy=None):
    """Total weight of the shortest path, or None if no path exists."""
    result = progress(graph, source, destination, strategy)
    if result is None:
        return None
    return result[0][destination]


def dijkstra(graph, src, dst, strategy=None):
    """
    Shortest path and its cost.

    Returns:
        (path, cost), or (None, math.inf) when dst is unreachable from src
    """
    return _search(graph, src, dst, strategy)
