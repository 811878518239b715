"""
Helpers that build and inspect the adjacency mapping used by the search.

A graph is a plain mapping of node -> {neighbor: weight}. Nodes without
outgoing edges may be missing as keys. The search functions in
pathfinding.dijkstra accept any such mapping and never modify it; the
helpers here are for callers that start from an edge list or a networkx
graph.
"""

import logging
import numbers
from collections.abc import Mapping

import networkx as nx

from pathfinding.exceptions import InvalidGraphError

logger = logging.getLogger(__name__)


def _check_weight(u, v, w):
    # bool is an int subclass but never a meaningful weight
    if isinstance(w, bool) or not isinstance(w, numbers.Real):
        raise InvalidGraphError(f"edge {u!r} -> {v!r} has non-numeric weight {w!r}")
    if w != w:
        raise InvalidGraphError(f"edge {u!r} -> {v!r} has NaN weight")
    if w < 0:
        raise InvalidGraphError(f"edge {u!r} -> {v!r} has negative weight {w!r}")


def validate_graph(graph):
    """Raise InvalidGraphError if any edge weight is negative or not a number."""
    for u, adjacent in graph.items():
        if not isinstance(adjacent, Mapping):
            raise InvalidGraphError(
                f"adjacency of {u!r} must be a mapping, got {type(adjacent).__name__}"
            )
        for v, w in adjacent.items():
            _check_weight(u, v, w)


def from_edges(edges):
    """
    Build an adjacency dict from (u, v, weight) triples.

    Nodes that only appear as edge targets get an empty entry. A repeated
    (u, v) pair keeps the last weight.
    """
    graph = {}
    for u, v, w in edges:
        _check_weight(u, v, w)
        graph.setdefault(u, {})[v] = w
        graph.setdefault(v, {})
    return graph


def from_networkx(G, weight="weight", default=1):
    """
    Convert a networkx graph into an adjacency dict.

    Undirected graphs yield both edge directions. Edges without the weight
    attribute use `default`.
    """
    if G.is_multigraph():
        raise InvalidGraphError("multigraphs are not supported")

    graph = {node: {} for node in G.nodes()}
    # G.adj covers both directions for undirected graphs
    for u, adjacent in G.adj.items():
        for v, data in adjacent.items():
            w = data.get(weight, default)
            _check_weight(u, v, w)
            graph[u][v] = w

    logger.debug(
        f"Converted networkx graph: {G.number_of_nodes()} nodes, "
        f"{G.number_of_edges()} edges"
    )
    return graph


def to_networkx(graph):
    """Build a networkx DiGraph with weights stored in the 'weight' attribute."""
    G = nx.DiGraph()
    for u, adjacent in graph.items():
        G.add_node(u)
        for v, w in adjacent.items():
            G.add_edge(u, v, weight=w)
    return G


def nodes(graph):
    """All nodes appearing in the graph, as a key or as a neighbor."""
    found = set(graph)
    for adjacent in graph.values():
        found.update(adjacent)
    return found


def path_weight(graph, path):
    """
    Total weight of the edges along `path`.

    Raises:
        InvalidGraphError: if two consecutive nodes are not joined by an edge
    """
    total = 0
    for u, v in zip(path[:-1], path[1:]):
        adjacent = graph.get(u, {})
        if v not in adjacent:
            raise InvalidGraphError(f"no edge {u!r} -> {v!r} in graph")
        total += adjacent[v]
    return total
