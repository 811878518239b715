import random

import networkx as nx

from pathfinding import config


def build_cycle_network():
    """
    Four nodes in a directed cycle, every edge weighing 1:

        A -> B
        ^    |
        |    v
        D <- C
    """
    return {
        'A': {'B': 1},
        'B': {'C': 1},
        'C': {'D': 1},
        'D': {'A': 1},
    }


def build_sample_network():
    """Small weighted network with several competing routes from A to F."""
    return {
        'A': {'B': 2, 'C': 5},
        'B': {'C': 1, 'D': 4},
        'C': {'D': 2, 'E': 3},
        'D': {'F': 1},
        'E': {'F': 5},
        'F': {}
    }


def build_random_network(n_nodes=config.RANDOM_N_NODES,
                         edge_prob=config.RANDOM_EDGE_PROB,
                         weight_range=config.RANDOM_WEIGHT_RANGE,
                         seed=None):
    """
    Random directed network (Erdos-Renyi) with integer edge weights.

    - Nodes are named n0, n1, ...
    - Weights are drawn uniformly from weight_range, bounds inclusive.
    - The graph is not forced to be connected, so some pairs have no path.
    """
    rng = random.Random(seed)

    G_temp = nx.erdos_renyi_graph(n=n_nodes, p=edge_prob, seed=seed, directed=True)
    mapping = {n: f"n{n}" for n in G_temp.nodes()}

    G = nx.DiGraph()
    G.add_nodes_from(mapping.values())
    for u, v in G_temp.edges():
        G.add_edge(mapping[u], mapping[v], weight=rng.randint(*weight_range))

    return G
