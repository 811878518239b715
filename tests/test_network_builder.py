from pathfinding.graph import validate_graph
from pathfinding.network_builder import (
    build_cycle_network,
    build_random_network,
    build_sample_network,
)


def test_cycle_network():
    graph = build_cycle_network()
    assert graph == {'A': {'B': 1}, 'B': {'C': 1}, 'C': {'D': 1}, 'D': {'A': 1}}


def test_sample_network_is_valid():
    validate_graph(build_sample_network())


def test_random_network_shape():
    G = build_random_network(n_nodes=12, edge_prob=0.5, weight_range=(2, 4), seed=3)
    assert G.is_directed()
    assert G.number_of_nodes() == 12
    assert all(name.startswith("n") for name in G.nodes())
    assert all(2 <= w <= 4 for _, _, w in G.edges(data="weight"))


def test_random_network_seed_is_reproducible():
    first = build_random_network(n_nodes=10, seed=11)
    second = build_random_network(n_nodes=10, seed=11)
    assert sorted(first.edges(data="weight")) == sorted(second.edges(data="weight"))


def test_random_network_without_edges():
    G = build_random_network(n_nodes=5, edge_prob=0.0, seed=1)
    assert G.number_of_edges() == 0
