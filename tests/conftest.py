"""
Pytest configuration and shared fixtures.
"""

import pytest

from pathfinding.network_builder import build_cycle_network, build_sample_network


@pytest.fixture
def cycle_graph():
    """A -> B -> C -> D -> A, unit weights."""
    return build_cycle_network()


@pytest.fixture
def sample_graph():
    """Six-node weighted network, shortest A -> F costs 6."""
    return build_sample_network()


@pytest.fixture
def detour_graph():
    """Direct edge A -> B is more expensive than the detour through C."""
    return {
        'A': {'B': 5, 'C': 1},
        'C': {'B': 1},
    }


@pytest.fixture
def isolated_graph(sample_graph):
    """Sample network plus a node with no incoming or outgoing edges."""
    graph = dict(sample_graph)
    graph['I'] = {}
    return graph


@pytest.fixture(params=["heap", "scan"])
def strategy(request):
    """Run a test once per next-node selection policy."""
    return request.param
