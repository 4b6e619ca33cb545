"""
Pytest configuration and shared fixtures.

This file is automatically loaded by pytest and provides
fixtures available to all test files.
"""

import pytest

from graphstar.graphs.adjacency import AdjacencyGraph
from graphstar.graphs.romania import city


class SpyNode:
    """
    Test node backed by a shared adjacency dict that records every call the
    engine makes: which nodes it expanded (read neighbors of) and which edge
    costs it asked for, in order.
    """

    def __init__(self, name, adj, log, heuristic=None, as_set=False):
        self.name = name
        self._adj = adj
        self._log = log
        self._h = heuristic or {}
        self._as_set = as_set

    def _node(self, name):
        return SpyNode(name, self._adj, self._log, self._h, self._as_set)

    @property
    def connected_nodes(self):
        self._log.append(("expand", self.name))
        nodes = [self._node(n) for n in self._adj.get(self.name, {})]
        return frozenset(nodes) if self._as_set else tuple(nodes)

    def cost(self, to):
        self._log.append(("cost", self.name, to.name))
        return self._adj[self.name][to.name]

    def estimated_cost(self, to):
        return float(self._h.get(self.name, 0.0))

    def __eq__(self, other):
        return isinstance(other, SpyNode) and self.name == other.name

    def __hash__(self):
        return hash(self.name)

    def __lt__(self, other):
        return self.name < other.name

    def __repr__(self):
        return f"SpyNode({self.name!r})"


@pytest.fixture
def spy_graph():
    """Factory: spy_graph(adj, heuristic=None, as_set=False) -> (node factory, call log)."""
    def make(adj, heuristic=None, as_set=False):
        log = []
        return (lambda name: SpyNode(name, adj, log, heuristic, as_set)), log
    return make


@pytest.fixture
def diamond() -> AdjacencyGraph:
    """S fans out to A, B and C; the cheap route to B goes through A."""
    return AdjacencyGraph([
        ("S", "A", 1),
        ("S", "B", 5),
        ("S", "C", 3),
        ("A", "B", 1),
        ("B", "G", 1),
        ("C", "G", 10),
    ])


@pytest.fixture
def arad():
    return city("Arad")


@pytest.fixture
def bucharest():
    return city("Bucharest")

