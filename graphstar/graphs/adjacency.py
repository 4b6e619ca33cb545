# graphstar/graphs/adjacency.py
# A small general-purpose weighted digraph whose vertices satisfy the GraphNode contract.
from __future__ import annotations
from typing import Callable, Dict, Iterable, Mapping, Optional, Tuple, Union

from ..core.node import PathfindingMixin

Edge = Tuple[str, str, float]
Heuristic = Union[Mapping[str, Mapping[str, float]], Callable[[str, str], float], None]


class Vertex(PathfindingMixin):
    """
    Named vertex of an AdjacencyGraph. Equality and hash follow (graph, name).
    Neighbors come out in the order their edges were given.
    """
    __slots__ = ("name", "graph")

    def __init__(self, name: str, graph: "AdjacencyGraph"):
        self.name = name
        self.graph = graph

    @property
    def connected_nodes(self) -> Tuple["Vertex", ...]:
        return tuple(self.graph[n] for n in self.graph.edges[self.name])

    def cost(self, to: "Vertex") -> float:
        return float(self.graph.edges[self.name][to.name])

    def estimated_cost(self, to: "Vertex") -> float:
        return self.graph.heuristic(self.name, to.name)

    def __eq__(self, other):
        if not isinstance(other, Vertex):
            return NotImplemented
        return self.graph is other.graph and self.name == other.name

    def __hash__(self):
        return hash(self.name)

    def __lt__(self, other: "Vertex") -> bool:
        return self.name < other.name

    def __repr__(self):
        return f"Vertex({self.name!r})"


class AdjacencyGraph:
    """
    Read-only graph built once from an edge list.

    edges: (u, v, cost) triples; each adds u -> v (and v -> u when bidirectional).
    heuristic: nested mapping h[u][goal], a callable h(u, goal), or None for h = 0.
    """
    def __init__(self, edges: Iterable[Edge], heuristic: Heuristic = None,
                 bidirectional: bool = False, nodes: Iterable[str] = ()):
        self.edges: Dict[str, Dict[str, float]] = {}
        for n in nodes:
            self.edges.setdefault(n, {})
        for u, v, c in edges:
            if c is None or float(c) < 0:
                raise ValueError(f"edge {u!r}->{v!r} has invalid cost {c!r}")
            self.edges.setdefault(u, {})[v] = float(c)
            self.edges.setdefault(v, {})
            if bidirectional:
                self.edges[v][u] = float(c)
        self._heuristic = heuristic
        self._vertices = {n: Vertex(n, self) for n in self.edges}

    def heuristic(self, u: str, goal: str) -> float:
        h = self._heuristic
        if h is None:
            return 0.0
        if callable(h):
            return float(h(u, goal))
        return float(h.get(u, {}).get(goal, 0.0))

    def __getitem__(self, name: str) -> Vertex:
        return self._vertices[name]


def graph_from_dict(adj: Mapping[str, Mapping[str, float]], heuristic: Heuristic = None) -> AdjacencyGraph:
    """Build from {u: {v: cost}} (directed, as given)."""
    edges = [(u, v, c) for u, nbrs in adj.items() for v, c in nbrs.items()]
    return AdjacencyGraph(edges, heuristic=heuristic, nodes=adj.keys())
