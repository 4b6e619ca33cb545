"""
Tests for the A* search: entry points, edge cases, relaxation, closed-set
behavior, determinism and optimality against brute force.
"""

import numpy as np
import pytest

from graphstar.algorithms.astar import a_star_search, find_path, find_path_from
from graphstar.core.utils import path_cost
from graphstar.graphs.adjacency import AdjacencyGraph, graph_from_dict


def brute_force_distances(edges, goal):
    """Cheapest cost from every node to `goal` by enumerating all simple paths."""
    best = {}

    def walk(node, seen, acc, first):
        if node == goal:
            best[first] = min(best.get(first, float("inf")), acc)
            return
        for nxt, c in edges.get(node, {}).items():
            if nxt not in seen:
                walk(nxt, seen | {nxt}, acc + c, first)

    for n in edges:
        walk(n, {n}, 0.0, n)
    best[goal] = 0.0
    return best


def random_edges(seed: int, max_nodes: int = 8):
    """Random small directed graph {u: {v: cost}} with names '0'..'n-1'."""
    rng = np.random.default_rng(seed)
    n = int(rng.integers(3, max_nodes + 1))
    names = [str(i) for i in range(n)]
    edges = {u: {} for u in names}
    for u in names:
        for v in names:
            if u != v and rng.random() < 0.35:
                edges[u][v] = float(rng.integers(1, 10))
    return edges


class Place:
    """Node with set-valued neighbors and no ordering."""

    def __init__(self, name, adj):
        self.name = name
        self.adj = adj

    @property
    def connected_nodes(self):
        return {Place(n, self.adj) for n in self.adj[self.name]}

    def cost(self, to):
        return float(self.adj[self.name][to.name])

    def estimated_cost(self, to):
        return 0.0

    def __eq__(self, other):
        return isinstance(other, Place) and self.name == other.name

    def __hash__(self):
        return hash(self.name)


class TestBasics:
    """Test the simple contract cases."""

    def test_single_edge(self):
        """A -> B returns [A, B]."""
        g = AdjacencyGraph([("A", "B", 3.5)], heuristic=lambda u, goal: 0.0 if u == goal else 1.0)
        assert find_path(g["A"], g["B"]) == [g["A"], g["B"]]

    def test_start_is_goal(self, diamond):
        """start == goal is the one-node path."""
        assert find_path(diamond["S"], diamond["S"]) == [diamond["S"]]

    def test_start_is_goal_without_neighbors(self):
        """The degenerate path does not depend on the start having edges."""
        g = AdjacencyGraph([], nodes=["X"])
        assert find_path(g["X"], g["X"]) == [g["X"]]

    def test_unreachable_goal_is_empty(self):
        """No path gives [], not [start]."""
        g = AdjacencyGraph([("A", "B", 1), ("B", "A", 1)], nodes=["C"])
        assert find_path(g["A"], g["C"]) == []

    def test_start_without_neighbors(self):
        """A dead-end start cannot reach anything else."""
        g = AdjacencyGraph([("B", "A", 1)])
        assert find_path(g["A"], g["B"]) == []

    def test_edges_are_directed(self):
        """Only outgoing edges are followed."""
        g = AdjacencyGraph([("A", "B", 1)])
        assert find_path(g["B"], g["A"]) == []

    def test_find_path_from(self, diamond):
        """The goal-receiver form delegates to find_path."""
        assert find_path_from(diamond["G"], diamond["S"]) == find_path(diamond["S"], diamond["G"])

    def test_mixin_entry_points(self, diamond):
        """Vertices expose find_path_to / find_path_from."""
        s, g = diamond["S"], diamond["G"]
        assert s.find_path_to(g) == g.find_path_from(s) == find_path(s, g)


class TestRelaxation:
    """Test that cheaper routes found before closing a node win."""

    def test_cheaper_route_wins(self, diamond):
        """B is first seen at g=5, then relaxed to g=2 through A."""
        path = find_path(diamond["S"], diamond["G"])
        assert [v.name for v in path] == ["S", "A", "B", "G"]
        assert path_cost(path) == 3.0

    def test_relaxation_is_counted(self, diamond):
        """The search result reports the relaxation."""
        result = a_star_search(diamond["S"], diamond["G"], trace_memory=False)
        assert result.success
        assert result.relaxed == 1
        assert result.inserted == 4
        assert result.to_row()["inserted"] == 4
        assert result.cost == 3.0

    def test_relaxed_step_is_resorted(self):
        """After relaxation the step is expanded under its new cost, ahead of costlier steps."""
        g = AdjacencyGraph([
            ("S", "A", 1), ("S", "B", 9), ("S", "C", 4),
            ("A", "B", 1), ("B", "G", 1), ("C", "G", 1),
        ])
        # B drops from 9 to 2 and must be expanded before C (4), reaching G at 3
        path = find_path(g["S"], g["G"])
        assert [v.name for v in path] == ["S", "A", "B", "G"]

    def test_more_expensive_route_discarded(self):
        """A later, costlier route to a frontier node leaves it untouched."""
        g = AdjacencyGraph([("S", "A", 1), ("S", "B", 1), ("A", "B", 5), ("B", "G", 1)])
        path = find_path(g["S"], g["G"])
        assert [v.name for v in path] == ["S", "B", "G"]


class TestClosedSet:
    """Test that closed nodes are never revisited."""

    ADJ = {
        "S": {"A": 1, "B": 4},
        "A": {"S": 1, "B": 1, "C": 5},
        "B": {"S": 4, "A": 1, "C": 1},
        "C": {"A": 5, "B": 1, "G": 2},
        "G": {"C": 2},
    }

    def test_each_node_expanded_once(self, spy_graph):
        """No node has its neighbors read twice."""
        node, log = spy_graph(self.ADJ)
        path = find_path(node("S"), node("G"))
        assert [n.name for n in path] == ["S", "A", "B", "C", "G"]
        expanded = [e[1] for e in log if e[0] == "expand"]
        assert len(expanded) == len(set(expanded))
        assert "G" not in expanded

    def test_no_cost_lookups_into_closed_nodes(self, spy_graph):
        """Once a node is expanded no step toward it is built or relaxed."""
        node, log = spy_graph(self.ADJ)
        find_path(node("S"), node("G"))
        closed = set()
        for event in log:
            if event[0] == "expand":
                closed.add(event[1])
            else:
                _, _, to = event
                assert to not in closed

    def test_closed_node_not_reopened(self, spy_graph):
        """Even a cheaper route to a closed node is ignored."""
        # h(B) = 5 overestimates, so A closes (g=3) before the g=2 route via B shows up
        adj = {"S": {"A": 3, "B": 1}, "B": {"A": 1}, "A": {"G": 5}, "G": {}}
        node, log = spy_graph(adj, heuristic={"B": 5.0})
        path = find_path(node("S"), node("G"))
        assert [n.name for n in path] == ["S", "A", "G"]
        assert ("cost", "B", "A") not in log


class TestDeterminism:
    """Test reproducible results under ties."""

    TIE = {"S": {"A": 1, "B": 1}, "A": {"G": 1}, "B": {"G": 1}, "G": {}}

    def test_set_neighbors_sorted(self, spy_graph):
        """Set-valued neighbors are visited in sorted order, so ties resolve the same way."""
        node, _ = spy_graph(self.TIE, as_set=True)
        assert [n.name for n in find_path(node("S"), node("G"))] == ["S", "A", "G"]

    def test_order_key_overrides(self, spy_graph):
        """An explicit order_key decides which tied route is found."""
        node, _ = spy_graph(self.TIE, as_set=True)
        path = find_path(node("S"), node("G"), order_key=lambda n: -ord(n.name))
        assert [n.name for n in path] == ["S", "B", "G"]

    def test_unorderable_set_neighbors(self):
        """Nodes that cannot be sorted still get an optimal path; order_key pins the route."""
        adj = {"S": {"A": 1, "B": 1, "C": 4}, "A": {"G": 1}, "B": {"G": 1}, "C": {"G": 1}, "G": {}}
        s, g = Place("S", adj), Place("G", adj)
        path = find_path(s, g)
        assert path[0] == s and path[-1] == g
        assert path_cost(path) == 2.0
        by_name = lambda n: n.name
        first = find_path(s, g, order_key=by_name)
        assert [n.name for n in first] == ["S", "A", "G"]
        for _ in range(4):
            assert find_path(s, g, order_key=by_name) == first

    @pytest.mark.parametrize("seed", range(10))
    def test_repeated_calls_identical(self, seed):
        """Same graph, same answer, every time."""
        edges = random_edges(seed)
        g = graph_from_dict(edges)
        goal = g[str(len(edges) - 1)]
        first = find_path(g["0"], goal)
        for _ in range(4):
            assert find_path(g["0"], goal) == first


class TestOptimality:
    """Compare against exhaustive enumeration on small graphs."""

    @pytest.mark.parametrize("heuristic", ["zero", "exact", "half"])
    @pytest.mark.parametrize("seed", range(40))
    def test_matches_brute_force(self, seed, heuristic):
        """Cost equals the cheapest simple path; [] exactly when none exists."""
        edges = random_edges(seed)
        goal_name = str(len(edges) - 1)
        dist = brute_force_distances(edges, goal_name)

        if heuristic == "zero":
            h = None
        else:
            scale = 1.0 if heuristic == "exact" else 0.5
            h = {u: {goal_name: scale * dist[u]} for u in dist}

        g = graph_from_dict(edges, heuristic=h)
        path = find_path(g["0"], g[goal_name])

        if "0" not in dist:
            assert path == []
            return
        assert path[0] == g["0"] and path[-1] == g[goal_name]
        for a, b in zip(path, path[1:]):
            assert b.name in edges[a.name]
        assert path_cost(path) == pytest.approx(dist["0"])


class TestBudget:
    """Test the optional expansion budget."""

    def test_budget_stops_search(self, arad, bucharest):
        """Too small a budget reports no path."""
        assert find_path(arad, bucharest, max_expansions=1) == []

    def test_budget_large_enough(self, arad, bucharest):
        """A generous budget changes nothing."""
        assert find_path(arad, bucharest, max_expansions=100) == find_path(arad, bucharest)


class TestSearchResult:
    """Test the statistics wrapper."""

    def test_success_fields(self, arad, bucharest):
        """Path, cost and counters are filled in."""
        r = a_star_search(arad, bucharest)
        assert r.algo == "A*"
        assert r.success
        assert r.path == find_path(arad, bucharest)
        assert r.cost == 418.0
        assert r.nodes_expanded >= 4
        assert r.time_s >= 0.0
        assert r.peak_kb >= 0
        assert r.frontier_peak > 0

    def test_failure_fields(self):
        """Unreachable goals report failure with infinite cost."""
        g = AdjacencyGraph([("A", "B", 1)], nodes=["C"])
        r = a_star_search(g["A"], g["C"], trace_memory=False)
        assert not r.success
        assert r.path == []
        assert r.cost == float("inf")
        assert r.to_row()["cost"] is None
