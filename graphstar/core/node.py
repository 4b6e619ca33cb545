# Defines the capability any graph node must offer to be searched (neighbors, edge cost, heuristic).
# graphstar/core/node.py
from __future__ import annotations
from typing import Iterable, List, Protocol, TypeVar, runtime_checkable

N = TypeVar("N", bound="GraphNode")


@runtime_checkable
class GraphNode(Protocol):
    """Read-only node contract (identity via __eq__/__hash__).

    The engine never adds or removes connections; it only reads them.
    """

    @property
    def connected_nodes(self) -> Iterable["GraphNode"]:
        """Nodes this node has an edge leading to (no duplicates)."""
        ...

    def cost(self, to: "GraphNode") -> float:
        """Actual, non-negative cost of the edge from this node to `to`."""
        ...

    def estimated_cost(self, to: "GraphNode") -> float:
        """Heuristic estimate of the remaining cost to `to` (should never overestimate)."""
        ...


class PathfindingMixin:
    """Gives a node class the receiver-style entry points.

    node.find_path_to(goal)    -> path where this node is the start
    node.find_path_from(start) -> path where this node is the goal
    """

    def find_path_to(self: N, goal: N) -> List[N]:
        from ..algorithms.astar import find_path
        return find_path(self, goal)

    def find_path_from(self: N, start: N) -> List[N]:
        from ..algorithms.astar import find_path_from
        return find_path_from(self, start)
