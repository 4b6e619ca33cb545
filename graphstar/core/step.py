# graphstar/core/step.py
# A Step is one node as reached by some candidate path during the search; `previous` links form the path tree.
from __future__ import annotations
from typing import Generic, Optional, TypeVar

T = TypeVar("T")


class Step(Generic[T]):
    __slots__ = ("node", "previous", "step_cost", "goal_cost")

    def __init__(self, node: T, goal: T, previous: Optional["Step[T]"] = None, start: Optional[T] = None):
        """Build a step onto `node`.

        With `previous` set, g extends the predecessor's path. Without it this is a
        first-layer step and g is the single edge start -> node.
        """
        if previous is None and start is None:
            raise ValueError("a step needs either a previous step or the start node")
        self.node = node
        self.previous = previous
        if previous is not None:
            self.step_cost = previous.step_cost + float(previous.node.cost(node))
        else:
            self.step_cost = float(start.cost(node))
        # h is fixed for the lifetime of the step
        self.goal_cost = float(node.estimated_cost(goal))

    def total_cost(self) -> float:
        return self.step_cost + self.goal_cost

    def cost_via(self, previous: "Step[T]") -> float:
        """g this step would have if it were reached through `previous`."""
        return previous.step_cost + float(previous.node.cost(self.node))

    def relax(self, previous: "Step[T]", step_cost: float) -> None:
        self.previous = previous
        self.step_cost = step_cost

    def depth(self) -> int:
        d, cur = 1, self
        while cur.previous is not None:
            cur = cur.previous
            d += 1
        return d

    def __repr__(self) -> str:
        return f"Step({self.node!r}, g={self.step_cost:g}, h={self.goal_cost:g})"
