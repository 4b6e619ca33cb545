# graphstar/core/frontiers.py
from __future__ import annotations
from bisect import bisect_left
from typing import Dict, Generic, Hashable, List, Optional, Tuple, TypeVar

from .step import Step

T = TypeVar("T", bound=Hashable)
Key = Tuple[float, int]


class Frontier(Generic[T]):
    """Open list sorted ascending by (total_cost, insertion seq).

    Keeps a node -> step table next to the sorted list so membership never
    depends on where a step happens to sort. One step per node at most.
    """

    def __init__(self):
        self._keys: List[Key] = []
        self._steps: List[Step[T]] = []
        self._by_node: Dict[T, Tuple[Key, Step[T]]] = {}
        self.counter = 0  # tie-breaker: equal f pops FIFO
        self.peak_size = 0

    def push(self, step: Step[T]) -> None:
        if step.node in self._by_node:
            raise ValueError(f"frontier already holds a step for {step.node!r}")
        self.counter += 1
        key = (step.total_cost(), self.counter)
        i = bisect_left(self._keys, key)
        self._keys.insert(i, key)
        self._steps.insert(i, step)
        self._by_node[step.node] = (key, step)
        self.peak_size = max(self.peak_size, len(self._steps))

    def pop(self) -> Step[T]:
        if not self._steps:
            raise IndexError("pop from an empty frontier")
        self._keys.pop(0)
        step = self._steps.pop(0)
        del self._by_node[step.node]
        return step

    def peek(self) -> Step[T]:
        return self._steps[0]

    def get(self, node: T) -> Optional[Step[T]]:
        entry = self._by_node.get(node)
        return None if entry is None else entry[1]

    def remove(self, node: T) -> Step[T]:
        key, step = self._by_node.pop(node)
        i = bisect_left(self._keys, key)
        del self._keys[i]
        del self._steps[i]
        return step

    def reposition(self, step: Step[T]) -> None:
        """Re-sort a step whose cost changed while it sat in the frontier."""
        self.remove(step.node)
        self.push(step)

    def __contains__(self, node) -> bool:
        return node in self._by_node

    def __len__(self): return len(self._steps)
