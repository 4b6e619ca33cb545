# graphstar/core/utils.py
# Helpers shared by the searches: neighbor ordering, path reconstruction and path cost.
from __future__ import annotations
from typing import Any, Callable, Iterable, List, Optional, Sequence
from .step import Step


def ordered_neighbors(node, order_key: Optional[Callable[[Any], Any]] = None) -> List:
    """Neighbors of `node` in a reproducible order.

    Sets have no stable order, so they are sorted when their nodes compare;
    sequences keep the order the node hands out. `order_key` overrides both.
    """
    neighbors: Iterable = node.connected_nodes
    if order_key is not None:
        return sorted(neighbors, key=order_key)
    if isinstance(neighbors, (set, frozenset)):
        try:
            return sorted(neighbors)
        except TypeError:
            # unorderable nodes: fall back to the set's own order
            return list(neighbors)
    return list(dict.fromkeys(neighbors))


def reconstruct_path(step: Step, start) -> List:
    """Walk `previous` links back from the goal step and prepend the start node."""
    path = []
    cur = step
    while cur is not None:
        path.append(cur.node)
        cur = cur.previous
    path.append(start)
    path.reverse()
    return path


def path_cost(path: Sequence) -> float:
    total = 0.0
    for a, b in zip(path, path[1:]):
        total += float(a.cost(b))
    return total
