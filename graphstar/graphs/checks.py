# graphstar/graphs/checks.py
from collections import deque

TOLERANCE = 1e-9


def check_graph(start, goal, max_nodes: int = 10_000):
    """
    Walks nodes breadth-first from `start` and checks what A* assumes but never verifies:
    edge costs are numbers >= 0, h(goal) == 0 and h is consistent (h(u) <= c(u,v) + h(v)).
    Consistency implies admissibility, so a graph that passes keeps A* optimal.
    """
    h_goal = goal.estimated_cost(goal)
    if abs(h_goal) > TOLERANCE:
        raise AssertionError(f"estimated_cost(goal, goal) is {h_goal}, expected 0")
    seen = set()
    q = deque([start])
    edges = 0
    while q and len(seen) < max_nodes:
        u = q.popleft()
        if u in seen:
            continue
        seen.add(u)
        hu = u.estimated_cost(goal)
        for v in u.connected_nodes:
            c = u.cost(v)
            if c is None:
                raise AssertionError(f"cost is None for ({u!r} -> {v!r})")
            if c < 0:
                raise AssertionError(f"negative cost {c} for ({u!r} -> {v!r})")
            hv = v.estimated_cost(goal)
            if hu > c + hv + TOLERANCE:
                raise AssertionError(
                    f"inconsistent heuristic on ({u!r} -> {v!r}): h={hu} > {c} + {hv}"
                )
            edges += 1
            q.append(v)
    return f"OK: visited {len(seen)} nodes, {edges} edges; costs non-negative, heuristic consistent."
