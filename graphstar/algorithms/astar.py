# graphstar/algorithms/astar.py
# A* over any node type that satisfies core.node.GraphNode.
from __future__ import annotations
import logging
from typing import Any, Callable, List, Optional, Set, Tuple

from ..core.frontiers import Frontier
from ..core.metrics import MeasuredRun, SearchCounters, SearchResult
from ..core.node import N
from ..core.step import Step
from ..core.utils import ordered_neighbors, path_cost, reconstruct_path

logger = logging.getLogger(__name__)

OrderKey = Optional[Callable[[Any], Any]]


def _search(
    start: N,
    goal: N,
    order_key: OrderKey = None,
    max_expansions: Optional[int] = None,
) -> Tuple[List[N], SearchCounters]:
    counters = SearchCounters()
    if start == goal:
        return [start], counters

    frontier: Frontier[N] = Frontier()
    closed: Set[N] = {start}

    for node in ordered_neighbors(start, order_key):
        if node in closed or node in frontier:
            continue
        frontier.push(Step(node, goal, start=start))
        counters.inserted += 1

    while frontier:
        if max_expansions is not None and counters.expanded >= max_expansions:
            logger.debug("expansion budget of %d reached", max_expansions)
            break

        step = frontier.pop()
        if step.node == goal:
            counters.frontier_peak = frontier.peak_size
            counters.closed = len(closed)
            return reconstruct_path(step, start), counters

        closed.add(step.node)
        counters.expanded += 1

        for node in ordered_neighbors(step.node, order_key):
            if node in closed:
                continue
            existing = frontier.get(node)
            if existing is None:
                frontier.push(Step(node, goal, previous=step))
                counters.inserted += 1
                continue
            candidate = existing.cost_via(step)
            if candidate < existing.step_cost:
                logger.debug("relax %r: g %g -> %g via %r", node, existing.step_cost, candidate, step.node)
                existing.relax(step, candidate)
                frontier.reposition(existing)
                counters.relaxed += 1

    counters.frontier_peak = frontier.peak_size
    counters.closed = len(closed)
    return [], counters


def find_path(start: N, goal: N, order_key: OrderKey = None, max_expansions: Optional[int] = None) -> List[N]:
    """
    Optimal path from `start` to `goal` (both inclusive), given an admissible heuristic.
    Returns [start] when start == goal and [] when the goal cannot be reached.
    """
    path, counters = _search(start, goal, order_key, max_expansions)
    logger.debug(
        "find_path %r -> %r: %s after %d expansions",
        start, goal, "found" if path else "no path", counters.expanded,
    )
    return path


def find_path_from(goal: N, start: N, order_key: OrderKey = None, max_expansions: Optional[int] = None) -> List[N]:
    """Same as find_path, with the goal as the receiver."""
    return find_path(start, goal, order_key=order_key, max_expansions=max_expansions)


def a_star_search(
    start: N,
    goal: N,
    order_key: OrderKey = None,
    max_expansions: Optional[int] = None,
    trace_memory: bool = True,
) -> SearchResult:
    name = "A*"
    with MeasuredRun(trace_memory=trace_memory) as meter:
        path, counters = _search(start, goal, order_key, max_expansions)
    success = bool(path)
    cost = path_cost(path) if success else float("inf")
    logger.info(
        "%s %r -> %r: %s cost=%s expanded=%d time=%.4fs",
        name, start, goal, "OK" if success else "FAIL", cost, counters.expanded, meter.elapsed,
    )
    return SearchResult(
        algo=name,
        success=success,
        path=path,
        cost=cost,
        nodes_expanded=counters.expanded,
        time_s=meter.elapsed,
        peak_kb=meter.peak_kb,
        frontier_peak=counters.frontier_peak,
        closed_count=counters.closed,
        relaxed=counters.relaxed,
        inserted=counters.inserted,
    )
