# graphstar/core/metrics.py
from __future__ import annotations
from dataclasses import dataclass
from typing import Any, Dict, List, Optional
import time, tracemalloc


@dataclass
class SearchResult:
    algo: str
    success: bool
    path: List[Any]
    cost: float
    nodes_expanded: int
    time_s: float
    peak_kb: int
    frontier_peak: int = 0
    closed_count: int = 0
    relaxed: int = 0
    inserted: int = 0
    error: Optional[str] = None

    def to_row(self, label: Optional[str] = None) -> Dict[str, Any]:
        """Flat dict for results.json (the path is stored as its length)."""
        return {
            "algo": label or self.algo,
            "success": self.success,
            "cost": self.cost if self.success else None,
            "path_len": len(self.path),
            "nodes_expanded": self.nodes_expanded,
            "time_s": self.time_s,
            "peak_kb": self.peak_kb,
            "frontier_peak": self.frontier_peak,
            "closed_count": self.closed_count,
            "relaxed": self.relaxed,
            "inserted": self.inserted,
            "error": self.error,
        }


@dataclass
class SearchCounters:
    expanded: int = 0
    relaxed: int = 0
    inserted: int = 0
    frontier_peak: int = 0
    closed: int = 0


class MeasuredRun:
    """
    Context manager for timing and (approximate) peak memory.
    Safe to query .elapsed and .peak_kb *inside* the with-block.
    Pass trace_memory=False to skip tracemalloc (it slows large searches down).
    """
    def __init__(self, trace_memory: bool = True) -> None:
        self.t0: Optional[float] = None
        self.t1: Optional[float] = None
        self._peak_kb: int = 0
        self._tracing: bool = False
        self._trace_memory = trace_memory
        self._owns_tracing = False
        self._baseline: int = 0

    def __enter__(self) -> "MeasuredRun":
        if self._trace_memory:
            self._tracing = True
            if not tracemalloc.is_tracing():
                tracemalloc.start()
                self._owns_tracing = True
            else:
                # shared trace: measure from what is allocated now
                self._baseline = tracemalloc.get_traced_memory()[0]
                tracemalloc.reset_peak()
        self.t0 = time.perf_counter()
        return self

    def __exit__(self, exc_type, exc, tb) -> bool:
        self.t1 = time.perf_counter()
        if self._tracing:
            current, peak = tracemalloc.get_traced_memory()
            if self._owns_tracing:
                tracemalloc.stop()
            self._tracing = False
            self._peak_kb = max(self._peak_kb, self._above_baseline(peak))
        return False  # don't suppress exceptions

    @property
    def elapsed(self) -> float:
        """Seconds elapsed. Works before and after __exit__."""
        if self.t0 is None:
            return 0.0
        if self.t1 is None:
            return time.perf_counter() - self.t0
        return self.t1 - self.t0

    @property
    def peak_kb(self) -> int:
        """Approx peak KB. Works before and after __exit__."""
        if self._tracing:
            current, peak = tracemalloc.get_traced_memory()
            return max(self._peak_kb, self._above_baseline(peak))
        return self._peak_kb

    def _above_baseline(self, peak: int) -> int:
        return max(0, peak - self._baseline) // 1024
