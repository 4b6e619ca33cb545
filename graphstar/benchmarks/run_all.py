# graphstar/benchmarks/run_all.py
from __future__ import annotations

import argparse
import json
import logging
import os
import time
from pathlib import Path
from typing import Any, Callable, List, Optional, Tuple

from ..algorithms.astar import a_star_search
from ..core.metrics import SearchResult
from ..graphs.grid import GridGraph, make_grid_graph
from ..graphs.romania import city

# ---- Tunables (overridable via environment variables) -----------------------
GRID_SIZE     = int(os.getenv("GRAPHSTAR_GRID_SIZE", "60"))         # random grid is GRID_SIZE x GRID_SIZE
GRID_DENSITY  = float(os.getenv("GRAPHSTAR_GRID_DENSITY", "0.25"))  # share of walled cells
SEED          = int(os.getenv("GRAPHSTAR_SEED", "7"))
_max_exp      = os.getenv("GRAPHSTAR_MAX_EXPANSIONS")
MAX_EXPANSIONS: Optional[int] = int(_max_exp) if _max_exp else None
LOG_LEVEL     = os.getenv("GRAPHSTAR_LOG_LEVEL", "WARNING")

RESULTS_JSON = Path(__file__).with_name("results.json")

Case = Tuple[str, Callable[[], Tuple[Any, Any]]]


# ---- Helpers ----------------------------------------------------------------
def _fmt_time(x):
    try:
        return f"{float(x):.4f}"
    except (TypeError, ValueError):
        return "n/a"


def _romania(start: str, goal: str):
    return lambda: (city(start), city(goal))


def _random_grid(size: int, density: float, seed: int, eight: bool):
    def build():
        corner = (size - 1, size - 1)
        grid = GridGraph.random(size, size, density=density, seed=seed,
                                eight_connected=eight, keep_free=[(0, 0), corner])
        return grid.cell(0, 0), grid.cell(*corner)
    return build


def _example_grid():
    _, start, goal = make_grid_graph()
    return start, goal


def load_cases(size: int = GRID_SIZE, density: float = GRID_DENSITY, seed: int = SEED) -> List[Case]:
    return [
        ("Romania Arad->Bucharest", _romania("Arad", "Bucharest")),
        ("Romania Oradea->Eforie", _romania("Oradea", "Eforie")),
        ("Romania Neamt->Timisoara", _romania("Neamt", "Timisoara")),
        ("Grid 5x7 example", _example_grid),
        (f"Grid {size}x{size} 4-conn", _random_grid(size, density, seed, False)),
        (f"Grid {size}x{size} 8-conn", _random_grid(size, density, seed, True)),
    ]


def run_cases(cases: List[Case], max_expansions: Optional[int] = MAX_EXPANSIONS) -> List[dict]:
    rows = []
    for name, build in cases:
        print(f"→ Running A* on {name} ...")
        try:
            start, goal = build()
            r: SearchResult = a_star_search(start, goal, max_expansions=max_expansions)
            print(
                f"  {name}: "
                f"{'OK' if r.success else 'FAIL'} "
                f"cost={r.cost} "
                f"expanded={r.nodes_expanded}, "
                f"time={_fmt_time(r.time_s)}s"
            )
            rows.append(r.to_row(label=name))
        except Exception as e:
            # one broken case must not hide the others
            print(f"  {name}: ERROR {repr(e)}")
            rows.append({
                "algo": name,
                "success": False,
                "error": repr(e),
                "nodes_expanded": None,
                "cost": None,
                "time_s": None,
                "peak_kb": None,
            })
    return rows


def _parse_args(argv=None):
    ap = argparse.ArgumentParser(description="Run A* over the sample graphs and save results.json.")
    ap.add_argument("--grid-size", type=int, default=GRID_SIZE, help="side of the random grids")
    ap.add_argument("--density", type=float, default=GRID_DENSITY, help="wall density of the random grids")
    ap.add_argument("--seed", type=int, default=SEED, help="seed for the random grids")
    ap.add_argument("--max-expansions", type=int, default=MAX_EXPANSIONS, help="expansion budget per search")
    ap.add_argument("--out", type=Path, default=RESULTS_JSON, help="where to write results.json")
    ap.add_argument("--log-level", default=LOG_LEVEL, help="logging level (DEBUG, INFO, ...)")
    return ap.parse_args(argv)


def run(args) -> dict:
    cases = load_cases(args.grid_size, args.density, args.seed)
    rows = run_cases(cases, max_expansions=args.max_expansions)

    out = {"results": rows, "ts": time.time()}
    print(json.dumps(out, indent=2))

    args.out.write_text(json.dumps(out, indent=2))
    print(f"Wrote {args.out}")
    return out


def main(argv=None):
    args = _parse_args(argv)
    logging.basicConfig(level=args.log_level.upper(), format="%(levelname)s %(name)s: %(message)s")
    run(args)


if __name__ == "__main__":
    main()
