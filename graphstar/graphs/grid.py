# graphstar/graphs/grid.py
from __future__ import annotations
from dataclasses import dataclass, field
from math import sqrt
from typing import Iterable, Optional, Sequence, Tuple

import numpy as np

from ..core.node import PathfindingMixin

Coord = Tuple[int, int]

DIAGONAL_COST = sqrt(2)

# (dr, dc) in the order neighbors are handed out
MOVES_4 = [(-1, 0), (1, 0), (0, -1), (0, 1)]
MOVES_8 = MOVES_4 + [(-1, -1), (-1, 1), (1, -1), (1, 1)]


class GridGraph:
    """
    Weighted occupancy grid.

    - cells[r, c] == 0 is a wall; any positive value is the cost of stepping onto that cell
    - 4- or 8-connected; diagonal steps cost sqrt(2) x the destination weight and
      may not cut a wall corner
    - heuristic: Manhattan (4) or octile (8) distance scaled by the cheapest cell,
      which keeps it admissible
    """
    def __init__(self, cells: np.ndarray, eight_connected: bool = False):
        cells = np.asarray(cells, dtype=float)
        if cells.ndim != 2:
            raise ValueError(f"grid must be 2-D, got shape {cells.shape}")
        if (cells < 0).any():
            raise ValueError("cell weights must be non-negative")
        self.cells = cells
        self.rows, self.cols = cells.shape
        self.eight_connected = eight_connected
        self.moves = MOVES_8 if eight_connected else MOVES_4
        free = cells[cells > 0]
        self.min_weight = float(free.min()) if free.size else 1.0

    # ---- construction helpers ----

    @classmethod
    def from_ascii(cls, lines: Sequence[str], eight_connected: bool = False) -> "GridGraph":
        """'#' is a wall, '.' a unit cell, '1'-'9' a weighted cell."""
        rows = [line.rstrip("\n") for line in lines if line.strip()]
        if not rows:
            raise ValueError("empty grid")
        width = max(len(r) for r in rows)
        cells = np.ones((len(rows), width))
        for r, line in enumerate(rows):
            for c, ch in enumerate(line.ljust(width, "#")):
                if ch == "#":
                    cells[r, c] = 0
                elif ch == ".":
                    cells[r, c] = 1
                elif ch.isdigit() and ch != "0":
                    cells[r, c] = int(ch)
                else:
                    raise ValueError(f"bad grid character {ch!r} at {(r, c)}")
        return cls(cells, eight_connected=eight_connected)

    @classmethod
    def random(cls, rows: int, cols: int, density: float = 0.2, seed: Optional[int] = None,
               eight_connected: bool = False, keep_free: Iterable[Coord] = ()) -> "GridGraph":
        """Unit-cost grid with roughly `density` of its cells walled off."""
        if not 0.0 <= density < 1.0:
            raise ValueError("density must be in [0, 1)")
        rng = np.random.default_rng(seed)
        cells = (rng.random((rows, cols)) >= density).astype(float)
        for r, c in keep_free:
            if not (0 <= r < rows and 0 <= c < cols):
                raise ValueError(f"keep_free cell {(r, c)} is outside the {rows}x{cols} grid")
            cells[r, c] = 1.0
        return cls(cells, eight_connected=eight_connected)

    # ---- queries ----

    def in_bounds(self, pos: Coord) -> bool:
        r, c = pos
        return 0 <= r < self.rows and 0 <= c < self.cols

    def is_free(self, pos: Coord) -> bool:
        return self.in_bounds(pos) and self.cells[pos] > 0

    def cell(self, r: int, c: int) -> "GridCell":
        if not self.in_bounds((r, c)):
            raise ValueError(f"{(r, c)} is outside the {self.rows}x{self.cols} grid")
        if not self.is_free((r, c)):
            raise ValueError(f"{(r, c)} is a wall")
        return GridCell(r, c, self)

    def neighbors(self, pos: Coord) -> Iterable[Coord]:
        r, c = pos
        for dr, dc in self.moves:
            nxt = (r + dr, c + dc)
            if not self.is_free(nxt):
                continue
            if dr and dc and not (self.is_free((r + dr, c)) and self.is_free((r, c + dc))):
                continue
            yield nxt

    def step_cost(self, a: Coord, b: Coord) -> float:
        w = float(self.cells[b])
        if a[0] != b[0] and a[1] != b[1]:
            return w * DIAGONAL_COST
        return w

    def distance(self, a: Coord, b: Coord) -> float:
        dr = abs(a[0] - b[0])
        dc = abs(a[1] - b[1])
        if self.eight_connected:
            # octile
            d = max(dr, dc) + (DIAGONAL_COST - 1) * min(dr, dc)
        else:
            d = dr + dc
        return d * self.min_weight


@dataclass(frozen=True, order=True)
class GridCell(PathfindingMixin):
    row: int
    col: int
    grid: GridGraph = field(compare=False, repr=False)

    # identity includes the grid, as Vertex does with its graph
    def __eq__(self, other):
        if not isinstance(other, GridCell):
            return NotImplemented
        return self.grid is other.grid and self.pos == other.pos

    def __hash__(self):
        return hash((self.row, self.col))

    @property
    def pos(self) -> Coord:
        return (self.row, self.col)

    @property
    def connected_nodes(self) -> Tuple["GridCell", ...]:
        return tuple(GridCell(r, c, self.grid) for r, c in self.grid.neighbors(self.pos))

    def cost(self, to: "GridCell") -> float:
        return self.grid.step_cost(self.pos, to.pos)

    def estimated_cost(self, to: "GridCell") -> float:
        return self.grid.distance(self.pos, to.pos)


def make_grid_graph() -> Tuple[GridGraph, GridCell, GridCell]:
    # Example: 5x7 grid, a few walls
    grid = GridGraph.from_ascii([
        ".......",
        "...#...",
        "...#...",
        "...##..",
        ".......",
    ])
    return grid, grid.cell(0, 0), grid.cell(4, 6)
