"""A* path finding on a two-dimensional grid with diagonal moves."""

from __future__ import annotations

import heapq
import itertools
import math
from collections.abc import Sequence

WALL = 0xFF
_SQRT2 = 1.414213562373095

Cell = tuple[int, int]


class AStar:
    """Searches a grid of cell costs where cells equal to ``WALL`` are blocked.

    The grid is indexed as ``grid[x][y]``. Moves go to any of the eight
    neighbouring cells; straight moves cost 1, diagonal moves cost sqrt(2).
    """

    WALL = WALL

    def __init__(self, grid: Sequence[Sequence[int]]) -> None:
        self._grid = [list(row) for row in grid]
        self._nrow = len(self._grid)
        self._ncol = len(self._grid[0]) if self._grid else 0
        if any(len(row) != self._ncol for row in self._grid):
            raise ValueError("grid rows must all have the same length")

    def _in_bounds(self, x: int, y: int) -> bool:
        return 0 <= x < self._nrow and 0 <= y < self._ncol

    @staticmethod
    def _estimate(a: Cell, b: Cell) -> float:
        return math.hypot(b[0] - a[0], b[1] - a[1])

    def run(self, x1: int, y1: int, x2: int, y2: int) -> list[Cell] | None:
        """Find a path from (x1, y1) to (x2, y2).

        Returns ``None`` if the start cell is a wall, an empty list if the
        goal cannot be reached, and otherwise the cells of the path ordered
        from the goal back to the start.
        """
        if not (self._in_bounds(x1, y1) and self._in_bounds(x2, y2)):
            raise IndexError("start or goal lies outside the grid")
        if self._grid[x1][y1] == WALL:
            return None

        start: Cell = (x1, y1)
        goal: Cell = (x2, y2)
        tie = itertools.count()
        open_heap = [(self._estimate(start, goal), next(tie), start)]
        open_set = {start}
        closed: set[Cell] = set()
        came_from: dict[Cell, Cell] = {}
        g_score: dict[Cell, float] = {start: 0.0}

        while open_heap:
            _, _, current = heapq.heappop(open_heap)
            if current == goal:
                return self._reconstruct(came_from, start, goal)

            closed.add(current)
            open_set.discard(current)
            cx, cy = current

            for nx in range(cx - 1, cx + 2):
                for ny in range(cy - 1, cy + 2):
                    neighbour = (nx, ny)
                    if neighbour == current or not self._in_bounds(nx, ny):
                        continue
                    if self._grid[nx][ny] == WALL or neighbour in closed:
                        continue
                    step = 1.0 if nx == cx or ny == cy else _SQRT2
                    tentative = g_score[current] + step
                    if neighbour not in open_set or tentative < g_score[neighbour]:
                        came_from[neighbour] = current
                        g_score[neighbour] = tentative
                        if neighbour not in open_set:
                            priority = tentative + self._estimate(neighbour, goal)
                            heapq.heappush(open_heap, (priority, next(tie), neighbour))
                            open_set.add(neighbour)

        return []

    @staticmethod
    def _reconstruct(came_from: dict[Cell, Cell], start: Cell, goal: Cell) -> list[Cell]:
        path = [goal]
        node = goal
        while node != start:
            node = came_from[node]
            path.append(node)
        return path