"""
Uniform spatial grid used for broad-phase collision checks
"""

from __future__ import annotations

import math
from collections import defaultdict
from typing import DefaultDict, Iterable, Iterator, List, Tuple

from space_shooter.entities import Enemy

Cell = Tuple[int, int]

NEIGHBOURHOOD = (-1, 0, 1)


class SpatialGrid:
    """
    Maps grid cells to the enemies whose top-left corner falls inside them.

    The grid holds no state between frames: call :meth:`rebuild` every tick.
    """

    def __init__(self, width: int, height: int, columns: int, rows: int):
        """
        :param width: Width of the play field
        :type width: int

        :param height: Height of the play field
        :type height: int

        :param columns: Number of cells across
        :type columns: int

        :param rows: Number of cells down
        :type rows: int
        """
        self.columns = columns
        self.rows = rows
        self.cell_width = width / columns
        self.cell_height = height / rows
        self._cells: DefaultDict[Cell, List[Enemy]] = defaultdict(list)

    def __len__(self) -> int:
        return sum(len(bucket) for bucket in self._cells.values())

    def cell_of(self, x: float, y: float) -> Cell:
        """
        Return the cell containing (x, y), clamped to the field.

        Positions above the field (spawning enemies) land in row 0.
        """
        column = min(max(math.floor(x / self.cell_width), 0), self.columns - 1)
        row = min(max(math.floor(y / self.cell_height), 0), self.rows - 1)
        return column, row

    def rebuild(self, enemies: Iterable[Enemy]) -> None:
        """Drop last frame's buckets and insert every active enemy."""
        self._cells.clear()
        for enemy in enemies:
            if enemy.active:
                self._cells[self.cell_of(enemy.x, enemy.y)].append(enemy)

    def bucket(self, cell: Cell) -> List[Enemy]:
        """
        Enemies indexed under a cell, in insertion order

        :param cell: Column and row
        :type cell: Tuple[int, int]

        :return: List[Enemy]
        :rtype: List[Enemy]
        """
        return self._cells.get(cell, [])

    def nearby(self, x: float, y: float) -> Iterator[Enemy]:
        """
        Yield enemies in the 3x3 block of cells around (x, y).

        Cells are visited column offset first (-1..1), then row offset,
        and enemies within a cell in insertion order. Cells outside the
        field are skipped.
        """
        column, row = self.cell_of(x, y)
        for dx in NEIGHBOURHOOD:
            for dy in NEIGHBOURHOOD:
                cell = (column + dx, row + dy)
                if 0 <= cell[0] < self.columns and 0 <= cell[1] < self.rows:
                    yield from self.bucket(cell)
