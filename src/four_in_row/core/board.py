
# src/four_in_row/core/board.py

from __future__ import annotations
from dataclasses import dataclass, field
from typing import List

from four_in_row.config import ROWS, COLS
from four_in_row.types import Disk, Move


@dataclass(slots=True)
class Board:
    """
    Plain grid of disks used for display and for seeding a BitBoard.
    Row 0 is the bottom row.
    """
    rows: int = ROWS
    cols: int = COLS
    grid: List[List[Disk]] = field(default_factory=list)
    column_heights: List[int] = field(default_factory=list)

    def __post_init__(self) -> None:
        if not self.grid:
            self.grid = [[Disk.EMPTY for _ in range(self.cols)] for _ in range(self.rows)]
        if not self.column_heights:
            self.column_heights = [
                sum(1 for r in range(self.rows) if self.grid[r][c] is not Disk.EMPTY)
                for c in range(self.cols)
            ]

    def copy(self) -> "Board":
        b = Board(self.rows, self.cols)
        b.grid = [row[:] for row in self.grid]
        b.column_heights = self.column_heights[:]
        return b

    def valid_move(self, col: int) -> bool:
        if col < 0 or col >= self.cols:
            return False
        return self.column_heights[col] < self.rows

    def valid_moves(self) -> List[Move]:
        return [Move(c) for c in range(self.cols) if self.valid_move(c)]

    def is_full(self) -> bool:
        return all(h == self.rows for h in self.column_heights)

    def add_disk(self, disk: Disk, col: int) -> bool:
        if not self.valid_move(col):
            return False
        row = self.column_heights[col]
        self.grid[row][col] = disk
        self.column_heights[col] += 1
        return True

    def drop(self, col: Move, disk: Disk) -> int:
        c = int(col)
        if c < 0 or c >= self.cols:
            raise ValueError("Column out of range.")
        if self.column_heights[c] >= self.rows:
            raise ValueError("Column is full.")

        row = self.column_heights[c]
        self.add_disk(disk, c)
        return row

    def pop_disk(self, col: int) -> None:
        """
        Remove the top-most disk from a column.
        """
        if self.column_heights[col] == 0:
            raise ValueError("Cannot undo: column is empty.")
        self.column_heights[col] -= 1
        self.grid[self.column_heights[col]][col] = Disk.EMPTY

    def get_disk(self, row: int, col: int) -> Disk:
        return self.grid[row][col]
