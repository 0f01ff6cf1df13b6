
# src/four_in_row/core/bitboard.py

from __future__ import annotations
from contextlib import contextmanager
from typing import Iterator, List

from four_in_row.config import ROWS, COLS
from four_in_row.core import evaluator
from four_in_row.core.board import Board
from four_in_row.types import Disk, Outcome


def _bit(row: int, col: int) -> int:
    return 1 << (COLS * row + col)


class BitBoard:
    """
    Disk locations packed into one 64-bit mask per player, plus the height of
    every column.

    Search code mutates a single BitBoard in place: every hypothetical move is
    an ``add_disk`` that must be undone by ``pop_disk`` before the caller
    returns. ``probe`` wraps that pairing.
    """

    __slots__ = ("locations", "column_heights")

    def __init__(self) -> None:
        # index 0 holds X disks, index 1 holds O disks
        self.locations: List[int] = [0, 0]
        self.column_heights: List[int] = [0] * COLS

    @classmethod
    def from_board(cls, board: Board) -> "BitBoard":
        bb = cls()
        for col in range(COLS):
            for row in range(board.column_heights[col]):
                bb.add_disk(board.get_disk(row, col), col)
        return bb

    @classmethod
    def from_masks(cls, x_locations: int, o_locations: int) -> "BitBoard":
        if x_locations & o_locations:
            raise ValueError("X and O locations overlap.")
        occupied = x_locations | o_locations
        if occupied & ~evaluator.FULL_MASK:
            raise ValueError("Locations do not fit an 8x8 board.")

        bb = cls()
        bb.locations = [x_locations, o_locations]
        for col in range(COLS):
            height = 0
            while height < ROWS and occupied & _bit(height, col):
                height += 1
            for row in range(height, ROWS):
                if occupied & _bit(row, col):
                    raise ValueError(f"Floating disk at row {row}, column {col}.")
            bb.column_heights[col] = height
        return bb

    def copy(self) -> "BitBoard":
        bb = BitBoard()
        bb.locations = self.locations[:]
        bb.column_heights = self.column_heights[:]
        return bb

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, BitBoard):
            return NotImplemented
        return self.locations == other.locations and self.column_heights == other.column_heights

    @property
    def x_locations(self) -> int:
        return self.locations[0]

    @property
    def o_locations(self) -> int:
        return self.locations[1]

    def get_locations(self, disk: Disk) -> int:
        return self.locations[disk.value]

    # ---- mutation ----

    def valid_move(self, col: int) -> bool:
        return self.column_heights[col] != ROWS

    def add_disk(self, disk: Disk, col: int) -> bool:
        row = self.column_heights[col]
        if row == ROWS:
            return False
        self.locations[disk.value] |= _bit(row, col)
        self.column_heights[col] = row + 1
        return True

    def pop_disk(self, disk: Disk, col: int) -> None:
        # Assumes the top disk of the column belongs to ``disk``
        row = self.column_heights[col] - 1
        self.locations[disk.value] &= ~_bit(row, col)
        self.column_heights[col] = row

    @contextmanager
    def probe(self, disk: Disk, col: int) -> Iterator[bool]:
        """
        Temporarily drop ``disk`` into ``col``.
        Yields whether the disk was placed; it is always removed again on exit.
        """
        added = self.add_disk(disk, col)
        try:
            yield added
        finally:
            if added:
                self.pop_disk(disk, col)

    # ---- queries ----

    def disks_added(self) -> int:
        return sum(self.column_heights)

    @staticmethod
    def has_disk(locations: int, row: int, col: int) -> bool:
        return bool(locations & _bit(row, col))

    def get_disk(self, row: int, col: int) -> Disk:
        if self.has_disk(self.x_locations, row, col):
            return Disk.X
        if self.has_disk(self.o_locations, row, col):
            return Disk.O
        return Disk.EMPTY

    def check_win(self) -> Outcome:
        if evaluator.check_win(self.x_locations):
            return Outcome.X_VICTORY
        if evaluator.check_win(self.o_locations):
            return Outcome.O_VICTORY
        return Outcome.INCOMPLETE

    def check_tie(self) -> bool:
        # Only meaningful once check_win() has ruled out a victory
        return (self.x_locations | self.o_locations) == evaluator.FULL_MASK

    def get_state(self) -> Outcome:
        state = self.check_win()
        if state is not Outcome.INCOMPLETE:
            return state
        if self.check_tie():
            return Outcome.TIE
        return Outcome.INCOMPLETE

    def adjacency_score(self, disk: Disk) -> int:
        return evaluator.total_adjacency_score(self.get_locations(disk))

    # ---- conversion ----

    def to_board(self) -> Board:
        board = Board()
        for col in range(COLS):
            for row in range(self.column_heights[col]):
                board.add_disk(self.get_disk(row, col), col)
        return board

    def __str__(self) -> str:
        from four_in_row.ui.render import board_text

        return board_text(self.to_board())

    def __repr__(self) -> str:
        return (
            f"BitBoard(x=0x{self.x_locations:016x}, o=0x{self.o_locations:016x}, "
            f"heights={self.column_heights})"
        )

