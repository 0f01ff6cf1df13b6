from __future__ import annotations

from typing import Iterable

import pytest

from four_in_row.core.bitboard import BitBoard
from four_in_row.core.board import Board
from four_in_row.types import Disk


def play_columns(columns: Iterable[int], board=None):
    """Drop alternating X/O disks (X first) into the given columns."""
    b = BitBoard() if board is None else board
    disk = Disk.X
    for col in columns:
        if isinstance(b, BitBoard):
            assert b.add_disk(disk, col)
        else:
            b.drop(col, disk)
        disk = disk.counterpart()
    return b


def parse_columns(moves: str) -> list[int]:
    return [int(ch) for ch in moves]


def tie_pattern_disk(row: int, col: int) -> Disk:
    # pairs of rows alternate, so no line of four exists in any direction
    return Disk.X if ((row // 2) + col) % 2 == 0 else Disk.O


@pytest.fixture
def full_tie_board() -> Board:
    board = Board()
    for col in range(board.cols):
        for row in range(board.rows):
            board.add_disk(tie_pattern_disk(row, col), col)
    return board


@pytest.fixture
def empty_bitboard() -> BitBoard:
    return BitBoard()
