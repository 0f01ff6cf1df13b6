from __future__ import annotations
from typing import Optional, List, Tuple

from four_in_row.config import CONNECT_N
from four_in_row.types import Disk, Outcome, victory_for
from four_in_row.core.board import Board

Coord = Tuple[int, int]  # (row, col)

# (d_row, d_col): vertical, horizontal, up-right, up-left
_DIRECTIONS: Tuple[Coord, ...] = ((1, 0), (0, 1), (1, 1), (1, -1))


def check_winner_with_line(board: Board) -> Optional[Tuple[Disk, List[Coord]]]:
    g = board.grid

    for r in range(board.rows):
        for c in range(board.cols):
            p = g[r][c]
            if p is Disk.EMPTY:
                continue
            for dr, dc in _DIRECTIONS:
                end_r = r + dr * (CONNECT_N - 1)
                end_c = c + dc * (CONNECT_N - 1)
                if not (0 <= end_r < board.rows and 0 <= end_c < board.cols):
                    continue
                line = [(r + dr * i, c + dc * i) for i in range(CONNECT_N)]
                if all(g[lr][lc] is p for lr, lc in line):
                    return p, line

    return None


def check_winner(board: Board) -> Optional[Disk]:
    res = check_winner_with_line(board)
    return res[0] if res else None


def is_draw(board: Board) -> bool:
    return board.is_full() and check_winner(board) is None


def get_state(board: Board) -> Outcome:
    # A full board whose last disk completed a line is a win, not a tie
    w = check_winner(board)
    if w is not None:
        return victory_for(w)
    if board.is_full():
        return Outcome.TIE
    return Outcome.INCOMPLETE
