from __future__ import annotations
from typing import Optional, Iterable, Tuple, Set

from four_in_row.config import CLEAR_SCREEN
from four_in_row.core.board import Board
from four_in_row.types import Disk
from four_in_row.ui.colors import c, BOLD, DIM, FG_CYAN, FG_GRAY, FG_RED, FG_YELLOW, REVERSE, RESET

Coord = Tuple[int, int]


def _piece(cell: Disk, color: bool) -> str:
    if cell is Disk.EMPTY:
        return c("·", FG_GRAY) if color else "·"
    if not color:
        return str(cell)
    return c(str(cell), FG_RED if cell is Disk.X else FG_YELLOW)


def board_text(board: Board, highlight: Optional[Iterable[Coord]] = None, color: bool = False) -> str:
    """
    Text picture of the board, top row first, with 1-based column numbers.
    """
    hl: Set[Coord] = set(highlight) if highlight else set()
    dim = (lambda s: c(s, DIM)) if color else (lambda s: s)

    lines = [dim("   " + " ".join(str(i + 1) for i in range(board.cols)))]
    for r in range(board.rows - 1, -1, -1):
        parts = []
        for cidx in range(board.cols):
            p = _piece(board.grid[r][cidx], color)
            if color and (r, cidx) in hl:
                p = f"{REVERSE}{p}{RESET}"
            parts.append(p)
        lines.append(" | " + " ".join(parts) + " |")

    lines.append(dim("   " + "—" * (2 * board.cols - 1)))
    return "\n".join(lines)


def clear_screen() -> None:
    if CLEAR_SCREEN:
        print("\033[2J\033[H", end="")


def render(board: Board, status: str = "", highlight: Optional[Iterable[Coord]] = None) -> None:
    clear_screen()

    print(c("FOUR IN A ROW", BOLD))
    if status:
        print(c(status, FG_CYAN))
    else:
        print()

    print(board_text(board, highlight=highlight, color=True))
    print(c(f"   Enter 1-{board.cols} to drop. Enter q to quit.", DIM))
