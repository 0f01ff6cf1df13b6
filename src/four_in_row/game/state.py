from __future__ import annotations
from dataclasses import dataclass

from four_in_row.core.board import Board
from four_in_row.types import Disk


@dataclass(slots=True)
class GameState:
    board: Board
    current: Disk
    last_status: str = "Player X starts."
