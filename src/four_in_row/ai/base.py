from __future__ import annotations
from typing import Protocol

from four_in_row.game.state import GameState
from four_in_row.types import Move


class Agent(Protocol):
    name: str

    def choose_move(self, state: GameState) -> Move:
        ...
