from __future__ import annotations

from four_in_row.types import Move
from four_in_row.game.state import GameState


class HumanAgent:
    name = "Human"

    def choose_move(self, state: GameState) -> Move:
        raise RuntimeError("HumanAgent moves are read by the game loop, not chosen.")
