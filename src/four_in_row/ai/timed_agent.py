from __future__ import annotations

import time
from typing import Callable

from four_in_row.ai.base import Agent
from four_in_row.game.state import GameState
from four_in_row.types import Move


class TimedAgent:
    """
    Wraps another agent and reports how long each decision took.

    CPU time is accumulated across moves so an average can be printed at the
    end of a game. The wrapped agent is untouched.
    """

    def __init__(
        self,
        agent: Agent,
        clock: Callable[[], float] = time.process_time,
        wall: Callable[[], float] = time.time,
        out: Callable[[str], None] = print,
    ) -> None:
        self.agent = agent
        self.clock = clock
        self.wall = wall
        self.out = out
        self.moves = 0
        self.total_time = 0.0  # seconds of CPU time

    @property
    def name(self) -> str:
        return self.agent.name

    @property
    def last_info(self) -> dict:
        return getattr(self.agent, "last_info", None) or {}

    def choose_move(self, state: GameState) -> Move:
        self.out(f"started planning move at: {time.ctime(self.wall())}")
        start = self.clock()

        move = self.agent.choose_move(state)
        self.moves += 1

        taken = self.clock() - start
        self.out(f"finished planning move at: {time.ctime(self.wall())}")
        self.total_time += taken
        self.out(f"took {taken:.6f} seconds")
        return move

    def average_time_ns(self) -> float:
        """Average CPU time per decision, in nanoseconds."""
        if not self.moves:
            return 0.0
        return self.total_time * 1e9 / self.moves
