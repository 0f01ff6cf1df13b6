from __future__ import annotations

from typing import List

from four_in_row.ai.search_agent import SearchAgent
from four_in_row.ai.timed_agent import TimedAgent
from four_in_row.config import MOVE_LOG_PATH, SEARCH_DEPTH
from four_in_row.game.controller import run_game
from four_in_row.game.move_log import write_move_log
from four_in_row.types import Disk
from four_in_row.ui.human import HumanAgent
from four_in_row.ui.prompts import ask_disk


def make_ai(depth: int = SEARCH_DEPTH) -> TimedAgent:
    return TimedAgent(SearchAgent(name=f"Negamax (d{depth})", depth=depth))


def _report(ais: List[TimedAgent], moves: List[int]) -> None:
    for ai in ais:
        print(f"Average time taken by {ai.name}: {ai.average_time_ns():.0f} ns")
    if moves:
        path = write_move_log(moves, MOVE_LOG_PATH)
        print(f"Saved {len(moves)} moves to {path}")


def run_menu() -> None:
    print("welcome to four-in-row game!")
    print("Select mode:")
    print("1) Human vs AI")
    print("2) Human vs Human")
    print("3) AI vs AI")

    choice = input("Choice: ").strip()
    moves: List[int] = []

    if choice == "2":
        run_game(HumanAgent(), HumanAgent(), human_moves=moves)
        _report([], moves)
        return

    if choice == "3":
        ai_x, ai_o = make_ai(), make_ai()
        run_game(ai_x, ai_o, show_thinking=False)
        _report([ai_x, ai_o], moves)
        return

    if choice != "1":
        print("\nInvalid choice. Defaulting to Human vs AI.\n")

    selection = ask_disk()
    print(f"You've selected to play as {selection}. Begin!")
    ai = make_ai()
    if selection is Disk.X:
        run_game(HumanAgent(), ai, human_moves=moves)
    else:
        run_game(ai, HumanAgent(), human_moves=moves)
    _report([ai], moves)
