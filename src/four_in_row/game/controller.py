from __future__ import annotations

from typing import Callable, List, Optional

from four_in_row.ai.base import Agent
from four_in_row.core.board import Board
from four_in_row.core.rules import check_winner_with_line, get_state
from four_in_row.game.state import GameState
from four_in_row.types import Disk, Move, Outcome
from four_in_row.ui.effects import ai_thinking
from four_in_row.ui.prompts import parse_move
from four_in_row.ui.render import render

VICTORY_MESSAGES = {
    Outcome.X_VICTORY: "Player 1 (X) wins!",
    Outcome.O_VICTORY: "Player 2 (O) wins!",
    Outcome.TIE: "The game is a tie!",
}


def is_human(agent: Agent) -> bool:
    return getattr(agent, "name", None) == "Human"


def _agent_name(agent: Agent, fallback: str) -> str:
    name = getattr(agent, "name", None)
    if not name:
        return fallback
    return str(name)


def _status_with_agents(status: str, agent_x: Agent, agent_o: Agent, current: Disk) -> str:
    x_name = _agent_name(agent_x, "Player X")
    o_name = _agent_name(agent_o, "Player O")

    header = f"X: {x_name} | O: {o_name} | Turn: {current}"
    if status:
        return f"{header}\n{status}"
    return header


def final_message(outcome: Outcome, agent_x: Agent, agent_o: Agent) -> str:
    """
    Victory line, followed by "You win!"/"You lose!" when exactly one side is human.
    """
    msg = VICTORY_MESSAGES[outcome]
    if outcome is Outcome.TIE or is_human(agent_x) == is_human(agent_o):
        return msg
    human_side = Disk.X if is_human(agent_x) else Disk.O
    human_won = (outcome is Outcome.X_VICTORY) == (human_side is Disk.X)
    return f"{msg}\n{'You win!' if human_won else 'You lose!'}"


def _describe_ai_move(agent: Agent, move: Move) -> str:
    info = getattr(agent, "last_info", None)
    if not info:
        return f"{agent.name} chose {int(move) + 1}"
    parts = [f"{agent.name} chose {int(move) + 1}"]
    if info.get("reason") in {"win", "block"}:
        parts.append(str(info["reason"]))
    else:
        parts.append(f"d={info.get('depth')}")
        parts.append(f"eval={info.get('eval')}")
    parts.append(f"nodes={info.get('nodes')}")
    if "time_ms" in info:
        parts.append(f"{info['time_ms']}ms")
    return " | ".join(parts)


def run_game(
    agent_x: Agent,
    agent_o: Agent,
    show_thinking: bool = True,
    human_moves: Optional[List[int]] = None,
    read: Callable[[str], str] = input,
) -> Optional[Outcome]:
    """
    Play one game to the end and return its outcome, or None if a human quit.

    Columns entered by humans are appended, 1-based, to ``human_moves``.
    """
    state = GameState(board=Board(), current=Disk.X, last_status="Player X starts.")

    while True:
        render(
            state.board,
            _status_with_agents(state.last_status, agent_x, agent_o, state.current),
        )

        outcome = get_state(state.board)
        if outcome is not Outcome.INCOMPLETE:
            w = check_winner_with_line(state.board)
            render(
                state.board,
                _status_with_agents(final_message(outcome, agent_x, agent_o), agent_x, agent_o, state.current),
                highlight=w[1] if w else None,
            )
            return outcome

        current_agent = agent_x if state.current is Disk.X else agent_o

        try:
            if is_human(current_agent):
                raw = read(f"Player {state.current} move: ")
                move = parse_move(raw, state.board.cols)
                if move is None:
                    render(
                        state.board,
                        _status_with_agents("Game quit.", agent_x, agent_o, state.current),
                    )
                    return None

                state.board.drop(move, state.current)
                if human_moves is not None:
                    human_moves.append(int(move) + 1)
                state.last_status = f"Player {state.current} chose {int(move) + 1}"

            else:
                if show_thinking:
                    ai_thinking(f"{current_agent.name}")

                move = current_agent.choose_move(state)
                state.board.drop(move, state.current)
                state.last_status = _describe_ai_move(current_agent, move)

            state.current = state.current.counterpart()
            state.last_status += f" | Next: Player {state.current}"

        except ValueError as e:
            state.last_status = str(e)
