from __future__ import annotations

import argparse
import csv
import random
import time
from pathlib import Path
from typing import Dict, List, Sequence, Tuple

from four_in_row.ai.search_agent import SearchAgent
from four_in_row.config import RESULTS_DIR
from four_in_row.core.board import Board
from four_in_row.core.rules import get_state
from four_in_row.game.state import GameState
from four_in_row.types import Disk, Move, Outcome

CSV_COLUMNS = [
    "game", "ply", "player", "depth", "column",
    "time_ms", "nodes", "best_score", "reason", "outcome",
]

Row = Dict[str, object]


def random_opening(seed: int, plies: int = 2) -> List[Move]:
    rng = random.Random(seed)
    board = Board()
    disk = Disk.X
    opening: List[Move] = []
    for _ in range(plies):
        move = rng.choice(board.valid_moves())
        board.drop(move, disk)
        disk = disk.counterpart()
        opening.append(move)
    return opening


def play_headless(
    agent_x: SearchAgent,
    agent_o: SearchAgent,
    opening: Sequence[Move] = (),
    game: int = 0,
) -> Tuple[Outcome, List[Row]]:
    """
    Play one game without rendering.
    Returns the outcome and one row per AI decision.
    """
    state = GameState(board=Board(), current=Disk.X, last_status="")

    for move in opening:
        state.board.drop(move, state.current)
        state.current = state.current.counterpart()

    rows: List[Row] = []
    while True:
        outcome = get_state(state.board)
        if outcome is not Outcome.INCOMPLETE:
            for row in rows:
                row["outcome"] = outcome.name
            return outcome, rows

        agent = agent_x if state.current is Disk.X else agent_o
        move = agent.choose_move(state)
        info = agent.last_info

        rows.append({
            "game": game,
            "ply": sum(state.board.column_heights) + 1,
            "player": str(state.current),
            "depth": agent.depth,
            "column": int(move),
            "time_ms": int(info.get("time_ms", 0)),
            "nodes": int(info.get("nodes", 0)),
            "best_score": info.get("eval"),
            "reason": info.get("reason"),
        })

        state.board.drop(move, state.current)
        state.current = state.current.counterpart()


def run_selfplay(
    depths: Sequence[int] = (2, 4),
    games: int = 2,
    seed: int = 1234,
    out_dir: str | Path = RESULTS_DIR,
) -> Path:
    """
    Play every ordered pairing of ``depths`` ``games`` times and export the moves.
    """
    all_rows: List[Row] = []
    tally = {o: 0 for o in Outcome}
    wins_by_depth = {d: 0 for d in depths}
    game = 0

    for dx in depths:
        for do in depths:
            for g in range(games):
                ax = SearchAgent(name=f"Negamax X (d{dx})", depth=dx, verbose=False)
                ao = SearchAgent(name=f"Negamax O (d{do})", depth=do, verbose=False)
                outcome, rows = play_headless(ax, ao, random_opening(seed + game), game=game)
                tally[outcome] += 1
                if ax.is_victory(outcome, Disk.X):
                    wins_by_depth[dx] += 1
                elif ao.is_victory(outcome, Disk.O):
                    wins_by_depth[do] += 1
                all_rows.extend(rows)
                print(f"Game {game + 1}: d{dx} vs d{do} -> {outcome.name} ({len(rows)} AI moves)")
                game += 1

    out = Path(out_dir)
    out.mkdir(parents=True, exist_ok=True)
    ts = time.strftime("%Y%m%d_%H%M%S")
    out_path = out / f"selfplay_results_{ts}.csv"

    with open(out_path, "w", newline="") as f:
        w = csv.DictWriter(f, fieldnames=CSV_COLUMNS)
        w.writeheader()
        for row in all_rows:
            w.writerow(row)

    print("\n=== SELF-PLAY RESULTS ===")
    print(f"X wins:    {tally[Outcome.X_VICTORY]}")
    print(f"O wins:    {tally[Outcome.O_VICTORY]}")
    print(f"Ties:      {tally[Outcome.TIE]}")
    for d, wins in wins_by_depth.items():
        print(f"Depth {d} wins: {wins}")
    print(f"Wrote CSV: {out_path}")
    return out_path


def positive_depth(raw: str) -> int:
    depth = int(raw)
    if depth < 1:
        raise argparse.ArgumentTypeError("depth must be >= 1")
    return depth


def build_argparser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(description="Play negamax agents against each other and export per-move timings.")
    ap.add_argument("--depths", type=positive_depth, nargs="+", default=[2, 4], help="Search depths to pair up")
    ap.add_argument("--games", type=int, default=2, help="Games per ordered pairing")
    ap.add_argument("--seed", type=int, default=1234, help="Seed for the random two-ply openings")
    ap.add_argument("--out-dir", type=str, default=RESULTS_DIR, help="Directory for selfplay_results_*.csv")
    return ap


def main(argv: list[str] | None = None) -> int:
    args = build_argparser().parse_args(argv)
    run_selfplay(args.depths, args.games, args.seed, args.out_dir)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
