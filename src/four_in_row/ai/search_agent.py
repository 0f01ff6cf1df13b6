from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Optional
import time

from four_in_row.config import COLS
from four_in_row.core import evaluator
from four_in_row.core.bitboard import BitBoard
from four_in_row.game.state import GameState
from four_in_row.types import Disk, Move, Outcome, victory_for

# default search depth
DEFAULT_DEPTH = 10
# worst possible score; also the score of a position with no legal move
ALPHA = -(1 << 30)
# best possible score, reported as soon as an immediate win exists
BETA = 1 << 30


def alternating_column(index: int) -> int:
    """
    Map 0..7 to columns alternating away from the center:
    4, 3, 5, 2, 6, 1, 7, 0.
    """
    return 4 + (1 - 2 * (index % 2)) * (index + 1) // 2


COLUMN_ORDER = tuple(alternating_column(i) for i in range(COLS))


@dataclass(slots=True)
class SearchAgent:
    """
    Negamax with alpha-beta pruning over a shared BitBoard.

    The agent is bound to a board and the token it plays. Hypothetical moves
    are made on that board and undone before any method returns, so callers
    see the board exactly as they left it.
    """
    board: Optional[BitBoard] = None
    player: Disk = Disk.X
    name: str = "Negamax AI"
    depth: int = DEFAULT_DEPTH
    verbose: bool = True

    # Stats
    last_info: dict = field(default_factory=dict)
    nodes: int = 0

    def __post_init__(self) -> None:
        if self.depth < 1:
            raise ValueError("depth must be >= 1")

    def _require_board(self) -> BitBoard:
        if self.board is None:
            raise ValueError("Agent has no board.")
        return self.board

    def is_victory(self, state: Outcome, player: Optional[Disk] = None) -> bool:
        p = self.player if player is None else player
        if p is Disk.EMPTY:
            return False
        return state is victory_for(p)

    def current_winning_moves(self, player: Optional[Disk] = None) -> List[int]:
        """Columns, ascending, where ``player`` (default: the bound token) wins at once."""
        p = self.player if player is None else player
        board = self._require_board()
        winning: List[int] = []
        for col in range(COLS):
            with board.probe(p, col) as added:
                if added and evaluator.check_win(board.get_locations(p)):
                    winning.append(col)
        return winning

    def _can_win_now(self, player: Disk) -> bool:
        board = self.board
        for col in range(COLS):
            with board.probe(player, col) as added:
                if added and evaluator.check_win(board.get_locations(player)):
                    return True
        return False

    def evaluate_position(
        self,
        depth: Optional[int] = None,
        alpha: int = ALPHA,
        beta: int = BETA,
    ) -> int:
        """
        Score of the current position for the bound player, before their move.

        ``alpha`` is the least we are already guaranteed elsewhere, ``beta`` the
        most the opponent will allow. ``depth`` counts the plies still searched
        after our move; at zero the adjacency heuristic is returned.
        """
        d = self.depth if depth is None else depth
        self._require_board()
        return self._negamax(self.player, d, alpha, beta)

    def _negamax(self, player: Disk, depth: int, alpha: int, beta: int) -> int:
        self.nodes += 1
        board = self.board

        if self._can_win_now(player):
            return BETA

        opponent = player.counterpart()
        if depth <= 0:
            return board.adjacency_score(player) - board.adjacency_score(opponent)

        score = ALPHA
        for col in COLUMN_ORDER:
            # the opponent will never let us reach this position
            if alpha >= beta:
                break
            if not board.valid_move(col):
                continue

            with board.probe(player, col):
                # +1 so that a loss further away scores better than a near one
                child = 1 - self._negamax(opponent, depth - 1, -beta, 1 - alpha)

            if child > alpha:
                alpha = child
            if child > score:
                score = child

        return score

    def choose_column(self) -> int:
        self.nodes = 0
        board = self._require_board()
        me = self.player
        opponent = me.counterpart()

        # take a win, otherwise block the first threat found
        for side, reason in ((me, "win"), (opponent, "block")):
            winning = self.current_winning_moves(side)
            if winning:
                self.last_info = {
                    "move_col": winning[0] + 1,
                    "depth": 0,
                    "nodes": self.nodes,
                    "reason": reason,
                    "eval": BETA if side is me else None,
                    "scores": None,
                }
                return winning[0]

        best_col = 4
        alpha = ALPHA
        # an illegal column scores below every legal one
        scores = [ALPHA - 1] * COLS

        for col in COLUMN_ORDER:
            if not board.valid_move(col):
                continue
            with board.probe(me, col):
                score = 1 - self._negamax(opponent, self.depth - 1, -BETA, 1 - alpha)
            # alpha carries over between sibling columns
            if score > alpha:
                alpha = score
            scores[col] = score
            if score > scores[best_col]:
                best_col = col

        if self.verbose:
            print("scores: " + " ".join(str(s) for s in scores))

        self.last_info = {
            "move_col": best_col + 1,
            "depth": self.depth,
            "nodes": self.nodes,
            "reason": "search",
            "eval": scores[best_col],
            "scores": scores,
        }
        return best_col

    def choose_move(self, state: GameState) -> Move:
        if not state.board.valid_moves():
            raise ValueError("No valid moves.")

        self.board = BitBoard.from_board(state.board)
        self.player = state.current

        start = time.perf_counter()
        col = self.choose_column()
        elapsed = time.perf_counter() - start
        self.last_info["time_ms"] = max(1, int(elapsed * 1000))

        return Move(col)
