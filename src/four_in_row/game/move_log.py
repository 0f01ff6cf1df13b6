from __future__ import annotations

from pathlib import Path
from typing import Iterable, List

from four_in_row.config import MOVE_LOG_PATH


def write_move_log(moves: Iterable[int], path: str | Path = MOVE_LOG_PATH) -> Path:
    """
    Write the columns a human entered, 1-based, one per line.
    Any previous log at ``path`` is replaced.
    """
    out = Path(path)
    with out.open("w") as f:
        for col in moves:
            f.write(f"{int(col)}\n")
    return out


def read_move_log(path: str | Path = MOVE_LOG_PATH) -> List[int]:
    text = Path(path).read_text()
    return [int(line) for line in text.split() if line.strip()]
