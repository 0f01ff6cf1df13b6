# src/four_in_row/types.py

from __future__ import annotations
from enum import Enum
from typing import NewType

Move = NewType("Move", int)   # column index 0..7


class Disk(Enum):
    X = 0
    O = 1
    EMPTY = 2

    def counterpart(self) -> "Disk":
        if self is Disk.X:
            return Disk.O
        if self is Disk.O:
            return Disk.X
        return Disk.EMPTY

    @classmethod
    def parse(cls, raw: str) -> "Disk":
        s = raw.strip().upper()
        if s == "X":
            return cls.X
        if s == "O":
            return cls.O
        raise ValueError("Choose either X or O.")

    def __str__(self) -> str:
        return " " if self is Disk.EMPTY else self.name


class Outcome(Enum):
    X_VICTORY = 0
    O_VICTORY = 1
    TIE = 2
    INCOMPLETE = 3


def victory_for(disk: Disk) -> Outcome:
    return Outcome.X_VICTORY if disk is Disk.X else Outcome.O_VICTORY
