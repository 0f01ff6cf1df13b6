from __future__ import annotations

import pytest

from four_in_row.types import Disk, Outcome, victory_for
from four_in_row.ui.prompts import parse_disk, parse_move


def test_counterpart():
    assert Disk.X.counterpart() is Disk.O
    assert Disk.O.counterpart() is Disk.X
    assert Disk.EMPTY.counterpart() is Disk.EMPTY
    assert Disk.X.counterpart().counterpart() is Disk.X


def test_disk_text():
    assert str(Disk.X) == "X"
    assert str(Disk.O) == "O"
    assert str(Disk.EMPTY) == " "


def test_victory_for():
    assert victory_for(Disk.X) is Outcome.X_VICTORY
    assert victory_for(Disk.O) is Outcome.O_VICTORY


@pytest.mark.parametrize("raw, expected", [("X", Disk.X), (" o ", Disk.O), ("x\n", Disk.X)])
def test_parse_disk(raw, expected):
    assert parse_disk(raw) is expected


@pytest.mark.parametrize("raw", ["", "Y", "XO", "1"])
def test_parse_disk_rejects(raw):
    with pytest.raises(ValueError):
        parse_disk(raw)


def test_parse_move():
    assert parse_move("1", 8) == 0
    assert parse_move(" 8 ", 8) == 7
    assert parse_move("q", 8) is None
    assert parse_move("EXIT", 8) is None


@pytest.mark.parametrize("raw", ["0", "9", "abc", "-1", "2.5"])
def test_parse_move_rejects(raw):
    with pytest.raises(ValueError):
        parse_move(raw, 8)
