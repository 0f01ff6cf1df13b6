from __future__ import annotations

import pytest

from four_in_row.core.bitboard import BitBoard
from four_in_row.core.board import Board
from four_in_row.types import Disk, Outcome

from conftest import parse_columns, play_columns, tie_pattern_disk


def test_empty_board():
    bb = BitBoard()
    assert bb.locations == [0, 0]
    assert bb.column_heights == [0] * 8
    assert bb.disks_added() == 0
    assert bb.get_state() is Outcome.INCOMPLETE
    assert all(bb.valid_move(c) for c in range(8))


def test_add_disk_sets_bit_and_height():
    bb = BitBoard()
    assert bb.add_disk(Disk.X, 3)
    assert bb.add_disk(Disk.O, 3)
    assert bb.x_locations == 1 << 3
    assert bb.o_locations == 1 << 11
    assert bb.column_heights[3] == 2
    assert bb.get_disk(0, 3) is Disk.X
    assert bb.get_disk(1, 3) is Disk.O
    assert bb.get_disk(2, 3) is Disk.EMPTY


def test_add_disk_to_full_column_fails_without_change():
    bb = play_columns([5] * 8)
    before = bb.copy()
    assert not bb.valid_move(5)
    assert bb.add_disk(Disk.X, 5) is False
    assert bb == before


@pytest.mark.parametrize("disk", [Disk.X, Disk.O])
def test_add_then_pop_restores_every_height(disk):
    bb = BitBoard()
    for col in range(8):
        for height in range(8):
            before = bb.copy()
            assert bb.add_disk(disk, col)
            bb.pop_disk(disk, col)
            assert bb == before
            # grow the column for the next height
            bb.add_disk(tie_pattern_disk(height, col), col)


def test_probe_undoes_move_on_exit_and_on_error():
    bb = play_columns(parse_columns("3344"))
    before = bb.copy()

    with bb.probe(Disk.X, 2) as added:
        assert added
        assert bb.column_heights[2] == 1
    assert bb == before

    with pytest.raises(RuntimeError):
        with bb.probe(Disk.O, 2):
            raise RuntimeError("boom")
    assert bb == before


def test_probe_on_full_column_yields_false():
    bb = play_columns([0] * 8)
    before = bb.copy()
    with bb.probe(Disk.X, 0) as added:
        assert added is False
    assert bb == before


def test_from_board_replays_columns(full_tie_board):
    board = Board()
    play_columns(parse_columns("34435"), board)
    bb = BitBoard.from_board(board)
    assert bb.column_heights == board.column_heights
    for row in range(8):
        for col in range(8):
            assert bb.get_disk(row, col) is board.get_disk(row, col)

    assert BitBoard.from_board(full_tie_board).disks_added() == 64


def test_to_board_round_trip():
    bb = play_columns(parse_columns("01234567012"))
    board = bb.to_board()
    assert board.column_heights == bb.column_heights
    assert BitBoard.from_board(board) == bb


def test_from_masks():
    bb = BitBoard.from_masks(0b0000_0001 | (1 << 8), 0b0000_0010)
    assert bb.column_heights == [2, 1, 0, 0, 0, 0, 0, 0]
    assert bb.get_disk(1, 0) is Disk.X
    assert bb.get_disk(0, 1) is Disk.O


def test_from_masks_rejects_bad_input():
    with pytest.raises(ValueError):
        BitBoard.from_masks(1, 1)
    with pytest.raises(ValueError):
        # disk in row 1 with nothing under it
        BitBoard.from_masks(1 << 9, 0)
    with pytest.raises(ValueError):
        BitBoard.from_masks(1 << 64, 0)


def test_masks_stay_disjoint_and_match_heights():
    bb = play_columns(parse_columns("3434343256701122"))
    assert bb.x_locations & bb.o_locations == 0
    for col in range(8):
        column = sum(1 << (8 * r + col) for r in range(8))
        occupied = (bb.x_locations | bb.o_locations) & column
        assert occupied.bit_count() == bb.column_heights[col]


def test_check_win_reports_winner():
    # X: 0,1,2,3 along the bottom row
    bb = play_columns(parse_columns("0415263"))
    assert bb.check_win() is Outcome.X_VICTORY
    assert bb.get_state() is Outcome.X_VICTORY

    # O: vertical in column 6
    bb = play_columns(parse_columns("0606163"))
    assert bb.check_win() is Outcome.INCOMPLETE
    bb.add_disk(Disk.O, 6)
    assert bb.get_state() is Outcome.O_VICTORY


def test_full_board_without_line_is_tie(full_tie_board):
    bb = BitBoard.from_board(full_tie_board)
    assert bb.check_win() is Outcome.INCOMPLETE
    assert bb.check_tie()
    assert bb.get_state() is Outcome.TIE


def test_full_board_with_line_is_win_not_tie():
    board = Board()
    for col in range(8):
        for row in range(8):
            disk = tie_pattern_disk(row, col)
            if row == 0 and col in (1, 3):
                disk = Disk.X
            board.add_disk(disk, col)
    bb = BitBoard.from_board(board)
    assert bb.check_tie()
    assert bb.get_state() is Outcome.X_VICTORY


def test_adjacency_score_per_disk():
    bb = play_columns(parse_columns("202725"))
    # X stacked three high in column 2
    assert bb.adjacency_score(Disk.X) == 4
    # O at 0 and 7 on the bottom row pair up through the 7-stride wrap
    assert bb.adjacency_score(Disk.O) == 1


def test_str_draws_the_board():
    bb = play_columns(parse_columns("3"))
    text = str(bb)
    lines = text.splitlines()
    assert lines[0].split() == [str(i) for i in range(1, 9)]
    # bottom row is printed last, before the rule
    assert "X" in lines[-2]
    assert "X" not in "".join(lines[1:-2])
