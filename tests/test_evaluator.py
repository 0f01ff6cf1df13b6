from __future__ import annotations

import itertools
import random

import pytest

from four_in_row.core import evaluator


def bit(row: int, col: int) -> int:
    return 1 << (8 * row + col)


def mask_of(cells) -> int:
    m = 0
    for r, c in cells:
        m |= bit(r, c)
    return m


def all_lines() -> list[list[tuple[int, int]]]:
    lines = []
    for r in range(8):
        for c in range(8):
            for dr, dc in ((0, 1), (1, 0), (1, 1), (1, -1)):
                cells = [(r + dr * i, c + dc * i) for i in range(4)]
                if all(0 <= rr < 8 and 0 <= cc < 8 for rr, cc in cells):
                    lines.append(cells)
    return lines


LINES = all_lines()


def brute_force_win(mask: int) -> bool:
    return any(mask & mask_of(line) == mask_of(line) for line in LINES)


def test_line_count():
    # 40 horizontal + 40 vertical + 25 per diagonal direction
    assert len(LINES) == 130


@pytest.mark.parametrize("line", LINES)
def test_every_line_of_four_wins(line):
    assert evaluator.check_win(mask_of(line))


def test_direction_helpers():
    assert evaluator.check_horizontal(mask_of([(3, 2), (3, 3), (3, 4), (3, 5)]))
    assert not evaluator.check_horizontal(mask_of([(3, 2), (4, 2), (5, 2), (6, 2)]))
    assert evaluator.check_vertical(mask_of([(4, 7), (5, 7), (6, 7), (7, 7)]))
    assert evaluator.check_diagonal(mask_of([(0, 0), (1, 1), (2, 2), (3, 3)]))
    assert evaluator.check_diagonal(mask_of([(4, 7), (5, 6), (6, 5), (7, 4)]))


@pytest.mark.parametrize(
    "cells",
    [
        # horizontal run that wraps into the next row
        [(0, 5), (0, 6), (0, 7), (1, 0)],
        [(2, 7), (3, 0), (3, 1), (3, 2)],
        # up-right stride that wraps past column 7
        [(0, 5), (1, 6), (2, 7), (4, 0)],
        [(0, 7), (2, 0), (3, 1), (4, 2)],
        # up-left stride that wraps past column 0
        [(0, 2), (1, 1), (2, 0), (2, 7)],
        [(0, 0), (0, 7), (1, 6), (2, 5)],
    ],
)
def test_wrapped_runs_are_not_wins(cells):
    assert not evaluator.check_win(mask_of(cells))


def test_no_three_cell_mask_wins():
    # exhaustive over every mask with three set bits
    for cells in itertools.combinations(range(64), 3):
        m = (1 << cells[0]) | (1 << cells[1]) | (1 << cells[2])
        assert not evaluator.check_win(m)


def test_random_masks_agree_with_brute_force():
    rng = random.Random(7)
    for _ in range(2000):
        m = 0
        for i in range(64):
            if rng.random() < 0.3:
                m |= 1 << i
        assert evaluator.check_win(m) == brute_force_win(m)


def test_row_mask_excludes_columns_in_every_row():
    m = evaluator.row_mask(0b10000001)
    for r in range(8):
        assert not m & bit(r, 0)
        assert not m & bit(r, 7)
        assert m & bit(r, 3)
    assert m == evaluator.FULL_MASK & ~0x8181818181818181


def test_adjacency_scores():
    assert evaluator.total_adjacency_score(0) == 0
    # single disk has no neighbours
    assert evaluator.total_adjacency_score(bit(3, 3)) == 0
    # run of three: two pairs at weight 1, one triple at weight 2
    assert evaluator.total_adjacency_score(mask_of([(0, 0), (0, 1), (0, 2)])) == 4
    # vertical four: 3 * 1 + 2 * 2 + 1 * 3
    assert evaluator.adjacency_score(mask_of([(r, 5) for r in range(4)]), 8) == 10
    assert evaluator.total_adjacency_score(mask_of([(r, 5) for r in range(4)])) == 10
    assert evaluator.total_adjacency_score(mask_of([(0, 6), (0, 7)])) == 1


def test_horizontal_adjacency_ignores_row_wrap():
    m = mask_of([(0, 7), (1, 0)])
    assert evaluator.horizontal_adjacency_score(m) == 0
    # the plain shift would have counted the pair
    assert evaluator.adjacency_score(m, 1) == 1
