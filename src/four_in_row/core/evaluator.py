"""
Win detection and the adjacency heuristic over packed 64-bit disk masks.

Bit ``8 * row + col`` stands for the cell ``(row, col)``, row 0 at the bottom,
so moving one cell right is a stride of 1, up is 8, up-right is 9 and up-left
is 7. Right shifts drop bits off the low end; anything that could bleed from
the end of one row into the start of the next is masked out.
"""
from __future__ import annotations

FULL_MASK = (1 << 64) - 1


def row_mask(row_exclusion_bits: int) -> int:
    """Repeat an 8-bit exclusion pattern over all rows and invert it."""
    exclusion = row_exclusion_bits & 0xFF
    for _ in range(7):
        exclusion |= exclusion << 8
    return ~exclusion & FULL_MASK


# columns 5..7 cannot start a run of four going right
HORIZONTAL_4_CHAIN_MASK = row_mask(0b11100000)
UP_RIGHT_4_CHAIN_MASK = HORIZONTAL_4_CHAIN_MASK
# columns 0..2 cannot start a run of four going up-left
UP_LEFT_4_CHAIN_MASK = row_mask(0b00000111)
# column 7 has no right-hand neighbour in its own row
HORIZONTAL_ADJACENCY_MASK = row_mask(1 << 7)


def check_vertical(mask: int) -> bool:
    m = mask & (mask >> 8)
    m &= m >> 16
    return m != 0


def check_horizontal(mask: int) -> bool:
    m = mask & (mask >> 1)
    m &= m >> 2
    m &= HORIZONTAL_4_CHAIN_MASK
    return m != 0


def check_diagonal(mask: int) -> bool:
    right = mask & (mask >> 9)
    right &= right >> 18
    if right & UP_RIGHT_4_CHAIN_MASK:
        return True

    left = mask & (mask >> 7)
    left &= left >> 14
    return (left & UP_LEFT_4_CHAIN_MASK) != 0


def check_win(mask: int) -> bool:
    return check_diagonal(mask) or check_horizontal(mask) or check_vertical(mask)


def adjacency_score(mask: int, shift: int) -> int:
    """
    Weighted count of runs along one stride.

    Each pass keeps the bits that still have a neighbour ``shift`` away, so a
    run of length L survives L - 1 passes and pass k is worth k points per bit.
    """
    score = 0
    k = 1
    while mask:
        mask &= mask >> shift
        score += k * mask.bit_count()
        k += 1
    return score


def horizontal_adjacency_score(mask: int) -> int:
    score = 0
    k = 1
    while mask:
        mask &= mask >> 1
        mask &= HORIZONTAL_ADJACENCY_MASK
        score += k * mask.bit_count()
        k += 1
    return score


def total_adjacency_score(mask: int) -> int:
    return (
        horizontal_adjacency_score(mask)
        + adjacency_score(mask, 8)
        + adjacency_score(mask, 7)
        + adjacency_score(mask, 9)
    )
