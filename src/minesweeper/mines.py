"""
Mine placement and adjacency counting.
"""
import random
from typing import AbstractSet, FrozenSet, List, Optional, Tuple

from .board import ConfigurationError, Coordinate, validate_dimensions


MineSet = FrozenSet[Coordinate]

_OFFSETS: Tuple[Coordinate, ...] = tuple(
    (delta_row, delta_col)
    for delta_row in (-1, 0, 1)
    for delta_col in (-1, 0, 1)
    if (delta_row, delta_col) != (0, 0)
)


# ============================================================================
# Mine Generator
# ============================================================================

def generate_mines(
    width: int,
    height: int,
    mine_count: int,
    avoid: Optional[Coordinate] = None,
    rng: Optional[random.Random] = None,
    keep_clear: AbstractSet[Coordinate] = frozenset(),
) -> MineSet:
    """
    Place mines uniformly at random.

    Coordinates are drawn one at a time until ``mine_count`` distinct
    positions are collected. When the finished layout contains
    ``avoid`` it is thrown away and drawn again from scratch. Draws
    landing on ``keep_clear`` are skipped individually.

    Args:
        width: Number of columns.
        height: Number of rows.
        mine_count: Number of distinct mines to place.
        avoid: Optional (row, col) position that must stay mine-free.
        rng: Random source; defaults to the ``random`` module.
        keep_clear: Extra positions that never receive a mine.

    Returns:
        Frozen set of (row, col) mine positions.

    Raises:
        ConfigurationError: If the board cannot hold ``mine_count``
            mines and still leave a safe tile.
    """
    validate_dimensions(width, height, mine_count)
    blocked = {coord for coord in keep_clear if coord != avoid}
    free = width * height - len(blocked) - (1 if avoid is not None else 0)
    if mine_count > free:
        raise ConfigurationError(
            f"Cannot place {mine_count} mines around {len(blocked)} cleared tiles"
        )
    source = rng if rng is not None else random

    while True:
        mines = set()
        while len(mines) < mine_count:
            coord = (source.randrange(height), source.randrange(width))
            if coord not in blocked:
                mines.add(coord)
        if avoid is None or avoid not in mines:
            return frozenset(mines)


# ============================================================================
# Adjacency Calculator
# ============================================================================

def neighbors(coord: Coordinate, rows: int, cols: int) -> List[Coordinate]:
    """
    Get valid neighboring positions.

    Args:
        coord: (row, col) of the center tile.
        rows: Board height.
        cols: Board width.

    Returns:
        In-bounds (row, col) tuples around ``coord``.
    """
    row, col = coord
    result = []
    for delta_row, delta_col in _OFFSETS:
        new_row = row + delta_row
        new_col = col + delta_col
        if 0 <= new_row < rows and 0 <= new_col < cols:
            result.append((new_row, new_col))
    return result


def adjacent_mine_count(coord: Coordinate, mines: AbstractSet[Coordinate]) -> int:
    """Count mines among the eight tiles surrounding ``coord``."""
    row, col = coord
    return sum(
        1 for delta_row, delta_col in _OFFSETS
        if (row + delta_row, col + delta_col) in mines
    )
