"""
Flood-fill reveal of zero-adjacency regions.
"""
from typing import AbstractSet, Dict, List, Set

from .board import Board, Coordinate
from .cell import TileState
from .mines import adjacent_mine_count, neighbors


def propagate_reveal(
    board: Board, start: Coordinate, mines: AbstractSet[Coordinate]
) -> Board:
    """
    Uncover ``start`` and cascade through empty neighbors.

    Tiles with no adjacent mines expand to every covered neighbor;
    numbered tiles are uncovered but stop the cascade. Flagged and
    exploded tiles are left alone. Uses an explicit stack so large
    open regions do not hit the recursion limit.

    Args:
        board: Board to reveal on; it is not modified.
        start: (row, col) of the clicked tile.
        mines: Mine positions for this session.

    Returns:
        New board with the revealed region uncovered.
    """
    changes: Dict[Coordinate, TileState] = {start: TileState.UNCOVERED}
    visited: Set[Coordinate] = {start}
    stack: List[Coordinate] = [start]

    while stack:
        current = stack.pop()
        if adjacent_mine_count(current, mines) != 0:
            continue
        for neighbor in neighbors(current, board.rows, board.cols):
            if neighbor in visited or board[neighbor] != TileState.COVERED:
                continue
            visited.add(neighbor)
            changes[neighbor] = TileState.UNCOVERED
            stack.append(neighbor)

    return board.with_states(changes)
