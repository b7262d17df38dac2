"""
Cell module for Minesweeper game.

Defines the per-tile display state and the read-only tile view that
renderers and agents consume.
"""
from dataclasses import dataclass
from enum import Enum, auto


# ============================================================================
# Constants
# ============================================================================

class TileState(Enum):
    """Possible visual states of a tile."""

    COVERED = auto()
    UNCOVERED = auto()
    FLAGGED = auto()
    EXPLODED = auto()


# Observation codes shared with the environment adapter
OBS_COVERED = -1
OBS_FLAGGED = -2
OBS_MINE = 9


# ============================================================================
# Tile View
# ============================================================================

@dataclass(frozen=True)
class Tile:
    """
    Read-only view of a single tile in a session.

    Attributes:
        state: Current display state.
        is_mine: Whether a mine sits under this tile. Only meaningful
            for debug overlays or the post-loss reveal.
        adjacent_mines: Count of mines in neighboring tiles (0-8).
    """

    state: TileState = TileState.COVERED
    is_mine: bool = False
    adjacent_mines: int = 0

    @property
    def is_covered(self) -> bool:
        """Check if tile is covered."""
        return self.state == TileState.COVERED

    @property
    def is_uncovered(self) -> bool:
        """Check if tile is uncovered."""
        return self.state == TileState.UNCOVERED

    @property
    def is_flagged(self) -> bool:
        """Check if tile is flagged."""
        return self.state == TileState.FLAGGED

    @property
    def is_exploded(self) -> bool:
        """Check if tile is the mine that ended the game."""
        return self.state == TileState.EXPLODED

    def to_observation(self) -> int:
        """
        Convert tile to observation value.

        Returns:
            -1: Covered tile
            -2: Flagged tile
            0-8: Uncovered tile with adjacent mine count
            9: Uncovered or exploded mine
        """
        if self.state == TileState.COVERED:
            return OBS_COVERED
        if self.state == TileState.FLAGGED:
            return OBS_FLAGGED
        if self.is_mine:
            return OBS_MINE
        return self.adjacent_mines
