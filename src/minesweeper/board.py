"""
Board module for Minesweeper game.

Holds the difficulty configuration and the immutable tile grid.
Every update returns a new Board that shares untouched rows with the
previous one, so older boards stay valid snapshots.
"""
from dataclasses import dataclass, field
from typing import Dict, Iterable, Iterator, List, Mapping, Tuple

from .cell import TileState


Coordinate = Tuple[int, int]
Grid = Tuple[Tuple[TileState, ...], ...]


# ============================================================================
# Configuration
# ============================================================================

class ConfigurationError(ValueError):
    """Raised when a difficulty cannot produce a playable board."""


@dataclass(frozen=True)
class Difficulty:
    """
    Configuration for a Minesweeper board.

    Attributes:
        rows: Number of rows.
        cols: Number of columns.
        mines: Total mines to place.
    """

    rows: int = 8
    cols: int = 8
    mines: int = 10

    def __post_init__(self) -> None:
        """Validate configuration after initialization."""
        validate_dimensions(self.cols, self.rows, self.mines)

    @property
    def total_tiles(self) -> int:
        """Number of tiles on the board."""
        return self.rows * self.cols

    @property
    def safe_tiles(self) -> int:
        """Number of tiles that must be uncovered to win."""
        return self.total_tiles - self.mines

    @classmethod
    def from_name(cls, name: str) -> "Difficulty":
        """Look up a preset difficulty by name."""
        try:
            return LEVELS[name.lower()]
        except KeyError:
            choices = ", ".join(sorted(LEVELS))
            raise ConfigurationError(
                f"Unknown difficulty {name!r} (choose from {choices})"
            ) from None


def validate_dimensions(width: int, height: int, mine_count: int) -> None:
    """
    Ensure a board of this size can hold the requested mines.

    Raises:
        ConfigurationError: If the values would make mine placement
            impossible or non-terminating.
    """
    if width < 1 or height < 1:
        raise ConfigurationError("Board dimensions must be positive")
    if mine_count < 0:
        raise ConfigurationError("Number of mines cannot be negative")
    max_mines = width * height - 1
    if mine_count > max_mines:
        raise ConfigurationError(f"Too many mines (max {max_mines})")


# Preset difficulty levels
BEGINNER = Difficulty(8, 8, 10)
INTERMEDIATE = Difficulty(16, 16, 40)
EXPERT = Difficulty(16, 30, 99)

LEVELS: Dict[str, Difficulty] = {
    "beginner": BEGINNER,
    "intermediate": INTERMEDIATE,
    "expert": EXPERT,
}


# ============================================================================
# Board Class
# ============================================================================

def _zero_counts() -> Dict[TileState, int]:
    return {state: 0 for state in TileState}


@dataclass(frozen=True)
class Board:
    """
    Immutable grid of tile states.

    Per-state tile counts are carried along and adjusted on every
    update instead of being recomputed from the grid.
    """

    rows: int
    cols: int
    _grid: Grid = field(repr=False)
    _counts: Mapping[TileState, int] = field(
        default_factory=_zero_counts, repr=False, compare=False
    )

    @classmethod
    def covered(cls, rows: int, cols: int) -> "Board":
        """Create a board with every tile covered."""
        row = (TileState.COVERED,) * cols
        counts = _zero_counts()
        counts[TileState.COVERED] = rows * cols
        return cls(rows, cols, (row,) * rows, counts)

    # ========================================================================
    # Queries
    # ========================================================================

    def in_bounds(self, coord: Coordinate) -> bool:
        """Check if position is within board bounds."""
        row, col = coord
        return 0 <= row < self.rows and 0 <= col < self.cols

    def __getitem__(self, coord: Coordinate) -> TileState:
        row, col = coord
        if not self.in_bounds(coord):
            raise IndexError(f"Coordinate {coord} outside {self.rows}x{self.cols} board")
        return self._grid[row][col]

    def __iter__(self) -> Iterator[Tuple[Coordinate, TileState]]:
        for row_index, row in enumerate(self._grid):
            for col_index, state in enumerate(row):
                yield (row_index, col_index), state

    def count(self, state: TileState) -> int:
        """Number of tiles currently in ``state``."""
        return self._counts[state]

    def scan_count(self, state: TileState) -> int:
        """Count tiles in ``state`` by walking the whole grid."""
        return sum(row.count(state) for row in self._grid)

    @property
    def uncovered_count(self) -> int:
        return self._counts[TileState.UNCOVERED]

    @property
    def flagged_count(self) -> int:
        return self._counts[TileState.FLAGGED]

    @property
    def exploded_count(self) -> int:
        return self._counts[TileState.EXPLODED]

    def coords_in(self, state: TileState) -> List[Coordinate]:
        """List every coordinate whose tile is in ``state``."""
        return [coord for coord, tile in self if tile == state]

    def to_rows(self) -> List[List[TileState]]:
        """Return a mutable copy of the grid."""
        return [list(row) for row in self._grid]

    # ========================================================================
    # Updates
    # ========================================================================

    def with_states(self, changes: Mapping[Coordinate, TileState]) -> "Board":
        """
        Return a new board with the given tiles replaced.

        Only the rows touched by ``changes`` are copied.

        Args:
            changes: Mapping of coordinate to its new state.

        Returns:
            Updated board, or ``self`` when nothing changes.
        """
        if not changes:
            return self

        counts = dict(self._counts)
        new_rows: Dict[int, List[TileState]] = {}
        for coord, new_state in changes.items():
            row, col = coord
            old_state = self[coord]
            if old_state == new_state:
                continue
            if row not in new_rows:
                new_rows[row] = list(self._grid[row])
            new_rows[row][col] = new_state
            counts[old_state] -= 1
            counts[new_state] += 1

        if not new_rows:
            return self

        grid = tuple(
            tuple(new_rows[index]) if index in new_rows else row
            for index, row in enumerate(self._grid)
        )
        return Board(self.rows, self.cols, grid, counts)

    def with_state(self, coord: Coordinate, state: TileState) -> "Board":
        """Return a new board with a single tile replaced."""
        return self.with_states({coord: state})

    def with_all(self, coords: Iterable[Coordinate], state: TileState) -> "Board":
        """Return a new board with every coordinate in ``coords`` set to ``state``."""
        return self.with_states({coord: state for coord in coords})
