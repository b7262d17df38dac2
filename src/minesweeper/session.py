"""
Session module for Minesweeper game.

A session is one complete game instance: board, mine layout, game
state and elapsed time. Sessions are immutable; the engine produces a
new one for every transition.
"""
import random
from dataclasses import dataclass, replace
from enum import Enum, auto
from typing import List, Optional

import numpy as np

from .board import BEGINNER, Board, Coordinate, Difficulty
from .cell import Tile, TileState
from .mines import MineSet, adjacent_mine_count, generate_mines


# ============================================================================
# Constants
# ============================================================================

class GameState(Enum):
    """Possible states of the game."""

    NEW = auto()
    PLAYING = auto()
    WON = auto()
    LOST = auto()

    @property
    def is_terminal(self) -> bool:
        """Won and lost games only leave through a restart."""
        return self in (GameState.WON, GameState.LOST)


# ============================================================================
# Session Class
# ============================================================================

@dataclass(frozen=True)
class Session:
    """
    Snapshot of a single game.

    Attributes:
        difficulty: Board size and mine count.
        board: Tile states.
        mines: Mine positions, fixed for the life of the session.
        game_state: Current phase of the game.
        elapsed_time: Timer ticks counted while playing.
    """

    difficulty: Difficulty
    board: Board
    mines: MineSet
    game_state: GameState = GameState.NEW
    elapsed_time: int = 0

    @classmethod
    def create(
        cls,
        difficulty: Difficulty = BEGINNER,
        rng: Optional[random.Random] = None,
    ) -> "Session":
        """Start a fresh game with every tile covered."""
        mines = generate_mines(
            difficulty.cols, difficulty.rows, difficulty.mines, rng=rng
        )
        return cls(
            difficulty=difficulty,
            board=Board.covered(difficulty.rows, difficulty.cols),
            mines=mines,
        )

    def evolve(self, **changes) -> "Session":
        """Return a copy of this session with fields replaced."""
        return replace(self, **changes)

    # ========================================================================
    # Dimensions
    # ========================================================================

    @property
    def width(self) -> int:
        return self.difficulty.cols

    @property
    def height(self) -> int:
        return self.difficulty.rows

    def in_bounds(self, coord: Coordinate) -> bool:
        """Check if position is within board bounds."""
        return self.board.in_bounds(coord)

    # ========================================================================
    # State Accessors
    # ========================================================================

    @property
    def is_playing(self) -> bool:
        return self.game_state == GameState.PLAYING

    @property
    def is_won(self) -> bool:
        return self.game_state == GameState.WON

    @property
    def is_lost(self) -> bool:
        return self.game_state == GameState.LOST

    @property
    def is_over(self) -> bool:
        return self.game_state.is_terminal

    @property
    def flagged_count(self) -> int:
        return self.board.flagged_count

    @property
    def uncovered_count(self) -> int:
        return self.board.uncovered_count

    @property
    def remaining_mines(self) -> int:
        """Mine counter shown to the player; negative when over-flagged."""
        return self.difficulty.mines - self.board.flagged_count

    def is_mine(self, coord: Coordinate) -> bool:
        return coord in self.mines

    def adjacent_mines(self, coord: Coordinate) -> int:
        return adjacent_mine_count(coord, self.mines)

    def tile(self, coord: Coordinate) -> Tile:
        """
        Get the renderer view of a tile.

        Raises:
            IndexError: If ``coord`` is off the board.
        """
        return Tile(
            state=self.board[coord],
            is_mine=coord in self.mines,
            adjacent_mines=adjacent_mine_count(coord, self.mines),
        )

    def observation(self) -> np.ndarray:
        """
        Get board state as numpy array.

        Returns:
            2D int8 array where:
                -1 = covered
                -2 = flagged
                0-8 = uncovered with adjacent count
                9 = uncovered or exploded mine
        """
        obs = np.zeros((self.height, self.width), dtype=np.int8)
        for coord in np.ndindex(obs.shape):
            obs[coord] = self.tile(coord).to_observation()
        return obs

    def covered_coords(self) -> List[Coordinate]:
        """Positions that can still be uncovered."""
        return self.board.coords_in(TileState.COVERED)
