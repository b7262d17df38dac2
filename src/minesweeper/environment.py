"""
Gymnasium environment wrapper for Minesweeper.

Provides a standard RL interface over the game engine.
"""
import random
from typing import Any, Dict, Optional, Tuple, SupportsFloat, Union

import gymnasium as gym
import numpy as np
from gymnasium import spaces

from .board import BEGINNER, Difficulty
from .cell import TileState
from .engine import Game
from .session import Session


# ============================================================================
# Text Rendering
# ============================================================================

_STATE_SYMBOLS = {
    TileState.COVERED: ".",
    TileState.FLAGGED: "F",
    TileState.EXPLODED: "X",
}


def render_text(session: Session, show_mines: bool = False) -> str:
    """
    Render a session as plain text, one board row per line.

    Args:
        session: Session to draw.
        show_mines: Mark covered mines with ``x`` (debug overlay).

    Returns:
        Multi-line string.
    """
    lines = []
    for row in range(session.height):
        symbols = []
        for col in range(session.width):
            tile = session.tile((row, col))
            if tile.state == TileState.UNCOVERED:
                if tile.is_mine:
                    symbols.append("*")
                elif tile.adjacent_mines == 0:
                    symbols.append(" ")
                else:
                    symbols.append(str(tile.adjacent_mines))
            elif show_mines and tile.is_covered and tile.is_mine:
                symbols.append("x")
            else:
                symbols.append(_STATE_SYMBOLS[tile.state])
        lines.append(" ".join(symbols))
    return "\n".join(lines)


# ============================================================================
# Minesweeper Environment
# ============================================================================

class MinesweeperEnv(gym.Env):
    """
    Gymnasium environment for Minesweeper.

    Observation:
        2D array where:
        - -1 = covered tile
        - -2 = flagged tile
        - 0-8 = uncovered tile with adjacent mine count
        - 9 = uncovered or exploded mine

    Actions:
        Discrete action space of size rows * cols.
        Action i uncovers the tile at (i // cols, i % cols).

    Rewards:
        - +1 for revealing a safe tile
        - +10 for winning the game
        - -10 for hitting a mine
        - -0.1 for invalid action (already uncovered/flagged)
    """

    metadata = {"render_modes": ["human", "ansi"], "render_fps": 4}

    def __init__(
        self,
        difficulty: Union[Difficulty, str, None] = None,
        render_mode: Optional[str] = None,
    ) -> None:
        """
        Initialize the Minesweeper environment.

        Args:
            difficulty: Difficulty or preset name (default: beginner).
            render_mode: How to render the environment.
        """
        super().__init__()

        if isinstance(difficulty, str):
            difficulty = Difficulty.from_name(difficulty)
        self.difficulty = difficulty or BEGINNER
        self.render_mode = render_mode
        self.game = Game(self.difficulty, rng=random.Random())

        self.observation_space = spaces.Box(
            low=-2,
            high=9,
            shape=(self.difficulty.rows, self.difficulty.cols),
            dtype=np.int8,
        )
        self.action_space = spaces.Discrete(self.difficulty.total_tiles)

        self._steps = 0

    def reset(
        self,
        *,
        seed: Optional[int] = None,
        options: Optional[Dict[str, Any]] = None,
    ) -> Tuple[np.ndarray, Dict[str, Any]]:
        """
        Reset the environment for a new episode.

        Args:
            seed: Random seed for the mine layout.
            options: Additional options (unused).

        Returns:
            Tuple of (observation, info dict).
        """
        super().reset(seed=seed)
        if seed is not None:
            self.game.rng = random.Random(seed)
        self.game.restart()
        self._steps = 0

        return self.game.session.observation(), self._get_info()

    def step(
        self, action: int
    ) -> Tuple[np.ndarray, SupportsFloat, bool, bool, Dict[str, Any]]:
        """
        Execute one action in the environment.

        Args:
            action: Tile index to uncover (row * cols + col).

        Returns:
            Tuple of (observation, reward, terminated, truncated, info).
        """
        row, col = self._action_to_position(action)
        self._steps += 1

        reward = self._calculate_reward(row, col)
        session = self.game.session

        return (
            session.observation(),
            reward,
            session.is_over,
            False,
            self._get_info(),
        )

    def _action_to_position(self, action: int) -> Tuple[int, int]:
        """Convert flat action index to (row, col) position."""
        return divmod(int(action), self.difficulty.cols)

    def _calculate_reward(self, row: int, col: int) -> float:
        """Uncover a tile and score the outcome."""
        if not self.game.uncover(row, col):
            return -0.1

        session = self.game.session
        if session.is_won:
            return 10.0
        if session.is_lost:
            return -10.0
        return 1.0

    def _get_info(self) -> Dict[str, Any]:
        """Get info dictionary for current state."""
        session = self.game.session
        return {
            "steps": self._steps,
            "revealed": session.uncovered_count,
            "total_safe": self.difficulty.safe_tiles,
            "game_state": session.game_state.name,
            "remaining_mines": session.remaining_mines,
        }

    def render(self) -> Optional[str]:
        """Render the current board state."""
        if self.render_mode == "ansi":
            return render_text(self.game.session)
        if self.render_mode == "human":
            print(render_text(self.game.session))
        return None

    def get_action_mask(self) -> np.ndarray:
        """
        Get mask of valid actions.

        Returns:
            Boolean array where True = covered tile.
        """
        return (self.game.session.observation() == -1).reshape(-1)
