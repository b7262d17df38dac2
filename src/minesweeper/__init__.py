"""
Minesweeper game module.

Provides the rule engine: difficulty presets, mine placement, reveal
propagation, the session state machine and a Gymnasium adapter.
"""
from .cell import Tile, TileState
from .board import (
    Board,
    ConfigurationError,
    Difficulty,
    BEGINNER,
    INTERMEDIATE,
    EXPERT,
    LEVELS,
)
from .mines import adjacent_mine_count, generate_mines, neighbors
from .reveal import propagate_reveal
from .session import GameState, Session
from .actions import Action, Chord, Restart, TimerTick, ToggleFlag, Uncover
from .timer import TickScheduler, tick
from .engine import Game, reduce
from .environment import MinesweeperEnv, render_text

__all__ = [
    "Tile",
    "TileState",
    "Board",
    "ConfigurationError",
    "Difficulty",
    "BEGINNER",
    "INTERMEDIATE",
    "EXPERT",
    "LEVELS",
    "adjacent_mine_count",
    "generate_mines",
    "neighbors",
    "propagate_reveal",
    "GameState",
    "Session",
    "Action",
    "Chord",
    "Restart",
    "TimerTick",
    "ToggleFlag",
    "Uncover",
    "TickScheduler",
    "tick",
    "Game",
    "reduce",
    "MinesweeperEnv",
    "render_text",
]
