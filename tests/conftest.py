"""
Pytest configuration and shared fixtures.
"""
import random
import sys
from pathlib import Path

import pytest

# Add src and the project root (for main.py) to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))
sys.path.insert(1, str(Path(__file__).parent.parent))

from minesweeper import (
    BEGINNER,
    Board,
    Difficulty,
    GameState,
    Session,
    TileState,
)


def make_session(
    rows: int,
    cols: int,
    mines,
    game_state: GameState = GameState.PLAYING,
) -> Session:
    """Build a session with a fixed mine layout."""
    mines = frozenset(mines)
    return Session(
        difficulty=Difficulty(rows, cols, len(mines)),
        board=Board.covered(rows, cols),
        mines=mines,
        game_state=game_state,
    )


def assert_counts_consistent(board: Board) -> None:
    """Incremental counters must agree with a full scan of the grid."""
    for state in TileState:
        assert board.count(state) == board.scan_count(state)
    assert sum(board.count(state) for state in TileState) == board.rows * board.cols


# ============================================================================
# Randomness Fixtures
# ============================================================================

@pytest.fixture
def rng() -> random.Random:
    """Seeded random source for reproducible layouts."""
    return random.Random(1234)


# ============================================================================
# Session Fixtures
# ============================================================================

@pytest.fixture
def new_session(rng: random.Random) -> Session:
    """Fresh beginner session."""
    return Session.create(BEGINNER, rng)


@pytest.fixture
def corner_session() -> Session:
    """3x3 board with a single mine in the top-left corner."""
    return make_session(3, 3, {(0, 0)}, game_state=GameState.NEW)


@pytest.fixture
def wall_session() -> Session:
    """
    5x5 board with a column of mines down the middle.

    Layout (M = mine):
        . . M . .
        . . M . .
        . . M . .
        . . M . .
        . . M . .
    """
    return make_session(5, 5, {(row, 2) for row in range(5)})


@pytest.fixture
def empty_board() -> Board:
    """Covered 5x5 board."""
    return Board.covered(5, 5)


# ============================================================================
# Configuration Fixtures
# ============================================================================

@pytest.fixture
def valid_difficulty() -> Difficulty:
    """A valid custom difficulty."""
    return Difficulty(9, 9, 10)


# ============================================================================
# Helper Fixtures
# ============================================================================

@pytest.fixture
def session_factory():
    """Factory building sessions with a fixed mine layout."""
    return make_session


@pytest.fixture
def check_counts():
    """Assertion helper comparing board counters with a full scan."""
    return assert_counts_consistent
