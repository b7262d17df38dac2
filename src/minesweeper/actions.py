"""
Actions accepted by the game engine.

These are the complete request surface of the engine. Callers build
one of these and hand it to ``reduce`` or ``Game.dispatch``.
"""
from dataclasses import dataclass
from typing import Optional, Union

from .board import Coordinate, Difficulty


@dataclass(frozen=True)
class Restart:
    """Start a new session; ``None`` keeps the current difficulty."""

    difficulty: Optional[Difficulty] = None


@dataclass(frozen=True)
class Uncover:
    """Reveal a covered tile."""

    coord: Coordinate


@dataclass(frozen=True)
class ToggleFlag:
    """Flip a tile between covered and flagged."""

    coord: Coordinate


@dataclass(frozen=True)
class Chord:
    """Reveal the covered neighbors of a number whose flags are all placed."""

    coord: Coordinate


@dataclass(frozen=True)
class TimerTick:
    """One second of play time has passed."""


Action = Union[Restart, Uncover, ToggleFlag, Chord, TimerTick]
