"""
Timer counting for Minesweeper sessions.

The engine only counts ticks. Deciding when a tick is due belongs to
whoever owns the clock; ``TickScheduler`` does that bookkeeping for
callers that poll a monotonic clock.
"""
from typing import Optional

from .board import ConfigurationError
from .session import GameState


def tick(elapsed: int) -> int:
    """Advance the elapsed-time counter by one tick."""
    return elapsed + 1


class TickScheduler:
    """
    Convert clock readings into a number of due ticks.

    Ticks are only produced while the game is playing. The first
    reading taken in the playing state anchors the schedule, and any
    reading outside it drops the anchor so a restarted game counts
    from zero again.
    """

    def __init__(self, interval: float = 1.0) -> None:
        """
        Initialize the scheduler.

        Args:
            interval: Seconds between ticks.
        """
        if interval <= 0:
            raise ConfigurationError("Tick interval must be positive")
        self.interval = interval
        self._anchor: Optional[float] = None

    def due(self, now: float, game_state: GameState) -> int:
        """
        Report how many ticks have come due since the last call.

        Args:
            now: Current clock reading in seconds.
            game_state: State of the session being timed.

        Returns:
            Number of ``TimerTick`` actions to dispatch.
        """
        if game_state != GameState.PLAYING:
            self._anchor = None
            return 0
        if self._anchor is None:
            self._anchor = now
            return 0

        ticks = int((now - self._anchor) // self.interval)
        if ticks > 0:
            self._anchor += ticks * self.interval
        return max(ticks, 0)

    def reset(self) -> None:
        """Forget the current anchor."""
        self._anchor = None
