"""
Unit tests for timer counting and tick scheduling.
"""
import pytest

from minesweeper import ConfigurationError, GameState, TickScheduler, tick


class TestTick:
    """Test the pure counter."""

    def test_tick_increments(self) -> None:
        assert tick(0) == 1
        assert tick(41) == 42


class TestTickScheduler:
    """Test conversion of clock readings into ticks."""

    def test_no_ticks_outside_playing(self) -> None:
        scheduler = TickScheduler()
        for state in (GameState.NEW, GameState.WON, GameState.LOST):
            assert scheduler.due(100.0, state) == 0

    def test_first_reading_anchors(self) -> None:
        """The first playing reading starts the schedule without a tick."""
        scheduler = TickScheduler()
        assert scheduler.due(10.0, GameState.PLAYING) == 0
        assert scheduler.due(10.9, GameState.PLAYING) == 0
        assert scheduler.due(11.0, GameState.PLAYING) == 1

    def test_catches_up_after_gap(self) -> None:
        """A late poll reports every tick that came due."""
        scheduler = TickScheduler()
        scheduler.due(0.0, GameState.PLAYING)
        assert scheduler.due(3.5, GameState.PLAYING) == 3
        assert scheduler.due(4.0, GameState.PLAYING) == 1

    def test_leaving_play_drops_anchor(self) -> None:
        scheduler = TickScheduler()
        scheduler.due(0.0, GameState.PLAYING)
        scheduler.due(1.0, GameState.WON)
        assert scheduler.due(50.0, GameState.PLAYING) == 0
        assert scheduler.due(51.0, GameState.PLAYING) == 1

    def test_custom_interval(self) -> None:
        scheduler = TickScheduler(interval=0.5)
        scheduler.due(0.0, GameState.PLAYING)
        assert scheduler.due(2.0, GameState.PLAYING) == 4

    def test_clock_going_backwards_yields_nothing(self) -> None:
        scheduler = TickScheduler()
        scheduler.due(5.0, GameState.PLAYING)
        assert scheduler.due(4.0, GameState.PLAYING) == 0

    def test_invalid_interval_raises(self) -> None:
        with pytest.raises(ConfigurationError, match="interval must be positive"):
            TickScheduler(interval=0)
