"""
Game engine for Minesweeper.

``reduce`` is the state machine: it takes a session and an action and
returns the next session without touching the old one. ``Game`` keeps
the current session and the random source so callers can dispatch
actions one after another.
"""
import logging
import random
from typing import Optional

from .actions import Action, Chord, Restart, TimerTick, ToggleFlag, Uncover
from .board import BEGINNER, Coordinate, Difficulty
from .cell import TileState
from .mines import adjacent_mine_count, generate_mines, neighbors
from .reveal import propagate_reveal
from .session import GameState, Session
from .timer import TickScheduler, tick


logger = logging.getLogger(__name__)


# ============================================================================
# Reducer
# ============================================================================

def reduce(
    session: Session, action: Action, rng: Optional[random.Random] = None
) -> Session:
    """
    Compute the session that follows ``action``.

    Illegal or unknown actions leave the session unchanged; the
    returned object is then the same ``session`` instance.

    Args:
        session: Current session.
        action: Action to apply.
        rng: Random source used whenever mines are (re)generated.

    Returns:
        The next session.
    """
    if isinstance(action, Restart):
        return _restart(session, action.difficulty, rng)
    if isinstance(action, Uncover):
        return _uncover(session, action.coord, rng)
    if isinstance(action, ToggleFlag):
        return _toggle_flag(session, action.coord)
    if isinstance(action, Chord):
        return _chord(session, action.coord)
    if isinstance(action, TimerTick):
        return _timer_tick(session)

    logger.warning("Ignoring unknown action %r", action)
    return session


def _restart(
    session: Session,
    difficulty: Optional[Difficulty],
    rng: Optional[random.Random],
) -> Session:
    difficulty = difficulty or session.difficulty
    logger.info(
        "Starting %dx%d game with %d mines",
        difficulty.rows, difficulty.cols, difficulty.mines,
    )
    return Session.create(difficulty, rng)


def _accepts_coord(session: Session, coord: Coordinate, action: str) -> bool:
    """Check that a tile action targets a live game and a real tile."""
    if session.is_over:
        logger.debug("Rejecting %s at %s: game is over", action, coord)
        return False
    if not session.in_bounds(coord):
        logger.debug("Rejecting %s at %s: outside board", action, coord)
        return False
    return True


def _uncover(
    session: Session, coord: Coordinate, rng: Optional[random.Random]
) -> Session:
    if not _accepts_coord(session, coord, "uncover"):
        return session
    if session.board[coord] != TileState.COVERED:
        return session

    if session.game_state == GameState.NEW:
        if coord in session.mines:
            return _regenerate(session, coord, rng)
        session = session.evolve(game_state=GameState.PLAYING)
        return _reveal_safe(session, coord)

    if coord in session.mines:
        return _explode(session, coord)
    return _reveal_safe(session, coord)


def _regenerate(
    session: Session, coord: Coordinate, rng: Optional[random.Random]
) -> Session:
    """
    Rebuild the layout after a first click on a mine.

    Only the clicked tile is uncovered; no cascade or win check runs.
    Flagged tiles keep their flags and stay mine-free whenever the board
    has room for that.
    """
    logger.info("First click at %s hit a mine; regenerating layout", coord)
    difficulty = session.difficulty
    flagged = frozenset(session.board.coords_in(TileState.FLAGGED))
    if difficulty.mines > difficulty.total_tiles - 1 - len(flagged):
        flagged = frozenset()
    mines = generate_mines(
        difficulty.cols, difficulty.rows, difficulty.mines,
        avoid=coord, rng=rng, keep_clear=flagged,
    )
    return session.evolve(
        mines=mines,
        board=session.board.with_state(coord, TileState.UNCOVERED),
        game_state=GameState.PLAYING,
    )


def _reveal_safe(session: Session, coord: Coordinate) -> Session:
    """Flood-reveal from a non-mine tile and check for a win."""
    board = propagate_reveal(session.board, coord, session.mines)
    return _evaluate_win(session.evolve(board=board))


def _evaluate_win(session: Session) -> Session:
    board = session.board
    hidden = session.difficulty.total_tiles - board.uncovered_count
    if board.exploded_count == 0 and hidden == session.difficulty.mines:
        logger.info("Game won in %d ticks", session.elapsed_time)
        return session.evolve(game_state=GameState.WON)
    return session


def _explode(session: Session, coord: Coordinate) -> Session:
    """Lose the game: blow up ``coord`` and show every other mine."""
    changes = {mine: TileState.UNCOVERED for mine in session.mines}
    changes[coord] = TileState.EXPLODED
    logger.info("Mine hit at %s; game lost", coord)
    return session.evolve(
        board=session.board.with_states(changes),
        game_state=GameState.LOST,
    )


def _toggle_flag(session: Session, coord: Coordinate) -> Session:
    if not _accepts_coord(session, coord, "toggle flag"):
        return session

    state = session.board[coord]
    if state == TileState.COVERED:
        new_state = TileState.FLAGGED
    elif state == TileState.FLAGGED:
        new_state = TileState.COVERED
    else:
        return session
    return session.evolve(board=session.board.with_state(coord, new_state))


def _chord(session: Session, coord: Coordinate) -> Session:
    """
    Reveal every covered neighbor of a satisfied number.

    A number is satisfied when the flags around it match its count.
    Misplaced flags mean one of the revealed neighbors can be a mine,
    which loses the game like any other uncover.
    """
    if not _accepts_coord(session, coord, "chord"):
        return session
    if session.game_state != GameState.PLAYING:
        return session
    if session.board[coord] != TileState.UNCOVERED or coord in session.mines:
        return session

    count = adjacent_mine_count(coord, session.mines)
    if count == 0:
        return session

    around = neighbors(coord, session.height, session.width)
    flags = sum(1 for pos in around if session.board[pos] == TileState.FLAGGED)
    if flags != count:
        return session

    covered = [pos for pos in around if session.board[pos] == TileState.COVERED]
    if not covered:
        return session
    for pos in covered:
        if pos in session.mines:
            return _explode(session, pos)

    board = session.board
    for pos in covered:
        if board[pos] == TileState.COVERED:
            board = propagate_reveal(board, pos, session.mines)
    return _evaluate_win(session.evolve(board=board))


def _timer_tick(session: Session) -> Session:
    if session.game_state != GameState.PLAYING:
        return session
    return session.evolve(elapsed_time=tick(session.elapsed_time))


# ============================================================================
# Game Class
# ============================================================================

class Game:
    """
    Owner of the current session.

    Every dispatched action replaces ``session`` with the reducer's
    result; sessions handed out earlier are never modified.
    """

    def __init__(
        self,
        difficulty: Difficulty = BEGINNER,
        rng: Optional[random.Random] = None,
        tick_interval: float = 1.0,
    ) -> None:
        """
        Initialize the game.

        Args:
            difficulty: Difficulty of the first session.
            rng: Random source for mine generation.
            tick_interval: Seconds between timer ticks.
        """
        self.rng = rng
        self.scheduler = TickScheduler(tick_interval)
        self.session = Session.create(difficulty, rng)

    def dispatch(self, action: Action) -> Session:
        """Apply an action and return the new current session."""
        self.session = reduce(self.session, action, self.rng)
        return self.session

    # ========================================================================
    # Game Actions
    # ========================================================================

    def restart(self, difficulty: Optional[Difficulty] = None) -> Session:
        """Start over, keeping the current difficulty unless one is given."""
        self.scheduler.reset()
        return self.dispatch(Restart(difficulty))

    def uncover(self, row: int, col: int) -> bool:
        """
        Uncover a tile.

        Returns:
            True if the session changed, False otherwise.
        """
        return self._apply(Uncover((row, col)))

    def toggle_flag(self, row: int, col: int) -> bool:
        """
        Toggle flag on a tile.

        Returns:
            True if the flag was toggled, False otherwise.
        """
        return self._apply(ToggleFlag((row, col)))

    def chord(self, row: int, col: int) -> bool:
        """
        Chord on an uncovered number.

        Returns:
            True if any tile was revealed, False otherwise.
        """
        return self._apply(Chord((row, col)))

    def advance_clock(self, now: float) -> int:
        """
        Feed a clock reading and dispatch any ticks that came due.

        Args:
            now: Monotonic clock reading in seconds.

        Returns:
            Elapsed time after the ticks.
        """
        for _ in range(self.scheduler.due(now, self.session.game_state)):
            self.dispatch(TimerTick())
        return self.session.elapsed_time

    def _apply(self, action: Action) -> bool:
        previous = self.session
        return self.dispatch(action) is not previous

    # ========================================================================
    # State Accessors
    # ========================================================================

    @property
    def game_state(self) -> GameState:
        return self.session.game_state

    @property
    def is_playing(self) -> bool:
        return self.session.is_playing
