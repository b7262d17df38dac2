#!/usr/bin/env python3
"""
Minesweeper - Main entry point.

Usage:
    python main.py play [--level NAME] [--seed N]
    python main.py simulate [--level NAME] [--games N] [--seed N]
"""
import argparse
import logging
import random
import time
from typing import Optional

import numpy as np

from src.minesweeper import (
    ConfigurationError,
    Difficulty,
    Game,
    LEVELS,
    MinesweeperEnv,
    render_text,
)


PLAY_HELP = """Commands:
  u ROW COL   uncover a tile
  f ROW COL   toggle a flag
  c ROW COL   chord on a number
  r [LEVEL]   restart (optionally with another level)
  q           quit"""

FACES = {"NEW": ":)", "PLAYING": ":|", "WON": "B)", "LOST": ":("}


def _positive_int(value: str) -> int:
    number = int(value)
    if number < 1:
        raise argparse.ArgumentTypeError(f"expected a positive integer, got {value}")
    return number


def _make_rng(seed: Optional[int]) -> random.Random:
    return random.Random(seed) if seed is not None else random.Random()


def play(args: argparse.Namespace) -> None:
    """Play an interactive game in the terminal."""
    game = Game(Difficulty.from_name(args.level), rng=_make_rng(args.seed))
    print(PLAY_HELP)

    while True:
        game.advance_clock(time.monotonic())
        session = game.session
        print(
            f"\n{FACES[session.game_state.name]}  "
            f"mines: {session.remaining_mines}  time: {session.elapsed_time}"
        )
        print(render_text(session))

        try:
            line = input("> ").split()
        except EOFError:
            break
        if not line:
            continue

        command, params = line[0].lower(), line[1:]
        if command == "q":
            break
        if command == "r":
            try:
                difficulty = Difficulty.from_name(params[0]) if params else None
            except ConfigurationError as exc:
                print(exc)
                continue
            game.restart(difficulty)
            continue
        if command not in ("u", "f", "c") or len(params) != 2:
            print(PLAY_HELP)
            continue

        try:
            row, col = (int(value) for value in params)
        except ValueError:
            print("Row and column must be integers")
            continue

        if command == "u":
            game.uncover(row, col)
        elif command == "f":
            game.toggle_flag(row, col)
        else:
            game.chord(row, col)

        if game.session.is_won:
            print("\n*** WIN! ***")
        elif game.session.is_lost:
            print("\n*** LOST (hit mine) ***")


def simulate(args: argparse.Namespace) -> None:
    """Play games by uncovering random covered tiles."""
    env = MinesweeperEnv(args.level)
    rng = np.random.default_rng(args.seed)

    wins = 0
    total_revealed = 0

    for game in range(args.games):
        seed = None if args.seed is None else args.seed + game
        _, info = env.reset(seed=seed)
        done = False

        while not done:
            valid_indices = np.where(env.get_action_mask())[0]
            action = rng.choice(valid_indices)
            _, _, terminated, truncated, info = env.step(action)
            done = terminated or truncated

        if info["game_state"] == "WON":
            wins += 1
        total_revealed += info["revealed"]

    print(f"Results over {args.games} {args.level} games:")
    print(f"  Win rate: {wins / args.games:.1%}")
    print(f"  Avg revealed: {total_revealed / args.games:.1f} tiles")


def main() -> None:
    """Parse arguments and run the appropriate command."""
    parser = argparse.ArgumentParser(description="Minesweeper")
    parser.add_argument(
        "--verbose", action="store_true", help="Show engine debug logging"
    )
    subparsers = parser.add_subparsers(dest="command", help="Command to run")

    play_parser = subparsers.add_parser("play", help="Play in the terminal")
    play_parser.add_argument(
        "--level", choices=sorted(LEVELS), default="beginner", help="Difficulty"
    )
    play_parser.add_argument("--seed", type=int, default=None, help="Random seed")

    simulate_parser = subparsers.add_parser(
        "simulate", help="Play random games and report the win rate"
    )
    simulate_parser.add_argument(
        "--level", choices=sorted(LEVELS), default="beginner", help="Difficulty"
    )
    simulate_parser.add_argument(
        "--games", type=_positive_int, default=100, help="Number of games to play"
    )
    simulate_parser.add_argument(
        "--seed", type=int, default=None, help="Random seed"
    )

    args = parser.parse_args()

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s %(name)s %(levelname)s %(message)s",
    )

    if args.command == "play":
        play(args)
    elif args.command == "simulate":
        simulate(args)
    else:
        parser.print_help()


if __name__ == "__main__":
    main()
