#!/usr/bin/env python3
"""
Emoji Minesweeper - Main entry point.

Usage:
    python main.py play [--rows N] [--columns N] [--mines N] [--seed S]
    python main.py text [--rows N] [--columns N] [--mines N] [--seed S]
"""
import argparse
import logging
import random

from src.emoji_minesweeper.app import MinesweeperApp
from src.emoji_minesweeper.board import Board, BoardConfig, DEFAULT_BOARD
from src.emoji_minesweeper.renderer import DEFAULT_DISPLAY, render_text

TEXT_HELP = "Commands: r ROW COL (reveal), f ROW COL (flag), n (new game), q (quit)"


def make_config(args: argparse.Namespace) -> BoardConfig:
    """Build a board configuration from command line arguments."""
    return BoardConfig(
        rows=args.rows, columns=args.columns, num_mines=args.mines
    )


def play(args: argparse.Namespace) -> None:
    """Open the game window."""
    board = Board(make_config(args), rng=random.Random(args.seed))
    MinesweeperApp(board, DEFAULT_DISPLAY).run()


def play_text(args: argparse.Namespace) -> None:
    """Play in the terminal."""
    board = Board(make_config(args), rng=random.Random(args.seed))

    print(TEXT_HELP)
    print(render_text(board))

    while True:
        try:
            command = input("> ").split()
        except EOFError:
            break
        if not command:
            continue
        if command[0] == "q":
            break
        if command[0] == "n":
            board.reset()
            print(render_text(board))
            continue
        if command[0] not in ("r", "f") or len(command) != 3:
            print(TEXT_HELP)
            continue
        try:
            row, col = int(command[1]), int(command[2])
        except ValueError:
            print(TEXT_HELP)
            continue
        if board.get_cell(row, col) is None:
            print(f"Out of bounds: ({row}, {col})")
            continue

        if command[0] == "f":
            board.flag(row, col)
        else:
            board.reveal(row, col)
        print(render_text(board))

        if board.is_won:
            print("\n*** WIN! ***")
        elif board.is_lost:
            print("\n*** LOST (hit mine) ***")
        if not board.is_playing:
            print("Type n for a new game or q to quit.")


def main() -> None:
    """Parse arguments and run the appropriate command."""
    parser = argparse.ArgumentParser(description="Emoji Minesweeper")
    parser.add_argument(
        "--verbose", action="store_true", help="Enable debug logging"
    )
    subparsers = parser.add_subparsers(dest="command", help="Command to run")

    play_parser = subparsers.add_parser("play", help="Play in a window")
    text_parser = subparsers.add_parser("text", help="Play in the terminal")
    for sub in (play_parser, text_parser):
        sub.add_argument(
            "--rows", type=int, default=DEFAULT_BOARD.rows, help="Board rows"
        )
        sub.add_argument(
            "--columns", type=int, default=DEFAULT_BOARD.columns,
            help="Board columns",
        )
        sub.add_argument(
            "--mines", type=int, default=DEFAULT_BOARD.num_mines,
            help="Number of mines",
        )
        sub.add_argument(
            "--seed", type=int, default=None, help="Seed for mine placement"
        )

    args = parser.parse_args()

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s %(name)s %(levelname)s %(message)s",
    )

    try:
        if args.command == "play":
            play(args)
        elif args.command == "text":
            play_text(args)
        else:
            parser.print_help()
    except ValueError as exc:
        parser.error(str(exc))


if __name__ == "__main__":
    main()
