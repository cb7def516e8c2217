#!/usr/bin/env python3
"""
Minesweeper - Main entry point.

Usage:
    python main.py play [--width W] [--height H] [--mines N] [--seed S]
    python main.py render [--width W] [--height H] [--mines N] [--seed S] [--reveal]
"""
import argparse
import random

from sweeper import Board, BoardConfig, DEFAULT, render


def build_board(args: argparse.Namespace, parser: argparse.ArgumentParser) -> Board:
    """Create a board from command line options."""
    try:
        config = BoardConfig(args.width, args.height, args.mines)
    except ValueError as exc:
        parser.error(str(exc))
    return Board(config, rng=random.Random(args.seed))


def play(args: argparse.Namespace, parser: argparse.ArgumentParser) -> None:
    """Play an interactive game in the terminal."""
    from sweeper.terminal import play as play_terminal

    board = build_board(args, parser)
    play_terminal(board)


def show(args: argparse.Namespace, parser: argparse.ArgumentParser) -> None:
    """Print one frame of a new board."""
    board = build_board(args, parser)
    print(render(board, reveal=args.reveal))


def add_board_arguments(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        "--width", type=int, default=DEFAULT.width, help="Number of columns"
    )
    parser.add_argument(
        "--height", type=int, default=DEFAULT.height, help="Number of rows"
    )
    parser.add_argument(
        "--mines", type=int, default=DEFAULT.num_mines, help="Number of mines"
    )
    parser.add_argument(
        "--seed", type=int, default=None, help="Seed for mine placement"
    )


def main() -> None:
    """Parse arguments and run the appropriate command."""
    parser = argparse.ArgumentParser(
        description="Minesweeper - Play in the terminal"
    )
    subparsers = parser.add_subparsers(dest="command", help="Command to run")

    play_parser = subparsers.add_parser("play", help="Play interactively")
    add_board_arguments(play_parser)

    render_parser = subparsers.add_parser(
        "render", help="Print a freshly created board"
    )
    add_board_arguments(render_parser)
    render_parser.add_argument(
        "--reveal", action="store_true", help="Show the content of every cell"
    )

    args = parser.parse_args()

    if args.command == "play":
        play(args, parser)
    elif args.command == "render":
        show(args, parser)
    else:
        parser.print_help()


if __name__ == "__main__":
    main()
