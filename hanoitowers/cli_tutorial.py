"""Show the solution of the Towers of Hanoi step by step."""

from __future__ import annotations

import argparse
import sys

from hanoitowers.board import Board
from hanoitowers.cli_game import render
from hanoitowers.solver import play_solution

TUTORIAL_DISCS = 5


def main(argv=None):
    """Print every move of the solution for five discs with the board after it."""
    parser = argparse.ArgumentParser(
        prog="hanoi-tutorial",
        description="Print the moves that solve the Towers of Hanoi for five discs.",
    )
    parser.parse_args(argv)

    board = Board(TUTORIAL_DISCS)
    print(render(board), end="")
    print("The sequence of moves :")
    for move in play_solution(board, 1, 2, 3):
        print(f" Move disk {move.disc} from tower {move.source} to tower {move.dest}")
        print(f"{move.source}-{move.dest}")
        print(render(board), end="")
    return 0


if __name__ == "__main__":
    sys.exit(main())