"""Play the Towers of Hanoi in the terminal."""

from __future__ import annotations

import argparse
import sys

from hanoitowers.board import PEGS, Board, IllegalMoveError

WIN_MESSAGE = "Winner Winner -  vegan chicken dinner!"


def render(board):
    """Return the board as text: one line of slots per peg."""
    return "".join("".join(f"{disc}, " for disc in row) + "\n" for row in board.rows())


def _tokens(stream):
    for line in stream:
        yield from line.split()


def _ask(tokens, prompt):
    print(prompt, end="", flush=True)
    try:
        token = next(tokens)
    except StopIteration:
        raise EOFError("unexpected end of input") from None
    try:
        return int(token)
    except ValueError:
        raise ValueError(f"expected a whole number, got {token!r}") from None


def main(argv=None):
    """Run an interactive game on standard input and output."""
    parser = argparse.ArgumentParser(
        prog="hanoi-game",
        description="Play the Towers of Hanoi: move the tower from peg 1 to peg 2 or 3.",
    )
    parser.parse_args(argv)

    tokens = _tokens(sys.stdin)
    try:
        board = Board(_ask(tokens, "Enter number of discs: "))
        moves = 0
        while True:
            print(render(board), end="")
            source = _ask(tokens, "Enter pegA: ")
            dest = _ask(tokens, "Enter pegB: ")
            if source != dest and source in PEGS and dest in PEGS:
                print(f"{source}-{dest}")
            try:
                board.move(source, dest)
            except IllegalMoveError:
                print("Error ")
            moves += 1
            if board.is_solved():
                print(render(board), end="")
                print(WIN_MESSAGE)
                print(f"You completed the game in: {moves} moves.")
                return 0
    except (EOFError, ValueError) as exc:
        print(f"\nerror: {exc}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(main())