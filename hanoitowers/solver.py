"""Recursive solution of the Towers of Hanoi."""

from __future__ import annotations

from typing import NamedTuple

from hanoitowers.board import PEGS


class Move(NamedTuple):
    """One step of a solution: which disc goes from which peg to which."""

    disc: int
    source: int
    dest: int


def _check_pegs(source, dest, helper):
    if sorted((source, dest, helper)) != list(PEGS):
        raise ValueError(
            f"source, dest and helper must be the pegs 1, 2 and 3 in some order, "
            f"got {source}, {dest}, {helper}"
        )


def _moves(num_discs, source, dest, helper):
    if num_discs == 0:
        return
    yield from _moves(num_discs - 1, source, helper, dest)
    yield Move(num_discs, source, dest)
    yield from _moves(num_discs - 1, helper, dest, source)


def solve(num_discs, source=1, dest=2, helper=3):
    """Yield the moves that carry a tower of ``num_discs`` from ``source`` to ``dest``."""
    if num_discs < 1:
        raise ValueError(f"number of discs must be at least 1, got {num_discs}")
    _check_pegs(source, dest, helper)
    return _moves(num_discs, source, dest, helper)


def play_solution(board, source=1, dest=2, helper=3):
    """Apply the solution to ``board`` step by step, yielding each move once made.

    The board's tower is expected to stand on ``source``.
    """
    for move in solve(board.num_discs, source, dest, helper):
        board.move(move.source, move.dest)
        yield move