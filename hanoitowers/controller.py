"""Menu state machines, joystick filtering and the two-press game session."""

from __future__ import annotations

import enum
from dataclasses import dataclass

from hanoitowers.board import PEGS, Board, IllegalMoveError

# Magnitude the stick must pass before a push counts, and fall below to re-arm.
JOYSTICK_THRESHOLD = 0.5


class Direction(enum.IntEnum):
    """A joystick step as the state machines see it."""

    NONE = 0
    RIGHT = 1
    LEFT = 2


class StateMachine:
    """A small Moore machine driven by joystick steps.

    ``outputs[s]`` is the value shown in state ``s`` and ``transitions[s]``
    gives the next state for each Direction, indexed by its value.
    """

    def __init__(self, outputs, transitions, state=0):
        self._outputs = tuple(outputs)
        self._transitions = tuple(tuple(row) for row in transitions)
        if not self._outputs:
            raise ValueError("a state machine needs at least one state")
        if len(self._transitions) != len(self._outputs):
            raise ValueError("there must be one transition row per state")
        count = len(self._outputs)
        for row in self._transitions:
            if len(row) != len(Direction):
                raise ValueError(f"each transition row needs {len(Direction)} entries")
            if any(not 0 <= target < count for target in row):
                raise ValueError(f"transition targets must lie between 0 and {count - 1}")
        if not 0 <= state < count:
            raise ValueError(f"state must lie between 0 and {count - 1}, got {state}")
        self.state = state

    def step(self, direction):
        """Follow ``direction`` to the next state and return its output."""
        self.state = self._transitions[self.state][Direction(direction)]
        return self.output()

    def output(self):
        """Return the output of the current state."""
        return self._outputs[self.state]


def peg_selector():
    """Return the machine that moves the arrow over pegs 1 to 3, wrapping round."""
    return StateMachine((1, 2, 3), ((0, 1, 2), (1, 2, 0), (2, 0, 1)), 0)


def disc_count_selector():
    """Return the machine that picks 3 to 6 discs, starting at 5."""
    return StateMachine(
        (3, 4, 5, 6),
        ((0, 1, 3), (1, 2, 0), (2, 3, 1), (3, 0, 2)),
        2,
    )


def mode_selector():
    """Return the game/tutorial machine; state 0 is the game, 1 the tutorial.

    Its outputs are the x positions of the underline drawn beneath the
    chosen word.
    """
    return StateMachine((4, 35), ((0, 1, 1), (1, 0, 0)), 0)


class JoystickFilter:
    """Turns raw stick readings into single steps, one per push."""

    def __init__(self):
        self.triggered = False

    def update(self, direction, magnitude):
        """Return the step for a reading of compass ``direction`` and ``magnitude``.

        Only east ("E") and west ("W") pushes stronger than the threshold
        count, and only once until the stick is let back below it.
        """
        if not self.triggered:
            if magnitude > JOYSTICK_THRESHOLD:
                if direction == "E":
                    self.triggered = True
                    return Direction.RIGHT
                if direction == "W":
                    self.triggered = True
                    return Direction.LEFT
        elif magnitude < JOYSTICK_THRESHOLD:
            self.triggered = False
        return Direction.NONE


@dataclass(frozen=True)
class Analysis:
    """How a finished game compares with the shortest solution."""

    moves: int
    ideal_moves: int
    mistakes: int
    errors: int


def analyse(num_discs, moves, errors):
    """Compare ``moves`` and ``errors`` with the shortest solution for ``num_discs``."""
    ideal = 2**num_discs - 1
    return Analysis(moves=moves, ideal_moves=ideal, mistakes=moves - ideal - errors, errors=errors)


class GameSession:
    """A game played by pressing the button over one peg, then another."""

    def __init__(self, num_discs):
        self.board = Board(num_discs)
        self.moves = 0
        self.errors = 0
        self.selected = None

    def press(self, peg):
        """Register a button press with the arrow over ``peg``.

        The first press picks the peg to move from, and is ignored if that
        peg is empty. The second press moves its top disc to ``peg``; any
        attempt between two different pegs counts as a move, and one that
        breaks the rules also counts as an error.
        """
        if peg not in PEGS:
            raise ValueError(f"there is no peg {peg!r}")
        if self.selected is None:
            if self.board.top_index(peg) != self.board.num_discs:
                self.selected = peg
            return
        source, self.selected = self.selected, None
        if source == peg:
            return
        try:
            self.board.move(source, peg)
        except IllegalMoveError:
            self.errors += 1
        self.moves += 1

    def is_won(self):
        """True once the tower stands on peg 2 or peg 3."""
        return self.board.is_solved()

    def analysis(self):
        """Return the analysis of the game so far."""
        return analyse(self.board.num_discs, self.moves, self.errors)