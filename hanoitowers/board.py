"""The three-peg board and its move rules."""

from __future__ import annotations

MAX_DISCS = 7
PEGS = (1, 2, 3)

# Sum of disc sizes on a completed tower, indexed by number of discs.
_WINNING_SUMS = (0, 1, 3, 6, 10, 15, 21, 28)


class IllegalMoveError(ValueError):
    """Raised when a disc would be placed on top of a smaller one."""


def winning_sum(num_discs):
    """Return the sum of disc sizes that a finished tower of ``num_discs`` holds."""
    if not 0 <= num_discs <= MAX_DISCS:
        raise ValueError(f"number of discs must be between 0 and {MAX_DISCS}, got {num_discs}")
    return _WINNING_SUMS[num_discs]


class Board:
    """Three pegs, each a column of ``num_discs`` slots read from the top down.

    A slot holds a disc size, or 0 when empty. Discs rest at the bottom of
    the column, so the top disc of a peg is its first non-zero slot.
    """

    def __init__(self, num_discs):
        if not 1 <= num_discs <= MAX_DISCS:
            raise ValueError(f"number of discs must be between 1 and {MAX_DISCS}, got {num_discs}")
        self.num_discs = num_discs
        self._pegs = {
            1: list(range(1, num_discs + 1)),
            2: [0] * num_discs,
            3: [0] * num_discs,
        }

    def _slots(self, number):
        try:
            return self._pegs[number]
        except (KeyError, TypeError):
            raise ValueError(f"there is no peg {number!r}") from None

    def peg(self, number):
        """Return the slots of peg ``number`` (1 to 3), top first."""
        return tuple(self._slots(number))

    def top_index(self, peg):
        """Return the slot index of the top disc on ``peg``, or ``num_discs`` if it is empty."""
        slots = self._slots(peg)
        return next((index for index, disc in enumerate(slots) if disc), self.num_discs)

    def move(self, source, dest):
        """Move the top disc from ``source`` to ``dest``.

        Returns True when a disc moved and False when there was nothing to
        do: the same peg twice, a peg number outside 1 to 3, or an empty
        source peg. Raises IllegalMoveError if the disc is larger than the
        top disc on ``dest``; the board is then left unchanged.
        """
        if source == dest or source not in PEGS or dest not in PEGS:
            return False
        from_index = self.top_index(source)
        if from_index == self.num_discs:
            return False
        to_index = self.top_index(dest)
        src = self._pegs[source]
        dst = self._pegs[dest]
        disc = src[from_index]
        if to_index < self.num_discs and disc > dst[to_index]:
            raise IllegalMoveError(
                f"cannot place disc {disc} from peg {source} on disc {dst[to_index]} on peg {dest}"
            )
        dst[to_index - 1] = disc
        src[from_index] = 0
        return True

    def is_solved(self):
        """True once the whole tower stands on peg 2 or peg 3."""
        target = winning_sum(self.num_discs)
        return sum(self._pegs[2]) == target or sum(self._pegs[3]) == target

    def rows(self):
        """Return the slots of all three pegs, in peg order."""
        return tuple(self.peg(number) for number in PEGS)