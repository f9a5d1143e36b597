"""Screen geometry of the board, its discs and the selection arrow."""

from __future__ import annotations

import enum
from dataclasses import dataclass

from hanoitowers.board import PEGS

_PEG_BASE_X = (6, 31, 56)
_PEG_BASE_Y = 46
_PEG_BASE_WIDTH = 24
_PEG_BASE_HEIGHT = 2

_PEG_SHAFT_X = (17, 42, 67)
_PEG_SHAFT_Y = 16
_PEG_SHAFT_WIDTH = 2
_PEG_SHAFT_HEIGHT = 30

_DISC_CENTRE_X = (18, 43, 68)
_DISC_BOTTOM_Y = 42
_DISC_HEIGHT = 4
_DISC_SIZE_FACTOR = 4

_ARROW_X = (13, 38, 63)
_ARROW_Y = 4

ARROW_SPRITE = (
    (1, 0, 0, 0, 0, 0, 0, 0, 0, 1),
    (1, 0, 0, 0, 0, 0, 0, 0, 0, 1),
    (0, 1, 0, 0, 0, 0, 0, 0, 1, 0),
    (0, 0, 1, 0, 0, 0, 0, 1, 0, 0),
    (0, 0, 0, 1, 0, 0, 1, 0, 0, 0),
    (0, 0, 0, 0, 1, 1, 0, 0, 0, 0),
    (0, 0, 0, 0, 1, 1, 0, 0, 0, 0),
)


class Fill(enum.Enum):
    """How a rectangle is painted."""

    TRANSPARENT = 0
    BLACK = 1
    WHITE = 2


@dataclass(frozen=True)
class Rect:
    """A rectangle to paint, by its top-left corner and size."""

    x: int
    y: int
    width: int
    height: int
    fill: Fill


def _check_peg(peg):
    if peg not in PEGS:
        raise ValueError(f"there is no peg {peg!r}")


def peg_rects():
    """Return the base and shaft of each peg, in peg order."""
    rects = []
    for base_x, shaft_x in zip(_PEG_BASE_X, _PEG_SHAFT_X):
        rects.append(Rect(base_x, _PEG_BASE_Y, _PEG_BASE_WIDTH, _PEG_BASE_HEIGHT, Fill.BLACK))
        rects.append(Rect(shaft_x, _PEG_SHAFT_Y, _PEG_SHAFT_WIDTH, _PEG_SHAFT_HEIGHT, Fill.BLACK))
    return rects


def disc_rects(board, selected=None):
    """Return the rectangles that draw the discs of ``board``, bottom row first.

    Each disc is a white rectangle that hides the shaft behind it, then its
    outline. The top disc of peg ``selected`` is filled black instead;
    ``None`` or 0 selects nothing.
    """
    if selected not in (None, 0):
        _check_peg(selected)
    columns = board.rows()
    tops = {peg: board.top_index(peg) for peg in PEGS}
    rects = []
    for row, slot in enumerate(reversed(range(board.num_discs))):
        discs = [column[slot] for column in columns]
        if not any(discs):
            break
        y = _DISC_BOTTOM_Y - row * _DISC_HEIGHT
        for peg, centre, disc in zip(PEGS, _DISC_CENTRE_X, discs):
            if not disc:
                continue
            x = centre - disc * 2
            width = disc * _DISC_SIZE_FACTOR
            rects.append(Rect(x, y, width, _DISC_HEIGHT, Fill.WHITE))
            fill = Fill.BLACK if peg == selected and tops[peg] == slot else Fill.TRANSPARENT
            rects.append(Rect(x, y, width, _DISC_HEIGHT, fill))
    return rects


def arrow_origin(peg):
    """Return the top-left corner of the arrow drawn above ``peg``."""
    _check_peg(peg)
    return (_ARROW_X[peg - 1], _ARROW_Y)


def arrow_pixels(peg):
    """Return the set of (x, y) pixels lit by the arrow above ``peg``."""
    x0, y0 = arrow_origin(peg)
    return {
        (x0 + col, y0 + row)
        for row, line in enumerate(ARROW_SPRITE)
        for col, lit in enumerate(line)
        if lit
    }