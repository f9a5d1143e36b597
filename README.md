# hanoitowers

The Towers of Hanoi puzzle, playable in a terminal, with a solver that
walks through the shortest sequence of moves, and the game logic and
screen geometry for a small joystick-driven display.

## Install

    pip install .

## Play

    hanoi-game

You are asked for the number of discs (1 to 7). The three pegs are
printed as rows of numbers, one row per peg; each number is the size of
a disc and `0` is an empty slot, with the top of the peg on the left.

Each turn you enter the peg to move from (`pegA`) and the peg to move to
(`pegB`), numbered 1 to 3. Placing a larger disc on a smaller one prints
`Error` and leaves the board as it was. Every pair you enter counts as a
move, whether or not a disc moved. The game ends when the whole tower
stands on peg 2 or peg 3, and tells you how many moves you took. Input
that is not a whole number, or running out of input, ends the game with
an error message and exit status 1.

## Watch the solution

    hanoi-tutorial

Starts with five discs on peg 1 and prints every move of the shortest
solution onto peg 2, showing the board after each one.

## Use as a library

```python
from hanoitowers.board import Board, IllegalMoveError
from hanoitowers.solver import solve, play_solution

board = Board(3)
for move in solve(3, 1, 3, 2):
    board.move(move.source, move.dest)
assert board.is_solved()

# or let the solver drive the board and report each step
board = Board(4)
for move in play_solution(board, 1, 2, 3):
    print(move.disc, move.source, move.dest)
```

- `hanoitowers.board`: `Board` (`peg`, `top_index`, `move`, `is_solved`,
  `rows`), `IllegalMoveError`, raised when a larger disc would land on a
  smaller one, and `winning_sum`.
- `hanoitowers.solver`: `solve` yields `Move(disc, source, dest)` tuples;
  `play_solution` applies them to a board as it yields them.
- `hanoitowers.controller`: `StateMachine` with the ready-made
  `peg_selector`, `disc_count_selector` (3 to 6 discs, starting at 5) and
  `mode_selector` (game or tutorial); `JoystickFilter`, which turns stick
  readings into one `Direction` step per push; `GameSession`, a game
  played by two button presses per move, counting moves and errors; and
  `analyse`, which returns an `Analysis` of moves, ideal moves, mistakes
  and errors.
- `hanoitowers.layout`: `peg_rects`, `disc_rects`, `arrow_origin` and
  `arrow_pixels` give the `Rect`s (with a `Fill`) and pixels for drawing
  the pegs, discs and selection arrow on an 84×48 screen.

## What it does not do

The package does not draw to any screen or read a joystick or button.
`controller` and `layout` compute states, steps and geometry only; a
program that shows them on a display and feeds in the input has to be
written around them.

## Tests

    pip install ".[test]"
    pytest