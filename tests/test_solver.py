import pytest

from hanoitowers.board import Board
from hanoitowers.solver import Move, play_solution, solve


def test_single_disc_is_one_move():
    assert list(solve(1, 1, 2, 3)) == [Move(1, 1, 2)]


@pytest.mark.parametrize("count", range(1, 8))
def test_solution_length_is_minimal(count):
    assert len(list(solve(count))) == 2**count - 1


@pytest.mark.parametrize("count", range(1, 8))
def test_middle_move_carries_largest_disc(count):
    moves = list(solve(count, 1, 3, 2))
    middle = moves[len(moves) // 2]
    assert middle == Move(count, 1, 3)


def test_smallest_disc_moves_every_other_step():
    moves = list(solve(5))
    assert all(move.disc == 1 for move in moves[::2])
    assert all(move.disc != 1 for move in moves[1::2])


@pytest.mark.parametrize("count", range(1, 8))
@pytest.mark.parametrize("pegs", [(1, 2, 3), (1, 3, 2)])
def test_play_solution_solves_board(count, pegs):
    board = Board(count)
    played = list(play_solution(board, *pegs))
    assert len(played) == 2**count - 1
    assert board.is_solved()
    assert board.peg(pegs[1]) == tuple(range(1, count + 1))
    assert board.top_index(1) == count


def test_play_solution_is_lazy():
    board = Board(3)
    steps = play_solution(board)
    first = next(steps)
    assert board.top_index(first.dest) == board.num_discs - 1
    assert not board.is_solved()


@pytest.mark.parametrize("pegs", [(1, 1, 2), (1, 2, 4), (0, 1, 2)])
def test_solve_rejects_bad_pegs(pegs):
    with pytest.raises(ValueError):
        solve(3, *pegs)


def test_solve_rejects_no_discs():
    with pytest.raises(ValueError):
        solve(0)