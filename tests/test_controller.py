import pytest

from hanoitowers.controller import (
    Analysis,
    Direction,
    GameSession,
    JoystickFilter,
    StateMachine,
    analyse,
    disc_count_selector,
    mode_selector,
    peg_selector,
)
from hanoitowers.solver import solve


def test_peg_selector_cycles_right():
    machine = peg_selector()
    assert machine.output() == 1
    assert [machine.step(Direction.RIGHT) for _ in range(3)] == [2, 3, 1]


def test_peg_selector_wraps_left():
    machine = peg_selector()
    assert machine.step(Direction.LEFT) == 3
    assert machine.step(Direction.LEFT) == 2


def test_none_keeps_state():
    machine = peg_selector()
    machine.step(Direction.RIGHT)
    assert machine.step(Direction.NONE) == 2


def test_disc_count_selector_starts_at_five():
    machine = disc_count_selector()
    assert machine.output() == 5
    assert machine.step(Direction.RIGHT) == 6
    assert machine.step(Direction.RIGHT) == 3
    assert machine.step(Direction.LEFT) == 6


def test_mode_selector_toggles():
    machine = mode_selector()
    assert machine.output() == 4
    assert machine.step(Direction.RIGHT) == 35
    assert machine.state == 1
    assert machine.step(Direction.LEFT) == 4
    assert machine.state == 0


def test_right_then_left_returns_home():
    for factory in (peg_selector, disc_count_selector, mode_selector):
        machine = factory()
        start = machine.output()
        machine.step(Direction.RIGHT)
        machine.step(Direction.LEFT)
        assert machine.output() == start


def test_state_machine_accepts_plain_ints():
    machine = peg_selector()
    assert machine.step(1) == 2


def test_state_machine_rejects_bad_tables():
    with pytest.raises(ValueError):
        StateMachine((1, 2), ((0, 1, 1),))
    with pytest.raises(ValueError):
        StateMachine((1,), ((0, 5, 0),))
    with pytest.raises(ValueError):
        StateMachine((1,), ((0, 0, 0),), state=3)


def test_state_machine_rejects_bad_direction():
    with pytest.raises(ValueError):
        peg_selector().step(7)


def test_joystick_one_step_per_push():
    stick = JoystickFilter()
    assert stick.update("E", 0.9) is Direction.RIGHT
    assert stick.update("E", 0.9) is Direction.NONE
    assert stick.update("C", 0.1) is Direction.NONE
    assert stick.update("W", 0.8) is Direction.LEFT


def test_joystick_ignores_weak_and_vertical_pushes():
    stick = JoystickFilter()
    assert stick.update("E", 0.5) is Direction.NONE
    assert stick.update("N", 0.9) is Direction.NONE
    assert stick.triggered is False


def test_joystick_stays_triggered_at_threshold():
    stick = JoystickFilter()
    stick.update("W", 1.0)
    assert stick.update("C", 0.5) is Direction.NONE
    assert stick.triggered is True


def test_analyse_parts_add_up():
    result = analyse(4, 20, 2)
    assert result.moves == 20
    assert result.errors == 2
    assert result.ideal_moves + result.mistakes + result.errors == result.moves


def test_analyse_ideal_matches_solution_length():
    for discs in range(3, 7):
        assert analyse(discs, 0, 0).ideal_moves == len(list(solve(discs)))


def test_first_press_on_empty_peg_is_ignored():
    session = GameSession(3)
    session.press(2)
    assert session.selected is None
    session.press(1)
    assert session.selected == 1


def test_same_peg_twice_cancels_without_counting():
    session = GameSession(3)
    session.press(1)
    session.press(1)
    assert session.selected is None
    assert session.moves == 0
    assert session.board.peg(1) == (1, 2, 3)


def test_legal_move():
    session = GameSession(3)
    session.press(1)
    session.press(3)
    assert session.moves == 1
    assert session.errors == 0
    assert session.board.peg(3) == (0, 0, 1)


def test_illegal_move_counts_move_and_error():
    session = GameSession(3)
    session.press(1)
    session.press(2)
    before = session.board.rows()
    session.press(1)
    session.press(2)
    assert session.moves == 2
    assert session.errors == 1
    assert session.board.rows() == before


def test_press_rejects_unknown_peg():
    with pytest.raises(ValueError):
        GameSession(3).press(4)


def test_perfect_game_is_won_without_mistakes():
    session = GameSession(4)
    for move in solve(4, 1, 3, 2):
        assert not session.is_won()
        session.press(move.source)
        session.press(move.dest)
    assert session.is_won()
    report = session.analysis()
    assert isinstance(report, Analysis)
    assert report.moves == report.ideal_moves
    assert report.mistakes == 0
    assert report.errors == 0