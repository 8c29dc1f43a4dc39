#!/usr/bin/env python3
"""
Head movement on the two-stack tape.
"""

import sys
import os
sys.path.append(os.path.join(os.path.dirname(__file__), '..', 'src'))

import pytest

from bfrw import Tape, TapeUnderflow, move_left, move_right, render_tape


def test_move_left_scenario():
    tape = move_left(Tape.from_values([3, 2, 1], [4, 5, 6]))
    assert tape.values() == ([2, 1], [3, 4, 5, 6])
    assert render_tape(tape) == "Back:\n1\n2\nFront:\n3\n4\n5\n6\n\n"


def test_move_right_scenario():
    tape = move_right(Tape.from_values([3, 2, 1], [4, 5, 6]))
    assert tape.values() == ([4, 3, 2, 1], [5, 6])
    assert render_tape(tape) == "Back:\n1\n2\n3\n4\nFront:\n5\n6\n\n"


def test_move_right_materializes_zero_cell():
    tape = move_right(Tape.from_values([3, 2, 1], []))
    assert tape.values() == ([0, 3, 2, 1], [])
    assert render_tape(tape) == "Back:\n1\n2\n3\n0\nFront:\n\n"


def test_move_left_at_leftmost_cell_underflows():
    with pytest.raises(TapeUnderflow):
        move_left(Tape.initial())
    with pytest.raises(TapeUnderflow):
        move_left(Tape.from_values([7], [1, 2]))


@pytest.mark.parametrize("back, front", [
    ([3, 2, 1], [4, 5, 6]),
    ([0, 0], []),
    ([5, 9], [1]),
])
def test_left_then_right_round_trip(back, front):
    tape = Tape.from_values(back, front)
    assert move_right(move_left(tape)) == tape


def test_right_then_left_adds_zero_cell_at_front_end():
    tape = Tape.from_values([2, 1], [])
    result = move_left(move_right(tape))
    assert result != tape
    assert result == Tape.from_values([2, 1], [0])


def test_moves_do_not_mutate_the_original_tape():
    tape = Tape.from_values([3, 2, 1], [4])
    move_left(tape)
    move_right(tape)
    assert tape.values() == ([3, 2, 1], [4])


def test_tape_requires_a_current_cell():
    with pytest.raises(ValueError):
        Tape.from_values([], [1])


def test_initial_tape_is_single_zero_cell():
    assert Tape.initial().values() == ([0], [])
    assert Tape.initial().current.value == 0
