#!/usr/bin/env python3
"""
Counter operations at the head cell.
"""

import sys
import os
import time
sys.path.append(os.path.join(os.path.dirname(__file__), '..', 'src'))

import pytest

from bfrw import Counter, NoApplicableRule, Stuck, Tape, Token, decrement, increment


def test_counter_value_is_marker_count():
    c = Counter.of(3)
    assert c.value == 3
    assert c.marks == (Token.MARK, Token.MARK, Token.MARK)
    assert Counter().value == 0


def test_counter_rejects_negative_and_non_marker():
    with pytest.raises(ValueError):
        Counter.of(-1)
    with pytest.raises(ValueError):
        Counter.from_marks((Token.MARK, Token.INC))


def test_increment_touches_only_current_cell():
    tape = increment(Tape.from_values([4, 1], [2]))
    assert tape.values() == ([5, 1], [2])


def test_decrement_touches_only_current_cell():
    tape = decrement(Tape.from_values([4, 1], [2]))
    assert tape.values() == ([3, 1], [2])


@pytest.mark.parametrize("value", [0, 1, 6])
def test_increment_then_decrement_is_identity(value):
    tape = Tape.from_values([value, 3], [8])
    assert decrement(increment(tape)) == tape


def test_decrement_on_zero_cell_has_no_rule():
    with pytest.raises(NoApplicableRule):
        decrement(Tape.initial())


def test_stuck_is_no_applicable_rule():
    assert Stuck is NoApplicableRule
    with pytest.raises(Stuck):
        decrement(Tape.from_values([0, 5]))


def test_counter_from_marks():
    assert Counter.from_marks((Token.MARK,) * 4) == Counter.of(4)
    assert Counter.from_marks(()) == Counter()


def test_decrement_shares_the_shorter_counter():
    tape = increment(Tape.from_values([2]))
    assert decrement(tape).current is tape.current.rest


def test_long_increment_run_is_linear():
    start = time.perf_counter()
    tape = Tape.initial()
    for _ in range(20000):
        tape = increment(tape)
    for _ in range(20000):
        tape = decrement(tape)
    elapsed = time.perf_counter() - start
    assert tape.current.value == 0
    assert elapsed < 5.0
