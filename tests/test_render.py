#!/usr/bin/env python3
"""
Text rendering of a tape.
"""

import sys
import os
sys.path.append(os.path.join(os.path.dirname(__file__), '..', 'src'))

import pytest

from bfrw import Tape, render_tape


def test_integer_display_physical_order():
    tape = Tape.from_values([3, 2, 1], [4, 5, 6])
    assert render_tape(tape) == "Back:\n1\n2\n3\nFront:\n4\n5\n6\n\n"


def test_marker_display():
    tape = Tape.from_values([2, 0], [3])
    assert render_tape(tape, 'markers') == "Back:\n[]\n[**]\nFront:\n[***]\n\n"


def test_empty_front_section():
    assert render_tape(Tape.initial()) == "Back:\n0\nFront:\n\n"


def test_unknown_display_mode():
    with pytest.raises(ValueError):
        render_tape(Tape.initial(), 'hex')
