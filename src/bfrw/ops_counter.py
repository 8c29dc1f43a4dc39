from __future__ import annotations

from .errors import NoApplicableRule
from .state import Tape


def increment(tape: Tape) -> Tape:
    cell, rest = tape.back.pop()
    return Tape(rest.push(cell.add_mark()), tape.front)


def decrement(tape: Tape) -> Tape:
    cell, rest = tape.back.pop()
    # An empty counter has no mark to take; there is no rule for that shape.
    if not cell.size:
        raise NoApplicableRule(message="NoApplicableRule: cannot decrement a zero cell")
    return Tape(rest.push(cell.take_mark()), tape.front)
