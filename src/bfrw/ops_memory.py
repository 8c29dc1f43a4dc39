from __future__ import annotations

from .errors import TapeUnderflow
from .state import ZERO, Tape


def move_left(tape: Tape) -> Tape:
    # The current cell goes onto front; the tape does not extend to the left.
    if len(tape.back) < 2:
        raise TapeUnderflow(message="TapeUnderflow: no cell to the left of the head")
    cell, back = tape.back.pop()
    return Tape(back, tape.front.push(cell))


def move_right(tape: Tape) -> Tape:
    front = tape.front if tape.front else tape.front.push(ZERO)
    cell, front = front.pop()
    return Tape(tape.back.push(cell), front)
