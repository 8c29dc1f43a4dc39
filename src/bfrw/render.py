from __future__ import annotations

from typing import List

from .state import Counter, Tape

DISPLAY_MODES = ('int', 'markers')


def render_counter(cell: Counter, display: str = 'int') -> str:
    if display == 'int':
        return str(cell.value)
    if display == 'markers':
        return '[' + ''.join(m.value for m in cell.marks) + ']'
    raise ValueError(f"Unknown display mode: {display!r} (expected one of {', '.join(DISPLAY_MODES)})")


def render_tape(tape: Tape, display: str = 'int') -> str:
    """Dump a tape as a Back section then a Front section.

    Both sections print in physical left-to-right order: back is stored
    nearest-first so it is reversed, front already runs away from the head.
    """
    out: List[str] = ['Back:']
    out.extend(render_counter(c, display) for c in reversed(list(tape.back)))
    out.append('Front:')
    out.extend(render_counter(c, display) for c in tape.front)
    return '\n'.join(out) + '\n\n'
