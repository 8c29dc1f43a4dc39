from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, List, Optional, Tuple

if TYPE_CHECKING:
    from .state import Tape, Token


def _build_context(lines: List[str], line_no_1: int, column_1: int, *, context: int = 2) -> str:
    idx = max(1, line_no_1)
    start = max(1, idx - context)
    end = min(len(lines), idx + context)

    out: List[str] = []
    for i in range(start, end + 1):
        prefix = '>' if i == idx else ' '
        out.append(f"{prefix} {i:4d} | {lines[i - 1]}")
        if i == idx:
            out.append(f"       | {' ' * (column_1 - 1)}^")
    return "\n".join(out)


def _hint_for(char: str) -> Optional[str]:
    if char in '[]':
        return 'Loops are not supported; only < > + - are valid instructions.'
    if char in '.,':
        return 'Input/output instructions are not supported; only < > + - are valid instructions.'
    return None


@dataclass
class BFRWError(Exception):
    message: str

    def __str__(self) -> str:
        return self.message


@dataclass
class LexicalRejection(BFRWError):
    line: int
    column: int
    context: str


@dataclass
class InterpreterError(BFRWError):
    remaining: Tuple["Token", ...] = ()
    tape: Optional["Tape"] = None
    step: Optional[int] = None


@dataclass
class TapeUnderflow(InterpreterError):
    pass


@dataclass
class NoApplicableRule(InterpreterError):
    pass


Stuck = NoApplicableRule


@dataclass
class ResourceExhausted(InterpreterError):
    pass


def make_lexical_error(*, char: str, source: str, line: int, column: int) -> LexicalRejection:
    lines = source.split('\n')
    ctx = _build_context(lines, line, column)
    hint = _hint_for(char)
    hint_block = f"\nHint: {hint}" if hint else ""
    return LexicalRejection(
        message=f"LexicalRejection: unexpected character {char!r} (line {line}, column {column})\n{ctx}{hint_block}",
        line=line,
        column=column,
        context=ctx,
    )
