from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Iterable, List, Optional

from .interpreter import TapeInterpreter
from .lexer import tokenize
from .render import DISPLAY_MODES, render_tape
from .state import Tape, Token


@dataclass(frozen=True)
class RunOptions:
    display: str = 'int'
    max_steps: Optional[int] = None
    trace: bool = False

    def __post_init__(self):
        if self.display not in DISPLAY_MODES:
            raise ValueError(f"Unknown display mode: {self.display!r}")
        if self.max_steps is not None and self.max_steps < 0:
            raise ValueError(f"max_steps must be non-negative, got {self.max_steps}")


@dataclass(frozen=True)
class RunResult:
    tape: Tape
    text: str
    steps: int
    trace: List[str] = field(default_factory=list)


def run_tokens(tokens: Iterable[Token], *, options: Optional[RunOptions] = None, tape: Optional[Tape] = None) -> RunResult:
    opts = RunOptions() if options is None else options
    interp = TapeInterpreter(max_steps=opts.max_steps, trace=opts.trace)
    state = interp.run(tokens, tape)
    return RunResult(
        tape=state.tape,
        text=render_tape(state.tape, opts.display),
        steps=state.pc,
        trace=list(state.trace),
    )


def run_string(source: str, *, options: Optional[RunOptions] = None, tape: Optional[Tape] = None) -> RunResult:
    return run_tokens(tokenize(source), options=options, tape=tape)


def run_file(
    path: str | Path,
    *,
    options: Optional[RunOptions] = None,
    tape: Optional[Tape] = None,
    encoding: str = "utf-8",
) -> RunResult:
    p = Path(path)
    return run_string(p.read_text(encoding=encoding), options=options, tape=tape)
