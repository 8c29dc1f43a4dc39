from __future__ import annotations

from dataclasses import replace
from typing import Callable, Dict, Iterable, Iterator, Optional

from .errors import InterpreterError, ResourceExhausted
from .ops_counter import decrement, increment
from .ops_memory import move_left, move_right
from .state import INSTRUCTIONS, InterpreterState, Tape, Token


class TapeInterpreter:
    """
    Tape interpreter for the < > + - instruction set.

    State is the pair (remaining program, tape) held in an InterpreterState.
    Each step consumes exactly one instruction and rewrites the tape with
    the matching rule:

        <   move_left     (TapeUnderflow at the leftmost cell)
        >   move_right    (grows the tape to the right on demand)
        +   increment
        -   decrement     (NoApplicableRule on a zero cell)

    The run ends when the program is exhausted. Any failure aborts the whole
    run; the raised error carries the unconsumed program and the last valid
    tape.
    """

    RULES: Dict[Token, Callable[[Tape], Tape]] = {
        Token.LEFT: move_left,
        Token.RIGHT: move_right,
        Token.INC: increment,
        Token.DEC: decrement,
    }

    def __init__(self, max_steps: Optional[int] = None, trace: bool = False):
        if max_steps is not None and max_steps < 0:
            raise ValueError(f"max_steps must be non-negative, got {max_steps}")
        self.max_steps = max_steps
        self.trace = trace

    def start(self, program: Iterable[Token], tape: Optional[Tape] = None) -> InterpreterState:
        program = tuple(program)
        for tok in program:
            if tok not in INSTRUCTIONS:
                raise ValueError(f"Not an instruction token: {tok!r}")
        return InterpreterState(
            program=program,
            tape=Tape.initial() if tape is None else tape,
            is_tracing=self.trace,
        )

    def step(self, state: InterpreterState) -> InterpreterState:
        """Apply the rule for the next instruction and return the next state."""
        if state.done:
            raise ValueError("No instruction left to execute")
        if self.max_steps is not None and state.pc >= self.max_steps:
            raise ResourceExhausted(
                message=f"ResourceExhausted: step limit of {self.max_steps} reached",
                remaining=state.remaining,
                tape=state.tape,
                step=state.pc,
            )

        tok = state.program[state.pc]
        try:
            tape = self.RULES[tok](state.tape)
        except InterpreterError as e:
            raise replace(
                e,
                message=f"{e.message} (step {state.pc}, instruction {tok.value!r})",
                remaining=state.remaining,
                tape=state.tape,
                step=state.pc,
            ) from e

        nxt = InterpreterState(
            program=state.program,
            tape=tape,
            pc=state.pc + 1,
            # Earlier states keep their own trace; only the new one grows.
            trace=list(state.trace) if state.is_tracing else state.trace,
            is_tracing=state.is_tracing,
        )
        if nxt.is_tracing:
            back, front = tape.values()
            nxt.add_trace(f"{state.pc}: {tok.value} back={back} front={front}")
        return nxt

    def iter_run(self, program: Iterable[Token], tape: Optional[Tape] = None) -> Iterator[InterpreterState]:
        """Yield every state from the initial one to the terminal one.

        A host can stop consuming the iterator between transitions to impose
        its own deadline.
        """
        state = self.start(program, tape)
        yield state
        while not state.done:
            state = self.step(state)
            yield state

    def run(self, program: Iterable[Token], tape: Optional[Tape] = None) -> InterpreterState:
        state = self.start(program, tape)
        while not state.done:
            state = self.step(state)
        return state
