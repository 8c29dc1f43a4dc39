from .api import RunOptions, RunResult, run_file, run_string, run_tokens
from .errors import (
    BFRWError,
    InterpreterError,
    LexicalRejection,
    NoApplicableRule,
    ResourceExhausted,
    Stuck,
    TapeUnderflow,
)
from .interpreter import TapeInterpreter
from .lexer import tokenize
from .ops_counter import decrement, increment
from .ops_memory import move_left, move_right
from .render import render_tape
from .state import Counter, InterpreterState, Tape, Token

__all__ = [
    'TapeInterpreter',
    'tokenize',
    'Token',
    'Counter',
    'Tape',
    'InterpreterState',
    'move_left',
    'move_right',
    'increment',
    'decrement',
    'render_tape',
    'RunOptions',
    'RunResult',
    'run_string',
    'run_file',
    'run_tokens',
    'BFRWError',
    'LexicalRejection',
    'InterpreterError',
    'TapeUnderflow',
    'NoApplicableRule',
    'Stuck',
    'ResourceExhausted',
]
