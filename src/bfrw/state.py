from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Iterable, Iterator, List, Optional, Tuple


class Token(Enum):
    LEFT = '<'
    RIGHT = '>'
    INC = '+'
    DEC = '-'
    MARK = '*'

    @property
    def is_instruction(self) -> bool:
        return self is not Token.MARK


INSTRUCTIONS = frozenset(t for t in Token if t.is_instruction)


@dataclass(frozen=True)
class Counter:
    """A memory cell: a run of MARK tokens whose length is the cell value.

    Stored like CellStack, as a chain where each link adds one mark on top
    of a shared shorter counter, so adding or taking a mark is O(1).
    """

    rest: Optional["Counter"] = field(default=None, repr=False)
    size: int = 0

    @classmethod
    def of(cls, value: int) -> "Counter":
        if value < 0:
            raise ValueError(f"Counter value must be non-negative, got {value}")
        cell = ZERO
        for _ in range(value):
            cell = cell.add_mark()
        return cell

    @classmethod
    def from_marks(cls, marks: Iterable[Token]) -> "Counter":
        marks = tuple(marks)
        if any(m is not Token.MARK for m in marks):
            raise ValueError("Counter may only hold MARK tokens")
        return cls.of(len(marks))

    def add_mark(self) -> "Counter":
        return Counter(self, self.size + 1)

    def take_mark(self) -> "Counter":
        if self.rest is None:
            raise IndexError("take_mark from empty Counter")
        return self.rest

    @property
    def marks(self) -> Tuple[Token, ...]:
        return (Token.MARK,) * self.size

    @property
    def value(self) -> int:
        return self.size

    def __len__(self) -> int:
        return self.size

    # Every mark is the same token, so counters of equal size are equal.
    def __eq__(self, other) -> bool:
        if not isinstance(other, Counter):
            return NotImplemented
        return self.size == other.size

    def __hash__(self) -> int:
        return hash(self.size)

    def __repr__(self) -> str:
        return f"Counter({self.size})"


ZERO = Counter()


@dataclass(frozen=True)
class CellStack:
    """Persistent singly linked stack of counters, nearest-to-head first.

    ``push`` and ``pop`` share the tail with the original stack, so both are
    O(1) and never mutate an existing stack.
    """

    head: Optional[Counter] = None
    tail: Optional["CellStack"] = field(default=None, repr=False)
    size: int = 0

    @classmethod
    def of(cls, cells: Iterable[Counter]) -> "CellStack":
        items = list(cells)
        stack = EMPTY
        for cell in reversed(items):
            stack = stack.push(cell)
        return stack

    def push(self, cell: Counter) -> "CellStack":
        return CellStack(cell, self, self.size + 1)

    def pop(self) -> Tuple[Counter, "CellStack"]:
        if self.head is None:
            raise IndexError("pop from empty CellStack")
        return self.head, self.tail

    def __len__(self) -> int:
        return self.size

    def __bool__(self) -> bool:
        return self.size > 0

    def __iter__(self) -> Iterator[Counter]:
        node = self
        while node.head is not None:
            yield node.head
            node = node.tail

    def __eq__(self, other) -> bool:
        if not isinstance(other, CellStack):
            return NotImplemented
        return self.size == other.size and all(a == b for a, b in zip(self, other))

    def __hash__(self) -> int:
        return hash(tuple(self))

    def __repr__(self) -> str:
        return f"CellStack({self.values()!r})"

    def values(self) -> List[int]:
        return [c.value for c in self]


EMPTY = CellStack()


@dataclass(frozen=True)
class Tape:
    """Two stacks around the head: ``back`` holds the current cell and the
    cells to its left, ``front`` the visited cells to its right. Both run
    nearest-first."""

    back: CellStack
    front: CellStack = EMPTY

    def __post_init__(self):
        if not self.back:
            raise ValueError("Tape back must hold the current cell")

    @classmethod
    def initial(cls) -> "Tape":
        return cls(EMPTY.push(ZERO))

    @classmethod
    def from_values(cls, back: Iterable[int], front: Iterable[int] = ()) -> "Tape":
        return cls(
            CellStack.of(Counter.of(v) for v in back),
            CellStack.of(Counter.of(v) for v in front),
        )

    @property
    def current(self) -> Counter:
        return self.back.head

    def values(self) -> Tuple[List[int], List[int]]:
        return self.back.values(), self.front.values()


@dataclass
class InterpreterState:
    """The program still to run plus the tape it runs against.

    ``pc`` indexes the next instruction of ``program``; everything before it
    has been consumed and is never read again.
    """

    program: Tuple[Token, ...]
    tape: Tape
    pc: int = 0
    trace: List[str] = field(default_factory=list)
    is_tracing: bool = False

    @property
    def remaining(self) -> Tuple[Token, ...]:
        return self.program[self.pc:]

    @property
    def done(self) -> bool:
        return self.pc >= len(self.program)

    def add_trace(self, message: str) -> None:
        if self.is_tracing:
            self.trace.append(message)
