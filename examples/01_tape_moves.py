#!/usr/bin/env python3

import os
import sys

sys.path.append(os.path.join(os.path.dirname(__file__), '..', 'src'))

from bfrw import Tape, move_left, move_right, render_tape


def main():
    tape = Tape.from_values([3, 2, 1], [4, 5, 6])
    print("start")
    print(render_tape(tape), end="")
    print("move_left")
    print(render_tape(move_left(tape)), end="")
    print("move_right")
    print(render_tape(move_right(tape)), end="")
    print("move_right with nothing to the right")
    print(render_tape(move_right(Tape.from_values([3, 2, 1]))), end="")


if __name__ == "__main__":
    main()
