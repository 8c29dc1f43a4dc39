#!/usr/bin/env python3

import os
import sys

sys.path.append(os.path.join(os.path.dirname(__file__), '..', 'src'))

from bfrw import NoApplicableRule, RunOptions, run_string


def main():
    # Each cell is a rod of beads; + adds a bead, - takes one away.
    code = """
    +++ > ++ > + <<
    -
    """
    result = run_string(code, options=RunOptions(display='markers', trace=True))
    for line in result.trace:
        print(line)
    print(result.text, end="")

    try:
        run_string(">-")
    except NoApplicableRule as e:
        print(e)


if __name__ == "__main__":
    main()
