import re

from typing import List, Tuple

from .errors import make_lexical_error
from .state import Token


_SYMBOLS = {t.value: t for t in Token if t.is_instruction}


def _blank_comments(code: str) -> str:
    # Comments are replaced by spaces, keeping newlines, so reported
    # line/column positions still point into the original source.
    def blank(m):
        return re.sub(r'[^\n]', ' ', m.group(0))

    # One left-to-right pass, so whichever comment opens first wins.
    return re.sub(r'//[^\n]*|/\*.*?\*/', blank, code, flags=re.DOTALL)


def tokenize(source: str) -> Tuple[Token, ...]:
    """
    Split program text into instruction tokens.

    Every operator character is its own token, so ``>>`` is two moves.
    Whitespace and ``//`` / ``/* */`` comments are ignored; any other
    character is rejected with a LexicalRejection pointing at it.
    """
    code = _blank_comments(source)
    tokens: List[Token] = []
    for line_no_0, line in enumerate(code.split('\n')):
        for col_0, ch in enumerate(line):
            if ch.isspace():
                continue
            tok = _SYMBOLS.get(ch)
            if tok is None:
                raise make_lexical_error(char=ch, source=source, line=line_no_0 + 1, column=col_0 + 1)
            tokens.append(tok)
    return tuple(tokens)


def detokenize(tokens) -> str:
    return ''.join(t.value for t in tokens)
