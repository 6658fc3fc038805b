"""
  Pigment Lexer

Turns source text into a FIFO queue of tokens ending in exactly one EOF.
There are only four token kinds; operators and brackets are identifiers
carrying their literal text:

    - 12, 1.5, 2e10     -> NUMBER
    - foo, x_1          -> IDENTIFIER
    - "a \\"b\\""       -> STRING  (quotes stripped, escapes kept as written)
    - ( ) [ ] { } + ==  -> IDENTIFIER
"""

from __future__ import annotations

import logging
import re
from collections import deque
from dataclasses import dataclass
from enum import Enum
from typing import Iterator

from pigment.types.errors import PigmentLexError

logger = logging.getLogger(__name__)


class TokenKind(Enum):
    NUMBER = "number"
    STRING = "string"
    IDENTIFIER = "identifier"
    EOF = "eof"


@dataclass(frozen=True)
class Token:
    kind: TokenKind
    text: str = ""

    def str(self) -> str:
        return "EOF" if self.kind is TokenKind.EOF else self.text

    @property
    def is_eof(self) -> bool:
        return self.kind is TokenKind.EOF


EOF_TOKEN = Token(TokenKind.EOF)

# Multi-character operators come first so `<=` never lexes as `<` `=`.
OPERATORS = (
    "<<", ">>", "&&", "||", "==", "!=", "<=", ">=",
    "<", ">", "+", "-", "*", "/", "%", "&", "|", "^", "=", "!",
    "(", ")", "{", "}", "[", "]",
)

TOKEN_RE = re.compile(
    r"\s*(?:"
    r"(?P<number>\d+(?:\.\d+)?(?:[eE][+-]?\d+)?)"  # integer / decimal / exponent
    r"|(?P<identifier>[a-zA-Z][a-zA-Z0-9_]*)"  # names
    r'|(?P<string>"(?:\\.|[^"\\])*")'  # double-quoted strings
    r"|(?P<operator>" + "|".join(re.escape(op) for op in OPERATORS) + r")"
    r")",
    re.DOTALL,
)

_KINDS = {
    "number": TokenKind.NUMBER,
    "identifier": TokenKind.IDENTIFIER,
    "string": TokenKind.STRING,
    "operator": TokenKind.IDENTIFIER,
}


def _position(source: str, pos: int) -> tuple[int, int]:
    """1-based (line, column) of offset `pos`."""
    line = source.count("\n", 0, pos) + 1
    column = pos - (source.rfind("\n", 0, pos) + 1) + 1
    return line, column


def lex(source: str) -> Iterator[Token]:
    """Token generator: yields tokens, not including the trailing EOF."""
    pos = 0
    n = len(source)
    while pos < n:
        m = TOKEN_RE.match(source, pos)
        if m is None:
            skip = pos
            while skip < n and source[skip].isspace():
                skip += 1
            if skip >= n:
                break
            line, column = _position(source, skip)
            if source[skip] == '"':
                raise PigmentLexError("Unterminated string literal", line, column)
            raise PigmentLexError(f"Unexpected character {source[skip]!r}", line, column)
        group = m.lastgroup
        text = m.group(group)
        if group == "string":
            text = text[1:-1]
        yield Token(_KINDS[group], text)
        pos = m.end()


class Lexer:
    """Holds the source and the token queue the parser consumes."""

    def __init__(self, source: str):
        self.source: str = source
        self.queue: deque[Token] = deque()
        self._lexed = False

    def lex(self) -> Lexer:
        """Tokenize the whole source. Calling it again is a no-op."""
        if not self._lexed:
            self.queue.extend(lex(self.source))
            self.queue.append(EOF_TOKEN)
            self._lexed = True
            logger.debug("lexed %d tokens", len(self.queue) - 1)
        return self

    def peek(self) -> Token:
        if not self.queue:
            raise PigmentLexError("peek past end of token stream")
        return self.queue[0]

    def read(self) -> Token:
        if not self.queue:
            raise PigmentLexError("read past end of token stream")
        return self.queue.popleft()

    def __len__(self) -> int:
        return len(self.queue)
