"""
  Pigment Parser

Recursive descent over the lexer's token queue:

    expr    := '(' IDENT expr* ')'      -> Form(head, args)
             | '[' expr* ']'            -> Block(items)
             | '{' IDENT* '}'           -> ParamList(names)
             | NUMBER                   -> float
             | STRING                   -> str
             | IDENT                    -> Symbol
    program := expr* EOF
"""

from __future__ import annotations

import logging

from pigment import Node
from pigment.config import DEFAULT_MAX_NESTING
from pigment.reader.lexer import Lexer, TokenKind
from pigment.types.ast import Block, Form, ParamList, Symbol
from pigment.types.errors import PigmentSyntaxError

logger = logging.getLogger(__name__)


class Parser:
    def __init__(self, lexer: Lexer, max_nesting: int = DEFAULT_MAX_NESTING):
        self.lexer: Lexer = lexer.lex()
        self.max_nesting: int = max_nesting
        self._depth = 0

    def token(self, expected: str) -> None:
        """Consume one identifier token whose text must be `expected`."""
        tok = self.lexer.read()
        if tok.kind is not TokenKind.IDENTIFIER or tok.text != expected:
            raise PigmentSyntaxError(
                f"invalid token '{tok.str()}', correct token is '{expected}'."
            )

    def istoken(self, expected: str) -> bool:
        tok = self.lexer.peek()
        return tok.kind is TokenKind.IDENTIFIER and tok.text == expected

    def is_end(self) -> bool:
        return self.lexer.peek().is_eof

    def get_id(self) -> str:
        tok = self.lexer.read()
        if tok.kind is TokenKind.IDENTIFIER:
            return tok.text
        if tok.kind is TokenKind.STRING:
            raise PigmentSyntaxError(f'String Literal "{tok.text}" is not identifier.')
        if tok.kind is TokenKind.NUMBER:
            raise PigmentSyntaxError(f"Number '{tok.text}' is not identifier.")
        raise PigmentSyntaxError("'EOF' is not identifier.")

    def _until(self, closer: str) -> bool:
        """True while the sequence has not reached `closer`; EOF is an error."""
        if self.is_end():
            raise PigmentSyntaxError(
                f"invalid token 'EOF', correct token is '{closer}'."
            )
        return not self.istoken(closer)

    def parse(self) -> Node:
        """Parse a single expression."""
        self._depth += 1
        try:
            if self._depth > self.max_nesting:
                raise PigmentSyntaxError(
                    f"nesting too deep: more than {self.max_nesting} levels."
                )
            return self._parse_expr()
        except RecursionError as e:
            # max_nesting set above what the Python stack can hold
            raise PigmentSyntaxError(
                f"nesting too deep: the parser ran out of stack at {self._depth} levels."
            ) from e
        finally:
            self._depth -= 1

    def _parse_expr(self) -> Node:
        if self.istoken("("):
            self.token("(")
            name = self.get_id()
            args: list[Node] = []
            while self._until(")"):
                args.append(self.parse())
            self.token(")")
            return Form(Symbol(name), args)

        if self.istoken("["):
            self.token("[")
            items: list[Node] = []
            while self._until("]"):
                items.append(self.parse())
            self.token("]")
            return Block(items)

        if self.istoken("{"):
            self.token("{")
            names: list[str] = []
            while self._until("}"):
                names.append(self.get_id())
            self.token("}")
            return ParamList(names)

        tok = self.lexer.read()
        if tok.kind is TokenKind.NUMBER:
            return float(tok.text)
        if tok.kind is TokenKind.STRING:
            return tok.text
        if tok.kind is TokenKind.IDENTIFIER:
            return Symbol(tok.text)
        raise PigmentSyntaxError("already EOF.")

    def program(self) -> list[Node]:
        """Parse every top-level form up to EOF."""
        forms: list[Node] = []
        while not self.is_end():
            forms.append(self.parse())
        logger.debug("parsed %d top-level forms", len(forms))
        return forms


def parse_program(source: str, max_nesting: int = DEFAULT_MAX_NESTING) -> list[Node]:
    return Parser(Lexer(source), max_nesting=max_nesting).program()
