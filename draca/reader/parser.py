"""
  Draca Reader: Lexer and Parser

- Eager lexing over a single regex, streaming parse over the token iterator
- Emits plain Python values:

    - #t / #f       -> True / False
    - numbers       -> float (every number is a float)
    - "text"        -> str (raw contents, no escape processing)
    - nil           -> Nil
    - 'form         -> Quoted(form)
    - ( ... )       -> Python list
    - anything else -> Symbol (operators and `a::b` names included)
"""

from __future__ import annotations

import re
from typing import Iterator, Optional

from draca import Expression
from draca.errors import DracaParseError
from draca.types.nil import Nil
from draca.types.quoted import Quoted
from draca.types.symbol import Symbol


TOKEN_RE = re.compile(
    r"\s*(?:"
    r"(?P<comment>;[^\n]*)"  # single-line comment
    r"|(?P<quote>')"  # 'form
    r"|(?P<lparen>\()"  # (
    r"|(?P<rparen>\))"  # )
    r'|(?P<string>"[^"]*")'  # double-quoted strings
    r"|(?P<atom>[^\s()'\";]+)"  # numbers, booleans, nil, symbols
    r")"
)

NUMBER_RE = re.compile(r"[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?")

Token = tuple[str, str, int]


def _line_col(source: str, pos: int) -> tuple[int, int]:
    line = source.count("\n", 0, pos) + 1
    column = pos - (source.rfind("\n", 0, pos) + 1) + 1
    return line, column


def lex(source: str) -> Iterator[Token]:
    """Token generator: yields (token_type, token_value, offset) tuples."""
    pos = 0
    n = len(source)
    while pos < n:
        m = TOKEN_RE.match(source, pos)
        if m is None:
            rest = source[pos:]
            if not rest.strip():
                break
            start = pos + (len(rest) - len(rest.lstrip()))
            line, col = _line_col(source, start)
            if source[start] == '"':
                raise DracaParseError("Unterminated string literal", line, col, incomplete=True)
            raise DracaParseError(f"Unexpected character {source[start]!r}", line, col)
        kind = m.lastgroup
        pos = m.end()
        if kind == "comment":
            continue
        yield kind, m.group(kind), m.start(kind)


def read_atom(text: str) -> Expression:
    """Classify a bare token."""
    if text == "#t":
        return True
    if text == "#f":
        return False
    if text == "nil":
        return Nil
    if NUMBER_RE.fullmatch(text):
        return float(text)
    return Symbol(text)


class TokenStream:
    def __init__(self, source: str):
        self.source = source
        self.tokens = lex(source)
        self.buffer: list[Token] = []

    def peek(self) -> Optional[Token]:
        if not self.buffer:
            try:
                self.buffer.append(next(self.tokens))
            except StopIteration:
                return None
        return self.buffer[0]

    def advance(self) -> Optional[Token]:
        if self.buffer:
            return self.buffer.pop(0)
        return next(self.tokens, None)

    def _error(self, message: str, offset: int, incomplete: bool = False) -> DracaParseError:
        line, col = _line_col(self.source, offset)
        return DracaParseError(message, line, col, incomplete=incomplete)

    def at_end(self) -> bool:
        return self.peek() is None

    def parse_expr(self) -> Expression:
        token = self.advance()
        if token is None:
            raise self._error("Unexpected end of input", len(self.source), incomplete=True)
        tok_type, tok_val, offset = token

        if tok_type == "atom":
            return read_atom(tok_val)

        if tok_type == "string":
            return tok_val[1:-1]

        if tok_type == "quote":
            if self.at_end():
                raise self._error("Expected a form after '", offset, incomplete=True)
            return Quoted(self.parse_expr())

        if tok_type == "lparen":
            items: list[Expression] = []
            while True:
                nxt = self.peek()
                if nxt is None:
                    raise self._error("Unclosed '('", offset, incomplete=True)
                if nxt[0] == "rparen":
                    self.advance()
                    return items
                items.append(self.parse_expr())

        if tok_type == "rparen":
            raise self._error("Unexpected ')'", offset)

        raise self._error(f"Unknown token {tok_val!r}", offset)


def parse(source: str) -> list[Expression]:
    """Parse every top-level form in `source`."""
    stream = TokenStream(source)
    forms: list[Expression] = []
    while not stream.at_end():
        forms.append(stream.parse_expr())
    return forms
