from __future__ import annotations

from typing import Iterable, Iterator, List, Sequence

from loguru import logger

from .ast import Add, Multiply, Print, Program, Statement
from .errors import ArgumentMismatch, TrailingTokens, UnknownCommand
from .tokens import Token, TokenKind

SHAPES = {
    "print": 'print "<text>"',
    "add": "add <int> <int>",
    "multiply": "multiply <int> <int>",
}


def int_range(bits: int):
    return -(1 << (bits - 1)), (1 << (bits - 1)) - 1


def split_lines(tokens: Iterable[Token]) -> Iterator[List[Token]]:
    """Group tokens into logical lines, dropping the line markers."""
    current: List[Token] = []
    for tok in tokens:
        if tok.kind in (TokenKind.EndOfLine, TokenKind.EndOfInput):
            if current:
                yield current
            current = []
            if tok.kind == TokenKind.EndOfInput:
                return
            continue
        current.append(tok)
    if current:
        yield current


class Parser:
    """Builds a Program from a token sequence, one statement per logical line.

    The grammar is strict: an unknown leading word, a wrong argument kind
    or count, and anything after the last expected argument are all errors.
    """

    def __init__(self, int_bits: int = 64):
        self.int_bits = int_bits
        self.int_min, self.int_max = int_range(int_bits)

    def parse(self, tokens: Sequence[Token]) -> Program:
        statements: List[Statement] = []
        for line_tokens in split_lines(tokens):
            statements.append(self.parse_line(line_tokens))
        logger.debug("parsed {} statements", len(statements))
        return Program(tuple(statements))

    def parse_line(self, line_tokens: List[Token]) -> Statement:
        head, args = line_tokens[0], line_tokens[1:]
        if head.kind != TokenKind.Keyword:
            raise UnknownCommand(
                f"{head.describe()} is not a command (expected one of: {', '.join(SHAPES)})",
                line=head.line,
                column=head.column,
            )
        if head.value == "print":
            return self._parse_print(head, args)
        return self._parse_binary(head, args)

    def _parse_print(self, head: Token, args: List[Token]) -> Print:
        if not args or args[0].kind != TokenKind.String:
            self._mismatch(head, args)
        self._no_trailing(head, args, 1)
        return Print(args[0].value, line=head.line)

    def _parse_binary(self, head: Token, args: List[Token]) -> Statement:
        if len(args) < 2 or any(a.kind != TokenKind.Int for a in args[:2]):
            self._mismatch(head, args)
        for arg in args[:2]:
            if not self.int_min <= arg.value <= self.int_max:
                raise ArgumentMismatch(
                    f"{arg.value} does not fit in a {self.int_bits}-bit signed integer",
                    line=arg.line,
                    column=arg.column,
                )
        self._no_trailing(head, args, 2)
        lhs, rhs = args[0].value, args[1].value
        if head.value == "add":
            return Add(lhs, rhs, line=head.line)
        return Multiply(lhs, rhs, line=head.line)

    def _mismatch(self, head: Token, args: List[Token]):
        got = ", ".join(a.describe() for a in args) or "nothing"
        raise ArgumentMismatch(
            f"expected `{SHAPES[head.value]}`, got {got}",
            line=head.line,
            column=head.column,
        )

    def _no_trailing(self, head: Token, args: List[Token], arity: int):
        if len(args) > arity:
            extra = args[arity]
            raise TrailingTokens(
                f"unexpected {extra.describe()} after `{SHAPES[head.value]}`",
                line=extra.line,
                column=extra.column,
            )


def parse(tokens: Sequence[Token], int_bits: int = 64) -> Program:
    return Parser(int_bits=int_bits).parse(tokens)
