"""Lexer for Atomic scripts.

The raw terminals (quoted strings and whitespace-delimited words) come from
a small lark grammar; this module classifies them into keywords, integer
literals, string literals and unrecognized words, and adds the line markers
the parser works with.
"""
from __future__ import annotations

import re
from pathlib import Path
from typing import List

from lark import Lark
from lark.exceptions import UnexpectedCharacters
from loguru import logger

from .errors import UnterminatedString
from .tokens import KEYWORDS, Token, TokenKind

GRAMMAR_PATH = Path(__file__).with_name("grammar.lark")

INT_PATTERN = re.compile(r"[+-]?[0-9]+")
LINE_BREAK = re.compile(r"\r\n|\r|\n")

_lark = None


def _load_lexer() -> Lark:
    global _lark
    if _lark is None:
        grammar = GRAMMAR_PATH.read_text(encoding="utf-8")
        _lark = Lark(grammar, start="start", parser="lalr", lexer="basic")
    return _lark


def classify(word: str, line: int = 0, column: int = 0) -> Token:
    """Classify a bare (unquoted) unit as a keyword, an integer or a word."""
    if word in KEYWORDS:
        return Token(TokenKind.Keyword, word, line, column)
    if INT_PATTERN.fullmatch(word):
        try:
            return Token(TokenKind.Int, int(word), line, column)
        except ValueError:
            # past the interpreter's int conversion digit limit
            pass
    return Token(TokenKind.Word, word, line, column)


def tokenize_line(text: str, line: int) -> List[Token]:
    """Tokenize a single source line without the trailing EndOfLine marker."""
    tokens: List[Token] = []
    try:
        for raw in _load_lexer().lex(text):
            if raw.type == "STRING":
                tokens.append(Token(TokenKind.String, str(raw)[1:-1], line, raw.column))
            else:
                tokens.append(classify(str(raw), line, raw.column))
    except UnexpectedCharacters as e:
        # the only character no terminal accepts is an unpaired quote
        raise UnterminatedString(
            f"string starting at column {e.column} is not closed", line=line, column=e.column
        ) from e
    return tokens


def tokenize(source: str) -> List[Token]:
    """
    Convert script text into a flat token sequence.

    Every non-blank line contributes its tokens followed by one EndOfLine
    marker; blank lines contribute nothing. The sequence always ends with
    a single EndOfInput marker.

    Raises:
        UnterminatedString: if a line holds a quote with no closing quote.
    """
    tokens: List[Token] = []
    lines = LINE_BREAK.split(source)
    if lines[-1] == "":
        lines.pop()
    for lineno, text in enumerate(lines, start=1):
        line_tokens = tokenize_line(text, lineno)
        if not line_tokens:
            continue
        tokens.extend(line_tokens)
        tokens.append(Token(TokenKind.EndOfLine, None, lineno, len(text) + 1))
    tokens.append(Token(TokenKind.EndOfInput, None, len(lines) + 1, 1))
    logger.debug("lexed {} tokens from {} lines", len(tokens), len(lines))
    return tokens
