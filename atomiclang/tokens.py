from enum import Enum
from dataclasses import dataclass
from typing import Any

KEYWORDS = ("print", "add", "multiply")


class TokenKind(str, Enum):
    Keyword = "Keyword"
    String = "String"
    Int = "Int"
    Word = "Word"  # unclassified unit, rejected by the parser where an argument is required
    EndOfLine = "EndOfLine"
    EndOfInput = "EndOfInput"


@dataclass(frozen=True)
class Token:
    kind: TokenKind
    value: Any = None
    line: int = 0
    column: int = 0

    def describe(self) -> str:
        if self.kind == TokenKind.String:
            return f'string "{self.value}"'
        if self.kind == TokenKind.Int:
            return f"integer {self.value}"
        if self.kind in (TokenKind.Keyword, TokenKind.Word):
            return f"'{self.value}'"
        return "end of line"

    def __repr__(self) -> str:
        if self.value is None:
            return f"{self.kind.value}"
        return f"{self.kind.value}({self.value!r})"
