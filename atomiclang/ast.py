# AST node types for Atomic scripts
from dataclasses import dataclass
from typing import Iterator, Tuple


@dataclass(frozen=True)
class Statement:
    pass


@dataclass(frozen=True)
class Print(Statement):
    message: str
    line: int = 0


@dataclass(frozen=True)
class Add(Statement):
    lhs: int
    rhs: int
    line: int = 0


@dataclass(frozen=True)
class Multiply(Statement):
    lhs: int
    rhs: int
    line: int = 0


@dataclass(frozen=True)
class Program:
    statements: Tuple[Statement, ...] = ()

    def __iter__(self) -> Iterator[Statement]:
        return iter(self.statements)

    def __len__(self) -> int:
        return len(self.statements)
