from __future__ import annotations

from typing import Callable, List, Optional

from loguru import logger

from .ast import Add, Multiply, Print, Program, Statement
from .errors import ExecError, Overflow
from .parser import int_range

Sink = Callable[[str], None]


class Executor:
    """Runs a Program in source order and collects its output lines.

    Each line is recorded in ``console`` and handed to ``sink`` as soon as
    it is produced, so lines emitted before a failing statement stay
    visible to the caller.
    """

    def __init__(self, int_bits: int = 64, sink: Optional[Sink] = None):
        self.int_bits = int_bits
        self.int_min, self.int_max = int_range(int_bits)
        self.sink = sink
        self.console: List[str] = []

    def emit(self, text: str):
        self.console.append(text)
        if self.sink is not None:
            self.sink(text)

    def execute(self, program: Program) -> List[str]:
        self.console = []
        for stmt in program:
            self.emit(self.evaluate(stmt))
        logger.debug("executed {} statements", len(program))
        return list(self.console)

    def evaluate(self, stmt: Statement) -> str:
        if isinstance(stmt, Print):
            return stmt.message
        if isinstance(stmt, Add):
            total = self._checked(stmt.lhs + stmt.rhs, f"{stmt.lhs} + {stmt.rhs}", stmt.line)
            return f"{stmt.lhs} + {stmt.rhs} = {total}"
        if isinstance(stmt, Multiply):
            product = self._checked(stmt.lhs * stmt.rhs, f"{stmt.lhs} * {stmt.rhs}", stmt.line)
            return f"{stmt.lhs} * {stmt.rhs} = {product}"
        raise ExecError(f"cannot execute {type(stmt).__name__}", line=getattr(stmt, "line", None))

    def _checked(self, value: int, expr: str, line: int) -> int:
        if not self.int_min <= value <= self.int_max:
            raise Overflow(f"{expr} overflows a {self.int_bits}-bit signed integer", line=line)
        return value


def execute(program: Program, int_bits: int = 64, sink: Optional[Sink] = None) -> List[str]:
    return Executor(int_bits=int_bits, sink=sink).execute(program)
