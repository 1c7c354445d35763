from __future__ import annotations

from typing import Callable, List, Optional

from loguru import logger

from .ast import Program
from .config import InterpreterConfig
from .executor import Executor, Sink
from .lexer import tokenize
from .parser import Parser


class Interpreter:
    """Lexer -> Parser -> Executor pipeline for one script at a time.

    The interpreter holds only its settings; every ``run`` builds a fresh
    executor, so running the same script twice gives the same output.
    """

    def __init__(
        self,
        config: Optional[InterpreterConfig] = None,
        sink: Optional[Sink] = None,
        diagnostics: Optional[Callable[[str], None]] = None,
    ):
        self.config = config or InterpreterConfig()
        self.sink = sink
        self.diagnostics = diagnostics or print
        self.executor: Optional[Executor] = None

    def load(self, source: str) -> Program:
        tokens = tokenize(source)
        if self.config.show_tokens:
            self.diagnostics(f"Tokens: {tokens}")
        program = Parser(int_bits=self.config.int_bits).parse(tokens)
        if self.config.show_ast:
            self.diagnostics(f"AST: {list(program)}")
        return program

    def check(self, source: str) -> Program:
        """Lex and parse without executing anything."""
        return self.load(source)

    def run(self, source: str) -> List[str]:
        program = self.load(source)
        self.executor = Executor(int_bits=self.config.int_bits, sink=self.sink)
        logger.debug("running {} statements", len(program))
        return self.executor.execute(program)


def run_script(source: str, config: Optional[InterpreterConfig] = None, sink: Optional[Sink] = None) -> List[str]:
    return Interpreter(config=config, sink=sink).run(source)
