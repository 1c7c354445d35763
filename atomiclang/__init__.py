from loguru import logger

from .ast import Add, Multiply, Print, Program, Statement
from .config import InterpreterConfig
from .errors import (
    AtomicError,
    ArgumentMismatch,
    ConfigError,
    ExecError,
    LexError,
    Overflow,
    ParseError,
    TrailingTokens,
    UnknownCommand,
    UnterminatedString,
)
from .executor import Executor, execute
from .lexer import tokenize
from .parser import Parser, parse
from .runtime import Interpreter, run_script
from .tokens import Token, TokenKind

# library stays quiet unless an application enables it
logger.disable("atomiclang")

__version__ = "0.1.0"
