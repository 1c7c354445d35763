from typing import Optional


class AtomicError(Exception):
    """Base error for every stage of the pipeline."""

    kind = "AtomicError"

    def __init__(self, detail: str, line: Optional[int] = None, column: Optional[int] = None):
        self.detail = detail
        self.line = line
        self.column = column
        message = self.kind
        if line is not None:
            message += f" on line {line}"
        super().__init__(f"{message}: {detail}")


class LexError(AtomicError):
    kind = "LexError"


class UnterminatedString(LexError):
    """Raised when a quoted string has no closing quote before end of line."""
    kind = "UnterminatedString"


class ParseError(AtomicError):
    kind = "ParseError"


class UnknownCommand(ParseError):
    kind = "UnknownCommand"


class ArgumentMismatch(ParseError):
    """Raised when a command gets the wrong number or kind of arguments."""
    kind = "ArgumentMismatch"


class TrailingTokens(ParseError):
    kind = "TrailingTokens"


class ExecError(AtomicError):
    kind = "ExecError"


class Overflow(ExecError):
    """Raised when an arithmetic result does not fit the configured integer width."""
    kind = "Overflow"


class ConfigError(AtomicError):
    """Raised when interpreter settings fail validation."""
    kind = "ConfigError"
