from dataclasses import dataclass
from typing import Optional


@dataclass
class ErrorInfo:
    """Describes a failed run: error kind, message and best-known position."""
    kind: str
    message: str
    line: Optional[int] = None
    column: Optional[int] = None

    def location(self) -> str:
        if self.line is None:
            return ''
        if self.column is None:
            return f"line {self.line}"
        return f"line {self.line}, column {self.column}"

    def __str__(self) -> str:
        where = self.location()
        if where:
            return f"{self.kind} at {where}: {self.message}"
        return f"{self.kind}: {self.message}"


class VietError(Exception):
    """Exception type used to propagate Viet syntax and runtime errors."""
    kind = 'Error'

    def __init__(self, message: str, line: Optional[int] = None, column: Optional[int] = None):
        self.err = ErrorInfo(self.kind, message, line, column)
        super().__init__(str(self.err))

    @property
    def message(self) -> str:
        return self.err.message

    @property
    def line(self) -> Optional[int]:
        return self.err.line

    @property
    def column(self) -> Optional[int]:
        return self.err.column

    def locate(self, line: int, column: Optional[int] = None) -> 'VietError':
        # Keep the innermost position if one was already recorded
        if self.err.line is None:
            self.err.line = line
            self.err.column = column
            self.args = (str(self.err),)
        return self

    def __str__(self) -> str:
        return str(self.err)


class VietSyntaxError(VietError):
    """Raised by the lexer and parser."""
    kind = 'SyntaxError'


class VietRuntimeError(VietError):
    """Raised by the interpreter and environment."""
    kind = 'RuntimeError'
