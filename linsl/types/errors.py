from __future__ import annotations

from linsl.types.position import Position


class LinslError(Exception):
    """ Base class for all Linsl errors"""
    pass


class LinslInternalError(LinslError):
    """ Raised on interpreter faults that user code cannot cause (e.g. unreadable input)"""

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message

    def __str__(self) -> str:
        return self.message


class LinslSyntaxError(LinslError):
    """ Raised for malformed or ill-typed forms, arity mismatches and unbound symbols"""

    def __init__(self, message: str, position: Position | None = None):
        super().__init__(message)
        self.message = message
        self.position = position

    def __str__(self) -> str:
        if self.position is None:
            return f"Syntax error: {self.message}"
        return f"Syntax error at {self.position}: {self.message}"


class UnbalancedParens(LinslError):
    """ Raised when a unit of input has different numbers of '(' and ')'"""

    def __init__(self, open_count: int, close_count: int):
        super().__init__(open_count, close_count)
        self.open_count = open_count
        self.close_count = close_count

    def __str__(self) -> str:
        return f"Unbalanced parentheses ({self.open_count}, {self.close_count})"
