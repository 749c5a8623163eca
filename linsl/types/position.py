"""Source positions for diagnostics."""

from __future__ import annotations

from typing import NamedTuple


class Position(NamedTuple):
    """Line (1-based, reset per source) and column (0-based offset)."""

    line: int
    column: int

    def __str__(self) -> str:
        return f"({self.line}, {self.column})"


class SList(list):
    """A list read from source, remembering where its opening paren was."""

    __slots__ = ("position",)

    def __init__(self, items=(), position: Position | None = None):
        super().__init__(items)
        self.position = position
