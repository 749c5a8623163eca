"""
  Linsl Tokenizer

- Reads from an ordered queue of line-buffered sources (anything with
  `readline()`), so several files and standard input read as one stream.
- Each source is one unit of input: its parentheses are counted before any of
  its tokens are handed out.
- Tokens are produced a line at a time and carry a (line, column) position.

Lexical grammar:

    (  )  '  `  ,  ,@     delimiters, one token each
    ; ...                 comment up to the end of the line, dropped
    anything else         maximal run of non-space, non-delimiter characters
"""

from __future__ import annotations

import io
import logging
import re
from collections import deque
from typing import NamedTuple, Optional, TextIO

from linsl.types.errors import LinslInternalError, UnbalancedParens
from linsl.types.position import Position

logger = logging.getLogger(__name__)


TOKEN_RE = re.compile(
    r"\s*(?:"
    r"(?P<comment>;.*)"  # single-line comment
    r"|(?P<splice>,@)"  # ,@
    r"|(?P<delim>[()'`,])"  # ( ) ' ` ,
    r"|(?P<atom>[^\s()'`,;]+)"  # booleans, numbers, symbols
    r")"
)


class Token(NamedTuple):
    lexeme: str
    position: Position


def lex_line(line: str, line_no: int) -> list[Token]:
    """Split one line of source into tokens."""
    tokens: list[Token] = []
    pos = 0
    n = len(line)
    while pos < n:
        m = TOKEN_RE.match(line, pos)
        if m is None or m.end() == pos:
            # only trailing whitespace is left
            break
        pos = m.end()
        if m.group("comment") is not None:
            break
        kind = m.lastgroup
        tokens.append(Token(m.group(kind), Position(line_no, m.start(kind))))
    return tokens


def count_parens(lines: list[str]) -> tuple[int, int]:
    """Count '(' and ')' outside comments."""
    opening = closing = 0
    for line in lines:
        code = line.split(";", 1)[0]
        opening += code.count("(")
        closing += code.count(")")
    return opening, closing


class _Source:
    __slots__ = ("stream", "name", "lines", "line_no")

    def __init__(self, stream: TextIO, name: str):
        self.stream = stream
        self.name = name
        self.lines: Optional[deque[str]] = None
        self.line_no = 0

    def load(self) -> None:
        """Read the whole unit, line by line, and check its parentheses."""
        lines = []
        try:
            while line := self.stream.readline():
                lines.append(line)
        except (OSError, UnicodeDecodeError) as err:
            raise LinslInternalError(f"Could not read from {self.name}: {err}") from err
        opening, closing = count_parens(lines)
        if opening != closing:
            raise UnbalancedParens(opening, closing)
        self.lines = deque(lines)


class Tokenizer:
    """Queue of input sources read as one logical token stream."""

    def __init__(self):
        self.sources: deque[_Source] = deque()
        self.buffer: deque[Token] = deque()

    def add_source(self, stream: TextIO, name: str = "<input>") -> None:
        """Append a source; it is read after every source already queued."""
        self.sources.append(_Source(stream, name))

    def add_text(self, text: str, name: str = "<string>") -> None:
        self.add_source(io.StringIO(text), name)

    @property
    def source_name(self) -> Optional[str]:
        return self.sources[0].name if self.sources else None

    def _fill(self) -> bool:
        """Refill the token buffer from the next non-empty line, if any."""
        while not self.buffer:
            if not self.sources:
                return False
            src = self.sources[0]
            if src.lines is None:
                try:
                    src.load()
                except (UnbalancedParens, LinslInternalError):
                    # drop the whole unit so the next call moves on
                    self.sources.popleft()
                    raise
                logger.debug("Reading %s (%d lines)", src.name, len(src.lines))
            if not src.lines:
                logger.debug("Finished %s", src.name)
                self.sources.popleft()
                continue
            src.line_no += 1
            self.buffer.extend(lex_line(src.lines.popleft(), src.line_no))
        return True

    def peek(self) -> Optional[Token]:
        """Return the next token without consuming it, or None at end of input."""
        if not self._fill():
            return None
        return self.buffer[0]

    def next_token(self) -> Optional[Token]:
        """Consume and return the next token, or None at end of input."""
        if not self._fill():
            return None
        return self.buffer.popleft()

    def discard_unit(self) -> None:
        """Forget the rest of the source currently being read."""
        self.buffer.clear()
        if self.sources and self.sources[0].lines is not None:
            logger.debug("Discarding rest of %s", self.sources[0].name)
            self.sources.popleft()

    def __iter__(self):
        while (tok := self.next_token()) is not None:
            yield tok
