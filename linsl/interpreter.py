from __future__ import annotations

import logging
from typing import Literal, TextIO

from linsl import LispValue
from linsl.builtin.env_builtin import register
from linsl.evaluation.evaluator import evaluate
from linsl.reader.parser import Parser
from linsl.reader.tokenizer import Tokenizer
from linsl.types.environment import Environment
from linsl.types.errors import LinslError, LinslSyntaxError

logger = logging.getLogger(__name__)


class Interpreter:
    """
    Orchestrates reading and evaluating Linsl code.
    Owns one Tokenizer (a queue of input sources) and one root Environment,
    both kept across calls so definitions and pending input persist.
    """

    def __init__(self, prelude: str | None | Literal['auto'] = 'auto'):
        self.env: Environment = Environment()
        register(self.env)

        self.tokenizer = Tokenizer()
        self.parser = Parser(self.tokenizer)

        if prelude is None:
            pass  # explicit: no prelude
        elif prelude == 'auto':
            # Lazy import to avoid circular imports
            from linsl.modules.prelude_loader import load_prelude
            try:
                load_prelude(self)
            except FileNotFoundError:
                # Be permissive: no prelude found -> proceed
                logger.warning("No prelude found; starting with primitives only")
        elif prelude:
            self.eval_prelude(prelude)

    # --- input ---
    def feed(self, stream: TextIO, name: str = "<input>") -> None:
        self.tokenizer.add_source(stream, name)

    def feed_text(self, code: str, name: str = "<string>") -> None:
        self.tokenizer.add_text(code, name)

    # --- evaluation ---
    def eval_next(self) -> LispValue | None:
        """Read and evaluate one expression; None once all input is consumed.

        On error the rest of the current unit of input is dropped and the error
        re-raised. Definitions made before the error are kept.
        """
        start = None
        try:
            first = self.tokenizer.peek()
            if first is None:
                return None
            start = first.position
            expr = self.parser.parse()
            return evaluate(expr, self.env)
        except LinslError as err:
            if isinstance(err, LinslSyntaxError) and err.position is None:
                err.position = start
            logger.debug("Error in %s: %s", self.tokenizer.source_name, err)
            self.tokenizer.discard_unit()
            raise

    def eval(self, code: str, name: str = "<string>") -> LispValue | None:
        """Feed `code` and evaluate every expression in it; return the last value."""
        self.feed_text(code, name)
        result = None
        while (value := self.eval_next()) is not None:
            result = value
        return result

    def eval_prelude(self, code: str, name: str = "<prelude>") -> None:
        self.eval(code, name)

    def eval_stream(self, stream: TextIO, name: str = "<input>") -> LispValue | None:
        self.feed(stream, name)
        result = None
        while (value := self.eval_next()) is not None:
            result = value
        return result
