"""Command-line entry point: run Linsl files and/or an interactive loop."""

from __future__ import annotations

import argparse
import io
import logging
import sys
from typing import Callable, Optional

from linsl import __version__
from linsl.config import get_history_file, get_log_level, get_recursion_limit
from linsl.interpreter import Interpreter
from linsl.printer import to_string
from linsl.reader.tokenizer import count_parens
from linsl.types.errors import LinslError

logger = logging.getLogger(__name__)

PROMPT = "linsl> "
CONTINUATION_PROMPT = "...    "


def _setup_history() -> None:
    try:
        import readline
    except ImportError:
        # e.g. Windows without pyreadline; plain input() still works
        return
    import atexit

    histfile = get_history_file()
    try:
        readline.read_history_file(histfile)
    except FileNotFoundError:
        pass
    except OSError as err:
        logger.warning("Could not read history file %s: %s", histfile, err)
    atexit.register(readline.write_history_file, histfile)


def read_chunk(read_line: Callable[[str], str]) -> Optional[str]:
    """Read lines until the chunk has no unclosed '('; None on end of input.

    Extra ')' end the chunk right away so the tokenizer can report them.
    """
    lines: list[str] = []
    prompt = PROMPT
    while True:
        try:
            line = read_line(prompt)
        except EOFError:
            return "".join(lines) if lines else None
        lines.append(line + "\n")
        opening, closing = count_parens(lines)
        if opening <= closing:
            return "".join(lines)
        prompt = CONTINUATION_PROMPT


def repl(itp: Interpreter, read_line: Callable[[str], str] = input, out=None) -> None:
    """Read-eval-print loop. Errors are printed and the loop carries on."""
    out = out if out is not None else sys.stdout
    n = 0
    while (chunk := read_chunk(read_line)) is not None:
        n += 1
        itp.feed(io.StringIO(chunk), f"<stdin:{n}>")
        while True:
            try:
                value = itp.eval_next()
            except LinslError as err:
                print(err, file=out)
                break
            if value is None:
                break
            print(to_string(value), file=out)
    print(file=out)


def run_files(itp: Interpreter, paths: list[str]) -> None:
    for path in paths:
        logger.info("Running %s", path)
        with open(path, encoding="utf-8") as f:
            itp.eval_stream(f, path)


def build_arg_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="linsl", description="A small Lisp with closures and macros."
    )
    parser.add_argument("files", nargs="*", metavar="FILE", help="source files to run in order")
    parser.add_argument("-i", "--interactive", action="store_true",
                        help="start the REPL after running FILEs")
    parser.add_argument("--no-prelude", action="store_true",
                        help="start with the primitives only")
    parser.add_argument("-v", "--verbose", action="count", default=0,
                        help="log more (-v info, -vv debug)")
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser


def main(argv: Optional[list[str]] = None) -> int:
    args = build_arg_parser().parse_args(argv)

    level = get_log_level()
    if args.verbose:
        level = logging.INFO if args.verbose == 1 else logging.DEBUG
    logging.basicConfig(level=level, format="%(levelname)s %(name)s: %(message)s")

    limit = get_recursion_limit()
    if limit is not None:
        sys.setrecursionlimit(limit)

    try:
        itp = Interpreter(prelude=None if args.no_prelude else 'auto')
        try:
            run_files(itp, args.files)
        except LinslError as err:
            print(err, file=sys.stderr)
            return 1
        except OSError as err:
            print(f"linsl: {err}", file=sys.stderr)
            return 1

        if not args.files or args.interactive:
            if sys.stdin.isatty():
                _setup_history()
            repl(itp)
    except RecursionError:
        logger.critical("Recursion too deep; the host stack is exhausted")
        return 2
    return 0
