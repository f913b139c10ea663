"""Command-line entry point: run a Draca file, or start an interactive REPL."""

from __future__ import annotations

import logging
import readline
import sys
from argparse import ArgumentParser
from typing import Callable, Optional, Sequence, TextIO

from draca import __version__
from draca.config import get_log_level, get_recursion_limit
from draca.errors import DracaError, DracaPanic, DracaParseError
from draca.evaluation.special_forms import SpecialForm
from draca.interpreter import Interpreter, evaluate, run_file
from draca.printer import display
from draca.reader.parser import parse
from draca.types.environment import Environment

logger = logging.getLogger(__name__)

PROMPT = "\\> "
CONTINUATION_PROMPT = "... "
BREAK_CHARS = " \t\n()'"


class Completer:
    """Tab completion over the special forms and every bound name."""

    def __init__(self, env: Environment):
        self.env = env
        self.matches: list[str] = []

    def candidates(self) -> list[str]:
        names = {form.value for form in SpecialForm}
        for qualified, short in self.env.full_path_and_name():
            names.add(qualified)
            names.add(short)
        return sorted(names)

    def complete(self, text: str, state: int) -> Optional[str]:
        if state == 0:
            self.matches = [c for c in self.candidates() if c.startswith(text)]
        if state < len(self.matches):
            return self.matches[state]
        return None


def _install_completer(env: Environment) -> None:
    readline.set_completer_delims(BREAK_CHARS)
    readline.set_completer(Completer(env).complete)
    readline.parse_and_bind("tab: complete")


def read_form_text(read_line: Callable[[str], str]) -> str:
    """Read lines until they parse, or until the parse error is not just "more input needed"."""
    text = read_line(PROMPT)
    while True:
        try:
            parse(text)
            return text
        except DracaParseError as e:
            if not e.incomplete:
                return text
        text += "\n" + read_line(CONTINUATION_PROMPT)


def eval_and_print(itp: Interpreter, text: str, out: TextIO | None = None, err: TextIO | None = None) -> None:
    out = out or sys.stdout
    err = err or sys.stderr
    try:
        forms = parse(text)
    except DracaParseError as e:
        print(f"==> Error: {e}", file=err)
        return

    for expr in forms:
        try:
            value = evaluate(expr, itp.env)
        except (DracaError, RecursionError) as e:
            logger.debug("REPL error", exc_info=True)
            print(f"==> Error: {e}", file=err)
            continue
        print(display(value), file=out)


def repl(itp: Interpreter | None = None, read_line: Callable[[str], str] = input) -> None:
    itp = itp or Interpreter()
    _install_completer(itp.env)

    print(
        f"Draca REPL {__version__}.\n"
        "To exit, type `(std::sys::exit)` or press `^D`."
    )

    while True:
        try:
            text = read_form_text(read_line)
        except KeyboardInterrupt:
            print("^C", file=sys.stderr)
            continue
        except EOFError:
            print("^D", file=sys.stderr)
            break
        if text.strip():
            eval_and_print(itp, text)


def main(argv: Sequence[str] | None = None) -> int:
    parser = ArgumentParser(prog="draca", description="The Draca interpreter.")
    parser.add_argument("file", type=str, nargs="?", default=None, help="source file to run; omit for a REPL")
    parser.add_argument("-v", "--verbose", action="store_true", help="log at DEBUG level")
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else get_log_level(),
        format="%(levelname)s %(name)s: %(message)s",
    )
    sys.setrecursionlimit(max(sys.getrecursionlimit(), get_recursion_limit()))

    try:
        if args.file is None:
            repl()
            return 0
        try:
            run_file(args.file)
        except (DracaError, OSError) as e:
            print(f"==> Error: {e}", file=sys.stderr)
            return 1
        return 0
    except DracaPanic as e:
        print(f"panicked: {e}", file=sys.stderr)
        raise


if __name__ == "__main__":
    sys.exit(main())
