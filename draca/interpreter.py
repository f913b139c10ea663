from __future__ import annotations

import logging
from os import PathLike
from pathlib import Path
from typing import Literal

from draca import Expression
from draca.builtin.env_builtin import register
from draca.config import unqualified_fallback_enabled
from draca.evaluation.evaluator import evaluate
from draca.reader.parser import parse
from draca.types.environment import Environment
from draca.types.nil import Nil

logger = logging.getLogger(__name__)

__all__ = ["Interpreter", "core_environment", "standard_environment", "evaluate", "run_file"]


def core_environment(unqualified_fallback: bool | None = None) -> Environment:
    """A fresh Environment holding only the native primitives."""
    if unqualified_fallback is None:
        unqualified_fallback = unqualified_fallback_enabled()
    return register(Environment.empty(unqualified_fallback=unqualified_fallback))


def standard_environment(unqualified_fallback: bool | None = None) -> Environment:
    """A fresh Environment with the primitives and the standard library loaded."""
    return Interpreter(unqualified_fallback=unqualified_fallback).env


def run_file(path: str | PathLike[str]) -> None:
    """Evaluate every form of `path` against a fresh standard environment.

    The first error aborts the remaining forms and propagates.
    """
    text = Path(path).read_text(encoding="utf-8")
    forms = parse(text)
    env = standard_environment()
    logger.debug("running %s (%d form(s))", path, len(forms))
    for expr in forms:
        evaluate(expr, env)


class Interpreter:
    """
    Orchestrates reading and evaluating Draca code.
    Maintains one Environment across calls, so definitions persist.
    """

    def __init__(
        self,
        prelude: str | None | Literal['auto'] = 'auto',
        *,
        unqualified_fallback: bool | None = None,
    ):
        self.env: Environment = core_environment(unqualified_fallback)

        if prelude is None:
            pass  # explicit: primitives only
        elif prelude == 'auto':
            # Lazy import to avoid circular imports
            from draca.modules.stdlib_loader import load_stdlib
            load_stdlib(self)
        elif prelude:
            self.eval_prelude(prelude)

    def eval_prelude(self, code: str) -> None:
        for expr in parse(code):
            evaluate(expr, self.env)

    def eval_all(self, code: str) -> list[Expression]:
        """Evaluate every form in `code`; returns one result per form."""
        return [evaluate(expr, self.env) for expr in parse(code)]

    def eval(self, code: str) -> Expression:
        """Evaluate every form in `code` and return the last result (nil if none)."""
        results = self.eval_all(code)
        if not results:
            return Nil
        return results[-1]
