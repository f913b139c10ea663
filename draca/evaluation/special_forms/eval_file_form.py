from __future__ import annotations

import logging
from pathlib import Path

from draca import Expression, EvaluatorFn
from draca.errors import DracaInvalidSpecialForm
from draca.reader.parser import parse
from draca.types.environment import Environment
from draca.types.symbol import Symbol

logger = logging.getLogger(__name__)


def read_source(path: Path) -> str:
    """Contents of `path`; a missing file reads as the empty program."""
    try:
        return path.read_text(encoding="utf-8")
    except FileNotFoundError:
        logger.debug("eval-file: %s not found, treating as empty", path)
        return ""
    except (OSError, UnicodeDecodeError) as e:
        raise DracaInvalidSpecialForm("eval-file", f"cannot read {path}: {e}") from e


def eval_file_form(tail: list[Expression], env: Environment, evaluate_fn: EvaluatorFn) -> Expression:
    """
    Usage:
        (eval-file lib/helpers.dr)
    Evaluates every form of the file against the current environment, so its
    definitions stay visible afterwards. Returns the value of the last form.
    """
    if len(tail) != 1:
        raise DracaInvalidSpecialForm("eval-file", "expects exactly 1 argument")
    target = tail[0]
    if isinstance(target, Symbol):
        path = Path(target.id)
    elif isinstance(target, str):
        path = Path(target)
    else:
        raise DracaInvalidSpecialForm("eval-file", "requires a path symbol or string")

    logger.debug("eval-file: loading %s", path)
    result: Expression = True
    for expr in parse(read_source(path)):
        result = evaluate_fn(expr, env)
    return result
