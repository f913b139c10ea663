"""Core evaluator for the Draca interpreter.

A direct tree walk: atoms evaluate to themselves, symbols are looked up in the
Environment, and lists are either special forms (dispatched through the
SPECIAL_FORMS registry) or calls. Every error is raised as a DracaError and
aborts the current top-level form.
"""

from __future__ import annotations

import logging

from draca import Expression
from draca.errors import DracaInvalidForm, DracaUndefinedFunction, DracaUndefinedSymbol
from draca.evaluation.apply import apply
from draca.evaluation.special_forms import SPECIAL_FORMS
from draca.types.environment import Environment
from draca.types.expression import kind_of
from draca.types.procedure import Procedure
from draca.types.symbol import Symbol

logger = logging.getLogger(__name__)


def evaluate(expr: Expression, env: Environment) -> Expression:
    """Evaluate one top-level form against `env`, which may be mutated."""
    return eval_expr(expr, env)


def eval_expr(expr: Expression, env: Environment) -> Expression:
    match expr:
        case Symbol():
            value = env.get(expr.id)
            if value is None:
                raise DracaUndefinedSymbol(expr.id)
            return value
        case []:
            return []
        case [head, *tail]:
            return eval_list(head, tail, env)
        case Procedure():
            raise DracaInvalidForm("Unexpected function value in expression position")

    # --- Atoms (bool, number, string, nil, quoted, primitive) return as-is ---
    return expr


def eval_list(head: Expression, tail: list[Expression], env: Environment) -> Expression:
    if not isinstance(head, Symbol):
        raise DracaInvalidForm(f"Expected a symbol in call position, got {kind_of(head)}")

    # --- Special forms handling ---
    handler = SPECIAL_FORMS.get(head)
    if handler is not None:
        logger.debug("special form %s", head)
        return handler(tail, env, eval_expr)

    callee = env.get(head.id)
    if callee is None:
        raise DracaUndefinedFunction(head.id)

    # Arguments are evaluated eagerly, left to right, in the caller's environment
    args = [eval_expr(arg, env) for arg in tail]
    return apply(callee, args, eval_expr, call_name=head)
