"""Application engine for Draca.

This module centralizes the calling convention between the evaluator and the
two kinds of callable values:
- Primitive: a native function handed the evaluated argument list.
- Procedure: a closure whose body runs in a clone of its captured environment,
  with its parameters (and its own name, for recursion) bound in that clone.
"""

from __future__ import annotations

import logging

from draca import Expression, EvaluatorFn
from draca.errors import DracaArityError, DracaTypeMismatch
from draca.types.expression import kind_of
from draca.types.procedure import Primitive, Procedure
from draca.types.symbol import Symbol

logger = logging.getLogger(__name__)


def apply_procedure(
    fn: Procedure,
    args: list[Expression],
    evaluate_fn: EvaluatorFn,
    call_name: Symbol | None = None,
) -> Expression:
    """Apply a closure to already-evaluated arguments.

    - Arity is exact: too few or too many arguments raise DracaArityError.
    - The name given by `define` and the symbol the caller used are both bound
      to the procedure itself, so named, aliased and let-bound lambdas can
      recurse. Parameters are bound last and shadow them.
    - An empty body evaluates to #f.
    """
    label = fn.name or (call_name.id if call_name is not None else "lambda")
    if len(args) != fn.arity:
        raise DracaArityError(
            label, f"expected {fn.arity} argument(s), got {len(args)}"
        )

    local_env = fn.env.clone()
    if fn.name is not None:
        local_env.insert(fn.name, fn)
    if call_name is not None:
        local_env.insert(call_name.id, fn)
    for param, arg in zip(fn.params, args):
        local_env.insert(param.id, arg)

    logger.debug("apply %s to %d argument(s)", label, len(args))
    result: Expression = False
    for form in fn.body:
        result = evaluate_fn(form, local_env)
    return result


def apply(
    head: Expression,
    args: list[Expression],
    evaluate_fn: EvaluatorFn,
    call_name: Symbol | None = None,
) -> Expression:
    """Apply either a Procedure or a Primitive.

    - For Procedure, defer to apply_procedure.
    - For Primitive, invoke with the argument list only.
    - Otherwise, raise a type error.
    """
    if isinstance(head, Procedure):
        return apply_procedure(head, args, evaluate_fn, call_name)
    if isinstance(head, Primitive):
        return head(args)
    raise DracaTypeMismatch("function", kind_of(head))
