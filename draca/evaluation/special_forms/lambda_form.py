from draca.errors import DracaInvalidParameter, DracaInvalidSpecialForm
from draca.types.procedure import Procedure

from draca import EvaluatorFn
from draca import Expression
from draca.types.environment import Environment
from draca.types.symbol import Symbol
from draca.types.expression import kind_of


def lambda_form(
    tail: list[Expression],
    env: Environment,
    evaluate_fn: EvaluatorFn,
) -> Expression:
    # (lambda (params) body...) allows zero or more body forms; calling a
    # function with no body forms yields #f.
    if not tail:
        raise DracaInvalidSpecialForm("lambda", "requires a parameter list")

    params, *body = tail
    if not isinstance(params, list):
        raise DracaInvalidSpecialForm("lambda", "parameters must be a list")
    for param in params:
        if not isinstance(param, Symbol):
            raise DracaInvalidParameter("lambda", f"parameter must be a symbol, got {kind_of(param)}")

    # Capture a snapshot: later changes to `env` must not leak into the closure
    return Procedure(params, body, env.clone())
