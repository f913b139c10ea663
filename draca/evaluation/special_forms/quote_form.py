from draca import Expression, EvaluatorFn
from draca.errors import DracaInvalidSpecialForm
from draca.types.environment import Environment


def quote_form(
    tail: list[Expression], env: Environment, evaluate_fn: EvaluatorFn
) -> Expression:
    if len(tail) != 1:
        raise DracaInvalidSpecialForm("quote", "expects exactly 1 argument")
    return tail[0]
