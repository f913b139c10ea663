from draca import EvaluatorFn
from draca import Expression
from draca.errors import DracaInvalidCondition, DracaInvalidSpecialForm
from draca.types.environment import Environment
from draca.types.expression import kind_of


def if_form(
    tail: list[Expression],
    env: Environment,
    evaluate_fn: EvaluatorFn,
) -> Expression:
    if len(tail) != 3:
        raise DracaInvalidSpecialForm("if", "requires a condition, a then-expression and an else-expression")

    condition, then_expr, else_expr = tail
    cond = evaluate_fn(condition, env)
    # No truthiness: only #t and #f are conditions
    if cond is True:
        return evaluate_fn(then_expr, env)
    if cond is False:
        return evaluate_fn(else_expr, env)
    raise DracaInvalidCondition("if", f"condition must be a bool, got {kind_of(cond)}")
