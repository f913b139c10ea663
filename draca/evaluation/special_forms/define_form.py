from draca import EvaluatorFn
from draca import Expression
from draca.errors import DracaInvalidSpecialForm
from draca.types.environment import Environment
from draca.types.procedure import Procedure
from draca.types.symbol import Symbol

LAMBDA = Symbol("lambda")


def desugar_define(tail: list[Expression]) -> tuple[Symbol, Expression]:
    """Split a define into (name, value expression).

    (define name expr)              -> name, expr
    (define (f p1 p2 ...) body...)  -> f, (lambda (p1 p2 ...) body...)
    """
    if not tail:
        raise DracaInvalidSpecialForm("define", "requires a name and a value")

    target, *rest = tail
    if isinstance(target, list):
        if not target or not isinstance(target[0], Symbol):
            raise DracaInvalidSpecialForm("define", "function name must be a symbol")
        name, *params = target
        return name, [LAMBDA, params, *rest]

    if isinstance(target, Symbol):
        if len(rest) != 1:
            raise DracaInvalidSpecialForm("define", "expected exactly one value expression")
        return target, rest[0]

    raise DracaInvalidSpecialForm("define", "name must be a symbol or a (name params...) list")


def define_form(
    tail: list[Expression],
    env: Environment,
    evaluate_fn: EvaluatorFn,
) -> Expression:
    """
    (define name value) / (define (name params...) body...)
    Binds in the current environment and returns the name.
    """
    name, value_expr = desugar_define(tail)
    value = evaluate_fn(value_expr, env)
    if isinstance(value, Procedure) and value.name is None:
        value = value.named(name.id)
    env.insert(name.id, value)
    return name
