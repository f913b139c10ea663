from draca import EvaluatorFn
from draca import Expression
from draca.errors import DracaInvalidSpecialForm
from draca.types.environment import Environment
from draca.types.symbol import Symbol


def let_form(
    tail: list[Expression],
    env: Environment,
    evaluate_fn: EvaluatorFn,
) -> Expression:
    """
    (let ((name1 val1) (name2 val2) ...) body...)
    Every value is evaluated in the outer environment, so bindings cannot see
    each other. The body runs in one child environment holding all of them.
    """
    if len(tail) < 2:
        raise DracaInvalidSpecialForm("let", "requires bindings and a body")

    bindings, *body = tail
    if not isinstance(bindings, list):
        raise DracaInvalidSpecialForm("let", "bindings must be a list")

    local_env = env.clone()
    for binding in bindings:
        if not (isinstance(binding, list) and len(binding) == 2):
            raise DracaInvalidSpecialForm("let", "each binding must be a (name value) pair")
        name, value_expr = binding
        if not isinstance(name, Symbol):
            raise DracaInvalidSpecialForm("let", "binding name must be a symbol")
        local_env.insert(name.id, evaluate_fn(value_expr, env))

    result: Expression = False
    for expr in body:
        result = evaluate_fn(expr, local_env)
    return result
