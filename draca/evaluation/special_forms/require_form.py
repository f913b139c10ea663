from draca import Expression, EvaluatorFn
from draca.errors import DracaInvalidSpecialForm
from draca.types.environment import Environment
from draca.types.symbol import Symbol


def require_form(tail: list[Expression], env: Environment, evaluate_fn: EvaluatorFn) -> Expression:
    """
    Usage:
        (require std::math)
    Appends the namespace to the search path of the current environment.
    """
    if len(tail) != 1:
        raise DracaInvalidSpecialForm("require", "expects exactly 1 argument")
    ns = tail[0]
    if not isinstance(ns, Symbol):
        raise DracaInvalidSpecialForm("require", "expected a namespace symbol")
    env.add_scope(ns.id)
    return True
