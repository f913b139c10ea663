from draca import Expression, EvaluatorFn
from draca.errors import DracaInvalidSpecialForm, DracaUndefinedSymbol
from draca.printer import display
from draca.types.environment import Environment
from draca.types.symbol import Symbol


def deconst_fn_form(tail: list[Expression], env: Environment, evaluate_fn: EvaluatorFn) -> Expression:
    """Debug aid: print what a name is bound to."""
    if len(tail) != 1:
        raise DracaInvalidSpecialForm("deconst-fn", "expects exactly 1 argument")
    name = tail[0]
    if not isinstance(name, Symbol):
        raise DracaInvalidSpecialForm("deconst-fn", "requires a symbol")
    value = env.get(name.id)
    if value is None:
        raise DracaUndefinedSymbol(name.id)
    print(display(value))
    return True
