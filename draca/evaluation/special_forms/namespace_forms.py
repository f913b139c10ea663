from __future__ import annotations

from typing import List

from draca import EvaluatorFn, Expression
from draca.errors import DracaInvalidSpecialForm
from draca.evaluation.special_forms.define_form import define_form, desugar_define
from draca.types.environment import Environment
from draca.types.namespace import Namespace
from draca.types.symbol import Symbol

DEFINE = Symbol("define")


def define_in_namespace_form(
    tail: List[Expression],
    env: Environment,
    evaluate_fn: EvaluatorFn,
) -> Expression:
    """
    (define/in-namespace std::list (define (len xs) ...))

    Runs the inner define in a clone of `env` that has the namespace in scope,
    with the defined name qualified as `std::list::len`. Only that binding is
    copied back into `env`; the clone is otherwise discarded.
    """
    if len(tail) != 2:
        raise DracaInvalidSpecialForm(
            "define/in-namespace", "requires a namespace and a define form"
        )
    ns_expr, inner = tail
    if not isinstance(ns_expr, Symbol):
        raise DracaInvalidSpecialForm("define/in-namespace", "namespace must be a symbol")
    if not (isinstance(inner, list) and inner and inner[0] == DEFINE):
        raise DracaInvalidSpecialForm("define/in-namespace", "expected an inner `define` form")

    ns = Namespace.parse(ns_expr.id)
    name, value_expr = desugar_define(inner[1:])
    qualified = ns.join(name.id)

    inner_env = env.clone().with_scope(ns)
    define_form([Symbol(str(qualified)), value_expr], inner_env, evaluate_fn)

    bound = inner_env.contents.get(qualified)
    if bound is None:
        raise DracaInvalidSpecialForm(
            "define/in-namespace", f"inner define made no binding for {qualified}"
        )
    env.insert(qualified, bound)
    return Symbol(str(qualified))


def _resolved_symbol(env: Environment, sym: Symbol) -> Expression:
    found = env.get_namespace_str(sym.id)
    return False if found is None else Symbol(found)


def namespace_symbol_form(
    tail: List[Expression],
    env: Environment,
    evaluate_fn: EvaluatorFn,
) -> Expression:
    """
    (namespace/symbol pi) -> std::math::consts::pi, or #f when nothing matches.
    A non-symbol argument is evaluated first and resolved if it yields a symbol.
    """
    if len(tail) != 1:
        raise DracaInvalidSpecialForm("namespace/symbol", "expects exactly 1 argument")
    expr = tail[0]
    if isinstance(expr, Symbol):
        return _resolved_symbol(env, expr)

    value = evaluate_fn(expr, env)
    if isinstance(value, Symbol):
        return _resolved_symbol(env, value)
    return False


def namespace_as_list_form(
    tail: List[Expression],
    env: Environment,
    evaluate_fn: EvaluatorFn,
) -> Expression:
    """(namespace/as-list) -> the scope search path, in lookup order."""
    return [Symbol(str(ns)) for ns in env.scopes]
