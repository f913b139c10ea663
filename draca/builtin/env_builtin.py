"""Registration of the native primitives into an Environment (the "core").

Each group lives in its own namespace; most namespaces are also put in scope
so their members resolve unqualified (`+` finds `std::math::+`). The order of
the scopes below is the lookup order for clashing short names.
"""

from __future__ import annotations

from draca import Expression, PrimitiveFn
from draca.builtin import cmp_builtin, list_builtin, macro_builtin, math_builtin, string_builtin, sys_builtin
from draca.types.environment import Environment
from draca.types.procedure import Primitive


def _install(env: Environment, namespace: str, table: dict[str, PrimitiveFn | Expression]) -> None:
    for name, value in table.items():
        qualified = f"{namespace}::{name}" if namespace else name
        if callable(value):
            value = Primitive(qualified, value)
        env.insert(qualified, value)


def register(env: Environment) -> Environment:
    # BOOLEAN LOGIC //
    _install(env, "", {"not": cmp_builtin.logical_not})

    # MACROS //
    env.add_scope("std::macros")
    _install(env, "std::macros", {
        "format": macro_builtin.format_,
        "println": macro_builtin.println,
        "panic": macro_builtin.panic,
    })

    # SYSTEM COMPONENTS (not in scope: always written std::sys::exit) //
    _install(env, "std::sys", {"exit": sys_builtin.exit_})

    # COMPARISONS //
    env.add_scope("std::cmp")
    _install(env, "std::cmp", {
        "=": cmp_builtin.eq,
        "/=": cmp_builtin.ne,
        ">": cmp_builtin.gt,
        "<": cmp_builtin.lt,
        ">=": cmp_builtin.ge,
        "<=": cmp_builtin.le,
    })

    # MATH //
    env.add_scope("std::math")
    env.add_scope("std::math::consts")
    _install(env, "std::math", {
        "+": math_builtin.add,
        "-": math_builtin.sub,
        "*": math_builtin.mul,
        "/": math_builtin.div,
        "rem": math_builtin.rem,
        "pow": math_builtin.power,
        "ash": math_builtin.ash,
    })
    _install(env, "std::math::consts", {"pi": math_builtin.PI, "e": math_builtin.E})

    # LISTS //
    env.add_scope("std::list")
    _install(env, "std::list", {
        "car": list_builtin.car,
        "cdr": list_builtin.cdr,
        "cons": list_builtin.cons,
        "append": list_builtin.append,
        "list": list_builtin.make_list,
        "empty?": list_builtin.is_empty,
        "len": list_builtin.length,
    })

    # STRINGS //
    env.add_scope("std::string")
    _install(env, "std::string", {
        "string->list": string_builtin.string_to_list,
        "list->string": string_builtin.list_to_string,
    })

    return env
