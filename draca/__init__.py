# Core type aliases for Draca's data model.
# Expressions are plain Python values (bool, float, str, list) plus a handful of
# small classes under draca.types (Symbol, Nil, Quoted, Primitive, Procedure).
# The same values serve as code (forms read by the parser) and as runtime data.
#
# Naming guidance:
# - Expression: anything the parser produces or the evaluator returns.
# - PrimitiveFn: a native callable taking the evaluated argument list.

from typing import Any, Callable

__version__ = "0.3.0"

Expression = Any

PrimitiveFn = Callable[[list], Expression]

# Evaluator function type: passed into special forms so they can recurse
EvaluatorFn = Callable[..., Expression]
