"""String primitives (std::string)."""

from __future__ import annotations

from draca import Expression
from draca.builtin.list_builtin import extract_list
from draca.errors import DracaArityError, DracaTypeMismatch
from draca.printer import fmt_string
from draca.types.expression import is_string, kind_of


def string_to_list(args: list[Expression]) -> Expression:
    """(string->list s): one single-character string per character."""
    if not args:
        raise DracaArityError("string->list", "requires one argument")
    s = args[0]
    if not is_string(s):
        raise DracaTypeMismatch("string", kind_of(s))
    return list(s)


def list_to_string(args: list[Expression]) -> Expression:
    """(list->string xs): the raw renderings of the elements, concatenated."""
    if not args:
        raise DracaArityError("list->string", "requires one argument")
    return "".join(fmt_string(x) for x in extract_list(args[0]))
