"""Output primitives (std::macros): format, println and panic."""

from __future__ import annotations

from string import Formatter

from draca import Expression
from draca.errors import DracaArityError, DracaInvalidArgument, DracaPanic, DracaTypeMismatch
from draca.printer import fmt_string
from draca.types.expression import is_string, kind_of


def format_(args: list[Expression]) -> Expression:
    """(format template args...) fills `{0}`, `{1}`... with the raw renderings of args.

    With a single argument, returns its raw rendering.
    """
    if not args:
        raise DracaArityError("format", "requires at least one argument")
    if len(args) == 1:
        return fmt_string(args[0])

    template, *rest = args
    if not is_string(template):
        raise DracaTypeMismatch("string", kind_of(template))
    try:
        _check_fields(template)
        return template.format(*(fmt_string(a) for a in rest))
    except (IndexError, KeyError, ValueError) as e:
        raise DracaInvalidArgument("format", f"bad template {template!r}: {e}") from e


def _check_fields(template: str) -> None:
    """Only bare positional fields (`{}`, `{0}`) are allowed: no attributes, no indexing."""
    for _, field, spec, _ in Formatter().parse(template):
        if field and not field.isdigit():
            raise ValueError(f"unsupported field {{{field}}}")
        if spec:
            _check_fields(spec)


def println(args: list[Expression]) -> Expression:
    """Like format, printed to stdout with a newline. Returns #t."""
    print(format_(args))
    return True


def panic(args: list[Expression]) -> Expression:
    """Format the arguments and abort the process."""
    raise DracaPanic(format_(args))
