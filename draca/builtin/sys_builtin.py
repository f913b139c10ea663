from __future__ import annotations

import math

from draca import Expression
from draca.errors import DracaTypeMismatch
from draca.types.expression import is_number, kind_of


def exit_(args: list[Expression]) -> Expression:
    """(exit) / (exit code): terminate the process."""
    if not args:
        raise SystemExit(0)
    code = args[0]
    if not is_number(code) or not math.isfinite(code):
        raise DracaTypeMismatch("finite number", kind_of(code))
    raise SystemExit(int(code))
