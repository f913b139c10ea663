class DracaError(Exception):
    """ Base class for all Draca errors"""
    pass


class DracaParseError(DracaError):
    """ Raised when source text cannot be parsed"""

    def __init__(self, message: str, line: int | None = None, column: int | None = None,
                 incomplete: bool = False):
        self.line = line
        self.column = column
        # True when the text simply ended early (unclosed list, string, quote)
        self.incomplete = incomplete
        if line is not None:
            message = f"{message} at line {line}, column {column}"
        super().__init__(message)


class DracaUndefinedSymbol(DracaError):
    """ Raised when a symbol is evaluated before it is bound"""

    def __init__(self, name: str):
        self.name = name
        super().__init__(f"Undefined symbol: {name}")


class DracaUndefinedFunction(DracaError):
    """ Raised when the head of a call is not bound"""

    def __init__(self, name: str):
        self.name = name
        super().__init__(f"Undefined function: {name}")


class DracaInvalidForm(DracaError):
    """ Raised when a list cannot be evaluated as a call"""


class DracaInvalidSpecialForm(DracaError):
    """ Raised when a special form is used with the wrong shape"""

    def __init__(self, form: str, reason: str):
        self.form = form
        self.reason = reason
        super().__init__(f"Invalid `{form}`: {reason}")


class DracaInvalidParameter(DracaInvalidSpecialForm):
    """ Raised when a lambda parameter is not a symbol"""


class DracaInvalidCondition(DracaInvalidSpecialForm):
    """ Raised when an `if` condition does not evaluate to a boolean"""


class DracaInvalidArgument(DracaError):
    """ Raised when a function is called with unusable arguments"""

    def __init__(self, primitive: str, reason: str):
        self.primitive = primitive
        self.reason = reason
        super().__init__(f"`{primitive}`: {reason}")


class DracaArityError(DracaInvalidArgument):
    """ Raised when the number of arguments passed to a function is incorrect"""


class DracaTypeMismatch(DracaError):
    """ Raised when a value of the wrong kind is supplied"""

    def __init__(self, expected: str, got: str):
        self.expected = expected
        self.got = got
        super().__init__(f"Type mismatch: expected {expected}, got {got}")


class DracaPanic(SystemExit):
    """ Raised by `panic`; terminates the process instead of being reported as an error"""

    EXIT_CODE = 101

    def __init__(self, message: str):
        super().__init__(self.EXIT_CODE)
        self.message = message

    def __str__(self) -> str:
        return self.message
