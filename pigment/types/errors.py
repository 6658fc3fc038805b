from __future__ import annotations


class PigmentError(Exception):
    """ Base class for all Pigment errors"""
    pass


class PigmentConfigError(PigmentError, ValueError):
    """ Raised when a PIGMENT_* environment variable holds an invalid limit"""


class PigmentLexError(PigmentError):
    """ Raised when the source contains a character no token can start with"""

    def __init__(self, message: str, line: int | None = None, column: int | None = None):
        if line is not None:
            message = f"{message} (line {line}, column {column})"
        super().__init__(message)
        self.line = line
        self.column = column


class PigmentSyntaxError(PigmentError):
    """ Raised when the token stream does not match the grammar"""


class PigmentEvalError(PigmentError):
    """ Base class for errors raised while evaluating a program.

    `commands` is filled in by the interpreter with the paint commands that
    were emitted before the error, so a host can keep them on screen.
    """

    def __init__(self, *args):
        super().__init__(*args)
        self.commands: list = []


class PigmentUnboundSymbol(PigmentEvalError):
    """ Raised when a name is used before it is bound"""


class PigmentNotCallable(PigmentEvalError):
    """ Raised when a call head is bound to something that is not a function"""


class PigmentArityError(PigmentEvalError):
    """ Raised when the number of arguments passed to a form is incorrect"""


class PigmentTypeError(PigmentEvalError):
    """ Raised when the types of arguments passed to a form are incorrect"""


class PigmentConstantError(PigmentEvalError):
    """ Raised when rebinding a name declared with const in the same scope"""


class PigmentIndexError(PigmentEvalError):
    """ Raised when a vector index is out of range"""


class PigmentBudgetExceeded(PigmentEvalError):
    """ Raised when a run uses more steps or wall-clock time than allowed"""


class PigmentCancelled(PigmentEvalError):
    """ Raised when the host cancels a running program"""


class PigmentRecursionError(PigmentEvalError):
    """ Raised when function calls nest deeper than allowed"""
