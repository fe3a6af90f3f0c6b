
class DivLispError(Exception):
    """ Base class for all DivLisp errors"""
    pass

class DivLispSyntaxError(DivLispError):
    """ Raised when source text does not match the grammar"""

    def __init__(self, message: str, line: int | None = None, column: int | None = None):
        super().__init__(message)
        self.line = line
        self.column = column

class DivLispArityError(DivLispError):
    """ Raised when the number of arguments passed to a builtin is incorrect"""

class DivLispTypeError(DivLispError):
    """ Raised when the types of arguments passed to a builtin are incorrect"""

class DivLispValueError(DivLispError):
    """ Raised when an argument has the right type but an unusable value"""

# Message of the Error value produced for input nested past the recursion limit
NESTING_MESSAGE = "Maximum nesting depth exceeded!"
