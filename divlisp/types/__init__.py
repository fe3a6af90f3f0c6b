from divlisp.types.value import Value, Number, Error, Symbol, Function, Expr, SExpr, QExpr
from divlisp.types.environment import Environment

__all__ = [
    "Value",
    "Number",
    "Error",
    "Symbol",
    "Function",
    "Expr",
    "SExpr",
    "QExpr",
    "Environment",
]
