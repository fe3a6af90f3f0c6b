"""Core evaluator for the DivLisp interpreter.

Symbols are looked up in the environment, S-expressions are reduced and every
other value evaluates to itself. Errors are ordinary return values: the first
Error found among the evaluated cells of an S-expression is returned in place
of the whole expression.
"""

from __future__ import annotations

import logging

from divlisp.errors import NESTING_MESSAGE
from divlisp.types.environment import Environment
from divlisp.types.value import Value, Error, Function, Symbol, SExpr

logger = logging.getLogger(__name__)


def evaluate(env: Environment, value: Value) -> Value:
    """Evaluate `value` in `env`. Always returns a Value, never raises.

    Input nested deeper than the Python stack allows evaluates to an Error.
    """
    try:
        return evaluate0(env, value)
    except RecursionError:
        logger.debug("evaluation exceeded the recursion limit")
        return Error(NESTING_MESSAGE)


def evaluate0(env: Environment, value: Value) -> Value:
    if isinstance(value, Symbol):
        return env.get(value.name)
    if isinstance(value, SExpr):
        return evaluate_sexpr(env, value)
    return value


def evaluate_sexpr(env: Environment, expr: SExpr) -> Value:
    cells = expr.cells
    for i, cell in enumerate(cells):
        cells[i] = evaluate0(env, cell)

    for i, cell in enumerate(cells):
        if isinstance(cell, Error):
            logger.debug("short-circuit on %r", cell)
            return expr.take(i)

    if not cells:
        return expr

    if len(cells) == 1:
        return expr.take(0)

    f = expr.pop(0)
    if not isinstance(f, Function):
        return Error("First element is not a function!!")

    return f(env, expr)
