"""Built-in functions for the DivLisp runtime environment.

This module defines list manipulation, evaluation, binding and arithmetic
builtins plus `register(env)` to install them.

Every builtin takes (env, args), where args is the S-expression of already
evaluated arguments, and returns a Value. Preconditions are checked with the
`_check_*` helpers, which raise DivLispError subclasses; the `@builtin`
decorator turns those into Error values, so callers always get a Value back.
"""
from __future__ import annotations

import functools
import logging
import math
import operator
from typing import Callable

from divlisp import BuiltinFn
from divlisp.errors import DivLispError, DivLispArityError, DivLispTypeError, DivLispValueError
from divlisp.evaluation.evaluator import evaluate
from divlisp.types.environment import Environment
from divlisp.types.value import Value, Number, Error, Symbol, Expr, SExpr, QExpr

logger = logging.getLogger(__name__)


def builtin(name: str) -> Callable[[BuiltinFn], BuiltinFn]:
    """Mark `fn` as the builtin `name`, reporting raised DivLispErrors as Error values."""

    def decorate(fn: BuiltinFn) -> BuiltinFn:
        @functools.wraps(fn)
        def wrapper(env: Environment, args: SExpr) -> Value:
            try:
                return fn(env, args)
            except DivLispError as e:
                logger.debug("builtin %s failed: %s", name, e)
                return Error(str(e))

        wrapper.builtin_name = name
        return wrapper

    return decorate


# -------------------------------
# Precondition checks
# -------------------------------
def _check_count(name: str, args: Expr, expected: int) -> None:
    if len(args) != expected:
        raise DivLispArityError(
            f"Function '{name}' passed incorrect number of arguments. "
            f"Got {len(args)}, Expected {expected}."
        )


def _check_type(name: str, args: Expr, index: int, cls: type[Value]) -> None:
    cell = args[index]
    if not isinstance(cell, cls):
        raise DivLispTypeError(
            f"Function '{name}' passed incorrect type for argument {index}. "
            f"Got {cell.type_name}, Expected {cls.type_name}."
        )


def _check_not_empty(name: str, args: Expr, index: int) -> None:
    if len(args[index]) == 0:
        raise DivLispValueError(f"Function '{name}' passed {{}} for argument {index}.")


def _check_single_qexpr(name: str, args: Expr, non_empty: bool = False) -> None:
    _check_count(name, args, 1)
    _check_type(name, args, 0, QExpr)
    if non_empty:
        _check_not_empty(name, args, 0)


# -------------------------------
# List operations
# -------------------------------
@builtin("list")
def list_builtin(env: Environment, args: SExpr) -> Value:
    return args.retag(QExpr)


@builtin("head")
def head(env: Environment, args: SExpr) -> Value:
    """Q-expression holding only the first element."""
    _check_single_qexpr("head", args, non_empty=True)
    v = args.take(0)
    del v.cells[1:]
    return v


@builtin("tail")
def tail(env: Environment, args: SExpr) -> Value:
    """Q-expression without its first element."""
    _check_single_qexpr("tail", args, non_empty=True)
    v = args.take(0)
    v.pop(0)
    return v


@builtin("init")
def init(env: Environment, args: SExpr) -> Value:
    """Q-expression without its last element."""
    _check_single_qexpr("init", args, non_empty=True)
    v = args.take(0)
    v.pop(-1)
    return v


@builtin("join")
def join(env: Environment, args: SExpr) -> Value:
    for i in range(len(args)):
        _check_type("join", args, i, QExpr)
    if not args:
        return QExpr()

    x = args.pop(0)
    while args:
        x.join(args.pop(0))
    return x


@builtin("len")
def length(env: Environment, args: SExpr) -> Value:
    _check_single_qexpr("len", args)
    return Number(len(args[0]))


@builtin("eval")
def eval_builtin(env: Environment, args: SExpr) -> Value:
    """Evaluate a Q-expression as if it were an S-expression."""
    _check_single_qexpr("eval", args)
    x = args.take(0).retag(SExpr)
    return evaluate(env, x)


# -------------------------------
# Binding
# -------------------------------
@builtin("def")
def define(env: Environment, args: SExpr) -> Value:
    """(def {a b} 1 2) binds each symbol to the value in the same position."""
    if not args:
        _check_count("def", args, 1)
    _check_type("def", args, 0, QExpr)

    syms = args[0]
    for cell in syms:
        if not isinstance(cell, Symbol):
            raise DivLispTypeError(
                f"Function 'def' cannot define non-symbol. Got {cell.type_name}, Expected Symbol."
            )

    if len(syms) != len(args) - 1:
        raise DivLispValueError(
            f"Function 'def' passed too many arguments for symbols. "
            f"Got {len(syms)}, Expected {len(args) - 1}."
        )

    for sym, value in zip(syms, args.cells[1:]):
        logger.debug("def %s = %r", sym.name, value)
        env.put(sym.name, value)
    return SExpr()


# -------------------------------
# Arithmetic
# -------------------------------
def _divide(x: float, y: float) -> float:
    if y == 0:
        raise DivLispValueError("Division By Zero!")
    return x / y


def _modulo(x: float, y: float) -> float:
    if y == 0:
        raise DivLispValueError("Division By Zero!")
    return math.fmod(x, y)


def _power(x: float, y: float) -> float:
    try:
        return math.pow(x, y)
    except OverflowError:
        raise DivLispValueError("Numeric Overflow!") from None
    except ValueError:
        raise DivLispValueError("Numeric Domain Error!") from None


OPERATORS: dict[str, Callable[[float, float], float]] = {
    "+": operator.add,
    "-": operator.sub,
    "*": operator.mul,
    "/": _divide,
    "%": _modulo,
    "^": _power,
    "min": min,
    "max": max,
}


def arithmetic(op: str, args: SExpr) -> Value:
    """Reduce numeric `args` left to right with `op`; (- x) negates."""
    if not args:
        _check_count(op, args, 1)
    for i in range(len(args)):
        _check_type(op, args, i, Number)

    x = args.pop(0).num
    if op == "-" and not args:
        return Number(-x)

    fn = OPERATORS[op]
    while args:
        y = args.pop(0).num
        x = fn(x, y)
    return Number(x)


def _operator_builtin(op: str) -> BuiltinFn:
    @builtin(op)
    def apply_operator(env: Environment, args: SExpr) -> Value:
        return arithmetic(op, args)

    return apply_operator


# -------------------------------
# Registration
# -------------------------------
BUILTINS: dict[str, BuiltinFn] = {
    "list": list_builtin,
    "head": head,
    "tail": tail,
    "init": init,
    "join": join,
    "len": length,
    "eval": eval_builtin,
    "def": define,
    **{op: _operator_builtin(op) for op in OPERATORS},
}


def register(env: Environment) -> None:
    for name, fn in BUILTINS.items():
        env.register_builtin(name, fn)
    logger.debug("registered %d builtins", len(BUILTINS))
