import pytest

from divlisp.builtin import env_builtin
from divlisp.types.value import Number, Error, Symbol, Function, SExpr, QExpr


def q(*nums):
    return QExpr([Number(n) for n in nums])


@pytest.mark.parametrize(
    "source,expected",
    [
        ("(list 1 2 3)", q(1, 2, 3)),
        ("(head {1 2 3})", q(1)),
        ("(tail {1 2 3})", q(2, 3)),
        ("(init {1 2 3})", q(1, 2)),
        ("(len {1 2 3})", Number(3)),
        ("(len {})", Number(0)),
        ("(join {1 2} {3})", q(1, 2, 3)),
        ("(join {1} {} {2 3} {4})", q(1, 2, 3, 4)),
        ("(join {1 2})", q(1, 2)),
        ("(eval {+ 1 2})", Number(3)),
        ("(eval {})", SExpr()),
        ("(eval (head {(+ 1 2) (+ 10 20)}))", Number(3)),
        ("(eval (tail {tail tail {5 6 7}}))", q(6, 7)),
        ("{1 (+ 1 1)}", QExpr([Number(1), SExpr([Symbol("+"), Number(1), Number(1)])])),
        ("(head (list (list 1) 2))", QExpr([q(1)])),
    ]
)
def test_list_builtins(interp, source, expected):
    assert interp.eval(source) == expected


@pytest.mark.parametrize(
    "source,message",
    [
        ("(eval (list 1 2 3))", "First element is not a function!!"),
        ("(head {1} {2})", "Function 'head' passed incorrect number of arguments. Got 2, Expected 1."),
        ("(head 1)", "Function 'head' passed incorrect type for argument 0. Got Number, Expected Q-Expression."),
        ("(head {})", "Function 'head' passed {} for argument 0."),
        ("(tail {})", "Function 'tail' passed {} for argument 0."),
        ("(tail (+ 1 2))", "Function 'tail' passed incorrect type for argument 0. Got Number, Expected Q-Expression."),
        ("(init {})", "Function 'init' passed {} for argument 0."),
        ("(init {1} {2})", "Function 'init' passed incorrect number of arguments. Got 2, Expected 1."),
        ("(len 5)", "Function 'len' passed incorrect type for argument 0. Got Number, Expected Q-Expression."),
        ("(len {1} {2})", "Function 'len' passed incorrect number of arguments. Got 2, Expected 1."),
        ("(join {1} 2)", "Function 'join' passed incorrect type for argument 1. Got Number, Expected Q-Expression."),
        ("(join {1} head)", "Function 'join' passed incorrect type for argument 1. Got Function, Expected Q-Expression."),
        ("(eval 1)", "Function 'eval' passed incorrect type for argument 0. Got Number, Expected Q-Expression."),
        ("(eval {1} {2})", "Function 'eval' passed incorrect number of arguments. Got 2, Expected 1."),
    ]
)
def test_list_builtin_errors(interp, source, message):
    assert interp.eval(source) == Error(message)


def test_def_and_lookup(interp):
    assert interp.eval("(def {x} 5)") == SExpr()
    assert interp.eval("x") == Number(5)


def test_def_last_write_wins(interp):
    interp.eval("(def {x} 5)")
    interp.eval("(def {x} 6)")
    assert interp.eval("x") == Number(6)
    assert interp.eval("(+ x 1)") == Number(7)


def test_def_multiple(interp):
    interp.eval("(def {a b c} 1 2 {3})")
    assert interp.eval("(list a b c)") == QExpr([Number(1), Number(2), q(3)])


def test_def_with_computed_symbol_list(interp):
    interp.eval("(def {names} {p q})")
    interp.eval("(def names 10 20)")
    assert interp.eval("(+ p q)") == Number(30)


def test_def_binds_a_copy(interp):
    interp.eval("(def {xs} {1 2 3})")
    assert interp.eval("(tail xs)") == q(2, 3)
    assert interp.eval("xs") == q(1, 2, 3)


def test_def_builtin_alias(interp):
    interp.eval("(def {plus} +)")
    assert interp.eval("(plus 1 2)") == Number(3)
    assert interp.run("plus") == "<function>"


@pytest.mark.parametrize(
    "source,message",
    [
        ("(def 1 2)", "Function 'def' passed incorrect type for argument 0. Got Number, Expected Q-Expression."),
        ("(def {x 1} 2 3)", "Function 'def' cannot define non-symbol. Got Number, Expected Symbol."),
        ("(def {x} 1 2)", "Function 'def' passed too many arguments for symbols. Got 1, Expected 2."),
        ("(def {x y} 1)", "Function 'def' passed too many arguments for symbols. Got 2, Expected 1."),
    ]
)
def test_def_errors(interp, source, message):
    assert interp.eval(source) == Error(message)
    assert "x" not in interp.env


def test_unbound_symbol(interp):
    assert interp.eval("y") == Error("Unbound Symbol 'y'")


def test_environment_usable_after_error(interp):
    assert interp.eval("(head {})") == Error("Function 'head' passed {} for argument 0.")
    assert interp.eval("(head {4})") == q(4)


# -----------------------------------------------------
# Direct calls
# -----------------------------------------------------

def test_direct_call_returns_value(env):
    result = env_builtin.head(env, SExpr([q(1, 2)]))
    assert result == q(1)


def test_direct_call_reports_errors_as_values(env):
    result = env_builtin.tail(env, SExpr([Number(1)]))
    assert isinstance(result, Error)


def test_direct_join_without_arguments(env):
    assert env_builtin.join(env, SExpr()) == QExpr()


def test_direct_def_without_arguments(env):
    assert env_builtin.define(env, SExpr()) == Error(
        "Function 'def' passed incorrect number of arguments. Got 0, Expected 1."
    )


def test_registered_names(env):
    for name in ["list", "head", "tail", "init", "join", "len", "eval", "def",
                 "+", "-", "*", "/", "%", "^", "min", "max"]:
        assert isinstance(env.get(name), Function)


def test_builtin_name_attribute():
    assert env_builtin.head.builtin_name == "head"
    assert env_builtin.BUILTINS["+"].builtin_name == "+"


def test_list_alone_is_the_function(interp):
    assert isinstance(interp.eval("(list)"), Function)
    assert interp.run("(list)") == "<function>"


def test_direct_list_without_arguments(env):
    assert env_builtin.list_builtin(env, SExpr()) == QExpr()
