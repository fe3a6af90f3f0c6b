"""Runtime values for DivLisp.

Every datum the interpreter handles is one of six variants: Number, Error,
Symbol, SExpr, QExpr and Function. SExpr and QExpr share the list behaviour
of Expr and differ only in how the evaluator treats them: an SExpr is reduced,
a QExpr is returned as-is.

A container exclusively owns its cells. Values never alias one another; code
that needs to keep a value while handing it on (the Environment) stores a deep
copy made with `Value.copy()`. Equality is structural.
"""

from __future__ import annotations

import sys
from typing import Iterable, Iterator

from divlisp import BuiltinFn


class Value:
    """Base class of all runtime values."""

    __slots__ = ()

    # Name used in error messages
    type_name = "Value"

    def copy(self) -> Value:
        raise NotImplementedError


class Number(Value):
    __slots__ = ("num",)
    type_name = "Number"

    def __init__(self, num: float):
        self.num: float = float(num)

    def copy(self) -> Number:
        return Number(self.num)

    def __eq__(self, other: object) -> bool:
        return isinstance(other, Number) and self.num == other.num

    __hash__ = None

    def __repr__(self):
        return f"Number({self.num!r})"


class Error(Value):
    """An inert error value; propagated or printed, never evaluated."""

    __slots__ = ("message",)
    type_name = "Error"

    def __init__(self, message: str):
        self.message: str = message

    def copy(self) -> Error:
        return Error(self.message)

    def __eq__(self, other: object) -> bool:
        return isinstance(other, Error) and self.message == other.message

    __hash__ = None

    def __repr__(self):
        return f"Error({self.message!r})"


class Symbol(Value):
    __slots__ = ("name",)
    type_name = "Symbol"

    def __init__(self, name: str):
        # Intern to ensure fast equality/hash
        self.name: str = sys.intern(name)

    def copy(self) -> Symbol:
        return Symbol(self.name)

    def __eq__(self, other: object) -> bool:
        return isinstance(other, Symbol) and self.name == other.name

    def __hash__(self) -> int:
        return hash(self.name)

    def __repr__(self):
        return f"Symbol({self.name!r})"

    def __str__(self):
        return self.name


class Function(Value):
    """A native builtin. Copies share the underlying Python callable."""

    __slots__ = ("fn", "name")
    type_name = "Function"

    def __init__(self, fn: BuiltinFn, name: str | None = None):
        self.fn: BuiltinFn = fn
        self.name: str = name or getattr(fn, "__name__", "<builtin>")

    def copy(self) -> Function:
        return Function(self.fn, self.name)

    def __call__(self, env, args: SExpr) -> Value:
        return self.fn(env, args)

    def __eq__(self, other: object) -> bool:
        return isinstance(other, Function) and self.fn is other.fn

    __hash__ = None

    def __repr__(self):
        return f"Function({self.name!r})"


class Expr(Value):
    """Ordered list of owned cells shared by SExpr and QExpr."""

    __slots__ = ("cells",)

    def __init__(self, cells: Iterable[Value] | None = None):
        self.cells: list[Value] = list(cells) if cells is not None else []

    def add(self, value: Value) -> Expr:
        self.cells.append(value)
        return self

    def pop(self, index: int = 0) -> Value:
        """Remove and return the cell at `index`; the rest shift down."""
        return self.cells.pop(index)

    def take(self, index: int) -> Value:
        """Remove the cell at `index` and discard every other cell."""
        value = self.cells.pop(index)
        self.cells.clear()
        return value

    def join(self, other: Expr) -> Expr:
        """Move every cell of `other` onto the end of this list."""
        self.cells.extend(other.cells)
        other.cells.clear()
        return self

    def retag(self, cls: type[Expr]) -> Expr:
        """Hand the cells over to a new container of kind `cls`.

        Only the tag changes; this container is left empty.
        """
        result = cls()
        result.cells, self.cells = self.cells, []
        return result

    def copy(self) -> Expr:
        """Deep copy, walking nested lists with an explicit stack."""
        result = type(self)()
        pending = [(self, result)]
        while pending:
            source, target = pending.pop()
            for cell in source.cells:
                if isinstance(cell, Expr):
                    twin = type(cell)()
                    pending.append((cell, twin))
                    target.cells.append(twin)
                else:
                    target.cells.append(cell.copy())
        return result

    def __len__(self) -> int:
        return len(self.cells)

    def __iter__(self) -> Iterator[Value]:
        return iter(self.cells)

    def __getitem__(self, index: int) -> Value:
        return self.cells[index]

    def __eq__(self, other: object) -> bool:
        return type(self) is type(other) and self.cells == other.cells

    __hash__ = None

    def __repr__(self):
        return f"{type(self).__name__}({self.cells!r})"


class SExpr(Expr):
    """An expression awaiting evaluation."""

    __slots__ = ()
    type_name = "S-Expression"


class QExpr(Expr):
    """A quoted list, never evaluated implicitly."""

    __slots__ = ()
    type_name = "Q-Expression"
