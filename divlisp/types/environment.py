"""Runtime environment for DivLisp.

The Environment is a single flat scope mapping symbol names to values. It
never hands out or keeps a reference to a value owned by someone else: `put`
stores a copy of the value it is given and `get` returns a copy of the value
it holds. The evaluator consumes values as it reduces them, so this is what
keeps bindings intact across evaluations.
"""

from __future__ import annotations

import logging
from io import StringIO

from divlisp import BuiltinFn
from divlisp.types.value import Value, Error, Function, Symbol

logger = logging.getLogger(__name__)


class Environment:
    """Mapping from symbol names to owned values."""

    __slots__ = ("vars",)

    def __init__(self):
        self.vars: dict[str, Value] = {}

    def get(self, name: str | Symbol) -> Value:
        """Return a copy of the value bound to `name`, or an unbound-symbol Error."""
        key = str(name)
        value = self.vars.get(key)
        if value is None:
            return Error(f"Unbound Symbol '{key}'")
        return value.copy()

    def put(self, name: str | Symbol, value: Value) -> None:
        """Bind `name` to a copy of `value`, replacing any earlier binding."""
        key = str(name)
        if key in self.vars:
            logger.debug("rebinding %s", key)
        self.vars[key] = value.copy()

    def register_builtin(self, name: str, fn: BuiltinFn) -> None:
        self.put(name, Function(fn, name))

    def __contains__(self, name: str | Symbol) -> bool:
        return str(name) in self.vars

    def __len__(self) -> int:
        return len(self.vars)

    def __str__(self) -> str:
        with StringIO() as buffer:
            buffer.write("{")
            buffer.write(", ".join(f"{k}: {v!r}" for k, v in self.vars.items()))
            buffer.write("}")
            return buffer.getvalue()

    def __repr__(self) -> str:
        return f"<Environment {self}>"
