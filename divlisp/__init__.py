# Core type aliases for DivLisp's data model.
# Every runtime datum is one of the Value variants in divlisp.types.value.
# Builtins are plain Python callables taking (env, args) and returning a Value.

from typing import Any, Callable

__version__ = "0.1.0"

# Runtime value alias
LispValue = Any

# Native function signature: (Environment, argument SExpr) -> Value
BuiltinFn = Callable[[Any, Any], LispValue]
