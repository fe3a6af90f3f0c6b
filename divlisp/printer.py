"""Textual rendering of DivLisp values."""

from __future__ import annotations

import sys
from io import StringIO
from typing import TextIO

from divlisp.config import get_number_format
from divlisp.types.value import Value, Number, Error, Symbol, Function, SExpr, QExpr


def to_str(value: Value, number_format: str | None = None) -> str:
    """Render `value` as text.

    Numbers use `number_format` (printf-style), defaulting to the configured
    DIVLISP_NUMBER_FORMAT.
    """
    if number_format is None:
        number_format = get_number_format()
    with StringIO() as buffer:
        _write(buffer, value, number_format)
        return buffer.getvalue()


def print_value(value: Value, file: TextIO | None = None) -> None:
    """Write `value` followed by a newline."""
    out = file if file is not None else sys.stdout
    out.write(to_str(value))
    out.write("\n")


def _write(buffer: StringIO, value: Value, number_format: str) -> None:
    # Work stack of values still to render and literal text (brackets, spaces)
    pending: list[Value | str] = [value]
    while pending:
        item = pending.pop()
        match item:
            case str():
                buffer.write(item)
            case Number():
                buffer.write(number_format % item.num)
            case Error():
                buffer.write(f"Error: {item.message}")
            case Symbol():
                buffer.write(item.name)
            case SExpr():
                _push_expr(pending, item.cells, "(", ")")
            case QExpr():
                _push_expr(pending, item.cells, "{", "}")
            case Function():
                buffer.write("<function>")
            case _:
                raise TypeError(f"Cannot print {item!r}")


def _push_expr(pending: list[Value | str], cells: list[Value], open_: str, close: str) -> None:
    pending.append(close)
    for i in range(len(cells) - 1, -1, -1):
        pending.append(cells[i])
        if i:
            pending.append(" ")
    pending.append(open_)
