"""Reader: generic parse tree into DivLisp values.

Nodes are classified by substring of their tag, so any producer whose tags
mention "number", "symbol", "sexpr" or "qexpr" (e.g. "expr|number|regex") can
be read. The root node is tagged ">". Reading never fails out of band: a
numeric literal that cannot be represented becomes an Error value.
"""

from __future__ import annotations

import math
from typing import Protocol, Sequence

from divlisp.errors import NESTING_MESSAGE
from divlisp.reader.parser import ROOT_TAG
from divlisp.types.value import Value, Number, Error, Symbol, Expr, SExpr, QExpr

PUNCTUATION = frozenset({"(", ")", "{", "}"})


class Node(Protocol):
    tag: str
    contents: str
    children: Sequence[Node]


def read(node: Node) -> Value:
    """Convert a parse tree node into a Value tree.

    A tree nested deeper than the Python stack allows reads as an Error.
    """
    try:
        return read0(node)
    except RecursionError:
        return Error(NESTING_MESSAGE)


def read0(node: Node) -> Value:
    tag = node.tag
    if "number" in tag:
        return read_number(node.contents)
    if "symbol" in tag:
        return Symbol(node.contents)

    container: Expr
    if tag == ROOT_TAG or "sexpr" in tag:
        container = SExpr()
    elif "qexpr" in tag:
        container = QExpr()
    else:
        return Error(f"Unknown node '{tag}'")

    for child in node.children:
        if child.contents in PUNCTUATION:
            continue
        if child.tag == "regex":
            continue
        container.add(read0(child))
    return container


def read_number(text: str) -> Value:
    try:
        num = float(text)
    except ValueError:
        return Error("Invalid Number!!")
    if math.isinf(num):
        return Error("Invalid Number!!")
    return Number(num)
