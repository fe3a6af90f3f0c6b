"""Parser boundary: source text into a generic parse tree.

The reader does not look at lark objects. Instead the lark tree is converted
into `ParseNode`s, each carrying a tag string, the literal text it matched
(tokens only) and its ordered children:

    - program root      -> tag ">"
    - sexpr / qexpr     -> tag "sexpr" / "qexpr"
    - tokens            -> lowercased terminal name ("number", "symbol",
                           "lpar", "rpar", "lbrace", "rbrace")

Punctuation is kept in the tree; the reader skips it.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field

import lark

from divlisp.errors import DivLispSyntaxError

logger = logging.getLogger(__name__)

ROOT_TAG = ">"

_parsers: dict[str, lark.Lark] = {}


@dataclass
class ParseNode:
    tag: str
    contents: str = ""
    children: list[ParseNode] = field(default_factory=list)


def parse(source: str) -> ParseNode:
    """Parse `source` into a ParseNode tree rooted at a ">" node.

    Raises DivLispSyntaxError if the text does not match the grammar.
    """
    parser = _lark_parser("grammar")
    try:
        tree = parser.parse(source)
    except lark.UnexpectedInput as e:
        line = getattr(e, "line", None)
        column = getattr(e, "column", None)
        raise DivLispSyntaxError(
            f"Syntax error at line {line}, column {column}", line, column
        ) from e
    node = _convert_tree(tree)
    logger.debug("parsed %r into %d top-level nodes", source, len(node.children))
    return node


def _convert_tree(tree: lark.Tree) -> ParseNode:
    """Convert without recursion, so nesting depth is not bounded by the stack."""
    root = ParseNode(_tree_tag(tree))
    pending = [(tree, root)]
    while pending:
        item, node = pending.pop()
        for kid in item.children:
            if isinstance(kid, lark.Token):
                node.children.append(ParseNode(kid.type.lower(), str(kid)))
            else:
                child = ParseNode(_tree_tag(kid))
                node.children.append(child)
                pending.append((kid, child))
    return root


def _tree_tag(tree: lark.Tree) -> str:
    rule = str(tree.data)
    return ROOT_TAG if rule == "start" else rule


def _lark_parser(name: str) -> lark.Lark:
    """Get globally shared lark parser.

    Args:
        name: (str) name of the grammar file (without .lark)

    Returns:
        (lark.Lark) Parser instance
    """
    parser = _parsers.get(name)
    if parser is not None:
        return parser

    parser = lark.Lark.open(
        f"{name}.lark",
        rel_to=__file__,
        parser="lalr",
        keep_all_tokens=True,
    )
    _parsers[name] = parser
    return parser
