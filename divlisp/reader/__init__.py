from divlisp.reader.parser import ParseNode, parse
from divlisp.reader.reader import read, read_number

__all__ = ["ParseNode", "parse", "read", "read_number"]
