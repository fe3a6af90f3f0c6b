from __future__ import annotations

import logging

from divlisp.builtin.env_builtin import register
from divlisp.evaluation.evaluator import evaluate
from divlisp.printer import to_str
from divlisp.reader.parser import parse
from divlisp.reader.reader import read
from divlisp.types.environment import Environment
from divlisp.types.value import Value

logger = logging.getLogger(__name__)


class Interpreter:
    """
    Orchestrates parsing, reading and evaluating DivLisp code.
    Maintains one Environment across calls, so definitions persist.
    """

    def __init__(self, env: Environment | None = None, builtins: bool = True):
        self.env: Environment = env if env is not None else Environment()
        if builtins:
            register(self.env)

    def read(self, code: str) -> Value:
        """Parse `code` and read it as a single S-expression.

        Raises DivLispSyntaxError if the code does not parse.
        """
        return read(parse(code))

    def eval(self, code: str) -> Value:
        result = evaluate(self.env, self.read(code))
        if logger.isEnabledFor(logging.DEBUG):
            logger.debug("%s => %r", code, result)
        return result

    def run(self, code: str) -> str:
        """Evaluate `code` and render the result as one line of text."""
        return to_str(self.eval(code))
