import pytest

from divlisp.builtin.env_builtin import register
from divlisp.interpreter import Interpreter
from divlisp.types.environment import Environment


@pytest.fixture
def env():
    """Fresh environment with builtins loaded."""
    e = Environment()
    register(e)
    return e


@pytest.fixture
def interp():
    return Interpreter()


@pytest.fixture(autouse=True)
def _default_number_format(monkeypatch):
    monkeypatch.delenv("DIVLISP_NUMBER_FORMAT", raising=False)
