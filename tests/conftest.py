import pytest

from linsl.builtin.env_builtin import register
from linsl.evaluation.evaluator import evaluate
from linsl.interpreter import Interpreter
from linsl.reader.parser import read_all
from linsl.types.environment import Environment


@pytest.fixture
def env():
    """Fresh root environment with the primitives loaded."""
    e = Environment()
    register(e)
    return e


@pytest.fixture
def run(env):
    """Evaluate every expression of a source string in `env`, returning the last value."""
    def _run(source):
        result = None
        for expr in read_all(source):
            result = evaluate(expr, env)
        return result
    return _run


@pytest.fixture
def interp():
    """Interpreter with the bundled prelude."""
    return Interpreter()
