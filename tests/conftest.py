import pytest

from jisp.builtin.env_builtin import make_global_environment
from jisp.interpreter import Interpreter

# Most tests evaluate against a fresh copy of the global bindings so that
# definitions made by one test never leak into another through GLOBAL_ENV.


@pytest.fixture
def env():
    """Fresh environment with builtins loaded."""
    return make_global_environment()


@pytest.fixture
def interp(env):
    return Interpreter(env)
