import pytest

from pigment.config import Limits
from pigment.interpreter import Interpreter


@pytest.fixture
def limits():
    # Explicit limits so PIGMENT_* variables in the shell never leak into tests
    return Limits(max_steps=10_000, max_depth=50)


@pytest.fixture
def interp(limits):
    """Fresh interpreter with an empty program; use interp.eval(...) to run code."""
    return Interpreter(limits=limits)


@pytest.fixture
def run(limits):
    """Execute a whole program and return its interpreter."""
    def _run(source):
        interp = Interpreter.from_source(source, limits)
        interp.execute()
        return interp
    return _run
