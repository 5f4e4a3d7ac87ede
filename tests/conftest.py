import pytest

from stacknt.interpreter import Interpreter


@pytest.fixture
def interp():
    """Fresh session with builtins loaded."""
    return Interpreter()


@pytest.fixture
def run(interp):
    """Evaluate source on the shared session and return a copy of its stack."""
    def _run(source: str):
        return list(interp.eval(source))
    return _run
