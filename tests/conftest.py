import pytest

from draca.interpreter import Interpreter


# Every test starts from the default configuration, whatever the shell exports.
@pytest.fixture(autouse=True)
def _clean_draca_env(monkeypatch):
    for var in ("DRACA_STDLIB_PATH", "DRACA_UNQUALIFIED_FALLBACK", "DRACA_RECURSION_LIMIT", "DRACA_LOG_LEVEL"):
        monkeypatch.delenv(var, raising=False)


@pytest.fixture
def interp():
    """Interpreter with the primitives and the standard library."""
    return Interpreter()


@pytest.fixture
def core():
    """Interpreter with the primitives only."""
    return Interpreter(prelude=None)
