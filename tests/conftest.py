"""
Test configuration and fixtures for the Atomic test suite.
"""
import sys
import pytest
from pathlib import Path
from typing import List

# Add project root to Python path
sys.path.insert(0, str(Path(__file__).parent.parent))

from loguru import logger

from atomiclang import Interpreter, InterpreterConfig


@pytest.fixture(autouse=True)
def reset_logging():
    """CLI tests install loguru sinks on captured streams; drop them afterwards."""
    yield
    logger.remove()
    logger.disable("atomiclang")


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    for var in ("ATOMIC_INT_BITS", "ATOMIC_LOG_LEVEL", "ATOMIC_ENCODING"):
        monkeypatch.delenv(var, raising=False)


@pytest.fixture
def sample_script() -> str:
    """Return a script mixing every command."""
    return 'print "a"\nadd 1 2\nmultiply 3 3\n'


@pytest.fixture
def interpreter() -> Interpreter:
    return Interpreter(InterpreterConfig())


@pytest.fixture
def sink() -> List[str]:
    return []


@pytest.fixture
def write_script(tmp_path):
    def _write(text: str, name: str = "script.atomic") -> Path:
        path = tmp_path / name
        path.write_text(text, encoding="utf-8")
        return path
    return _write
