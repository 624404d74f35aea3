"""Test fixtures for bfpp test suite."""
import io
import pytest
import sys
from pathlib import Path

# Add project root to path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from bfpp.runtime.executor import ExecutionConfig
from bfpp.runtime.interpreter import Interpreter


HELLO_WORLD = (
    "++++++++[>++++[>++>+++>+++>+<<<<-]>+>+>->>+[<]<-]"
    ">>.>---.+++++++..+++.>>.<-.<.+++.------.--------.>>+.>++."
)

# 8 x 8 = 64 in the second cell, then print it
SIXTY_FOUR = "++++++++[>++++++++<-]>."


@pytest.fixture
def output_stream() -> io.BytesIO:
    """Captured program output."""
    return io.BytesIO()


@pytest.fixture
def make_interpreter(output_stream):
    """Factory for interpreters wired to in-memory streams."""
    def _make(input_bytes: bytes = b"", **config) -> Interpreter:
        return Interpreter(
            config=ExecutionConfig(**config),
            input_stream=io.BytesIO(input_bytes),
            output_stream=output_stream,
        )
    return _make


@pytest.fixture
def interpreter(make_interpreter) -> Interpreter:
    """Interpreter with default config and empty input."""
    return make_interpreter()


@pytest.fixture
def hello_world() -> str:
    return HELLO_WORLD


@pytest.fixture
def sixty_four() -> str:
    return SIXTY_FOUR
