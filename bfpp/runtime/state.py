"""
bfpp Runtime State Management

State owned by one interpreter session: the tape with its pointer, and the
code buffer that accumulates instructions before a run.

Key classes:
- TapeState: Fixed-length byte tape and the tape pointer, both wrapping
- CodeBuffer: Capacity-bounded instruction buffer
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, Any, List
import numpy as np

from bfpp.runtime.errors import CapacityError

DEFAULT_TAPE_LENGTH = 30000
DEFAULT_MAX_CODE_LENGTH = 1000000
CELL_MODULUS = 256


def _zeroed_tape(length: int) -> np.ndarray:
    return np.zeros(length, dtype=np.uint8)


@dataclass
class TapeState:
    """
    Byte tape and tape pointer.

    The pointer always stays in [0, length): moving past either end wraps to
    the opposite end. Cells wrap modulo 256.
    """
    length: int = DEFAULT_TAPE_LENGTH
    pointer: int = 0
    cells: np.ndarray = field(default=None, repr=False, compare=False)

    def __post_init__(self) -> None:
        if self.length <= 0:
            raise ValueError(f"Tape length must be positive, got {self.length}")
        if self.cells is None:
            self.cells = _zeroed_tape(self.length)

    @property
    def current(self) -> int:
        return int(self.cells[self.pointer])

    @current.setter
    def current(self, value: int) -> None:
        self.cells[self.pointer] = value % CELL_MODULUS

    def move_right(self) -> None:
        self.pointer = (self.pointer + 1) % self.length

    def move_left(self) -> None:
        self.pointer = (self.pointer - 1) % self.length

    def increment(self) -> None:
        self.current = self.current + 1

    def decrement(self) -> None:
        self.current = self.current - 1

    def reset(self) -> None:
        """Zero every cell and return the pointer to the first cell."""
        self.cells[:] = 0
        self.pointer = 0

    def snapshot(self) -> bytes:
        """Copy of the tape contents."""
        return self.cells.tobytes()

    def to_dict(self) -> Dict[str, Any]:
        nonzero = np.flatnonzero(self.cells)
        return {
            "length": self.length,
            "pointer": self.pointer,
            "nonzero_cells": {int(i): int(self.cells[i]) for i in nonzero},
        }


class CodeBuffer:
    """
    Instruction buffer bounded by max_length.

    A rejected append leaves the contents untouched.
    """

    def __init__(self, max_length: int = DEFAULT_MAX_CODE_LENGTH):
        self.max_length = max_length
        self._chunks: List[str] = []
        self._length = 0

    def __len__(self) -> int:
        return self._length

    def __bool__(self) -> bool:
        return self._length > 0

    def append(self, text: str) -> None:
        requested = self._length + len(text)
        if requested > self.max_length:
            raise CapacityError(self.max_length, requested)
        self._chunks.append(text)
        self._length = requested

    def load(self, text: str) -> None:
        """Replace the contents with text."""
        if len(text) > self.max_length:
            raise CapacityError(self.max_length, len(text))
        self._chunks = [text]
        self._length = len(text)

    def clear(self) -> None:
        self._chunks = []
        self._length = 0

    def getvalue(self) -> str:
        if len(self._chunks) > 1:
            self._chunks = ["".join(self._chunks)]
        return self._chunks[0] if self._chunks else ""
