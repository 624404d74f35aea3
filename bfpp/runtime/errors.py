"""
bfpp Runtime Errors

Structured failures raised by the runtime. Every error carries enough detail
(kind, offending position, limits) for a caller to report it without parsing
the message text.

Key classes:
- BFError: Base class for all runtime errors
- BracketError: Unmatched loop-open or loop-close
- CapacityError: Code buffer would exceed its maximum length
- StepLimitExceeded: Instruction budget exhausted
"""

from __future__ import annotations

from enum import Enum
from typing import Any, Dict


class BracketErrorKind(Enum):
    UNMATCHED_OPEN = "UNMATCHED_OPEN"
    UNMATCHED_CLOSE = "UNMATCHED_CLOSE"


class BFError(Exception):
    """Base class for interpreter errors."""

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message

    def to_dict(self) -> Dict[str, Any]:
        return {"kind": type(self).__name__, "message": self.message}


class BracketError(BFError):
    """
    Raised when a loop-open or loop-close has no partner.

    position is the offset into the code that was being resolved (or, for a
    fragment scan, into the logical accumulated buffer).
    """

    def __init__(self, kind: BracketErrorKind, position: int) -> None:
        bracket = "[" if kind is BracketErrorKind.UNMATCHED_OPEN else "]"
        super().__init__(f"Unmatched '{bracket}' at position {position}")
        self.kind = kind
        self.position = position

    def to_dict(self) -> Dict[str, Any]:
        data = super().to_dict()
        data["bracket_kind"] = self.kind.value
        data["position"] = self.position
        return data


class CapacityError(BFError):
    """Raised when the code buffer would grow past its configured maximum."""

    def __init__(self, limit: int, requested: int) -> None:
        super().__init__(
            f"Code buffer overflow: {requested} characters requested, limit is {limit}"
        )
        self.limit = limit
        self.requested = requested


class StepLimitExceeded(BFError):
    """Raised when a run dispatches more instructions than max_steps allows."""

    def __init__(self, max_steps: int) -> None:
        super().__init__(f"Max steps exceeded ({max_steps})")
        self.max_steps = max_steps
