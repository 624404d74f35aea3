"""
bfpp Bracket Resolver

Pairs every loop-open with its loop-close in a single left-to-right scan.
The resulting map is an involution: if a maps to b then b maps to a, and every
opener maps to a strictly later position.
"""

from __future__ import annotations

import logging
from typing import Dict, List, Optional

from bfpp.runtime.errors import BracketError, BracketErrorKind

logger = logging.getLogger(__name__)

LOOP_OPEN = "["
LOOP_CLOSE = "]"


def resolve_brackets(code: str) -> Dict[int, int]:
    """
    Build the bracket map for code.

    Args:
        code: Instruction characters; non-loop characters are skipped

    Returns:
        Mapping from every bracket position to its partner

    Raises:
        BracketError: On the first unmatched closer, or on leftover openers
            (reporting the most recently pushed one)
    """
    stack: List[int] = []
    brackets: Dict[int, int] = {}

    for pos, char in enumerate(code):
        if char == LOOP_OPEN:
            stack.append(pos)
        elif char == LOOP_CLOSE:
            if not stack:
                raise BracketError(BracketErrorKind.UNMATCHED_CLOSE, pos)
            start = stack.pop()
            brackets[start] = pos
            brackets[pos] = start

    if stack:
        raise BracketError(BracketErrorKind.UNMATCHED_OPEN, stack[-1])

    logger.debug("Resolved %d loop pairs over %d characters", len(brackets) // 2, len(code))
    return brackets


def check_brackets(code: str) -> Optional[BracketError]:
    """Return the resolution error for code, or None if it is balanced."""
    try:
        resolve_brackets(code)
    except BracketError as e:
        return e
    return None
