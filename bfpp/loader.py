"""
bfpp Source Loading

Turns source text into the instruction buffer fed to bracket resolution:
comment text (from '#' to end of line) is removed, then every character
outside the eight-instruction alphabet is dropped.
"""

from __future__ import annotations

from pathlib import Path
from typing import Union
import logging
import re

from bfpp.runtime.errors import CapacityError

logger = logging.getLogger(__name__)

COMMENT_START = "#"
INSTRUCTION_SET = frozenset("><+-.,[]")

_COMMENT_RE = re.compile(r"#[^\n]*")


def strip_comments(text: str) -> str:
    """Remove comment text from '#' to end of line, keeping the newline."""
    if COMMENT_START not in text:
        return text
    return _COMMENT_RE.sub("", text)


def sanitize(text: str) -> str:
    """Strip comments and keep only instruction characters."""
    return "".join(c for c in strip_comments(text) if c in INSTRUCTION_SET)


def load_program(path: Union[str, Path], max_length: int) -> str:
    """
    Load and sanitise a program file.

    Args:
        path: Source file
        max_length: Largest accepted program, in instructions

    Raises:
        OSError: If the file cannot be read
        CapacityError: If the sanitised program is longer than max_length
    """
    source = Path(path).read_text(encoding="utf-8", errors="replace")
    program = sanitize(source)
    if len(program) > max_length:
        raise CapacityError(max_length, len(program))

    logger.debug("Loaded %s: %d instructions", path, len(program))
    return program
