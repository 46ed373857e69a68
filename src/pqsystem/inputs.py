"""
Loading candidate strings from files.

One candidate per line. Only the line terminator is stripped: a blank line
is the empty string, which is itself a well-formed (non-theorem) input.
"""

from __future__ import annotations

import os

from loguru import logger


def load_inputs(file_path: str) -> list[str]:
    """
    Load candidate strings from a text file.

    Args:
        file_path: Path to a UTF-8 text file, one candidate per line

    Returns:
        Candidate strings in file order

    Raises:
        FileNotFoundError: If file doesn't exist
    """
    if not os.path.exists(file_path):
        raise FileNotFoundError(f"Input file not found: {file_path}")

    with open(file_path, "r", encoding="utf-8") as f:
        lines = [line[:-1] if line.endswith("\n") else line for line in f]

    if not lines:
        logger.warning(f"Input file is empty: {file_path}")

    return lines
