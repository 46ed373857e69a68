"""
Plain-text table rendering of classification results.

Layout::

    ┍━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━┑
    │ Input No. │ Valid │ Axiom │ Theorem │ Input │
    ├─────────────────────────────────────────────┤
    │         1 │ true  │ true  │ true    │ pq-   │
    └─────────────────────────────────────────────┘

The input column grows to fit the longest input.
"""

from __future__ import annotations

from typing import Sequence

from .models.results import ClassificationResult

HEADERS = ("Input No.", "Valid", "Axiom", "Theorem", "Input")

# Width of the input column when every input is short.
MIN_INPUT_WIDTH = len(HEADERS[-1]) + 2


def _input_width(results: Sequence[ClassificationResult]) -> int:
    width = MIN_INPUT_WIDTH
    for result in results:
        width = max(width, len(result.input) + 2)
    return width


def _border(left_cap: str, right_cap: str, fill: str, input_width: int) -> str:
    length = sum(len(h) + 3 for h in HEADERS[:-1]) + input_width
    return f"{left_cap}{fill * length}{right_cap}"


def _header_row(separator: str, input_width: int) -> str:
    cells = [f"{separator} {h} " for h in HEADERS]
    cells[-1] += " " * (input_width - MIN_INPUT_WIDTH)
    return "".join(cells) + separator


def _flag(value: bool, width: int) -> str:
    return f" {str(value).lower():<{width}} "


def _row(number: int, result: ClassificationResult, separator: str, input_width: int) -> str:
    cells = [
        f" {number:>{len(HEADERS[0])}} ",
        _flag(result.valid, len(HEADERS[1])),
        _flag(result.is_axiom, len(HEADERS[2])),
        _flag(result.is_theorem, len(HEADERS[3])),
        f" {result.input:<{input_width - 2}} ",
    ]
    return separator + separator.join(cells) + separator


def render_table(results: Sequence[ClassificationResult]) -> str:
    """
    Render results as a bordered table, numbered from 1 in input order.

    Args:
        results: Classification results in input order

    Returns:
        Table text ending with a newline
    """
    input_width = _input_width(results)
    lines = [
        _border("┍", "┑", "━", input_width),
        _header_row("│", input_width),
        _border("├", "┤", "─", input_width),
    ]
    for number, result in enumerate(results, start=1):
        lines.append(_row(number, result, "│", input_width))
    lines.append(_border("└", "┘", "─", input_width))
    return "\n".join(lines) + "\n"
