"""
Helpers for positioned text extracted from PDF pages.

Helper functions:
    cluster_by_y_tolerance: Y-coordinate clustering for line detection.
    join_lines: Rebuild reading-order text from clustered lines.
"""

from typing import Callable, List, Sequence, TypeVar

T = TypeVar("T")


def cluster_by_y_tolerance(
    items: Sequence[T],
    tolerance: float = 3.0,
    y: Callable[[T], float] = lambda item: item["top"],
) -> List[List[T]]:
    """
    Group positioned items into lines by Y-coordinate proximity.

    Handles baseline shifts between bold/regular text that would otherwise split lines.
    Lines are returned top to bottom; items keep their input order within a line.
    """
    if not items:
        return []

    sorted_items = sorted(items, key=y)

    lines = []
    current_line = [sorted_items[0]]
    current_y = y(sorted_items[0])

    for item in sorted_items[1:]:
        if abs(y(item) - current_y) <= tolerance:
            current_line.append(item)
        else:
            # Y jumped beyond tolerance - start new line
            lines.append(current_line)
            current_line = [item]
            current_y = y(item)

    if current_line:
        lines.append(current_line)

    return lines


def join_lines(
    lines: List[List[T]],
    x: Callable[[T], float],
    text: Callable[[T], str],
) -> str:
    """Join clustered lines into one string, each line ordered left to right."""
    words = []
    for line in lines:
        words.extend(text(item) for item in sorted(line, key=x))
    return " ".join(words)
