"""
Fixed-width text rendering of matrices.

Layout: a blank line, then one line per row with every element
right-justified in a column of ``width`` characters (always at least one
leading space), then a blank line.

Number formatting never consults the process locale: Python's 'f'
presentation type always uses '.' and never groups digits.
"""

import math
from collections.abc import Callable
from typing import Any

import numpy as np
from numpy.typing import NDArray

from densematrix.core.exceptions import ValidationError

Formatter = Callable[[float], str]


def format_fixed(value: float, digits: int) -> str:
    """
    Format one value with exactly ``digits`` fractional digits.

    At least one integer digit is always written, rounding is
    round-half-even on the exact binary value. Non-finite values render as
    'NaN', 'Infinity' and '-Infinity'.
    """
    if math.isnan(value):
        return 'NaN'
    if math.isinf(value):
        return 'Infinity' if value > 0 else '-Infinity'
    return f"{value:.{digits}f}"


def fixed_formatter(digits: int) -> Formatter:
    """Formatter producing ``digits`` fractional digits."""
    if isinstance(digits, bool) or not isinstance(digits, (int, np.integer)) or digits < 0:
        raise ValidationError(f"digits: must be a non-negative integer, got {digits!r}")
    digits = int(digits)

    def formatter(value: float) -> str:
        return format_fixed(value, digits)

    return formatter


def render(grid: NDArray[np.floating[Any]], formatter: Formatter, width: int) -> str:
    """
    Render a 2D array as text.

    Args:
        grid: Elements to render, row-major
        formatter: Turns one element (widened to a Python float) into text
        width: Column width each element is right-justified in

    Returns:
        The full text, starting with '\\n' and ending with '\\n\\n'
    """
    lines = ['']
    for row in grid:
        cells = []
        for value in row:
            s = formatter(float(value))
            cells.append(' ' * max(1, width - len(s)) + s)
        lines.append(''.join(cells))
    lines.append('')
    return '\n'.join(lines) + '\n'
