"""
Row/column selectors for submatrix extraction and assignment.

A selector is either a Span (inclusive index range) or an explicit
sequence of indices. An index sequence defines the output order: it may
be unsorted, non-contiguous and may repeat indices.
"""

from __future__ import annotations

import operator
from collections.abc import Sequence
from dataclasses import dataclass
from typing import Any, Union

import numpy as np
from numpy.typing import NDArray

from densematrix.core.exceptions import IndexOutOfRange, ValidationError


@dataclass(frozen=True)
class Span:
    """
    Inclusive index range ``start..stop``.

    ``stop == start - 1`` is an empty span; anything shorter is rejected.
    """
    start: int
    stop: int

    def __post_init__(self):
        for field_name in ('start', 'stop'):
            value = getattr(self, field_name)
            try:
                object.__setattr__(self, field_name, operator.index(value))
            except TypeError as e:
                raise ValidationError(
                    f"Span.{field_name}: expected an integer, got {type(value).__name__}"
                ) from e
        if self.stop < self.start - 1:
            raise ValidationError(
                f"Span: negative extent, stop={self.stop} < start-1={self.start - 1}"
            )

    def __len__(self) -> int:
        return self.stop - self.start + 1

    def indices(self) -> NDArray[np.intp]:
        return np.arange(self.start, self.stop + 1, dtype=np.intp)


Selector = Union[Span, Sequence[int], NDArray[np.integer]]


def span(start: int, stop: int) -> Span:
    """Inclusive range selector, ``span(i0, i1)`` selects i0, i0+1, ..., i1."""
    return Span(start, stop)


def resolve_selector(selector: Any, name: str) -> NDArray[np.intp]:
    """
    Convert a selector into a 1D array of indices in output order.

    Args:
        selector: Span or sequence of integer indices
        name: Parameter name for error messages

    Returns:
        1D intp array; bounds are not checked here

    Raises:
        ValidationError: If the selector is a scalar or holds non-integers
    """
    if isinstance(selector, Span):
        return selector.indices()

    if isinstance(selector, (str, bytes)) or np.ndim(selector) == 0:
        raise ValidationError(
            f"{name}: expected a Span or a sequence of indices, "
            f"got {type(selector).__name__}"
        )

    indices = np.asarray(selector)
    if indices.size == 0:
        return np.empty(0, dtype=np.intp)
    if indices.ndim != 1:
        raise ValidationError(
            f"{name}: expected a 1D sequence of indices, got shape {indices.shape}"
        )
    if not np.issubdtype(indices.dtype, np.integer):
        raise ValidationError(
            f"{name}: indices must be integers, got dtype {indices.dtype}"
        )
    return indices.astype(np.intp, copy=False)


def submatrix_index_error(index: int, axis: str, shape: tuple[int, int]) -> IndexOutOfRange:
    """Build the error raised for a bad submatrix index."""
    return IndexOutOfRange(
        f"Submatrix indices. Index {index}. Dimension {shape[0]}|{shape[1]}[row|col]",
        index=index,
        axis=axis,
        shape=shape,
    )


def check_selection(
    indices: NDArray[np.intp],
    bound: int,
    axis: str,
    shape: tuple[int, int],
) -> None:
    """
    Verify every selected index lies in [0, bound).

    Args:
        indices: Resolved selector
        bound: Source extent along the axis
        axis: 'row' or 'col'
        shape: Shape to report, the requested submatrix shape

    Raises:
        IndexOutOfRange: Naming the first offending index in selector order
    """
    bad = (indices < 0) | (indices >= bound)
    if bad.any():
        first = int(indices[np.argmax(bad)])
        raise submatrix_index_error(first, axis, shape)
