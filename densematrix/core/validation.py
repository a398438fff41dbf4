"""
Input validation utilities for densematrix.

These validators follow the "fail fast, fail loud" principle. They raise
immediately with clear error messages rather than silently correcting
or making assumptions about caller intent.

Design principles:
    - No silent type coercion (except np.asarray on array-likes)
    - Clear, actionable error messages with actual values
    - Each function validates ONE thing
    - Parameter names included in all error messages
"""

import numbers
import operator
from typing import Any

import numpy as np
from numpy.typing import ArrayLike, NDArray

from densematrix.core.exceptions import (
    DimensionMismatch,
    IndexOutOfRange,
    ValidationError,
)


def check_size(value: Any, name: str) -> int:
    """
    Verify a row or column count is a non-negative integer.

    Args:
        value: Count to validate
        name: Parameter name for error messages

    Returns:
        The count as a Python int

    Raises:
        ValidationError: If value is not an integer or is negative
    """
    try:
        size = operator.index(value)
    except TypeError as e:
        raise ValidationError(
            f"{name}: expected an integer, got {type(value).__name__}"
        ) from e
    if size < 0:
        raise ValidationError(f"{name}: must be non-negative, got {size}")
    return size


def check_rectangular(grid: Any, name: str) -> None:
    """
    Verify a nested sequence has rows of equal length.

    ndarrays are rectangular by construction and pass unchecked.

    Args:
        grid: Sequence of row sequences
        name: Parameter name for error messages

    Raises:
        DimensionMismatch: If a row is not a sequence or row lengths differ
    """
    if isinstance(grid, np.ndarray):
        return

    width = None
    for i, row in enumerate(grid):
        try:
            length = len(row)
        except TypeError as e:
            raise DimensionMismatch(
                f"{name}: row {i} is not a sequence, expected a 2D grid"
            ) from e
        if width is None:
            width = length
        elif length != width:
            raise DimensionMismatch(
                f"{name}: All rows must have the same length. "
                f"Row 0 has {width}, row {i} has {length}",
                expected=width,
                actual=length,
            )


def check_grid(grid: ArrayLike, dtype: np.dtype, name: str) -> NDArray[np.floating[Any]]:
    """
    Validate a 2D grid and copy it into a fresh array of ``dtype``.

    Accepts nested sequences or ndarrays. Rejects inputs that result in
    object or non-numeric dtype.

    Args:
        grid: Input to validate
        dtype: Element dtype of the result
        name: Parameter name for error messages

    Returns:
        New C-contiguous 2D array; never shares memory with ``grid``

    Raises:
        DimensionMismatch: If the grid is ragged or not 2D
        ValidationError: If the grid cannot be converted to numeric data
    """
    check_rectangular(grid, name)

    if not isinstance(grid, np.ndarray) and len(grid) == 0:
        return np.zeros((0, 0), dtype=dtype)

    try:
        raw = np.asarray(grid)
    except (ValueError, TypeError) as e:
        raise ValidationError(f"{name}: cannot convert to array: {e}") from e

    if raw.dtype == object:
        raise ValidationError(
            f"{name}: converted to object dtype, indicating mixed types or non-numeric data"
        )

    if not (np.issubdtype(raw.dtype, np.number) or raw.dtype == np.bool_):
        raise ValidationError(
            f"{name}: non-numeric dtype {raw.dtype}, expected numeric data"
        )

    if np.issubdtype(raw.dtype, np.complexfloating):
        raise ValidationError(f"{name}: complex dtype {raw.dtype}, expected real data")

    if raw.ndim != 2:
        raise DimensionMismatch(
            f"{name}: expected 2D grid, got {raw.ndim}D with shape {raw.shape}",
            expected=2,
            actual=raw.ndim,
        )

    return np.array(raw, dtype=dtype, order='C', copy=True)


def check_owned_array(array: Any, dtype: np.dtype, name: str) -> NDArray[np.floating[Any]]:
    """
    Verify an array can be adopted as backing storage without copying.

    Args:
        array: Candidate backing array
        dtype: Required element dtype
        name: Parameter name for error messages

    Returns:
        The same array object

    Raises:
        ValidationError: If array is not an ndarray of exactly ``dtype``
        DimensionMismatch: If array is not 2D
    """
    if not isinstance(array, np.ndarray):
        raise ValidationError(
            f"{name}: take_ownership requires a numpy.ndarray, "
            f"got {type(array).__name__}"
        )
    if array.dtype != dtype:
        raise ValidationError(
            f"{name}: take_ownership requires dtype {dtype}, got {array.dtype}; "
            f"aliasing would need a conversion copy"
        )
    if array.ndim != 2:
        raise DimensionMismatch(
            f"{name}: expected 2D array, got {array.ndim}D with shape {array.shape}",
            expected=2,
            actual=array.ndim,
        )
    return array


def check_vector(values: ArrayLike, dtype: np.dtype, name: str) -> NDArray[np.floating[Any]]:
    """
    Validate a flat sequence of numbers and convert it to ``dtype``.

    Args:
        values: 1D array-like
        dtype: Element dtype of the result
        name: Parameter name for error messages

    Returns:
        1D array; may share memory with ``values``

    Raises:
        DimensionMismatch: If values is not 1D
        ValidationError: If values cannot be converted to numeric data
    """
    try:
        result = np.asarray(values, dtype=dtype)
    except (ValueError, TypeError) as e:
        raise ValidationError(f"{name}: cannot convert to {dtype} array: {e}") from e

    if result.ndim != 1:
        raise DimensionMismatch(
            f"{name}: expected 1D sequence, got {result.ndim}D with shape {result.shape}",
            expected=1,
            actual=result.ndim,
        )
    return result


def check_packed_length(length: int, rows: int, name: str) -> int:
    """
    Verify a packed sequence splits evenly into ``rows`` rows.

    Args:
        length: Number of packed values
        rows: Requested row count
        name: Parameter name for error messages

    Returns:
        Derived column count (0 when rows is 0)

    Raises:
        DimensionMismatch: If rows * cols != length
    """
    cols = length // rows if rows != 0 else 0
    if rows * cols != length:
        raise DimensionMismatch(
            f"{name}: Array length must be a multiple of rows. "
            f"Got length {length} for {rows} rows",
            expected=rows * cols,
            actual=length,
        )
    return cols


def check_same_shape(
    shape: tuple[int, int],
    other: tuple[int, int],
) -> None:
    """
    Verify two matrices have the same shape.

    Raises:
        DimensionMismatch: If the shapes differ
    """
    if shape != other:
        raise DimensionMismatch(
            f"Matrix dimensions must agree. Expected {shape}, got {other}",
            expected=shape,
            actual=other,
        )


def check_inner_dimensions(
    shape: tuple[int, int],
    other: tuple[int, int],
) -> None:
    """
    Verify the left operand's columns match the right operand's rows.

    Raises:
        DimensionMismatch: If shape[1] != other[0]
    """
    if shape[1] != other[0]:
        raise DimensionMismatch(
            f"Matrix inner dimensions must agree. "
            f"Left is {shape[0]}x{shape[1]}, right is {other[0]}x{other[1]}",
            expected=shape[1],
            actual=other[0],
        )


def check_index(index: Any, bound: int, axis: str, shape: tuple[int, int]) -> int:
    """
    Verify an element index lies in [0, bound).

    Negative indices are rejected rather than wrapped.

    Args:
        index: Index to validate
        bound: Exclusive upper bound
        axis: 'row' or 'col', for error messages
        shape: Matrix shape reported in the error

    Returns:
        The index as a Python int

    Raises:
        IndexOutOfRange: If the index is outside [0, bound)
    """
    try:
        i = operator.index(index)
    except TypeError as e:
        raise ValidationError(
            f"{axis}: expected an integer index, got {type(index).__name__}"
        ) from e
    if not 0 <= i < bound:
        raise IndexOutOfRange(
            f"{axis} index {i} out of range for matrix of shape {shape}",
            index=i,
            axis=axis,
            shape=shape,
        )
    return i


def check_value(value: Any, dtype: np.dtype, name: str) -> np.floating[Any]:
    """
    Validate an element value and cast it to ``dtype``.

    Args:
        value: Real scalar (Python or numpy)
        dtype: Element dtype of the result
        name: Parameter name for error messages

    Returns:
        Scalar of ``dtype``; values beyond its range become +/-inf

    Raises:
        ValidationError: If value is not a real number
    """
    if not isinstance(value, (numbers.Real, np.bool_)):
        raise ValidationError(
            f"{name}: expected a real number, got {type(value).__name__}"
        )
    with np.errstate(over='ignore'):
        return dtype.type(value)
