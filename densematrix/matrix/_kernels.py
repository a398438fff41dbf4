"""
Reductions with a fixed, left-to-right summation order.

numpy's add.reduce uses pairwise summation, so its results depend on
array length and blocking. Everything here accumulates strictly in index
order, in the array's own dtype, starting from +0.0, which makes results
bit-reproducible against a plain scalar loop.
"""

from typing import Any

import numpy as np
from numpy.typing import NDArray


def sequential_sum(values: NDArray[np.floating[Any]], axis: int) -> NDArray[np.floating[Any]]:
    """
    Sum along ``axis`` left to right, equivalent to ``s = 0; s += v[k]``.

    Args:
        values: Array to reduce
        axis: Axis to reduce over

    Returns:
        Array with ``axis`` removed, same dtype as ``values``
    """
    dtype = values.dtype
    if values.shape[axis] == 0:
        shape = values.shape[:axis] + values.shape[axis + 1:]
        return np.zeros(shape, dtype=dtype)
    # accumulate is sequential; the trailing +0.0 matches a zero-initialised
    # accumulator when every term is -0.0
    running = np.add.accumulate(values, axis=axis, dtype=dtype)
    return np.take(running, -1, axis=axis) + dtype.type(0)


def column_buffered_product(
    A: NDArray[np.floating[Any]],
    B: NDArray[np.floating[Any]],
) -> NDArray[np.floating[Any]]:
    """
    Matrix product computed one output column at a time.

    Column j of B is staged into a contiguous buffer, then every row of A
    is reduced against it at once. Each entry is
    ``((0 + A[i,0]*b[0]) + A[i,1]*b[1]) + ...`` in the element dtype, with
    products and sums rounded separately.

    Args:
        A: Left operand, shape (m, n)
        B: Right operand, shape (n, p); caller has checked n

    Returns:
        New C-contiguous array of shape (m, p)
    """
    m, n = A.shape
    p = B.shape[1]
    C = np.empty((m, p), dtype=A.dtype)
    Bcolj = np.empty(n, dtype=A.dtype)
    with np.errstate(all='ignore'):
        for j in range(p):
            Bcolj[:] = B[:, j]
            C[:, j] = sequential_sum(A * Bcolj, axis=1)
    return C


def max_abs_sum(A: NDArray[np.floating[Any]], axis: int) -> np.floating[Any]:
    """
    Largest sequential sum of absolute values along ``axis``.

    axis=0 gives the maximum column sum (one norm), axis=1 the maximum
    row sum (infinity norm). NaN propagates; an empty matrix gives 0.
    """
    with np.errstate(all='ignore'):
        sums = sequential_sum(np.abs(A), axis=axis)
    if sums.size == 0:
        return A.dtype.type(0)
    return A.dtype.type(np.max(sums))


def diagonal_sum(A: NDArray[np.floating[Any]]) -> np.floating[Any]:
    """Sequential sum of A[i, i] for i < min(rows, cols)."""
    with np.errstate(all='ignore'):
        return A.dtype.type(sequential_sum(np.diagonal(A), axis=0))
