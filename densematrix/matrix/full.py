"""
FullPrecisionMatrix: DenseMatrix with double-precision (float64) storage.

There is deliberately no conversion to reduced precision. Narrowing is
lossy; a caller who needs it must build the reduced matrix explicitly,
e.g. ReducedPrecisionMatrix.from_grid(full.get_array()), and accept the
rounding that implies.
"""

from densematrix.core.precision import FULL_DTYPE
from densematrix.matrix.base import DenseMatrix


class FullPrecisionMatrix(DenseMatrix):
    """Dense row-major matrix of float64 elements."""

    dtype = FULL_DTYPE
