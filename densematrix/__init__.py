"""
densematrix: dense row-major matrices in single and double precision.

A small value-type library: construction, element and submatrix access,
elementwise arithmetic, matrix products, norms, trace, widening from
single to double precision, deterministic text rendering, and structural
equality/hashing.

Submodules:
    core: exceptions, validation, precision and tolerance constants
    matrix: ReducedPrecisionMatrix, FullPrecisionMatrix
"""

__version__ = "0.1.0"

import numpy as np

from densematrix.core.exceptions import (
    DenseMatrixError,
    ValidationError,
    DimensionMismatch,
    IndexOutOfRange,
)
from densematrix.core.precision import REDUCED_DTYPE, resolve_precision
from densematrix.matrix import (
    DenseMatrix,
    FullPrecisionMatrix,
    ReducedPrecisionMatrix,
    Span,
    span,
    to_full_precision,
)


def matrix_class(precision: str | np.dtype | type) -> type[DenseMatrix]:
    """
    Matrix class for a precision.

    Args:
        precision: 'reduced'/'fp32'/'float32'/'single',
            'full'/'fp64'/'float64'/'double', or a dtype

    Returns:
        ReducedPrecisionMatrix or FullPrecisionMatrix
    """
    if resolve_precision(precision) == REDUCED_DTYPE:
        return ReducedPrecisionMatrix
    return FullPrecisionMatrix


__all__ = [
    "__version__",
    "DenseMatrix",
    "FullPrecisionMatrix",
    "ReducedPrecisionMatrix",
    "Span",
    "span",
    "to_full_precision",
    "matrix_class",
    "DenseMatrixError",
    "ValidationError",
    "DimensionMismatch",
    "IndexOutOfRange",
]
