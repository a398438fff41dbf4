"""
Dense matrix value types.

Public API:
    ReducedPrecisionMatrix  - float32 storage
    FullPrecisionMatrix     - float64 storage
    DenseMatrix             - shared base class
    span(i0, i1)            - inclusive range selector for submatrices
    to_full_precision(m)    - widen a reduced-precision matrix
"""

from densematrix.matrix.base import DenseMatrix
from densematrix.matrix.full import FullPrecisionMatrix
from densematrix.matrix.reduced import ReducedPrecisionMatrix, to_full_precision
from densematrix.matrix.selection import Span, span

__all__ = [
    "DenseMatrix",
    "FullPrecisionMatrix",
    "ReducedPrecisionMatrix",
    "Span",
    "span",
    "to_full_precision",
]
