"""
ReducedPrecisionMatrix: DenseMatrix with single-precision (float32) storage.

Half the memory of FullPrecisionMatrix. Sums and products are carried out
in float32 with no wider accumulator, so results match plain
single-precision loops bit for bit.
"""

from densematrix.core.exceptions import ValidationError
from densematrix.core.precision import FULL_DTYPE, REDUCED_DTYPE
from densematrix.matrix.base import DenseMatrix
from densematrix.matrix.full import FullPrecisionMatrix


class ReducedPrecisionMatrix(DenseMatrix):
    """Dense row-major matrix of float32 elements."""

    dtype = REDUCED_DTYPE

    def to_full_precision(self) -> FullPrecisionMatrix:
        """
        Widen to a new FullPrecisionMatrix of the same shape.

        float32 -> float64 is exact, so every element compares equal after
        widening. The result needs twice the memory and owns its storage.
        """
        return FullPrecisionMatrix._adopt(self._A.astype(FULL_DTYPE))


def to_full_precision(matrix: ReducedPrecisionMatrix) -> FullPrecisionMatrix:
    """
    Widen a reduced-precision matrix; see ReducedPrecisionMatrix.to_full_precision.

    Raises:
        ValidationError: If ``matrix`` is not a ReducedPrecisionMatrix
    """
    if not isinstance(matrix, ReducedPrecisionMatrix):
        raise ValidationError(
            f"matrix: expected ReducedPrecisionMatrix, got {type(matrix).__name__}"
        )
    return matrix.to_full_precision()
