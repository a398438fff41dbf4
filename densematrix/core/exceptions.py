"""
Exception hierarchy for densematrix.

All exceptions inherit from DenseMatrixError to allow catching any
library-specific error. Every failure here is a programmer error detected
synchronously; nothing is retried.

Design principles:
    - Exceptions carry diagnostic information as attributes
    - Error messages are actionable with actual vs expected values
    - Never catch and re-raise with less information
"""


class DenseMatrixError(Exception):
    """Base exception for all densematrix errors."""
    pass


class ValidationError(DenseMatrixError):
    """
    Input validation failed.

    Raised when user-provided inputs fail validation checks (negative
    sizes, non-numeric content, arrays that cannot be aliased).
    """
    pass


class DimensionMismatch(ValidationError):
    """
    Operand dimensions disagree.

    Raised when two operands' shapes differ for an elementwise operation,
    when the inner dimensions of a product disagree, when a grid is ragged,
    or when a packed sequence cannot be split into the requested rows.

    Attributes:
        expected: Expected shape or length, if known
        actual: Shape or length actually supplied, if known
    """

    def __init__(
        self,
        message: str,
        expected: tuple[int, ...] | int | None = None,
        actual: tuple[int, ...] | int | None = None,
    ):
        super().__init__(message)
        self.expected = expected
        self.actual = actual


class IndexOutOfRange(DenseMatrixError, IndexError):
    """
    Row or column index outside the valid range.

    For element access ``shape`` is the matrix shape. For submatrix
    extraction it is the shape of the *requested* submatrix, and for
    submatrix assignment the shape of the supplied source matrix, so the
    caller can correlate the index with the selection that produced it.

    Attributes:
        index: The offending index
        axis: 'row' or 'col'
        shape: (rows, cols) reported alongside the index
    """

    def __init__(
        self,
        message: str,
        index: int | None = None,
        axis: str | None = None,
        shape: tuple[int, int] | None = None,
    ):
        super().__init__(message)
        self.index = index
        self.axis = axis
        self.shape = shape
