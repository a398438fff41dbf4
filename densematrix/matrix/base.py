"""
DenseMatrix: dense, rectangular, row-major matrix with value semantics.

All grid, arithmetic and formatting logic lives here once. The concrete
precision classes only pin the element dtype:

    ReducedPrecisionMatrix  float32
    FullPrecisionMatrix     float64

Construction:
    M.zeros(rows, cols)
    M.constant(rows, cols, value)
    M.identity(rows, cols)
    M.random(rows, cols, seed=None)
    M.from_grid(grid)                          # validated copy
    M.from_grid(array, take_ownership=True)    # aliases array, no copy
    M.from_grid_copy(grid)
    M.from_packed(values, rows)                # column-major packing
"""

from __future__ import annotations

import numbers
import sys
import warnings
from typing import Any, ClassVar, TextIO, TypeVar

import numpy as np
from numpy.typing import ArrayLike, NDArray

from densematrix.core.tolerances import select_tolerance
from densematrix.core.validation import (
    check_grid,
    check_index,
    check_inner_dimensions,
    check_owned_array,
    check_packed_length,
    check_same_shape,
    check_size,
    check_value,
    check_vector,
)
from densematrix.matrix import _kernels
from densematrix.matrix.formatting import Formatter, fixed_formatter, render
from densematrix.matrix.selection import (
    Selector,
    check_selection,
    resolve_selector,
    submatrix_index_error,
)

M = TypeVar('M', bound='DenseMatrix')


class DenseMatrix:
    """
    Dense two-dimensional matrix, generic over the element dtype.

    The shape is fixed at construction; only element values change, through
    set(), set_matrix() and the ``*_equals`` methods. Copies are always
    explicit (copy(), get_array_copy(), ...).

    Storage ownership:
        Every constructor copies its input, except
        ``from_grid(array, take_ownership=True)``, which adopts the array as
        backing storage: later writes to the array show up in the matrix
        and vice versa. get_array() likewise returns the live backing array,
        get_array_copy() an independent one.

    Thread safety:
        None. Instances hold no locks; sharing one instance between threads
        that mutate it requires external synchronisation.
    """

    dtype: ClassVar[np.dtype]

    def __init__(self, rows: int, cols: int):
        """Create a rows x cols matrix of zeros."""
        if type(self) is DenseMatrix:
            raise TypeError(
                "DenseMatrix has no element type; use ReducedPrecisionMatrix "
                "or FullPrecisionMatrix"
            )
        rows = check_size(rows, 'rows')
        cols = check_size(cols, 'cols')
        self._A = np.zeros((rows, cols), dtype=self.dtype)

    @classmethod
    def _adopt(cls: type[M], array: NDArray[np.floating[Any]]) -> M:
        """Wrap an array this module already owns, skipping validation."""
        matrix = cls.__new__(cls)
        matrix._A = array
        return matrix

    # === Construction ===

    @classmethod
    def zeros(cls: type[M], rows: int, cols: int) -> M:
        """rows x cols matrix of zeros."""
        return cls(rows, cols)

    @classmethod
    def constant(cls: type[M], rows: int, cols: int, value: float) -> M:
        """rows x cols matrix with every element equal to ``value``."""
        rows = check_size(rows, 'rows')
        cols = check_size(cols, 'cols')
        value = check_value(value, cls.dtype, 'value')
        return cls._adopt(np.full((rows, cols), value, dtype=cls.dtype))

    @classmethod
    def from_grid(cls: type[M], grid: ArrayLike, *, take_ownership: bool = False) -> M:
        """
        Build a matrix from a 2D grid.

        Parameters
        ----------
        grid : array-like
            Nested sequence of rows, or a 2D ndarray.
        take_ownership : bool, default=False
            If False, the grid is validated and copied. If True, ``grid``
            must be a 2D ndarray of exactly ``cls.dtype`` and becomes the
            backing storage with no copy: the caller hands the buffer over
            and any alias it keeps will observe and cause mutations.

        Raises
        ------
        DimensionMismatch
            If the grid is ragged or not 2D.
        ValidationError
            If the grid is not numeric, or cannot be adopted without a copy.
        """
        if not take_ownership:
            return cls.from_grid_copy(grid)

        array = check_owned_array(grid, cls.dtype, 'grid')
        if not array.flags.c_contiguous:
            warnings.warn(
                f"Adopted array with strides {array.strides} is not row-major "
                f"(C-contiguous); row access and products will be slower",
                RuntimeWarning,
                stacklevel=2,
            )
        return cls._adopt(array)

    @classmethod
    def from_grid_copy(cls: type[M], grid: ArrayLike) -> M:
        """Build a matrix from a deep copy of a 2D grid."""
        return cls._adopt(check_grid(grid, cls.dtype, 'grid'))

    @classmethod
    def from_packed(cls: type[M], values: ArrayLike, rows: int) -> M:
        """
        Build a matrix from a column-major packed sequence.

        Element (i, j) is ``values[i + j * rows]``; the column count is
        ``len(values) // rows`` (0 when rows is 0).

        Raises:
            DimensionMismatch: If len(values) is not a multiple of rows
        """
        rows = check_size(rows, 'rows')
        vals = check_vector(values, cls.dtype, 'values')
        cols = check_packed_length(len(vals), rows, 'values')
        grid = vals.reshape((rows, cols), order='F')
        return cls._adopt(np.array(grid, order='C', copy=True))

    @classmethod
    def identity(cls: type[M], rows: int, cols: int) -> M:
        """Ones on the main diagonal, zeros elsewhere; any shape."""
        rows = check_size(rows, 'rows')
        cols = check_size(cols, 'cols')
        return cls._adopt(np.eye(rows, cols, dtype=cls.dtype))

    @classmethod
    def random(
        cls: type[M],
        rows: int,
        cols: int,
        seed: int | np.random.Generator | None = None,
    ) -> M:
        """
        Matrix of independent uniform draws from [0, 1).

        Without a seed the result differs on every call. Pass an int or a
        numpy Generator for reproducible output.
        """
        rows = check_size(rows, 'rows')
        cols = check_size(cols, 'cols')
        rng = np.random.default_rng(seed)
        return cls._adopt(rng.random((rows, cols), dtype=cls.dtype))

    def copy(self: M) -> M:
        """Deep copy, value-equal and independently owned."""
        return self._adopt(self._A.copy())

    clone = copy

    def __copy__(self: M) -> M:
        return self.copy()

    def __deepcopy__(self: M, memo: dict) -> M:
        return self.copy()

    # === Shape ===

    @property
    def rows(self) -> int:
        """Number of rows."""
        return self._A.shape[0]

    @property
    def cols(self) -> int:
        """Number of columns."""
        return self._A.shape[1]

    @property
    def shape(self) -> tuple[int, int]:
        """(rows, cols)."""
        return (self._A.shape[0], self._A.shape[1])

    # === Element access ===

    def get(self, row: int, col: int) -> np.floating[Any]:
        """
        Element at (row, col), as a scalar of the element dtype.

        Raises:
            IndexOutOfRange: If row is not in [0, rows) or col not in [0, cols)
        """
        i = check_index(row, self.rows, 'row', self.shape)
        j = check_index(col, self.cols, 'col', self.shape)
        return self._A[i, j]

    def set(self, row: int, col: int, value: float) -> None:
        """
        Overwrite the element at (row, col), casting to the element dtype.

        Raises:
            IndexOutOfRange: If row is not in [0, rows) or col not in [0, cols)
            ValidationError: If value is not a real number
        """
        i = check_index(row, self.rows, 'row', self.shape)
        j = check_index(col, self.cols, 'col', self.shape)
        value = check_value(value, self.dtype, 'value')
        self._A[i, j] = value

    def __getitem__(self, key: tuple[int, int]) -> np.floating[Any]:
        row, col = self._split_key(key)
        return self.get(row, col)

    def __setitem__(self, key: tuple[int, int], value: float) -> None:
        row, col = self._split_key(key)
        self.set(row, col, value)

    @staticmethod
    def _split_key(key: Any) -> tuple[Any, Any]:
        if not isinstance(key, tuple) or len(key) != 2:
            raise TypeError(
                f"matrix indices must be a (row, col) pair, got {key!r}; "
                f"use get_matrix() for submatrices"
            )
        return key

    def get_array(self) -> NDArray[np.floating[Any]]:
        """
        The live backing array.

        No copy is made: writes through the returned array change this
        matrix. Use get_array_copy() for an isolated copy.
        """
        return self._A

    def get_array_copy(self) -> NDArray[np.floating[Any]]:
        """Independent copy of the elements as a 2D array."""
        return self._A.copy()

    def get_column_packed_copy(self) -> NDArray[np.floating[Any]]:
        """Elements as a fresh 1D array, column by column."""
        return self._A.flatten(order='F')

    def get_row_packed_copy(self) -> NDArray[np.floating[Any]]:
        """Elements as a fresh 1D array, row by row."""
        return self._A.flatten(order='C')

    # === Submatrices ===

    def get_matrix(self: M, rows: Selector, cols: Selector) -> M:
        """
        Extract a submatrix.

        Each selector is either ``span(i0, i1)`` (inclusive range) or a
        sequence of indices giving the output order. The result has shape
        (number of rows selected, number of columns selected).

        Raises:
            IndexOutOfRange: If any selected index is outside the matrix.
                The error reports the offending index and the requested
                output shape.
        """
        r = resolve_selector(rows, 'rows')
        c = resolve_selector(cols, 'cols')
        requested = (len(r), len(c))
        check_selection(r, self.rows, 'row', requested)
        check_selection(c, self.cols, 'col', requested)
        return self._adopt(np.ascontiguousarray(self._A[np.ix_(r, c)]))

    def set_matrix(self, rows: Selector, cols: Selector, source: DenseMatrix) -> None:
        """
        Write ``source`` into the selected cells.

        ``source[a, b]`` goes to ``self[rows[a], cols[b]]``, visiting cells
        row by row in selector order, the same order get_matrix() reads.

        Not atomic: if an index turns out to be out of range, every cell
        visited before it has already been written and stays written.
        A source sharing storage with this matrix, or this matrix itself, is
        read cell by cell as it is written, so later reads see earlier writes.

        Raises:
            IndexOutOfRange: If a selected index is outside this matrix, or
                the selection is larger than ``source``. The error reports
                the offending index and source.shape.
            TypeError: If source has a different element precision.
        """
        self._check_operand(source, 'set_matrix')
        r = resolve_selector(rows, 'rows')
        c = resolve_selector(cols, 'cols')
        src = source._A
        reported = source.shape

        for a, i in enumerate(r):
            i = int(i)
            if not 0 <= i < self.rows:
                raise submatrix_index_error(i, 'row', reported)
            if a >= source.rows:
                raise submatrix_index_error(a, 'row', reported)
            for b, j in enumerate(c):
                j = int(j)
                if b >= source.cols:
                    raise submatrix_index_error(b, 'col', reported)
                if not 0 <= j < self.cols:
                    raise submatrix_index_error(j, 'col', reported)
                self._A[i, j] = src[a, b]

    # === Elementwise arithmetic ===

    def _check_operand(self, other: Any, op: str) -> None:
        if type(other) is not type(self):
            raise TypeError(
                f"{op}: expected {type(self).__name__}, got {type(other).__name__}"
            )

    def _elementwise(self: M, other: M, ufunc: np.ufunc, op: str, *, swap: bool = False) -> M:
        self._check_operand(other, op)
        check_same_shape(self.shape, other.shape)
        left, right = (other._A, self._A) if swap else (self._A, other._A)
        with np.errstate(all='ignore'):
            return self._adopt(ufunc(left, right))

    def _elementwise_inplace(self: M, other: M, ufunc: np.ufunc, op: str, *, swap: bool = False) -> M:
        self._check_operand(other, op)
        check_same_shape(self.shape, other.shape)
        left, right = (other._A, self._A) if swap else (self._A, other._A)
        with np.errstate(all='ignore'):
            ufunc(left, right, out=self._A)
        return self

    def plus(self: M, other: M) -> M:
        """A + B."""
        return self._elementwise(other, np.add, 'plus')

    def plus_equals(self: M, other: M) -> M:
        """A = A + B, returns self."""
        return self._elementwise_inplace(other, np.add, 'plus_equals')

    def minus(self: M, other: M) -> M:
        """A - B."""
        return self._elementwise(other, np.subtract, 'minus')

    def minus_equals(self: M, other: M) -> M:
        """A = A - B, returns self."""
        return self._elementwise_inplace(other, np.subtract, 'minus_equals')

    def array_times(self: M, other: M) -> M:
        """Elementwise product A .* B."""
        return self._elementwise(other, np.multiply, 'array_times')

    def array_times_equals(self: M, other: M) -> M:
        """A = A .* B, returns self."""
        return self._elementwise_inplace(other, np.multiply, 'array_times_equals')

    def array_right_divide(self: M, other: M) -> M:
        """Elementwise A ./ B. Division by zero follows IEEE rules."""
        return self._elementwise(other, np.divide, 'array_right_divide')

    def array_right_divide_equals(self: M, other: M) -> M:
        """A = A ./ B, returns self."""
        return self._elementwise_inplace(other, np.divide, 'array_right_divide_equals')

    def array_left_divide(self: M, other: M) -> M:
        """Elementwise A .\\ B, i.e. B ./ A."""
        return self._elementwise(other, np.divide, 'array_left_divide', swap=True)

    def array_left_divide_equals(self: M, other: M) -> M:
        """A = B ./ A, returns self."""
        return self._elementwise_inplace(other, np.divide, 'array_left_divide_equals', swap=True)

    def uminus(self: M) -> M:
        """-A."""
        return self._adopt(np.negative(self._A))

    def _scalar(self, value: Any, op: str) -> np.floating[Any]:
        if not isinstance(value, numbers.Real):
            raise TypeError(
                f"{op}: expected a real scalar or {type(self).__name__}, "
                f"got {type(value).__name__}"
            )
        return self.dtype.type(value)

    def times(self: M, other: M | float) -> M:
        """
        Scalar multiple ``s * A``, or matrix product ``A * B``.

        The product requires A.cols == B.rows and has shape
        (A.rows, B.cols). See _kernels.column_buffered_product for the
        summation order.

        Raises:
            DimensionMismatch: If the inner dimensions disagree
        """
        if isinstance(other, DenseMatrix):
            self._check_operand(other, 'times')
            check_inner_dimensions(self.shape, other.shape)
            return self._adopt(_kernels.column_buffered_product(self._A, other._A))
        s = self._scalar(other, 'times')
        with np.errstate(all='ignore'):
            return self._adopt(self._A * s)

    def times_equals(self: M, value: float) -> M:
        """A = s * A, returns self."""
        s = self._scalar(value, 'times_equals')
        with np.errstate(all='ignore'):
            np.multiply(self._A, s, out=self._A)
        return self

    # === Operators ===

    def __add__(self, other):
        if type(other) is not type(self):
            return NotImplemented
        return self.plus(other)

    def __iadd__(self, other):
        if type(other) is not type(self):
            return NotImplemented
        return self.plus_equals(other)

    def __sub__(self, other):
        if type(other) is not type(self):
            return NotImplemented
        return self.minus(other)

    def __isub__(self, other):
        if type(other) is not type(self):
            return NotImplemented
        return self.minus_equals(other)

    def __neg__(self):
        return self.uminus()

    def __mul__(self, other):
        # scalar scaling only; elementwise products are array_times()
        if not isinstance(other, numbers.Real):
            return NotImplemented
        return self.times(other)

    __rmul__ = __mul__

    def __imul__(self, other):
        if not isinstance(other, numbers.Real):
            return NotImplemented
        return self.times_equals(other)

    def __matmul__(self, other):
        if type(other) is not type(self):
            return NotImplemented
        return self.times(other)

    # === Derived quantities ===

    def transpose(self: M) -> M:
        """New matrix with B[j, i] = A[i, j]."""
        return self._adopt(self._A.T.copy())

    @property
    def T(self: M) -> M:
        """Alias for transpose()."""
        return self.transpose()

    def trace(self) -> np.floating[Any]:
        """Sum of the diagonal elements."""
        return _kernels.diagonal_sum(self._A)

    def norm1(self) -> np.floating[Any]:
        """One norm: maximum column sum of absolute values."""
        return _kernels.max_abs_sum(self._A, axis=0)

    def norm_inf(self) -> np.floating[Any]:
        """Infinity norm: maximum row sum of absolute values."""
        return _kernels.max_abs_sum(self._A, axis=1)

    # === Text output ===

    def format(self, width: int, digits: int) -> str:
        """
        Render with a Fortran-like 'Fw.d' layout.

        Each element gets ``digits`` fractional digits and is right-justified
        in a column of ``width + 2`` characters. The text does not depend on
        the process locale.
        """
        return render(self._A, fixed_formatter(digits), width + 2)

    def format_with(self, formatter: Formatter, width: int) -> str:
        """Render using ``formatter`` for each element, in columns of ``width``."""
        return render(self._A, formatter, width)

    def print(self, width: int, digits: int, file: TextIO | None = None) -> None:
        """Write format(width, digits) to ``file`` (default stdout)."""
        out = sys.stdout if file is None else file
        out.write(self.format(width, digits))

    def print_with(self, formatter: Formatter, width: int, file: TextIO | None = None) -> None:
        """Write format_with(formatter, width) to ``file`` (default stdout)."""
        out = sys.stdout if file is None else file
        out.write(self.format_with(formatter, width))

    def __repr__(self) -> str:
        return f"{type(self).__name__}(rows={self.rows}, cols={self.cols})"

    # === Equality ===

    def __eq__(self, other: object) -> bool:
        if type(other) is not type(self):
            return NotImplemented
        return self.shape == other.shape and bool(np.array_equal(self._A, other._A))

    def __hash__(self) -> int:
        # +0.0 folds -0.0 into 0.0 so that equal matrices hash equally
        normalized = self._A + self.dtype.type(0)
        return hash((type(self).__name__, self.shape, normalized.tobytes()))

    def allclose(
        self,
        other: DenseMatrix,
        rtol: float | None = None,
        atol: float | None = None,
    ) -> bool:
        """
        Approximate comparison; tolerances default to the dtype's tier.

        Shapes that differ compare as not close. NaN is never close.
        """
        self._check_operand(other, 'allclose')
        if self.shape != other.shape:
            return False
        tier = select_tolerance(self.dtype)
        rtol = tier.rtol if rtol is None else rtol
        atol = tier.atol if atol is None else atol
        return bool(np.allclose(self._A, other._A, rtol=rtol, atol=atol))

