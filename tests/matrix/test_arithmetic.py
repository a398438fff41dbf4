"""
Tests for elementwise and scalar arithmetic.

Validates:
    - pure variants return new matrices and leave operands untouched
    - *_equals variants mutate and return the receiver
    - shape disagreement raises DimensionMismatch before any write
    - operands of the other precision raise TypeError
    - IEEE division semantics (no zero guard)
    - operator forms
"""

import numpy as np
import pytest

from densematrix import FullPrecisionMatrix, ReducedPrecisionMatrix
from densematrix.core.exceptions import DimensionMismatch


PURE_AND_INPLACE = [
    ("plus", "plus_equals", lambda a, b: a + b),
    ("minus", "minus_equals", lambda a, b: a - b),
    ("array_times", "array_times_equals", lambda a, b: a * b),
    ("array_right_divide", "array_right_divide_equals", lambda a, b: a / b),
    ("array_left_divide", "array_left_divide_equals", lambda a, b: b / a),
]


@pytest.fixture
def nonzero_pair(matrix_cls):
    a = matrix_cls.from_grid([[1.0, -2.0, 4.0], [0.5, 8.0, -0.25]])
    b = matrix_cls.from_grid([[2.0, 4.0, -8.0], [0.25, -1.0, 2.0]])
    return a, b


class TestElementwise:
    """Test elementwise operations and their in-place forms."""

    @pytest.mark.parametrize("pure,inplace,reference", PURE_AND_INPLACE)
    def test_pure_matches_numpy(self, nonzero_pair, pure, inplace, reference):
        a, b = nonzero_pair
        before = a.copy()
        result = getattr(a, pure)(b)
        np.testing.assert_array_equal(
            result.get_array(), reference(a.get_array(), b.get_array())
        )
        assert result.get_array().dtype == a.dtype
        assert a == before

    @pytest.mark.parametrize("pure,inplace,reference", PURE_AND_INPLACE)
    def test_inplace_equals_pure(self, nonzero_pair, pure, inplace, reference):
        a, b = nonzero_pair
        expected = getattr(a, pure)(b)
        target = a.copy()
        returned = getattr(target, inplace)(b)
        assert returned is target
        assert target == expected

    @pytest.mark.parametrize("pure,inplace,reference", PURE_AND_INPLACE)
    def test_shape_mismatch(self, matrix_cls, pure, inplace, reference):
        a = matrix_cls.zeros(2, 3)
        b = matrix_cls.zeros(3, 2)
        with pytest.raises(DimensionMismatch, match="must agree"):
            getattr(a, pure)(b)
        with pytest.raises(DimensionMismatch):
            getattr(a, inplace)(b)

    def test_inplace_mismatch_leaves_receiver(self, matrix_cls):
        a = matrix_cls.constant(2, 3, 1.5)
        with pytest.raises(DimensionMismatch):
            a.plus_equals(matrix_cls.constant(3, 2, 1.0))
        assert a == matrix_cls.constant(2, 3, 1.5)

    def test_spec_example_mismatch(self, matrix_cls):
        with pytest.raises(DimensionMismatch):
            matrix_cls.zeros(2, 3).plus(matrix_cls.zeros(3, 2))

    def test_mixed_precision_rejected(self):
        with pytest.raises(TypeError, match="plus: expected ReducedPrecisionMatrix"):
            ReducedPrecisionMatrix.zeros(2, 2).plus(FullPrecisionMatrix.zeros(2, 2))

    def test_plus_minus_round_trip(self, random_pair):
        a, b = random_pair
        assert a.plus(b).minus(b) == a

    def test_copy_plus_equals_matches_plus(self, random_pair):
        a, b = random_pair
        assert a.copy().plus_equals(b) == a.plus(b)

    def test_self_operand(self, matrix_cls):
        a = matrix_cls.constant(2, 2, 3.0)
        a.plus_equals(a)
        assert a == matrix_cls.constant(2, 2, 6.0)


class TestDivisionSemantics:
    """No zero guard: IEEE infinities and NaN propagate, without warnings."""

    def test_divide_by_zero(self, matrix_cls):
        a = matrix_cls.from_grid([[1.0, -1.0, 0.0]])
        z = matrix_cls.zeros(1, 3)
        with np.errstate(all='raise'):
            result = a.array_right_divide(z)
        arr = result.get_array()
        assert arr[0, 0] == np.inf
        assert arr[0, 1] == -np.inf
        assert np.isnan(arr[0, 2])

    def test_left_divide_by_zero(self, matrix_cls):
        a = matrix_cls.zeros(1, 1)
        b = matrix_cls.constant(1, 1, 2.0)
        assert a.array_left_divide(b).get(0, 0) == np.inf


class TestUnaryAndScalar:
    """Test negation and scalar scaling."""

    def test_uminus(self, matrix_cls, small_grid):
        m = matrix_cls.from_grid(small_grid)
        np.testing.assert_array_equal(m.uminus().get_array(), -np.asarray(small_grid))
        assert m.get(0, 0) == 1.0

    def test_times_scalar(self, matrix_cls, small_grid):
        m = matrix_cls.from_grid(small_grid)
        np.testing.assert_array_equal(m.times(2.0).get_array(), np.asarray(small_grid) * 2)
        assert m.get(0, 0) == 1.0

    def test_times_equals_scalar(self, matrix_cls, small_grid):
        m = matrix_cls.from_grid(small_grid)
        assert m.times_equals(-0.5) is m
        np.testing.assert_array_equal(m.get_array(), np.asarray(small_grid) * -0.5)

    def test_scalar_cast_to_element_type(self):
        m = ReducedPrecisionMatrix.constant(1, 1, 3.0)
        result = m.times(0.1).get(0, 0)
        assert result == np.float32(3.0) * np.float32(0.1)

    def test_non_numeric_scalar_rejected(self, matrix_cls):
        with pytest.raises(TypeError, match="expected a real scalar"):
            matrix_cls.zeros(1, 1).times("2")
        with pytest.raises(TypeError):
            matrix_cls.zeros(1, 1).times_equals(1j)


class TestOperators:
    """Test the Python operator overloads."""

    def test_add_sub_neg(self, random_pair):
        a, b = random_pair
        assert a + b == a.plus(b)
        assert a - b == a.minus(b)
        assert -a == a.uminus()

    def test_scalar_mul(self, random_pair):
        a, _ = random_pair
        assert a * 3 == a.times(3.0)
        assert 3 * a == a.times(3.0)

    def test_inplace_operators_mutate(self, random_pair):
        a, b = random_pair
        expected = a.plus(b).times(2.0).minus(b)
        target = a.copy()
        alias = target
        target += b
        target *= 2
        target -= b
        assert target is alias
        assert target == expected

    def test_matrix_star_not_supported(self, random_pair):
        a, b = random_pair
        with pytest.raises(TypeError):
            a * b

    def test_mixed_precision_operators(self):
        with pytest.raises(TypeError):
            ReducedPrecisionMatrix.zeros(1, 1) + FullPrecisionMatrix.zeros(1, 1)
