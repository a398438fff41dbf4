"""
Tests for the densematrix exception hierarchy.

Validates:
    - Inheritance chain (all exceptions catchable via DenseMatrixError)
    - Diagnostic attributes on DimensionMismatch and IndexOutOfRange
    - str() carries the message
    - Default attribute values (None for optional attributes)
"""

import pytest

from densematrix.core.exceptions import (
    DenseMatrixError,
    DimensionMismatch,
    IndexOutOfRange,
    ValidationError,
)


# ═══════════════════════════════════════════════════════════════════════
# Inheritance hierarchy
# ═══════════════════════════════════════════════════════════════════════


class TestInheritance:
    """Every exception is catchable via DenseMatrixError."""

    def test_validation_error_is_densematrix_error(self):
        with pytest.raises(DenseMatrixError):
            raise ValidationError("bad input")

    def test_dimension_mismatch_is_validation_error(self):
        with pytest.raises(ValidationError):
            raise DimensionMismatch("wrong shape")

    def test_index_out_of_range_is_densematrix_error(self):
        with pytest.raises(DenseMatrixError):
            raise IndexOutOfRange("bad index")

    def test_index_out_of_range_is_index_error(self):
        """Plain IndexError handlers also catch it."""
        with pytest.raises(IndexError):
            raise IndexOutOfRange("bad index")

    def test_index_out_of_range_is_not_validation_error(self):
        err = IndexOutOfRange("bad index")
        assert not isinstance(err, ValidationError)


# ═══════════════════════════════════════════════════════════════════════
# DimensionMismatch
# ═══════════════════════════════════════════════════════════════════════


class TestDimensionMismatch:
    """DimensionMismatch carries expected and actual shapes."""

    def test_all_attributes(self):
        err = DimensionMismatch(
            "Matrix dimensions must agree.",
            expected=(2, 3),
            actual=(3, 2),
        )
        assert str(err) == "Matrix dimensions must agree."
        assert err.expected == (2, 3)
        assert err.actual == (3, 2)

    def test_defaults_are_none(self):
        err = DimensionMismatch("mismatch")
        assert err.expected is None
        assert err.actual is None


# ═══════════════════════════════════════════════════════════════════════
# IndexOutOfRange
# ═══════════════════════════════════════════════════════════════════════


class TestIndexOutOfRange:
    """IndexOutOfRange carries the index, the axis and a shape."""

    def test_all_attributes(self):
        err = IndexOutOfRange("row index 5", index=5, axis='row', shape=(2, 1))
        assert err.index == 5
        assert err.axis == 'row'
        assert err.shape == (2, 1)

    def test_defaults_are_none(self):
        err = IndexOutOfRange("bad")
        assert err.index is None
        assert err.axis is None
        assert err.shape is None

    def test_catchable_with_attributes(self):
        with pytest.raises(IndexOutOfRange) as exc_info:
            raise IndexOutOfRange("bad", index=-1, axis='col', shape=(3, 3))
        assert exc_info.value.index == -1
        assert exc_info.value.axis == 'col'
