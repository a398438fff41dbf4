"""
Core infrastructure for densematrix.

This module provides the shared pieces used by both matrix precisions.

Key components:
    exceptions: Exception hierarchy
    validation: Input validators
    precision: Storage dtypes and precision lookup
    tolerances: Tolerance tiers for approximate comparison
"""

from densematrix.core.exceptions import (
    DenseMatrixError,
    ValidationError,
    DimensionMismatch,
    IndexOutOfRange,
)
from densematrix.core.precision import (
    REDUCED_DTYPE,
    FULL_DTYPE,
    EPSILON_32,
    EPSILON_64,
    machine_epsilon,
    resolve_precision,
)
from densematrix.core.tolerances import ToleranceTier, select_tolerance

__all__ = [
    # Exceptions
    "DenseMatrixError",
    "ValidationError",
    "DimensionMismatch",
    "IndexOutOfRange",
    # Precision
    "REDUCED_DTYPE",
    "FULL_DTYPE",
    "EPSILON_32",
    "EPSILON_64",
    "machine_epsilon",
    "resolve_precision",
    # Tolerances
    "ToleranceTier",
    "select_tolerance",
]
