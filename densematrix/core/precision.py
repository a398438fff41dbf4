"""
Element precision constants and utilities.

Provides the two storage dtypes, their machine epsilons, and lookup from
the names callers use for them.
"""

import numpy as np

from densematrix.core.exceptions import ValidationError


# Reduced precision: single (32-bit) floating point
REDUCED_DTYPE = np.dtype(np.float32)

# Full precision: double (64-bit) floating point
FULL_DTYPE = np.dtype(np.float64)

# Machine epsilon for float64
EPSILON_64: float = float(np.finfo(np.float64).eps)  # ~2.22e-16

# Machine epsilon for float32
EPSILON_32: float = float(np.finfo(np.float32).eps)  # ~1.19e-7

_PRECISION_NAMES: dict[str, np.dtype] = {
    'reduced': REDUCED_DTYPE,
    'single': REDUCED_DTYPE,
    'fp32': REDUCED_DTYPE,
    'float32': REDUCED_DTYPE,
    'full': FULL_DTYPE,
    'double': FULL_DTYPE,
    'fp64': FULL_DTYPE,
    'float64': FULL_DTYPE,
}


def machine_epsilon(dtype: np.dtype | type = np.float64) -> float:
    """
    Get machine epsilon for a given dtype.

    Args:
        dtype: NumPy dtype or type

    Returns:
        Machine epsilon for the dtype
    """
    return float(np.finfo(dtype).eps)


def resolve_precision(precision: str | np.dtype | type) -> np.dtype:
    """
    Map a precision name or dtype onto one of the two storage dtypes.

    Args:
        precision: 'reduced'/'fp32'/'float32'/'single',
            'full'/'fp64'/'float64'/'double', or a float32/float64 dtype

    Returns:
        REDUCED_DTYPE or FULL_DTYPE

    Raises:
        ValidationError: If the precision is not one of the two supported
    """
    if isinstance(precision, str):
        key = precision.lower()
        if key not in _PRECISION_NAMES:
            raise ValidationError(
                f"precision: unknown name '{precision}', "
                f"expected one of {sorted(_PRECISION_NAMES)}"
            )
        return _PRECISION_NAMES[key]

    try:
        dtype = np.dtype(precision)
    except TypeError as e:
        raise ValidationError(f"precision: not a dtype: {precision!r}") from e

    if dtype not in (REDUCED_DTYPE, FULL_DTYPE):
        raise ValidationError(
            f"precision: unsupported dtype {dtype}, expected float32 or float64"
        )
    return dtype
