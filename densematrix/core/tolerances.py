"""
Tolerance tiers for approximate matrix comparison.

Structural equality is exact. These tiers give the defaults for
DenseMatrix.allclose(), one per storage precision:
- FULL (float64): near machine precision
- REDUCED (float32): relaxed for single-precision arithmetic
"""

from dataclasses import dataclass

import numpy as np

from densematrix.core.precision import REDUCED_DTYPE, resolve_precision


@dataclass(frozen=True)
class ToleranceTier:
    """Tolerance specification for numerical comparison."""
    rtol: float
    atol: float
    name: str
    description: str


FULL = ToleranceTier(
    rtol=1e-12,
    atol=1e-14,
    name='full',
    description='double precision',
)

REDUCED = ToleranceTier(
    rtol=1e-5,
    atol=1e-6,
    name='reduced',
    description='single precision',
)


def select_tolerance(dtype: str | np.dtype | type) -> ToleranceTier:
    """Select the tolerance tier for a storage precision."""
    resolved = resolve_precision(dtype)
    if resolved == REDUCED_DTYPE:
        return REDUCED
    return FULL
