"""
Tolerance tiers for numerical comparison.

Defines the precision to expect from an evaluation given its computation
type. Used by the test suite and by anyone comparing results across
backends (numpy vs torch) or against reference implementations.
"""

from dataclasses import dataclass

import numpy as np


@dataclass(frozen=True)
class ToleranceTier:
    """Tolerance specification for numerical comparison."""
    rtol: float
    atol: float
    name: str
    description: str


FP64 = ToleranceTier(
    rtol=1e-12,
    atol=1e-300,
    name='fp64',
    description='Double precision, a few ulps of the reference',
)

# Double precision against an independent implementation (scipy.stats,
# torch kernels): different formulas and libm
FP64_REFERENCE = ToleranceTier(
    rtol=1e-10,
    atol=1e-300,
    name='fp64_reference',
    description='Double precision vs an independent implementation',
)

FP32 = ToleranceTier(
    rtol=1e-5,
    atol=1e-30,
    name='fp32',
    description='Single precision',
)

FP16 = ToleranceTier(
    rtol=5e-3,
    atol=1e-4,
    name='fp16',
    description='Half precision',
)


def select_tolerance(dtype, reference: bool = False) -> ToleranceTier:
    """Select the tolerance tier for a computation dtype."""
    itemsize = np.dtype(dtype).itemsize
    if itemsize >= 8:
        return FP64_REFERENCE if reference else FP64
    if itemsize == 4:
        return FP32
    return FP16
