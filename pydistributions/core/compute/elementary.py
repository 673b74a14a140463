"""
Elementary-math providers.

Formula kernels are written once against a small math namespace (log,
exp, log1p, expm1, log_ndtr, ...) and receive the provider to use as an
argument. The same kernel then runs on numpy scalars, numpy arrays and
PyTorch tensors.

Providers:
    NumpyMath: numpy ufuncs plus scipy.special for log_ndtr / xlogy
    TorchMath: torch and torch.special, on the tensor's own device
"""

from __future__ import annotations

from contextlib import nullcontext
import math
from typing import Any, ContextManager

import numpy as np
from numpy.typing import NDArray
from scipy import special


# Switch point between the two forms of log(1 - exp(-t))
LOG_2 = math.log(2.0)


class NumpyMath:
    """Elementary math on numpy scalars and arrays."""

    name = 'numpy'

    def errstate(self) -> ContextManager[Any]:
        """Silence floating-point warnings; outcomes are carried by the data."""
        return np.errstate(all='ignore')

    def asparam(self, value: np.generic, like: NDArray) -> np.generic:
        return value

    def astype(self, values: NDArray, dtype: np.dtype) -> NDArray:
        return np.asarray(values).astype(dtype, copy=False)

    def full_like(self, x: NDArray, value: float) -> NDArray:
        return np.full_like(x, value)

    def where(self, condition, a, b):
        return np.where(condition, a, b)

    def log(self, x):
        return np.log(x)

    def log1p(self, x):
        return np.log1p(x)

    def exp(self, x):
        return np.exp(x)

    def expm1(self, x):
        return np.expm1(x)

    def abs(self, x):
        return np.abs(x)

    def atan2(self, y, x):
        return np.arctan2(y, x)

    def log1pexp(self, x):
        """log(1 + exp(x)) without overflow."""
        return np.logaddexp(0.0, x)

    def log1mexp(self, t):
        """log(1 - exp(-t)) for t >= 0, accurate near 0 and in the upper tail."""
        return np.where(t <= LOG_2, np.log(-np.expm1(-t)), np.log1p(-np.exp(-t)))

    def xlogy(self, a, y):
        """a * log(y), defined as 0 where a == 0 (including y == 0)."""
        return special.xlogy(a, y)

    def log_ndtr(self, x):
        """Log of the standard normal CDF, accurate deep in the lower tail."""
        x = np.asarray(x)
        # scipy.special only ships float32/float64 loops
        if x.dtype.itemsize > 8:
            x = x.astype(np.float64)
        return special.log_ndtr(x)


class TorchMath:
    """
    Elementary math on PyTorch tensors.

    torch is imported at construction so that importing pydistributions
    does not require it.
    """

    name = 'torch'

    def __init__(self):
        import torch
        self._torch = torch

    def errstate(self) -> ContextManager[Any]:
        return nullcontext()

    def asparam(self, value: np.generic, like):
        return self._torch.as_tensor(float(value), dtype=like.dtype, device=like.device)

    def astype(self, values, dtype):
        return values.to(dtype)

    def full_like(self, x, value: float):
        return self._torch.full_like(x, value)

    def where(self, condition, a, b):
        return self._torch.where(condition, a, b)

    def log(self, x):
        return self._torch.log(x)

    def log1p(self, x):
        return self._torch.log1p(x)

    def exp(self, x):
        return self._torch.exp(x)

    def expm1(self, x):
        return self._torch.expm1(x)

    def abs(self, x):
        return self._torch.abs(x)

    def atan2(self, y, x):
        y = self._torch.as_tensor(y, dtype=x.dtype, device=x.device)
        return self._torch.atan2(y, x)

    def log1pexp(self, x):
        return self._torch.logaddexp(self._torch.zeros_like(x), x)

    def log1mexp(self, t):
        torch = self._torch
        return torch.where(t <= LOG_2, torch.log(-torch.expm1(-t)), torch.log1p(-torch.exp(-t)))

    def xlogy(self, a, y):
        return self._torch.special.xlogy(a, y)

    def log_ndtr(self, x):
        return self._torch.special.log_ndtr(x)


NUMPY_MATH = NumpyMath()
