"""
Weibull distribution with shape k and scale λ, supported on [0, ∞).

    pdf(x; k, λ) = (k/λ) · z^(k-1) · exp(-z^k),   z = x/λ
    cdf(x; k, λ) = 1 - exp(-z^k)

In log space the density is log k - log λ + (k-1)·log z - z^k. The
(k-1)·log z term is computed with xlogy so that k = 1 at x = 0 gives
log(1/λ) instead of 0·(-inf).
"""

from __future__ import annotations

import numpy as np

from pydistributions.families._base import ProbabilityFunction, positive


class _WeibullFamily(ProbabilityFunction):
    """Shared parameters and sanity check: shape > 0, scale > 0."""

    param_names = ('shape', 'scale')

    def is_valid(self, shape, scale) -> bool:
        return positive(shape, scale)

    def support(self, shape, scale) -> tuple[float, float]:
        return (0.0, np.inf)

    def rescale(self, m, x, shape, scale):
        return x / scale


class WeibullPDF(_WeibullFamily):
    kind = 'pdf'

    @property
    def name(self) -> str:
        return 'weibull_pdf'

    def log_kernel(self, m, z, shape, scale):
        return m.log(shape) - m.log(scale) + m.xlogy(shape - 1, z) - z ** shape


class WeibullCDF(_WeibullFamily):
    kind = 'cdf'

    @property
    def name(self) -> str:
        return 'weibull_cdf'

    def log_kernel(self, m, z, shape, scale):
        return m.log1mexp(z ** shape)


weibull_pdf = WeibullPDF()
weibull_cdf = WeibullCDF()
