"""
Exponential distribution with rate λ, supported on [0, ∞).

    log pdf = log λ - λx
    log cdf = log(1 - exp(-λx))
"""

from __future__ import annotations

import numpy as np

from pydistributions.families._base import ProbabilityFunction, positive


class _ExponentialFamily(ProbabilityFunction):
    param_names = ('rate',)
    defaults = {'rate': 1.0}

    def is_valid(self, rate) -> bool:
        return positive(rate)

    def support(self, rate) -> tuple[float, float]:
        return (0.0, np.inf)

    def rescale(self, m, x, rate):
        return rate * x


class ExponentialPDF(_ExponentialFamily):
    kind = 'pdf'

    @property
    def name(self) -> str:
        return 'exponential_pdf'

    def log_kernel(self, m, z, rate):
        return m.log(rate) - z


class ExponentialCDF(_ExponentialFamily):
    kind = 'cdf'

    @property
    def name(self) -> str:
        return 'exponential_cdf'

    def log_kernel(self, m, z, rate):
        return m.log1mexp(z)


exponential_pdf = ExponentialPDF()
exponential_cdf = ExponentialCDF()
