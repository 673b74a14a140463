"""
Logistic distribution with location μ and scale s.

    log pdf = -|z| - 2·log(1 + exp(-|z|)) - log s,   z = (x - μ)/s
    log cdf = -log(1 + exp(-z))
"""

from __future__ import annotations

from pydistributions.families._base import ProbabilityFunction, finite, positive


class _LogisticFamily(ProbabilityFunction):
    param_names = ('location', 'scale')
    defaults = {'location': 0.0, 'scale': 1.0}

    def is_valid(self, location, scale) -> bool:
        return finite(location) and positive(scale)

    def rescale(self, m, x, location, scale):
        return (x - location) / scale


class LogisticPDF(_LogisticFamily):
    kind = 'pdf'

    @property
    def name(self) -> str:
        return 'logistic_pdf'

    def log_kernel(self, m, z, location, scale):
        # symmetric in z; |z| keeps exp() from overflowing
        a = m.abs(z)
        return -a - 2.0 * m.log1pexp(-a) - m.log(scale)


class LogisticCDF(_LogisticFamily):
    kind = 'cdf'

    @property
    def name(self) -> str:
        return 'logistic_cdf'

    def log_kernel(self, m, z, location, scale):
        return -m.log1pexp(-z)


logistic_pdf = LogisticPDF()
logistic_cdf = LogisticCDF()
