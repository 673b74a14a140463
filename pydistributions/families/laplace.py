"""
Laplace (double exponential) distribution with location μ and scale b.

    log pdf = -log 2b - |z|,   z = (x - μ)/b
    log cdf = z - log 2                 for z < 0
            = log(1 - exp(-z)/2)        for z >= 0
"""

from __future__ import annotations

from pydistributions.families._base import LOG_2, ProbabilityFunction, finite, positive


class _LaplaceFamily(ProbabilityFunction):
    param_names = ('location', 'scale')
    defaults = {'location': 0.0, 'scale': 1.0}

    def is_valid(self, location, scale) -> bool:
        return finite(location) and positive(scale)

    def rescale(self, m, x, location, scale):
        return (x - location) / scale


class LaplacePDF(_LaplaceFamily):
    kind = 'pdf'

    @property
    def name(self) -> str:
        return 'laplace_pdf'

    def log_kernel(self, m, z, location, scale):
        return -LOG_2 - m.log(scale) - m.abs(z)


class LaplaceCDF(_LaplaceFamily):
    kind = 'cdf'

    @property
    def name(self) -> str:
        return 'laplace_cdf'

    def log_kernel(self, m, z, location, scale):
        # exp(-|z|) keeps the unused branch finite
        upper = m.log1p(-0.5 * m.exp(-m.abs(z)))
        return m.where(z < 0, z - LOG_2, upper)


laplace_pdf = LaplacePDF()
laplace_cdf = LaplaceCDF()
