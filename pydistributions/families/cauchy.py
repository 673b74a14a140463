"""
Cauchy distribution with location x₀ and scale γ.

    log pdf = -log π - log γ - log(1 + z²),   z = (x - x₀)/γ
    cdf     = 1/2 + atan(z)/π = atan2(1, -z)/π

The atan2 form keeps full relative precision in the lower tail, where
1/2 + atan(z)/π cancels.
"""

from __future__ import annotations

from pydistributions.families._base import LOG_PI, ProbabilityFunction, finite, positive


class _CauchyFamily(ProbabilityFunction):
    param_names = ('location', 'scale')
    defaults = {'location': 0.0, 'scale': 1.0}

    def is_valid(self, location, scale) -> bool:
        return finite(location) and positive(scale)

    def rescale(self, m, x, location, scale):
        return (x - location) / scale


class CauchyPDF(_CauchyFamily):
    kind = 'pdf'

    @property
    def name(self) -> str:
        return 'cauchy_pdf'

    def log_kernel(self, m, z, location, scale):
        return -LOG_PI - m.log(scale) - m.log1p(z * z)


class CauchyCDF(_CauchyFamily):
    kind = 'cdf'

    @property
    def name(self) -> str:
        return 'cauchy_cdf'

    def log_kernel(self, m, z, location, scale):
        return m.log(m.atan2(1.0, -z)) - LOG_PI


cauchy_pdf = CauchyPDF()
cauchy_cdf = CauchyCDF()
