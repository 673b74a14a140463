"""
Normal (Gaussian) distribution.

    pdf(x; μ, σ) = 1/(σ√(2π)) · exp(-z²/2),   z = (x - μ)/σ
    cdf(x; μ, σ) = Φ(z)

The log CDF uses log_ndtr, which stays accurate far into the lower tail
where Φ(z) itself underflows to 0.
"""

from __future__ import annotations

from pydistributions.families._base import (
    LOG_SQRT_2PI,
    ProbabilityFunction,
    finite,
    positive,
)


class _NormalFamily(ProbabilityFunction):
    """Shared parameters and sanity check: finite mean, sd > 0."""

    param_names = ('mean', 'sd')
    defaults = {'mean': 0.0, 'sd': 1.0}

    def is_valid(self, mean, sd) -> bool:
        return finite(mean) and positive(sd)

    def rescale(self, m, x, mean, sd):
        return (x - mean) / sd


class NormalPDF(_NormalFamily):
    kind = 'pdf'

    @property
    def name(self) -> str:
        return 'normal_pdf'

    def log_kernel(self, m, z, mean, sd):
        return -0.5 * z * z - m.log(sd) - LOG_SQRT_2PI


class NormalCDF(_NormalFamily):
    kind = 'cdf'

    @property
    def name(self) -> str:
        return 'normal_cdf'

    def log_kernel(self, m, z, mean, sd):
        return m.log_ndtr(z)


normal_pdf = NormalPDF()
normal_cdf = NormalCDF()
