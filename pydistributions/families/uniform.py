"""
Continuous uniform distribution on [lower, upper].

    log pdf = -log(upper - lower)
    log cdf = log(x - lower) - log(upper - lower)
"""

from __future__ import annotations

from pydistributions.families._base import ProbabilityFunction, finite


class _UniformFamily(ProbabilityFunction):
    param_names = ('lower', 'upper')
    defaults = {'lower': 0.0, 'upper': 1.0}

    def is_valid(self, lower, upper) -> bool:
        return finite(lower, upper) and bool(lower < upper)

    def support(self, lower, upper) -> tuple[float, float]:
        return (lower, upper)

    def rescale(self, m, x, lower, upper):
        return x - lower


class UniformPDF(_UniformFamily):
    kind = 'pdf'

    @property
    def name(self) -> str:
        return 'uniform_pdf'

    def log_kernel(self, m, z, lower, upper):
        return m.full_like(z, 0.0) - m.log(upper - lower)


class UniformCDF(_UniformFamily):
    kind = 'cdf'

    @property
    def name(self) -> str:
        return 'uniform_cdf'

    def log_kernel(self, m, z, lower, upper):
        return m.log(z) - m.log(upper - lower)


uniform_pdf = UniformPDF()
uniform_cdf = UniformCDF()
