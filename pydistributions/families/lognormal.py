"""
Log-normal distribution, supported on (0, ∞).

log X ~ Normal(meanlog, sdlog). The kernel works on y = log x:

    log pdf = -z²/2 - log σ - log √(2π) - y,   z = (y - μ)/σ
    log cdf = log Φ(z)

x = 0 is outside the (open) support: pdf 0, cdf 0.
"""

from __future__ import annotations

import numpy as np

from pydistributions.families._base import (
    LOG_SQRT_2PI,
    ProbabilityFunction,
    finite,
    positive,
)


class _LogNormalFamily(ProbabilityFunction):
    param_names = ('meanlog', 'sdlog')
    defaults = {'meanlog': 0.0, 'sdlog': 1.0}
    support_closed = (False, True)

    def is_valid(self, meanlog, sdlog) -> bool:
        return finite(meanlog) and positive(sdlog)

    def support(self, meanlog, sdlog) -> tuple[float, float]:
        return (0.0, np.inf)

    def rescale(self, m, x, meanlog, sdlog):
        return m.log(x)


class LogNormalPDF(_LogNormalFamily):
    kind = 'pdf'

    @property
    def name(self) -> str:
        return 'lognormal_pdf'

    def log_kernel(self, m, y, meanlog, sdlog):
        z = (y - meanlog) / sdlog
        return -0.5 * z * z - m.log(sdlog) - LOG_SQRT_2PI - y


class LogNormalCDF(_LogNormalFamily):
    kind = 'cdf'

    @property
    def name(self) -> str:
        return 'lognormal_cdf'

    def log_kernel(self, m, y, meanlog, sdlog):
        return m.log_ndtr((y - meanlog) / sdlog)


lognormal_pdf = LogNormalPDF()
lognormal_cdf = LogNormalCDF()
