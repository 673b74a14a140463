"""
pydistributions: closed-form probability functions for Python.

Densities and distribution functions of standard continuous distributions,
evaluated uniformly over scalars, sequences and grids, in natural or log
form, on numpy arrays, Python sequences or torch tensors.

Usage:
    from pydistributions import normal_cdf, weibull_pdf

    normal_cdf.scalar(2.0, mean=1.0, sd=2.0)
    weibull_pdf.sequence(x, shape=2.0, scale=3.0, log_form=True)
    normal_cdf.grid(X, 0.0, 1.0, dtype=np.float32)
"""

__version__ = "0.1.0"

from pydistributions.core.exceptions import (
    PyDistributionsError,
    ValidationError,
    DimensionError,
    BackendUnavailableError,
)
from pydistributions.families import (
    ProbabilityFunction,
    available_functions,
    resolve_function,
    normal_pdf,
    normal_cdf,
    lognormal_pdf,
    lognormal_cdf,
    exponential_pdf,
    exponential_cdf,
    weibull_pdf,
    weibull_cdf,
    cauchy_pdf,
    cauchy_cdf,
    logistic_pdf,
    logistic_cdf,
    laplace_pdf,
    laplace_cdf,
    uniform_pdf,
    uniform_cdf,
)

__all__ = [
    "__version__",
    "PyDistributionsError",
    "ValidationError",
    "DimensionError",
    "BackendUnavailableError",
    "ProbabilityFunction",
    "available_functions",
    "resolve_function",
    "normal_pdf",
    "normal_cdf",
    "lognormal_pdf",
    "lognormal_cdf",
    "exponential_pdf",
    "exponential_cdf",
    "weibull_pdf",
    "weibull_cdf",
    "cauchy_pdf",
    "cauchy_cdf",
    "logistic_pdf",
    "logistic_cdf",
    "laplace_pdf",
    "laplace_cdf",
    "uniform_pdf",
    "uniform_cdf",
]
