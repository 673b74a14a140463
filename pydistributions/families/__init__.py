"""
Distribution families.

Each module defines the density and distribution function of one family
as ProbabilityFunction instances. The registry below maps names to those
instances; the names double as the public API of the package.
"""

from pydistributions.families._base import ProbabilityFunction
from pydistributions.families.cauchy import cauchy_cdf, cauchy_pdf
from pydistributions.families.exponential import exponential_cdf, exponential_pdf
from pydistributions.families.laplace import laplace_cdf, laplace_pdf
from pydistributions.families.logistic import logistic_cdf, logistic_pdf
from pydistributions.families.lognormal import lognormal_cdf, lognormal_pdf
from pydistributions.families.normal import normal_cdf, normal_pdf
from pydistributions.families.uniform import uniform_cdf, uniform_pdf
from pydistributions.families.weibull import weibull_cdf, weibull_pdf


_FUNCTIONS: dict[str, ProbabilityFunction] = {
    f.name: f
    for f in (
        normal_pdf, normal_cdf,
        lognormal_pdf, lognormal_cdf,
        exponential_pdf, exponential_cdf,
        weibull_pdf, weibull_cdf,
        cauchy_pdf, cauchy_cdf,
        logistic_pdf, logistic_cdf,
        laplace_pdf, laplace_cdf,
        uniform_pdf, uniform_cdf,
    )
}


def available_functions() -> tuple[str, ...]:
    """Names of all registered probability functions, sorted."""
    return tuple(sorted(_FUNCTIONS))


def resolve_function(function: str | ProbabilityFunction) -> ProbabilityFunction:
    """Resolve a function argument to a ProbabilityFunction instance.

    Args:
        function: Either a registered name ('normal_cdf', 'weibull_pdf', ...)
                  or a ProbabilityFunction instance (passed through).

    Returns:
        ProbabilityFunction instance.

    Raises:
        ValueError: If string name is not recognized.
        TypeError: If argument is neither string nor ProbabilityFunction.
    """
    if isinstance(function, ProbabilityFunction):
        return function
    if isinstance(function, str):
        found = _FUNCTIONS.get(function.lower())
        if found is None:
            valid = ', '.join(available_functions())
            raise ValueError(
                f"Unknown function: {function!r}. Valid functions: {valid}"
            )
        return found
    raise TypeError(
        f"function must be str or ProbabilityFunction, got {type(function).__name__}"
    )


__all__ = [
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
