"""
Scalar evaluation of probability functions.

evaluate() is the single-point contract. It runs, in order:

    1. promotion of x and parameters to one computation type
    2. the family's parameter sanity check (failure -> NaN)
    3. the boundary policy for x outside the support
    4. the log-space kernel on the rescaled input
    5. exp() on the way out unless log_form is requested

evaluate_points() is the same algorithm over an array of points sharing
one parameter set. Container backends call it directly, so scalar and
container evaluation cannot drift apart.
"""

from __future__ import annotations

from typing import Any, TYPE_CHECKING

import numpy as np

from pydistributions.core.compute.elementary import NUMPY_MATH
from pydistributions.core.compute.promotion import result_dtype, to_computation_type
from pydistributions.core.validation import check_log_form, check_scalar

if TYPE_CHECKING:
    from pydistributions.families._base import ProbabilityFunction


def boundary_value(natural: float, log_form: bool) -> float:
    """
    Boundary value in the requested form.

    log(0) is returned as exactly -inf, never as a large negative number.
    """
    if not log_form:
        return natural
    if natural == 0.0:
        return -np.inf
    return float(np.log(natural))


def evaluate_points(
    function: ProbabilityFunction,
    x,
    params: tuple[Any, ...],
    *,
    log_form: bool,
    math=NUMPY_MATH,
):
    """
    Evaluate a probability function at every point of an array.

    Args:
        function: The distribution function
        x: numpy array or torch tensor, already in the computation type
        params: Parameters as numpy scalars of the computation type
        log_form: Return log values
        math: Elementary-math provider matching the type of x

    Returns:
        Array of the same shape and dtype as x
    """
    out = math.full_like(x, np.nan)
    if not function.is_valid(*params):
        return out

    below, above = function.outside_support(x, *params)
    out[below] = boundary_value(function.below_value, log_form)
    out[above] = boundary_value(function.above_value, log_form)

    inside = ~(below | above)
    kernel_params = tuple(math.asparam(p, x) for p in params)
    with math.errstate():
        z = function.rescale(math, x[inside], *kernel_params)
        log_value = function.log_kernel(math, z, *kernel_params)
        values = log_value if log_form else math.exp(log_value)
    out[inside] = math.astype(values, out.dtype)
    return out


def evaluate(
    function: ProbabilityFunction,
    x: Any,
    *params: Any,
    log_form: bool = False,
) -> np.floating:
    """
    Evaluate a probability function at a single point.

    Args:
        function: The distribution function
        x: Evaluation point (Python number, numpy scalar or 0-d array)
        *params: Distribution parameters, in the family's order
        log_form: Return the natural log of the value

    Returns:
        numpy scalar of the computation type

    Raises:
        ValidationError: If x or a parameter is not a real number, or
            log_form is not a bool
    """
    log_form = check_log_form(log_form)
    names = ('x',) + function.param_names
    for value, name in zip((x,) + params, names):
        check_scalar(value, name)

    dtype = result_dtype(x, *params, names=names)
    points = np.asarray(to_computation_type(x, dtype), dtype=dtype)
    converted = tuple(to_computation_type(p, dtype) for p in params)
    return evaluate_points(function, points, converted, log_form=log_form)[()]
