"""
Base class for closed-form probability functions.

A ProbabilityFunction is one function (density or distribution function)
of one distribution family. Subclasses supply only the mathematics:

    - is_valid(*params): parameter sanity check, pure and total
    - support(*params): where the formula applies
    - rescale(m, x, *params): map x to the kernel's argument
    - log_kernel(m, z, *params): the function's logarithm, written in
      log space, for inputs inside the support

Everything else (promotion, sentinel handling, boundary values, the
log/natural conversion and the container shapes) is the evaluation
engine's job and is identical for every family.

The `m` argument of rescale/log_kernel is an elementary-math provider
(see pydistributions.core.compute.elementary), so kernels never import
numpy or torch directly.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
import math
from typing import Any, Literal

import numpy as np

from pydistributions.core.compute.elementary import LOG_2
from pydistributions.core.validation import check_output_dtype
from pydistributions.engine.elementwise import evaluate_elements
from pydistributions.engine.scalar import evaluate


Kind = Literal['pdf', 'cdf']

LOG_PI = math.log(math.pi)
LOG_SQRT_2PI = 0.5 * math.log(2.0 * math.pi)


def finite(*values: Any) -> bool:
    """True if every value is a finite real number. Never raises."""
    try:
        return all(math.isfinite(v) for v in values)
    except (TypeError, ValueError):
        return False


def positive(*values: Any) -> bool:
    """True if every value is a finite real number > 0. Never raises."""
    return finite(*values) and all(v > 0 for v in values)


class ProbabilityFunction(ABC):
    """
    Abstract closed-form probability function.

    Class attributes:
        kind: 'pdf' or 'cdf'; decides the boundary values outside the
            support (pdf: 0 on both sides, cdf: 0 below and 1 above)
        param_names: Parameter names in positional order
        defaults: Default values for trailing parameters
        support_closed: Whether (lower, upper) support endpoints belong
            to the support
    """

    kind: Kind
    param_names: tuple[str, ...] = ()
    defaults: dict[str, float] = {}
    support_closed: tuple[bool, bool] = (True, True)

    @property
    @abstractmethod
    def name(self) -> str:
        ...

    @abstractmethod
    def is_valid(self, *params: Any) -> bool:
        """Whether the parameters lie in the domain the formula requires."""
        ...

    @abstractmethod
    def log_kernel(self, m, z, *params):
        """Log of the function at rescaled, in-support points z."""
        ...

    def support(self, *params: Any) -> tuple[float, float]:
        """(lower, upper) bounds of the support. Default: the real line."""
        return (-np.inf, np.inf)

    def rescale(self, m, x, *params):
        return x

    # ------------------------------------------------------------------
    # Boundary policy
    # ------------------------------------------------------------------

    @property
    def below_value(self) -> float:
        """Natural-space value below the support."""
        return 0.0

    @property
    def above_value(self) -> float:
        """Natural-space value above the support."""
        return 1.0 if self.kind == 'cdf' else 0.0

    def outside_support(self, x, *params) -> tuple[Any, Any]:
        """
        Masks of points below and above the support.

        Infinite points count as outside even for unbounded supports, so
        the kernel only ever sees finite (or NaN) input. NaN is neither
        below nor above: it reaches the kernel and propagates.
        """
        lower, upper = self.support(*params)
        lower, upper = float(lower), float(upper)
        closed_low, closed_high = self.support_closed
        below = (x < lower) if closed_low else (x <= lower)
        above = (x > upper) if closed_high else (x >= upper)
        return below | (x == -np.inf), above | (x == np.inf)

    # ------------------------------------------------------------------
    # Argument binding
    # ------------------------------------------------------------------

    def bind(self, args: tuple[Any, ...], kwargs: dict[str, Any]) -> tuple[Any, ...]:
        """
        Resolve positional/keyword parameters against param_names.

        Raises:
            TypeError: Unknown, duplicated or missing parameters
        """
        if len(args) > len(self.param_names):
            raise TypeError(
                f"{self.name}() takes {len(self.param_names)} parameters "
                f"({', '.join(self.param_names)}), got {len(args)}"
            )
        kwargs = dict(kwargs)
        for name in self.param_names[:len(args)]:
            if name in kwargs:
                raise TypeError(f"{self.name}() got multiple values for parameter {name!r}")

        values = list(args)
        for name in self.param_names[len(args):]:
            if name in kwargs:
                values.append(kwargs.pop(name))
            elif name in self.defaults:
                values.append(self.defaults[name])
            else:
                raise TypeError(f"{self.name}() missing required parameter {name!r}")

        if kwargs:
            raise TypeError(
                f"{self.name}() got unexpected parameter(s): {', '.join(sorted(kwargs))}"
            )
        return tuple(values)

    # ------------------------------------------------------------------
    # Public entry points
    # ------------------------------------------------------------------

    def scalar(self, x, *args, log_form: bool = False, **kwargs) -> np.floating:
        """
        Evaluate at a single point.

        Returns:
            numpy scalar of the computation type: NaN for invalid
            parameters, the boundary value outside the support
        """
        return evaluate(self, x, *self.bind(args, kwargs), log_form=log_form)

    def sequence(self, xs, *args, log_form: bool = False, dtype=None,
                 backend: str = 'auto', **kwargs):
        """Evaluate every element of a 1-D container."""
        return evaluate_elements(
            self, xs, self.bind(args, kwargs),
            log_form=log_form, dtype=dtype, ndim=1, backend=backend,
        )

    def grid(self, X, *args, log_form: bool = False, dtype=None,
             backend: str = 'auto', **kwargs):
        """Evaluate every element of a 2-D container."""
        return evaluate_elements(
            self, X, self.bind(args, kwargs),
            log_form=log_form, dtype=dtype, ndim=2, backend=backend,
        )

    def __call__(self, x, *args, log_form: bool = False, dtype=None,
                 backend: str = 'auto', **kwargs):
        """
        Evaluate at a scalar, a sequence or a grid, chosen by the shape of x.
        """
        if _is_scalar(x):
            if dtype is not None:
                value = self.scalar(x, *args, log_form=log_form, **kwargs)
                return check_output_dtype(dtype).type(value)
            return self.scalar(x, *args, log_form=log_form, **kwargs)
        return evaluate_elements(
            self, x, self.bind(args, kwargs),
            log_form=log_form, dtype=dtype, ndim=None, backend=backend,
        )

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({', '.join(self.param_names)})"


def _is_scalar(x: Any) -> bool:
    if isinstance(x, np.ndarray):
        return x.ndim == 0
    return not hasattr(x, '__len__') and not hasattr(x, 'shape')
