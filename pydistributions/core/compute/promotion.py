"""
Numeric promotion rules.

Every evaluation runs in one floating-point computation type derived from
the types of the evaluation point and the distribution parameters:

    - integral (and boolean) inputs count as the default float type, float64
    - Python floats, and any other numbers.Real, are float64
    - numpy floating scalars and arrays keep their own dtype
    - the computation type is the widest of these

The rule looks only at types, never at values, so the same argument types
always select the same computation type.
"""

from __future__ import annotations

from functools import reduce
import numbers
from typing import Any, Iterable

import numpy as np

from pydistributions.core.exceptions import ValidationError


# Promotion target for integral inputs
DEFAULT_FLOAT: np.dtype = np.dtype(np.float64)


def float_dtype(dtype: np.dtype | type, name: str = 'value') -> np.dtype:
    """
    Map a numpy dtype to the floating dtype it is computed in.

    Args:
        dtype: Storage dtype of an argument
        name: Argument name for error messages

    Returns:
        The dtype itself for floating types, DEFAULT_FLOAT for integers
        and booleans

    Raises:
        ValidationError: For complex, object, string and other
            non-real dtypes
    """
    dtype = np.dtype(dtype)
    if dtype.kind == 'f':
        return dtype
    if dtype.kind in 'biu':
        return DEFAULT_FLOAT
    raise ValidationError(
        f"{name}: non-numeric dtype {dtype}, expected real numeric data"
    )


def dtype_of(value: Any, name: str = 'value') -> np.dtype:
    """
    Floating dtype a single argument is computed in.

    Accepts Python numbers, numpy scalars and numpy arrays.

    Raises:
        ValidationError: If value is not a real number or numeric array
    """
    # np.generic before numbers.Real: np.float32 registers as a Real
    if isinstance(value, (np.ndarray, np.generic)):
        return float_dtype(value.dtype, name)
    if isinstance(value, bool):
        return DEFAULT_FLOAT
    if isinstance(value, numbers.Real):
        return DEFAULT_FLOAT
    raise ValidationError(
        f"{name}: expected a real number, got {type(value).__name__}"
    )


def promote_dtypes(dtypes: Iterable[np.dtype]) -> np.dtype:
    """
    Widest floating dtype among already-mapped dtypes.

    An empty iterable promotes to DEFAULT_FLOAT.
    """
    dtypes = list(dtypes)
    if not dtypes:
        return DEFAULT_FLOAT
    return reduce(np.promote_types, dtypes)


def result_dtype(*values: Any, names: tuple[str, ...] | None = None) -> np.dtype:
    """
    Computation type for a set of arguments.

    Args:
        *values: Evaluation point and parameters (scalars or arrays)
        names: Argument names for error messages, one per value

    Returns:
        Common floating dtype wide enough for every argument

    Examples:
        >>> result_dtype(1, 2)
        dtype('float64')
        >>> result_dtype(np.float32(1), np.float32(2))
        dtype('float32')
        >>> result_dtype(np.float32(1), 2.0)
        dtype('float64')
    """
    if names is None:
        names = tuple(f"argument {i}" for i in range(len(values)))
    dtypes = [dtype_of(v, n) for v, n in zip(values, names)]
    return promote_dtypes(dtypes)


def sequence_dtype(elements: Iterable[Any], name: str = 'x') -> np.dtype:
    """
    Computation type of a Python sequence, taken over all its elements.

    Raises:
        ValidationError: If any element is not a real number
    """
    dtypes = {dtype_of(e, f"{name}[{i}]") for i, e in enumerate(elements)}
    return promote_dtypes(dtypes)


def to_computation_type(value: Any, dtype: np.dtype) -> np.floating:
    """
    Convert one argument to the computation type.

    Python ints beyond the range of the type become an infinity of the
    same sign, the way a float overflow would.
    """
    try:
        return dtype.type(value)
    except OverflowError:
        return dtype.type(np.inf if value > 0 else -np.inf)
