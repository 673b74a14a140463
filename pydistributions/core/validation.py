"""
Argument validation utilities for pydistributions.

These validators reject type-level misuse before any computation starts.
They never look at parameter VALUES: out-of-domain parameters are the
distribution's business and surface as NaN in the result.

Design principles:
    - Each function validates ONE thing
    - Parameter names included in all error messages
    - No silent coercion beyond np.asarray on array-likes
"""

from __future__ import annotations

from typing import Any

import numpy as np
from numpy.typing import NDArray

from pydistributions.core.capabilities import (
    CAPABILITY_ALLOCATABLE,
    CAPABILITY_INDEXED,
    CAPABILITY_SIZED,
    REQUIRED_CONTAINER_CAPABILITIES,
)
from pydistributions.core.compute.promotion import dtype_of, float_dtype
from pydistributions.core.exceptions import DimensionError, ValidationError
from pydistributions.core.protocols import AllocatableContainer


def check_scalar(value: Any, name: str) -> Any:
    """
    Verify value is a single real number.

    Python numbers, numpy scalars and 0-d numpy arrays are accepted.

    Args:
        value: Value to check
        name: Parameter name for error messages

    Returns:
        The value, unchanged

    Raises:
        ValidationError: If value is non-numeric or has more than one element
    """
    if isinstance(value, np.ndarray) and value.ndim != 0:
        raise ValidationError(
            f"{name}: expected a scalar, got array with shape {value.shape}"
        )
    dtype_of(value, name)
    return value


def check_log_form(log_form: Any) -> bool:
    """
    Verify the log-form flag is a boolean.

    Raises:
        ValidationError: If log_form is not bool or numpy bool
    """
    if isinstance(log_form, (bool, np.bool_)):
        return bool(log_form)
    raise ValidationError(
        f"log_form: expected bool, got {type(log_form).__name__}"
    )


def check_output_dtype(dtype: Any) -> np.dtype | None:
    """
    Validate a requested output element type.

    Args:
        dtype: Anything np.dtype() accepts, or None

    Returns:
        The numpy dtype, or None if no output type was requested

    Raises:
        ValidationError: If dtype is not a floating type
    """
    if dtype is None:
        return None
    try:
        resolved = np.dtype(dtype)
    except TypeError as e:
        raise ValidationError(f"dtype: not a valid dtype: {dtype!r}") from e
    if resolved.kind != 'f':
        raise ValidationError(
            f"dtype: output must be a floating type, got {resolved}"
        )
    return resolved


def check_array(array: Any, name: str) -> NDArray[Any]:
    """
    Validate and convert input to numpy array.

    Accepts numpy arrays and pandas objects (via .values). Rejects inputs
    with object dtype (mixed types) or non-real dtypes.

    Args:
        array: Input to validate
        name: Parameter name for error messages

    Returns:
        numpy.ndarray with a real numeric dtype (integers are NOT converted
        here; promotion decides the computation type)

    Raises:
        ValidationError: If input cannot be converted to a numeric array
    """
    if hasattr(array, 'values') and not isinstance(array, np.ndarray):
        array = array.values
    try:
        result = np.asarray(array)
    except (ValueError, TypeError) as e:
        raise ValidationError(f"{name}: cannot convert to array: {e}") from e

    if result.dtype == object:
        raise ValidationError(
            f"{name}: converted to object dtype, indicating mixed types or non-numeric data"
        )

    float_dtype(result.dtype, name)
    return result


def check_ndim(shape: tuple[int, ...], ndim: int, name: str) -> None:
    """
    Verify a shape has exactly the specified number of dimensions.

    Args:
        shape: Shape of the container
        ndim: Required number of dimensions
        name: Parameter name for error messages

    Raises:
        DimensionError: If the shape has the wrong number of dimensions
    """
    if len(shape) != ndim:
        raise DimensionError(
            f"{name}: expected {ndim}D input, got {len(shape)}D with shape {shape}",
            expected_ndim=ndim,
            actual_shape=shape,
        )


def container_capabilities(container: Any) -> frozenset[str]:
    """
    Capabilities a container offers, judged from its type.

    indexed: defines __getitem__
    sized: exposes .shape or __len__
    allocatable: an output of the same kind can be created up front
        (builtin list/tuple, numpy arrays, AllocatableContainer classes)
    """
    if isinstance(container, (str, bytes)):
        return frozenset()

    caps = set()
    cls = type(container)
    if hasattr(cls, '__getitem__'):
        caps.add(CAPABILITY_INDEXED)
    if hasattr(container, 'shape') or hasattr(cls, '__len__'):
        caps.add(CAPABILITY_SIZED)
    if isinstance(container, (list, tuple, np.ndarray)) or isinstance(
        container, AllocatableContainer
    ):
        caps.add(CAPABILITY_ALLOCATABLE)
    return frozenset(caps)


def check_capabilities(container: Any, name: str) -> frozenset[str]:
    """
    Verify a container offers the minimum capability set.

    Returns:
        The container's capabilities

    Raises:
        ValidationError: If indexed access or size is missing. The
            exception's `missing` attribute lists what is absent.
    """
    caps = container_capabilities(container)
    missing = REQUIRED_CONTAINER_CAPABILITIES - caps
    if missing:
        raise ValidationError(
            f"{name}: {type(container).__name__} lacks required container "
            f"capabilities: {sorted(missing)}",
            missing=frozenset(missing),
        )
    return caps
