"""
CPU backends for element-wise evaluation.

CPUNumpyBackend: whole-array evaluation of numpy arrays (and pandas
    objects, via .values). Reference backend.
CPUGenericBackend: any container with indexed access and a known size:
    builtin lists and tuples (nested for grids), array.array, and classes
    implementing the AllocatableContainer protocol. Elements go through
    the scalar evaluator one at a time.
"""

from __future__ import annotations

from typing import Any, TYPE_CHECKING

import numpy as np
from numpy.typing import NDArray

from pydistributions.core.capabilities import (
    CAPABILITY_ALLOCATABLE,
    CAPABILITY_INDEXED,
    CAPABILITY_SIZED,
    CAPABILITY_VECTORIZED,
)
from pydistributions.core.compute.promotion import (
    promote_dtypes,
    result_dtype,
    sequence_dtype,
    to_computation_type,
)
from pydistributions.core.exceptions import DimensionError
from pydistributions.core.protocols import AllocatableContainer
from pydistributions.core.validation import (
    check_array,
    check_capabilities,
    check_output_dtype,
)
from pydistributions.engine.scalar import evaluate, evaluate_points

if TYPE_CHECKING:
    from pydistributions.families._base import ProbabilityFunction


def _is_array_like(container: Any) -> bool:
    if isinstance(container, np.ndarray):
        return True
    # pandas Series / DataFrame
    return hasattr(container, 'values') and (
        hasattr(container, 'dtype') or hasattr(container, 'dtypes')
    )


class CPUNumpyBackend:
    """Vectorized CPU backend for numpy arrays."""

    _CAPABILITIES = frozenset({
        CAPABILITY_INDEXED,
        CAPABILITY_SIZED,
        CAPABILITY_ALLOCATABLE,
        CAPABILITY_VECTORIZED,
    })

    @property
    def name(self) -> str:
        return 'cpu_numpy'

    def supports(self, capability: str) -> bool:
        return capability in self._CAPABILITIES

    def accepts(self, container: Any) -> bool:
        return _is_array_like(container)

    def shape(self, container: Any) -> tuple[int, ...]:
        return tuple(check_array(container, 'x').shape)

    def evaluate(
        self,
        function: ProbabilityFunction,
        container: Any,
        params: tuple[Any, ...],
        *,
        log_form: bool,
        dtype: Any = None,
    ) -> NDArray[np.floating[Any]]:
        """
        Evaluate over a numpy array.

        The computation type comes from the array dtype and the parameter
        types; dtype=, if given, is applied to the finished result only.
        """
        out_dtype = check_output_dtype(dtype)
        data = check_array(container, 'x')
        names = ('x',) + function.param_names

        comp = result_dtype(data, *params, names=names)
        points = data.astype(comp, copy=False)
        converted = tuple(to_computation_type(p, comp) for p in params)

        result = evaluate_points(function, points, converted, log_form=log_form)
        if out_dtype is not None:
            result = result.astype(out_dtype)
        return result


class CPUGenericBackend:
    """
    Element-by-element backend for arbitrary indexed containers.

    Output container:
        - AllocatableContainer input: type(input).allocate(shape, dtype)
        - tuple input: tuple (nested tuples for grids)
        - anything else: list (nested lists for grids)
    """

    _CAPABILITIES = frozenset({
        CAPABILITY_INDEXED,
        CAPABILITY_SIZED,
        CAPABILITY_ALLOCATABLE,
    })

    @property
    def name(self) -> str:
        return 'cpu_generic'

    def supports(self, capability: str) -> bool:
        return capability in self._CAPABILITIES

    def accepts(self, container: Any) -> bool:
        return not isinstance(container, (str, bytes))

    def shape(self, container: Any) -> tuple[int, ...]:
        """
        Shape of the container.

        Raises:
            ValidationError: If the container lacks indexed access or size
            DimensionError: If a nested sequence is ragged
        """
        check_capabilities(container, 'x')
        if isinstance(container, AllocatableContainer):
            return tuple(container.shape)

        n = len(container)
        if n == 0 or not _is_row(container[0]):
            return (n,)

        n_cols = len(container[0])
        for i in range(n):
            row = container[i]
            if not _is_row(row) or len(row) != n_cols:
                found = len(row) if _is_row(row) else 'scalar'
                raise DimensionError(
                    f"x: ragged nested sequence, row 0 has {n_cols} elements "
                    f"but row {i} has {found}",
                    expected_ndim=2,
                )
        return (n, n_cols)

    def evaluate(
        self,
        function: ProbabilityFunction,
        container: Any,
        params: tuple[Any, ...],
        *,
        log_form: bool,
        dtype: Any = None,
    ) -> Any:
        out_dtype = check_output_dtype(dtype)
        shape = self.shape(container)
        indices = list(np.ndindex(*shape))
        elements = [_get(container, idx) for idx in indices]

        names = function.param_names
        comp = promote_dtypes([
            sequence_dtype(elements, 'x'),
            result_dtype(*params, names=names),
        ])
        converted = tuple(to_computation_type(p, comp) for p in params)
        element_type = (out_dtype or comp).type

        if isinstance(container, AllocatableContainer):
            out = type(container).allocate(shape, out_dtype or comp)
            for idx, element in zip(indices, elements):
                value = evaluate(function, to_computation_type(element, comp), *converted, log_form=log_form)
                out[idx if len(idx) > 1 else idx[0]] = element_type(value)
            return out

        out = _allocate_nested(shape)
        for idx, element in zip(indices, elements):
            value = evaluate(function, to_computation_type(element, comp), *converted, log_form=log_form)
            _set(out, idx, element_type(value))

        if isinstance(container, tuple):
            return tuple(tuple(row) for row in out) if len(shape) == 2 else tuple(out)
        return out


def _is_row(element: Any) -> bool:
    if isinstance(element, (str, bytes)):
        return False
    if isinstance(element, np.ndarray):
        return element.ndim == 1
    return hasattr(element, '__len__') and hasattr(type(element), '__getitem__')


def _get(container: Any, idx: tuple[int, ...]) -> Any:
    if isinstance(container, AllocatableContainer):
        return container[idx if len(idx) > 1 else idx[0]]
    value = container
    for i in idx:
        value = value[i]
    return value


def _allocate_nested(shape: tuple[int, ...]) -> list:
    if len(shape) == 1:
        return [None] * shape[0]
    return [[None] * shape[1] for _ in range(shape[0])]


def _set(out: list, idx: tuple[int, ...], value: Any) -> None:
    if len(idx) == 1:
        out[idx[0]] = value
    else:
        out[idx[0]][idx[1]] = value
