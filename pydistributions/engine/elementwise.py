"""
Element-wise dispatch of probability functions over containers.

evaluate_elements() picks a container backend, checks the container's
shape, and lets the backend allocate one output of the same shape and fill
it. The formula itself lives only in the family's kernel; backends differ
in how they move elements, never in what they compute.

Backend selection (backend=):
    'auto': by container type; torch tensors stay on their device, numpy
            arrays and pandas objects are vectorized with numpy, anything
            else with indexed access and a size goes element by element
    'cpu':  like 'auto', but torch tensors are evaluated on the CPU
    'gpu':  the input is moved to the selected GPU; returns a tensor
"""

from __future__ import annotations

import sys
from typing import Any, Literal, TYPE_CHECKING

from pydistributions.core.capabilities import CAPABILITY_GPU_NATIVE
from pydistributions.core.compute.device import get_cpu_info, select_device
from pydistributions.core.exceptions import BackendUnavailableError, DimensionError, ValidationError
from pydistributions.core.protocols import ContainerBackend
from pydistributions.core.validation import check_log_form, check_ndim, check_scalar
from pydistributions.engine.backends.cpu import CPUGenericBackend, CPUNumpyBackend

if TYPE_CHECKING:
    from pydistributions.families._base import ProbabilityFunction


BackendChoice = Literal['auto', 'cpu', 'gpu']


def _is_torch_tensor(container: Any) -> bool:
    # A tensor can only exist if torch has already been imported
    torch = sys.modules.get('torch')
    return torch is not None and isinstance(container, torch.Tensor)


def get_backend(container: Any, backend: BackendChoice = 'auto') -> ContainerBackend:
    """
    Select the container backend for an input.

    Raises:
        ValidationError: Unknown backend name
        BackendUnavailableError: 'gpu' requested without torch or a GPU
    """
    if backend not in ('auto', 'cpu', 'gpu'):
        raise ValidationError(
            f"Unknown backend: {backend!r}. Must be 'auto', 'cpu', or 'gpu'."
        )

    if backend == 'gpu':
        from pydistributions.engine.backends.gpu import TorchBackend
        selected = TorchBackend(device=select_device('auto'))
        if not selected.supports(CAPABILITY_GPU_NATIVE):
            raise BackendUnavailableError(
                "GPU requested but no GPU available. "
                "Ensure PyTorch is installed with CUDA/MPS support.",
                backend='gpu',
            )
        return selected

    if _is_torch_tensor(container):
        from pydistributions.engine.backends.gpu import TorchBackend
        if backend == 'cpu':
            return TorchBackend(device=get_cpu_info())
        return TorchBackend()

    numpy_backend = CPUNumpyBackend()
    if numpy_backend.accepts(container):
        return numpy_backend
    return CPUGenericBackend()


def evaluate_elements(
    function: ProbabilityFunction,
    container: Any,
    params: tuple[Any, ...],
    *,
    log_form: bool = False,
    dtype: Any = None,
    ndim: int | None = None,
    backend: BackendChoice = 'auto',
) -> Any:
    """
    Evaluate a probability function at every element of a container.

    Args:
        function: The distribution function
        container: Sequence or grid of evaluation points
        params: Distribution parameters, shared by every element
        log_form: Return log values
        dtype: Output element type; defaults to the computation type
        ndim: Required number of dimensions (1 for sequences, 2 for
            grids), or None to accept 0, 1 or 2
        backend: 'auto', 'cpu' or 'gpu'

    Returns:
        Container of the input's shape. For invalid parameters every
        element is NaN.

    Raises:
        ValidationError: Non-numeric data or parameters, bad log_form or
            dtype, or a container without the required capabilities
        DimensionError: Container with the wrong number of dimensions
    """
    log_form = check_log_form(log_form)
    for value, name in zip(params, function.param_names):
        check_scalar(value, name)

    be = get_backend(container, backend)
    shape = be.shape(container)
    if ndim is not None:
        check_ndim(shape, ndim, 'x')
    elif len(shape) > 2:
        raise DimensionError(
            f"x: expected a scalar, 1D or 2D input, got {len(shape)}D with shape {shape}",
            actual_shape=shape,
        )

    return be.evaluate(function, container, params, log_form=log_form, dtype=dtype)
