"""
PyTorch backend for element-wise evaluation.

Evaluates torch tensors on their own device (CPU, CUDA or MPS), or moves
numpy / list input to a selected device when backend='gpu' is requested.
Kernels are the same as on the CPU; only the math provider changes.

MPS has no float64: a float64 computation type falls back to float32 on
MPS with a warning.
"""

from __future__ import annotations

from typing import Any, TYPE_CHECKING
import warnings

import numpy as np

from pydistributions.core.capabilities import (
    CAPABILITY_ALLOCATABLE,
    CAPABILITY_GPU_NATIVE,
    CAPABILITY_INDEXED,
    CAPABILITY_SIZED,
    CAPABILITY_VECTORIZED,
)
from pydistributions.core.compute.device import DeviceInfo, device_from_torch
from pydistributions.core.compute.elementary import TorchMath
from pydistributions.core.compute.promotion import (
    DEFAULT_FLOAT,
    result_dtype,
    to_computation_type,
)
from pydistributions.core.exceptions import BackendUnavailableError, ValidationError
from pydistributions.core.validation import check_array, check_output_dtype
from pydistributions.engine.scalar import evaluate_points

if TYPE_CHECKING:
    from pydistributions.families._base import ProbabilityFunction


class TorchBackend:
    """
    Vectorized backend for torch tensors.

    Parameters
    ----------
    device : DeviceInfo, optional
        Device to compute on. If None, each tensor is evaluated on the
        device it already lives on.
    """

    def __init__(self, device: DeviceInfo | None = None):
        try:
            import torch
        except ImportError as e:
            raise BackendUnavailableError(
                "PyTorch is required for the torch backend. "
                "Install with: pip install pydistributions[gpu]",
                backend='torch',
            ) from e

        self._torch = torch
        self._math = TorchMath()
        self.device_info = device

    @property
    def name(self) -> str:
        return 'torch'

    def supports(self, capability: str) -> bool:
        if capability == CAPABILITY_GPU_NATIVE:
            return self.device_info is not None and self.device_info.is_gpu
        return capability in (
            CAPABILITY_INDEXED,
            CAPABILITY_SIZED,
            CAPABILITY_ALLOCATABLE,
            CAPABILITY_VECTORIZED,
        )

    def accepts(self, container: Any) -> bool:
        if isinstance(container, self._torch.Tensor):
            return True
        # Host data is only accepted when a target device was chosen
        return self.device_info is not None

    def shape(self, container: Any) -> tuple[int, ...]:
        if isinstance(container, self._torch.Tensor):
            return tuple(container.shape)
        return tuple(check_array(container, 'x').shape)

    def computation_dtype(self, tensor_dtype, params: tuple[Any, ...], names: tuple[str, ...]):
        """
        Computation type in torch terms.

        Integral and bool tensors count as float64, parameters follow the
        numpy promotion rule, and the widest floating type wins.
        """
        torch = self._torch
        if tensor_dtype.is_complex:
            raise ValidationError(f"x: non-numeric dtype {tensor_dtype}, expected real numeric data")
        point_dtype = tensor_dtype if tensor_dtype.is_floating_point else torch.float64

        param_dtype = _torch_float(result_dtype(*params, names=names).itemsize)
        return torch.promote_types(point_dtype, param_dtype)

    def evaluate(
        self,
        function: ProbabilityFunction,
        container: Any,
        params: tuple[Any, ...],
        *,
        log_form: bool,
        dtype: Any = None,
    ):
        """Evaluate over a tensor, returning a tensor on the compute device."""
        torch = self._torch
        out_dtype = self._output_dtype(dtype)

        if isinstance(container, torch.Tensor):
            tensor = container
        else:
            data = check_array(container, 'x')
            if data.dtype.kind in 'biu':
                data = data.astype(np.float64)
            tensor = torch.from_numpy(np.ascontiguousarray(data))

        device_info = self.device_info or device_from_torch(tensor.device)
        comp = self.computation_dtype(tensor.dtype, params, function.param_names)
        if comp == torch.float64 and not device_info.supports_float64:
            warnings.warn(
                f"{device_info.device_type.upper()} does not support float64, "
                f"computing {function.name} in float32"
            )
            comp = torch.float32

        points = tensor.to(device=torch.device(device_info.torch_name), dtype=comp)
        # Round parameters to the computation type before the sanity check
        converted = tuple(
            float(torch.as_tensor(float(to_computation_type(p, DEFAULT_FLOAT)), dtype=comp))
            for p in params
        )

        result = evaluate_points(
            function, points, converted, log_form=log_form, math=self._math,
        )
        if out_dtype is not None:
            result = result.to(out_dtype)
        return result

    def _output_dtype(self, dtype: Any):
        if dtype is None:
            return None
        if isinstance(dtype, self._torch.dtype):
            if not dtype.is_floating_point:
                raise ValidationError(f"dtype: output must be a floating type, got {dtype}")
            return dtype
        return _torch_float(check_output_dtype(dtype).itemsize)


def _torch_float(itemsize: int):
    """torch floating dtype with the given numpy itemsize."""
    import torch
    if itemsize <= 2:
        return torch.float16
    if itemsize == 4:
        return torch.float32
    return torch.float64

