"""
Hardware detection and device selection for the torch backend.

torch is imported lazily: detection works (and reports no GPU) when
PyTorch is not installed.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Literal
import platform

from pydistributions.core.exceptions import BackendUnavailableError


@dataclass(frozen=True)
class DeviceInfo:
    """
    Information about a compute device.

    Attributes:
        device_type: Type of device ('cpu', 'cuda', 'mps')
        device_index: Device index (None for CPU)
        name: Human-readable device name
    """
    device_type: Literal['cpu', 'cuda', 'mps']
    device_index: int | None
    name: str

    def __str__(self) -> str:
        if self.device_type == 'cpu':
            return f"CPU ({self.name})"
        return f"{self.device_type.upper()}:{self.device_index} ({self.name})"

    @property
    def is_gpu(self) -> bool:
        """True if this is a GPU device."""
        return self.device_type in ('cuda', 'mps')

    @property
    def supports_float64(self) -> bool:
        """MPS has no double precision."""
        return self.device_type != 'mps'

    @property
    def torch_name(self) -> str:
        """Device string understood by torch.device()."""
        if self.device_type == 'cuda':
            return f"cuda:{self.device_index or 0}"
        return self.device_type


def detect_gpu() -> DeviceInfo | None:
    """
    Detect available GPU, if any.

    Priority: CUDA > MPS (Apple Silicon)

    Returns:
        DeviceInfo for the best available GPU, or None
    """
    try:
        import torch
    except ImportError:
        return None

    if torch.cuda.is_available():
        idx = torch.cuda.current_device()
        return DeviceInfo(
            device_type='cuda',
            device_index=idx,
            name=torch.cuda.get_device_properties(idx).name,
        )

    if hasattr(torch.backends, 'mps') and torch.backends.mps.is_available():
        return DeviceInfo(device_type='mps', device_index=0, name='Apple Silicon GPU')

    return None


def get_cpu_info() -> DeviceInfo:
    """DeviceInfo for the host CPU."""
    processor = platform.processor() or platform.machine() or "Unknown CPU"
    return DeviceInfo(device_type='cpu', device_index=None, name=processor)


def device_from_torch(device) -> DeviceInfo:
    """DeviceInfo describing an existing torch.device (e.g. a tensor's)."""
    if device.type == 'cuda':
        return DeviceInfo('cuda', device.index or 0, f"cuda:{device.index or 0}")
    if device.type == 'mps':
        return DeviceInfo('mps', 0, 'Apple Silicon GPU')
    return get_cpu_info()


def select_device(prefer: Literal['cpu', 'gpu', 'auto'] = 'auto') -> DeviceInfo:
    """
    Select compute device based on preference and availability.

    Args:
        prefer: Device preference
            - 'cpu': Always use CPU
            - 'gpu': Require GPU (raises if unavailable)
            - 'auto': Use GPU if available, else CPU

    Raises:
        BackendUnavailableError: If 'gpu' requested but no GPU available
    """
    if prefer == 'cpu':
        return get_cpu_info()

    gpu = detect_gpu()

    if prefer == 'gpu':
        if gpu is None:
            raise BackendUnavailableError(
                "GPU requested but no GPU available. "
                "Ensure PyTorch is installed with CUDA/MPS support.",
                backend='gpu',
            )
        return gpu

    return gpu if gpu is not None else get_cpu_info()
