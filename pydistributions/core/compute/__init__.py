"""
Shared compute infrastructure for pydistributions.

IMPORTANT: This is NOT where container backends live. Those go in
engine/backends/. This module contains shared NUMERIC infrastructure.

Submodules:
    promotion: Computation-type selection from argument types
    elementary: Math providers (numpy/scipy, torch) used by kernels
    device: Hardware detection and device selection
    tolerances: Comparison tolerances per computation type
"""

from pydistributions.core.compute.device import (
    DeviceInfo,
    detect_gpu,
    get_cpu_info,
    select_device,
)
from pydistributions.core.compute.promotion import (
    DEFAULT_FLOAT,
    dtype_of,
    result_dtype,
)

__all__ = [
    # Device detection
    "DeviceInfo",
    "detect_gpu",
    "get_cpu_info",
    "select_device",
    # Promotion
    "DEFAULT_FLOAT",
    "dtype_of",
    "result_dtype",
]
