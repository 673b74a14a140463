"""
Capability string constants for pydistributions containers and backends.

This module is the SINGLE SOURCE OF TRUTH for capability strings.
Import from here, never use raw strings.

Usage:
    from pydistributions.core.capabilities import (
        CAPABILITY_INDEXED,
        CAPABILITY_SIZED,
        CAPABILITY_ALLOCATABLE,
    )

    if backend.supports(CAPABILITY_VECTORIZED):
        ...
"""

# Elements can be read by integer (or (row, col)) index in constant time
CAPABILITY_INDEXED = 'indexed'

# Size/shape can be queried before iterating
CAPABILITY_SIZED = 'sized'

# An output container of the same kind can be allocated at a given shape
# and filled in place
CAPABILITY_ALLOCATABLE = 'allocatable'

# The backend evaluates whole containers at once instead of per element
CAPABILITY_VECTORIZED = 'vectorized'

# The backend computes on an accelerator device (CUDA / MPS)
CAPABILITY_GPU_NATIVE = 'gpu_native'

# Minimum capability set any container must offer to be evaluated
REQUIRED_CONTAINER_CAPABILITIES = frozenset({
    CAPABILITY_INDEXED,
    CAPABILITY_SIZED,
})

__all__ = [
    'CAPABILITY_INDEXED',
    'CAPABILITY_SIZED',
    'CAPABILITY_ALLOCATABLE',
    'CAPABILITY_VECTORIZED',
    'CAPABILITY_GPU_NATIVE',
    'REQUIRED_CONTAINER_CAPABILITIES',
]
