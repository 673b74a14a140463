"""
Core infrastructure for pydistributions.

This module provides shared abstractions and utilities used by the
evaluation engine and every distribution family.

Key components:
    protocols: ContainerBackend, AllocatableContainer protocols
    capabilities: Container/backend capability strings
    exceptions: Exception hierarchy
    validation: Argument validators
    compute: Numeric promotion, math providers, devices, tolerances
"""

from pydistributions.core.protocols import AllocatableContainer, ContainerBackend
from pydistributions.core.exceptions import (
    PyDistributionsError,
    ValidationError,
    DimensionError,
    BackendUnavailableError,
)

__all__ = [
    # Protocols
    "AllocatableContainer",
    "ContainerBackend",
    # Exceptions
    "PyDistributionsError",
    "ValidationError",
    "DimensionError",
    "BackendUnavailableError",
]
