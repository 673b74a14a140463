"""
Core protocols for pydistributions.

These define structural interfaces that containers and container backends
must satisfy. We use Protocol (structural typing) rather than ABC (nominal
typing) so third-party containers plug in without inheriting from anything.

Design Principles:
    - Minimal contracts: indexed access, a shape known up front, and
      allocation at a given shape before population
    - Capability-driven: use supports() for optional features
    - Formulas never see containers: backends only move elements between
      containers and the evaluation engine
"""

from __future__ import annotations

from typing import Protocol, Any, TYPE_CHECKING, runtime_checkable

import numpy as np

if TYPE_CHECKING:
    from pydistributions.families._base import ProbabilityFunction


@runtime_checkable
class AllocatableContainer(Protocol):
    """
    Protocol for user-defined sequence or grid containers.

    Any class exposing these members can be passed to sequence()/grid() and
    receives a container of its own type back, allocated once at the input
    shape and filled element by element.

    Indexing convention: 1-D containers are indexed with an int, 2-D
    containers with a (row, col) tuple.
    """

    @property
    def shape(self) -> tuple[int, ...]:
        """Container shape: (n,) or (rows, cols)."""
        ...

    def __getitem__(self, index: Any) -> Any:
        ...

    def __setitem__(self, index: Any, value: Any) -> None:
        ...

    @classmethod
    def allocate(cls, shape: tuple[int, ...], dtype: np.dtype) -> AllocatableContainer:
        """
        Create an unpopulated container of the given shape.

        Args:
            shape: Output shape, identical to the input shape
            dtype: Element type the engine will write
        """
        ...


@runtime_checkable
class ContainerBackend(Protocol):
    """
    Protocol for container backends.

    A backend knows how to read elements out of one family of containers
    (numpy arrays, torch tensors, Python sequences, ...), run them through
    the evaluation engine, and hand back a container of the same shape.

    Backends are stateless: all configuration is passed per call or at
    construction time.
    """

    @property
    def name(self) -> str:
        """
        Backend identifier.

        Convention: '{device}_{container}'
        Examples: 'cpu_numpy', 'cpu_generic', 'torch'
        """
        ...

    def supports(self, capability: str) -> bool:
        """
        Check if this backend supports a given capability.

        Note:
            Unknown capabilities MUST return False, never raise.
        """
        ...

    def accepts(self, container: Any) -> bool:
        """Whether this backend can evaluate the given container type."""
        ...

    def shape(self, container: Any) -> tuple[int, ...]:
        """Shape of the container, queried before evaluation."""
        ...

    def evaluate(
        self,
        function: ProbabilityFunction,
        container: Any,
        params: tuple[Any, ...],
        *,
        log_form: bool,
        dtype: np.dtype | None,
    ) -> Any:
        """
        Evaluate a probability function over every element.

        Args:
            function: The distribution function to apply
            container: Input container (shape already validated)
            params: Distribution parameters, shared by all elements
            log_form: Return log values instead of natural values
            dtype: Requested output element type, or None for the
                computation type

        Returns:
            Container of identical shape holding one result per element
        """
        ...
