"""
Exception hierarchy for pydistributions.

All exceptions inherit from PyDistributionsError to allow catching any
library-specific error.

Exceptions are reserved for misuse that is detectable before any
computation starts (non-numeric arguments, wrong container shapes,
unavailable backends). Invalid distribution parameters and out-of-support
evaluation points are NOT errors: they are reported as data (NaN sentinel
and boundary values) in the returned result.
"""


class PyDistributionsError(Exception):
    """Base exception for all pydistributions errors."""
    pass


class ValidationError(PyDistributionsError):
    """
    Argument validation failed.

    Raised when an argument has the wrong type for evaluation: non-numeric
    values, a non-bool log_form flag, a non-floating output dtype, an
    unknown name, or a container lacking required capabilities.

    Attributes:
        missing: Capabilities the offending container lacks, if applicable
    """

    def __init__(self, message: str, missing: frozenset[str] | None = None):
        super().__init__(message)
        self.missing = missing


class DimensionError(ValidationError):
    """
    Container dimensions are incorrect or inconsistent.

    Raised when an input does not have the number of dimensions the entry
    point expects (1 for sequences, 2 for grids) or when a nested sequence
    is ragged.

    Attributes:
        expected_ndim: Number of dimensions the entry point requires
        actual_shape: Shape that was found, if it could be determined
    """

    def __init__(
        self,
        message: str,
        expected_ndim: int | None = None,
        actual_shape: tuple[int, ...] | None = None,
    ):
        super().__init__(message)
        self.expected_ndim = expected_ndim
        self.actual_shape = actual_shape


class BackendUnavailableError(PyDistributionsError):
    """
    Requested compute backend cannot be used.

    Raised when backend='gpu' is requested but PyTorch is missing or no GPU
    device is present.

    Attributes:
        backend: The backend that was requested
    """

    def __init__(self, message: str, backend: str | None = None):
        super().__init__(message)
        self.backend = backend
