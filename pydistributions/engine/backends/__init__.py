"""
Container backends.

The torch backend lives in backends.gpu and is imported on demand.
"""

from pydistributions.engine.backends.cpu import CPUGenericBackend, CPUNumpyBackend

__all__ = [
    "CPUGenericBackend",
    "CPUNumpyBackend",
]
