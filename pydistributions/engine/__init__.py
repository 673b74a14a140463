"""
Evaluation engine.

    evaluate(function, x, *params, log_form=False)
        Single-point evaluation.
    evaluate_elements(function, container, params, ...)
        Element-wise evaluation over sequences and grids.
"""

from pydistributions.engine.scalar import evaluate, evaluate_points
from pydistributions.engine.elementwise import evaluate_elements, get_backend

__all__ = [
    "evaluate",
    "evaluate_points",
    "evaluate_elements",
    "get_backend",
]
