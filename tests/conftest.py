"""
pytest configuration and shared fixtures.
"""

import numpy as np
import pytest


class Grid:
    """
    Minimal user-defined 2-D container implementing AllocatableContainer.

    Stores rows as Python lists; indexed with (row, col) tuples.
    """

    def __init__(self, rows: int, cols: int, dtype=np.float64):
        self.shape = (rows, cols)
        self.dtype = np.dtype(dtype)
        self._rows = [[0.0] * cols for _ in range(rows)]

    @classmethod
    def allocate(cls, shape, dtype):
        return cls(shape[0], shape[1], dtype=dtype)

    @classmethod
    def from_rows(cls, rows):
        grid = cls(len(rows), len(rows[0]))
        for i, row in enumerate(rows):
            for j, value in enumerate(row):
                grid[i, j] = value
        return grid

    def __getitem__(self, index):
        row, col = index
        return self._rows[row][col]

    def __setitem__(self, index, value):
        row, col = index
        self._rows[row][col] = value

    def to_list(self):
        return [list(row) for row in self._rows]


class Vector:
    """Minimal user-defined 1-D container implementing AllocatableContainer."""

    def __init__(self, n: int, dtype=np.float64):
        self.shape = (n,)
        self.dtype = np.dtype(dtype)
        self._values = [0.0] * n

    @classmethod
    def allocate(cls, shape, dtype):
        return cls(shape[0], dtype=dtype)

    @classmethod
    def from_values(cls, values):
        vector = cls(len(values))
        for i, value in enumerate(values):
            vector[i] = value
        return vector

    def __getitem__(self, index):
        return self._values[index]

    def __setitem__(self, index, value):
        self._values[index] = value

    def to_list(self):
        return list(self._values)


@pytest.fixture
def rng():
    """Seeded random number generator for reproducible tests."""
    return np.random.default_rng(42)


@pytest.fixture
def points():
    """Evaluation points spanning negative, zero, small and large values."""
    return np.array([-3.0, -0.5, 0.0, 0.25, 1.0, 2.5, 7.0])


@pytest.fixture
def grid_points():
    """2x3 grid of evaluation points."""
    return np.array([
        [-1.0, 0.0, 1.0],
        [0.5, 2.0, 4.0],
    ])


@pytest.fixture
def grid_type():
    """User-defined 2-D AllocatableContainer class."""
    return Grid


@pytest.fixture
def vector_type():
    """User-defined 1-D AllocatableContainer class."""
    return Vector
