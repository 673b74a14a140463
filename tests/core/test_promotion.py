"""
Tests for numeric promotion.

The computation type depends only on argument TYPES:
    - integral/bool -> float64
    - Python float -> float64
    - numpy floats keep their dtype
    - the widest wins
"""

import numpy as np
import pytest

from pydistributions.core.compute.promotion import (
    DEFAULT_FLOAT,
    dtype_of,
    float_dtype,
    promote_dtypes,
    result_dtype,
    sequence_dtype,
    to_computation_type,
)
from pydistributions.core.exceptions import ValidationError


class TestFloatDtype:
    """float_dtype maps storage dtypes to the floating type they compute in."""

    @pytest.mark.parametrize("dtype", [np.float16, np.float32, np.float64])
    def test_floating_kept(self, dtype):
        assert float_dtype(dtype) == np.dtype(dtype)

    @pytest.mark.parametrize("dtype", [np.int8, np.int64, np.uint16, np.bool_])
    def test_integral_to_default(self, dtype):
        assert float_dtype(dtype) == DEFAULT_FLOAT

    def test_complex_rejected(self):
        with pytest.raises(ValidationError, match="x: non-numeric dtype"):
            float_dtype(np.complex64, 'x')


class TestDtypeOf:
    """dtype_of reads the floating type of a single argument."""

    def test_python_int(self):
        assert dtype_of(3) == np.float64

    def test_python_float(self):
        assert dtype_of(3.5) == np.float64

    def test_python_bool(self):
        assert dtype_of(True) == np.float64

    def test_numpy_float32_scalar(self):
        assert dtype_of(np.float32(1.0)) == np.float32

    def test_numpy_float16_array(self):
        assert dtype_of(np.zeros(2, dtype=np.float16)) == np.float16

    def test_numpy_int_scalar(self):
        assert dtype_of(np.int32(4)) == np.float64

    def test_fraction_is_real(self):
        from fractions import Fraction
        assert dtype_of(Fraction(1, 3)) == np.float64

    def test_rejects_string(self):
        with pytest.raises(ValidationError, match="mean: expected a real number, got str"):
            dtype_of("1.0", 'mean')


class TestResultDtype:
    """result_dtype picks the widest type among all arguments."""

    def test_all_integers(self):
        assert result_dtype(1, 2, 3) == np.float64

    def test_float32_only(self):
        assert result_dtype(np.float32(1), np.float32(2)) == np.float32

    def test_python_float_widens_float32(self):
        assert result_dtype(np.float32(1), 2.0) == np.float64

    def test_float16_and_float32(self):
        assert result_dtype(np.float16(1), np.float32(2)) == np.float32

    def test_longdouble_wins(self):
        assert result_dtype(np.longdouble(1), 2.0) == np.longdouble

    def test_order_independent(self):
        a = result_dtype(np.float32(1), np.float16(1), 3)
        b = result_dtype(3, np.float16(1), np.float32(1))
        assert a == b == np.float64

    def test_value_independent(self):
        # Same types, very different values: same computation type
        assert result_dtype(np.float32(1e-30), np.float32(3e38)) == np.float32

    def test_error_names_argument(self):
        with pytest.raises(ValidationError, match="scale"):
            result_dtype(1.0, None, names=('x', 'scale'))

    def test_no_arguments(self):
        assert result_dtype() == DEFAULT_FLOAT


class TestPromoteAndSequence:
    """promote_dtypes and sequence_dtype over collections of types."""

    def test_promote_empty(self):
        assert promote_dtypes([]) == DEFAULT_FLOAT

    def test_promote_generator(self):
        dtypes = (np.dtype(d) for d in (np.float16, np.float32))
        assert promote_dtypes(dtypes) == np.float32

    def test_sequence_of_float32(self):
        assert sequence_dtype([np.float32(1), np.float32(2)]) == np.float32

    def test_sequence_mixed(self):
        assert sequence_dtype([np.float32(1), 2]) == np.float64

    def test_sequence_empty(self):
        assert sequence_dtype([]) == DEFAULT_FLOAT

    def test_sequence_bad_element(self):
        with pytest.raises(ValidationError, match=r"x\[1\]"):
            sequence_dtype([1.0, "two"], 'x')


class TestToComputationType:
    """to_computation_type converts one argument, overflowing to infinity."""

    def test_float(self):
        value = to_computation_type(0.5, np.dtype(np.float32))
        assert isinstance(value, np.float32)
        assert value == np.float32(0.5)

    def test_zero_dim_array(self):
        value = to_computation_type(np.array(2), DEFAULT_FLOAT)
        assert isinstance(value, np.float64)
        assert value == 2.0

    def test_huge_integer(self):
        assert to_computation_type(10**400, DEFAULT_FLOAT) == np.inf
        assert to_computation_type(-10**400, DEFAULT_FLOAT) == -np.inf

    def test_huge_integer_float32(self):
        value = to_computation_type(10**400, np.dtype(np.float32))
        assert isinstance(value, np.float32)
        assert value == np.inf
