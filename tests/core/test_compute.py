"""
Tests for compute infrastructure: devices, tolerances and math providers.
"""

import math

import numpy as np
import pytest
from scipy import special

from pydistributions.core.compute.device import (
    DeviceInfo,
    detect_gpu,
    get_cpu_info,
    select_device,
)
from pydistributions.core.compute.elementary import NUMPY_MATH
from pydistributions.core.compute.tolerances import (
    FP16,
    FP32,
    FP64,
    FP64_REFERENCE,
    select_tolerance,
)
from pydistributions.core.exceptions import BackendUnavailableError


# ═══════════════════════════════════════════════════════════════════════
# Devices
# ═══════════════════════════════════════════════════════════════════════


class TestDeviceInfo:
    """DeviceInfo describes a compute device and what it supports."""

    def test_cpu(self):
        info = get_cpu_info()
        assert info.device_type == 'cpu'
        assert info.device_index is None
        assert not info.is_gpu
        assert info.supports_float64
        assert info.torch_name == 'cpu'
        assert str(info).startswith("CPU (")

    def test_cuda(self):
        info = DeviceInfo('cuda', 1, 'Test GPU')
        assert info.is_gpu
        assert info.supports_float64
        assert info.torch_name == 'cuda:1'
        assert str(info) == "CUDA:1 (Test GPU)"

    def test_mps_has_no_float64(self):
        info = DeviceInfo('mps', 0, 'Apple Silicon GPU')
        assert info.is_gpu
        assert not info.supports_float64
        assert info.torch_name == 'mps'

    def test_frozen(self):
        info = get_cpu_info()
        with pytest.raises(AttributeError):
            info.device_type = 'cuda'


class TestSelectDevice:
    """select_device honours the preference or raises."""

    def test_cpu_always_available(self):
        assert select_device('cpu').device_type == 'cpu'

    def test_auto_returns_something(self):
        assert select_device('auto').device_type in ('cpu', 'cuda', 'mps')

    def test_gpu_without_gpu(self):
        if detect_gpu() is not None:
            pytest.skip("GPU present")
        with pytest.raises(BackendUnavailableError) as exc_info:
            select_device('gpu')
        assert exc_info.value.backend == 'gpu'


# ═══════════════════════════════════════════════════════════════════════
# Tolerances
# ═══════════════════════════════════════════════════════════════════════


class TestTolerances:
    """select_tolerance picks a tier by dtype."""

    def test_select_by_itemsize(self):
        assert select_tolerance(np.float64) is FP64
        assert select_tolerance(np.float32) is FP32
        assert select_tolerance(np.float16) is FP16

    def test_reference_tier(self):
        assert select_tolerance(np.float64, reference=True) is FP64_REFERENCE
        assert FP64_REFERENCE.rtol > FP64.rtol

    def test_reference_ignored_below_double(self):
        assert select_tolerance(np.float32, reference=True) is FP32

    def test_tiers_ordered(self):
        assert FP64.rtol < FP32.rtol < FP16.rtol


# ═══════════════════════════════════════════════════════════════════════
# numpy math provider
# ═══════════════════════════════════════════════════════════════════════


class TestNumpyMath:
    """The numpy provider is stable at the extremes."""

    def test_log1pexp_no_overflow(self):
        x = np.array([-800.0, 0.0, 800.0])
        result = NUMPY_MATH.log1pexp(x)
        np.testing.assert_allclose(result, [0.0, np.log(2.0), 800.0], rtol=1e-15, atol=0)

    def test_xlogy_zero_times_log_zero(self):
        assert NUMPY_MATH.xlogy(0.0, 0.0) == 0.0

    def test_log1mexp_both_branches(self):
        t = np.array([1e-20, 0.5, math.log(2.0), 1.0, 40.0])
        expected = [math.log(1e-20), math.log(-math.expm1(-0.5)), math.log(0.5),
                    math.log1p(-math.exp(-1.0)), -math.exp(-40.0)]
        with NUMPY_MATH.errstate():
            result = NUMPY_MATH.log1mexp(t)
        np.testing.assert_allclose(result, expected, rtol=1e-14)

    def test_log1mexp_zero(self):
        with NUMPY_MATH.errstate():
            assert NUMPY_MATH.log1mexp(np.array([0.0]))[0] == -np.inf

    def test_log1mexp_keeps_dtype(self):
        with NUMPY_MATH.errstate():
            result = NUMPY_MATH.log1mexp(np.array([0.1, 5.0], dtype=np.float32))
        assert result.dtype == np.float32

    def test_log_ndtr_deep_tail(self):
        result = NUMPY_MATH.log_ndtr(np.array([-40.0]))
        assert np.isfinite(result[0])
        np.testing.assert_allclose(result, special.log_ndtr(-40.0), rtol=1e-15)

    def test_log_ndtr_longdouble(self):
        x = np.array([0.5], dtype=np.longdouble)
        result = NUMPY_MATH.log_ndtr(x)
        np.testing.assert_allclose(result.astype(np.float64), special.log_ndtr(0.5), rtol=1e-15)

    def test_errstate_silences_warnings(self):
        with NUMPY_MATH.errstate():
            result = NUMPY_MATH.log(np.array([0.0, -1.0]))
        assert result[0] == -np.inf
        assert np.isnan(result[1])

    def test_full_like_keeps_dtype(self):
        out = NUMPY_MATH.full_like(np.zeros(3, dtype=np.float32), np.nan)
        assert out.dtype == np.float32
        assert np.isnan(out).all()
