"""
Tests for the PyTorch backend.

CPU tensors exercise the torch code path on any machine with torch
installed; the GPU classes only run when CUDA or MPS is present.
"""

import warnings

import numpy as np
import pytest

torch = pytest.importorskip("torch")

from pydistributions import (
    BackendUnavailableError,
    DimensionError,
    ValidationError,
    available_functions,
    normal_cdf,
    normal_pdf,
    resolve_function,
    weibull_pdf,
)
from pydistributions.core.compute.device import DeviceInfo, detect_gpu, get_cpu_info
from pydistributions.core.compute.tolerances import select_tolerance
from pydistributions.engine import elementwise, get_backend
from pydistributions.engine.backends.gpu import TorchBackend

HAS_GPU = detect_gpu() is not None

# Parameters valid for every registered family
PARAMS = {
    'normal': (0.5, 1.5),
    'lognormal': (0.2, 0.7),
    'exponential': (1.5,),
    'weibull': (1.5, 2.0),
    'cauchy': (0.5, 1.5),
    'logistic': (-0.5, 1.2),
    'laplace': (0.25, 0.75),
    'uniform': (-1.0, 2.5),
}

POINTS = np.array([-np.inf, -3.0, -0.5, 0.0, 0.25, 1.0, 2.5, 7.0, np.inf])


def family_params(name):
    return PARAMS[name.rsplit('_', 1)[0]]


# ═══════════════════════════════════════════════════════════════════════
# CPU tensors
# ═══════════════════════════════════════════════════════════════════════


class TestTorchOnCPU:
    """CPU tensors run the torch code path and match the numpy backend."""

    def test_backend_selected_for_tensor(self):
        assert get_backend(torch.zeros(3)).name == 'torch'

    @pytest.mark.parametrize("name", available_functions())
    @pytest.mark.parametrize("log_form", [False, True])
    def test_matches_numpy(self, name, log_form):
        f = resolve_function(name)
        params = family_params(name)
        expected = f.sequence(POINTS, *params, log_form=log_form)
        result = f.sequence(torch.from_numpy(POINTS), *params, log_form=log_form)
        assert isinstance(result, torch.Tensor)
        assert result.dtype == torch.float64
        tol = select_tolerance(np.float64, reference=True)
        np.testing.assert_allclose(result.numpy(), expected, rtol=tol.rtol, atol=tol.atol)

    def test_float32_tensor(self):
        x = torch.tensor([0.0, 0.5, 1.0], dtype=torch.float32)
        result = normal_pdf.sequence(x, np.float32(0.0), np.float32(1.0))
        assert result.dtype == torch.float32
        expected = normal_pdf.sequence(x.numpy(), np.float32(0.0), np.float32(1.0))
        tol = select_tolerance(np.float32)
        np.testing.assert_allclose(result.numpy(), expected, rtol=tol.rtol, atol=tol.atol)

    def test_float32_tensor_python_params(self):
        x = torch.tensor([0.0, 0.5], dtype=torch.float32)
        assert normal_pdf.sequence(x, 0.0, 1.0).dtype == torch.float64

    def test_integer_tensor(self):
        result = normal_pdf.sequence(torch.tensor([0, 1, 2]))
        assert result.dtype == torch.float64

    def test_invalid_parameters_fill_nan(self):
        result = normal_cdf.sequence(torch.linspace(-1, 1, 5, dtype=torch.float64), 0.0, 0.0)
        assert result.shape == (5,)
        assert torch.isnan(result).all()

    def test_boundary(self):
        x = torch.tensor([-1.0, 1.0], dtype=torch.float64)
        natural = weibull_pdf.sequence(x, 2.0, 3.0)
        log_values = weibull_pdf.sequence(x, 2.0, 3.0, log_form=True)
        assert natural[0].item() == 0.0
        assert log_values[0].item() == -np.inf

    def test_grid(self):
        X = torch.arange(6, dtype=torch.float64).reshape(2, 3)
        result = normal_cdf.grid(X, 2.0, 1.0)
        assert result.shape == (2, 3)
        np.testing.assert_allclose(result[0, 2].item(), 0.5, rtol=1e-15)

    def test_grid_rejects_sequence(self):
        with pytest.raises(DimensionError):
            normal_pdf.grid(torch.zeros(3))

    def test_output_dtype_torch(self):
        result = normal_pdf.sequence(torch.zeros(2, dtype=torch.float64), dtype=torch.float32)
        assert result.dtype == torch.float32

    def test_output_dtype_numpy(self):
        result = normal_pdf.sequence(torch.zeros(2, dtype=torch.float64), dtype=np.float32)
        assert result.dtype == torch.float32

    def test_output_dtype_integer(self):
        with pytest.raises(ValidationError, match="floating type"):
            normal_pdf.sequence(torch.zeros(2), dtype=torch.int32)

    def test_complex_tensor(self):
        with pytest.raises(ValidationError, match="non-numeric"):
            normal_pdf.sequence(torch.zeros(2, dtype=torch.complex64))

    def test_cpu_backend_choice(self):
        result = normal_pdf.sequence(torch.zeros(2, dtype=torch.float64), backend='cpu')
        assert result.device.type == 'cpu'

    def test_host_data_on_explicit_device(self):
        backend = TorchBackend(device=get_cpu_info())
        x = np.array([0.0, 1.0, 2.0])
        result = backend.evaluate(normal_cdf, x, (1.0, 2.0), log_form=False)
        assert isinstance(result, torch.Tensor)
        np.testing.assert_allclose(result.numpy(), normal_cdf.sequence(x, 1.0, 2.0), rtol=1e-12)

    def test_computation_dtype(self):
        backend = TorchBackend()
        names = ('mean', 'sd')
        assert backend.computation_dtype(torch.float32, (np.float32(0), np.float32(1)), names) == torch.float32
        assert backend.computation_dtype(torch.float32, (0.0, 1.0), names) == torch.float64
        assert backend.computation_dtype(torch.int64, (np.float32(0), np.float32(1)), names) == torch.float64

    def test_supports(self):
        assert not TorchBackend().supports('gpu_native')
        assert TorchBackend().supports('vectorized')
        assert not TorchBackend().supports('unknown')

    def test_supports_gpu_native_on_gpu_device(self):
        assert TorchBackend(device=DeviceInfo('cuda', 0, 'Test GPU')).supports('gpu_native')
        assert not TorchBackend(device=get_cpu_info()).supports('gpu_native')

    def test_gpu_choice_requires_gpu_native_backend(self, monkeypatch):
        monkeypatch.setattr(elementwise, 'select_device', lambda prefer: get_cpu_info())
        with pytest.raises(BackendUnavailableError, match="no GPU available") as exc_info:
            get_backend(np.zeros(2), 'gpu')
        assert exc_info.value.backend == 'gpu'

    def test_gpu_choice_with_gpu_device(self, monkeypatch):
        device = DeviceInfo('cuda', 0, 'Test GPU')
        monkeypatch.setattr(elementwise, 'select_device', lambda prefer: device)
        selected = get_backend(np.zeros(2), 'gpu')
        assert selected.name == 'torch'
        assert selected.device_info is device


# ═══════════════════════════════════════════════════════════════════════
# GPU
# ═══════════════════════════════════════════════════════════════════════


@pytest.mark.skipif(not HAS_GPU, reason="No GPU available")
class TestTorchOnGPU:
    """Host data is moved to the GPU and tensors stay on their device."""

    def test_numpy_input_moved_to_gpu(self):
        x = np.linspace(-3, 3, 50)
        with warnings.catch_warnings():
            warnings.simplefilter("ignore")
            result = normal_cdf.sequence(x, 1.0, 2.0, backend='gpu')
        assert result.device.type in ('cuda', 'mps')
        tol = select_tolerance(np.float32 if result.dtype == torch.float32 else np.float64, reference=True)
        np.testing.assert_allclose(
            result.cpu().numpy(), normal_cdf.sequence(x, 1.0, 2.0), rtol=tol.rtol, atol=1e-6,
        )

    def test_tensor_stays_on_device(self):
        device = detect_gpu().torch_name
        x = torch.zeros(4, dtype=torch.float32, device=device)
        result = normal_pdf.sequence(x, np.float32(0.0), np.float32(1.0))
        assert result.device.type == x.device.type

    def test_mps_float64_falls_back(self):
        if detect_gpu().device_type != 'mps':
            pytest.skip("MPS only")
        with pytest.warns(UserWarning, match="float64"):
            result = normal_pdf.sequence(np.zeros(3), backend='gpu')
        assert result.dtype == torch.float32
