"""
GPU backend tests.

Skipped unless PyTorch sees a CUDA or MPS device. Every GPU result is
checked against the CPU reference within the tolerance of its precision.
"""

import pytest
import numpy as np

from pylinreg.core.config import ComputeConfig
from pylinreg.core.compute.device import detect_gpu, get_cpu_info
from pylinreg.core.exceptions import NumericalInstabilityError
from pylinreg.regression import fit

_GPU = detect_gpu()

requires_gpu = pytest.mark.skipif(_GPU is None, reason="no GPU available")
requires_fp64_gpu = pytest.mark.skipif(
    _GPU is None or not _GPU.supports_fp64, reason="no float64-capable GPU available"
)


class TestDeviceSelection:

    def test_gpu_request_without_gpu_raises(self, simple_regression_data):
        if _GPU is not None:
            pytest.skip("GPU present")
        X, y, _, _ = simple_regression_data
        with pytest.raises(RuntimeError, match="GPU requested"):
            fit(X, y, config=ComputeConfig(backend='gpu'))

    def test_backend_rejects_cpu_device(self):
        pytest.importorskip("torch")
        from pylinreg.regression.backends.gpu import GPUSVDBackend
        with pytest.raises(RuntimeError, match="requires a GPU"):
            GPUSVDBackend(get_cpu_info())


@requires_gpu
class TestGPUFloat32:

    def test_matches_cpu(self, simple_regression_data):
        X, y, _, _ = simple_regression_data
        cfg = ComputeConfig(backend='gpu', dtype='float32')
        gpu = fit(X, y, config=cfg)
        cpu = fit(X, y)
        tol = cfg.tolerance()
        assert gpu.backend_name == 'gpu_svd_fp32'
        np.testing.assert_allclose(gpu.coefficients, cpu.coefficients, rtol=tol.rtol, atol=tol.atol)
        assert gpu.intercept == pytest.approx(cpu.intercept, rel=tol.rtol, abs=tol.atol)

    def test_rank_deficient(self, duplicate_column_data):
        X, y = duplicate_column_data
        result = fit(X, y, config=ComputeConfig(backend='gpu', dtype='float32'))
        assert np.all(np.isfinite(result.coefficients))
        np.testing.assert_allclose(result.coefficients, [1.0, 1.0], atol=1e-3)

    def test_nan_raises(self, simple_regression_data):
        X, y, _, _ = simple_regression_data
        X = X.copy()
        X[0, 0] = np.nan
        with pytest.raises(NumericalInstabilityError):
            fit(X, y, config=ComputeConfig(backend='gpu', dtype='float32'))

    def test_timing_includes_transfer(self, simple_regression_data):
        X, y, _, _ = simple_regression_data
        result = fit(X, y, config=ComputeConfig(backend='gpu', dtype='float32'))
        assert 'data_transfer_to_gpu' in result.timing


@requires_fp64_gpu
class TestGPUFloat64:

    def test_matches_cpu(self, simple_regression_data):
        X, y, _, _ = simple_regression_data
        cfg = ComputeConfig(backend='gpu', dtype='float64')
        gpu = fit(X, y, config=cfg)
        cpu = fit(X, y)
        assert gpu.backend_name == 'gpu_svd_fp64'
        np.testing.assert_allclose(gpu.coefficients, cpu.coefficients, rtol=1e-8, atol=1e-10)
