"""
Tests for ComputeConfig and the compute helpers it draws on.
"""

from dataclasses import FrozenInstanceError
import time

import pytest
import numpy as np

from pylinreg.core.config import ComputeConfig, DEFAULT_CONFIG, resolve_config
from pylinreg.core.compute.device import DeviceInfo, get_cpu_info, select_device
from pylinreg.core.compute.timing import Timer
from pylinreg.core.compute.tolerances import FP32, FP64, FP64_ILL_CONDITIONED, select_tolerance
from pylinreg.core.exceptions import ValidationError


# ═══════════════════════════════════════════════════════════════════════
# ComputeConfig
# ═══════════════════════════════════════════════════════════════════════


class TestComputeConfig:

    def test_defaults(self):
        cfg = ComputeConfig()
        assert cfg.backend == 'cpu'
        assert cfg.dtype == 'float64'
        assert cfg.rcond is None
        assert cfg.check_finite is False

    def test_frozen(self):
        with pytest.raises(FrozenInstanceError):
            DEFAULT_CONFIG.dtype = 'float32'

    def test_invalid_dtype(self):
        with pytest.raises(ValidationError, match="dtype"):
            ComputeConfig(dtype='float16')

    @pytest.mark.parametrize('rcond', [-0.1, 1.0, 2.0])
    def test_invalid_rcond(self, rcond):
        with pytest.raises(ValidationError, match="rcond"):
            ComputeConfig(rcond=rcond)

    def test_numpy_dtype(self):
        assert ComputeConfig(dtype='float32').numpy_dtype == np.float32

    def test_eps(self):
        assert ComputeConfig().eps == np.finfo(np.float64).eps
        assert ComputeConfig(dtype='float32').eps == pytest.approx(np.finfo(np.float32).eps)

    def test_default_cutoff_scales_with_shape(self):
        cfg = ComputeConfig()
        assert cfg.cutoff(100, 4) == pytest.approx(100 * np.finfo(np.float64).eps)
        assert cfg.cutoff(3, 50) == pytest.approx(50 * np.finfo(np.float64).eps)

    def test_explicit_rcond(self):
        assert ComputeConfig(rcond=1e-6).cutoff(100, 4) == 1e-6

    def test_tolerance_by_precision(self):
        assert ComputeConfig().tolerance() is FP64
        assert ComputeConfig(dtype='float32').tolerance() is FP32
        assert ComputeConfig().tolerance(is_ill_conditioned=True) is FP64_ILL_CONDITIONED

    def test_independent_configs(self):
        a = ComputeConfig(dtype='float32')
        b = ComputeConfig()
        assert a.dtype != b.dtype
        assert DEFAULT_CONFIG.dtype == 'float64'


class TestResolveConfig:

    def test_none_is_default(self):
        assert resolve_config(None) is DEFAULT_CONFIG

    def test_passthrough(self):
        cfg = ComputeConfig(dtype='float32')
        assert resolve_config(cfg) is cfg

    def test_wrong_type(self):
        with pytest.raises(ValidationError, match="expected ComputeConfig"):
            resolve_config('float32')


# ═══════════════════════════════════════════════════════════════════════
# Tolerances
# ═══════════════════════════════════════════════════════════════════════


class TestTolerances:

    def test_fp32_looser_than_fp64(self):
        assert FP32.rtol > FP64.rtol
        assert FP32.atol > FP64.atol

    def test_select(self):
        assert select_tolerance('float64') is FP64
        assert select_tolerance('float32') is FP32


# ═══════════════════════════════════════════════════════════════════════
# Timer
# ═══════════════════════════════════════════════════════════════════════


class TestTimer:

    def test_sections_and_total(self):
        timer = Timer()
        timer.start()
        with timer.section('work'):
            time.sleep(0.001)
        timer.stop()
        result = timer.result()
        assert result['work'] > 0
        assert result['total_seconds'] >= result['work']

    def test_repeated_section_accumulates(self):
        timer = Timer()
        timer.start()
        with timer.section('step'):
            pass
        first = timer._sections['step']
        with timer.section('step'):
            time.sleep(0.001)
        timer.stop()
        assert timer.result()['step'] > first

    def test_result_before_stop(self):
        timer = Timer()
        timer.start()
        with pytest.raises(RuntimeError):
            timer.result()

    def test_stop_before_start(self):
        with pytest.raises(RuntimeError):
            Timer().stop()


# ═══════════════════════════════════════════════════════════════════════
# Devices
# ═══════════════════════════════════════════════════════════════════════


class TestDevice:

    def test_cpu_info(self):
        info = get_cpu_info()
        assert info.device_type == 'cpu'
        assert not info.is_gpu
        assert str(info).startswith("CPU (")

    def test_select_cpu(self):
        assert select_device('cpu').device_type == 'cpu'

    def test_select_auto_never_raises(self):
        assert select_device('auto').device_type in ('cpu', 'cuda', 'mps')

    def test_torch_device_strings(self):
        assert DeviceInfo('cuda', 1, 'test').torch_device == 'cuda:1'
        assert DeviceInfo('mps', 0, 'test', supports_fp64=False).torch_device == 'mps'

    def test_gpu_flags(self):
        mps = DeviceInfo('mps', 0, 'Apple Silicon GPU', supports_fp64=False)
        assert mps.is_gpu
        assert not mps.supports_fp64
        assert str(mps) == "MPS:0 (Apple Silicon GPU)"
