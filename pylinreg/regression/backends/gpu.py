"""
GPU backend for linear regression using PyTorch.

Performance path for large problems, validated against the CPU reference.
Supports CUDA (Linux/Windows) and MPS (macOS Apple Silicon, float32 only).
"""

from typing import Any

from pylinreg.core.config import ComputeConfig, DEFAULT_CONFIG
from pylinreg.core.result import Result
from pylinreg.core.compute.device import DeviceInfo
from pylinreg.core.compute.timing import Timer
from pylinreg.core.compute.linalg import svd_gpu, pinv_apply
from pylinreg.regression.design import RegressionDesign
from pylinreg.regression.solution import LinearParams
from pylinreg.regression.backends._common import build_params, rank_warnings


class GPUSVDBackend:
    """
    GPU backend using the SVD pseudo-inverse.

    The factorization of X_b, which dominates the cost, runs on the
    device in the configured precision; applying the pseudo-inverse and
    the residual statistics run on the host.
    """

    def __init__(self, device: DeviceInfo, config: ComputeConfig = DEFAULT_CONFIG):
        """
        Args:
            device: GPU from select_device('gpu') / detect_gpu()
            config: Precision and singular value cutoff

        Raises:
            RuntimeError: If device is not a GPU, or float64 is requested
                on a device without double precision (MPS)
        """
        import torch

        if not device.is_gpu:
            raise RuntimeError(f"GPUSVDBackend requires a GPU device, got {device}")
        if config.dtype == 'float64' and not device.supports_fp64:
            raise RuntimeError(
                f"{device} does not support float64. Use "
                f"ComputeConfig(dtype='float32') or backend='cpu' for double precision."
            )

        self.device_info = device
        self.device = torch.device(device.torch_device)
        self.dtype = torch.float64 if config.dtype == 'float64' else torch.float32
        self.config = config

    @property
    def name(self) -> str:
        precision = "fp64" if self.config.dtype == 'float64' else "fp32"
        return f'gpu_svd_{precision}'

    def solve(self, design: RegressionDesign) -> Result[LinearParams]:
        """
        Solve OLS via the pseudo-inverse on the GPU.

        Raises:
            NumericalInstabilityError: If the SVD fails or X_b is not finite
        """
        import torch

        timer = Timer(sync_cuda=self.device.type == 'cuda')
        timer.start()

        with timer.section('augment'):
            Xb_np, yw = design.weighted_system()
            rcond = self.config.cutoff(*Xb_np.shape)

        with timer.section('data_transfer_to_gpu'):
            Xb = torch.from_numpy(Xb_np).to(device=self.device, dtype=self.dtype)

        with timer.section('svd'):
            svd_result = svd_gpu(Xb, rcond)

        with timer.section('solve'):
            w = pinv_apply(svd_result, yw)

        with timer.section('statistics'):
            params = build_params(design, w, svd_result)

        timer.stop()

        info: dict[str, Any] = {
            'method': 'svd',
            'rank': svd_result.rank,
            'condition_number': svd_result.condition_number,
            'cutoff': svd_result.cutoff,
            'dtype': str(self.dtype),
            'device': str(self.device),
            'device_name': self.device_info.name,
        }

        return Result(
            params=params,
            info=info,
            timing=timer.result(),
            backend_name=self.name,
            warnings=tuple(rank_warnings(design, svd_result.rank)),
        )
