"""
Hardware detection and device selection.

torch is an optional dependency; every function here works without it
and simply reports that no GPU is present.
"""

from dataclasses import dataclass
from typing import Literal
import platform


@dataclass(frozen=True)
class DeviceInfo:
    """
    Where a fit runs.

    Attributes:
        device_type: 'cpu', 'cuda' or 'mps'
        device_index: CUDA ordinal; 0 for MPS, None for the CPU
        name: Name reported by the driver (or platform for the CPU)
        supports_fp64: Whether the device can compute in double precision
    """
    device_type: Literal['cpu', 'cuda', 'mps']
    device_index: int | None
    name: str
    supports_fp64: bool = True

    def __str__(self) -> str:
        if self.device_type == 'cpu':
            return f"CPU ({self.name})"
        return f"{self.device_type.upper()}:{self.device_index} ({self.name})"

    @property
    def is_gpu(self) -> bool:
        """CUDA or MPS."""
        return self.device_type in ('cuda', 'mps')

    @property
    def torch_device(self) -> str:
        """Device string understood by torch.device()."""
        if self.device_type == 'cuda':
            return f"cuda:{self.device_index}"
        return self.device_type


def detect_gpu() -> DeviceInfo | None:
    """
    The GPU a 'gpu' or 'auto' config would use, if any.

    Priority: CUDA > MPS (Apple Silicon). Returns None when torch is not
    installed or no accelerator is visible.
    """
    try:
        import torch
    except ImportError:
        return None

    if torch.cuda.is_available():
        idx = torch.cuda.current_device()
        return DeviceInfo(
            device_type='cuda',
            device_index=idx,
            name=torch.cuda.get_device_properties(idx).name,
        )

    if hasattr(torch.backends, 'mps') and torch.backends.mps.is_available():
        # MPS has no float64 kernels
        return DeviceInfo(
            device_type='mps',
            device_index=0,
            name='Apple Silicon GPU',
            supports_fp64=False,
        )

    return None


def get_cpu_info() -> DeviceInfo:
    """DeviceInfo for the host CPU."""
    processor = platform.processor() or platform.machine() or "Unknown CPU"
    return DeviceInfo(device_type='cpu', device_index=None, name=processor)


def select_device(prefer: Literal['cpu', 'gpu', 'auto'] = 'auto') -> DeviceInfo:
    """
    Resolve a ComputeConfig.backend value to a device.

    'cpu' always gives the CPU, 'auto' the GPU when detect_gpu() finds
    one and the CPU otherwise, and 'gpu' insists on a GPU.

    Raises:
        RuntimeError: On 'gpu' with no usable GPU
    """
    if prefer == 'cpu':
        return get_cpu_info()

    gpu = detect_gpu()

    if prefer == 'gpu':
        if gpu is None:
            raise RuntimeError(
                "GPU requested but no GPU available. "
                "Install the 'gpu' extra (PyTorch with CUDA/MPS support) "
                "or use ComputeConfig(backend='cpu')."
            )
        return gpu

    return gpu if gpu is not None else get_cpu_info()
