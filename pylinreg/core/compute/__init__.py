"""
Shared compute infrastructure for PyLinReg.

This is NOT where domain-specific backends live. Those go in
{domain}/backends/. This module contains shared NUMERIC infrastructure.

Submodules:
    device: Hardware detection and device selection
    timing: Execution timing utilities
    tolerances: Precision-dependent comparison tolerances
    linalg: Linear algebra kernels (SVD, pseudo-inverse solve)
"""

from pylinreg.core.compute.device import (
    DeviceInfo,
    detect_gpu,
    get_cpu_info,
    select_device,
)
from pylinreg.core.compute.timing import Timer

__all__ = [
    "DeviceInfo",
    "detect_gpu",
    "get_cpu_info",
    "select_device",
    "Timer",
]
