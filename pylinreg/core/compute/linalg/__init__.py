"""
Linear algebra kernels for PyLinReg.

All functions follow these conventions:
    - CPU functions use NumPy/SciPy (LAPACK under the hood)
    - GPU functions use PyTorch and return NumPy arrays (data moved to CPU)
    - Each decomposition returns a structured result dataclass
    - Errors are raised immediately with clear messages
"""

from pylinreg.core.compute.linalg.svd import (
    SVDResult,
    svd_cpu,
    svd_gpu,
    pinv_apply,
    pinv_solve_cpu,
)

__all__ = [
    "SVDResult",
    "svd_cpu",
    "svd_gpu",
    "pinv_apply",
    "pinv_solve_cpu",
]
