"""
Regression backends.

Available backends:
    CPUSVDBackend: CPU reference implementation (SciPy/LAPACK SVD)
    GPUSVDBackend: GPU implementation (PyTorch SVD), imported lazily
"""

from pylinreg.regression.backends.cpu import CPUSVDBackend

__all__ = [
    "CPUSVDBackend",
]
