"""
Explicit compute configuration.

There is no module-level default backend or precision to mutate. Every
entry point takes a ComputeConfig (or None for DEFAULT_CONFIG), so two
callers in the same process can fit in different precisions on
different devices without stepping on each other.

Usage:
    from pylinreg import ComputeConfig
    from pylinreg.regression import fit

    fast = ComputeConfig(backend='auto', dtype='float32')
    result = fit(X, y, config=fast)
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Literal
import numpy as np

from pylinreg.core.exceptions import ValidationError
from pylinreg.core.compute.tolerances import ToleranceTier, select_tolerance

BackendChoice = Literal['auto', 'cpu', 'gpu']
DtypeChoice = Literal['float64', 'float32']

_BACKENDS = ('auto', 'cpu', 'gpu')
_DTYPES = ('float64', 'float32')


@dataclass(frozen=True)
class ComputeConfig:
    """
    Numeric backend and precision for one call.

    Attributes:
        backend: 'cpu', 'gpu' (required, raises if absent) or 'auto'
            (GPU when available, else CPU)
        dtype: Floating point precision for all arithmetic in the call
        rcond: Relative cutoff for small singular values. Singular values
            below rcond * max(singular values) are treated as zero.
            None means max(n, p) * eps(dtype).
        check_finite: If True, reject NaN/Inf inputs up front with
            ValidationError. If False, NaN propagates and a failed
            factorization surfaces as NumericalInstabilityError.
    """
    backend: BackendChoice = 'cpu'
    dtype: DtypeChoice = 'float64'
    rcond: float | None = None
    check_finite: bool = False

    def __post_init__(self) -> None:
        if self.backend not in _BACKENDS:
            raise ValidationError(
                f"backend: must be one of {_BACKENDS}, got {self.backend!r}"
            )
        if self.dtype not in _DTYPES:
            raise ValidationError(
                f"dtype: must be one of {_DTYPES}, got {self.dtype!r}"
            )
        if self.rcond is not None and not (0.0 <= self.rcond < 1.0):
            raise ValidationError(f"rcond: must be in [0, 1), got {self.rcond}")

    @property
    def numpy_dtype(self) -> np.dtype:
        return np.dtype(self.dtype)

    @property
    def eps(self) -> float:
        """Machine epsilon of the configured precision."""
        return float(np.finfo(self.numpy_dtype).eps)

    def cutoff(self, n: int, p: int) -> float:
        """Relative singular value cutoff for an n x p matrix."""
        if self.rcond is not None:
            return self.rcond
        return max(n, p) * self.eps

    def tolerance(self, is_ill_conditioned: bool = False) -> ToleranceTier:
        """Comparison tolerance appropriate to the configured precision."""
        return select_tolerance(self.dtype, is_ill_conditioned)


DEFAULT_CONFIG = ComputeConfig()


def resolve_config(config: ComputeConfig | None) -> ComputeConfig:
    """Return config, or DEFAULT_CONFIG when None."""
    if config is None:
        return DEFAULT_CONFIG
    if not isinstance(config, ComputeConfig):
        raise ValidationError(
            f"config: expected ComputeConfig, got {type(config).__name__}"
        )
    return config
