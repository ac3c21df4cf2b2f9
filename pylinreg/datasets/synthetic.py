"""
Synthetic data for checking a regression end to end.
"""

from __future__ import annotations

from typing import Any
import numpy as np
from numpy.typing import NDArray

from pylinreg.core.exceptions import ValidationError


def make_linear(
    n_samples: int = 100,
    *,
    slope: float = 3.0,
    intercept: float = 4.0,
    noise: float = 1.0,
    low: float = 0.0,
    high: float = 2.0,
    seed: int | np.random.Generator | None = None,
) -> tuple[NDArray[np.floating[Any]], NDArray[np.floating[Any]]]:
    """
    Sample y = slope * x + intercept + N(0, noise^2), x ~ U[low, high).

    Returns:
        (X, y) with X of shape (n_samples, 1) and y of shape (n_samples,).
        noise=0 gives points exactly on the line.

    Raises:
        ValidationError: On negative n_samples or noise, or low >= high
    """
    if n_samples < 0:
        raise ValidationError(f"n_samples: must be >= 0, got {n_samples}")
    if noise < 0:
        raise ValidationError(f"noise: must be >= 0, got {noise}")
    if not low < high:
        raise ValidationError(f"low ({low}) must be less than high ({high})")

    rng = seed if isinstance(seed, np.random.Generator) else np.random.default_rng(seed)
    x = rng.uniform(low, high, size=n_samples)
    y = slope * x + intercept
    if noise > 0:
        y = y + rng.normal(0.0, noise, size=n_samples)
    return x.reshape(-1, 1), y
