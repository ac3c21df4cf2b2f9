"""
Error metrics for regression predictions.

All functions take (y_true, y_pred) as equal-length vectors and return
a Python float. NaN in either input propagates to the result.
"""

from __future__ import annotations

from typing import Any
import numpy as np
from numpy.typing import ArrayLike, NDArray

from pylinreg.core.validation import (
    check_array,
    check_consistent_length,
    check_not_empty,
    as_vector,
)


def _check_pair(
    y_true: ArrayLike, y_pred: ArrayLike
) -> tuple[NDArray[np.floating[Any]], NDArray[np.floating[Any]]]:
    t = as_vector(check_array(y_true, 'y_true'), 'y_true')
    p = as_vector(check_array(y_pred, 'y_pred'), 'y_pred')
    check_consistent_length(t, p, names=('y_true', 'y_pred'))
    check_not_empty(t, 'y_true')
    return t, p


def mean_square_error(y_true: ArrayLike, y_pred: ArrayLike) -> float:
    """Mean of squared differences: mean((y_true - y_pred)^2)."""
    t, p = _check_pair(y_true, y_pred)
    diff = t - p
    return float(np.mean(diff * diff))


def root_mean_square_error(y_true: ArrayLike, y_pred: ArrayLike) -> float:
    """Square root of mean_square_error, in the units of y."""
    return float(np.sqrt(mean_square_error(y_true, y_pred)))


def mean_absolute_error(y_true: ArrayLike, y_pred: ArrayLike) -> float:
    """Mean of absolute differences: mean(|y_true - y_pred|)."""
    t, p = _check_pair(y_true, y_pred)
    return float(np.mean(np.abs(t - p)))


def r2_score(y_true: ArrayLike, y_pred: ArrayLike) -> float:
    """
    Coefficient of determination, 1 - RSS/TSS.

    Can be negative on held-out data when predictions are worse than
    the mean. A constant y_true gives 1.0 for a perfect prediction and
    0.0 otherwise.
    """
    t, p = _check_pair(y_true, y_pred)
    rss = float(np.sum((t - p) ** 2))
    tss = float(np.sum((t - np.mean(t)) ** 2))
    if tss == 0:
        return 1.0 if rss == 0 else 0.0
    return 1.0 - rss / tss
