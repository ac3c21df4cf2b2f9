"""
Regression error metrics.

Public API:
    mean_square_error(y_true, y_pred)
    root_mean_square_error(y_true, y_pred)
    mean_absolute_error(y_true, y_pred)
    r2_score(y_true, y_pred)
"""

from pylinreg.metrics.regression import (
    mean_square_error,
    root_mean_square_error,
    mean_absolute_error,
    r2_score,
)

__all__ = [
    "mean_square_error",
    "root_mean_square_error",
    "mean_absolute_error",
    "r2_score",
]
