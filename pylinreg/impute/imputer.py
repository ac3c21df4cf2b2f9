"""
Simple per-column imputation.

fit() learns one statistic per column from the observed (non-missing)
entries; transform() replaces the missing entries of any matrix with
the same column count by those statistics. Fit on the training subset
and transform the training and evaluation subsets separately to keep
evaluation statistics out of training.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Literal
import numpy as np
from numpy.typing import ArrayLike, NDArray

from pylinreg.core.exceptions import ValidationError
from pylinreg.core.validation import (
    check_array,
    check_n_columns,
    check_not_empty,
    as_matrix,
)

Strategy = Literal['mean', 'median', 'most_frequent', 'constant']
_STRATEGIES = ('mean', 'median', 'most_frequent', 'constant')


@dataclass(frozen=True, eq=False)
class ImputerModel:
    """
    Fitted imputer.

    Attributes:
        statistics: Fill value per column (p,), read-only
        strategy: Strategy the statistics were computed with
        missing_values: Marker treated as missing. NaN means every
            non-finite entry (NaN, +Inf, -Inf).
    """
    statistics: NDArray[np.floating[Any]]
    strategy: Strategy
    missing_values: float = np.nan

    def __post_init__(self) -> None:
        stats = np.array(self.statistics, dtype=np.float64, copy=True).reshape(-1)
        stats.setflags(write=False)
        object.__setattr__(self, 'statistics', stats)

    @property
    def n_features(self) -> int:
        return self.statistics.shape[0]

    def missing_mask(self, X: NDArray[np.floating[Any]]) -> NDArray[np.bool_]:
        return _missing_mask(X, self.missing_values)


def _missing_mask(X: NDArray[np.floating[Any]], missing_values: float) -> NDArray[np.bool_]:
    if np.isnan(missing_values):
        return ~np.isfinite(X)
    return X == missing_values


def _most_frequent(values: NDArray[np.floating[Any]]) -> float:
    # np.unique sorts, so ties resolve to the smallest value
    uniques, counts = np.unique(values, return_counts=True)
    return float(uniques[np.argmax(counts)])


def fit(
    X: ArrayLike,
    strategy: Strategy = 'mean',
    *,
    fill_value: float = 0.0,
    missing_values: float = np.nan,
) -> ImputerModel:
    """
    Learn per-column fill values.

    Args:
        X: Data matrix (n x p); 1D input is a single column
        strategy: 'mean', 'median', 'most_frequent' or 'constant'
        fill_value: Value used by the 'constant' strategy
        missing_values: Marker for missing entries (default NaN, which
            also covers +/-Inf)

    Returns:
        ImputerModel

    Raises:
        ValidationError: Unknown strategy, or a column with no observed
            values under a data-driven strategy
        EmptyInputError: If X has no rows
    """
    if strategy not in _STRATEGIES:
        raise ValidationError(
            f"strategy: must be one of {_STRATEGIES}, got {strategy!r}"
        )

    X_arr = as_matrix(check_array(X, 'X', dtype=np.float64), 'X')
    check_not_empty(X_arr, 'X')
    p = X_arr.shape[1]

    if strategy == 'constant':
        return ImputerModel(
            statistics=np.full(p, float(fill_value)),
            strategy=strategy,
            missing_values=missing_values,
        )

    mask = _missing_mask(X_arr, missing_values)
    empty = np.where(mask.all(axis=0))[0]
    if len(empty) > 0:
        raise ValidationError(
            f"X: columns {empty.tolist()} have no observed values; "
            f"cannot compute strategy={strategy!r}"
        )

    statistics = np.empty(p, dtype=np.float64)
    for j in range(p):
        observed = X_arr[~mask[:, j], j]
        if strategy == 'mean':
            statistics[j] = np.mean(observed)
        elif strategy == 'median':
            statistics[j] = np.median(observed)
        else:
            statistics[j] = _most_frequent(observed)

    return ImputerModel(statistics=statistics, strategy=strategy, missing_values=missing_values)


def transform(model: ImputerModel, X: ArrayLike) -> NDArray[np.floating[Any]]:
    """
    Replace missing entries column by column with the fitted statistics.

    Returns a new array with the input's shape (1D in, 1D out); X is
    not modified.

    Raises:
        DimensionError: If X's column count differs from the fitted one
    """
    X_arr = check_array(X, 'X', dtype=np.float64)
    was_1d = X_arr.ndim == 1
    X_arr = as_matrix(X_arr, 'X')
    check_n_columns(X_arr, model.n_features, 'X')

    mask = model.missing_mask(X_arr)
    rows, cols = np.nonzero(mask)
    X_arr[rows, cols] = model.statistics[cols]
    return X_arr.ravel() if was_1d else X_arr


def fit_transform(
    X: ArrayLike,
    strategy: Strategy = 'mean',
    *,
    fill_value: float = 0.0,
    missing_values: float = np.nan,
) -> tuple[ImputerModel, NDArray[np.floating[Any]]]:
    """fit() then transform() on the same matrix; returns (model, imputed)."""
    model = fit(X, strategy, fill_value=fill_value, missing_values=missing_values)
    return model, transform(model, X)
