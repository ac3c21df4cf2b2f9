"""
Covariance and correlation matrices.

Columns are variables, rows are observations. Missing values are not
handled here: NaN propagates into every entry it touches, so impute
first (see pylinreg.impute).
"""

from __future__ import annotations

from typing import Any
import numpy as np
from numpy.typing import ArrayLike, NDArray

from pylinreg.core.config import ComputeConfig, resolve_config
from pylinreg.core.validation import (
    check_array,
    check_not_empty,
    check_min_samples,
    as_matrix,
)


def _prepare(
    x: ArrayLike,
    biased: bool,
    config: ComputeConfig | None,
) -> NDArray[np.floating[Any]]:
    cfg = resolve_config(config)
    data = as_matrix(check_array(x, 'x', dtype=cfg.numpy_dtype), 'x')
    check_not_empty(data, 'x')
    if not biased:
        check_min_samples(data, 2, 'x (unbiased estimate)')
    return data


def _covariance(data: NDArray[np.floating[Any]], biased: bool) -> NDArray[np.floating[Any]]:
    n = data.shape[0]
    centered = data - data.mean(axis=0)
    divisor = n if biased else n - 1
    return (centered.T @ centered) / data.dtype.type(divisor)


def covariance_matrix(
    x: ArrayLike,
    *,
    biased: bool = True,
    config: ComputeConfig | None = None,
) -> NDArray[np.floating[Any]]:
    """
    Covariance matrix of the columns of x.

    Parameters
    ----------
    x : array-like
        (n, p) data matrix; 1D input is a single variable.
    biased : bool
        True divides by n (maximum likelihood estimate), False by n - 1
        (Bessel-corrected, R's cov()).
    config : ComputeConfig, optional
        Precision of the computation.

    Returns
    -------
    (p, p) symmetric matrix.

    Raises
    ------
    EmptyInputError
        If x has no rows.
    ValidationError
        If biased=False and x has fewer than 2 rows.
    """
    data = _prepare(x, biased, config)
    return _covariance(data, biased)


def correlation_matrix(
    x: ArrayLike,
    *,
    biased: bool = True,
    config: ComputeConfig | None = None,
) -> NDArray[np.floating[Any]]:
    """
    Pearson correlation matrix of the columns of x.

    The n vs n - 1 divisor cancels in the ratio, so `biased` only
    affects which sample sizes are accepted. A zero-variance column
    has NaN correlations with every column, itself included.

    Parameters
    ----------
    x : array-like
        (n, p) data matrix.
    biased : bool
        Divisor of the underlying covariance estimate.
    config : ComputeConfig, optional
        Precision of the computation.

    Returns
    -------
    (p, p) symmetric matrix with ones on the diagonal (for
    non-constant columns) and entries in [-1, 1].
    """
    data = _prepare(x, biased, config)
    cov = _covariance(data, biased)
    sd = np.sqrt(np.diag(cov))

    with np.errstate(divide='ignore', invalid='ignore'):
        cor = cov / np.outer(sd, sd)
    cor = np.where(np.outer(sd, sd) > 0, cor, np.nan)

    # rounding can push |r| just past 1
    cor = np.clip(cor, -1.0, 1.0)
    diag = np.arange(cor.shape[0])
    cor[diag, diag] = np.where(sd > 0, 1.0, np.nan)
    return cor
