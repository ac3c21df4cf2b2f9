"""
Post-solve steps shared by the regression backends.
"""

from __future__ import annotations

from typing import Any
import numpy as np
from numpy.typing import NDArray

from pylinreg.core.compute.linalg import SVDResult
from pylinreg.regression.design import RegressionDesign
from pylinreg.regression.solution import LinearParams


def build_params(
    design: RegressionDesign,
    w: NDArray[np.floating[Any]],
    svd_result: SVDResult,
) -> LinearParams:
    """
    Split the solved weights and compute fit statistics on the
    original (unaugmented, unweighted) data.

    With sample weights, rss and tss are the weighted sums of squares,
    so r_squared stays the fraction of weighted variance explained.
    """
    dtype = design.X.dtype
    w = np.asarray(w, dtype=dtype)
    coefficients, intercept = design.split_weights(w)

    fitted_values = design.X @ coefficients + dtype.type(intercept)
    residuals = design.y - fitted_values

    weights = design.sample_weights
    if weights is None:
        rss = float(residuals @ residuals)
        centered = design.y - np.mean(design.y)
        tss = float(centered @ centered)
    else:
        rss = float(np.sum(weights * residuals ** 2))
        total = np.sum(weights)
        y_bar = np.sum(weights * design.y) / total
        tss = float(np.sum(weights * (design.y - y_bar) ** 2))

    return LinearParams(
        coefficients=coefficients,
        intercept=intercept,
        fitted_values=fitted_values,
        residuals=residuals,
        rss=rss,
        tss=tss,
        rank=svd_result.rank,
        singular_values=np.asarray(svd_result.s, dtype=dtype),
    )


def rank_warnings(design: RegressionDesign, rank: int) -> list[str]:
    """Non-fatal diagnostics about the design's numerical rank."""
    expected = design.n_weights
    if rank == 0 and expected > 0:
        return ["Design matrix has rank 0 (all zero); all weights set to zero"]
    if rank < expected:
        return [
            f"Design matrix is rank-deficient (rank={rank}, p={expected}); "
            f"minimum-norm solution returned"
        ]
    return []
