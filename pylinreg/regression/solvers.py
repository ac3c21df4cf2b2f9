"""
Solver dispatch for regression.

This module provides the fit() and predict() functions (public API) and
backend selection.
"""

from __future__ import annotations

import warnings
from typing import Any
import numpy as np
from numpy.typing import ArrayLike, NDArray

from pylinreg.core.config import ComputeConfig, resolve_config
from pylinreg.core.compute.device import detect_gpu, select_device
from pylinreg.core.exceptions import ValidationError
from pylinreg.core.validation import check_array, check_n_columns, as_matrix
from pylinreg.regression.design import RegressionDesign
from pylinreg.regression.solution import LinearModel, LinearSolution
from pylinreg.regression.backends.cpu import CPUSVDBackend


def fit(
    X: ArrayLike | RegressionDesign,
    y: ArrayLike | None = None,
    fit_intercept: bool = True,
    *,
    sample_weights: ArrayLike | None = None,
    config: ComputeConfig | None = None,
) -> LinearSolution:
    """
    Fit a linear regression model by least squares.

    Solves
        min_w ||y - X_b w||²
    with w = X_b⁺ y, where X_b is X with a leading column of ones when
    fit_intercept is True, and X_b⁺ is the Moore-Penrose pseudo-inverse
    computed from the SVD. When X_b is rank-deficient this is the
    minimum-norm least squares solution; it is never an error.

    Args:
        X: Design matrix (n x p), or a prebuilt RegressionDesign (then
            y must be None). A 1D X is a single feature column.
        y: Response vector (n,). An (n, 1) column is flattened.
        fit_intercept: Prepend a bias column and report its weight as
            the intercept. If False the intercept is 0.
        sample_weights: Optional non-negative per-sample weights (n,)
        config: Backend and precision. None means ComputeConfig().

    Returns:
        LinearSolution with the fitted LinearModel (.model),
        coefficients, intercept, residuals and diagnostics

    Raises:
        DimensionError: If X and y (or sample_weights) disagree on n
        EmptyInputError: If n = 0 or every sample weight is zero
        ValidationError: If inputs are non-numeric, weights negative, or
            a prebuilt design is not in config.dtype
        NumericalInstabilityError: If the SVD does not converge or X
            contains NaN/Inf

    Example:
        >>> from pylinreg.regression import fit, predict
        >>> result = fit([[0.0], [1.0], [2.0]], [4.0, 7.0, 10.0])
        >>> np.round(result.coefficients, 6), round(result.intercept, 6)
        (array([3.]), 4.0)
        >>> np.round(predict(result.model, [[0.83]]), 6)
        array([6.49])
    """
    cfg = resolve_config(config)

    # === Construct Design ===
    # This is the boundary - validate here, trust everywhere else
    if isinstance(X, RegressionDesign):
        if y is not None:
            raise ValidationError("y must be None when X is a RegressionDesign")
        if X.X.dtype != cfg.numpy_dtype:
            raise ValidationError(
                f"design was built in {X.X.dtype} but config.dtype is '{cfg.dtype}'; "
                f"rebuild it with RegressionDesign.build(..., config=config)"
            )
        design = X
    else:
        if y is None:
            raise ValidationError("y required when X is an array")
        design = RegressionDesign.build(
            X, y,
            fit_intercept=fit_intercept,
            sample_weights=sample_weights,
            config=cfg,
        )

    # === Select Backend and Solve ===
    backend_impl = _get_backend(cfg)
    result = backend_impl.solve(design)

    # === Wrap and Return ===
    model = LinearModel(
        coefficients=result.params.coefficients,
        intercept=result.params.intercept,
        fit_intercept=design.fit_intercept,
    )
    return LinearSolution(_result=result, _design=design, _model=model)


def predict(
    model: LinearModel | LinearSolution,
    X_new: ArrayLike,
    *,
    config: ComputeConfig | None = None,
) -> NDArray[np.floating[Any]]:
    """
    Predict responses for new samples.

        y_pred = X_new @ coefficients + intercept

    Pure function: neither the model nor X_new is modified. NaN in X_new
    propagates to the corresponding predictions.

    Args:
        model: A fitted LinearModel, or the LinearSolution from fit()
        X_new: (m x p) matrix with p = len(model.coefficients). A 1D
            X_new is a single feature column.
        config: Precision for the computation. None means the
            precision the model was fitted in.

    Returns:
        Predictions, shape (m,)

    Raises:
        DimensionError: If X_new does not have len(coefficients) columns
        ValidationError: If model is not a LinearModel/LinearSolution
    """
    if isinstance(model, LinearSolution):
        model = model.model
    if not isinstance(model, LinearModel):
        raise ValidationError(
            f"model: expected LinearModel or LinearSolution, got {type(model).__name__}"
        )

    dtype = model.dtype if config is None else resolve_config(config).numpy_dtype
    X_arr = as_matrix(check_array(X_new, 'X_new', dtype=dtype), 'X_new')
    check_n_columns(X_arr, model.n_features, 'X_new')

    coef = model.coefficients.astype(dtype, copy=False)
    return X_arr @ coef + dtype.type(model.intercept)


def _get_backend(config: ComputeConfig):
    """
    Select and instantiate the appropriate backend.

    Args:
        config: The caller's compute configuration

    Returns:
        Backend instance ready to solve

    Raises:
        RuntimeError: If 'gpu' requested but unavailable
    """
    if config.backend == 'cpu':
        return CPUSVDBackend(config)

    if config.backend == 'gpu':
        device = select_device('gpu')
        from pylinreg.regression.backends.gpu import GPUSVDBackend
        return GPUSVDBackend(device, config)

    # auto: prefer GPU if one is usable in the requested precision
    device = detect_gpu()
    if device is None:
        return CPUSVDBackend(config)
    if config.dtype == 'float64' and not device.supports_fp64:
        warnings.warn(
            f"{device} has no float64 support; falling back to CPU",
            RuntimeWarning,
            stacklevel=3,
        )
        return CPUSVDBackend(config)
    from pylinreg.regression.backends.gpu import GPUSVDBackend
    return GPUSVDBackend(device, config)
