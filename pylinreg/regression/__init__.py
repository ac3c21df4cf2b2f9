"""
Ordinary least squares linear regression.

Public API:
    fit(X, y, fit_intercept=True, ...) -> LinearSolution
    predict(model, X_new) -> ndarray

fit() handles:
    - Input validation
    - Design construction (bias column, sample weights)
    - Backend selection from the ComputeConfig
    - Result wrapping

Example:
    >>> from pylinreg.regression import fit, predict
    >>> result = fit(X_train, y_train)
    >>> print(result.summary())
    >>> y_pred = predict(result.model, X_test)
"""

from pylinreg.regression.design import RegressionDesign
from pylinreg.regression.solution import LinearModel, LinearParams, LinearSolution
from pylinreg.regression.solvers import fit, predict

__all__ = [
    "fit",
    "predict",
    "RegressionDesign",
    "LinearModel",
    "LinearParams",
    "LinearSolution",
]
