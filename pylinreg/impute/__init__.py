"""
Missing value imputation.

Public API:
    fit(X, strategy)            -> ImputerModel
    transform(model, X)         -> ndarray
    fit_transform(X, strategy)  -> (ImputerModel, ndarray)

Example:
    >>> from pylinreg import impute
    >>> model = impute.fit(X_train, 'median')
    >>> X_train = impute.transform(model, X_train)
    >>> X_test = impute.transform(impute.fit(X_test, 'median'), X_test)
"""

from pylinreg.impute.imputer import ImputerModel, fit, transform, fit_transform

__all__ = [
    "ImputerModel",
    "fit",
    "transform",
    "fit_transform",
]
