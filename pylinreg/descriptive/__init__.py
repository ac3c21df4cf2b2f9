"""
Descriptive statistics used to explore features before regression.

Public API:
    covariance_matrix(x, biased=True)   - (p, p) covariance
    correlation_matrix(x, biased=True)  - (p, p) Pearson correlation
"""

from pylinreg.descriptive.solvers import covariance_matrix, correlation_matrix

__all__ = [
    "covariance_matrix",
    "correlation_matrix",
]
