"""
pytest configuration and shared fixtures.
"""

import pytest
import numpy as np


@pytest.fixture
def rng():
    """Seeded random number generator for reproducible tests."""
    return np.random.default_rng(42)


@pytest.fixture
def simple_regression_data(rng):
    """Three features, known weights and intercept, low noise."""
    n, p = 100, 3
    X = rng.standard_normal((n, p))
    beta_true = np.array([1.0, -2.0, 0.5])
    intercept_true = 1.5
    y = X @ beta_true + intercept_true + rng.standard_normal(n) * 0.1
    return X, y, beta_true, intercept_true


@pytest.fixture
def exact_line():
    """Three points on y = 3x + 4."""
    X = np.array([[0.0], [1.0], [2.0]])
    y = np.array([4.0, 7.0, 10.0])
    return X, y


@pytest.fixture
def duplicate_column_data(rng):
    """Two identical feature columns (rank-deficient design)."""
    n = 50
    x = rng.standard_normal(n)
    X = np.column_stack([x, x])
    y = 2.0 * x + 1.0
    return X, y


@pytest.fixture
def collinear_data(rng):
    """x3 = x1 + x2 exactly, noisy response."""
    n = 100
    x1 = rng.standard_normal(n)
    x2 = rng.standard_normal(n)
    X = np.column_stack([x1, x2, x1 + x2])
    y = x1 - x2 + rng.standard_normal(n) * 0.1
    return X, y
