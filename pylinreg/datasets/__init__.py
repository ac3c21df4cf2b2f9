"""
Datasets for the regression walkthrough.

Public API:
    make_linear(n_samples, slope=3.0, intercept=4.0, noise=1.0, seed=None)
    load_housing(source=HOUSING_URL) -> DataSource
    HOUSING_URL, HOUSING_FEATURES, HOUSING_TARGET
"""

from pylinreg.datasets.synthetic import make_linear
from pylinreg.datasets.housing import (
    HOUSING_URL,
    HOUSING_FEATURES,
    HOUSING_TARGET,
    load_housing,
)

__all__ = [
    "make_linear",
    "load_housing",
    "HOUSING_URL",
    "HOUSING_FEATURES",
    "HOUSING_TARGET",
]
