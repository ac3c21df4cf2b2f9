"""
PyLinReg: closed-form least squares linear regression for Python.

Fits linear models through the SVD pseudo-inverse (minimum-norm
solutions for rank-deficient designs), with the small toolkit a
regression walkthrough needs around it.

Submodules:
    regression: fit() / predict()
    impute: Per-column missing value imputation
    descriptive: Covariance and correlation matrices
    metrics: Regression error metrics
    preprocessing: Ocean proximity encoding, train/test split
    datasets: Synthetic linear data, California housing loader
"""

__version__ = "0.1.0"

from pylinreg.core.config import ComputeConfig
from pylinreg.core.datasource import DataSource
from pylinreg import regression
from pylinreg import impute
from pylinreg import descriptive
from pylinreg import metrics
from pylinreg import preprocessing
from pylinreg import datasets
from pylinreg.regression import fit, predict

__all__ = [
    "__version__",
    "ComputeConfig",
    "DataSource",
    "fit",
    "predict",
    "regression",
    "impute",
    "descriptive",
    "metrics",
    "preprocessing",
    "datasets",
]
