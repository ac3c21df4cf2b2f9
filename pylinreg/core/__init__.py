"""
Core infrastructure for PyLinReg.

Shared abstractions used by every domain package (regression, impute,
descriptive, metrics).

Key components:
    config: Explicit ComputeConfig (backend, precision, rcond)
    datasource: Tabular DataSource
    result: Generic Result[P] envelope
    exceptions: Exception hierarchy
    validation: Input validators
    compute: Hardware detection, timing, linear algebra kernels
"""

from pylinreg.core.protocols import Backend
from pylinreg.core.result import Result
from pylinreg.core.config import ComputeConfig, DEFAULT_CONFIG
from pylinreg.core.datasource import DataSource
from pylinreg.core.exceptions import (
    PyLinRegError,
    ValidationError,
    DimensionError,
    EmptyInputError,
    NumericalError,
    NumericalInstabilityError,
    DimensionMismatch,
    EmptyInput,
    NumericInstability,
)

__all__ = [
    "Backend",
    "Result",
    "ComputeConfig",
    "DEFAULT_CONFIG",
    "DataSource",
    "PyLinRegError",
    "ValidationError",
    "DimensionError",
    "EmptyInputError",
    "NumericalError",
    "NumericalInstabilityError",
    "DimensionMismatch",
    "EmptyInput",
    "NumericInstability",
]
