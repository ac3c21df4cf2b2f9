"""
Exception hierarchy for PyLinReg.

Everything raised on purpose by this package derives from PyLinRegError,
so `except PyLinRegError` separates bad input and failed factorizations
from ordinary Python bugs.

Conventions:
    - Messages name the parameter and show the value that was rejected
    - Numerical failures keep their diagnostics as attributes

The names used throughout the regression documentation
(DimensionMismatch, EmptyInput, NumericInstability) are aliases of the
classes defined here.
"""


class PyLinRegError(Exception):
    """Base exception for all PyLinReg errors."""
    pass


class ValidationError(PyLinRegError):
    """
    Input validation failed.

    Raised at the public boundary, before any arithmetic.
    """
    pass


class DimensionError(ValidationError):
    """
    Shapes disagree.

    X rows vs len(y), a predict() matrix with the wrong column count,
    or an array with the wrong number of dimensions.
    """
    pass


class EmptyInputError(ValidationError):
    """
    No samples were supplied.

    Raised when an operation that estimates something from data
    receives zero observations.
    """
    pass


class NumericalError(PyLinRegError):
    """
    Base class for failures inside the arithmetic itself.
    """
    pass


class NumericalInstabilityError(NumericalError):
    """
    Matrix factorization failed or produced non-finite output.

    Raised when the singular value decomposition behind the
    pseudo-inverse does not converge, or when it returns NaN/Inf
    singular values. NaN in the inputs is never sanitized, so it
    surfaces here.

    Attributes:
        matrix_name: Which matrix failed to factor (usually 'X')
        condition_number: s_max / s_min when it could be computed
        rank: Numerical rank when it could be computed
    """

    def __init__(
        self,
        message: str,
        matrix_name: str | None = None,
        condition_number: float | None = None,
        rank: int | None = None,
    ):
        super().__init__(message)
        self.matrix_name = matrix_name
        self.condition_number = condition_number
        self.rank = rank


# Domain names
DimensionMismatch = DimensionError
EmptyInput = EmptyInputError
NumericInstability = NumericalInstabilityError
