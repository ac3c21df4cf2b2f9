"""
Regression Design.

Design holds the validated X (design matrix), y (response), the
intercept flag and optional sample weights, all in the precision chosen
for the call. Backends trust a Design; all checking happens in build().
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any
import numpy as np
from numpy.typing import ArrayLike, NDArray

from pylinreg.core.config import ComputeConfig, DEFAULT_CONFIG
from pylinreg.core.datasource import DataSource
from pylinreg.core.exceptions import DimensionError, EmptyInputError
from pylinreg.core.validation import (
    check_array,
    check_finite,
    check_consistent_length,
    check_not_empty,
    check_nonnegative,
    as_matrix,
    as_vector,
)


@dataclass(frozen=True)
class RegressionDesign:
    """
    Validated inputs for one regression fit.

    Immutable after construction. X and y are private copies, so the
    caller's buffers are never aliased or mutated.

    Construction:
        RegressionDesign.build(X, y)                          # from arrays
        RegressionDesign.from_datasource(ds, x=['a'], y='c')  # from a table
    """
    _X: NDArray[np.floating[Any]]
    _y: NDArray[np.floating[Any]]
    _n: int
    _p: int
    _fit_intercept: bool
    _sample_weights: NDArray[np.floating[Any]] | None = None
    _feature_names: tuple[str, ...] | None = None

    @classmethod
    def build(
        cls,
        X: ArrayLike,
        y: ArrayLike,
        *,
        fit_intercept: bool = True,
        sample_weights: ArrayLike | None = None,
        config: ComputeConfig = DEFAULT_CONFIG,
        feature_names: tuple[str, ...] | None = None,
    ) -> RegressionDesign:
        """
        Validate inputs and build a design.

        Shape agreement is checked before emptiness, so (10, 3) vs (9,)
        is a DimensionError even though neither is empty.

        Raises:
            ValidationError: Non-numeric input, negative weights, or
                non-finite values when config.check_finite is set
            DimensionError: X rows != len(y), or weights of wrong length
            EmptyInputError: Zero samples, or sample weights that are all zero
        """
        dtype = config.numpy_dtype
        X_arr = as_matrix(check_array(X, 'X', dtype=dtype), 'X')
        y_arr = as_vector(check_array(y, 'y', dtype=dtype), 'y')

        check_consistent_length(X_arr, y_arr, names=('X', 'y'))
        check_not_empty(X_arr, 'X')

        w_arr = None
        if sample_weights is not None:
            w_arr = as_vector(check_array(sample_weights, 'sample_weights', dtype=dtype),
                              'sample_weights')
            check_consistent_length(X_arr, w_arr, names=('X', 'sample_weights'))
            check_nonnegative(w_arr, 'sample_weights')
            if not np.any(w_arr > 0):
                raise EmptyInputError("sample_weights: all zero, no samples left to fit")

        if config.check_finite:
            check_finite(X_arr, 'X')
            check_finite(y_arr, 'y')

        n, p = X_arr.shape
        if feature_names is not None and len(feature_names) != p:
            raise DimensionError(
                f"feature_names: expected {p} names, got {len(feature_names)}"
            )

        return cls(
            _X=X_arr,
            _y=y_arr,
            _n=n,
            _p=p,
            _fit_intercept=bool(fit_intercept),
            _sample_weights=w_arr,
            _feature_names=feature_names,
        )

    @classmethod
    def from_datasource(
        cls,
        source: DataSource,
        *,
        x: str | list[str] | None = None,
        y: str,
        fit_intercept: bool = True,
        sample_weights: ArrayLike | None = None,
        config: ComputeConfig = DEFAULT_CONFIG,
    ) -> RegressionDesign:
        """
        Build a design from named columns of a DataSource.

        Args:
            source: The DataSource
            x: Predictor column(s). If None, uses all other numeric
               columns in the source's column order.
            y: Response column

        Raises:
            KeyError: Unknown column name
            ValidationError: A requested predictor is not numeric
        """
        if x is None:
            order = source.metadata.get('columns') or sorted(source.keys())
            x_cols = [
                name for name in order
                if name != y and source[name].dtype != object
            ]
        elif isinstance(x, str):
            x_cols = [x]
        else:
            x_cols = list(x)

        return cls.build(
            source.columns(x_cols),
            source.columns(y).ravel(),
            fit_intercept=fit_intercept,
            sample_weights=sample_weights,
            config=config,
            feature_names=tuple(x_cols),
        )

    # === Properties ===

    @property
    def X(self) -> NDArray[np.floating[Any]]:
        """Design matrix (n x p), without the bias column."""
        return self._X

    @property
    def y(self) -> NDArray[np.floating[Any]]:
        """Response vector (n,)."""
        return self._y

    @property
    def n(self) -> int:
        """Number of observations."""
        return self._n

    @property
    def p(self) -> int:
        """Number of features (excluding the intercept)."""
        return self._p

    @property
    def fit_intercept(self) -> bool:
        return self._fit_intercept

    @property
    def sample_weights(self) -> NDArray[np.floating[Any]] | None:
        return self._sample_weights

    @property
    def feature_names(self) -> tuple[str, ...] | None:
        return self._feature_names

    @property
    def n_weights(self) -> int:
        """Length of the solved weight vector: p, plus one for the bias."""
        return self._p + 1 if self._fit_intercept else self._p

    def augmented(self) -> NDArray[np.floating[Any]]:
        """X_b = [1 | X] when fitting an intercept, else X."""
        if not self._fit_intercept:
            return self._X
        ones = np.ones((self._n, 1), dtype=self._X.dtype)
        return np.hstack([ones, self._X])

    def weighted_system(self) -> tuple[NDArray[np.floating[Any]], NDArray[np.floating[Any]]]:
        """
        The (X_b, y) pair the pseudo-inverse is applied to.

        With sample weights w, minimizing sum w_i (y_i - x_i'b)^2 is the
        ordinary problem on rows scaled by sqrt(w_i).
        """
        Xb = self.augmented()
        if self._sample_weights is None:
            return Xb, self._y
        root_w = np.sqrt(self._sample_weights)
        return Xb * root_w[:, None], self._y * root_w

    def split_weights(
        self, w: NDArray[np.floating[Any]]
    ) -> tuple[NDArray[np.floating[Any]], float]:
        """Split a solved weight vector into (coefficients, intercept)."""
        if self._fit_intercept:
            return w[1:], float(w[0])
        return w, 0.0
