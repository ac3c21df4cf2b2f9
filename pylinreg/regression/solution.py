"""
Regression solution types.

Contains the parameter payload computed by backends, the immutable
fitted model consumed by predict(), and the user-facing solution
wrapper.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any
import numpy as np
from numpy.typing import NDArray

from pylinreg.core.result import Result
from pylinreg.core.compute.tolerances import (
    ILL_CONDITIONED_THRESHOLD,
    ToleranceTier,
    select_tolerance,
)
from pylinreg.regression.design import RegressionDesign


@dataclass(frozen=True)
class LinearParams:
    """
    Parameter payload for linear regression.

    This is the immutable data computed by backends.
    """
    coefficients: NDArray[np.floating[Any]]
    intercept: float
    fitted_values: NDArray[np.floating[Any]]
    residuals: NDArray[np.floating[Any]]
    rss: float
    tss: float
    rank: int
    singular_values: NDArray[np.floating[Any]]


@dataclass(frozen=True, eq=False)
class LinearModel:
    """
    A fitted linear model: y = X @ coefficients + intercept.

    Read-only. The coefficient array is a private copy with its
    writeable flag cleared, so one model can serve any number of
    predict() calls concurrently.

    Attributes:
        coefficients: One weight per feature (p,)
        intercept: Constant offset; 0.0 when fitted without a bias term
        fit_intercept: Whether the bias term was estimated
    """
    coefficients: NDArray[np.floating[Any]]
    intercept: float = 0.0
    fit_intercept: bool = True

    def __post_init__(self) -> None:
        coef = np.array(self.coefficients, copy=True)
        if coef.dtype == object or not np.issubdtype(coef.dtype, np.floating):
            coef = coef.astype(np.float64)
        coef = coef.reshape(-1)
        coef.setflags(write=False)
        object.__setattr__(self, 'coefficients', coef)
        object.__setattr__(self, 'intercept', float(self.intercept))

    @property
    def n_features(self) -> int:
        return self.coefficients.shape[0]

    @property
    def dtype(self) -> np.dtype:
        return self.coefficients.dtype

    def __repr__(self) -> str:
        return (
            f"LinearModel(coefficients={np.array2string(self.coefficients, precision=6)}, "
            f"intercept={self.intercept:.6g})"
        )


@dataclass
class LinearSolution:
    """
    User-facing regression results.

    Wraps the backend Result and the fitted LinearModel, and provides
    goodness-of-fit accessors and an R-style summary.
    """
    _result: Result[LinearParams]
    _design: RegressionDesign
    _model: LinearModel

    @property
    def model(self) -> LinearModel:
        """The immutable fitted model, ready for predict()."""
        return self._model

    @property
    def coefficients(self) -> NDArray[np.floating[Any]]:
        return self._model.coefficients

    @property
    def intercept(self) -> float:
        return self._model.intercept

    @property
    def residuals(self) -> NDArray[np.floating[Any]]:
        return self._result.params.residuals

    @property
    def fitted_values(self) -> NDArray[np.floating[Any]]:
        return self._result.params.fitted_values

    @property
    def rss(self) -> float:
        return self._result.params.rss

    @property
    def tss(self) -> float:
        return self._result.params.tss

    @property
    def r_squared(self) -> float:
        if self.tss == 0:
            return 1.0 if self.rss == 0 else 0.0
        return 1.0 - (self.rss / self.tss)

    @property
    def rank(self) -> int:
        """Numerical rank of the (augmented) design matrix."""
        return self._result.params.rank

    @property
    def is_rank_deficient(self) -> bool:
        return self.rank < self._design.n_weights

    @property
    def singular_values(self) -> NDArray[np.floating[Any]]:
        return self._result.params.singular_values

    @property
    def condition_number(self) -> float:
        return self._result.info.get('condition_number', float('nan'))

    @property
    def is_ill_conditioned(self) -> bool:
        """True when cond(X_b) exceeds ILL_CONDITIONED_THRESHOLD."""
        return self.condition_number > ILL_CONDITIONED_THRESHOLD

    def tolerance(self) -> ToleranceTier:
        """Comparison tolerance for this fit's precision and conditioning."""
        return select_tolerance(str(self._design.X.dtype), self.is_ill_conditioned)

    @property
    def info(self) -> dict[str, Any]:
        return self._result.info

    @property
    def timing(self) -> dict[str, float] | None:
        return self._result.timing

    @property
    def backend_name(self) -> str:
        return self._result.backend_name

    @property
    def warnings(self) -> tuple[str, ...]:
        return self._result.warnings

    def summary(self) -> str:
        """Generate R-style summary output."""
        names = self._design.feature_names or tuple(
            f"x[{i}]" for i in range(self._design.p)
        )
        lines = [
            "Linear Regression Results (least squares via pseudo-inverse)",
            "=" * 60,
            f"Observations: {self._design.n}",
            f"Features: {self._design.p}",
            f"Intercept fitted: {self._design.fit_intercept}",
            f"Weighted: {self._design.sample_weights is not None}",
            f"Rank: {self.rank} of {self._design.n_weights}",
            f"Condition number: {self.condition_number:.4g}",
            f"R-squared: {self.r_squared:.6f}",
            f"RSS: {self.rss:.6g}",
            "",
            "Coefficients:",
            "-" * 60,
            f"{'Term':<24} {'Estimate':>16}",
            "-" * 60,
        ]
        if self._design.fit_intercept:
            lines.append(f"{'(Intercept)':<24} {self.intercept:16.6f}")
        for name, coef in zip(names, self.coefficients):
            lines.append(f"{name:<24} {coef:16.6f}")
        lines.append("-" * 60)
        for w in self.warnings:
            lines.append(f"Warning: {w}")
        lines.append(f"Backend: {self.backend_name}")
        if self.timing:
            lines.append(f"Time: {self.timing.get('total_seconds', 0):.4f}s")

        return "\n".join(lines)

    def __repr__(self) -> str:
        return (
            f"LinearSolution(n={self._design.n}, p={self._design.p}, "
            f"rank={self.rank}, r_squared={self.r_squared:.4f})"
        )
