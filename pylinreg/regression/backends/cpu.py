"""
CPU reference backend for linear regression.

Solves least squares with the Moore-Penrose pseudo-inverse computed from
a LAPACK SVD (through SciPy). Never forms the normal equations, so
collinear and rank-deficient designs still get a finite, minimum-norm
answer instead of an error.
"""

from typing import Any

from pylinreg.core.config import ComputeConfig, DEFAULT_CONFIG
from pylinreg.core.result import Result
from pylinreg.core.compute.timing import Timer
from pylinreg.core.compute.linalg import pinv_solve_cpu
from pylinreg.regression.design import RegressionDesign
from pylinreg.regression.solution import LinearParams
from pylinreg.regression.backends._common import build_params, rank_warnings


class CPUSVDBackend:
    """
    CPU backend using the SVD pseudo-inverse.

    Implements the Backend protocol for RegressionDesign -> LinearParams.
    This is the reference implementation the GPU backend is checked against.
    """

    def __init__(self, config: ComputeConfig = DEFAULT_CONFIG):
        self.config = config

    @property
    def name(self) -> str:
        return 'cpu_svd'

    def solve(self, design: RegressionDesign) -> Result[LinearParams]:
        """
        Solve OLS via the pseudo-inverse.

        Algorithm:
            1. Form X_b = [1 | X] (or X without intercept), rows scaled
               by sqrt(weights) if given
            2. Thin SVD: X_b = U diag(s) V'
            3. w = V diag(1/s) U'y over singular values above the cutoff
            4. Split w into intercept and coefficients, compute residuals

        Raises:
            NumericalInstabilityError: If the SVD fails or X_b is not finite
        """
        timer = Timer()
        timer.start()

        with timer.section('augment'):
            Xb, yw = design.weighted_system()
            rcond = self.config.cutoff(*Xb.shape)

        with timer.section('solve'):
            w, svd_result = pinv_solve_cpu(Xb, yw, rcond)

        with timer.section('statistics'):
            params = build_params(design, w, svd_result)

        timer.stop()

        info: dict[str, Any] = {
            'method': 'svd',
            'rank': svd_result.rank,
            'condition_number': svd_result.condition_number,
            'cutoff': svd_result.cutoff,
            'dtype': str(Xb.dtype),
        }

        return Result(
            params=params,
            info=info,
            timing=timer.result(),
            backend_name=self.name,
            warnings=tuple(rank_warnings(design, svd_result.rank)),
        )
