"""
Singular value decomposition and pseudo-inverse solves.

Provides a consistent SVD interface across CPU (LAPACK via SciPy) and
GPU (PyTorch). The least squares solve never forms X'X: it applies the
Moore-Penrose pseudo-inverse built from the thin SVD,

    X = U diag(s) V'
    X+ = V diag(1/s_i for s_i > cutoff, else 0) U'

which is well defined for rank-deficient and all-zero X and yields the
minimum-norm solution among all least squares minimizers.
"""

from dataclasses import dataclass
from typing import Any, TYPE_CHECKING
import numpy as np
from numpy.typing import NDArray

from pylinreg.core.exceptions import NumericalInstabilityError

if TYPE_CHECKING:
    import torch


@dataclass(frozen=True)
class SVDResult:
    """
    Result of a thin singular value decomposition.

    Attributes:
        U: Left singular vectors (n x k), k = min(n, p)
        s: Singular values in descending order (k,)
        Vt: Right singular vectors, transposed (k x p)
        rank: Number of singular values above the cutoff
        cutoff: Absolute threshold used to determine rank
    """
    U: NDArray[np.floating[Any]]
    s: NDArray[np.floating[Any]]
    Vt: NDArray[np.floating[Any]]
    rank: int
    cutoff: float

    @property
    def condition_number(self) -> float:
        """Ratio of largest to smallest singular value (inf if singular)."""
        if self.s.size == 0 or self.s[-1] == 0:
            return float('inf')
        return float(self.s[0] / self.s[-1])


def _numerical_rank(s: NDArray[np.floating[Any]], rcond: float) -> tuple[int, float]:
    if s.size == 0 or s[0] <= 0:
        return 0, 0.0
    cutoff = float(rcond * s[0])
    return int(np.sum(s > cutoff)), cutoff


def _empty_svd(X: NDArray[np.floating[Any]]) -> SVDResult:
    n, p = X.shape
    return SVDResult(
        U=np.zeros((n, 0), dtype=X.dtype),
        s=np.zeros(0, dtype=X.dtype),
        Vt=np.zeros((0, p), dtype=X.dtype),
        rank=0,
        cutoff=0.0,
    )


def svd_cpu(X: NDArray[np.floating[Any]], rcond: float) -> SVDResult:
    """
    Thin SVD using LAPACK (via SciPy).

    Tries the divide-and-conquer driver (gesdd) first and falls back to
    the slower but more robust QR-iteration driver (gesvd) when it does
    not converge.

    Args:
        X: Matrix to decompose (n x p)
        rcond: Relative cutoff; singular values <= rcond * s_max count as zero

    Returns:
        SVDResult with U, s, Vt in X's dtype and the numerical rank

    Raises:
        NumericalInstabilityError: If neither driver converges, or the
            singular values are not finite (e.g. NaN in X)
    """
    from scipy.linalg import svd, LinAlgError

    if X.size == 0:
        return _empty_svd(X)

    # LAPACK behaviour on NaN input is undefined (garbage or a hang)
    if not np.all(np.isfinite(X)):
        raise NumericalInstabilityError(
            f"cannot factor X with {int(np.sum(~np.isfinite(X)))} non-finite entries; "
            f"impute missing values before fitting.",
            matrix_name='X',
        )

    try:
        U, s, Vt = svd(X, full_matrices=False, check_finite=False, lapack_driver='gesdd')
    except LinAlgError:
        try:
            U, s, Vt = svd(X, full_matrices=False, check_finite=False, lapack_driver='gesvd')
        except LinAlgError as e:
            raise NumericalInstabilityError(
                f"SVD did not converge for X with shape {X.shape}: {e}",
                matrix_name='X',
            ) from e

    if not np.all(np.isfinite(s)):
        raise NumericalInstabilityError(
            f"SVD produced non-finite singular values for X with shape {X.shape}",
            matrix_name='X',
        )

    rank, cutoff = _numerical_rank(s, rcond)
    return SVDResult(U=U, s=s, Vt=Vt, rank=rank, cutoff=cutoff)


def pinv_apply(svd_result: SVDResult, y: NDArray[np.floating[Any]]) -> NDArray[np.floating[Any]]:
    """
    Compute X+ y from a precomputed SVD of X.

    Only the leading `rank` singular triplets contribute; the rest are
    the null space directions a minimum-norm solution leaves at zero.
    """
    r = svd_result.rank
    p = svd_result.Vt.shape[1]
    if r == 0:
        return np.zeros(p, dtype=y.dtype)
    Uty = svd_result.U[:, :r].T @ y
    return svd_result.Vt[:r].T @ (Uty / svd_result.s[:r])


def pinv_solve_cpu(
    X: NDArray[np.floating[Any]],
    y: NDArray[np.floating[Any]],
    rcond: float,
) -> tuple[NDArray[np.floating[Any]], SVDResult]:
    """
    Minimum-norm least squares solution w = X+ y (CPU).

    Args:
        X: Design matrix (n x p), any rank
        y: Response vector (n,)
        rcond: Relative singular value cutoff

    Returns:
        (w, svd_result) where w has shape (p,)
    """
    svd_result = svd_cpu(X, rcond)
    return pinv_apply(svd_result, y), svd_result


def svd_gpu(X: 'torch.Tensor', rcond: float) -> SVDResult:
    """
    Thin SVD using PyTorch.

    Args:
        X: Tensor (n x p), already on the target device
        rcond: Relative singular value cutoff

    Returns:
        SVDResult with NumPy arrays (moved to CPU)

    Raises:
        NumericalInstabilityError: If the factorization fails or the
            singular values are not finite
    """
    import torch

    if X.numel() == 0:
        return _empty_svd(X.cpu().numpy())

    if not bool(torch.isfinite(X).all()):
        raise NumericalInstabilityError(
            "cannot factor X with non-finite entries; impute missing values before fitting.",
            matrix_name='X',
        )

    try:
        U, s, Vt = torch.linalg.svd(X, full_matrices=False)
    except NotImplementedError:
        # some MPS builds lack the SVD kernel
        U, s, Vt = torch.linalg.svd(X.cpu(), full_matrices=False)
    except RuntimeError as e:
        raise NumericalInstabilityError(
            f"SVD did not converge on {X.device} for X with shape {tuple(X.shape)}: {e}",
            matrix_name='X',
        ) from e

    s_np = s.cpu().numpy()
    if not np.all(np.isfinite(s_np)):
        raise NumericalInstabilityError(
            f"SVD produced non-finite singular values for X with shape {tuple(X.shape)}; "
            f"impute missing values before fitting.",
            matrix_name='X',
        )

    rank, cutoff = _numerical_rank(s_np, rcond)
    return SVDResult(
        U=U.cpu().numpy(),
        s=s_np,
        Vt=Vt.cpu().numpy(),
        rank=rank,
        cutoff=cutoff,
    )

