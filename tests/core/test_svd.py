"""
Tests for the SVD and pseudo-inverse kernels.
"""

import pytest
import numpy as np

from pylinreg.core.compute.linalg import SVDResult, pinv_apply, pinv_solve_cpu, svd_cpu
from pylinreg.core.exceptions import NumericalInstabilityError

EPS = np.finfo(np.float64).eps


class TestSVDCPU:

    def test_reconstructs_matrix(self, rng):
        X = rng.standard_normal((20, 4))
        res = svd_cpu(X, 20 * EPS)
        np.testing.assert_allclose(res.U @ np.diag(res.s) @ res.Vt, X, atol=1e-12)

    def test_thin_shapes(self, rng):
        res = svd_cpu(rng.standard_normal((20, 4)), 20 * EPS)
        assert res.U.shape == (20, 4)
        assert res.s.shape == (4,)
        assert res.Vt.shape == (4, 4)

    def test_full_rank(self, rng):
        assert svd_cpu(rng.standard_normal((20, 4)), 20 * EPS).rank == 4

    def test_duplicate_column_rank(self, rng):
        x = rng.standard_normal(20)
        assert svd_cpu(np.column_stack([x, x, np.ones(20)]), 1e-10).rank == 2

    def test_all_zero(self):
        res = svd_cpu(np.zeros((5, 3)), 5 * EPS)
        assert res.rank == 0
        assert res.cutoff == 0.0
        assert res.condition_number == float('inf')

    def test_empty(self):
        res = svd_cpu(np.zeros((5, 0)), 5 * EPS)
        assert res.rank == 0
        assert res.s.shape == (0,)
        assert res.Vt.shape == (0, 0)

    def test_cutoff_is_relative(self, rng):
        X = rng.standard_normal((10, 3))
        res = svd_cpu(X, 1e-3)
        assert res.cutoff == pytest.approx(1e-3 * res.s[0])

    def test_large_rcond_truncates(self):
        X = np.diag([10.0, 1.0, 0.01])
        assert svd_cpu(X, 0.05).rank == 2

    def test_condition_number(self):
        res = svd_cpu(np.diag([4.0, 2.0]), 2 * EPS)
        assert res.condition_number == pytest.approx(2.0)

    def test_float32_preserved(self, rng):
        X = rng.standard_normal((10, 3)).astype(np.float32)
        res = svd_cpu(X, 10 * np.finfo(np.float32).eps)
        assert res.s.dtype == np.float32

    @pytest.mark.parametrize('bad', [np.nan, np.inf])
    def test_non_finite_raises(self, rng, bad):
        X = rng.standard_normal((10, 3))
        X[2, 1] = bad
        with pytest.raises(NumericalInstabilityError, match="non-finite") as excinfo:
            svd_cpu(X, 10 * EPS)
        assert excinfo.value.matrix_name == 'X'

    def test_input_not_modified(self, rng):
        X = rng.standard_normal((10, 3))
        before = X.copy()
        svd_cpu(X, 10 * EPS)
        np.testing.assert_array_equal(X, before)


class TestPinvSolve:

    def test_matches_numpy_pinv(self, rng):
        X = rng.standard_normal((30, 5))
        y = rng.standard_normal(30)
        w, _ = pinv_solve_cpu(X, y, 30 * EPS)
        np.testing.assert_allclose(w, np.linalg.pinv(X) @ y, atol=1e-10)

    def test_square_system_exact(self):
        X = np.array([[2.0, 0.0], [0.0, 4.0]])
        w, _ = pinv_solve_cpu(X, np.array([2.0, 8.0]), 2 * EPS)
        np.testing.assert_allclose(w, [1.0, 2.0])

    def test_zero_rank_gives_zeros(self):
        res = svd_cpu(np.zeros((4, 3)), 4 * EPS)
        w = pinv_apply(res, np.arange(4.0))
        np.testing.assert_array_equal(w, np.zeros(3))

    def test_min_norm_for_duplicates(self):
        x = np.array([1.0, 2.0, 3.0])
        X = np.column_stack([x, x])
        w, res = pinv_solve_cpu(X, 4 * x, 1e-10)
        assert res.rank == 1
        np.testing.assert_allclose(w, [2.0, 2.0], atol=1e-12)

    def test_underdetermined(self, rng):
        X = rng.standard_normal((3, 6))
        y = rng.standard_normal(3)
        w, res = pinv_solve_cpu(X, y, 6 * EPS)
        assert res.rank == 3
        np.testing.assert_allclose(X @ w, y, atol=1e-10)

    def test_result_type(self, rng):
        _, res = pinv_solve_cpu(rng.standard_normal((5, 2)), rng.standard_normal(5), 5 * EPS)
        assert isinstance(res, SVDResult)
