"""
Tests for per-column imputation.
"""

import dataclasses

import pytest
import numpy as np

from pylinreg import impute
from pylinreg.core.exceptions import DimensionError, EmptyInputError, ValidationError
from pylinreg.impute import ImputerModel


@pytest.fixture
def with_missing():
    return np.array([
        [1.0, 10.0],
        [np.nan, 20.0],
        [3.0, np.nan],
        [3.0, 60.0],
    ])


class TestFit:

    def test_mean(self, with_missing):
        model = impute.fit(with_missing, 'mean')
        np.testing.assert_allclose(model.statistics, [7.0 / 3.0, 30.0])

    def test_median(self, with_missing):
        model = impute.fit(with_missing, 'median')
        np.testing.assert_allclose(model.statistics, [3.0, 20.0])

    def test_most_frequent(self, with_missing):
        model = impute.fit(with_missing, 'most_frequent')
        np.testing.assert_allclose(model.statistics[0], 3.0)

    def test_most_frequent_tie_smallest(self, with_missing):
        # column 1 has 10, 20, 60 once each
        model = impute.fit(with_missing, 'most_frequent')
        assert model.statistics[1] == 10.0

    def test_constant(self, with_missing):
        model = impute.fit(with_missing, 'constant', fill_value=-1.0)
        np.testing.assert_array_equal(model.statistics, [-1.0, -1.0])

    def test_default_strategy_is_mean(self, with_missing):
        assert impute.fit(with_missing).strategy == 'mean'

    def test_unknown_strategy(self, with_missing):
        with pytest.raises(ValidationError, match="strategy"):
            impute.fit(with_missing, 'mode')

    def test_all_missing_column(self):
        X = np.array([[1.0, np.nan], [2.0, np.nan]])
        with pytest.raises(ValidationError, match=r"columns \[1\]"):
            impute.fit(X, 'median')

    def test_all_missing_ok_for_constant(self):
        X = np.array([[np.nan], [np.nan]])
        assert impute.fit(X, 'constant').statistics[0] == 0.0

    def test_empty(self):
        with pytest.raises(EmptyInputError):
            impute.fit(np.zeros((0, 2)))

    def test_inf_counts_as_missing(self):
        model = impute.fit(np.array([[1.0], [np.inf], [3.0]]), 'mean')
        assert model.statistics[0] == pytest.approx(2.0)

    def test_custom_marker(self):
        X = np.array([[1.0], [-999.0], [5.0]])
        model = impute.fit(X, 'mean', missing_values=-999.0)
        assert model.statistics[0] == pytest.approx(3.0)

    def test_input_not_modified(self, with_missing):
        before = with_missing.copy()
        impute.fit_transform(with_missing, 'median')
        np.testing.assert_array_equal(with_missing, before)


class TestTransform:

    def test_fills_missing_only(self, with_missing):
        model = impute.fit(with_missing, 'median')
        out = impute.transform(model, with_missing)
        np.testing.assert_array_equal(out, [
            [1.0, 10.0],
            [3.0, 20.0],
            [3.0, 20.0],
            [3.0, 60.0],
        ])

    def test_no_missing_left(self, with_missing):
        _, out = impute.fit_transform(with_missing, 'mean')
        assert np.all(np.isfinite(out))

    def test_fit_on_one_apply_to_other(self, with_missing):
        model = impute.fit(with_missing, 'median')
        other = np.array([[np.nan, np.nan]])
        np.testing.assert_array_equal(impute.transform(model, other), [[3.0, 20.0]])

    def test_one_dimensional_roundtrip_shape(self):
        model = impute.fit([1.0, np.nan, 3.0], 'mean')
        out = impute.transform(model, [np.nan, 5.0])
        assert out.shape == (2,)
        np.testing.assert_array_equal(out, [2.0, 5.0])

    def test_column_mismatch(self, with_missing):
        model = impute.fit(with_missing)
        with pytest.raises(DimensionError):
            impute.transform(model, np.zeros((2, 3)))

    def test_fit_transform_returns_model(self, with_missing):
        model, _ = impute.fit_transform(with_missing, 'constant', fill_value=7.0)
        assert isinstance(model, ImputerModel)
        assert model.strategy == 'constant'


class TestImputerModel:

    def test_read_only(self, with_missing):
        model = impute.fit(with_missing)
        with pytest.raises(ValueError):
            model.statistics[0] = 0.0
        with pytest.raises(dataclasses.FrozenInstanceError):
            model.strategy = 'median'

    def test_n_features(self, with_missing):
        assert impute.fit(with_missing).n_features == 2

    def test_missing_mask(self):
        model = ImputerModel(statistics=[0.0], strategy='mean')
        mask = model.missing_mask(np.array([[1.0], [np.nan]]))
        np.testing.assert_array_equal(mask, [[False], [True]])
