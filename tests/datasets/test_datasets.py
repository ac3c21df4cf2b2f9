"""
Tests for the synthetic generator and the housing loader.

The housing tests read a small local CSV with the real column layout;
nothing here touches the network.
"""

import numpy as np
import pandas as pd
import pytest

from pylinreg import impute
from pylinreg.core.exceptions import ValidationError
from pylinreg.datasets import (
    HOUSING_FEATURES,
    HOUSING_TARGET,
    HOUSING_URL,
    load_housing,
    make_linear,
)
from pylinreg.regression import fit, predict


class TestMakeLinear:

    def test_shapes(self):
        X, y = make_linear(50, seed=0)
        assert X.shape == (50, 1)
        assert y.shape == (50,)

    def test_x_range(self):
        X, _ = make_linear(500, low=1.0, high=3.0, seed=0)
        assert X.min() >= 1.0
        assert X.max() < 3.0

    def test_noiseless_on_line(self):
        X, y = make_linear(20, slope=-2.0, intercept=0.5, noise=0.0, seed=0)
        np.testing.assert_allclose(y, -2.0 * X[:, 0] + 0.5)

    def test_seeded(self):
        a = make_linear(10, seed=9)
        b = make_linear(10, seed=9)
        np.testing.assert_array_equal(a[1], b[1])

    def test_fit_recovers_line(self):
        X, y = make_linear(2000, noise=0.5, seed=1)
        result = fit(X, y)
        assert result.coefficients[0] == pytest.approx(3.0, abs=0.1)
        assert result.intercept == pytest.approx(4.0, abs=0.1)

    @pytest.mark.parametrize('kwargs', [
        {'n_samples': -1},
        {'noise': -0.1},
        {'low': 2.0, 'high': 2.0},
    ])
    def test_invalid(self, kwargs):
        with pytest.raises(ValidationError):
            make_linear(**kwargs)


@pytest.fixture
def housing_csv(tmp_path):
    rng = np.random.default_rng(0)
    n = 40
    labels = ["<1H OCEAN", "INLAND", "ISLAND", "NEAR BAY", "NEAR OCEAN"]
    df = pd.DataFrame({
        "longitude": rng.uniform(-124, -114, n),
        "latitude": rng.uniform(32, 42, n),
        "housing_median_age": rng.integers(1, 52, n).astype(float),
        "total_rooms": rng.integers(100, 5000, n).astype(float),
        "total_bedrooms": rng.integers(20, 1000, n).astype(float),
        "population": rng.integers(50, 3000, n).astype(float),
        "households": rng.integers(20, 1000, n).astype(float),
        "median_income": rng.uniform(0.5, 15, n),
        "median_house_value": rng.uniform(15000, 500000, n),
        "ocean_proximity": [labels[i % 5] for i in range(n)],
    })
    df.loc[[3, 17], "total_bedrooms"] = np.nan
    path = tmp_path / "housing.csv"
    df.to_csv(path, index=False)
    return path


class TestLoadHousing:

    def test_columns(self, housing_csv):
        ds = load_housing(housing_csv)
        for name in (*HOUSING_FEATURES, HOUSING_TARGET):
            assert name in ds
        assert ds.n_observations == 40

    def test_ocean_proximity_encoded(self, housing_csv):
        ds = load_housing(housing_csv)
        np.testing.assert_array_equal(ds["ocean_proximity"][:5], [0.0, 1.0, 2.0, 3.0, 4.0])

    def test_all_features_numeric(self, housing_csv):
        X = load_housing(housing_csv).columns(list(HOUSING_FEATURES))
        assert X.shape == (40, 9)
        assert X.dtype == np.float64

    def test_missing_bedrooms_kept_as_nan(self, housing_csv):
        ds = load_housing(housing_csv)
        assert np.isnan(ds["total_bedrooms"]).sum() == 2

    def test_string_path(self, housing_csv):
        assert load_housing(str(housing_csv)).n_observations == 40

    def test_missing_column(self, housing_csv, tmp_path):
        df = pd.read_csv(housing_csv).drop(columns=["median_income"])
        path = tmp_path / "partial.csv"
        df.to_csv(path, index=False)
        with pytest.raises(ValidationError, match="median_income"):
            load_housing(path)

    def test_unknown_category(self, housing_csv, tmp_path):
        df = pd.read_csv(housing_csv)
        df.loc[0, "ocean_proximity"] = "MOUNTAIN"
        path = tmp_path / "bad.csv"
        df.to_csv(path, index=False)
        with pytest.raises(ValidationError, match="MOUNTAIN"):
            load_housing(path)

    def test_default_source_is_url(self):
        assert HOUSING_URL.startswith("https://")
        assert HOUSING_URL.endswith("housing.csv")

    def test_impute_then_fit(self, housing_csv):
        ds = load_housing(housing_csv)
        X = ds.columns(list(HOUSING_FEATURES))
        X = impute.transform(impute.fit(X, "median"), X)
        result = fit(X, ds[HOUSING_TARGET])
        assert result.coefficients.shape == (9,)
        assert np.all(np.isfinite(predict(result, X)))
