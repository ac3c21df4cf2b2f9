"""
California housing dataset (1990 census, one row per block group).

The CSV has nine feature columns and the target median_house_value.
total_bedrooms has missing entries, so impute before fitting.
"""

from __future__ import annotations

from pathlib import Path

from pylinreg.core.datasource import DataSource
from pylinreg.core.exceptions import ValidationError
from pylinreg.preprocessing.encoding import encode_ocean_proximity

HOUSING_URL = (
    "https://raw.githubusercontent.com/ageron/handson-ml2/master/"
    "datasets/housing/housing.csv"
)

HOUSING_FEATURES = (
    "longitude",
    "latitude",
    "housing_median_age",
    "total_rooms",
    "total_bedrooms",
    "population",
    "households",
    "median_income",
    "ocean_proximity",
)

HOUSING_TARGET = "median_house_value"


def load_housing(source: str | Path = HOUSING_URL) -> DataSource:
    """
    Load the housing table with ocean_proximity ordinal-encoded.

    Args:
        source: Local CSV path or http(s) URL. The default downloads
            the CSV once; nothing is cached or retried.

    Returns:
        DataSource with every column in HOUSING_FEATURES plus
        HOUSING_TARGET, all numeric

    Raises:
        ValidationError: If an expected column is absent or a category
            label is unknown
    """
    ds = DataSource.build(str(source) if isinstance(source, Path) else source)

    missing = [c for c in (*HOUSING_FEATURES, HOUSING_TARGET) if c not in ds]
    if missing:
        raise ValidationError(f"housing data is missing columns {missing}")

    return ds.with_column(
        "ocean_proximity", encode_ocean_proximity(ds["ocean_proximity"])
    )
