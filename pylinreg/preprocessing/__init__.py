"""
Preprocessing helpers for the regression walkthrough.

Public API:
    OceanProximity                 - fixed ordinal lookup for a categorical feature
    encode_ocean_proximity(values) - labels -> ordinal codes
    train_test_split(*data, test_size=0.2, seed=None)
    shuffled_indices(n, seed=None)
"""

from pylinreg.preprocessing.encoding import OceanProximity, encode_ocean_proximity
from pylinreg.preprocessing.split import train_test_split, shuffled_indices

__all__ = [
    "OceanProximity",
    "encode_ocean_proximity",
    "train_test_split",
    "shuffled_indices",
]
