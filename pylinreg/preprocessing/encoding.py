"""
Ordinal encoding of the housing dataset's ocean_proximity label.

The category set is closed and known in advance, so the mapping is a
fixed enumeration rather than something learned from the data. Codes
follow the alphabetical order of the labels.
"""

from __future__ import annotations

from enum import IntEnum
from typing import Iterable
import numpy as np
from numpy.typing import NDArray

from pylinreg.core.exceptions import ValidationError


class OceanProximity(IntEnum):
    """Distance-to-coast category of a housing district."""

    LESS_THAN_1H_OCEAN = 0, "<1H OCEAN"
    INLAND = 1, "INLAND"
    ISLAND = 2, "ISLAND"
    NEAR_BAY = 3, "NEAR BAY"
    NEAR_OCEAN = 4, "NEAR OCEAN"

    def __new__(cls, code: int, label: str):
        member = int.__new__(cls, code)
        member._value_ = code
        member.label = label
        return member

    @classmethod
    def from_label(cls, label: str) -> OceanProximity:
        """
        Look up a category by its label as written in the CSV.

        Raises:
            ValidationError: If the label is not one of the five categories
        """
        if isinstance(label, str):
            key = label.strip()
            for member in cls:
                if member.label == key:
                    return member
        raise ValidationError(
            f"ocean_proximity: unknown category {label!r}; expected one of "
            f"{[m.label for m in cls]}"
        )


def encode_ocean_proximity(values: Iterable[str]) -> NDArray[np.float64]:
    """
    Map ocean_proximity labels to their ordinal codes.

    Returns a float64 vector so it can sit next to the numeric columns
    of a design matrix.

    Raises:
        ValidationError: On any unknown or missing label
    """
    return np.array(
        [int(OceanProximity.from_label(v)) for v in values],
        dtype=np.float64,
    )
