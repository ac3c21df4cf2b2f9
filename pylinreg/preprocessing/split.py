"""
Shuffled train/test split.

Plain random partition of the rows; no stratification.
"""

from __future__ import annotations

import math
from typing import Any
import numpy as np
from numpy.typing import ArrayLike

from pylinreg.core.datasource import DataSource
from pylinreg.core.exceptions import ValidationError, DimensionError, EmptyInputError


def shuffled_indices(n: int, *, seed: int | np.random.Generator | None = None) -> np.ndarray:
    """A permutation of range(n) from a seeded numpy Generator."""
    rng = seed if isinstance(seed, np.random.Generator) else np.random.default_rng(seed)
    return rng.permutation(n)


def _n_test(n: int, test_size: float | int) -> int:
    if isinstance(test_size, (int, np.integer)) and not isinstance(test_size, bool):
        n_test = int(test_size)
    elif isinstance(test_size, float) and 0.0 < test_size < 1.0:
        n_test = math.ceil(test_size * n)
    else:
        raise ValidationError(
            f"test_size: must be a float in (0, 1) or an int, got {test_size!r}"
        )
    if not 0 < n_test < n:
        raise ValidationError(
            f"test_size={test_size!r} with n={n} leaves {n - n_test} training "
            f"and {n_test} test rows; both must be at least 1"
        )
    return n_test


def train_test_split(
    *data: ArrayLike | DataSource,
    test_size: float | int = 0.2,
    seed: int | np.random.Generator | None = None,
) -> list[Any]:
    """
    Shuffle rows once and split every input the same way.

    Args:
        *data: Arrays (split along axis 0) and/or DataSources, all with
            the same number of rows
        test_size: Fraction of rows (float in (0, 1), rounded up) or
            absolute row count (int) for the test part
        seed: Seed or Generator for reproducible shuffling

    Returns:
        [a_train, a_test, b_train, b_test, ...] in input order

    Raises:
        EmptyInputError: No inputs, or inputs with no rows
        DimensionError: Inputs with different row counts, or a scalar input
        ValidationError: test_size leaves an empty part
    """
    if not data:
        raise EmptyInputError("train_test_split: at least one input required")

    items = [d if isinstance(d, DataSource) else np.asarray(d) for d in data]
    for i, item in enumerate(items):
        if not isinstance(item, DataSource) and item.ndim == 0:
            raise DimensionError(
                f"train_test_split: input {i} is a scalar; expected an array with rows"
            )
    lengths = [d.n_observations if isinstance(d, DataSource) else d.shape[0] for d in items]
    if len(set(lengths)) > 1:
        raise DimensionError(f"Inconsistent lengths: {lengths}")
    n = lengths[0]
    if n == 0:
        raise EmptyInputError("train_test_split: inputs have no rows")

    n_test = _n_test(n, test_size)
    order = shuffled_indices(n, seed=seed)
    test_idx, train_idx = order[:n_test], order[n_test:]

    out: list[Any] = []
    for item in items:
        if isinstance(item, DataSource):
            out.extend([item.take(train_idx), item.take(test_idx)])
        else:
            out.extend([item[train_idx], item[test_idx]])
    return out
