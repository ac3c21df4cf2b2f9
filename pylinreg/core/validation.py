"""
Input checks shared by every public entry point.

Each check either returns quietly or raises with the parameter name and
the offending value in the message. Nothing is repaired: NaN is left in
place, shapes are never guessed beyond the two documented promotions
(vector -> single column in as_matrix, single column -> vector in
as_vector), and inputs are always copied before anything else touches
them.
"""

import numpy as np
from numpy.typing import ArrayLike, NDArray
from typing import Any

from pylinreg.core.exceptions import ValidationError, DimensionError, EmptyInputError


def check_array(
    array: ArrayLike,
    name: str,
    dtype: np.dtype | type | None = None,
) -> NDArray[np.floating[Any]]:
    """
    Convert an array-like to a fresh floating point array.

    Args:
        array: Nested lists, a numpy array, a pandas column, ...
        name: Parameter name used in error messages
        dtype: Floating dtype to convert to. When None, integer and
            bool input becomes float64 and float input keeps its width.

    Returns:
        A copy; the caller's buffer is never aliased

    Raises:
        ValidationError: Ragged, object, string or complex input
    """
    try:
        arr = np.asarray(array)
    except (ValueError, TypeError) as e:
        raise ValidationError(f"{name}: cannot convert to array: {e}") from e

    kind = arr.dtype.kind
    if kind == 'O':
        raise ValidationError(
            f"{name}: converted to object dtype, indicating mixed types or non-numeric data"
        )
    if kind == 'c':
        raise ValidationError(f"{name}: complex dtype {arr.dtype}, expected real data")
    if kind not in 'biuf':
        raise ValidationError(
            f"{name}: non-numeric dtype {arr.dtype}, expected numeric data"
        )

    if dtype is None:
        dtype = arr.dtype if kind == 'f' else np.float64
    return np.array(arr, dtype=dtype, copy=True)


def check_finite(array: NDArray[np.floating[Any]], name: str) -> None:
    """
    Raises:
        ValidationError: If any entry is NaN or +/-Inf
    """
    bad = ~np.isfinite(array)
    if bad.any():
        n_nan = int(np.isnan(array).sum())
        raise ValidationError(
            f"{name}: contains non-finite values ({n_nan} NaN, {int(bad.sum()) - n_nan} Inf)"
        )


def _require_ndim(array: NDArray[np.floating[Any]], ndim: int, name: str) -> None:
    if array.ndim != ndim:
        raise DimensionError(
            f"{name}: expected {ndim}D array, got {array.ndim}D with shape {array.shape}"
        )


def as_matrix(array: NDArray[np.floating[Any]], name: str) -> NDArray[np.floating[Any]]:
    """
    Promote a 1D array to a single-column matrix; leave 2D arrays alone.

    Raises:
        DimensionError: If array is neither 1D nor 2D
    """
    if array.ndim == 1:
        return array.reshape(-1, 1)
    _require_ndim(array, 2, name)
    return array


def as_vector(array: NDArray[np.floating[Any]], name: str) -> NDArray[np.floating[Any]]:
    """
    Flatten an (n, 1) column to shape (n,); leave 1D arrays alone.

    Raises:
        DimensionError: If array is not 1D or a single column
    """
    if array.ndim == 2 and array.shape[1] == 1:
        return array[:, 0]
    _require_ndim(array, 1, name)
    return array


def check_consistent_length(
    *arrays: NDArray[np.floating[Any]],
    names: tuple[str, ...]
) -> None:
    """
    All arrays must agree on their first dimension.

    Raises:
        ValueError: If names and arrays differ in count (caller bug)
        DimensionError: If the row counts differ
    """
    if len(names) != len(arrays):
        raise ValueError(
            f"check_consistent_length: got {len(arrays)} arrays but {len(names)} names"
        )
    rows = [a.shape[0] for a in arrays]
    if any(r != rows[0] for r in rows[1:]):
        listing = ", ".join(f"{n}={r}" for n, r in zip(names, rows))
        raise DimensionError(f"Inconsistent lengths: {listing}")


def check_n_columns(X: NDArray[np.floating[Any]], expected: int, name: str) -> None:
    """
    Raises:
        DimensionError: If X does not have exactly `expected` columns
    """
    if X.shape[1] != expected:
        raise DimensionError(
            f"{name}: expected {expected} columns, got {X.shape[1]} (shape {X.shape})"
        )


def check_not_empty(array: NDArray[np.floating[Any]], name: str) -> None:
    """
    Raises:
        EmptyInputError: If array has zero rows
    """
    if array.shape[0] == 0:
        raise EmptyInputError(f"{name}: requires at least 1 sample, got 0")


def check_min_samples(array: NDArray[np.floating[Any]], min_samples: int, name: str) -> None:
    """
    Raises:
        ValidationError: If array has fewer than min_samples rows
    """
    if array.shape[0] < min_samples:
        raise ValidationError(
            f"{name}: requires at least {min_samples} samples, got {array.shape[0]}"
        )


def check_nonnegative(array: NDArray[np.floating[Any]], name: str) -> None:
    """
    Verify all entries are finite and >= 0 (sample weights).

    Raises:
        ValidationError: If any entry is negative or non-finite
    """
    check_finite(array, name)
    negative = np.flatnonzero(array < 0)
    if negative.size:
        raise ValidationError(
            f"{name}: must be non-negative, found {negative.size} negative "
            f"entries (first at index {int(negative[0])})"
        )
