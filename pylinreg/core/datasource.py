"""
Tabular DataSource for PyLinReg.

DataSource is the "I have a table" abstraction. It doesn't know or care
whether the columns end up in a regression, an imputer or a correlation
plot. It keeps named columns and can materialize any subset of them as
a numeric matrix.

Usage:
    from pylinreg import DataSource

    ds = DataSource.from_arrays(x=x, y=y)
    ds = DataSource.from_file("housing.csv")
    ds = DataSource.from_url("https://example.org/housing.csv")
    ds = DataSource.from_dataframe(df)

    ds.keys()                       # frozenset({'x', 'y'})
    X = ds.columns(['x'])           # (n, 1) float64 matrix
    y = ds['y']
"""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, TYPE_CHECKING
import numpy as np
from numpy.typing import NDArray

from pylinreg.core.exceptions import ValidationError, DimensionError
from pylinreg.core.capabilities import (
    CAPABILITY_MATERIALIZED,
    CAPABILITY_REPEATABLE,
    CAPABILITY_REMOTE,
)

if TYPE_CHECKING:
    import pandas as pd


@dataclass
class DataSource:
    """
    Named-column data container. Domain-agnostic.

    Construct via factory classmethods, not directly.

    Numeric columns are stored as float64 arrays. Non-numeric columns
    (e.g. a categorical label) are kept as object arrays so callers can
    encode them; they cannot be materialized into a matrix until then.
    """
    _data: dict[str, NDArray]
    _capabilities: frozenset[str]
    _metadata: dict[str, Any] = field(default_factory=dict)

    # === Array Access ===

    def keys(self) -> frozenset[str]:
        """Return the names of all available columns."""
        return frozenset(self._data.keys())

    def __getitem__(self, key: str) -> NDArray:
        """
        Access a named column.

        Raises:
            KeyError: If key not found, with a message listing available keys
        """
        if key not in self._data:
            raise KeyError(
                f"DataSource has no column '{key}'. Available: {sorted(self.keys())}"
            )
        return self._data[key]

    def __contains__(self, key: str) -> bool:
        return key in self._data

    def columns(self, names: str | list[str]) -> NDArray[np.float64]:
        """
        Materialize columns into an (n, k) float64 matrix.

        Args:
            names: Column name or ordered list of column names

        Returns:
            Matrix whose j-th column is names[j]. Missing values stay NaN.

        Raises:
            KeyError: If any name is unknown
            ValidationError: If a column is not numeric
        """
        if isinstance(names, str):
            names = [names]
        if not names:
            return np.zeros((self.n_observations, 0), dtype=np.float64)

        arrays = []
        for name in names:
            col = self[name]
            if col.dtype == object or not np.issubdtype(col.dtype, np.number):
                raise ValidationError(
                    f"column '{name}' is not numeric (dtype {col.dtype}); "
                    f"encode it before building a matrix"
                )
            arrays.append(np.asarray(col, dtype=np.float64))
        return np.column_stack(arrays)

    def with_column(self, name: str, values: NDArray) -> DataSource:
        """
        Return a new DataSource with one column added or replaced.

        Raises:
            DimensionError: If values does not have n_observations rows
        """
        values = np.asarray(values)
        if values.shape[0] != self.n_observations:
            raise DimensionError(
                f"column '{name}': expected {self.n_observations} rows, got {values.shape[0]}"
            )
        data = dict(self._data)
        data[name] = _store(values)
        metadata = self.metadata
        if 'columns' in metadata and name not in metadata['columns']:
            metadata['columns'] = [*metadata['columns'], name]
        return DataSource(_data=data, _capabilities=self._capabilities, _metadata=metadata)

    def take(self, indices: NDArray[np.intp]) -> DataSource:
        """Return a new DataSource holding only the given rows, in order."""
        indices = np.asarray(indices, dtype=np.intp)
        data = {name: col[indices] for name, col in self._data.items()}
        metadata = self.metadata
        metadata['n_observations'] = len(indices)
        return DataSource(_data=data, _capabilities=self._capabilities, _metadata=metadata)

    def dataframe(self) -> 'pd.DataFrame':
        """Return the columns as a pandas DataFrame (column order preserved)."""
        import pandas as pd
        order = self._metadata.get('columns') or sorted(self.keys())
        return pd.DataFrame({name: self._data[name] for name in order})

    # === Properties ===

    @property
    def n_observations(self) -> int:
        """Number of rows."""
        return self._metadata.get('n_observations', 0)

    @property
    def metadata(self) -> dict[str, Any]:
        """Source description (origin, column order, path or URL)."""
        return self._metadata.copy()

    def supports(self, capability: str) -> bool:
        """
        Check if this DataSource supports a capability.

        Unknown capabilities return False, never raise.
        """
        return capability in self._capabilities

    # === Factory Methods ===

    @classmethod
    def from_arrays(cls, **named_arrays: NDArray) -> DataSource:
        """
        Construct from NumPy arrays (one keyword per column).

        Raises:
            DimensionError: If the arrays have different lengths or one is a scalar
        """
        storage: dict[str, NDArray] = {}
        n_obs: int | None = None

        for name, arr in named_arrays.items():
            arr = _store(np.asarray(arr))
            if arr.ndim == 0:
                raise DimensionError(
                    f"column '{name}': expected 1D array, got a scalar"
                )
            if n_obs is None:
                n_obs = arr.shape[0]
            elif arr.shape[0] != n_obs:
                raise DimensionError(
                    f"Inconsistent lengths: column '{name}' has {arr.shape[0]} rows, "
                    f"expected {n_obs}"
                )
            storage[name] = arr

        return cls(
            _data=storage,
            _capabilities=frozenset({CAPABILITY_MATERIALIZED, CAPABILITY_REPEATABLE}),
            _metadata={
                'n_observations': n_obs or 0,
                'source': 'arrays',
                'columns': list(storage.keys()),
            },
        )

    @classmethod
    def from_dataframe(
        cls,
        df: 'pd.DataFrame',
        *,
        source_path: str | None = None,
        capabilities: frozenset[str] | None = None,
    ) -> DataSource:
        """Construct from a pandas DataFrame."""
        import pandas as pd

        storage: dict[str, NDArray] = {}
        for col in df.columns:
            series = df[col]
            if pd.api.types.is_numeric_dtype(series) and not pd.api.types.is_bool_dtype(series):
                storage[str(col)] = series.to_numpy(dtype=np.float64, na_value=np.nan)
            else:
                storage[str(col)] = series.to_numpy(dtype=object)

        metadata: dict[str, Any] = {
            'n_observations': len(df),
            'source': 'dataframe',
            'columns': [str(c) for c in df.columns],
        }
        if source_path:
            metadata['source_path'] = source_path

        if capabilities is None:
            capabilities = frozenset({CAPABILITY_MATERIALIZED, CAPABILITY_REPEATABLE})
        return cls(_data=storage, _capabilities=capabilities, _metadata=metadata)

    @classmethod
    def from_file(cls, path: str | Path, *, columns: list[str] | None = None) -> DataSource:
        """
        Construct from a local file (CSV, TSV, NPY).

        For .npy files, `columns` names the columns of the 2D array and
        is required.
        """
        path = Path(path)
        suffix = path.suffix.lower()

        if suffix in ('.csv', '.tsv'):
            import pandas as pd
            sep = '\t' if suffix == '.tsv' else ','
            df = pd.read_csv(path, sep=sep, usecols=columns)
            return cls.from_dataframe(df, source_path=str(path))
        elif suffix == '.npy':
            data = np.load(path)
            if data.ndim == 1:
                data = data.reshape(-1, 1)
            if columns is None:
                columns = [f"x{i}" for i in range(data.shape[1])]
            if len(columns) != data.shape[1]:
                raise DimensionError(
                    f"{path.name}: {data.shape[1]} columns but {len(columns)} names given"
                )
            return cls.from_arrays(**{name: data[:, i] for i, name in enumerate(columns)})
        else:
            raise ValidationError(f"Unknown file format: {suffix}")

    @classmethod
    def from_url(cls, url: str, *, columns: list[str] | None = None) -> DataSource:
        """
        Construct from a remote CSV.

        One-shot fetch through pandas: network errors propagate to the
        caller unchanged and nothing is retried or cached.
        """
        import pandas as pd

        df = pd.read_csv(url, usecols=columns)
        return cls.from_dataframe(
            df,
            source_path=url,
            capabilities=frozenset({
                CAPABILITY_MATERIALIZED, CAPABILITY_REPEATABLE, CAPABILITY_REMOTE,
            }),
        )

    @classmethod
    def build(cls, *args, **kwargs) -> DataSource:
        """
        Convenience factory that dispatches to the appropriate from_* method.

        Examples:
            DataSource.build(x=x, y=y)                 # from_arrays
            DataSource.build("data.csv")               # from_file
            DataSource.build("https://host/data.csv")  # from_url
        """
        if args and isinstance(args[0], str) and args[0].startswith(('http://', 'https://')):
            return cls.from_url(args[0], **kwargs)
        if args and isinstance(args[0], (str, Path)):
            return cls.from_file(args[0], **kwargs)
        return cls.from_arrays(**kwargs)


def _store(values: NDArray) -> NDArray:
    """Numeric columns become float64; everything else stays as objects."""
    if values.dtype != object and np.issubdtype(values.dtype, np.number):
        return values.astype(np.float64)
    if values.dtype == np.bool_:
        return values.astype(np.float64)
    return values.astype(object)
