"""
Dataset: the rectangular input every summarizer consumes.

Dataset is the "I have a table" abstraction. Rows are observations,
named columns are variables. It knows which columns are numeric and which
are categorical and how category values are ordered. It doesn't know what
you are going to compute from it.

Usage:
    from pytabstats import Dataset

    ds = Dataset.from_columns({'mpg': [21.0, 22.8], 'cyl': [6, 4]})
    ds = Dataset.from_records([{'mpg': 21.0, 'cyl': 6}, {'mpg': 22.8, 'cyl': 4}])
    ds = Dataset.from_dataframe(df)

    ds.columns        # ('mpg', 'cyl')
    ds.kind('cyl')    # 'numeric'
    ds.categories('cyl')  # (4, 6)

Missing values are None or NaN on input. Numeric columns are stored as
float64 with NaN; categorical columns as object arrays with None.
Stored arrays are read-only, so the caller's data is never mutated and
the dataset can be shared freely.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Mapping, Sequence, TYPE_CHECKING
import numpy as np
from numpy.typing import NDArray

from pytabstats.core.exceptions import (
    ValidationError,
    InvalidColumnError,
    TypeMismatchError,
)
from pytabstats.core.kinds import COLUMN_NUMERIC, COLUMN_CATEGORICAL

if TYPE_CHECKING:
    import pandas as pd


def _is_missing(value: Any) -> bool:
    """None and NaN count as missing."""
    if value is None:
        return True
    if isinstance(value, (float, np.floating)):
        return bool(np.isnan(value))
    return False


def _is_number(value: Any) -> bool:
    return isinstance(value, (bool, int, float, np.number, np.bool_))


def _to_category(value: float) -> int | float:
    """Numeric category value as reported to callers: 4.0 -> 4."""
    value = float(value)
    if value.is_integer():
        return int(value)
    return value


def _classify(name: str, values: Any) -> tuple[str, NDArray]:
    """
    Decide a column's kind and build its read-only storage array.

    Raises:
        TypeMismatchError: If the column mixes numbers and labels, or
            holds values that are neither
        ValidationError: If a numeric column contains infinities
    """
    arr = np.asarray(values) if isinstance(values, np.ndarray) else None

    if arr is not None and (np.issubdtype(arr.dtype, np.number) or arr.dtype == np.bool_):
        if arr.ndim != 1:
            raise ValidationError(
                f"column {name!r}: expected 1D values, got shape {arr.shape}"
            )
        data = arr.astype(np.float64)
    else:
        items = list(values)
        present = [v for v in items if not _is_missing(v)]
        n_numbers = sum(1 for v in present if _is_number(v))
        n_labels = sum(1 for v in present if isinstance(v, str))

        if n_numbers + n_labels != len(present):
            bad = next(v for v in present if not (_is_number(v) or isinstance(v, str)))
            raise TypeMismatchError(
                f"column {name!r}: unsupported value {bad!r} of type "
                f"{type(bad).__name__}; expected numbers or strings",
                column=name,
                actual_kind=type(bad).__name__,
            )
        if n_numbers and n_labels:
            raise TypeMismatchError(
                f"column {name!r}: mixes {n_numbers} numeric and {n_labels} "
                f"string values; columns must be homogeneous",
                column=name,
                actual_kind='mixed',
            )

        if n_labels:
            data = np.empty(len(items), dtype=object)
            for i, v in enumerate(items):
                data[i] = None if _is_missing(v) else v
            data.flags.writeable = False
            return COLUMN_CATEGORICAL, data

        data = np.array(
            [np.nan if _is_missing(v) else float(v) for v in items],
            dtype=np.float64,
        )

    if np.any(np.isinf(data)):
        loc = int(np.where(np.isinf(data))[0][0])
        raise ValidationError(
            f"column {name!r}: contains infinite values (first at row {loc})"
        )
    data.flags.writeable = False
    return COLUMN_NUMERIC, data


@dataclass(frozen=True)
class Dataset:
    """
    Immutable column-oriented table.

    Construct via factory classmethods, not directly.

    Category ordering: each categorical use of a column orders its values
    by the explicit ``levels`` supplied for that column, or, without
    levels, by value (numeric ascending, strings lexicographic).
    Explicit levels only set the order; categories that never occur in
    the data are not reported.
    """
    _data: dict[str, NDArray]
    _kinds: dict[str, str]
    _levels: dict[str, tuple[Any, ...]]
    _n_rows: int

    # === Factory Methods ===

    @classmethod
    def from_columns(
        cls,
        columns: Mapping[str, Sequence[Any]],
        *,
        levels: Mapping[str, Sequence[Any]] | None = None,
    ) -> Dataset:
        """
        Construct from a mapping of column name -> values.

        Parameters
        ----------
        columns : mapping
            Column name to a sequence (list, tuple, numpy array) of values.
            All sequences must have the same length.
        levels : mapping, optional
            Column name to the ordered category values for that column.
        """
        storage: dict[str, NDArray] = {}
        kinds: dict[str, str] = {}
        n_rows: int | None = None

        for name, values in columns.items():
            if not isinstance(name, str):
                raise ValidationError(
                    f"column names must be strings, got {name!r}"
                )
            kind, data = _classify(name, values)
            if n_rows is None:
                n_rows = len(data)
            elif len(data) != n_rows:
                raise ValidationError(
                    f"Inconsistent column lengths: {name!r} has {len(data)} "
                    f"values, expected {n_rows}"
                )
            storage[name] = data
            kinds[name] = kind

        explicit = cls._check_levels(storage, kinds, levels or {})
        return cls(
            _data=storage,
            _kinds=kinds,
            _levels=explicit,
            _n_rows=n_rows or 0,
        )

    @classmethod
    def from_records(
        cls,
        records: Sequence[Mapping[str, Any]],
        *,
        levels: Mapping[str, Sequence[Any]] | None = None,
    ) -> Dataset:
        """
        Construct from a sequence of row mappings.

        The column set is the union of all record keys in first-seen
        order; a key absent from a record is a missing value.
        """
        names: dict[str, None] = {}
        for record in records:
            for key in record:
                names.setdefault(key, None)

        columns = {
            name: [record.get(name) for record in records]
            for name in names
        }
        return cls.from_columns(columns, levels=levels)

    @classmethod
    def from_dataframe(
        cls,
        df: 'pd.DataFrame',
        *,
        levels: Mapping[str, Sequence[Any]] | None = None,
    ) -> Dataset:
        """
        Construct from a pandas DataFrame.

        Numeric and boolean columns become numeric; everything else is
        treated as categorical. A pandas ``category`` column contributes its
        category order as levels unless ``levels`` overrides it.
        """
        import pandas as pd

        columns: dict[str, Any] = {}
        derived: dict[str, Sequence[Any]] = {}

        for col in df.columns:
            series = df[col]
            name = str(col)
            mask = series.isna().to_numpy()
            if isinstance(series.dtype, pd.CategoricalDtype):
                derived[name] = list(series.cat.categories)
                columns[name] = _object_values(series, mask)
            elif pd.api.types.is_bool_dtype(series) or pd.api.types.is_numeric_dtype(series):
                columns[name] = series.to_numpy(dtype=np.float64, na_value=np.nan)
            else:
                columns[name] = _object_values(series, mask)

        derived.update(levels or {})
        return cls.from_columns(columns, levels=derived)

    @staticmethod
    def _check_levels(
        storage: dict[str, NDArray],
        kinds: dict[str, str],
        levels: Mapping[str, Sequence[Any]],
    ) -> dict[str, tuple[Any, ...]]:
        """Validate explicit levels against the observed values."""
        result: dict[str, tuple[Any, ...]] = {}
        for name, order in levels.items():
            if name not in storage:
                raise InvalidColumnError(
                    f"levels: dataset has no column {name!r}. "
                    f"Available: {list(storage)}",
                    column=name,
                    available=tuple(storage),
                )
            if kinds[name] == COLUMN_NUMERIC:
                order = tuple(_to_category(v) for v in order)
            else:
                order = tuple(order)
            if len(set(order)) != len(order):
                raise ValidationError(f"levels for {name!r} contain duplicates: {list(order)}")

            known = set(order)
            observed = {v for v in _category_array(storage[name], kinds[name]) if v is not None}
            unknown = observed - known
            if unknown:
                raise ValidationError(
                    f"levels for {name!r} do not cover observed values "
                    f"{sorted(unknown, key=str)}"
                )
            result[name] = order
        return result

    # === Column Access ===

    @property
    def columns(self) -> tuple[str, ...]:
        """Column names in construction order."""
        return tuple(self._data)

    @property
    def n_rows(self) -> int:
        """Number of observations."""
        return self._n_rows

    def __contains__(self, name: str) -> bool:
        return name in self._data

    def __getitem__(self, name: str) -> NDArray:
        """
        Read-only values of a column.

        Raises:
            InvalidColumnError: With the list of available columns
        """
        if name not in self._data:
            raise InvalidColumnError(
                f"Dataset has no column {name!r}. Available: {list(self._data)}",
                column=name,
                available=self.columns,
            )
        return self._data[name]

    def column(self, name: str) -> NDArray:
        """Alias for ``ds[name]``."""
        return self[name]

    def kind(self, name: str) -> str:
        """'numeric' or 'categorical'."""
        self[name]
        return self._kinds[name]

    def is_missing(self, name: str) -> NDArray[np.bool_]:
        """Boolean mask of missing values in a column."""
        data = self[name]
        if self._kinds[name] == COLUMN_NUMERIC:
            return np.isnan(data)
        return np.array([v is None for v in data], dtype=bool)

    def category_values(self, name: str) -> NDArray:
        """
        Column values as category labels (object array, None for missing).

        Numeric values are reported as int when integral.
        """
        return _category_array(self[name], self._kinds[name])

    def sort_key(self, name: str) -> Callable[[Any], Any]:
        """Key function ordering the category values of a column."""
        self[name]
        order = self._levels.get(name)
        if order is not None:
            position = {v: i for i, v in enumerate(order)}
            return position.__getitem__
        return _natural_key

    def categories(self, name: str, indices: NDArray | None = None) -> tuple[Any, ...]:
        """
        Distinct non-missing category values, in category order.

        Parameters
        ----------
        name : str
            Column name.
        indices : array of int, optional
            Restrict to these rows.
        """
        values = self.category_values(name)
        if indices is not None:
            values = values[indices]
        seen = {v for v in values if v is not None}
        return tuple(sorted(seen, key=self.sort_key(name)))

    def __repr__(self) -> str:
        return f"Dataset(n_rows={self._n_rows}, columns={list(self._data)})"


def _natural_key(value: Any) -> Any:
    return value


def _category_array(data: NDArray, kind: str) -> NDArray:
    out = np.empty(len(data), dtype=object)
    if kind == COLUMN_NUMERIC:
        for i, v in enumerate(data):
            out[i] = None if np.isnan(v) else _to_category(v)
    else:
        out[:] = data
    return out


def _object_values(series: 'pd.Series', mask: NDArray[np.bool_]) -> list[Any]:
    """Series values as a list, None where ``mask`` marks a missing value."""
    values = series.to_numpy(dtype=object)
    return [None if missing else v for v, missing in zip(values, mask)]
