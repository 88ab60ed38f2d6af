"""
Frequency table solution types.

OneWayFrequencySolution and TwoWayFrequencySolution wrap the Result
envelope and behave as read-only sequences of rows/cells. Both carry the
shape metadata the significance tests need, so nothing downstream has to
go back to the dataset.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Iterator, TYPE_CHECKING
import numpy as np
from numpy.typing import NDArray

from pytabstats.core.exceptions import InvalidInputError
from pytabstats.core.kinds import KIND_FREQ_ONE_WAY, KIND_FREQ_TWO_WAY
from pytabstats.core.partition import GroupKey, key_fields
from pytabstats.core.result import Result
from pytabstats.frequency._common import (
    OneWayFrequencyRow,
    OneWayParams,
    TwoWayFrequencyCell,
    TwoWayParams,
)

if TYPE_CHECKING:
    import pandas as pd
    from pytabstats.frequency.design import FrequencyDesign


@dataclass
class _FrequencySolution:
    """Metadata accessors shared by both table types."""
    _result: Result[Any]
    _design: 'FrequencyDesign'

    @property
    def confidence_level(self) -> float:
        return self._result.params.confidence_level

    @property
    def info(self) -> dict[str, Any]:
        return self._result.info

    @property
    def timing(self) -> dict[str, float] | None:
        return self._result.timing

    @property
    def backend_name(self) -> str:
        return self._result.backend_name

    @property
    def warnings(self) -> tuple[str, ...]:
        return self._result.warnings

    def to_dataframe(self) -> 'pd.DataFrame':
        """Table as a pandas DataFrame."""
        import pandas as pd
        return pd.DataFrame.from_records(self.to_records())


@dataclass
class OneWayFrequencySolution(_FrequencySolution):
    """
    User-facing one-way frequency table.

    Rows are ordered by outer group, then category. With
    include_overall=True and a grouping, the overall block (key ())
    comes first.
    """
    _result: Result[OneWayParams]

    @property
    def kind(self) -> str:
        return KIND_FREQ_ONE_WAY

    @property
    def rows(self) -> tuple[OneWayFrequencyRow, ...]:
        return self._result.params.rows

    @property
    def variable(self) -> str:
        return self._result.params.variable

    @property
    def grouping_columns(self) -> tuple[str, ...]:
        return self._result.params.grouping_columns

    @property
    def categories(self) -> tuple[Any, ...]:
        return self._result.params.categories

    @property
    def group_keys(self) -> tuple[GroupKey, ...]:
        return self._result.params.group_keys

    def resolve_key(self, key: GroupKey | None = None) -> GroupKey:
        """
        Pick one outer group.

        None is accepted only when the table has a single group.

        Raises:
            InvalidInputError: If ``key`` is ambiguous or unknown
        """
        keys = self.group_keys
        if key is None:
            if len(keys) == 1:
                return keys[0]
            raise InvalidInputError(
                f"table has {len(keys)} outer groups; pass one of {list(keys)}"
            )
        key = tuple(tuple(pair) for pair in key)
        if key not in keys:
            raise InvalidInputError(f"unknown group key {key!r}; available: {list(keys)}")
        return key

    def rows_for(self, key: GroupKey | None = None) -> tuple[OneWayFrequencyRow, ...]:
        """Rows of a single outer group, in category order."""
        key = self.resolve_key(key)
        return tuple(r for r in self.rows if r.key == key)

    def counts(self, key: GroupKey | None = None) -> NDArray[np.int64]:
        """Category counts of one outer group, in category order."""
        return np.array([r.n for r in self.rows_for(key)], dtype=np.int64)

    def n_total(self, key: GroupKey | None = None) -> int:
        """Non-missing rows of one outer group."""
        return int(self.counts(key).sum())

    def __len__(self) -> int:
        return len(self.rows)

    def __iter__(self) -> Iterator[OneWayFrequencyRow]:
        return iter(self.rows)

    def __getitem__(self, i: int) -> OneWayFrequencyRow:
        return self.rows[i]

    def to_records(self) -> list[dict[str, Any]]:
        records = []
        for row in self.rows:
            record: dict[str, Any] = dict(key_fields(row.key, self.grouping_columns))
            record.update(
                var=row.variable,
                cat=row.category,
                n=row.n,
                n_total=row.n_total,
                percent=row.percent,
                lcl=row.lower_ci,
                ucl=row.upper_ci,
            )
            records.append(record)
        return records

    def summary(self) -> str:
        """Plain-text listing of counts and percentages."""
        lines = [f"Frequency of {self.variable}"]
        for row in self.rows:
            prefix = ", ".join(f"{c}={v}" for c, v in row.key)
            prefix = f"[{prefix}] " if prefix else ""
            lines.append(
                f"  {prefix}{row.category}: {row.n}/{row.n_total} "
                f"({row.percent:.2f}%, {row.lower_ci:.2f}-{row.upper_ci:.2f})"
            )
        return "\n".join(lines)

    def __repr__(self) -> str:
        return (
            f"OneWayFrequencySolution(variable={self.variable!r}, "
            f"categories={len(self.categories)}, groups={len(self.group_keys)})"
        )


@dataclass
class TwoWayFrequencySolution(_FrequencySolution):
    """
    User-facing two-way frequency table.

    Cells are ordered row category outer, column category inner.
    """
    _result: Result[TwoWayParams]

    @property
    def kind(self) -> str:
        return KIND_FREQ_TWO_WAY

    @property
    def cells(self) -> tuple[TwoWayFrequencyCell, ...]:
        return self._result.params.cells

    @property
    def row_variable(self) -> str:
        return self._result.params.row_variable

    @property
    def column_variable(self) -> str:
        return self._result.params.column_variable

    @property
    def row_categories(self) -> tuple[Any, ...]:
        return self._result.params.row_categories

    @property
    def column_categories(self) -> tuple[Any, ...]:
        return self._result.params.column_categories

    @property
    def observed(self) -> NDArray[np.int64]:
        """Count matrix, shape (rows, columns)."""
        return self._result.params.observed

    @property
    def shape(self) -> tuple[int, int]:
        return self.observed.shape

    @property
    def row_totals(self) -> NDArray[np.int64]:
        return self.observed.sum(axis=1)

    @property
    def column_totals(self) -> NDArray[np.int64]:
        return self.observed.sum(axis=0)

    @property
    def grand_total(self) -> int:
        return int(self.observed.sum())

    @property
    def has_overall_percent(self) -> bool:
        """Whether column and table-total percentages were computed."""
        return self._result.params.include_overall_percent

    def __len__(self) -> int:
        return len(self.cells)

    def __iter__(self) -> Iterator[TwoWayFrequencyCell]:
        return iter(self.cells)

    def __getitem__(self, i: int) -> TwoWayFrequencyCell:
        return self.cells[i]

    def to_records(self) -> list[dict[str, Any]]:
        records = []
        for cell in self.cells:
            record: dict[str, Any] = dict(
                row_var=cell.row_variable,
                row_cat=cell.row_category,
                col_var=cell.column_variable,
                col_cat=cell.column_category,
                n=cell.n,
                n_row=cell.n_row_total,
                n_col=cell.n_col_total,
                n_total=cell.n_grand_total,
                percent_row=cell.percent_row,
                lcl_row=cell.lower_ci_row,
                ucl_row=cell.upper_ci_row,
            )
            if self.has_overall_percent:
                record.update(
                    percent_col=cell.percent_col,
                    lcl_col=cell.lower_ci_col,
                    ucl_col=cell.upper_ci_col,
                    percent_total=cell.percent_total,
                    lcl_total=cell.lower_ci_total,
                    ucl_total=cell.upper_ci_total,
                )
            records.append(record)
        return records

    def summary(self) -> str:
        """Count matrix with row and column margins."""
        header = [f"{self.row_variable} \\ {self.column_variable}"]
        header += [str(c) for c in self.column_categories] + ["Total"]
        body = []
        for rc, counts, total in zip(self.row_categories, self.observed, self.row_totals):
            body.append([str(rc)] + [str(int(v)) for v in counts] + [str(int(total))])
        body.append(["Total"] + [str(int(v)) for v in self.column_totals] + [str(self.grand_total)])

        widths = [max(len(r[k]) for r in [header] + body) for k in range(len(header))]
        lines = []
        for r in [header] + body:
            lines.append("  ".join(
                cell.ljust(w) if k == 0 else cell.rjust(w)
                for k, (cell, w) in enumerate(zip(r, widths))
            ))
        return "\n".join(lines)

    def __repr__(self) -> str:
        r, c = self.shape
        return (
            f"TwoWayFrequencySolution(rows={self.row_variable!r}, "
            f"columns={self.column_variable!r}, shape={r}x{c}, n={self.grand_total})"
        )
