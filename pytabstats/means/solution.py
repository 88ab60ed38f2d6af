"""
Mean table solution type.

MeanSolution wraps Result[MeanParams] and behaves as a read-only
sequence of ContinuousSummary rows.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Iterator, TYPE_CHECKING

from pytabstats.core.result import Result
from pytabstats.core.partition import key_fields
from pytabstats.means._common import ContinuousSummary, MeanParams

if TYPE_CHECKING:
    import pandas as pd
    from pytabstats.means.design import MeanDesign


@dataclass
class MeanSolution:
    """
    User-facing mean table.

    One ContinuousSummary per partition, in partition order. Values are
    never rounded here; use pytabstats.formatting for display strings.
    """
    _result: Result[MeanParams]
    _design: 'MeanDesign'

    @property
    def kind(self) -> str:
        """'mean_table' or 'mean_table_grouped'."""
        return self._design.kind

    @property
    def rows(self) -> tuple[ContinuousSummary, ...]:
        return self._result.params.rows

    @property
    def response_column(self) -> str:
        return self._result.params.response_column

    @property
    def grouping_columns(self) -> tuple[str, ...]:
        return self._result.params.grouping_columns

    @property
    def confidence_level(self) -> float:
        return self._result.params.confidence_level

    # --- Sequence behaviour ---

    def __len__(self) -> int:
        return len(self.rows)

    def __iter__(self) -> Iterator[ContinuousSummary]:
        return iter(self.rows)

    def __getitem__(self, i: int) -> ContinuousSummary:
        return self.rows[i]

    # --- Metadata ---

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

    # --- Conversion ---

    def to_records(self) -> list[dict[str, Any]]:
        """Rows as dicts keyed by output column name."""
        records = []
        for row in self.rows:
            record: dict[str, Any] = {"response_var": self.response_column}
            record.update(key_fields(row.key, self.grouping_columns))
            record.update(
                n=row.n,
                mean=row.mean,
                sem=row.standard_error,
                lcl=row.lower_ci,
                ucl=row.upper_ci,
                min=row.min,
                max=row.max,
            )
            records.append(record)
        return records

    def to_dataframe(self) -> 'pd.DataFrame':
        """Mean table as a pandas DataFrame."""
        import pandas as pd
        return pd.DataFrame.from_records(self.to_records())

    def summary(self) -> str:
        """Plain-text table, one line per partition."""
        pct = f"{self.confidence_level * 100:g}%"
        lines = [f"Mean of {self.response_column} ({pct} t interval)"]
        for row in self.rows:
            label = ", ".join(f"{c}={v}" for c, v in row.key) or "overall"
            lines.append(
                f"  {label}: n={row.n}, mean={row.mean:.6g}, "
                f"se={row.standard_error:.6g}, "
                f"ci=[{row.lower_ci:.6g}, {row.upper_ci:.6g}]"
            )
        return "\n".join(lines)

    def __repr__(self) -> str:
        return (
            f"MeanSolution(response={self.response_column!r}, "
            f"groups={list(self.grouping_columns)}, rows={len(self.rows)})"
        )
