"""
format_table(): publication strings from summary results.

For example, a mean and 95% confidence interval is formatted as
"24.00 (21.00 - 27.00)" by default, and a count with its percentage as
"19 (59.38)".

Formatting is the only place numbers get rounded. Each result kind has
its own set of ``stats`` selectors:

    mean_table, mean_table_grouped  "mean and ci" (default), "n and mean"
    freq_table_one_way              "percent and ci" (default), "n and percent"
    freq_table_two_way              "row percent and ci" (default),
                                    "n and row percent", "percent and ci",
                                    "n and percent"

The two-way "percent and ci" and "n and percent" selectors use the
table-total percentages, which exist only when the table was built with
include_overall_percent=True.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Iterator, TYPE_CHECKING

from pytabstats.core.exceptions import ValidationError
from pytabstats.core.kinds import (
    ALL_KINDS,
    KIND_MEAN_TABLE,
    KIND_MEAN_TABLE_GROUPED,
    KIND_FREQ_ONE_WAY,
    KIND_FREQ_TWO_WAY,
)
from pytabstats.core.partition import key_fields
from pytabstats.core.validation import check_choice
from pytabstats.formatting._numbers import (
    DEFAULT_DIGITS,
    check_digits,
    format_count_value,
    format_estimate_ci,
)

if TYPE_CHECKING:
    import pandas as pd


STATS_CHOICES: dict[str, tuple[str, ...]] = {
    KIND_MEAN_TABLE: ("mean and ci", "n and mean"),
    KIND_MEAN_TABLE_GROUPED: ("mean and ci", "n and mean"),
    KIND_FREQ_ONE_WAY: ("percent and ci", "n and percent"),
    KIND_FREQ_TWO_WAY: (
        "row percent and ci",
        "n and row percent",
        "percent and ci",
        "n and percent",
    ),
}

# Output column name per selector
_STAT_COLUMNS = {
    "mean and ci": "mean_95",
    "n and mean": "n_mean",
    "percent and ci": "percent_95",
    "n and percent": "n_percent",
    "row percent and ci": "percent_row_95",
    "n and row percent": "n_percent_row",
}

_TWO_WAY_TOTAL_COLUMNS = {
    "percent and ci": "percent_total_95",
    "n and percent": "n_percent_total",
}


@dataclass(frozen=True)
class FormattedTable:
    """
    Display table: identifier columns followed by one formatted column.

    Cells are the original identifiers (variable names, categories) and
    the formatted statistic strings.
    """
    columns: tuple[str, ...]
    rows: tuple[tuple[Any, ...], ...]

    def __len__(self) -> int:
        return len(self.rows)

    def __iter__(self) -> Iterator[tuple[Any, ...]]:
        return iter(self.rows)

    def column(self, name: str) -> tuple[Any, ...]:
        """All values of one column."""
        if name not in self.columns:
            raise ValidationError(
                f"no column {name!r}; available: {list(self.columns)}"
            )
        j = self.columns.index(name)
        return tuple(row[j] for row in self.rows)

    def to_records(self) -> list[dict[str, Any]]:
        return [dict(zip(self.columns, row)) for row in self.rows]

    def to_dataframe(self) -> 'pd.DataFrame':
        """Table as a pandas DataFrame."""
        import pandas as pd
        return pd.DataFrame.from_records(list(self.rows), columns=list(self.columns))

    def __str__(self) -> str:
        text = [tuple(self.columns)] + [
            tuple("" if v is None else str(v) for v in row) for row in self.rows
        ]
        widths = [max(len(r[k]) for r in text) for k in range(len(self.columns))]
        return "\n".join(
            "  ".join(cell.rjust(w) for cell, w in zip(r, widths)) for r in text
        )


def format_table(
    solution: Any,
    *,
    digits: int = DEFAULT_DIGITS,
    stats: str | None = None,
) -> FormattedTable:
    """
    Format a summary result for publication.

    Parameters
    ----------
    solution : MeanSolution, OneWayFrequencySolution or TwoWayFrequencySolution
    digits : int
        Decimal places shown. Default 2.
    stats : str, optional
        Which statistic to show; see module docstring. Defaults to the
        first choice for the result kind.

    Returns
    -------
    FormattedTable

    Raises
    ------
    ValidationError
        Unknown result kind, unknown selector, or a two-way total
        percentage selector on a table without overall percentages.
    """
    kind = getattr(solution, "kind", None)
    if kind not in ALL_KINDS:
        raise ValidationError(
            f"cannot format {type(solution).__name__}; expected one of "
            f"{sorted(ALL_KINDS)} results"
        )
    check_digits(digits)
    choices = STATS_CHOICES[kind]
    stats = check_choice(choices[0] if stats is None else stats, choices, "stats")

    if kind in (KIND_MEAN_TABLE, KIND_MEAN_TABLE_GROUPED):
        return _format_means(solution, digits, stats)
    if kind == KIND_FREQ_ONE_WAY:
        return _format_one_way(solution, digits, stats)
    if kind == KIND_FREQ_TWO_WAY:
        return _format_two_way(solution, digits, stats)
    raise ValueError(f"Unhandled result kind: {kind!r}")


def _format_means(solution: Any, digits: int, stats: str) -> FormattedTable:
    rows = []
    names: tuple[str, ...] = ()
    for row in solution.rows:
        fields = [("response_var", solution.response_column)]
        fields += key_fields(row.key, solution.grouping_columns)
        if stats == "mean and ci":
            cell = format_estimate_ci(row.mean, row.lower_ci, row.upper_ci, digits)
        else:
            cell = format_count_value(row.n, row.mean, digits)
        fields.append((_STAT_COLUMNS[stats], cell))
        names = tuple(name for name, _ in fields)
        rows.append(tuple(value for _, value in fields))
    return FormattedTable(columns=names, rows=tuple(rows))


def _format_one_way(solution: Any, digits: int, stats: str) -> FormattedTable:
    rows = []
    names: tuple[str, ...] = ()
    for row in solution.rows:
        fields = key_fields(row.key, solution.grouping_columns)
        fields += [("var", row.variable), ("cat", row.category)]
        if stats == "percent and ci":
            cell = format_estimate_ci(row.percent, row.lower_ci, row.upper_ci, digits)
        else:
            cell = format_count_value(row.n, row.percent, digits)
        fields.append((_STAT_COLUMNS[stats], cell))
        names = tuple(name for name, _ in fields)
        rows.append(tuple(value for _, value in fields))
    return FormattedTable(columns=names, rows=tuple(rows))


def _format_two_way(solution: Any, digits: int, stats: str) -> FormattedTable:
    total_stats = stats in _TWO_WAY_TOTAL_COLUMNS
    if total_stats and not solution.has_overall_percent:
        raise ValidationError(
            f"stats={stats!r} needs table-total percentages, which this "
            f"result does not have. Recompute it with "
            f"summarize_crosstab(..., include_overall_percent=True) first."
        )

    column = _TWO_WAY_TOTAL_COLUMNS[stats] if total_stats else _STAT_COLUMNS[stats]
    rows = []
    for cell in solution.cells:
        if stats == "row percent and ci":
            text = format_estimate_ci(
                cell.percent_row, cell.lower_ci_row, cell.upper_ci_row, digits,
            )
        elif stats == "n and row percent":
            text = format_count_value(cell.n, cell.percent_row, digits)
        elif stats == "percent and ci":
            text = format_estimate_ci(
                cell.percent_total, cell.lower_ci_total, cell.upper_ci_total, digits,
            )
        else:
            text = format_count_value(cell.n, cell.percent_total, digits)
        rows.append((
            cell.row_variable, cell.row_category,
            cell.column_variable, cell.column_category,
            text,
        ))
    return FormattedTable(
        columns=("row_var", "row_cat", "col_var", "col_cat", column),
        rows=tuple(rows),
    )
