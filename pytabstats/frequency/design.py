"""
FrequencyDesign: tagged union for frequency table inputs.

Uses factory classmethods per table type. The `table_type` field
identifies which fields are populated. Immutable after construction.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Sequence

from pytabstats.core.dataset import Dataset
from pytabstats.core.exceptions import ValidationError
from pytabstats.core.kinds import KIND_FREQ_ONE_WAY, KIND_FREQ_TWO_WAY
from pytabstats.core.validation import (
    check_column,
    check_columns,
    check_not_grouped_by,
    check_confidence_level,
)
from pytabstats.frequency._common import (
    DEFAULT_CONF_LEVEL,
    TABLE_ONE_WAY,
    TABLE_TWO_WAY,
)


@dataclass(frozen=True)
class FrequencyDesign:
    """
    Design for frequency tables.

    Do not construct directly; use for_one_way() or for_two_way().
    """
    table_type: str
    dataset: Dataset
    confidence_level: float = DEFAULT_CONF_LEVEL

    # One-way
    category_column: str | None = None
    grouping_columns: tuple[str, ...] = ()
    include_overall: bool = False

    # Two-way
    row_column: str | None = None
    column_column: str | None = None
    include_overall_percent: bool = False

    @classmethod
    def for_one_way(
        cls,
        dataset: Dataset,
        category_column: str,
        grouping_columns: Sequence[str] = (),
        *,
        include_overall: bool = False,
        confidence_level: float = DEFAULT_CONF_LEVEL,
    ) -> FrequencyDesign:
        """Build design for summarize_frequency()."""
        category_column = check_column(dataset, category_column, "category_column")
        grouping = check_columns(dataset, grouping_columns, "grouping_columns")
        check_not_grouped_by(category_column, grouping, "category_column")
        return cls(
            table_type=TABLE_ONE_WAY,
            dataset=dataset,
            confidence_level=check_confidence_level(confidence_level),
            category_column=category_column,
            grouping_columns=grouping,
            include_overall=bool(include_overall),
        )

    @classmethod
    def for_two_way(
        cls,
        dataset: Dataset,
        row_column: str,
        column_column: str,
        *,
        include_overall_percent: bool = False,
        confidence_level: float = DEFAULT_CONF_LEVEL,
    ) -> FrequencyDesign:
        """Build design for summarize_crosstab()."""
        row_column = check_column(dataset, row_column, "row_column")
        column_column = check_column(dataset, column_column, "column_column")
        if row_column == column_column:
            raise ValidationError(
                f"row_column and column_column must differ, both are {row_column!r}"
            )
        return cls(
            table_type=TABLE_TWO_WAY,
            dataset=dataset,
            confidence_level=check_confidence_level(confidence_level),
            row_column=row_column,
            column_column=column_column,
            include_overall_percent=bool(include_overall_percent),
        )

    @property
    def kind(self) -> str:
        if self.table_type == TABLE_ONE_WAY:
            return KIND_FREQ_ONE_WAY
        return KIND_FREQ_TWO_WAY

    def __repr__(self) -> str:
        if self.table_type == TABLE_ONE_WAY:
            detail = f"variable={self.category_column!r}, groups={list(self.grouping_columns)}"
        else:
            detail = f"rows={self.row_column!r}, columns={self.column_column!r}"
        return f"FrequencyDesign({self.table_type}, {detail}, n_rows={self.dataset.n_rows})"
