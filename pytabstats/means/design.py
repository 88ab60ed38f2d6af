"""
MeanDesign: validated inputs for summarize_mean().

Immutable after construction. Build via MeanDesign.build().
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Sequence

from pytabstats.core.dataset import Dataset
from pytabstats.core.kinds import KIND_MEAN_TABLE, KIND_MEAN_TABLE_GROUPED
from pytabstats.core.validation import (
    check_column,
    check_columns,
    check_numeric,
    check_not_grouped_by,
    check_confidence_level,
)
from pytabstats.means._common import DEFAULT_CONF_LEVEL


@dataclass(frozen=True)
class MeanDesign:
    """
    Design for mean tables.

    Do not construct directly; use MeanDesign.build().
    """
    dataset: Dataset
    response_column: str
    grouping_columns: tuple[str, ...]
    confidence_level: float

    @classmethod
    def build(
        cls,
        dataset: Dataset,
        response_column: str,
        grouping_columns: Sequence[str] = (),
        *,
        confidence_level: float = DEFAULT_CONF_LEVEL,
    ) -> MeanDesign:
        """
        Validate inputs for summarize_mean().

        Raises
        ------
        InvalidColumnError
            If the response or a grouping column is absent.
        TypeMismatchError
            If the response column is not numeric.
        ValidationError
            If the response is also a grouping column, or the confidence
            level is outside (0, 1).
        """
        response_column = check_column(dataset, response_column, "response_column")
        grouping = check_columns(dataset, grouping_columns, "grouping_columns")
        check_numeric(dataset, response_column, "response_column")
        check_not_grouped_by(response_column, grouping, "response_column")
        confidence_level = check_confidence_level(confidence_level)
        return cls(
            dataset=dataset,
            response_column=response_column,
            grouping_columns=grouping,
            confidence_level=confidence_level,
        )

    @property
    def kind(self) -> str:
        return KIND_MEAN_TABLE_GROUPED if self.grouping_columns else KIND_MEAN_TABLE

    def __repr__(self) -> str:
        return (
            f"MeanDesign(response={self.response_column!r}, "
            f"groups={list(self.grouping_columns)}, n_rows={self.dataset.n_rows})"
        )
