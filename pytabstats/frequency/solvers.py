"""
Solver dispatch for frequency tables.

Provides summarize_frequency() (one-way) and summarize_crosstab()
(two-way).
"""

from __future__ import annotations

from typing import Sequence

from pytabstats.core.dataset import Dataset
from pytabstats.frequency._common import DEFAULT_CONF_LEVEL
from pytabstats.frequency.design import FrequencyDesign
from pytabstats.frequency.solution import (
    OneWayFrequencySolution,
    TwoWayFrequencySolution,
)
from pytabstats.frequency.backends.cpu import CPUFrequencyBackend


def summarize_frequency(
    dataset: Dataset,
    category_column: str,
    grouping_columns: Sequence[str] = (),
    *,
    include_overall: bool = False,
    confidence_level: float = DEFAULT_CONF_LEVEL,
) -> OneWayFrequencySolution:
    """
    One-way frequency distribution with Wilson score intervals.

    Parameters
    ----------
    dataset : Dataset
    category_column : str
        Column whose categories are counted.
    grouping_columns : sequence of str
        Optional outer grouping; the distribution is computed within each
        partition.
    include_overall : bool
        With a grouping, also report the distribution over all grouped
        rows, as a leading block with key ().
    confidence_level : float
        Default 0.95.

    Returns
    -------
    OneWayFrequencySolution
        n, n_total, percent, lower_ci and upper_ci per
        (outer group, category). Every category appears in every group.

    Raises
    ------
    InvalidColumnError
        If a column is absent.
    EmptyPartitionError
        If a group (or the whole table) has no non-missing category value.
    """
    design = FrequencyDesign.for_one_way(
        dataset, category_column, grouping_columns,
        include_overall=include_overall,
        confidence_level=confidence_level,
    )
    result = CPUFrequencyBackend().solve(design)
    return OneWayFrequencySolution(_result=result, _design=design)


def summarize_crosstab(
    dataset: Dataset,
    row_column: str,
    column_column: str,
    *,
    include_overall_percent: bool = False,
    confidence_level: float = DEFAULT_CONF_LEVEL,
) -> TwoWayFrequencySolution:
    """
    Two-way frequency distribution with row percentages.

    Parameters
    ----------
    dataset : Dataset
    row_column, column_column : str
        Row and column variables.
    include_overall_percent : bool
        Also compute column and table-total percentages with intervals.
        Required by format_table(stats="percent and ci" / "n and percent").
    confidence_level : float
        Default 0.95.

    Returns
    -------
    TwoWayFrequencySolution

    Raises
    ------
    InvalidColumnError
        If either column is absent.
    EmptyPartitionError
        If no row has values on both columns.
    """
    design = FrequencyDesign.for_two_way(
        dataset, row_column, column_column,
        include_overall_percent=include_overall_percent,
        confidence_level=confidence_level,
    )
    result = CPUFrequencyBackend().solve(design)
    return TwoWayFrequencySolution(_result=result, _design=design)
