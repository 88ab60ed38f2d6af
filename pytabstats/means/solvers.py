"""
Solver dispatch for mean tables.

Provides summarize_mean(): per-partition means with t intervals.
"""

from __future__ import annotations

from typing import Sequence

from pytabstats.core.dataset import Dataset
from pytabstats.means._common import DEFAULT_CONF_LEVEL
from pytabstats.means.design import MeanDesign
from pytabstats.means.solution import MeanSolution
from pytabstats.means.backends.cpu import CPUMeansBackend


def summarize_mean(
    dataset: Dataset | MeanDesign,
    response_column: str | None = None,
    grouping_columns: Sequence[str] = (),
    *,
    confidence_level: float = DEFAULT_CONF_LEVEL,
) -> MeanSolution:
    """
    Mean, standard error and t confidence interval of a numeric column.

    Parameters
    ----------
    dataset : Dataset or MeanDesign
        Input table, or a pre-built design.
    response_column : str
        Numeric column to summarize.
    grouping_columns : sequence of str
        Optional grouping columns; one summary row per combination.
    confidence_level : float
        Default 0.95.

    Returns
    -------
    MeanSolution
        Sequence of ContinuousSummary in partition order.

    Raises
    ------
    InvalidColumnError, TypeMismatchError, ValidationError
        For bad inputs (see MeanDesign.build).
    EmptyPartitionError
        If a partition has no non-missing response values.

    Notes
    -----
    A partition with a single observation gets standard_error = 0 and an
    interval collapsed to the mean; the result carries a warning.
    """
    if isinstance(dataset, MeanDesign):
        design = dataset
    else:
        design = MeanDesign.build(
            dataset, response_column, grouping_columns,
            confidence_level=confidence_level,
        )

    result = CPUMeansBackend().solve(design)
    return MeanSolution(_result=result, _design=design)
