"""
Common types for mean tables.

Defines ContinuousSummary (one row per partition) and MeanParams, the
payload carried in Result[MeanParams].
"""

from __future__ import annotations

from dataclasses import dataclass

from pytabstats.core.partition import GroupKey


DEFAULT_CONF_LEVEL = 0.95


@dataclass(frozen=True)
class ContinuousSummary:
    """
    Mean of a numeric column within one partition.

    Attributes
    ----------
    key : GroupKey
        Grouping values of the partition; () for the overall mean.
    n : int
        Count of non-missing response values.
    mean : float
        Arithmetic mean.
    standard_error : float
        Sample standard deviation / sqrt(n); 0 when n == 1.
    lower_ci, upper_ci : float
        Student-t interval, df = n - 1. Both equal the mean when n == 1.
    min, max : float
        Smallest and largest observed values.
    """
    key: GroupKey
    n: int
    mean: float
    standard_error: float
    lower_ci: float
    upper_ci: float
    min: float
    max: float


@dataclass(frozen=True)
class MeanParams:
    """Parameter payload for summarize_mean()."""
    response_column: str
    grouping_columns: tuple[str, ...]
    confidence_level: float
    rows: tuple[ContinuousSummary, ...]
