"""
Common types for frequency tables.

Defines the row/cell records, the parameter payloads carried in
Result[...], and the Wilson score interval shared by one-way and two-way
tables.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any
import numpy as np
from numpy.typing import NDArray
from scipy import stats as sp_stats

from pytabstats.core.partition import GroupKey


DEFAULT_CONF_LEVEL = 0.95

TABLE_ONE_WAY = "one_way"
TABLE_TWO_WAY = "two_way"


def wilson_ci(x: float, n: float, conf_level: float = DEFAULT_CONF_LEVEL) -> tuple[float, float]:
    """
    Wilson score confidence interval for a single proportion.

    Same construction as R's prop.test() interval without continuity
    correction. Stays inside [0, 1] and is well-behaved at x = 0 and x = n.

    Parameters
    ----------
    x : number of successes
    n : number of trials (> 0)
    conf_level : confidence level

    Returns
    -------
    (lower, upper) as proportions in [0, 1].
    """
    p_hat = x / n
    z = float(sp_stats.norm.ppf((1.0 + conf_level) / 2.0))
    z22n = z**2 / (2.0 * n)

    center = p_hat + z22n
    half = z * np.sqrt(p_hat * (1.0 - p_hat) / n + z22n / (2.0 * n))
    denom = 1.0 + 2.0 * z22n

    # Clamp rounding noise at the boundaries
    lower = 0.0 if x <= 0 else max(0.0, float((center - half) / denom))
    upper = 1.0 if x >= n else min(1.0, float((center + half) / denom))
    return lower, upper


def percent_ci(x: float, n: float, conf_level: float) -> tuple[float, float, float]:
    """Percentage 100*x/n with its Wilson interval, all on the 0-100 scale."""
    lower, upper = wilson_ci(x, n, conf_level)
    return 100.0 * x / n, 100.0 * lower, 100.0 * upper


@dataclass(frozen=True)
class OneWayFrequencyRow:
    """
    One category of a one-way frequency table.

    Attributes
    ----------
    key : GroupKey
        Outer grouping values; () when ungrouped or for the overall block.
    variable : str
        Name of the category column.
    category : Any
        Category value.
    n : int
        Rows with this category in the outer partition.
    n_total : int
        Rows in the outer partition with a non-missing category.
    percent : float
        100 * n / n_total.
    lower_ci, upper_ci : float
        Wilson interval on n / n_total, scaled to percent.
    """
    key: GroupKey
    variable: str
    category: Any
    n: int
    n_total: int
    percent: float
    lower_ci: float
    upper_ci: float


@dataclass(frozen=True)
class TwoWayFrequencyCell:
    """
    One cell of a row x column frequency table.

    percent_row is always computed. The column and table-total percentages
    and their intervals are None unless the table was built with
    include_overall_percent=True.
    """
    row_variable: str
    row_category: Any
    column_variable: str
    column_category: Any
    n: int
    n_row_total: int
    n_col_total: int
    n_grand_total: int
    percent_row: float
    lower_ci_row: float
    upper_ci_row: float
    percent_col: float | None = None
    lower_ci_col: float | None = None
    upper_ci_col: float | None = None
    percent_total: float | None = None
    lower_ci_total: float | None = None
    upper_ci_total: float | None = None


@dataclass(frozen=True)
class OneWayParams:
    """Parameter payload for summarize_frequency()."""
    variable: str
    grouping_columns: tuple[str, ...]
    confidence_level: float
    categories: tuple[Any, ...]
    group_keys: tuple[GroupKey, ...]
    rows: tuple[OneWayFrequencyRow, ...]


@dataclass(frozen=True)
class TwoWayParams:
    """
    Parameter payload for summarize_crosstab().

    ``observed`` is the (rows x columns) count matrix in category order;
    the tester reads its margins from here.
    """
    row_variable: str
    column_variable: str
    confidence_level: float
    row_categories: tuple[Any, ...]
    column_categories: tuple[Any, ...]
    observed: NDArray[np.int64]
    include_overall_percent: bool
    cells: tuple[TwoWayFrequencyCell, ...]
