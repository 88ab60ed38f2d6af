"""
Pearson chi-squared tests on frequency tables.

Supports:
- Equal-proportions test for a one-way table (uniform null)
- Independence test for a two-way table

No continuity correction is applied.
"""

from __future__ import annotations

from typing import TYPE_CHECKING
import numpy as np
from scipy import stats as sp_stats

from pytabstats.hypothesis._common import (
    SignificanceParams,
    STATISTIC_CHI2,
    SMALL_EXPECTED_COUNT,
    TEST_ONE_WAY,
    TEST_TWO_WAY,
    WARNING_SMALL_EXPECTED,
)

if TYPE_CHECKING:
    from pytabstats.hypothesis.design import HypothesisDesign


def _small_expected(expected: np.ndarray, warnings_list: list[str]) -> str | None:
    """Flag expected counts at or below the threshold."""
    if np.min(expected) <= SMALL_EXPECTED_COUNT:
        warnings_list.append(
            "One or more expected cell counts are <= 5. "
            "Pearson's Chi-square may not be a valid test."
        )
        return WARNING_SMALL_EXPECTED
    return None


def chisq_one_way(design: HypothesisDesign) -> tuple[SignificanceParams, list[str]]:
    """Chi-squared test that the population is spread evenly over the categories."""
    observed = design.observed.copy()
    warnings_list: list[str] = []

    k = len(observed)
    n_total = float(np.sum(observed))
    expected = np.full(k, n_total / k)

    chisq = float(np.sum((observed - expected) ** 2 / expected))
    df = k - 1
    p_value = float(sp_stats.chi2.sf(chisq, df))
    warning = _small_expected(expected, warnings_list)

    return SignificanceParams(
        kind=TEST_ONE_WAY,
        statistic_name=STATISTIC_CHI2,
        statistic=chisq,
        df=df,
        p_value=p_value,
        warning=warning,
        method="Chi-squared test for equal proportions",
        data_name=design.data_name,
        observed=observed,
        expected=expected,
        extras={
            "categories": design.categories,
            "group_key": design.group_key,
        },
    ), warnings_list


def chisq_two_way(design: HypothesisDesign) -> tuple[SignificanceParams, list[str]]:
    """Chi-squared test of independence for a contingency table."""
    table = design.observed.copy()
    warnings_list: list[str] = []

    nrow, ncol = table.shape
    row_sums = table.sum(axis=1)
    col_sums = table.sum(axis=0)
    total = table.sum()

    # Expected counts: E[i,j] = row_sum[i] * col_sum[j] / total
    expected = np.outer(row_sums, col_sums) / total

    chisq = float(np.sum((table - expected) ** 2 / expected))
    df = (nrow - 1) * (ncol - 1)
    p_value = float(sp_stats.chi2.sf(chisq, df))
    warning = _small_expected(expected, warnings_list)

    residuals = (table - expected) / np.sqrt(expected)

    # Adjusted (standardized) residuals
    row_prop = row_sums / total
    col_prop = col_sums / total
    v = np.outer(1.0 - row_prop, 1.0 - col_prop)
    stdres = residuals / np.sqrt(v)

    return SignificanceParams(
        kind=TEST_TWO_WAY,
        statistic_name=STATISTIC_CHI2,
        statistic=chisq,
        df=df,
        p_value=p_value,
        warning=warning,
        method="Pearson's Chi-squared test",
        data_name=design.data_name,
        observed=table,
        expected=expected,
        extras={
            "residuals": residuals,
            "stdres": stdres,
            "row_categories": design.row_categories,
            "column_categories": design.column_categories,
        },
    ), warnings_list
