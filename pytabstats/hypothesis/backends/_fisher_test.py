"""
Fisher's exact test for 2x2 frequency tables.

The two-sided p-value sums the hypergeometric probabilities of every
table with the observed margins that is no more likely than the observed
one. Larger tables are rejected when the design is built.
"""

from __future__ import annotations

from dataclasses import replace
from typing import TYPE_CHECKING
from scipy import stats as sp_stats

from pytabstats.hypothesis._common import SignificanceParams, STATISTIC_FISHER
from pytabstats.hypothesis.backends._chisq_test import chisq_two_way

if TYPE_CHECKING:
    from pytabstats.hypothesis.design import HypothesisDesign


def fisher_2x2(design: HypothesisDesign) -> tuple[SignificanceParams, list[str]]:
    """Fisher's exact test, reported alongside the Pearson statistic."""
    pearson, warnings_list = chisq_two_way(design)

    table = design.observed.astype(int)
    odds_ratio, p_value = sp_stats.fisher_exact(table, alternative="two-sided")

    extras = dict(pearson.extras or {})
    extras.update(
        chi2_pearson=pearson.statistic,
        df_pearson=pearson.df,
        p_chi2_pearson=pearson.p_value,
        odds_ratio=float(odds_ratio),
    )

    return replace(
        pearson,
        statistic_name=STATISTIC_FISHER,
        statistic=None,
        df=None,
        p_value=float(p_value),
        method="Fisher's Exact Test for Count Data",
        extras=extras,
    ), warnings_list
