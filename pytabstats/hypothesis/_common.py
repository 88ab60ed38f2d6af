"""
Common types for significance tests on frequency tables.

Defines SignificanceParams, the payload every test returns, and the
method/statistic name constants.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any
import numpy as np
from numpy.typing import NDArray


VALID_METHODS = ("pearson", "fisher")

STATISTIC_CHI2 = "chi2_pearson"
STATISTIC_FISHER = "fisher_exact"

TEST_ONE_WAY = "one_way"
TEST_TWO_WAY = "two_way"

# Expected counts at or below this make Pearson's approximation suspect
SMALL_EXPECTED_COUNT = 5.0

WARNING_SMALL_EXPECTED = "expected cell count ≤ 5"


@dataclass(frozen=True)
class SignificanceParams:
    """
    Parameter payload for frequency-table significance tests.

    Attributes
    ----------
    kind : str
        "one_way" (equal proportions) or "two_way" (independence).
    statistic_name : str
        "chi2_pearson" or "fisher_exact".
    statistic : float or None
        Chi-square statistic; None for Fisher's exact test.
    df : int or None
        Degrees of freedom; None for Fisher's exact test.
    p_value : float
        p-value of the reported test.
    warning : str or None
        "expected cell count ≤ 5" when any expected count is that small.
    method : str
        Human-readable method name.
    data_name : str
        Description of the tested table, e.g. "am by cyl".
    observed : ndarray
        Counts tested (1D for one-way, 2D for two-way).
    expected : ndarray
        Expected counts under the null, same shape as observed.
    extras : dict or None
        Test-specific additional outputs (residuals, stdres, Pearson
        statistic alongside Fisher, odds ratio).
    """
    kind: str
    statistic_name: str
    statistic: float | None
    df: int | None
    p_value: float
    warning: str | None
    method: str
    data_name: str
    observed: NDArray[np.floating[Any]]
    expected: NDArray[np.floating[Any]]
    extras: dict[str, Any] | None = None
