"""
Significance tests for frequency tables.

Public API:
    test_one_way(freq)          - Chi-squared test for equal proportions
    test_two_way(freq, method)  - Pearson chi-squared or Fisher's exact test
"""

from pytabstats.hypothesis.solvers import test_one_way, test_two_way
from pytabstats.hypothesis.design import HypothesisDesign
from pytabstats.hypothesis._common import SignificanceParams
from pytabstats.hypothesis.solution import SignificanceSolution

__all__ = [
    "test_one_way",
    "test_two_way",
    "HypothesisDesign",
    "SignificanceParams",
    "SignificanceSolution",
]
