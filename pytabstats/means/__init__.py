"""
Mean tables.

Public API:
    summarize_mean(ds, response, groups)  - Means with Student-t intervals
"""

from pytabstats.means.solvers import summarize_mean
from pytabstats.means.design import MeanDesign
from pytabstats.means._common import ContinuousSummary, MeanParams
from pytabstats.means.solution import MeanSolution

__all__ = [
    "summarize_mean",
    "MeanDesign",
    "ContinuousSummary",
    "MeanParams",
    "MeanSolution",
]
