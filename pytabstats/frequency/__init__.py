"""
Frequency tables.

Public API:
    summarize_frequency(ds, var, groups)  - One-way distribution, Wilson CIs
    summarize_crosstab(ds, row, col)      - Two-way distribution, Wilson CIs
    wilson_ci(x, n)                       - Wilson score interval
"""

from pytabstats.frequency.solvers import summarize_frequency, summarize_crosstab
from pytabstats.frequency.design import FrequencyDesign
from pytabstats.frequency._common import (
    OneWayFrequencyRow,
    TwoWayFrequencyCell,
    OneWayParams,
    TwoWayParams,
    wilson_ci,
)
from pytabstats.frequency.solution import (
    OneWayFrequencySolution,
    TwoWayFrequencySolution,
)

__all__ = [
    "summarize_frequency",
    "summarize_crosstab",
    "wilson_ci",
    "FrequencyDesign",
    "OneWayFrequencyRow",
    "TwoWayFrequencyCell",
    "OneWayParams",
    "TwoWayParams",
    "OneWayFrequencySolution",
    "TwoWayFrequencySolution",
]
