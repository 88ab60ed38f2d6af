"""
pytabstats: presentation-ready summary tables for rectangular data.

Means with Student-t intervals, one-way and two-way frequency tables with
Wilson score intervals, chi-squared and Fisher's exact tests on those
tables, and publication string formatting.

Submodules:
    core: Dataset, partitioning, result envelope, exceptions
    means: summarize_mean
    frequency: summarize_frequency, summarize_crosstab
    hypothesis: test_one_way, test_two_way
    formatting: format_table
"""

__version__ = "0.1.0"

from pytabstats.core import (
    Dataset,
    partition,
    TabStatsError,
    ValidationError,
    InvalidColumnError,
    TypeMismatchError,
    InvalidInputError,
    EmptyPartitionError,
    UnsupportedShapeError,
)
from pytabstats.means import summarize_mean
from pytabstats.frequency import summarize_frequency, summarize_crosstab
from pytabstats.hypothesis import test_one_way, test_two_way
from pytabstats.formatting import format_table

__all__ = [
    "__version__",
    "Dataset",
    "partition",
    "summarize_mean",
    "summarize_frequency",
    "summarize_crosstab",
    "test_one_way",
    "test_two_way",
    "format_table",
    "TabStatsError",
    "ValidationError",
    "InvalidColumnError",
    "TypeMismatchError",
    "InvalidInputError",
    "EmptyPartitionError",
    "UnsupportedShapeError",
]
