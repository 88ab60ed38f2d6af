"""
Core infrastructure for pytabstats.

This module provides shared abstractions and utilities used by all
domain-specific submodules (means, frequency, hypothesis, formatting).

Key components:
    dataset: Dataset, the immutable rectangular input
    partition: Partitioner splitting a dataset by grouping columns
    result: Generic Result[P] envelope
    exceptions: Exception hierarchy
    validation: Input validators
    kinds: Result kind and column kind constants
"""

from pytabstats.core.dataset import Dataset
from pytabstats.core.partition import GroupKey, Partition, Partitioning, partition
from pytabstats.core.result import Result
from pytabstats.core.exceptions import (
    TabStatsError,
    ValidationError,
    InvalidColumnError,
    TypeMismatchError,
    InvalidInputError,
    EmptyPartitionError,
    UnsupportedShapeError,
)

__all__ = [
    # Data
    "Dataset",
    "GroupKey",
    "Partition",
    "Partitioning",
    "partition",
    # Result
    "Result",
    # Exceptions
    "TabStatsError",
    "ValidationError",
    "InvalidColumnError",
    "TypeMismatchError",
    "InvalidInputError",
    "EmptyPartitionError",
    "UnsupportedShapeError",
]
