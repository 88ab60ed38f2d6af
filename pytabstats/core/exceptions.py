"""
Exception hierarchy for pytabstats.

All exceptions inherit from TabStatsError to allow catching any
library-specific error. Domain-specific exceptions should inherit from
the appropriate base class here.

Design principles:
    - Exceptions carry diagnostic information as attributes
    - Error messages are actionable with actual vs expected values
    - Never catch and re-raise with less information
"""

from typing import Any


class TabStatsError(Exception):
    """Base exception for all pytabstats errors."""
    pass


class ValidationError(TabStatsError):
    """
    Input validation failed.

    Raised when user-provided inputs fail validation checks.
    """
    pass


class InvalidColumnError(ValidationError):
    """
    A referenced column does not exist in the dataset.

    Attributes:
        column: The name that was requested
        available: Column names the dataset does have
    """

    def __init__(
        self,
        message: str,
        column: str | None = None,
        available: tuple[str, ...] = (),
    ):
        super().__init__(message)
        self.column = column
        self.available = available


class TypeMismatchError(ValidationError):
    """
    Column values are not of the kind the computation needs.

    Raised when a numeric statistic is requested on a categorical column,
    or when a column mixes numbers and labels.

    Attributes:
        column: Offending column name
        expected_kind: 'numeric' or 'categorical'
        actual_kind: What was found instead
    """

    def __init__(
        self,
        message: str,
        column: str | None = None,
        expected_kind: str | None = None,
        actual_kind: str | None = None,
    ):
        super().__init__(message)
        self.column = column
        self.expected_kind = expected_kind
        self.actual_kind = actual_kind


class InvalidInputError(ValidationError):
    """
    Argument is structurally unusable for the requested computation.

    Examples: a chi-square test on fewer than 2 categories, or a
    result object of the wrong kind handed to a tester.
    """
    pass


class EmptyPartitionError(TabStatsError):
    """
    No eligible rows for a required computation.

    Attributes:
        key: GroupKey of the empty partition (() for the ungrouped case)
    """

    def __init__(self, message: str, key: tuple[tuple[str, Any], ...] | None = None):
        super().__init__(message)
        self.key = key


class UnsupportedShapeError(TabStatsError):
    """
    Table shape is not supported by the requested method.

    Raised when Fisher's exact test is requested on anything other than
    a 2x2 table.

    Attributes:
        shape: (rows, columns) of the offending table
    """

    def __init__(self, message: str, shape: tuple[int, int] | None = None):
        super().__init__(message)
        self.shape = shape
