"""
Input validation utilities for pytabstats.

These validators follow the "fail fast, fail loud" principle. They raise
immediately with clear error messages rather than silently correcting
or making assumptions about user intent.

Design principles:
    - No silent type coercion
    - No default handling of edge cases
    - Clear, actionable error messages with actual values
    - Each function validates ONE thing
    - Parameter names included in all error messages
"""

from __future__ import annotations

from typing import Sequence, TYPE_CHECKING

from pytabstats.core.exceptions import (
    ValidationError,
    InvalidColumnError,
    TypeMismatchError,
)
from pytabstats.core.kinds import COLUMN_NUMERIC

if TYPE_CHECKING:
    from pytabstats.core.dataset import Dataset


def check_confidence_level(confidence_level: float, name: str = "confidence_level") -> float:
    """
    Verify a confidence level lies strictly between 0 and 1.

    Raises:
        ValidationError: If the level is outside (0, 1)
    """
    if not (0.0 < confidence_level < 1.0):
        raise ValidationError(
            f"{name} must be in (0, 1), got {confidence_level}"
        )
    return float(confidence_level)


def check_column(dataset: Dataset, column: str, name: str) -> str:
    """
    Verify the dataset has a column called ``column``.

    Args:
        dataset: Dataset to look in
        column: Column name
        name: Parameter name for error messages

    Raises:
        InvalidColumnError: If the column is absent
    """
    if not isinstance(column, str):
        raise ValidationError(
            f"{name}: column names must be strings, got {type(column).__name__}"
        )
    if column not in dataset:
        raise InvalidColumnError(
            f"{name}: dataset has no column {column!r}. "
            f"Available: {list(dataset.columns)}",
            column=column,
            available=dataset.columns,
        )
    return column


def check_columns(dataset: Dataset, columns: Sequence[str], name: str) -> tuple[str, ...]:
    """
    Verify every name in ``columns`` exists and none is repeated.

    Raises:
        InvalidColumnError: If any column is absent
        ValidationError: If a column is listed twice
    """
    if isinstance(columns, str):
        columns = (columns,)
    result = tuple(check_column(dataset, c, name) for c in columns)
    if len(set(result)) != len(result):
        raise ValidationError(f"{name}: duplicate column names in {list(result)}")
    return result


def check_numeric(dataset: Dataset, column: str, name: str) -> None:
    """
    Verify a column holds numbers.

    Raises:
        TypeMismatchError: If the column is categorical
    """
    kind = dataset.kind(column)
    if kind != COLUMN_NUMERIC:
        raise TypeMismatchError(
            f"{name}: column {column!r} is {kind}, expected numeric",
            column=column,
            expected_kind=COLUMN_NUMERIC,
            actual_kind=kind,
        )


def check_not_grouped_by(column: str, grouping_columns: Sequence[str], name: str) -> None:
    """
    Verify an analysis column is not also used as a grouping column.

    Raises:
        ValidationError: If ``column`` appears in ``grouping_columns``
    """
    if column in grouping_columns:
        raise ValidationError(
            f"{name}: column {column!r} cannot also be a grouping column"
        )


def check_choice(value: str, choices: Sequence[str], name: str) -> str:
    """
    Verify ``value`` is one of the allowed string options.

    Raises:
        ValidationError: If ``value`` is not in ``choices``
    """
    if value not in choices:
        raise ValidationError(
            f"{name} must be one of {tuple(choices)}, got {value!r}"
        )
    return value

