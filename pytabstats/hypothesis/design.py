"""
HypothesisDesign: tagged union for significance test inputs.

Uses factory classmethods per test type. The `test_type` field identifies
which fields are populated. Immutable after construction.

Inputs are frequency solutions, never the raw dataset: the counts and
margins a test needs are already carried by the summarizer output.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any
import numpy as np
from numpy.typing import NDArray

from pytabstats.core.exceptions import InvalidInputError, UnsupportedShapeError
from pytabstats.core.kinds import KIND_FREQ_ONE_WAY, KIND_FREQ_TWO_WAY
from pytabstats.core.partition import GroupKey
from pytabstats.core.validation import check_choice
from pytabstats.hypothesis._common import VALID_METHODS


def _check_kind(freq: Any, expected: str) -> None:
    """Reject results that are not the expected frequency table kind."""
    kind = getattr(freq, "kind", None)
    if kind != expected:
        found = kind if kind is not None else type(freq).__name__
        raise InvalidInputError(
            f"expected a {expected} result, got {found}"
        )


@dataclass(frozen=True)
class HypothesisDesign:
    """
    Design for frequency-table significance tests.

    Do not construct directly; use for_one_way() or for_two_way().
    """
    test_type: str
    _observed: NDArray[np.floating[Any]]
    _categories: tuple[Any, ...] = ()
    _row_categories: tuple[Any, ...] = ()
    _column_categories: tuple[Any, ...] = ()
    _group_key: GroupKey = ()
    _method: str = "pearson"
    _data_name: str = ""

    # --- Properties ---

    @property
    def observed(self) -> NDArray[np.floating[Any]]:
        return self._observed

    @property
    def categories(self) -> tuple[Any, ...]:
        return self._categories

    @property
    def row_categories(self) -> tuple[Any, ...]:
        return self._row_categories

    @property
    def column_categories(self) -> tuple[Any, ...]:
        return self._column_categories

    @property
    def group_key(self) -> GroupKey:
        return self._group_key

    @property
    def method(self) -> str:
        return self._method

    @property
    def data_name(self) -> str:
        return self._data_name

    # --- Factory classmethods ---

    @classmethod
    def for_one_way(cls, freq: Any, *, group_key: GroupKey | None = None) -> HypothesisDesign:
        """
        Build design for test_one_way().

        Raises
        ------
        InvalidInputError
            If ``freq`` is not a one-way table, the outer group is
            ambiguous or unknown, or there are fewer than 2 categories.
        """
        _check_kind(freq, KIND_FREQ_ONE_WAY)
        key = freq.resolve_key(group_key)
        counts = freq.counts(key).astype(np.float64)

        if len(counts) < 2:
            raise InvalidInputError(
                f"Need at least 2 categories for a chi-square test of "
                f"{freq.variable!r}, got {len(counts)}"
            )

        data_name = freq.variable
        if key:
            data_name += " | " + ", ".join(f"{c}={v}" for c, v in key)

        return cls(
            test_type="chisq_one_way",
            _observed=counts,
            _categories=freq.categories,
            _group_key=key,
            _data_name=data_name,
        )

    @classmethod
    def for_two_way(cls, freq: Any, *, method: str = "pearson") -> HypothesisDesign:
        """
        Build design for test_two_way().

        Raises
        ------
        InvalidInputError
            If ``freq`` is not a two-way table or has fewer than 2 rows
            or columns.
        ValidationError
            If ``method`` is not "pearson" or "fisher".
        UnsupportedShapeError
            If method="fisher" and the table is not 2x2.
        """
        _check_kind(freq, KIND_FREQ_TWO_WAY)
        method = check_choice(method, VALID_METHODS, "method")

        table = np.asarray(freq.observed, dtype=np.float64)
        nrow, ncol = table.shape
        if nrow < 2 or ncol < 2:
            raise InvalidInputError(
                f"Contingency table must have at least 2 rows and 2 columns, "
                f"got {nrow}x{ncol}"
            )

        if method == "fisher":
            if (nrow, ncol) != (2, 2):
                raise UnsupportedShapeError(
                    f"Fisher's exact test is only available for 2x2 tables, "
                    f"got {nrow}x{ncol}; use method='pearson'",
                    shape=(nrow, ncol),
                )
            test_type = "fisher_two_way"
        else:
            test_type = "chisq_two_way"

        return cls(
            test_type=test_type,
            _observed=table,
            _row_categories=freq.row_categories,
            _column_categories=freq.column_categories,
            _method=method,
            _data_name=f"{freq.row_variable} by {freq.column_variable}",
        )
