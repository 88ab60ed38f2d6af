"""
Partitioner: split a dataset by the values of grouping columns.

A partition holds the rows sharing one combination of grouping-key
values. Partitions of one call are disjoint and together cover every row
that has a value on all grouping columns. Rows with a missing grouping
value belong to no partition; they are counted in
``Partitioning.n_excluded`` and reported in ``Partitioning.warnings``.

Ordering is lexicographic over the key tuple, each column ordered by
``Dataset.sort_key`` (explicit levels, else sorted by value).
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any, Iterator, Sequence
import numpy as np
from numpy.typing import NDArray

from pytabstats.core.dataset import Dataset
from pytabstats.core.validation import check_columns

logger = logging.getLogger(__name__)

GroupKey = tuple[tuple[str, Any], ...]


@dataclass(frozen=True)
class Partition:
    """
    Rows sharing one grouping-key combination.

    Attributes:
        key: ((column, value), ...) pairs; () for the ungrouped partition
        indices: Ascending, read-only row positions into the dataset
    """
    key: GroupKey
    indices: NDArray[np.int64]

    @property
    def size(self) -> int:
        return int(len(self.indices))

    def label(self) -> str:
        """Human-readable key, e.g. 'cyl=4, am=1' (or 'overall')."""
        if not self.key:
            return "overall"
        return ", ".join(f"{col}={val}" for col, val in self.key)

    def __len__(self) -> int:
        return self.size


@dataclass(frozen=True)
class Partitioning:
    """
    Ordered partitions produced by one ``partition()`` call.

    Behaves as a read-only sequence of Partition.
    """
    partitions: tuple[Partition, ...]
    grouping_columns: tuple[str, ...]
    n_rows: int
    excluded_indices: NDArray[np.int64]
    warnings: tuple[str, ...] = field(default_factory=tuple)

    @property
    def n_excluded(self) -> int:
        """Rows dropped because a grouping value was missing."""
        return int(len(self.excluded_indices))

    @property
    def keys(self) -> tuple[GroupKey, ...]:
        return tuple(p.key for p in self.partitions)

    def __len__(self) -> int:
        return len(self.partitions)

    def __iter__(self) -> Iterator[Partition]:
        return iter(self.partitions)

    def __getitem__(self, i: int) -> Partition:
        return self.partitions[i]


def key_fields(
    key: GroupKey,
    grouping_columns: Sequence[str] = (),
) -> list[tuple[str, Any]]:
    """
    Flatten a GroupKey into (field name, value) pairs for tabular output.

    One grouping column gives ``group_var``/``group_cat``; several give
    ``group_1_var``, ``group_1_cat``, ``group_2_var``, ... The empty
    (overall) key of a grouped table keeps the same fields with None as
    the category values.
    """
    if not key:
        key = tuple((col, None) for col in grouping_columns)
    if len(key) == 1:
        col, val = key[0]
        return [("group_var", col), ("group_cat", val)]
    fields: list[tuple[str, Any]] = []
    for i, (col, val) in enumerate(key, start=1):
        fields.append((f"group_{i}_var", col))
        fields.append((f"group_{i}_cat", val))
    return fields


def partition(dataset: Dataset, grouping_columns: Sequence[str] = ()) -> Partitioning:
    """
    Split ``dataset`` into partitions by ``grouping_columns``.

    Parameters
    ----------
    dataset : Dataset
    grouping_columns : sequence of str
        Columns whose value combinations define the partitions. Empty
        means a single partition with every row.

    Returns
    -------
    Partitioning

    Raises
    ------
    InvalidColumnError
        If a grouping column is not in the dataset.
    ValidationError
        If a grouping column is listed twice.
    """
    columns = check_columns(dataset, grouping_columns, "grouping_columns")
    n = dataset.n_rows

    if not columns:
        indices = np.arange(n, dtype=np.int64)
        indices.flags.writeable = False
        return Partitioning(
            partitions=(Partition(key=(), indices=indices),),
            grouping_columns=(),
            n_rows=n,
            excluded_indices=np.empty(0, dtype=np.int64),
        )

    missing = np.zeros(n, dtype=bool)
    for col in columns:
        missing |= dataset.is_missing(col)

    values = [dataset.category_values(col) for col in columns]
    groups: dict[tuple[Any, ...], list[int]] = {}
    for i in np.flatnonzero(~missing):
        combo = tuple(v[i] for v in values)
        groups.setdefault(combo, []).append(int(i))

    sort_keys = [dataset.sort_key(col) for col in columns]
    ordered = sorted(
        groups,
        key=lambda combo: tuple(k(v) for k, v in zip(sort_keys, combo)),
    )

    partitions = []
    for combo in ordered:
        indices = np.asarray(groups[combo], dtype=np.int64)
        indices.flags.writeable = False
        partitions.append(Partition(key=tuple(zip(columns, combo)), indices=indices))

    excluded = np.flatnonzero(missing).astype(np.int64)
    excluded.flags.writeable = False
    warnings_list: list[str] = []
    if len(excluded):
        message = (
            f"{len(excluded)} of {n} rows excluded: missing value in "
            f"grouping column(s) {list(columns)}"
        )
        warnings_list.append(message)
        logger.debug(message)

    return Partitioning(
        partitions=tuple(partitions),
        grouping_columns=columns,
        n_rows=n,
        excluded_indices=excluded,
        warnings=tuple(warnings_list),
    )
