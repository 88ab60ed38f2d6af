"""
One-way frequency tables.

Counts each category of a column within every outer partition. Every
category observed anywhere in the eligible rows is reported for every
partition, with zero counts where it does not occur.
"""

from __future__ import annotations

import logging
from collections import Counter
from typing import TYPE_CHECKING
import numpy as np

from pytabstats.core.exceptions import EmptyPartitionError
from pytabstats.core.partition import GroupKey, partition
from pytabstats.frequency._common import (
    OneWayFrequencyRow,
    OneWayParams,
    percent_ci,
)

if TYPE_CHECKING:
    from pytabstats.frequency.design import FrequencyDesign

logger = logging.getLogger(__name__)


def one_way_table(design: FrequencyDesign) -> tuple[OneWayParams, dict, list[str]]:
    """Frequency distribution of design.category_column."""
    dataset = design.dataset
    variable = design.category_column
    warnings_list: list[str] = []

    parts = partition(dataset, design.grouping_columns)
    warnings_list.extend(parts.warnings)
    if len(parts) == 0:
        raise EmptyPartitionError(
            f"every row has a missing value in grouping column(s) "
            f"{list(design.grouping_columns)}",
            key=(),
        )

    blocks: list[tuple[GroupKey, np.ndarray]] = []
    if design.include_overall and design.grouping_columns:
        covered = np.sort(np.concatenate([p.indices for p in parts]))
        blocks.append(((), covered))
    blocks.extend((p.key, p.indices) for p in parts)

    values = dataset.category_values(variable)
    eligible = np.concatenate([p.indices for p in parts])
    categories = dataset.categories(variable, indices=eligible)
    if not categories:
        raise EmptyPartitionError(
            f"no non-missing values of {variable!r} in {len(eligible)} rows",
            key=(),
        )

    n_missing = sum(1 for v in values[eligible] if v is None)
    if n_missing:
        message = (
            f"{n_missing} rows with missing {variable!r} left out of the "
            f"category totals"
        )
        warnings_list.append(message)
        logger.debug(message)

    rows: list[OneWayFrequencyRow] = []
    for key, indices in blocks:
        counts = Counter(v for v in values[indices] if v is not None)
        n_total = sum(counts.values())
        if n_total == 0:
            label = ", ".join(f"{c}={v}" for c, v in key)
            raise EmptyPartitionError(
                f"{label}: no non-missing values of {variable!r} "
                f"({len(indices)} rows in partition)",
                key=key,
            )
        for category in categories:
            n = counts.get(category, 0)
            pct, lower, upper = percent_ci(n, n_total, design.confidence_level)
            rows.append(OneWayFrequencyRow(
                key=key,
                variable=variable,
                category=category,
                n=n,
                n_total=n_total,
                percent=pct,
                lower_ci=lower,
                upper_ci=upper,
            ))

    params = OneWayParams(
        variable=variable,
        grouping_columns=design.grouping_columns,
        confidence_level=design.confidence_level,
        categories=categories,
        group_keys=tuple(key for key, _ in blocks),
        rows=tuple(rows),
    )
    info = {
        'method': 'wilson',
        'n_rows': dataset.n_rows,
        'n_excluded': parts.n_excluded,
        'n_missing_category': n_missing,
        'n_partitions': len(blocks),
    }
    return params, info, warnings_list
