"""
Two-way frequency tables.

Partitions the dataset by (row column, column column); each non-empty
partition is one observed cell. The full cross product of observed row
and column categories is reported, zero-filled where a combination never
occurs.
"""

from __future__ import annotations

from typing import TYPE_CHECKING
import numpy as np

from pytabstats.core.exceptions import EmptyPartitionError
from pytabstats.core.partition import partition
from pytabstats.frequency._common import (
    TwoWayFrequencyCell,
    TwoWayParams,
    percent_ci,
)

if TYPE_CHECKING:
    from pytabstats.frequency.design import FrequencyDesign


def two_way_table(design: FrequencyDesign) -> tuple[TwoWayParams, dict, list[str]]:
    """Cross-tabulation of design.row_column by design.column_column."""
    dataset = design.dataset
    row_var = design.row_column
    col_var = design.column_column
    conf = design.confidence_level

    parts = partition(dataset, (row_var, col_var))
    if len(parts) == 0:
        raise EmptyPartitionError(
            f"no rows with non-missing values on both {row_var!r} and "
            f"{col_var!r} ({dataset.n_rows} rows)",
            key=(),
        )

    # Partition keys arrive in (row, column) category order
    row_cats = tuple(dict.fromkeys(p.key[0][1] for p in parts))
    col_cats = tuple(sorted(
        {p.key[1][1] for p in parts}, key=dataset.sort_key(col_var),
    ))
    row_pos = {v: i for i, v in enumerate(row_cats)}
    col_pos = {v: j for j, v in enumerate(col_cats)}

    observed = np.zeros((len(row_cats), len(col_cats)), dtype=np.int64)
    for p in parts:
        observed[row_pos[p.key[0][1]], col_pos[p.key[1][1]]] = p.size
    observed.flags.writeable = False

    row_totals = observed.sum(axis=1)
    col_totals = observed.sum(axis=0)
    grand = int(observed.sum())

    cells: list[TwoWayFrequencyCell] = []
    for i, rc in enumerate(row_cats):
        for j, cc in enumerate(col_cats):
            n = int(observed[i, j])
            n_row = int(row_totals[i])
            n_col = int(col_totals[j])
            pct_row, lo_row, hi_row = percent_ci(n, n_row, conf)
            extra = {}
            if design.include_overall_percent:
                pct_col, lo_col, hi_col = percent_ci(n, n_col, conf)
                pct_tot, lo_tot, hi_tot = percent_ci(n, grand, conf)
                extra = dict(
                    percent_col=pct_col, lower_ci_col=lo_col, upper_ci_col=hi_col,
                    percent_total=pct_tot, lower_ci_total=lo_tot, upper_ci_total=hi_tot,
                )
            cells.append(TwoWayFrequencyCell(
                row_variable=row_var,
                row_category=rc,
                column_variable=col_var,
                column_category=cc,
                n=n,
                n_row_total=n_row,
                n_col_total=n_col,
                n_grand_total=grand,
                percent_row=pct_row,
                lower_ci_row=lo_row,
                upper_ci_row=hi_row,
                **extra,
            ))

    params = TwoWayParams(
        row_variable=row_var,
        column_variable=col_var,
        confidence_level=conf,
        row_categories=row_cats,
        column_categories=col_cats,
        observed=observed,
        include_overall_percent=design.include_overall_percent,
        cells=tuple(cells),
    )
    info = {
        'method': 'wilson',
        'n_rows': dataset.n_rows,
        'n_excluded': parts.n_excluded,
        'shape': observed.shape,
    }
    return params, info, list(parts.warnings)
