"""
CPU reference backend for frequency tables.

Dispatches to the one-way or two-way implementation based on
design.table_type.
"""

from __future__ import annotations

from typing import Any

from pytabstats.core.result import Result
from pytabstats.core.compute.timing import Timer
from pytabstats.frequency._common import TABLE_ONE_WAY, TABLE_TWO_WAY
from pytabstats.frequency.design import FrequencyDesign


class CPUFrequencyBackend:
    """CPU reference backend for frequency tables."""

    @property
    def name(self) -> str:
        return 'cpu_frequency'

    def solve(self, design: FrequencyDesign) -> Result[Any]:
        """Dispatch to table-specific implementation based on design.table_type."""
        timer = Timer()
        timer.start()

        table_type = design.table_type

        with timer.section(table_type):
            if table_type == TABLE_ONE_WAY:
                from pytabstats.frequency.backends._one_way import one_way_table
                params, info, warnings_list = one_way_table(design)
            elif table_type == TABLE_TWO_WAY:
                from pytabstats.frequency.backends._two_way import two_way_table
                params, info, warnings_list = two_way_table(design)
            else:
                raise ValueError(f"Unknown table_type: {table_type!r}")

        timer.stop()

        info['table_type'] = table_type
        return Result(
            params=params,
            info=info,
            timing=timer.result(),
            backend_name=self.name,
            warnings=tuple(warnings_list),
        )
