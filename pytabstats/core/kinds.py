"""
Result kind constants for pytabstats.

This module is the SINGLE SOURCE OF TRUTH for result kind strings.
Import from here, never use raw strings.

Every solution object exposes a ``kind`` drawn from this closed set. The
formatter and the significance tester branch over it and reject anything
else.

Usage:
    from pytabstats.core.kinds import KIND_FREQ_TWO_WAY

    if solution.kind == KIND_FREQ_TWO_WAY:
        ...
"""

# Overall (ungrouped) mean of a numeric column
KIND_MEAN_TABLE = 'mean_table'

# Means split by one or more grouping columns
KIND_MEAN_TABLE_GROUPED = 'mean_table_grouped'

# One-way frequency distribution, optionally split by outer groups
KIND_FREQ_ONE_WAY = 'freq_table_one_way'

# Two-way (row x column) frequency distribution
KIND_FREQ_TWO_WAY = 'freq_table_two_way'

ALL_KINDS = frozenset({
    KIND_MEAN_TABLE,
    KIND_MEAN_TABLE_GROUPED,
    KIND_FREQ_ONE_WAY,
    KIND_FREQ_TWO_WAY,
})

# Column kinds recorded by Dataset
COLUMN_NUMERIC = 'numeric'
COLUMN_CATEGORICAL = 'categorical'
