"""
Display formatting for summary results.

Public API:
    format_table(result, digits, stats)  - Publication strings per row
    format_number(x, digits)             - Round half away from zero
    format_count(n)                      - Thousands separators
    parse_cell(text)                     - Numbers back out of a cell
"""

from pytabstats.formatting.table import format_table, FormattedTable, STATS_CHOICES
from pytabstats.formatting._numbers import (
    DEFAULT_DIGITS,
    format_number,
    format_count,
    format_estimate_ci,
    format_count_value,
    parse_cell,
)

__all__ = [
    "format_table",
    "FormattedTable",
    "STATS_CHOICES",
    "DEFAULT_DIGITS",
    "format_number",
    "format_count",
    "format_estimate_ci",
    "format_count_value",
    "parse_cell",
]
