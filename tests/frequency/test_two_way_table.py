"""
Tests for summarize_crosstab().
"""

import pytest
from numpy.testing import assert_array_equal

from pytabstats import Dataset, summarize_crosstab
from pytabstats.core.exceptions import (
    EmptyPartitionError,
    InvalidColumnError,
    ValidationError,
)
from pytabstats.frequency import wilson_ci


class TestCrosstab:

    def test_am_by_cyl(self, mtcars):
        tab = summarize_crosstab(mtcars, "am", "cyl")
        assert tab.kind == "freq_table_two_way"
        assert tab.row_categories == (0, 1)
        assert tab.column_categories == (4, 6, 8)
        assert tab.shape == (2, 3)
        assert_array_equal(tab.observed, [[3, 4, 12], [8, 3, 2]])
        assert tab.grand_total == 32
        assert_array_equal(tab.row_totals, [19, 13])
        assert_array_equal(tab.column_totals, [11, 7, 14])

    def test_cell_order(self, mtcars):
        tab = summarize_crosstab(mtcars, "am", "cyl")
        assert [(c.row_category, c.column_category) for c in tab] == [
            (0, 4), (0, 6), (0, 8), (1, 4), (1, 6), (1, 8),
        ]
        assert sum(c.n for c in tab) == 32

    def test_row_percent(self, mtcars):
        tab = summarize_crosstab(mtcars, "am", "cyl")
        first_row = [c.percent_row for c in tab.cells[:3]]
        assert first_row == pytest.approx([15.789474, 21.052632, 63.157895], abs=1e-6)
        assert sum(first_row) == pytest.approx(100.0)
        lower, upper = wilson_ci(3, 19)
        assert tab[0].lower_ci_row == pytest.approx(100 * lower)
        assert tab[0].upper_ci_row == pytest.approx(100 * upper)

    def test_margins_on_cells(self, mtcars):
        cell = summarize_crosstab(mtcars, "am", "cyl")[5]
        assert (cell.n, cell.n_row_total, cell.n_col_total, cell.n_grand_total) == (2, 13, 14, 32)

    def test_overall_percent_absent_by_default(self, mtcars):
        tab = summarize_crosstab(mtcars, "am", "cyl")
        assert not tab.has_overall_percent
        assert tab[0].percent_col is None
        assert tab[0].percent_total is None
        assert "percent_total" not in tab.to_records()[0]

    def test_overall_percent(self, mtcars):
        tab = summarize_crosstab(mtcars, "am", "cyl", include_overall_percent=True)
        assert tab.has_overall_percent
        cell = tab[2]
        assert cell.percent_col == pytest.approx(100 * 12 / 14)
        assert cell.percent_total == pytest.approx(100 * 12 / 32)
        lower, upper = wilson_ci(12, 32)
        assert cell.lower_ci_total == pytest.approx(100 * lower)
        assert cell.upper_ci_total == pytest.approx(100 * upper)
        assert sum(c.percent_total for c in tab) == pytest.approx(100.0)

    def test_zero_filled_cross_product(self):
        ds = Dataset.from_columns({
            "r": ["a", "a", "b"],
            "c": ["x", "y", "x"],
        })
        tab = summarize_crosstab(ds, "r", "c")
        assert len(tab) == 4
        assert_array_equal(tab.observed, [[1, 1], [1, 0]])
        assert tab[3].n == 0
        assert tab[3].percent_row == 0.0

    def test_missing_excluded(self):
        ds = Dataset.from_columns({
            "r": ["a", None, "b", "b"],
            "c": ["x", "y", None, "y"],
        })
        tab = summarize_crosstab(ds, "r", "c")
        assert tab.grand_total == 2
        assert tab.info["n_excluded"] == 2
        assert tab.warnings

    def test_observed_read_only(self, mtcars):
        tab = summarize_crosstab(mtcars, "am", "cyl")
        with pytest.raises(ValueError):
            tab.observed[0, 0] = 100


class TestErrors:

    def test_no_complete_rows(self):
        ds = Dataset.from_columns({"r": ["a", None], "c": [None, "x"]})
        with pytest.raises(EmptyPartitionError):
            summarize_crosstab(ds, "r", "c")

    def test_unknown_column(self, mtcars):
        with pytest.raises(InvalidColumnError):
            summarize_crosstab(mtcars, "am", "gear")

    def test_same_column(self, mtcars):
        with pytest.raises(ValidationError, match="must differ"):
            summarize_crosstab(mtcars, "am", "am")


class TestConversion:

    def test_to_dataframe(self, mtcars):
        df = summarize_crosstab(mtcars, "am", "cyl", include_overall_percent=True).to_dataframe()
        assert df.shape[0] == 6
        assert {"row_var", "row_cat", "col_var", "col_cat", "percent_total"} <= set(df.columns)

    def test_summary(self, mtcars):
        text = summarize_crosstab(mtcars, "am", "cyl").summary()
        assert "am \\ cyl" in text
        assert text.splitlines()[-1].split() == ["Total", "11", "7", "14", "32"]

    def test_repr(self, mtcars):
        assert repr(summarize_crosstab(mtcars, "am", "cyl")) == (
            "TwoWayFrequencySolution(rows='am', columns='cyl', shape=2x3, n=32)"
        )
