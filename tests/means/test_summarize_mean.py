"""
Tests for summarize_mean().

Reference values: R 4.x, t.test(mtcars$mpg) and
t.test(mpg ~ 1, data = subset(mtcars, cyl == k)).
"""

import numpy as np
import pytest
from numpy.testing import assert_allclose
from scipy import stats as sp_stats

from pytabstats import Dataset, summarize_mean
from pytabstats.core.exceptions import (
    EmptyPartitionError,
    InvalidColumnError,
    TypeMismatchError,
    ValidationError,
)
from pytabstats.means import MeanDesign


class TestUngrouped:

    def test_overall_mpg(self, mtcars):
        """
        R: t.test(mtcars$mpg)
        mean 20.09062, 95 percent CI 17.91768 22.26357
        """
        result = summarize_mean(mtcars, "mpg")
        assert result.kind == "mean_table"
        assert len(result) == 1

        row = result[0]
        assert row.key == ()
        assert row.n == 32
        assert row.mean == pytest.approx(20.090625, rel=1e-12)
        assert row.lower_ci == pytest.approx(17.91768, abs=1e-5)
        assert row.upper_ci == pytest.approx(22.26357, abs=1e-5)
        assert row.min == 10.4
        assert row.max == 33.9

    def test_standard_error(self, mtcars):
        mpg = np.asarray(mtcars["mpg"])
        row = summarize_mean(mtcars, "mpg")[0]
        assert row.standard_error == pytest.approx(
            np.std(mpg, ddof=1) / np.sqrt(32), rel=1e-12,
        )

    def test_interval_uses_t_not_normal(self, mtcars):
        row = summarize_mean(mtcars, "mpg")[0]
        crit = sp_stats.t.ppf(0.975, df=31)
        half = row.upper_ci - row.mean
        assert half == pytest.approx(crit * row.standard_error, rel=1e-12)
        assert half > sp_stats.norm.ppf(0.975) * row.standard_error

    def test_confidence_level(self, mtcars):
        r95 = summarize_mean(mtcars, "mpg")[0]
        r99 = summarize_mean(mtcars, "mpg", confidence_level=0.99)[0]
        assert r99.lower_ci < r95.lower_ci
        assert r99.upper_ci > r95.upper_ci


class TestGrouped:

    def test_by_cyl(self, mtcars):
        """
        R: by(mtcars$mpg, mtcars$cyl, function(x) t.test(x)$conf.int)
        """
        result = summarize_mean(mtcars, "mpg", ["cyl"])
        assert result.kind == "mean_table_grouped"
        assert [row.key for row in result] == [
            (("cyl", 4),), (("cyl", 6),), (("cyl", 8),),
        ]
        assert [row.n for row in result] == [11, 7, 14]
        assert_allclose(
            [row.mean for row in result],
            [26.66364, 19.74286, 15.10000],
            atol=1e-5,
        )
        assert_allclose(
            [row.lower_ci for row in result],
            [23.63389, 18.39853, 13.62187],
            atol=1e-4,
        )
        assert_allclose(
            [row.upper_ci for row in result],
            [29.69338, 21.08718, 16.57813],
            atol=1e-4,
        )

    def test_two_grouping_columns(self, mtcars):
        result = summarize_mean(mtcars, "mpg", ["am", "cyl"])
        assert len(result) == 6
        assert [row.n for row in result] == [3, 4, 12, 8, 3, 2]
        assert sum(row.n for row in result) == 32

    def test_missing_response_dropped(self):
        ds = Dataset.from_columns({
            "y": [1.0, 2.0, None, 4.0, 5.0],
            "g": ["a", "a", "a", "b", "b"],
        })
        result = summarize_mean(ds, "y", ["g"])
        assert [row.n for row in result] == [2, 2]
        assert result[0].mean == pytest.approx(1.5)
        assert result.info["n_missing_response"] == 1

    def test_missing_group_excluded_with_warning(self):
        ds = Dataset.from_columns({
            "y": [1.0, 2.0, 3.0, 4.0],
            "g": ["a", "a", None, "b"],
        })
        result = summarize_mean(ds, "y", ["g"])
        assert sum(row.n for row in result) == 3
        assert result.info["n_excluded"] == 1
        assert any("excluded" in w for w in result.warnings)


class TestEdgeCases:

    def test_single_observation(self):
        ds = Dataset.from_columns({"y": [3.0, 5.0, 7.0], "g": ["a", "a", "b"]})
        result = summarize_mean(ds, "y", ["g"])
        single = result[1]
        assert single.n == 1
        assert single.standard_error == 0.0
        assert single.lower_ci == single.upper_ci == single.mean == 7.0
        assert any("single observation" in w for w in result.warnings)

    def test_empty_partition(self):
        ds = Dataset.from_columns({"y": [1.0, None], "g": ["a", "b"]})
        with pytest.raises(EmptyPartitionError) as exc_info:
            summarize_mean(ds, "y", ["g"])
        assert exc_info.value.key == (("g", "b"),)

    def test_all_groups_missing(self):
        ds = Dataset.from_columns({"y": [1.0, 2.0], "g": [None, None]})
        with pytest.raises(EmptyPartitionError):
            summarize_mean(ds, "y", ["g"])

    def test_categorical_response(self, mtcars_columns):
        mtcars_columns["name"] = ["car"] * 32
        ds = Dataset.from_columns(mtcars_columns)
        with pytest.raises(TypeMismatchError):
            summarize_mean(ds, "name")

    def test_unknown_column(self, mtcars):
        with pytest.raises(InvalidColumnError):
            summarize_mean(mtcars, "hp")
        with pytest.raises(InvalidColumnError):
            summarize_mean(mtcars, "mpg", ["gear"])

    def test_response_also_grouping(self, mtcars):
        with pytest.raises(ValidationError):
            summarize_mean(mtcars, "mpg", ["mpg"])

    def test_bad_confidence_level(self, mtcars):
        with pytest.raises(ValidationError):
            summarize_mean(mtcars, "mpg", confidence_level=95)


class TestSolution:

    def test_prebuilt_design(self, mtcars):
        design = MeanDesign.build(mtcars, "mpg", ["cyl"])
        result = summarize_mean(design)
        assert len(result) == 3

    def test_metadata(self, mtcars):
        result = summarize_mean(mtcars, "mpg", ["cyl"])
        assert result.backend_name == "cpu_means"
        assert result.info["method"] == "student_t"
        assert result.info["n_partitions"] == 3
        assert result.timing["total_seconds"] >= 0.0
        assert result.warnings == ()

    def test_to_records(self, mtcars):
        records = summarize_mean(mtcars, "mpg", ["cyl"]).to_records()
        assert list(records[0]) == [
            "response_var", "group_var", "group_cat",
            "n", "mean", "sem", "lcl", "ucl", "min", "max",
        ]
        assert records[0]["group_cat"] == 4

    def test_to_dataframe(self, mtcars):
        df = summarize_mean(mtcars, "mpg", ["cyl"]).to_dataframe()
        assert df.shape == (3, 10)
        assert df["n"].tolist() == [11, 7, 14]

    def test_summary_and_repr(self, mtcars):
        result = summarize_mean(mtcars, "mpg", ["cyl"])
        assert "cyl=4" in result.summary()
        assert repr(result) == "MeanSolution(response='mpg', groups=['cyl'], rows=3)"
