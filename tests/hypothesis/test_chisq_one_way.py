"""
Tests for test_one_way(): chi-squared test for equal proportions.

R: chisq.test(table(mtcars$am)) -> X-squared = 1.125, df = 1, p-value = 0.2888
"""

import numpy as np
import pytest
from numpy.testing import assert_allclose

import pytabstats.hypothesis as ht
from pytabstats import Dataset, summarize_crosstab, summarize_frequency
from pytabstats.core.exceptions import InvalidInputError


class TestEqualProportions:

    def test_am(self, mtcars):
        result = ht.test_one_way(summarize_frequency(mtcars, "am"))
        assert result.kind == "one_way"
        assert result.statistic_name == "chi2_pearson"
        assert result.statistic == pytest.approx(1.125, rel=1e-10)
        assert result.df == 1
        assert result.p_value == pytest.approx(0.2888443663464849, rel=1e-8)
        assert result.method == "Chi-squared test for equal proportions"
        assert result.data_name == "am"

    def test_expected_uniform(self, mtcars):
        result = ht.test_one_way(summarize_frequency(mtcars, "cyl"))
        assert_allclose(result.expected, [32 / 3] * 3)
        assert_allclose(result.observed, [11, 7, 14])
        assert result.df == 2

    def test_even_split(self):
        ds = Dataset.from_columns({"g": ["a"] * 16 + ["b"] * 16})
        result = ht.test_one_way(summarize_frequency(ds, "g"))
        assert result.statistic == 0.0
        assert result.p_value == pytest.approx(1.0)
        assert result.warning is None
        assert result.is_reliable

    def test_small_expected_warning(self):
        ds = Dataset.from_columns({"g": ["a", "a", "a", "b", "c"]})
        result = ht.test_one_way(summarize_frequency(ds, "g"))
        assert result.warning == "expected cell count ≤ 5"
        assert not result.is_reliable
        assert result.warnings


class TestGroupedTable:

    def test_group_key_required(self, mtcars):
        freq = summarize_frequency(mtcars, "cyl", ["am"])
        with pytest.raises(InvalidInputError):
            ht.test_one_way(freq)

    def test_selected_group(self, mtcars):
        freq = summarize_frequency(mtcars, "cyl", ["am"])
        result = ht.test_one_way(freq, group_key=(("am", 0),))
        assert_allclose(result.observed, [3, 4, 12])
        expected = np.full(3, 19 / 3)
        stat = np.sum((np.array([3, 4, 12]) - expected) ** 2 / expected)
        assert result.statistic == pytest.approx(stat)
        assert result.data_name == "cyl | am=0"
        assert result.extras["group_key"] == (("am", 0),)


class TestInvalidInput:

    def test_single_category(self):
        ds = Dataset.from_columns({"g": ["a", "a", "a"]})
        with pytest.raises(InvalidInputError, match="at least 2 categories"):
            ht.test_one_way(summarize_frequency(ds, "g"))

    def test_wrong_kind(self, mtcars):
        with pytest.raises(InvalidInputError, match="freq_table_one_way"):
            ht.test_one_way(summarize_crosstab(mtcars, "am", "cyl"))

    def test_not_a_result(self):
        with pytest.raises(InvalidInputError):
            ht.test_one_way([19, 13])
