"""
Tests for the Wilson score interval.

R: prop.test(x, n, correct = FALSE)$conf.int
"""

import numpy as np
import pytest

from pytabstats.frequency import wilson_ci


class TestWilsonInterval:

    def test_am_manual(self):
        """R: prop.test(19, 32, correct=FALSE)$conf.int -> 0.4226002 0.7448037"""
        lower, upper = wilson_ci(19, 32)
        assert lower == pytest.approx(0.4226002, abs=1e-6)
        assert upper == pytest.approx(0.7448037, abs=1e-6)

    def test_symmetry(self):
        lower, upper = wilson_ci(13, 32)
        lo_c, up_c = wilson_ci(19, 32)
        assert lower == pytest.approx(1.0 - up_c, rel=1e-12)
        assert upper == pytest.approx(1.0 - lo_c, rel=1e-12)

    def test_zero_successes(self):
        lower, upper = wilson_ci(0, 10)
        assert lower == 0.0
        assert 0.0 < upper < 1.0

    def test_all_successes(self):
        lower, upper = wilson_ci(10, 10)
        assert upper == 1.0
        assert 0.0 < lower < 1.0

    @pytest.mark.parametrize("x,n", [(1, 3), (5, 50), (250, 1000), (999, 1000)])
    def test_contains_estimate(self, x, n):
        lower, upper = wilson_ci(x, n)
        assert 0.0 <= lower < x / n < upper <= 1.0

    def test_wider_at_higher_confidence(self):
        lo95, up95 = wilson_ci(19, 32, 0.95)
        lo99, up99 = wilson_ci(19, 32, 0.99)
        assert lo99 < lo95
        assert up99 > up95

    def test_narrows_with_n(self):
        widths = [np.subtract(*wilson_ci(n // 2, n)[::-1]) for n in (10, 100, 1000)]
        assert widths[0] > widths[1] > widths[2]
