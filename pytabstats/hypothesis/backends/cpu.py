"""
CPU reference backend for significance tests.

Dispatches to test-specific submodules based on design.test_type.
"""

from __future__ import annotations

from pytabstats.core.result import Result
from pytabstats.core.compute.timing import Timer
from pytabstats.hypothesis._common import SignificanceParams
from pytabstats.hypothesis.design import HypothesisDesign


class CPUHypothesisBackend:
    """CPU reference backend for significance tests."""

    @property
    def name(self) -> str:
        return 'cpu_hypothesis'

    def solve(self, design: HypothesisDesign) -> Result[SignificanceParams]:
        """Dispatch to test-specific implementation based on design.test_type."""
        timer = Timer()
        timer.start()

        test_type = design.test_type

        with timer.section(test_type):
            if test_type == "chisq_one_way":
                from pytabstats.hypothesis.backends._chisq_test import chisq_one_way
                params, warnings_list = chisq_one_way(design)
            elif test_type == "chisq_two_way":
                from pytabstats.hypothesis.backends._chisq_test import chisq_two_way
                params, warnings_list = chisq_two_way(design)
            elif test_type == "fisher_two_way":
                from pytabstats.hypothesis.backends._fisher_test import fisher_2x2
                params, warnings_list = fisher_2x2(design)
            else:
                raise ValueError(f"Unknown test_type: {test_type!r}")

        timer.stop()

        return Result(
            params=params,
            info={'test_type': test_type, 'method': design.method},
            timing=timer.result(),
            backend_name=self.name,
            warnings=tuple(warnings_list),
        )
