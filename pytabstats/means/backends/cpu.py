"""
CPU backend for mean tables.

Student-t confidence intervals per partition, matching R's t.test()
conventions.
"""

from __future__ import annotations

import logging
import numpy as np
from scipy import stats as sp_stats

from pytabstats.core.result import Result
from pytabstats.core.compute.timing import Timer
from pytabstats.core.exceptions import EmptyPartitionError
from pytabstats.core.partition import Partition, partition
from pytabstats.means._common import ContinuousSummary, MeanParams
from pytabstats.means.design import MeanDesign

logger = logging.getLogger(__name__)


class CPUMeansBackend:
    """CPU reference backend for mean tables."""

    @property
    def name(self) -> str:
        return 'cpu_means'

    def solve(self, design: MeanDesign) -> Result[MeanParams]:
        """Partition the dataset and summarize the response in each part."""
        timer = Timer()
        timer.start()

        dataset = design.dataset
        warnings_list: list[str] = []

        with timer.section('partition'):
            parts = partition(dataset, design.grouping_columns)
        warnings_list.extend(parts.warnings)
        if not len(parts):
            raise EmptyPartitionError(
                f"no rows with values on all grouping columns "
                f"{list(design.grouping_columns)}"
            )

        response = dataset[design.response_column]

        with timer.section('summaries'):
            rows = []
            for part in parts:
                row = self._summarize(part, response, design)
                if row.n == 1:
                    message = (
                        f"{part.label()}: single observation of "
                        f"{design.response_column!r}; standard error set to 0 "
                        f"and interval collapsed to the mean"
                    )
                    warnings_list.append(message)
                    logger.debug(message)
                rows.append(row)

        timer.stop()

        n_missing = int(np.sum(np.isnan(response)))
        return Result(
            params=MeanParams(
                response_column=design.response_column,
                grouping_columns=design.grouping_columns,
                confidence_level=design.confidence_level,
                rows=tuple(rows),
            ),
            info={
                'method': 'student_t',
                'n_rows': dataset.n_rows,
                'n_excluded': parts.n_excluded,
                'n_partitions': len(parts),
                'n_missing_response': n_missing,
            },
            timing=timer.result(),
            backend_name=self.name,
            warnings=tuple(warnings_list),
        )

    @staticmethod
    def _summarize(part: Partition, response: np.ndarray, design: MeanDesign) -> ContinuousSummary:
        """Mean, SE and t interval of the response within one partition."""
        values = response[part.indices]
        values = values[~np.isnan(values)]
        n = len(values)

        if n == 0:
            raise EmptyPartitionError(
                f"{part.label()}: no non-missing values of "
                f"{design.response_column!r} ({part.size} rows in partition)",
                key=part.key,
            )

        mean = float(np.mean(values))

        # t quantile is undefined at df = 0
        if n == 1:
            se = 0.0
            lower = upper = mean
        else:
            se = float(np.std(values, ddof=1) / np.sqrt(n))
            alpha = 1.0 - design.confidence_level
            crit = float(sp_stats.t.ppf(1.0 - alpha / 2.0, df=n - 1))
            lower = mean - crit * se
            upper = mean + crit * se

        return ContinuousSummary(
            key=part.key,
            n=n,
            mean=mean,
            standard_error=se,
            lower_ci=lower,
            upper_ci=upper,
            min=float(np.min(values)),
            max=float(np.max(values)),
        )
