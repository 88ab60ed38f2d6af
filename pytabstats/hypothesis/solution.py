"""
Significance test solution type.

SignificanceSolution wraps Result[SignificanceParams] and provides an
htest-style summary().
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, TYPE_CHECKING
import numpy as np
from numpy.typing import NDArray

from pytabstats.core.result import Result
from pytabstats.hypothesis._common import SignificanceParams

if TYPE_CHECKING:
    from pytabstats.hypothesis.design import HypothesisDesign


@dataclass
class SignificanceSolution:
    """
    User-facing significance test result.

    ``warning`` is the caller's cue about which statistic to trust: when
    it is set, Pearson's chi-square rests on small expected counts and
    Fisher's exact test (2x2 only) is the safer choice.
    """
    _result: Result[SignificanceParams]
    _design: 'HypothesisDesign | None'

    @property
    def kind(self) -> str:
        """'one_way' or 'two_way'."""
        return self._result.params.kind

    @property
    def statistic_name(self) -> str:
        """'chi2_pearson' or 'fisher_exact'."""
        return self._result.params.statistic_name

    @property
    def statistic(self) -> float | None:
        """Chi-square statistic (None for Fisher)."""
        return self._result.params.statistic

    @property
    def df(self) -> int | None:
        """Degrees of freedom (None for Fisher)."""
        return self._result.params.df

    @property
    def p_value(self) -> float:
        return self._result.params.p_value

    @property
    def warning(self) -> str | None:
        return self._result.params.warning

    @property
    def is_reliable(self) -> bool:
        """False when any expected count is at or below 5."""
        return self._result.params.warning is None

    @property
    def method(self) -> str:
        return self._result.params.method

    @property
    def data_name(self) -> str:
        return self._result.params.data_name

    @property
    def observed(self) -> NDArray[np.floating[Any]]:
        return self._result.params.observed

    @property
    def expected(self) -> NDArray[np.floating[Any]]:
        return self._result.params.expected

    @property
    def extras(self) -> dict[str, Any] | None:
        return self._result.params.extras

    @property
    def residuals(self) -> NDArray | None:
        """Two-way only: Pearson residuals."""
        e = self._result.params.extras
        return e.get('residuals') if e else None

    @property
    def stdres(self) -> NDArray | None:
        """Two-way only: adjusted standardized residuals."""
        e = self._result.params.extras
        return e.get('stdres') if e else None

    # --- Metadata ---

    @property
    def info(self) -> dict[str, Any]:
        return self._result.info

    @property
    def timing(self) -> dict[str, float] | None:
        return self._result.timing

    @property
    def backend_name(self) -> str:
        return self._result.backend_name

    @property
    def warnings(self) -> tuple[str, ...]:
        return self._result.warnings

    # --- Formatting ---

    def summary(self) -> str:
        """
        Format like R's print.htest output.

            Pearson's Chi-squared test

        data:  am by vs
        chi2_pearson = 0.90688, df = 1, p-value = 0.3409
        """
        p = self._result.params
        lines = [f"\t{p.method}", "", f"data:  {p.data_name}"]

        parts = []
        if p.statistic is not None:
            parts.append(f"{p.statistic_name} = {p.statistic:.5g}")
        if p.df is not None:
            parts.append(f"df = {p.df}")
        parts.append(f"p-value = {_format_pvalue(p.p_value)}")
        lines.append(", ".join(parts))

        if p.warning is not None:
            lines.append(f"warning: {p.warning}")

        lines.append("")
        return "\n".join(lines)

    def __repr__(self) -> str:
        p = self._result.params
        stat_str = ""
        if p.statistic is not None:
            stat_str = f", {p.statistic_name}={p.statistic:.4g}"
        return (
            f"SignificanceSolution(method={p.method!r}{stat_str}, "
            f"p_value={p.p_value:.4g})"
        )


def _format_pvalue(p: float) -> str:
    """Format p-value like R does."""
    if p < 2.2e-16:
        return "< 2.2e-16"
    if p < 0.001:
        return f"{p:.4e}"
    return f"{p:.4g}"
