"""Result record of one base-vs-other comparison."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Any, Dict, Tuple

from .confidence import ConfidenceLevel
from .summary import SampleSummary


@dataclass(frozen=True)
class ComparisonReport:
    """Outcome of a two-sided Welch's t-test between two summaries.

    Attributes:
        base: Summary of the control set.
        other: Summary of the experimental set.
        confidence: Confidence level the test was run at.
        delta: ``other.mean - base.mean``.
        margin_of_error: Half-width of the confidence interval around
            ``delta``; ``critical_value * std_err``.
        p_value: Two-sided tail probability of ``t_statistic``, in [0, 1].
        significant: ``abs(delta) > margin_of_error``.
        t_statistic: ``delta / std_err``.
        degrees_of_freedom: Welch–Satterthwaite degrees of freedom (NaN when
            both samples have zero variance).
        critical_value: Two-sided critical t-value at ``degrees_of_freedom``.
        std_err: Combined standard error of the difference in means.
        effect_size: Cohen's d using the mean of the two variances.
        power: Probability that the test detects an effect of this size.
    """

    base: SampleSummary
    other: SampleSummary
    confidence: ConfidenceLevel
    delta: float
    margin_of_error: float
    p_value: float
    significant: bool
    t_statistic: float = math.nan
    degrees_of_freedom: float = math.nan
    critical_value: float = math.nan
    std_err: float = math.nan
    effect_size: float = math.nan
    power: float = math.nan

    @property
    def alpha(self) -> float:
        return self.confidence.alpha

    @property
    def direction(self) -> str:
        """Comparison symbol for ``other.mean`` relative to ``base.mean``."""
        if self.delta > 0:
            return ">"
        if self.delta < 0:
            return "<"
        return "="

    @property
    def confidence_interval(self) -> Tuple[float, float]:
        return (self.delta - self.margin_of_error, self.delta + self.margin_of_error)

    @property
    def relative_delta(self) -> float:
        """``delta`` as a fraction of the base mean (NaN if the base mean is 0)."""
        if self.base.mean == 0:
            return math.nan
        return self.delta / abs(self.base.mean)

    @property
    def relative_margin(self) -> float:
        if self.base.mean == 0:
            return math.nan
        return self.margin_of_error / abs(self.base.mean)

    def to_dict(self) -> Dict[str, Any]:
        """Flatten the report into plain values for tabular export."""
        return {
            "confidence": self.confidence.label,
            "base_n": self.base.count,
            "base_mean": self.base.mean,
            "base_sd": self.base.std_dev,
            "other_n": self.other.count,
            "other_mean": self.other.mean,
            "other_sd": self.other.std_dev,
            "delta": self.delta,
            "margin_of_error": self.margin_of_error,
            "ci_low": self.confidence_interval[0],
            "ci_high": self.confidence_interval[1],
            "relative_delta": self.relative_delta,
            "relative_margin": self.relative_margin,
            "t_statistic": self.t_statistic,
            "degrees_of_freedom": self.degrees_of_freedom,
            "critical_value": self.critical_value,
            "p_value": self.p_value,
            "effect_size": self.effect_size,
            "power": self.power,
            "significant": bool(self.significant),
        }
