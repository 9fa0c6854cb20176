"""Two-sided Welch's t-test between two sample summaries.

Welch's test compares two means without assuming equal population variances.
The effective degrees of freedom come from the Welch–Satterthwaite equation
and are used directly (non-integer) as the Student's t parameter.

References:
    Welch, B. L. (1947). The generalization of "Student's" problem when
    several different population variances are involved.
"""

from __future__ import annotations

import logging
import math
import warnings
from typing import Any, Union

from scipy.stats import norm
from scipy.stats import t as student_t

from ..errors import InsufficientData, InvalidValue
from .confidence import ConfidenceLevel
from .report import ComparisonReport
from .summary import MIN_COUNT, SampleSummary

logger = logging.getLogger(__name__)


def _check_summary(summary: Any, role: str) -> None:
    count = getattr(summary, "count", None)
    if count is None or int(count) < MIN_COUNT:
        raise InsufficientData(
            f"{role} sample needs at least {MIN_COUNT} measurements, got {count}."
        )
    variance = float(summary.variance)
    if not math.isfinite(variance) or variance < 0:
        raise InvalidValue(f"{role} sample has invalid variance {variance!r}.")
    if not math.isfinite(float(summary.mean)):
        raise InvalidValue(f"{role} sample has invalid mean {summary.mean!r}.")


def _effect_size_and_power(
    base: SampleSummary, other: SampleSummary, effect: float, alpha: float
) -> tuple[float, float]:
    """Cohen's d and the normal-approximation power of the test."""
    std_dev = math.sqrt(base.variance / 2.0 + other.variance / 2.0)
    if std_dev == 0:
        if effect == 0:
            return 0.0, 0.0
        return math.inf, 1.0

    effect_size = effect / std_dev
    z = effect / (std_dev * math.sqrt(1.0 / base.count + 1.0 / other.count))
    za = float(norm.ppf(1.0 - alpha / 2.0))
    power = float(norm.cdf(z - za) - norm.cdf(-z - za))
    return float(effect_size), power


def compare(
    base: SampleSummary,
    other: SampleSummary,
    confidence: Union[ConfidenceLevel, str, float] = ConfidenceLevel.P95,
) -> ComparisonReport:
    """Run a two-sided Welch's t-test of ``other`` against ``base``.

    Args:
        base (SampleSummary): Control set summary.
        other (SampleSummary): Experimental set summary.
        confidence (ConfidenceLevel | str | float, optional): Level to test at;
            strings and percentages are resolved with
            :meth:`ConfidenceLevel.parse`. Defaults to ``P95``.

    Returns:
        ComparisonReport: Difference in means, margin of error, p-value and
        significance judgement.

    Raises:
        InsufficientData: If either summary has fewer than two measurements.
        InvalidValue: If either summary carries a non-finite mean or an
            invalid variance, or the difference of means or its
            standard error is not representable as a float.
        UnsupportedConfidence: If ``confidence`` is not a supported level.

    Note:
        When both variances are zero the standard error is zero. Any non-zero
        difference is then certain (``p = 0``) and equal means give ``p = 1``;
        the margin of error is 0 and degrees of freedom are NaN.
    """
    level = ConfidenceLevel.parse(confidence)
    _check_summary(base, "Base")
    _check_summary(other, "Other")

    se1_sq = base.variance / base.count
    se2_sq = other.variance / other.count
    delta = other.mean - base.mean
    effect = abs(delta)
    se_sq = se1_sq + se2_sq
    if not (math.isfinite(delta) and math.isfinite(se_sq)):
        raise InvalidValue(
            "Difference of means or its standard error exceeds the floating "
            "point range."
        )
    se = math.sqrt(se_sq)

    effect_size, power = _effect_size_and_power(base, other, effect, level.alpha)

    if se == 0:
        warnings.warn(
            "Both samples have zero variance; significance reduces to whether "
            "the means differ.",
            RuntimeWarning,
            stacklevel=2,
        )
        if delta == 0:
            t_stat, p_value = 0.0, 1.0
        else:
            t_stat, p_value = math.copysign(math.inf, delta), 0.0
        return ComparisonReport(
            base=base,
            other=other,
            confidence=level,
            delta=delta,
            margin_of_error=0.0,
            p_value=p_value,
            significant=delta != 0,
            t_statistic=t_stat,
            degrees_of_freedom=math.nan,
            critical_value=math.nan,
            std_err=0.0,
            effect_size=effect_size,
            power=power,
        )

    t_stat = delta / se
    # Welch-Satterthwaite in shares of se_sq, so large inputs stay in range
    df = 1.0 / (
        (se1_sq / se_sq) ** 2 / (base.count - 1)
        + (se2_sq / se_sq) ** 2 / (other.count - 1)
    )
    t_crit = level.critical_value(df)
    margin = t_crit * se

    p_value = float(2 * (1 - student_t.cdf(abs(t_stat), df)))
    p_value = min(max(p_value, 0.0), 1.0)

    logger.debug(
        "Welch t=%.4g df=%.4g t_crit=%.4g margin=%.4g p=%.4g at %s",
        t_stat,
        df,
        t_crit,
        margin,
        p_value,
        level.label,
    )

    return ComparisonReport(
        base=base,
        other=other,
        confidence=level,
        delta=delta,
        margin_of_error=margin,
        p_value=p_value,
        significant=effect > margin,
        t_statistic=t_stat,
        degrees_of_freedom=df,
        critical_value=t_crit,
        std_err=se,
        effect_size=effect_size,
        power=power,
    )


class WelchTTest:
    """Comparison bound to one confidence level.

    Useful when one control set is compared against many experiments at the
    same level.
    """

    def __init__(self, confidence: Union[ConfidenceLevel, str, float] = ConfidenceLevel.P95):
        self.confidence = ConfidenceLevel.parse(confidence)

    def compare(self, base: SampleSummary, other: SampleSummary) -> ComparisonReport:
        return compare(base, other, self.confidence)

    def __repr__(self) -> str:
        return f"WelchTTest(confidence={self.confidence.name})"
