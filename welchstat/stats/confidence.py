"""Supported two-sided confidence levels and their critical t-values."""

from __future__ import annotations

import math
from enum import Enum
from typing import Union

from scipy.stats import t as student_t

from ..errors import UnsupportedConfidence

TAILS = 2.0


class ConfidenceLevel(Enum):
    """Closed set of confidence levels, valued by percentage."""

    P80 = 80.0
    P90 = 90.0
    P95 = 95.0
    P98 = 98.0
    P99 = 99.0
    P995 = 99.5

    @property
    def percent(self) -> float:
        return float(self.value)

    @property
    def alpha(self) -> float:
        """Significance level, ``1 - percent / 100``."""
        return 1.0 - self.percent / 100.0

    @property
    def tail_probability(self) -> float:
        """Probability mass in each tail of the two-sided test."""
        return self.alpha / TAILS

    @property
    def quantile(self) -> float:
        """Upper quantile used for the critical value."""
        return 1.0 - self.tail_probability

    @property
    def label(self) -> str:
        return f"{self.percent:g}%"

    def critical_value(self, df: float) -> float:
        """Return the two-sided critical t-value at ``df`` degrees of freedom.

        Args:
            df (float): Degrees of freedom; real valued, must be positive.

        Returns:
            float: ``t`` such that ``P(|T| > t) = alpha`` for ``T ~ t(df)``.
        """
        return float(student_t.ppf(self.quantile, df))

    @classmethod
    def parse(cls, value: Union["ConfidenceLevel", str, float, int]) -> "ConfidenceLevel":
        """Resolve a member from a member, its name or a percentage.

        Accepted forms: ``ConfidenceLevel.P95``, ``"P95"``, ``"p995"``,
        ``"95"``, ``"95%"``, ``99.5``.

        Raises:
            UnsupportedConfidence: If ``value`` names no supported level.
        """
        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            text = value.strip()
            if text.upper() in cls.__members__:
                return cls[text.upper()]
            try:
                pct = float(text.rstrip("%").strip())
            except ValueError:
                raise UnsupportedConfidence(
                    f"Unsupported confidence level {value!r}; "
                    f"choose one of {supported_levels()}."
                ) from None
        elif isinstance(value, (int, float)) and not isinstance(value, bool):
            pct = float(value)
        else:
            raise UnsupportedConfidence(
                f"Unsupported confidence level {value!r}; "
                f"choose one of {supported_levels()}."
            )

        for member in cls:
            if math.isclose(member.percent, pct, rel_tol=0.0, abs_tol=1e-9):
                return member
        raise UnsupportedConfidence(
            f"Unsupported confidence level {value!r}; "
            f"choose one of {supported_levels()}."
        )


DEFAULT_CONFIDENCE = ConfidenceLevel.P95


def supported_levels() -> list[str]:
    """Return member names in ascending order."""
    return [member.name for member in ConfidenceLevel]
