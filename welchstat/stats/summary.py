"""Reduce a sample of measurements to count, mean and variance."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Iterable

import numpy as np

from ..errors import InsufficientData, InvalidValue

MIN_COUNT = 2


@dataclass(frozen=True)
class SampleSummary:
    """Summary statistics of one set of measurements.

    Attributes:
        count: Number of measurements (at least 2).
        mean: Arithmetic mean of the measurements.
        variance: Unbiased sample variance (``n - 1`` denominator).

    Raises:
        InsufficientData: If ``count`` is below 2.
        InvalidValue: If ``mean`` or ``variance`` is non-finite, or the
            variance is negative.
    """

    count: int
    mean: float
    variance: float

    def __post_init__(self) -> None:
        if int(self.count) < MIN_COUNT:
            raise InsufficientData(
                f"At least {MIN_COUNT} measurements are required, got {self.count}."
            )
        if not math.isfinite(self.mean) or not math.isfinite(self.variance):
            raise InvalidValue(
                f"Summary statistics must be finite, got mean={self.mean!r}, "
                f"variance={self.variance!r}."
            )
        if self.variance < 0:
            raise InvalidValue(f"Variance must be >= 0, got {self.variance!r}.")

    @classmethod
    def from_values(cls, values: Iterable[float]) -> "SampleSummary":
        """Summarize a sequence of measurements.

        Mean and variance are accumulated in one pass with Welford's algorithm
        and Bessel's correction.

        Args:
            values (Iterable[float]): Ordered measurements in any consistent
                unit.

        Returns:
            SampleSummary: Immutable summary of ``values``.

        Raises:
            InsufficientData: If fewer than two values are given.
            InvalidValue: If any value is non-numeric, NaN or infinite.
        """
        try:
            arr = np.asarray(list(values), dtype=float).ravel()
        except (TypeError, ValueError) as exc:
            raise InvalidValue(f"Measurements must be numeric: {exc}") from exc

        n = int(arr.size)
        if n < MIN_COUNT:
            raise InsufficientData(
                f"At least {MIN_COUNT} measurements are required, got {n}."
            )
        bad = ~np.isfinite(arr)
        if np.any(bad):
            first = int(np.flatnonzero(bad)[0])
            raise InvalidValue(
                f"Non-finite measurement {arr[first]!r} at position {first}."
            )

        # Accumulate on values scaled by a power of two so the squared
        # deviations stay in range; the scaling itself is exact.
        _, exponent = math.frexp(float(np.max(np.abs(arr))))
        mean = 0.0
        m2 = 0.0
        for k, x in enumerate(arr, start=1):
            x = math.ldexp(float(x), -exponent)
            delta = x - mean
            mean += delta / k
            m2 += delta * (x - mean)

        # m2 can drift a hair below zero for constant samples
        try:
            variance = math.ldexp(max(m2, 0.0) / (n - 1), 2 * exponent)
        except OverflowError:
            raise InvalidValue(
                "Variance of the measurements exceeds the floating point range."
            ) from None
        return cls(count=n, mean=math.ldexp(mean, exponent), variance=variance)

    @property
    def std_dev(self) -> float:
        """Sample standard deviation."""
        return math.sqrt(self.variance)

    @property
    def std_err(self) -> float:
        """Standard error of the mean."""
        return math.sqrt(self.variance / self.count)


def summarize(values: Iterable[float]) -> SampleSummary:
    """Shorthand for :meth:`SampleSummary.from_values`."""
    return SampleSummary.from_values(values)
