"""
Statistical engine for comparing sets of measurements.

This subpackage reduces raw measurements to summaries and compares them with
a two-sided Welch's t-test. All functions are pure and operate on primitive
types and numpy arrays; no file, plotting or formatting logic is included.

Modules:
    summary:
        ``SampleSummary`` with count, mean and unbiased variance computed in
        one pass (Welford). Standard deviation and standard error are
        derived on demand.

    confidence:
        ``ConfidenceLevel`` enumeration (80% to 99.5%) and the critical
        t-value lookup delegated to ``scipy.stats.t``.

    report:
        ``ComparisonReport`` result record.

    welch:
        ``compare`` and ``WelchTTest``: t-statistic, Welch–Satterthwaite
        degrees of freedom, margin of error, p-value, effect size and power.

Design Principle:
    This subpackage has no dependencies on the loading, reporting or
    plotting modules. It can be tested in isolation.
"""

from .confidence import DEFAULT_CONFIDENCE, ConfidenceLevel, supported_levels
from .report import ComparisonReport
from .summary import SampleSummary, summarize
from .welch import WelchTTest, compare

__all__ = [
    "ConfidenceLevel",
    "DEFAULT_CONFIDENCE",
    "supported_levels",
    "ComparisonReport",
    "SampleSummary",
    "summarize",
    "WelchTTest",
    "compare",
]
