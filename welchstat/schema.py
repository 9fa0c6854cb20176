"""Define standardized column names for comparison DataFrames."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class ResultColumns:
    """Container for standardized column labels.

    These column names are used in the comparison results DataFrame, the CSV
    export and the summary chart so all three agree.

    Attributes:
        label: Name of the experimental set (usually its file path).
        delta: Difference of means, experiment minus control, in the unit of
            the measurements.
        margin: Half-width of the confidence interval around ``delta`` at the
            chosen confidence level.
        p_value: Two-sided Welch's t-test p-value.
        significant: Whether ``|delta|`` exceeds the margin of error.
    """

    label: str = "Experiment"
    confidence: str = "Confidence"
    base_n: str = "Control n"
    base_mean: str = "Control mean"
    base_sd: str = "Control SD"
    other_n: str = "Experiment n"
    other_mean: str = "Experiment mean"
    other_sd: str = "Experiment SD"
    delta: str = "Delta"
    margin: str = "Margin of error"
    ci_low: str = "CI low"
    ci_high: str = "CI high"
    relative_delta: str = "Relative delta (%)"
    relative_margin: str = "Relative margin (%)"
    t_statistic: str = "t"
    dof: str = "Welch df"
    critical_value: str = "t critical"
    p_value: str = "p-value"
    effect_size: str = "Cohen's d"
    power: str = "Power"
    significant: str = "Significant"


COLUMNS = ResultColumns()
