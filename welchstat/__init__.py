"""
A Python package for comparing sets of noisy measurements.

Determines whether a control set and one or more experimental sets differ by
more than chance, using a two-sided Welch's t-test at a fixed confidence level.

Modules:
    - stats: Sample summaries, confidence levels and the Welch's t-test engine.
    - data_processing: Loads one-value-per-line measurement files.
    - analysis: Compares a control against each experiment and tabulates results.
    - reporting: Formats comparison reports as text.
    - output: Writes comparison tables to CSV.
    - plotting: Renders the comparison summary chart.
"""

__version__ = "1.0.0"

from .analysis import (
    compare_all,
    create_results_dataframe,
    print_comparisons,
    process_all_files,
)
from .data_processing import read_measurements
from .errors import InsufficientData, InvalidValue, UnsupportedConfidence, WelchStatError
from .reporting import format_comparison, format_p_value
from .stats import (
    ComparisonReport,
    ConfidenceLevel,
    SampleSummary,
    WelchTTest,
    compare,
    summarize,
)

__all__ = [
    # Engine
    "SampleSummary",
    "summarize",
    "ConfidenceLevel",
    "ComparisonReport",
    "WelchTTest",
    "compare",
    # Errors
    "WelchStatError",
    "InsufficientData",
    "InvalidValue",
    "UnsupportedConfidence",
    # Pipeline
    "read_measurements",
    "compare_all",
    "process_all_files",
    "create_results_dataframe",
    "print_comparisons",
    # Reporting
    "format_comparison",
    "format_p_value",
]
