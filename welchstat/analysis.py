"""
Compare a control set of measurements against one or more experiments.

For every experimental set the pipeline:
- summarizes the raw values (count, mean, unbiased variance),
- runs a two-sided Welch's t-test against the control summary at the chosen
  confidence level, and
- collects the ``ComparisonReport`` under the experiment's label.

Any set that cannot be summarized (fewer than two values, non-finite values)
stops the whole run; no partial results are returned.
"""

from __future__ import annotations

import logging
import os
from dataclasses import fields
from typing import List, Mapping, Sequence, Tuple, Union

import numpy as np
import pandas as pd

from .data_processing import read_measurements
from .reporting import format_comparison
from .schema import COLUMNS
from .stats.confidence import DEFAULT_CONFIDENCE, ConfidenceLevel
from .stats.report import ComparisonReport
from .stats.summary import SampleSummary
from .stats.welch import WelchTTest

logger = logging.getLogger(__name__)


def compare_all(
    base_values: Sequence[float],
    others: Union[Mapping[str, Sequence[float]], Sequence[Tuple[str, Sequence[float]]]],
    confidence=DEFAULT_CONFIDENCE,
) -> List[Tuple[str, ComparisonReport]]:
    """Compare every experimental set against the control set.

    Args:
        base_values (Sequence[float]): Control measurements.
        others: Experimental measurements as ``(label, values)`` pairs, or a
            mapping of label to values. Sets are compared in the order given;
            a repeated label is compared once per occurrence.
        confidence (ConfidenceLevel | str | float, optional): Level to test
            at. Defaults to ``P95``.

    Returns:
        list[tuple[str, ComparisonReport]]: ``(label, report)`` pairs in input
        order.

    Raises:
        InsufficientData: If any set has fewer than two values.
        InvalidValue: If any set holds a non-finite value.
        UnsupportedConfidence: If ``confidence`` is not supported.
    """
    test = WelchTTest(confidence)
    base = SampleSummary.from_values(base_values)
    logger.info(
        "Control: n=%d mean=%.6g sd=%.6g", base.count, base.mean, base.std_dev
    )

    results = []
    pairs = others.items() if isinstance(others, Mapping) else others
    for label, values in pairs:
        other = SampleSummary.from_values(values)
        report = test.compare(base, other)
        logger.info(
            "%s: n=%d mean=%.6g delta=%.6g ± %.6g p=%.4g (%s)",
            label,
            other.count,
            other.mean,
            report.delta,
            report.margin_of_error,
            report.p_value,
            "significant" if report.significant else "not significant",
        )
        results.append((label, report))
    return results


def process_all_files(
    control_path: str,
    experiment_paths: Sequence[str],
    confidence=DEFAULT_CONFIDENCE,
) -> List[Tuple[str, ComparisonReport]]:
    """Load the control and experiment files and compare them.

    Files are read in order and the first unreadable or invalid file aborts
    the run.
    """
    level = ConfidenceLevel.parse(confidence)
    logger.info("Processing control %s at %s confidence", control_path, level.label)
    base_values = read_measurements(control_path)

    others: List[Tuple[str, np.ndarray]] = []
    for path in experiment_paths:
        logger.info("Processing %s", path)
        others.append((path, read_measurements(path)))

    return compare_all(base_values, others, level)


def create_results_dataframe(
    comparisons: Sequence[Tuple[str, ComparisonReport]],
) -> pd.DataFrame:
    """Tabulate comparison reports, one row per experimental set."""
    c = COLUMNS
    rows = []
    for label, report in comparisons:
        d = report.to_dict()
        rows.append(
            {
                c.label: label,
                c.confidence: d["confidence"],
                c.base_n: d["base_n"],
                c.base_mean: d["base_mean"],
                c.base_sd: d["base_sd"],
                c.other_n: d["other_n"],
                c.other_mean: d["other_mean"],
                c.other_sd: d["other_sd"],
                c.delta: d["delta"],
                c.margin: d["margin_of_error"],
                c.ci_low: d["ci_low"],
                c.ci_high: d["ci_high"],
                c.relative_delta: d["relative_delta"] * 100.0,
                c.relative_margin: d["relative_margin"] * 100.0,
                c.t_statistic: d["t_statistic"],
                c.dof: d["degrees_of_freedom"],
                c.critical_value: d["critical_value"],
                c.p_value: d["p_value"],
                c.effect_size: d["effect_size"],
                c.power: d["power"],
                c.significant: d["significant"],
            }
        )
    if not rows:
        return pd.DataFrame(columns=[getattr(c, f.name) for f in fields(c)])
    return pd.DataFrame.from_records(rows)


def print_comparisons(
    comparisons: Sequence[Tuple[str, ComparisonReport]], verbose: bool = False
) -> None:
    for label, report in comparisons:
        print(format_comparison(os.fspath(label), report, verbose=verbose))
        print()
