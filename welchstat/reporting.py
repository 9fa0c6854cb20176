"""Format comparison reports as human-readable text.

This module is used after the statistical engine has run. It renders each
``ComparisonReport`` field verbatim; no statistics are recomputed here.
"""

from __future__ import annotations

import math
from typing import Iterable, Tuple

import numpy as np

from .stats.report import ComparisonReport


def format_p_number(p_value: float) -> str:
    """Render a p-value with three decimals and no leading zero.

    Returns ``".026"``, ``"1.000"``, ``"<.001"`` below 0.001 and ``"NaN"``
    when undefined.
    """
    p = float(p_value)
    if not np.isfinite(p):
        return "NaN"
    if p < 1e-3:
        return "<.001"
    txt = f"{p:.3f}"
    if txt.startswith("0"):
        txt = txt[1:]
    return txt


def format_p_value(p_value: float) -> str:
    """Render a p-value clause in APA style.

    Args:
        p_value (float): Two-sided p-value in [0, 1].

    Returns:
        str: ``"p = .026"`` style text, ``"p < .001"`` for very small values
        and ``"p = NaN"`` when undefined.
    """
    txt = format_p_number(p_value)
    if txt.startswith("<"):
        return f"p < {txt[1:]}"
    return f"p = {txt}"


def _round_margin(margin: float) -> Tuple[float, int]:
    """Round a margin of error to 1 significant figure (2 if it leads with 1).

    Args:
        margin (float): Absolute margin of error.

    Returns:
        tuple[float, int]: Rounded margin and decimal places used.

    Raises:
        ValueError: If the margin is non-finite or non-positive.
    """
    u = float(margin)
    if not np.isfinite(u) or u <= 0:
        raise ValueError(f"Margin must be finite and > 0, got {margin!r}")

    exponent = int(np.floor(np.log10(abs(u))))
    leading = abs(u) / (10**exponent)
    sig_figs = 2 if 1.0 <= leading < 2.0 else 1
    ndigits = sig_figs - 1 - exponent
    rounded = round(abs(u), ndigits)
    return float(rounded), int(max(0, ndigits))


def format_value_to_margin_decimals(value: float, margin: float) -> str:
    """Format a value using the decimal places implied by its margin of error.

    Falls back to two decimals when the margin is zero or undefined.

    Note:
        Intended for reporting/export only; the numeric values stay untouched
        for downstream calculations.
    """
    try:
        _, dp = _round_margin(margin)
    except ValueError:
        dp = 2
    return f"{float(value):.{dp}f}"


def format_comparison(
    label: str, report: ComparisonReport, verbose: bool = False
) -> str:
    """Render one comparison as an indented text block.

    Args:
        label (str): Name of the experimental set, usually its path.
        report (ComparisonReport): Result of ``compare``.
        verbose (bool, optional): Append delta, relative delta, Welch's t and
            effect-size lines for significant results. Defaults to False.

    Returns:
        str: Text block such as::

            leopard:
                Difference at 95% confidence!
                    643.50 > 300.00 ± 293.97, p = .026
    """
    level = report.confidence.label
    lines = [f"{label}:"]
    if not report.significant:
        lines.append(f"\tNo difference at {level} confidence.")
        return "\n".join(lines)

    lines.append(f"\tDifference at {level} confidence!")
    lines.append(
        f"\t\t{report.other.mean:.2f} {report.direction} {report.base.mean:.2f} "
        f"± {report.margin_of_error:.2f}, {format_p_value(report.p_value)}"
    )
    if verbose:
        lines.append(f"\t\t{report.delta:.2f} ± {report.margin_of_error:.2f}")
        if math.isfinite(report.relative_delta):
            lines.append(
                f"\t\t{report.relative_delta * 100.0:.2f}% "
                f"± {report.relative_margin * 100.0:.2f}%"
            )
        lines.append(
            f"\t\tWelch's t = {report.t_statistic:.3f}, "
            f"df = {report.degrees_of_freedom:.2f}"
        )
        lines.append(
            f"\t\tCohen's d = {report.effect_size:.3f}, power = {report.power:.3f}"
        )
    return "\n".join(lines)


def format_comparisons(
    comparisons: Iterable[Tuple[str, ComparisonReport]], verbose: bool = False
) -> str:
    """Join several formatted comparisons with blank lines between them."""
    return "\n\n".join(
        format_comparison(label, report, verbose=verbose)
        for label, report in comparisons
    )
