"""Render the comparison summary figure.

The figure has two panels: the raw measurements of every set with their
means, and each experiment's difference from the control with its margin of
error at the tested confidence level.
"""

from __future__ import annotations

import os
from typing import Mapping, Sequence, Tuple, Union

import matplotlib.pyplot as plt
import numpy as np
from matplotlib.lines import Line2D

from ..stats.report import ComparisonReport
from .style import (
    CONTROL_COLOR,
    NOT_SIGNIFICANT_COLOR,
    SIGNIFICANT_COLOR,
    STYLE,
    clean_axis,
    color_for_index,
    sanitize_filename,
    save_figure,
    set_axis_labels,
    set_global_style,
)


def _strip_offsets(n: int, width: float = 0.28) -> np.ndarray:
    """Deterministic horizontal offsets so repeated values stay visible."""
    if n <= 1:
        return np.zeros(n)
    return np.linspace(-width / 2.0, width / 2.0, n)


def plot_comparison_summary(
    base_label: str,
    base_values: Sequence[float],
    others: Union[Mapping[str, Sequence[float]], Sequence[Tuple[str, Sequence[float]]]],
    comparisons: Sequence[Tuple[str, ComparisonReport]],
    output_dir: str = "output",
    file_stem: str = "comparison_summary",
    unit: str = "",
) -> str:
    """Render measurements and differences for a set of comparisons.

    Args:
        base_label (str): Name of the control set.
        base_values (Sequence[float]): Control measurements.
        others: Experimental measurements as ``(label, values)`` pairs or a
            mapping of label to values.
        comparisons (Sequence[tuple[str, ComparisonReport]]): Output from
            ``compare_all``; every label must be present in ``others``.
        output_dir (str, optional): Directory for PNG/PDF/SVG outputs.
            Defaults to ``"output"``.
        file_stem (str, optional): Base file name. Defaults to
            ``"comparison_summary"``.
        unit (str, optional): Measurement unit for axis labels.

    Returns:
        str: Path to the saved PNG file.

    Raises:
        KeyError: If a compared label has no measurements in ``others``.
        ValueError: If ``comparisons`` is empty.
    """
    if not comparisons:
        raise ValueError("No comparisons to plot.")
    if not isinstance(others, Mapping):
        others = dict(others)
    missing = [label for label, _ in comparisons if label not in others]
    if missing:
        raise KeyError(f"No measurements supplied for: {missing}")

    set_global_style()
    os.makedirs(output_dir, exist_ok=True)
    unit_suffix = f" ({unit})" if unit else ""
    level = comparisons[0][1].confidence.label

    fig, (ax_raw, ax_diff) = plt.subplots(
        1, 2, figsize=STYLE.FIGSIZE_WIDE, gridspec_kw={"width_ratios": [1.3, 1.0]}
    )

    # Panel (a): raw measurements and means
    labels = [base_label] + [label for label, _ in comparisons]
    series = [np.asarray(base_values, dtype=float)] + [
        np.asarray(others[label], dtype=float) for label, _ in comparisons
    ]
    for pos, values in enumerate(series):
        color = CONTROL_COLOR if pos == 0 else color_for_index(pos - 1)
        x = pos + _strip_offsets(len(values))
        ax_raw.scatter(x, values, s=26, color=color, alpha=STYLE.ALPHA_POINTS, zorder=3)
        ax_raw.hlines(
            float(np.mean(values)),
            pos - 0.22,
            pos + 0.22,
            colors=color,
            linewidth=STYLE.LINEWIDTH,
            zorder=4,
        )
    ax_raw.set_xticks(range(len(labels)))
    ax_raw.set_xticklabels(
        [os.path.basename(str(label)) or str(label) for label in labels],
        rotation=20,
        ha="right",
    )
    set_axis_labels(ax_raw, y=f"Measurement{unit_suffix}")
    clean_axis(ax_raw)
    ax_raw.set_title("(a) Measurements", loc="left")

    # Panel (b): delta ± margin of error against the control
    ypos = np.arange(len(comparisons))[::-1]
    for y, (label, report) in zip(ypos, comparisons):
        color = SIGNIFICANT_COLOR if report.significant else NOT_SIGNIFICANT_COLOR
        ax_diff.errorbar(
            report.delta,
            y,
            xerr=report.margin_of_error,
            fmt="o",
            color=color,
            ecolor=color,
            elinewidth=STYLE.LINEWIDTH_THIN,
            capsize=4,
        )
    ax_diff.axvline(0.0, color=CONTROL_COLOR, linestyle="--", linewidth=0.9)
    ax_diff.set_yticks(ypos)
    ax_diff.set_yticklabels(
        [os.path.basename(str(label)) or str(label) for label, _ in comparisons]
    )
    set_axis_labels(ax_diff, x=f"Difference from {os.path.basename(str(base_label))}{unit_suffix}")
    clean_axis(ax_diff, grid_axis="x")
    ax_diff.set_title(f"(b) Delta ± margin at {level}", loc="left")
    ax_diff.legend(
        handles=[
            Line2D([], [], marker="o", linestyle="", color=SIGNIFICANT_COLOR, label="Difference"),
            Line2D([], [], marker="o", linestyle="", color=NOT_SIGNIFICANT_COLOR, label="No difference"),
        ],
        loc="best",
    )

    fig.suptitle(f"Welch's t-test at {level} confidence")
    fig.tight_layout()
    png_path = save_figure(fig, os.path.join(output_dir, sanitize_filename(file_stem)))
    plt.close(fig)
    return str(png_path)
