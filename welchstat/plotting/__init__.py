"""
Chart rendering for comparison results.

All plotting functions accept precomputed reports and raw measurements and do
not perform any statistics.

Modules:
    summary_plots:
        Two-panel comparison figure: (a) measurements of every set with
        their means, (b) each experiment's delta ± margin of error against
        the control, colored by significance.

    style:
        Shared rcParams, colors and multi-format save helper (PNG, PDF, SVG
        at 300 DPI).
"""

from .style import set_global_style
from .summary_plots import plot_comparison_summary

__all__ = ["plot_comparison_summary", "set_global_style"]
