"""Write comparison results to CSV files.

This module is the output boundary between in-memory comparison reports and
tabular artifacts.
"""

from __future__ import annotations

import logging
import os

import pandas as pd

from .reporting import format_p_number, format_value_to_margin_decimals
from .schema import COLUMNS

logger = logging.getLogger(__name__)


def add_reported_columns(results_df: pd.DataFrame) -> pd.DataFrame:
    """Add string columns with delta and margin rounded for reporting.

    Args:
        results_df (pandas.DataFrame): Output from
            ``create_results_dataframe``.

    Returns:
        pandas.DataFrame: Copy of ``results_df`` with ``Delta (reported)``,
        ``Margin of error (reported)`` and ``p-value (reported)`` columns.

    Raises:
        KeyError: If the delta, margin or p-value column is missing.
    """
    c = COLUMNS
    missing = [col for col in (c.delta, c.margin, c.p_value) if col not in results_df]
    if missing:
        raise KeyError(f"Missing result columns: {missing}")

    out = results_df.copy()
    out[f"{c.delta} (reported)"] = [
        format_value_to_margin_decimals(d, m)
        for d, m in zip(out[c.delta], out[c.margin])
    ]
    out[f"{c.margin} (reported)"] = [
        format_value_to_margin_decimals(m, m) for m in out[c.margin]
    ]
    out[f"{c.p_value} (reported)"] = [
        format_p_number(p) for p in out[c.p_value]
    ]
    return out


def save_results_to_csv(results_df: pd.DataFrame, path: str) -> str:
    """Save comparison results to ``path`` and return the path written."""
    directory = os.path.dirname(path)
    if directory:
        os.makedirs(directory, exist_ok=True)
    add_reported_columns(results_df).to_csv(path, index=False)
    logger.info("Saved comparison results to %s", path)
    return path
