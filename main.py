#!/usr/bin/env python3
"""
Main script for running the example comparison.
"""

# Pipeline overview:
# 1) Load the control and experiment files (one measurement per line).
# 2) Summarize each set (count, mean, unbiased variance).
# 3) Run a two-sided Welch's t-test of each experiment against the control.
# 4) Print the text report and export a CSV table and a summary chart.

import logging
import os
import sys
import time

logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s - %(levelname)s - %(message)s",
    handlers=[
        logging.StreamHandler(sys.stdout),
        logging.FileHandler("welchstat.log", mode="w"),
    ],
)

sys.path.insert(0, os.path.dirname(os.path.abspath(__file__)))

from welchstat.analysis import (
    create_results_dataframe,
    print_comparisons,
    process_all_files,
)
from welchstat.data_processing import read_measurements
from welchstat.errors import WelchStatError
from welchstat.output import save_results_to_csv
from welchstat.plotting import plot_comparison_summary
from welchstat.stats import ConfidenceLevel


def main():
    """Compare the bundled example data sets at 95% confidence."""

    start_time = time.time()
    logging.info("Initializing comparison pipeline")

    control = "data/iguana.txt"
    experiments = ["data/chameleon.txt", "data/leopard.txt"]
    confidence = ConfidenceLevel.P95
    logging.info(
        "Configured control %s and %d experiment files", control, len(experiments)
    )

    try:
        comparisons = process_all_files(control, experiments, confidence)
    except (WelchStatError, OSError) as exc:
        logging.error("Comparison failed: %s. Terminating execution.", exc)
        return 1

    print_comparisons(comparisons, verbose=True)

    output_dir = "output"
    os.makedirs(output_dir, exist_ok=True)
    logging.info("Output directory ensured: %s", output_dir)

    results_df = create_results_dataframe(comparisons)
    csv_path = save_results_to_csv(
        results_df, os.path.join(output_dir, "comparison_results.csv")
    )

    others = [(path, read_measurements(path)) for path in experiments]
    chart_path = plot_comparison_summary(
        control, read_measurements(control), others, comparisons, output_dir
    )

    total_duration = time.time() - start_time
    logging.info(f"Total execution time: {total_duration:.2f} seconds")
    logging.info("Comparison pipeline completed successfully")
    logging.info("Generated output files:")
    logging.info("  - Comparison results CSV: %s", csv_path)
    logging.info("  - Comparison chart: %s", chart_path)
    return 0


if __name__ == "__main__":
    sys.exit(main())
