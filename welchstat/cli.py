"""Command-line entry point: compare measurement files with Welch's t-test."""

from __future__ import annotations

import argparse
import logging
import os
import sys

from . import __version__
from .analysis import create_results_dataframe, print_comparisons, process_all_files
from .data_processing import read_measurements
from .errors import WelchStatError
from .output import save_results_to_csv
from .plotting import plot_comparison_summary
from .stats.confidence import DEFAULT_CONFIDENCE, ConfidenceLevel, supported_levels

DEFAULT_OUTPUT_DIR = "output"
LOG_FORMAT = "%(asctime)s - %(levelname)s - %(message)s"

logger = logging.getLogger(__name__)


def _confidence_arg(text: str) -> ConfidenceLevel:
    try:
        return ConfidenceLevel.parse(text)
    except WelchStatError as exc:
        raise argparse.ArgumentTypeError(str(exc)) from None


def _build_arg_parser() -> argparse.ArgumentParser:
    """Build command-line parser."""
    parser = argparse.ArgumentParser(
        prog="welchstat",
        description=(
            "Check for statistically valid differences between sets of "
            "measurements."
        ),
    )
    parser.add_argument(
        "control",
        metavar="CONTROL",
        help="Path to a file with one floating point value per line.",
    )
    parser.add_argument(
        "experiments",
        metavar="EXPERIMENT",
        nargs="+",
        help="Path to one or more files with one floating point value per line.",
    )
    parser.add_argument(
        "-c",
        "--confidence",
        type=_confidence_arg,
        default=DEFAULT_CONFIDENCE,
        metavar="LEVEL",
        help=(
            f"Confidence level, one of {', '.join(supported_levels())} "
            f"(default: {DEFAULT_CONFIDENCE.name})."
        ),
    )
    parser.add_argument(
        "--csv",
        default=None,
        metavar="PATH",
        help="Optional path for a CSV table of the comparison results.",
    )
    parser.add_argument(
        "--plot",
        default=None,
        metavar="DIR",
        help=f"Write a summary chart to DIR (e.g. {DEFAULT_OUTPUT_DIR}).",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Print effect size, Welch's t and power, and log progress.",
    )
    parser.add_argument(
        "--log-file",
        default=None,
        metavar="PATH",
        help="Also write log messages to PATH.",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser


def _configure_logging(verbose: bool, log_file: str | None) -> None:
    handlers: list[logging.Handler] = [logging.StreamHandler(sys.stderr)]
    if log_file:
        handlers.append(logging.FileHandler(log_file, mode="w"))
    logging.basicConfig(
        level=logging.INFO if verbose else logging.WARNING,
        format=LOG_FORMAT,
        handlers=handlers,
        force=True,
    )


def _fail(context: str, exc: Exception) -> int:
    logger.error("%s: %s", context, exc)
    print(f"welchstat: error: {exc}", file=sys.stderr)
    return 1


def main(argv: list[str] | None = None) -> int:
    """CLI entrypoint; returns the process exit status."""
    parser = _build_arg_parser()
    args = parser.parse_args(argv)
    _configure_logging(args.verbose, args.log_file)

    try:
        comparisons = process_all_files(args.control, args.experiments, args.confidence)
    except (WelchStatError, OSError) as exc:
        return _fail("Comparison failed", exc)

    print_comparisons(comparisons, verbose=args.verbose)

    try:
        if args.csv:
            save_results_to_csv(create_results_dataframe(comparisons), args.csv)

        if args.plot:
            others = [(path, read_measurements(path)) for path in args.experiments]
            png_path = plot_comparison_summary(
                args.control,
                read_measurements(args.control),
                others,
                comparisons,
                output_dir=args.plot,
            )
            logger.info("Saved comparison chart to %s", png_path)
    except (WelchStatError, OSError) as exc:
        return _fail("Writing results failed", exc)

    logger.info(
        "Compared %d experiment(s) against %s",
        len(comparisons),
        os.path.basename(args.control),
    )
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
