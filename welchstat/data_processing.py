"""
Load measurement files into numeric arrays.
"""

# Each input file holds one measurement per line. Blank lines and lines
# starting with "#" are skipped; anything else must parse as a real number.

import logging

import numpy as np
import pandas as pd

from .errors import InvalidValue

logger = logging.getLogger(__name__)

VALUE_COLUMN = "value"


def load_measurement_data(filepath):
    """
    Load a measurement file as a single-column DataFrame of raw strings.

    Args:
        filepath (str): Path to the text file.

    Returns:
        pd.DataFrame: One row per non-blank, non-comment line with the raw
        text in the ``value`` column. Empty files give an empty DataFrame.

    Raises:
        InvalidValue: If a line holds more than one field.
    """
    try:
        df = pd.read_csv(
            filepath,
            header=None,
            dtype=str,
            comment="#",
            skip_blank_lines=True,
            keep_default_na=False,
        )
    except pd.errors.EmptyDataError:
        return pd.DataFrame(columns=[VALUE_COLUMN], dtype=str)
    except pd.errors.ParserError as exc:
        raise InvalidValue(
            f"{filepath}: expected one measurement per line ({exc})"
        ) from exc

    if df.shape[1] != 1:
        raise InvalidValue(
            f"{filepath}: expected one measurement per line, found {df.shape[1]} fields."
        )
    df.columns = [VALUE_COLUMN]
    return df


def extract_values(df, source="<input>"):
    """Convert the raw ``value`` column to floats, rejecting bad entries.

    Non-numeric text is rejected here. Non-finite numbers such as ``inf`` are
    passed through and rejected when the sample is summarized.

    Args:
        df: DataFrame from :func:`load_measurement_data`.
        source (str): Name used in error messages.

    Returns:
        numpy.ndarray: Measurements in file order.

    Raises:
        InvalidValue: If any entry does not parse as a number.
    """
    raw = df[VALUE_COLUMN].astype(str).str.strip()
    values = pd.to_numeric(raw, errors="coerce")
    bad = values.isna() & (raw.str.lower() != "nan")
    if bad.any():
        first = raw[bad].iloc[0]
        raise InvalidValue(
            f"{source}: could not parse {first!r} as a number "
            f"({int(bad.sum())} invalid line(s))."
        )
    return values.to_numpy(dtype=float)


def read_measurements(filepath):
    """Load one measurement file and return its values as a float array."""
    values = extract_values(load_measurement_data(filepath), source=str(filepath))
    logger.debug("Loaded %d measurements from %s", len(values), filepath)
    return values
