"""Error kinds raised by the comparison engine.

All errors derive from ``ValueError`` so callers that already guard numeric
input with ``except ValueError`` keep working.
"""

from __future__ import annotations


class WelchStatError(ValueError):
    """Base class for all comparison failures."""


class InsufficientData(WelchStatError):
    """A sample has fewer than two values, so its variance is undefined."""


class InvalidValue(WelchStatError):
    """A sample contains a non-finite or non-numeric value."""


class UnsupportedConfidence(WelchStatError):
    """A confidence level outside the supported set was requested."""
