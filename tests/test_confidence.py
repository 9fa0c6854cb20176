"""Tests for the supported confidence levels."""

import numpy as np
import pytest
from scipy.stats import t as student_t

from welchstat.errors import UnsupportedConfidence
from welchstat.stats.confidence import DEFAULT_CONFIDENCE, ConfidenceLevel, supported_levels


def test_members_and_tail_probabilities():
    assert supported_levels() == ["P80", "P90", "P95", "P98", "P99", "P995"]
    assert np.isclose(ConfidenceLevel.P95.tail_probability, 0.025)
    assert np.isclose(ConfidenceLevel.P995.tail_probability, 0.0025)
    assert np.isclose(ConfidenceLevel.P80.alpha, 0.2)
    assert np.isclose(ConfidenceLevel.P99.quantile, 0.995)
    assert DEFAULT_CONFIDENCE is ConfidenceLevel.P95


def test_labels():
    assert ConfidenceLevel.P95.label == "95%"
    assert ConfidenceLevel.P995.label == "99.5%"


def test_critical_value_matches_student_t():
    assert np.isclose(ConfidenceLevel.P95.critical_value(8.0), 2.306004135)
    assert np.isclose(
        ConfidenceLevel.P90.critical_value(3.5), student_t.ppf(0.95, 3.5)
    )


def test_critical_values_increase_with_level():
    values = [level.critical_value(6.3) for level in ConfidenceLevel]
    assert values == sorted(values)


@pytest.mark.parametrize(
    "value, expected",
    [
        (ConfidenceLevel.P90, ConfidenceLevel.P90),
        ("P95", ConfidenceLevel.P95),
        ("p995", ConfidenceLevel.P995),
        ("99", ConfidenceLevel.P99),
        ("98%", ConfidenceLevel.P98),
        (80, ConfidenceLevel.P80),
        (99.5, ConfidenceLevel.P995),
    ],
)
def test_parse_accepts_names_and_percentages(value, expected):
    assert ConfidenceLevel.parse(value) is expected


@pytest.mark.parametrize("value", ["P97", "ninety", 50, 99.9, None, True])
def test_parse_rejects_unsupported_levels(value):
    with pytest.raises(UnsupportedConfidence):
        ConfidenceLevel.parse(value)
