"""Tests for the two-sided Welch's t-test."""

from types import SimpleNamespace

import numpy as np
import pytest
from scipy.stats import t as student_t

from welchstat.errors import InsufficientData, InvalidValue, UnsupportedConfidence
from welchstat.stats.confidence import ConfidenceLevel
from welchstat.stats.summary import SampleSummary
from welchstat.stats.welch import WelchTTest, compare

IGUANA = [50.0, 200.0, 150.0, 400.0, 750.0, 400.0, 150.0]
CHAMELEON = [150.0, 400.0, 720.0, 500.0, 930.0]
LEOPARD = [620.0, 700.0, 900.0, 460.0, 890.0, 291.0]


def _s(values):
    return SampleSummary.from_values(values)


def test_compare_similar_data():
    a = _s([1.0, 2.0, 3.0, 4.0])
    b = _s([1.0, 2.0, 3.0, 4.0])
    diff = compare(a, b, ConfidenceLevel.P80)

    assert diff.delta == 0.0
    assert diff.effect_size == 0.0
    assert diff.margin_of_error == pytest.approx(1.3143111667913936, rel=1e-6)
    assert diff.p_value == pytest.approx(1.0)
    assert diff.alpha == pytest.approx(0.2)
    assert diff.power == pytest.approx(0.0, abs=1e-12)
    assert diff.degrees_of_freedom == pytest.approx(6.0)
    assert not diff.significant


def test_compare_different_data():
    a = _s([1.0, 2.0, 3.0, 4.0])
    b = _s([10.0, 20.0, 30.0, 40.0])
    diff = compare(a, b, ConfidenceLevel.P80)

    assert diff.delta == pytest.approx(22.5)
    assert diff.effect_size == pytest.approx(2.452519415855564, rel=1e-6)
    assert diff.margin_of_error == pytest.approx(10.568344341563591, rel=1e-6)
    assert diff.p_value == pytest.approx(0.03916791618893325, rel=1e-5)
    assert diff.power == pytest.approx(0.985621684277956, rel=1e-6)
    assert diff.significant


def test_difference_at_95_percent():
    diff = compare(_s(IGUANA), _s(LEOPARD), ConfidenceLevel.P95)

    assert diff.base.mean == pytest.approx(300.0)
    assert diff.other.mean == pytest.approx(643.5)
    assert diff.delta == pytest.approx(343.5)
    assert diff.margin_of_error == pytest.approx(293.97, abs=0.005)
    assert diff.p_value == pytest.approx(0.026, abs=0.0005)
    assert diff.degrees_of_freedom == pytest.approx(10.6656, abs=1e-3)
    assert diff.significant
    assert diff.direction == ">"


def test_no_difference_for_overlapping_samples():
    diff = compare(_s(IGUANA), _s(CHAMELEON), ConfidenceLevel.P95)
    assert not diff.significant
    assert abs(diff.delta) < diff.margin_of_error
    assert diff.p_value > 0.05


def test_small_delta_relative_to_spread_is_not_significant():
    a = _s([10.2, 9.8, 10.5, 9.9, 10.1])
    b = _s([10.4, 9.7, 10.6, 10.0, 10.3])
    diff = compare(a, b, "P95")
    assert diff.delta == pytest.approx(0.1)
    assert diff.t_statistic == pytest.approx(0.5)
    assert diff.margin_of_error == pytest.approx(0.46627, abs=1e-4)
    assert not diff.significant


def test_margin_and_p_value_follow_student_t():
    a = _s(IGUANA)
    b = _s(LEOPARD)
    diff = compare(a, b, ConfidenceLevel.P99)
    se = np.sqrt(a.variance / a.count + b.variance / b.count)
    df = diff.degrees_of_freedom
    assert diff.std_err == pytest.approx(se)
    assert diff.critical_value == pytest.approx(student_t.ppf(0.995, df))
    assert diff.margin_of_error == pytest.approx(student_t.ppf(0.995, df) * se)
    assert diff.p_value == pytest.approx(2 * student_t.sf(abs(diff.t_statistic), df))
    assert diff.significant == (abs(diff.delta) > diff.margin_of_error)


@pytest.mark.parametrize("level", list(ConfidenceLevel))
def test_sample_is_never_different_from_itself(level):
    a = _s(IGUANA)
    diff = compare(a, _s(list(IGUANA)), level)
    assert diff.delta == 0.0
    assert diff.p_value == pytest.approx(1.0)
    assert not diff.significant


@pytest.mark.parametrize("level", list(ConfidenceLevel))
def test_compare_is_symmetric_in_sign(level):
    a, b = _s(IGUANA), _s(LEOPARD)
    ab = compare(a, b, level)
    ba = compare(b, a, level)
    assert ab.delta == -ba.delta
    assert ab.p_value == ba.p_value
    assert ab.margin_of_error == ba.margin_of_error
    assert ab.significant == ba.significant
    assert ab.direction == ">" and ba.direction == "<"


def test_margin_never_decreases_with_confidence():
    a, b = _s(IGUANA), _s(CHAMELEON)
    margins = [compare(a, b, level).margin_of_error for level in ConfidenceLevel]
    assert all(m >= 0 for m in margins)
    assert margins == sorted(margins)


def test_p_value_in_unit_interval_for_random_samples():
    rng = np.random.default_rng(7)
    for _ in range(50):
        n1, n2 = rng.integers(2, 12, size=2)
        a = _s(rng.normal(100.0, rng.uniform(0.1, 20.0), size=n1))
        b = _s(rng.normal(rng.uniform(90.0, 130.0), rng.uniform(0.1, 20.0), size=n2))
        diff = compare(a, b, ConfidenceLevel.P95)
        assert 0.0 <= diff.p_value <= 1.0
        assert diff.margin_of_error >= 0.0
        assert diff.significant == (abs(diff.delta) > diff.margin_of_error)


def test_zero_variance_equal_means():
    a = _s([5.0, 5.0, 5.0])
    b = _s([5.0, 5.0])
    with pytest.warns(RuntimeWarning, match="zero variance"):
        diff = compare(a, b, ConfidenceLevel.P95)
    assert diff.delta == 0.0
    assert diff.margin_of_error == 0.0
    assert diff.p_value == 1.0
    assert not diff.significant


def test_zero_variance_different_means():
    a = _s([5.0, 5.0, 5.0])
    b = _s([6.0, 6.0, 6.0])
    with pytest.warns(RuntimeWarning):
        diff = compare(a, b, ConfidenceLevel.P99)
    assert diff.delta == 1.0
    assert diff.margin_of_error == 0.0
    assert diff.p_value == 0.0
    assert diff.t_statistic == np.inf
    assert diff.power == 1.0
    assert diff.significant


def test_one_sample_with_zero_variance_uses_other_df():
    a = _s([5.0, 5.0, 5.0, 5.0])
    b = _s([4.0, 6.0, 5.0, 7.0, 8.0])
    diff = compare(a, b, ConfidenceLevel.P95)
    assert diff.degrees_of_freedom == pytest.approx(4.0)


def test_unsupported_confidence_raises():
    a, b = _s(IGUANA), _s(LEOPARD)
    with pytest.raises(UnsupportedConfidence):
        compare(a, b, 97.5)
    with pytest.raises(UnsupportedConfidence):
        WelchTTest("P50")


def test_summaries_built_elsewhere_are_revalidated():
    good = _s(IGUANA)
    single = SimpleNamespace(count=1, mean=3.0, variance=0.0)
    with pytest.raises(InsufficientData):
        compare(good, single, ConfidenceLevel.P95)
    with pytest.raises(InsufficientData):
        compare(single, good, ConfidenceLevel.P95)


def test_welch_ttest_binds_level():
    test = WelchTTest("99%")
    diff = test.compare(_s(IGUANA), _s(LEOPARD))
    assert diff.confidence is ConfidenceLevel.P99
    assert repr(test) == "WelchTTest(confidence=P99)"


def test_report_derived_fields():
    diff = compare(_s(IGUANA), _s(LEOPARD), ConfidenceLevel.P95)
    low, high = diff.confidence_interval
    assert low == pytest.approx(diff.delta - diff.margin_of_error)
    assert high == pytest.approx(diff.delta + diff.margin_of_error)
    assert diff.relative_delta == pytest.approx(343.5 / 300.0)
    row = diff.to_dict()
    assert row["confidence"] == "95%"
    assert row["base_n"] == 7 and row["other_n"] == 6
    assert row["significant"] is True


def test_large_magnitude_samples():
    base = _s([1e100, -1e100, 3e100])
    diff = compare(base, _s([0.0, 1.0, 2.0]), ConfidenceLevel.P95)
    assert base.variance == pytest.approx(4e200)
    assert diff.degrees_of_freedom == pytest.approx(2.0)
    assert diff.t_statistic == pytest.approx(-np.sqrt(3.0) / 2.0)
    assert np.isfinite(diff.margin_of_error)
    assert 0.0 < diff.p_value < 1.0
    assert not diff.significant


def test_unrepresentable_difference_is_invalid():
    high = SampleSummary(count=2, mean=1e308, variance=0.0)
    low = SampleSummary(count=2, mean=-1e308, variance=0.0)
    with pytest.raises(InvalidValue, match="floating point range"):
        compare(low, high)


def test_relative_values_use_base_magnitude():
    diff = compare(_s([-4.0, -2.0]), _s([-1.0, 1.0]), ConfidenceLevel.P95)
    assert diff.delta == pytest.approx(3.0)
    assert diff.relative_delta == pytest.approx(1.0)
    assert diff.relative_margin == pytest.approx(diff.margin_of_error / 3.0)
    assert diff.relative_margin > 0
