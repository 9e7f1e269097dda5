import pytest

from gpx_profile.gain_loss import accumulate_gain_loss


def test_small_oscillations_are_ignored():
    changes = accumulate_gain_loss([100, 101.5, 99, 102, 100.5, 98.2], threshold_m=4)
    assert changes.gain == 0
    assert changes.loss == 0


def test_monotone_climb():
    changes = accumulate_gain_loss([0, 4, 8, 12], threshold_m=4)
    assert changes.gain == pytest.approx(12.0)
    assert changes.loss == 0


def test_anchor_moves_only_on_commit():
    # 3 m steps: commit happens every second sample
    changes = accumulate_gain_loss([0, 3, 6, 9, 12], threshold_m=4)
    assert changes.gain == pytest.approx(12.0)


def test_climb_and_descent():
    changes = accumulate_gain_loss([100, 110, 120, 115, 100], threshold_m=4)
    assert changes.gain == pytest.approx(20.0)
    assert changes.loss == pytest.approx(20.0)


def test_full_precision_is_kept():
    changes = accumulate_gain_loss([0.0, 4.25, 8.75], threshold_m=4)
    assert changes.gain == pytest.approx(8.75)


def test_totals_are_never_negative():
    changes = accumulate_gain_loss([50, 30, 10, -10], threshold_m=4)
    assert changes.gain >= 0
    assert changes.loss == pytest.approx(60.0)


def test_empty_and_single_value():
    assert accumulate_gain_loss([], threshold_m=4) == (0.0, 0.0)
    assert accumulate_gain_loss([42.0], threshold_m=4) == (0.0, 0.0)
