import pytest

from gpx_profile import DEFAULT_CONFIG, ProfileConfig


def test_defaults():
    assert DEFAULT_CONFIG.step_m == 25
    assert DEFAULT_CONFIG.smooth_window_m == 100
    assert DEFAULT_CONFIG.threshold_m == 4
    assert DEFAULT_CONFIG.simplify_tolerance == 3


@pytest.mark.parametrize(
    "kwargs",
    [
        {"step_m": 0},
        {"step_m": -25},
        {"threshold_m": -1},
        {"smooth_window_m": float("inf")},
        {"simplify_tolerance": "3"},
    ],
)
def test_invalid_values_raise(kwargs):
    with pytest.raises(ValueError):
        ProfileConfig(**kwargs)


def test_zero_window_and_threshold_allowed():
    config = ProfileConfig(smooth_window_m=0, threshold_m=0, simplify_tolerance=0)
    assert config.smooth_window_m == 0
