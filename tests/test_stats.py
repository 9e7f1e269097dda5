import pandas as pd
import pytest

from gpx_profile.gain_loss import ElevationChanges
from gpx_profile.stats import format_stats
from gpx_profile.utils import _to_fixed


@pytest.fixture
def smoothed():
    return pd.DataFrame(
        {
            "distance_m": [0.0, 25.0, 50.0],
            "elevation": [-5.0, 120.0, 80.0],
            "elev_smooth": [-0.4, 99.5, 60.0],
        }
    )


def test_format_stats(smoothed):
    stats = format_stats(1125.0, ElevationChanges(gain=12.5, loss=3.49), smoothed)

    assert stats.distance == "1.13"
    assert stats.total_distance == 1125.0
    assert stats.elevation_gain == "13"
    assert stats.elevation_loss == "3"
    # extremes come from the smoothed series
    assert stats.max_elevation == "100"
    assert stats.min_elevation == "0"


def test_to_dict_uses_wire_names(smoothed):
    stats = format_stats(2000.0, ElevationChanges(0.0, 0.0), smoothed)
    assert stats.to_dict() == {
        "distance": "2.00",
        "totalDistance": 2000.0,
        "elevationGain": "0",
        "elevationLoss": "0",
        "maxElevation": "100",
        "minElevation": "0",
    }


@pytest.mark.parametrize(
    "value, digits, expected",
    [
        (2.5, 0, "3"),
        (-2.5, 0, "-3"),
        (1.005, 2, "1.00"),  # 1.005 is stored slightly below 1.005
        (0.125, 2, "0.13"),
        (-0.2, 0, "0"),
        (5.7106, 1, "5.7"),
    ],
)
def test_to_fixed(value, digits, expected):
    assert _to_fixed(value, digits) == expected
