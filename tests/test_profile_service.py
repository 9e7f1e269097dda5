import pytest

from gpx_profile import NoTrackDataError, Track, TrackPoint
from services.profile_service import load_profile, profile_payload


@pytest.fixture
def tracks():
    distances = [0.0, 250.0, 500.0, 750.0, 1000.0]
    elevations = [120.0, 150.0, 175.0, 160.0, 130.0]
    return [Track([TrackPoint(d, e) for d, e in zip(distances, elevations)], name="loop")]


def test_load_profile_with_form_params(tracks):
    result = load_profile(tracks, {"step_m": "50", "threshold_m": "bogus"})
    assert result.stats.distance == "1.00"
    assert int(result.stats.elevation_gain) > 0
    assert int(result.stats.elevation_loss) > 0


def test_profile_payload(tracks):
    payload = profile_payload(tracks)
    assert payload["stats"]["totalDistance"] == 1000.0
    assert payload["chartData"][-1]["slope"] == 0


def test_no_tracks_propagates():
    with pytest.raises(NoTrackDataError):
        profile_payload([])
