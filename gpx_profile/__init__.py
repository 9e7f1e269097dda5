from .config import DEFAULT_CONFIG, ProfileConfig
from .errors import MalformedTrackError, NoTrackDataError, ProfileError
from .facade import ElevationProfile, process_track, process_tracks
from .models import ChartPoint, ProfileResult, Stats, Track, TrackPoint

__all__ = [
    "DEFAULT_CONFIG",
    "ChartPoint",
    "ElevationProfile",
    "MalformedTrackError",
    "NoTrackDataError",
    "ProfileConfig",
    "ProfileError",
    "ProfileResult",
    "Stats",
    "Track",
    "TrackPoint",
    "process_track",
    "process_tracks",
]
