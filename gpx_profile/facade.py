import logging
from typing import List, Optional, Sequence

import pandas as pd

from .config import DEFAULT_CONFIG, ProfileConfig
from .errors import NoTrackDataError
from .gain_loss import ElevationChanges, accumulate_gain_loss
from .models import ChartPoint, ProfileResult, Stats, Track
from .resampler import resample_track
from .simplifier import simplify_profile
from .slope_analyzer import annotate_slopes
from .stats import format_stats
from .track_processor import smooth_samples
from .utils import _validate_track

logger = logging.getLogger(__name__)


class ElevationProfile:
    """Facade running the elevation pipeline for one track.

    All stages run once at construction:
    resample -> smooth -> (gain/loss, simplify -> slopes) -> stats.

    Parameters
    ----------
    track : Track
        Points with cumulative distance [m] and elevation [m], sorted by distance.
    config : ProfileConfig, optional
        Pipeline parameters; defaults to ``DEFAULT_CONFIG``.
    """

    def __init__(self, track: Track, config: Optional[ProfileConfig] = None) -> None:
        self.track = _validate_track(track)
        self.config = config or DEFAULT_CONFIG

        self.samples: pd.DataFrame = resample_track(self.track, self.config.step_m)
        self.smoothed: pd.DataFrame = smooth_samples(
            self.samples, self.config.smooth_window_m, self.config.step_m
        )
        self.changes: ElevationChanges = accumulate_gain_loss(
            self.smoothed["elev_smooth"], self.config.threshold_m
        )
        self.simplified: pd.DataFrame = simplify_profile(self.smoothed, self.config.simplify_tolerance)
        self._chart_data: List[ChartPoint] = annotate_slopes(self.simplified)
        self._stats: Stats = format_stats(self.track.total_distance, self.changes, self.smoothed)

    # ---------- Stats ----------
    def get_total_ascent(self) -> float:
        return self.changes.gain

    def get_total_descent(self) -> float:
        return self.changes.loss

    def get_highest_point(self) -> float:
        return float(self.smoothed["elev_smooth"].max())

    def get_lowest_point(self) -> float:
        return float(self.smoothed["elev_smooth"].min())

    def get_stats(self) -> Stats:
        return self._stats

    # ---------- Data access ----------
    def get_chart_data(self) -> List[ChartPoint]:
        return list(self._chart_data)

    def get_route_data(self) -> pd.DataFrame:
        return self.smoothed.copy()

    def summary(self) -> ProfileResult:
        return ProfileResult(stats=self._stats, chart_data=self.get_chart_data())


def process_track(track: Track, config: Optional[ProfileConfig] = None) -> ProfileResult:
    """Run the pipeline for a single track."""
    profile = ElevationProfile(track, config)
    result = profile.summary()
    logger.info(
        "Processed track %r: %s km, +%s m / -%s m, %d chart points",
        track.name,
        result.stats.distance,
        result.stats.elevation_gain,
        result.stats.elevation_loss,
        len(result.chart_data),
    )
    return result


def process_tracks(tracks: Sequence[Track], config: Optional[ProfileConfig] = None) -> ProfileResult:
    """Pipeline entry for a parsed file: only the first track is processed.

    Raises
    ------
    NoTrackDataError
        If ``tracks`` is empty or the first track has no points.
    MalformedTrackError
        If the first track breaks the point invariants.
    """
    if not tracks:
        raise NoTrackDataError("No tracks found in GPX file")
    if len(tracks) > 1:
        logger.warning("GPX data contains %d tracks; only the first one is processed", len(tracks))
    return process_track(tracks[0], config)
