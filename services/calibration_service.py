import logging
from dataclasses import dataclass
from typing import Sequence

import pandas as pd

from gpx_profile import ProfileConfig, Track
from gpx_profile.gain_loss import accumulate_gain_loss
from gpx_profile.resampler import resample_track
from gpx_profile.track_processor import smooth_samples
from gpx_profile.utils import _to_fixed, _validate_track

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ReferenceTrack:
    """A track with a trusted total elevation gain (e.g. from a barometric device)."""

    name: str
    track: Track
    expected_gain_m: float


DEFAULT_SWEEP_CONFIGS: tuple[ProfileConfig, ...] = (
    ProfileConfig(step_m=25, smooth_window_m=100, threshold_m=4),
    ProfileConfig(step_m=25, smooth_window_m=150, threshold_m=4),
    ProfileConfig(step_m=25, smooth_window_m=100, threshold_m=5),
    ProfileConfig(step_m=25, smooth_window_m=150, threshold_m=5),
    ProfileConfig(step_m=25, smooth_window_m=150, threshold_m=6),
    ProfileConfig(step_m=25, smooth_window_m=200, threshold_m=5),
)


def _gain_for(track: Track, config: ProfileConfig) -> int:
    samples = resample_track(track, config.step_m)
    smoothed = smooth_samples(samples, config.smooth_window_m, config.step_m)
    changes = accumulate_gain_loss(smoothed["elev_smooth"], config.threshold_m)
    return int(_to_fixed(changes.gain))


def sweep_gain_parameters(
    references: Sequence[ReferenceTrack],
    configs: Sequence[ProfileConfig] = DEFAULT_SWEEP_CONFIGS,
) -> pd.DataFrame:
    """Compute total gain of every reference track under every configuration.

    Returns
    -------
    pd.DataFrame
        One row per (config, track) with columns ``step_m``,
        ``smooth_window_m``, ``threshold_m``, ``track``, ``expected_gain_m``,
        ``gain_m`` and ``error_m`` (computed minus expected).
    """
    for ref in references:
        _validate_track(ref.track)

    rows = []
    for config in configs:
        for ref in references:
            gain = _gain_for(ref.track, config)
            rows.append(
                {
                    "step_m": config.step_m,
                    "smooth_window_m": config.smooth_window_m,
                    "threshold_m": config.threshold_m,
                    "track": ref.name,
                    "expected_gain_m": ref.expected_gain_m,
                    "gain_m": gain,
                    "error_m": gain - ref.expected_gain_m,
                }
            )
    logger.info("Swept %d configurations over %d reference tracks", len(configs), len(references))
    return pd.DataFrame(
        rows,
        columns=[
            "step_m",
            "smooth_window_m",
            "threshold_m",
            "track",
            "expected_gain_m",
            "gain_m",
            "error_m",
        ],
    )


def summarize_sweep(sweep_df: pd.DataFrame) -> pd.DataFrame:
    """Mean absolute gain error per configuration, best configuration first."""
    keys = ["step_m", "smooth_window_m", "threshold_m"]
    result = (
        sweep_df.assign(abs_error_m=sweep_df["error_m"].abs())
        .groupby(keys, as_index=False)["abs_error_m"]
        .mean()
        .rename(columns={"abs_error_m": "mean_abs_error_m"})
    )
    return result.sort_values("mean_abs_error_m", kind="stable").reset_index(drop=True)
