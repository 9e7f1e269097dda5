import logging
import math

import numpy as np
import pandas as pd

from .models import Track

logger = logging.getLogger(__name__)


def resample_track(track: Track, step_m: float = 25.0) -> pd.DataFrame:
    """Resample elevation onto a uniform distance grid.

    Targets are ``0, S, 2S, ...`` up to and including the largest multiple of
    ``step_m`` not exceeding the track's total distance. Each target is
    linearly interpolated between the two points bracketing it; once the
    bracket runs past the last point the last elevation is repeated.

    The track must already be validated (sorted cumulative distances).

    Returns
    -------
    pd.DataFrame
        Columns ``distance_m`` and ``elevation``, one row per sample.
    """
    cum = np.array([p.distance_m for p in track.points], dtype=float)
    ele = np.array([p.elevation for p in track.points], dtype=float)
    n = len(cum)

    count = math.floor(track.total_distance / step_m) + 1
    targets = np.arange(count, dtype=float) * step_m

    if n == 1:
        elevations = np.full(count, ele[0])
    else:
        # index of the first later point whose distance reaches the target;
        # equivalent to advancing a cursor while cum[idx + 1] < d
        idx = np.searchsorted(cum[1:], targets, side="left")
        lo = np.minimum(idx, n - 2)
        hi = lo + 1
        d1, d2 = cum[lo], cum[hi]
        span = d2 - d1
        with np.errstate(divide="ignore", invalid="ignore"):
            t = np.where(span > 0, (targets - d1) / span, 0.0)
        interpolated = ele[lo] + t * (ele[hi] - ele[lo])
        elevations = np.where(idx >= n - 1, ele[-1], interpolated)

    logger.debug("Resampled %d points into %d samples every %s m", n, count, step_m)
    return pd.DataFrame({"distance_m": targets, "elevation": elevations})
