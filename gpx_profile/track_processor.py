import logging
import math

import pandas as pd

logger = logging.getLogger(__name__)


def smooth_samples(samples: pd.DataFrame, window_m: float = 100.0, step_m: float = 25.0) -> pd.DataFrame:
    """Smooth resampled elevation with a centered moving average.

    Parameters
    ----------
    samples : pd.DataFrame
        Output of ``resample_track`` (columns ``distance_m``, ``elevation``).
    window_m : float
        Window length in meters; ``floor(window_m / step_m)`` samples wide.
    step_m : float
        Spacing of the samples in meters.

    Returns
    -------
    pd.DataFrame
        Copy of ``samples`` with an ``elev_smooth`` column. Near both ends the
        window is clipped to the available samples, so it is asymmetric there.
    """
    out = samples.copy()
    half = math.floor(window_m / step_m) // 2
    out["elev_smooth"] = (
        out["elevation"].rolling(window=2 * half + 1, center=True, min_periods=1).mean()
    )
    logger.debug("Smoothed %d samples with half-width %d", len(out), half)
    return out
