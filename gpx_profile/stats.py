import pandas as pd

from .gain_loss import ElevationChanges
from .models import Stats
from .utils import _to_fixed


def format_stats(total_distance_m: float, changes: ElevationChanges, smoothed: pd.DataFrame) -> Stats:
    """Round the pipeline results into the display record.

    Max/min elevation come from the smoothed series, not the raw points.
    """
    return Stats(
        distance=_to_fixed(total_distance_m / 1000.0, 2),
        total_distance=total_distance_m,
        elevation_gain=_to_fixed(changes.gain),
        elevation_loss=_to_fixed(changes.loss),
        max_elevation=_to_fixed(float(smoothed["elev_smooth"].max())),
        min_elevation=_to_fixed(float(smoothed["elev_smooth"].min())),
    )
