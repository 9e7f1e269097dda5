from typing import List

import numpy as np
import pandas as pd

from .models import ChartPoint
from .utils import _to_fixed


def compute_segment_slopes(points: pd.DataFrame) -> pd.Series:
    """Slope angle in degrees of the segment starting at each point.

    ``points`` needs ``x`` (distance, m) and ``y`` (elevation, m) columns.
    Segments with ``dx <= 0`` and the last point get 0. Values are rounded
    to one decimal.
    """
    delta_x = points["x"].shift(-1) - points["x"]
    delta_y = points["y"].shift(-1) - points["y"]
    valid = delta_x > 0

    grade_pct = (delta_y[valid] / delta_x[valid]) * 100.0
    angle_deg = np.degrees(np.arctan(grade_pct / 100.0))

    slopes = angle_deg.map(lambda a: float(_to_fixed(a, 1)))
    return slopes.reindex(points.index, fill_value=0.0).astype(float)


def annotate_slopes(points: pd.DataFrame) -> List[ChartPoint]:
    """Attach the outgoing segment's slope to every point of a simplified profile."""
    slopes = compute_segment_slopes(points)
    return [
        ChartPoint(x=float(x), y=float(y), slope=float(s))
        for x, y, s in zip(points["x"], points["y"], slopes)
    ]
