import logging

import numpy as np
import pandas as pd

logger = logging.getLogger(__name__)


def _sq_segment_distances(points: np.ndarray, start: np.ndarray, end: np.ndarray) -> np.ndarray:
    """Squared distance of each point to the segment ``start``-``end`` (not the infinite line)."""
    seg = end - start
    seg_sq = float(seg @ seg)
    if seg_sq == 0:
        nearest = np.broadcast_to(start, points.shape)
    else:
        t = np.clip(((points - start) @ seg) / seg_sq, 0.0, 1.0)
        nearest = start + t[:, None] * seg
    diff = points - nearest
    return np.einsum("ij,ij->i", diff, diff)


def douglas_peucker_indices(points: np.ndarray, tolerance: float) -> np.ndarray:
    """Row indices kept by Ramer-Douglas-Peucker simplification.

    A point splits its span when its squared distance to the span's chord is
    strictly greater than ``tolerance ** 2``. First and last indices are
    always kept; the result is sorted ascending.
    """
    pts = np.asarray(points, dtype=float)
    n = len(pts)
    if n <= 2:
        return np.arange(n)

    sq_tolerance = tolerance * tolerance
    keep = np.zeros(n, dtype=bool)
    keep[0] = keep[-1] = True

    stack = [(0, n - 1)]
    while stack:
        first, last = stack.pop()
        if last - first < 2:
            continue
        dists = _sq_segment_distances(pts[first + 1 : last], pts[first], pts[last])
        i = int(np.argmax(dists))
        if dists[i] > sq_tolerance:
            index = first + 1 + i
            keep[index] = True
            stack.append((first, index))
            stack.append((index, last))

    return np.flatnonzero(keep)


def simplify(points: np.ndarray, tolerance: float) -> np.ndarray:
    """Simplify an ``(N, 2)`` polyline; returns a subset of the input rows in order."""
    pts = np.asarray(points, dtype=float)
    return pts[douglas_peucker_indices(pts, tolerance)]


def simplify_profile(smoothed: pd.DataFrame, tolerance: float = 3.0) -> pd.DataFrame:
    """Reduce the smoothed profile to the rows that matter for drawing.

    Returns
    -------
    pd.DataFrame
        Columns ``x`` (distance, m) and ``y`` (smoothed elevation, m).
    """
    xy = smoothed[["distance_m", "elev_smooth"]].to_numpy(dtype=float)
    kept = douglas_peucker_indices(xy, tolerance)
    logger.debug("Simplified profile from %d to %d points (tolerance %s)", len(xy), len(kept), tolerance)
    return pd.DataFrame({"x": xy[kept, 0], "y": xy[kept, 1]})
