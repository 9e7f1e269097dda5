import math
from decimal import ROUND_HALF_UP, Decimal

from .errors import MalformedTrackError, NoTrackDataError
from .models import Track


def _validate_track(track: Track) -> Track:
    """Check track invariants once at ingestion; return the track unchanged.

    Raises
    ------
    NoTrackDataError
        If the track is missing or has no points.
    MalformedTrackError
        If a point has a non-finite or negative distance, a non-finite
        elevation, or a cumulative distance lower than its predecessor's.
    """
    if track is None or not track.points:
        raise NoTrackDataError("No track points found in the GPX data.")

    previous = 0.0
    for i, point in enumerate(track.points):
        if not math.isfinite(point.elevation):
            raise MalformedTrackError(f"Point {i} has a non-finite elevation: {point.elevation!r}", index=i)
        if not math.isfinite(point.distance_m) or point.distance_m < 0:
            raise MalformedTrackError(f"Point {i} has an invalid distance: {point.distance_m!r}", index=i)
        if point.distance_m < previous:
            raise MalformedTrackError(
                f"Point {i} distance {point.distance_m} m is lower than the previous point ({previous} m).",
                index=i,
            )
        previous = point.distance_m
    return track


def _to_fixed(value: float, digits: int = 0) -> str:
    """Format like JavaScript's ``Number.toFixed``: round half away from zero.

    Works on the exact binary value of ``value``; a rounded negative zero is
    returned without its sign.
    """
    quantum = Decimal(1).scaleb(-digits)
    rounded = Decimal(value).quantize(quantum, rounding=ROUND_HALF_UP)
    if rounded == 0:
        rounded = abs(rounded)
    return f"{rounded:.{digits}f}"
