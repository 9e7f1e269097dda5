import math
from dataclasses import dataclass


@dataclass(frozen=True)
class ProfileConfig:
    """Policy constants for the elevation pipeline.

    Parameters
    ----------
    step_m : float, default 25
        Resampling step along the track, in meters.
    smooth_window_m : float, default 100
        Moving-average window, in meters. Converted to samples as
        ``floor(smooth_window_m / step_m)``.
    threshold_m : float, default 4
        Minimum elevation change from the last anchor before gain/loss is counted.
    simplify_tolerance : float, default 3
        Douglas-Peucker tolerance in plot units (meters vs meters).
    """

    step_m: float = 25.0
    smooth_window_m: float = 100.0
    threshold_m: float = 4.0
    simplify_tolerance: float = 3.0

    def __post_init__(self) -> None:
        for name in ("step_m", "smooth_window_m", "threshold_m", "simplify_tolerance"):
            value = getattr(self, name)
            if not isinstance(value, (int, float)) or not math.isfinite(value):
                raise ValueError(f"{name} must be a finite number, got {value!r}.")
            if value < 0:
                raise ValueError(f"{name} must not be negative, got {value!r}.")
        if self.step_m == 0:
            raise ValueError("step_m must be greater than zero.")


DEFAULT_CONFIG = ProfileConfig()
