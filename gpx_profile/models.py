from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

import pandas as pd


@dataclass(frozen=True)
class TrackPoint:
    """One recorded sample: cumulative distance from the start [m] and elevation [m]."""

    distance_m: float
    elevation: float


@dataclass
class Track:
    """Ordered points of the first track of a parsed file."""

    points: List[TrackPoint] = field(default_factory=list)
    name: Optional[str] = None

    def __len__(self) -> int:
        return len(self.points)

    @property
    def total_distance(self) -> float:
        return self.points[-1].distance_m if self.points else 0.0

    @classmethod
    def from_dataframe(cls, df: pd.DataFrame, name: Optional[str] = None) -> "Track":
        """Build a track from a parser DataFrame.

        Parameters
        ----------
        df : pd.DataFrame
            Must contain columns ``km`` (cumulative distance in kilometers)
            and ``elevation`` (meters).
        """
        required = {"km", "elevation"}
        missing = required.difference(df.columns)
        if missing:
            raise ValueError(
                f"The DataFrame must contain the following columns: {required}; missing: {missing}"
            )
        points = [
            TrackPoint(distance_m=float(km) * 1000.0, elevation=float(ele))
            for km, ele in zip(df["km"], df["elevation"])
        ]
        return cls(points=points, name=name)


@dataclass(frozen=True)
class ChartPoint:
    """Point of the chart-ready series; ``slope`` describes the segment to the next point."""

    x: float
    y: float
    slope: float = 0.0

    def to_dict(self) -> Dict[str, float]:
        return {"x": self.x, "y": self.y, "slope": self.slope}


@dataclass(frozen=True)
class Stats:
    distance: str
    total_distance: float
    elevation_gain: str
    elevation_loss: str
    max_elevation: str
    min_elevation: str

    def to_dict(self) -> Dict[str, Any]:
        return {
            "distance": self.distance,
            "totalDistance": self.total_distance,
            "elevationGain": self.elevation_gain,
            "elevationLoss": self.elevation_loss,
            "maxElevation": self.max_elevation,
            "minElevation": self.min_elevation,
        }


@dataclass(frozen=True)
class ProfileResult:
    """Everything the presentation layer needs: summary stats and the chart series."""

    stats: Stats
    chart_data: List[ChartPoint]

    def to_dict(self) -> Dict[str, Any]:
        return {
            "stats": self.stats.to_dict(),
            "chartData": [p.to_dict() for p in self.chart_data],
        }
