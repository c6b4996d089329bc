# models.py
# Shared data structures and enums used across all modules.

from dataclasses import dataclass
from enum import Enum
from typing import Optional


# ---------------------------------------------------------------------------
# Coordinate
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class GeoPoint:
    """Immutable geographic coordinate in decimal degrees."""
    lat: float
    lon: float

    def __str__(self) -> str:
        return f"({self.lat:.6f}, {self.lon:.6f})"


# ---------------------------------------------------------------------------
# Screen projection
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class ScreenProjection:
    """Where the AR marker goes on screen for one heading/bearing pair."""
    visible: bool
    angle_diff: float               # signed offset in (-180, 180], positive = clockwise
    fov: float                      # degrees the visibility was decided with
    x: Optional[float] = None       # pixels, only meaningful when visible
    y: Optional[float] = None

    def to_dict(self) -> dict:
        return {
            "visible": self.visible,
            "angle_diff": round(self.angle_diff, 2),
            "fov": self.fov,
            "x": None if self.x is None else round(self.x, 1),
            "y": None if self.y is None else round(self.y, 1),
        }


# ---------------------------------------------------------------------------
# Tracking status
# ---------------------------------------------------------------------------

class TrackingStatus(Enum):
    WAITING_FOR_FIX = "waiting_for_fix"
    IN_VIEW         = "in_view"
    OUT_OF_VIEW     = "out_of_view"


@dataclass(frozen=True)
class TrackingResult:
    """Returned by ARTracker on every location or heading sample."""
    status: TrackingStatus
    message: str
    heading: float
    bearing: Optional[float] = None         # degrees from true north
    distance: Optional[float] = None        # metres
    distance_text: Optional[str] = None
    projection: Optional[ScreenProjection] = None
    hint: Optional[str] = None              # second prompt line when out of view

    def to_dict(self) -> dict:
        return {
            "status": self.status.value,
            "message": self.message,
            "heading": round(self.heading, 1),
            "bearing": None if self.bearing is None else round(self.bearing, 1),
            "distance": None if self.distance is None else round(self.distance, 1),
            "distance_text": self.distance_text,
            "projection": None if self.projection is None else self.projection.to_dict(),
            "hint": self.hint,
        }
