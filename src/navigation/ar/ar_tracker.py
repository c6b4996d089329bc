# ar_tracker.py
# Holds the latest location and heading samples for one target.
# Call update_location() / update_heading() on every sensor sample; the most recent sample wins.

import logging
from typing import Optional

from .models import GeoPoint, ScreenProjection, TrackingResult, TrackingStatus
from .geo_utils import bearing_between, distance_between, format_distance, normalize_angle
from .projection import project, direction_hint
from .sensors import heading_from_magnetometer
from .ar_config import ARConfig

logger = logging.getLogger(__name__)


class ARTracker:
    """
    Stateful AR session for a single target.

    Usage:
        tracker = ARTracker(GeoPoint(39.921, 32.853), config)

        # Inside sensor callbacks:
        result = tracker.update_location(GeoPoint(lat, lon))
        result = tracker.update_heading(heading_deg)

    Only the latest samples are kept; every call recomputes bearing,
    distance and the screen projection from scratch.
    """

    def __init__(self, target: GeoPoint, config: Optional[ARConfig] = None) -> None:
        self.config = config or ARConfig()
        self._target = target
        self._position: Optional[GeoPoint] = None
        self._heading: float = 0.0
        self._current = self._recompute()

    # ------------------------------------------------------------------
    # Read-only properties
    # ------------------------------------------------------------------

    @property
    def target(self) -> GeoPoint:
        return self._target

    @property
    def position(self) -> Optional[GeoPoint]:
        return self._position

    @property
    def heading(self) -> float:
        return self._heading

    @property
    def has_fix(self) -> bool:
        return self._position is not None

    @property
    def current(self) -> TrackingResult:
        return self._current

    # ------------------------------------------------------------------
    # Sensor input
    # ------------------------------------------------------------------

    def update_location(self, position: GeoPoint) -> TrackingResult:
        """
        Store a new GPS fix and recompute.

        Fixes closer than config.location_distance_interval_m to the last
        accepted one are dropped and the current result is returned unchanged.
        """
        if self._position is None:
            logger.info(f"Location fix acquired at {position}.")
        else:
            moved = distance_between(self._position, position)
            if moved < self.config.location_distance_interval_m:
                logger.debug(f"Fix {position} ignored, moved {moved:.2f} m.")
                return self._current
        self._position = position
        return self._update()

    def update_heading(self, heading: float) -> TrackingResult:
        """Store a new heading in degrees (any range) and recompute."""
        self._heading = normalize_angle(heading)
        return self._update()

    def update_magnetometer(self, x: float, y: float) -> TrackingResult:
        """Store a heading derived from raw magnetometer axes and recompute."""
        self._heading = heading_from_magnetometer(x, y)
        return self._update()

    def set_target(self, target: GeoPoint) -> TrackingResult:
        """Point the session at a new target."""
        logger.info(f"Target changed: {self._target} → {target}")
        self._target = target
        return self._update()

    # ------------------------------------------------------------------
    # Core method
    # ------------------------------------------------------------------

    def _update(self) -> TrackingResult:
        previous = self._current.status
        self._current = self._recompute()
        status = self._current.status

        if status != previous:
            if status == TrackingStatus.IN_VIEW:
                logger.info(f"Target entered view ({self._current.distance_text}).")
            elif status == TrackingStatus.OUT_OF_VIEW:
                logger.info(f"Target left view (bearing {self._current.bearing:.0f}°).")
        logger.debug(f"Recomputed: {self._current.to_dict()}")
        return self._current

    def _recompute(self) -> TrackingResult:
        if self._position is None:
            return TrackingResult(
                status=TrackingStatus.WAITING_FOR_FIX,
                message="Waiting for location fix...",
                heading=self._heading,
            )

        bearing = bearing_between(self._position, self._target)
        distance = distance_between(self._position, self._target)
        distance_text = format_distance(distance)
        projection: ScreenProjection = project(
            self._heading,
            bearing,
            self.config.viewport_width,
            self.config.viewport_height,
            self.config.fov_deg,
        )

        if projection.visible:
            return TrackingResult(
                status=TrackingStatus.IN_VIEW,
                message=distance_text,
                heading=self._heading,
                bearing=bearing,
                distance=distance,
                distance_text=distance_text,
                projection=projection,
            )

        return TrackingResult(
            status=TrackingStatus.OUT_OF_VIEW,
            message="Turn around to see the target",
            heading=self._heading,
            bearing=bearing,
            distance=distance,
            distance_text=distance_text,
            projection=projection,
            hint=(
                f"Target is {bearing:.0f}° from north "
                f"(turn {direction_hint(projection.angle_diff)})"
            ),
        )
