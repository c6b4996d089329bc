# geo_utils.py
# Pure mathematical / geographic helper functions.
# No side effects, no state. Non-finite inputs resolve to edge values instead of raising.

import math

from .models import GeoPoint


EARTH_RADIUS_M = 6_371_000.0
DEFAULT_FOV_DEG = 60.0
KM_THRESHOLD_M = 1000.0


def to_radians(degrees: float) -> float:
    return degrees * math.pi / 180


def to_degrees(radians: float) -> float:
    return radians * 180 / math.pi


def _all_finite(*values: float) -> bool:
    return all(math.isfinite(v) for v in values)


def normalize_angle(angle: float) -> float:
    """
    Wrap any angle into [0, 360).

    Args:
        angle: Angle in degrees, any magnitude or sign.

    Returns:
        Equivalent angle in [0, 360). Non-finite input gives 0.0.
    """
    if not math.isfinite(angle):
        return 0.0
    normalized = angle % 360
    if normalized < 0:
        normalized += 360
    # -1e-14 % 360 rounds up to exactly 360.0
    if normalized >= 360:
        normalized -= 360
    return normalized


def get_bearing(lat1: float, lon1: float, lat2: float, lon2: float) -> float:
    """
    Initial great-circle bearing from point 1 to point 2 in degrees [0, 360).

    Args:
        lat1, lon1: Origin in decimal degrees.
        lat2, lon2: Destination in decimal degrees.

    Returns:
        Bearing in degrees, 0 = true north, clockwise.
        Identical points give 0.0 (atan2(0, 0)).
    """
    if not _all_finite(lat1, lon1, lat2, lon2):
        return 0.0
    rlat1, rlat2 = to_radians(lat1), to_radians(lat2)
    d_lon = to_radians(lon2 - lon1)
    y = math.sin(d_lon) * math.cos(rlat2)
    x = math.cos(rlat1) * math.sin(rlat2) - math.sin(rlat1) * math.cos(rlat2) * math.cos(d_lon)
    return normalize_angle(to_degrees(math.atan2(y, x)))


def get_distance(lat1: float, lon1: float, lat2: float, lon2: float) -> float:
    """
    Haversine great-circle distance between two points in metres.

    Args:
        lat1, lon1: Origin in decimal degrees.
        lat2, lon2: Destination in decimal degrees.

    Returns:
        Distance in metres, never negative.
    """
    if not _all_finite(lat1, lon1, lat2, lon2):
        return 0.0
    phi1, phi2 = to_radians(lat1), to_radians(lat2)
    d_phi = to_radians(lat2 - lat1)
    d_lambda = to_radians(lon2 - lon1)
    a = (
        math.sin(d_phi / 2) ** 2
        + math.cos(phi1) * math.cos(phi2) * math.sin(d_lambda / 2) ** 2
    )
    # rounding can push a a hair outside [0, 1] for antipodal points
    a = min(1.0, max(0.0, a))
    return EARTH_RADIUS_M * 2 * math.atan2(math.sqrt(a), math.sqrt(1 - a))


def bearing_between(origin: GeoPoint, target: GeoPoint) -> float:
    """get_bearing() for two GeoPoints."""
    return get_bearing(origin.lat, origin.lon, target.lat, target.lon)


def distance_between(origin: GeoPoint, target: GeoPoint) -> float:
    """get_distance() for two GeoPoints."""
    return get_distance(origin.lat, origin.lon, target.lat, target.lon)


def is_in_view(user_heading: float, target_bearing: float, fov: float = DEFAULT_FOV_DEG) -> bool:
    """
    True if the target bearing lies inside the camera's field of view.

    The shorter arc around the 0/360 wrap is used, and the edge
    (exactly fov/2 away) counts as inside.
    """
    if not _all_finite(user_heading, target_bearing, fov):
        return False
    diff = abs(user_heading - target_bearing)
    if diff > 180:
        diff = 360 - diff
    return diff <= fov / 2


def format_distance(meters: float) -> str:
    """
    Human-readable distance label.

    Examples:
        999   -> "999m"
        1000  -> "1.0km"
        1500  -> "1.5km"
    """
    if not math.isfinite(meters):
        return "0m"
    if meters < KM_THRESHOLD_M:
        # half-up like the map UI, not Python's banker's rounding
        return f"{math.floor(meters + 0.5)}m"
    return f"{meters / 1000:.1f}km"
