# sensors.py
# Raw sensor readings -> Heading.
# Subscribing to the device sensors is the platform layer's job; this only converts samples.

import math

from .geo_utils import normalize_angle, to_degrees


def heading_from_magnetometer(x: float, y: float) -> float:
    """
    Device heading from the magnetometer's horizontal axes.

    Args:
        x, y: Raw field strength along the device x and y axes (any unit).

    Returns:
        Heading in degrees [0, 360). A zero or non-finite reading gives 0.0.
    """
    if not (math.isfinite(x) and math.isfinite(y)):
        return 0.0
    return normalize_angle(to_degrees(math.atan2(y, x)))
