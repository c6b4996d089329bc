# projection.py
# Heading/bearing -> screen position for the AR marker.
# Only yaw is modelled: the marker always sits on the vertical centre line.

import math

from .geo_utils import DEFAULT_FOV_DEG
from .models import ScreenProjection


def angle_difference(bearing: float, heading: float) -> float:
    """
    Signed shortest-path offset of the target from the facing direction.

    Returns:
        Degrees in (-180, 180]; positive means the target is clockwise
        (to the right). Non-finite input gives 0.0.
    """
    if not (math.isfinite(bearing) and math.isfinite(heading)):
        return 0.0
    diff = bearing - heading
    if diff > 180:
        diff -= 360
    elif diff <= -180:
        diff += 360
    return diff


def project(
    heading: float,
    bearing: float,
    width: float,
    height: float,
    fov: float = DEFAULT_FOV_DEG,
) -> ScreenProjection:
    """
    Decide marker visibility and its screen position.

    Args:
        heading: Device heading in degrees [0, 360).
        bearing: Target bearing in degrees [0, 360).
        width, height: Viewport size in pixels.
        fov:     Horizontal camera field of view in degrees.

    Returns:
        ScreenProjection; x/y are None when the target is outside the FOV.
        A non-finite input or a negative fov is never visible.
    """
    diff = angle_difference(bearing, heading)
    if not all(math.isfinite(v) for v in (heading, bearing, fov)) or fov < 0:
        return ScreenProjection(visible=False, angle_diff=diff, fov=fov)

    half_fov = fov / 2
    if abs(diff) > half_fov:
        return ScreenProjection(visible=False, angle_diff=diff, fov=fov)

    # a zero fov only admits the on-axis target
    normalized = diff / half_fov if half_fov else 0.0
    x = width / 2 + normalized * (width / 2)
    y = height / 2
    return ScreenProjection(visible=True, angle_diff=diff, fov=fov, x=x, y=y)


def direction_hint(angle_diff: float) -> str:
    """Which way to turn towards the target: "left", "right" or "ahead"."""
    if angle_diff > 0:
        return "right"
    if angle_diff < 0:
        return "left"
    return "ahead"
