# ar_config.py
# All tuneable constants in one place.
# Pass an ARConfig instance to every module that needs settings.

import os
from dataclasses import dataclass
from typing import Optional, Tuple

from .geo_utils import DEFAULT_FOV_DEG


# ---------------------------------------------------------------------------
# Sensor cadence (what the mobile sensor layer subscribes with)
# ---------------------------------------------------------------------------

MAGNETOMETER_INTERVAL_MS: int = 100
LOCATION_DISTANCE_INTERVAL_M: float = 1.0


# ---------------------------------------------------------------------------
# Overlay colours, RGB
# ---------------------------------------------------------------------------

MARKER_COLOR: Tuple[int, int, int] = (255, 59, 48)
TEXT_COLOR: Tuple[int, int, int] = (255, 255, 255)
PANEL_COLOR: Tuple[int, int, int] = (0, 0, 0)


# ---------------------------------------------------------------------------
# Main config
# ---------------------------------------------------------------------------

@dataclass
class ARConfig:
    # Camera / viewport
    fov_deg: float = DEFAULT_FOV_DEG
    viewport_width: int = 1080
    viewport_height: int = 1920

    # Sensors
    magnetometer_interval_ms: int = MAGNETOMETER_INTERVAL_MS
    location_distance_interval_m: float = LOCATION_DISTANCE_INTERVAL_M

    # Overlay
    marker_color: Tuple[int, int, int] = MARKER_COLOR
    text_color: Tuple[int, int, int] = TEXT_COLOR
    panel_color: Tuple[int, int, int] = PANEL_COLOR
    panel_alpha: float = 0.7             # 0 = transparent, 1 = opaque
    marker_size_px: int = 30             # arrow base width
    crosshair_size_px: int = 30

    # Simulation output
    output_dir: Optional[str] = None     # overlay PNGs are written here when set
    image_prefix: str = "ar_frame"

    def __post_init__(self) -> None:
        if not 0 < self.fov_deg <= 360:
            raise ValueError(f"fov_deg must be in (0, 360], got {self.fov_deg}")
        if self.viewport_width <= 0 or self.viewport_height <= 0:
            raise ValueError(
                f"Viewport must be positive, got {self.viewport_width}x{self.viewport_height}"
            )
        if not 0.0 <= self.panel_alpha <= 1.0:
            raise ValueError(f"panel_alpha must be in [0, 1], got {self.panel_alpha}")
        if self.magnetometer_interval_ms < 0 or self.location_distance_interval_m < 0:
            raise ValueError("Sensor intervals must not be negative.")

    def image_path(self, index: int) -> Optional[str]:
        if self.output_dir is None:
            return None
        return os.path.join(self.output_dir, f"{self.image_prefix}_{index:03d}.png")
