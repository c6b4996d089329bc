"""Shared data models for the camera/overlay pipeline.

These dataclasses define the contract between the camera feed and the AR
overlay. Keep them stable and versioned together with the rest of the codebase.
"""

from dataclasses import dataclass
from typing import Any, Dict, Optional, Tuple

import numpy as np


# ==================== DATA CLASSES ====================
@dataclass
class Frame:
    """Raw camera frame data."""

    rgb: np.ndarray  # (H, W, 3) RGB image
    timestamp: float  # Unix timestamp
    frame_id: int  # Sequential frame number
    metadata: Optional[Dict[str, Any]] = None  # Extra info (source, exposure, etc.)

    def __post_init__(self) -> None:
        if self.metadata is None:
            self.metadata = {}

    @property
    def size(self) -> Tuple[int, int]:
        """(width, height) in pixels."""

        height, width = self.rgb.shape[:2]
        return width, height


# ==================== MOCK GENERATORS ====================

def generate_mock_frame(
    width: int = 640,
    height: int = 480,
    frame_id: int = 0,
) -> Frame:
    """Generate a fake frame for testing."""

    import time

    return Frame(
        rgb=np.random.randint(0, 255, (height, width, 3), dtype=np.uint8),
        timestamp=time.time(),
        frame_id=frame_id,
        metadata={"source": "mock"},
    )


def generate_blank_frame(
    width: int = 640,
    height: int = 480,
    frame_id: int = 0,
    color: Tuple[int, int, int] = (60, 60, 60),
) -> Frame:
    """Solid-colour frame, used as a stand-in camera background."""

    import time

    rgb = np.empty((height, width, 3), dtype=np.uint8)
    rgb[:] = color
    return Frame(
        rgb=rgb,
        timestamp=time.time(),
        frame_id=frame_id,
        metadata={"source": "blank"},
    )
