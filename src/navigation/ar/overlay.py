# overlay.py
# Draws the AR heads-up display onto a camera frame with OpenCV.
# Pure 2D: crosshair, info cards, target marker or "turn around" panel.

import logging
from typing import List, Optional, Tuple

import cv2
import numpy as np

from data_models import Frame

from .ar_config import ARConfig
from .models import TrackingResult, TrackingStatus
from .projection import project

logger = logging.getLogger(__name__)

FONT = cv2.FONT_HERSHEY_SIMPLEX


def _ascii(text: str) -> str:
    # Hershey fonts have no degree glyph
    return text.replace("°", " deg")


class OverlayRenderer:
    """
    Render a TrackingResult on top of a camera frame.

    Args:
        config: ARConfig for colours and sizes.
    """

    def __init__(self, config: Optional[ARConfig] = None) -> None:
        self.config = config or ARConfig()

    def render(self, frame: Frame, result: TrackingResult) -> np.ndarray:
        """
        Draw the HUD on a copy of the frame.

        Visibility follows result.status; the marker position is projected
        again for the frame's own size, so frames of any resolution line up
        with the heading.

        Returns:
            (H, W, 3) uint8 RGB image. frame.rgb is left untouched.
        """
        self._validate_input(frame.rgb)
        img = frame.rgb.copy()
        width, height = frame.size

        self._draw_crosshair(img, width, height)
        self._draw_info_cards(img, result, width)

        if result.status == TrackingStatus.WAITING_FOR_FIX:
            self._draw_panel(img, [result.message], width, height)
            return img

        if result.status == TrackingStatus.IN_VIEW:
            # same fov the tracker decided with, so the re-projection stays visible
            projection = project(
                result.heading, result.bearing, width, height, result.projection.fov,
            )
            self._draw_marker(img, int(round(projection.x)), int(round(projection.y)),
                              result.distance_text or "")
        else:
            lines = [result.message]
            if result.hint:
                lines.append(result.hint)
            self._draw_panel(img, lines, width, height)
        return img

    # ------------------------------------------------------------------
    # Drawing helpers
    # ------------------------------------------------------------------

    def _blend_rects(self, img: np.ndarray, rects: List[Tuple[int, int, int, int]]) -> None:
        """Fill rectangles with the panel colour at panel_alpha opacity."""
        layer = img.copy()
        for x1, y1, x2, y2 in rects:
            cv2.rectangle(layer, (x1, y1), (x2, y2), self.config.panel_color, -1)
        alpha = self.config.panel_alpha
        cv2.addWeighted(layer, alpha, img, 1 - alpha, 0, dst=img)

    def _put_centered(self, img: np.ndarray, text: str, cx: int, cy: int,
                      scale: float, thickness: int = 1) -> None:
        text = _ascii(text)
        (tw, th), _ = cv2.getTextSize(text, FONT, scale, thickness)
        cv2.putText(img, text, (cx - tw // 2, cy + th // 2), FONT, scale,
                    self.config.text_color, thickness, cv2.LINE_AA)

    def _draw_crosshair(self, img: np.ndarray, width: int, height: int) -> None:
        half = self.config.crosshair_size_px // 2
        cx, cy = width // 2, height // 2
        color = tuple(int(c * 0.5) + 64 for c in self.config.text_color)
        cv2.line(img, (cx - half, cy), (cx + half, cy), color, 2)
        cv2.line(img, (cx, cy - half), (cx, cy + half), color, 2)

    def _draw_info_cards(self, img: np.ndarray, result: TrackingResult, width: int) -> None:
        cards = [
            ("Distance", result.distance_text or "--"),
            ("Bearing", "--" if result.bearing is None else f"{result.bearing:.0f}°"),
            ("Heading", f"{result.heading:.0f}°"),
        ]
        margin = max(4, width // 50)
        card_w = (width - margin * (len(cards) + 1)) // len(cards)
        card_h = max(24, card_w // 2)
        top = margin

        rects = []
        for i in range(len(cards)):
            x1 = margin + i * (card_w + margin)
            rects.append((x1, top, x1 + card_w, top + card_h))
        self._blend_rects(img, rects)

        scale = max(0.3, card_w / 240)
        for (label, value), (x1, y1, x2, y2) in zip(cards, rects):
            cx = (x1 + x2) // 2
            self._put_centered(img, label, cx, y1 + card_h // 3, scale * 0.7)
            self._put_centered(img, value, cx, y1 + 2 * card_h // 3, scale, 2)

    def _draw_marker(self, img: np.ndarray, x: int, y: int, label: str) -> None:
        """Arrow pointing up above a label box, centred on (x, y)."""
        size = self.config.marker_size_px
        box_w, box_h = size * 2, size

        x1, y1 = x - box_w // 2, y - box_h // 2
        x2, y2 = x + box_w // 2, y + box_h // 2
        cv2.rectangle(img, (x1, y1), (x2, y2), self.config.marker_color, -1)
        cv2.rectangle(img, (x1, y1), (x2, y2), self.config.text_color, 2)

        arrow = np.array([
            [x, y1 - size - 4],
            [x - size // 2, y1 - 4],
            [x + size // 2, y1 - 4],
        ], dtype=np.int32)
        cv2.fillPoly(img, [arrow], self.config.text_color)

        self._put_centered(img, label, x, y, size / 60)

    def _draw_panel(self, img: np.ndarray, lines: List[str], width: int, height: int) -> None:
        margin = max(4, width // 30)
        line_h = max(16, height // 24)
        panel_h = line_h * (len(lines) + 1)
        y2 = height - margin
        y1 = y2 - panel_h
        self._blend_rects(img, [(margin, y1, width - margin, y2)])

        scale = max(0.35, width / 900)
        for i, line in enumerate(lines):
            cy = y1 + line_h * (i + 1)
            self._put_centered(img, line, width // 2, cy, scale if i == 0 else scale * 0.8)

    def _validate_input(self, img: np.ndarray) -> None:
        if img.ndim != 3 or img.shape[2] != 3:
            raise ValueError("Expected HWC image with 3 color channels.")


def save_overlay(img: np.ndarray, path: str) -> bool:
    """
    Write an RGB overlay image to disk.

    Returns:
        True on success, False on failure.
    """
    try:
        ok = cv2.imwrite(path, cv2.cvtColor(img, cv2.COLOR_RGB2BGR))
    except cv2.error as e:
        logger.error(f"Failed to write overlay to {path}: {e}")
        return False
    if not ok:
        logger.error(f"Failed to write overlay to {path}.")
        return False
    logger.info(f"Overlay saved to {path}.")
    return True
