"""
Unit tests for the OpenCV HUD overlay.
"""

import numpy as np
import pytest

from data_models import Frame, generate_blank_frame, generate_mock_frame
from navigation.ar.ar_config import ARConfig, MARKER_COLOR
from navigation.ar.ar_tracker import ARTracker
from navigation.ar.models import GeoPoint
from navigation.ar.overlay import OverlayRenderer, save_overlay


WIDTH, HEIGHT = 320, 240
BACKGROUND = (60, 60, 60)


@pytest.fixture
def renderer():
    return OverlayRenderer(ARConfig(viewport_width=WIDTH, viewport_height=HEIGHT))


@pytest.fixture
def tracker():
    t = ARTracker(GeoPoint(0.0, 1.0), ARConfig(viewport_width=WIDTH, viewport_height=HEIGHT))
    t.update_location(GeoPoint(0.0, 0.0))
    return t


def _marker_mask(img: np.ndarray) -> np.ndarray:
    return np.all(img == np.array(MARKER_COLOR, dtype=np.uint8), axis=-1)


class TestOverlayRenderer:

    def test_marker_drawn_right_of_centre(self, renderer, tracker):
        result = tracker.update_heading(75)     # target 15 deg to the right -> x = 240
        frame = generate_blank_frame(WIDTH, HEIGHT, color=BACKGROUND)
        img = renderer.render(frame, result)

        mask = _marker_mask(img)
        assert img.shape == (HEIGHT, WIDTH, 3)
        assert mask[:, 200:].sum() > 0
        assert mask[:, :150].sum() == 0

    def test_marker_follows_frame_size(self, renderer, tracker):
        # projection is redone for a frame twice as wide as the viewport
        result = tracker.update_heading(75)
        frame = generate_blank_frame(WIDTH * 2, HEIGHT, color=BACKGROUND)
        mask = _marker_mask(renderer.render(frame, result))
        cols = np.where(mask.any(axis=0))[0]
        assert cols.min() > WIDTH
        assert cols.max() < WIDTH * 2

    def test_out_of_view_draws_panel(self, renderer, tracker):
        result = tracker.update_heading(270)
        frame = generate_blank_frame(WIDTH, HEIGHT, color=BACKGROUND)
        img = renderer.render(frame, result)

        assert _marker_mask(img).sum() == 0
        # left edge of the bottom panel, clear of the text
        assert img[HEIGHT - 50, 15, 0] < BACKGROUND[0]

    def test_waiting_for_fix(self, renderer):
        result = ARTracker(GeoPoint(0.0, 1.0)).current
        frame = generate_blank_frame(WIDTH, HEIGHT, color=BACKGROUND)
        img = renderer.render(frame, result)
        assert _marker_mask(img).sum() == 0
        assert img.shape == frame.rgb.shape

    def test_input_frame_untouched(self, renderer, tracker):
        result = tracker.update_heading(90)
        frame = generate_mock_frame(WIDTH, HEIGHT)
        before = frame.rgb.copy()
        img = renderer.render(frame, result)
        assert np.array_equal(frame.rgb, before)
        assert not np.array_equal(img, before)

    def test_rejects_non_rgb(self, renderer, tracker):
        frame = Frame(rgb=np.zeros((HEIGHT, WIDTH), dtype=np.uint8), timestamp=0.0, frame_id=0)
        with pytest.raises(ValueError):
            renderer.render(frame, tracker.current)


class TestSaveOverlay:

    def test_writes_png(self, tmp_path, renderer, tracker):
        img = renderer.render(generate_blank_frame(WIDTH, HEIGHT), tracker.update_heading(90))
        path = tmp_path / "overlay.png"
        assert save_overlay(img, str(path))
        assert path.exists()

    def test_bad_path(self, tmp_path, renderer, tracker):
        img = renderer.render(generate_blank_frame(WIDTH, HEIGHT), tracker.current)
        assert not save_overlay(img, str(tmp_path / "missing" / "overlay.png"))


class TestOverlayFovMismatch:
    """Renderer and tracker configured with different FOVs."""

    def test_in_view_result_draws_marker_under_narrow_renderer(self, tracker):
        result = tracker.update_heading(75)     # 15 deg right, inside the tracker's 60
        narrow = OverlayRenderer(ARConfig(fov_deg=20, viewport_width=WIDTH, viewport_height=HEIGHT))
        img = narrow.render(generate_blank_frame(WIDTH, HEIGHT, color=BACKGROUND), result)
        mask = _marker_mask(img)
        assert mask[:, 200:].sum() > 0
        assert mask[:, :150].sum() == 0

    def test_out_of_view_result_draws_panel_under_wide_renderer(self):
        narrow = ARConfig(fov_deg=20, viewport_width=WIDTH, viewport_height=HEIGHT)
        tracker = ARTracker(GeoPoint(0.0, 1.0), narrow)
        tracker.update_location(GeoPoint(0.0, 0.0))
        result = tracker.update_heading(60)     # 30 deg off, outside 20 but inside 90

        wide = OverlayRenderer(ARConfig(fov_deg=90, viewport_width=WIDTH, viewport_height=HEIGHT))
        img = wide.render(generate_blank_frame(WIDTH, HEIGHT, color=BACKGROUND), result)
        assert _marker_mask(img).sum() == 0
        assert img[HEIGHT - 50, 15, 0] < BACKGROUND[0]
