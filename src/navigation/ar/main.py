# main.py
# Entry point: simulates a sensor loop feeding GPS fixes and headings into ARTracker.
# In production, replace the SIMULATION loop with the device's location and magnetometer callbacks.
#
# Usage: python -m navigation.ar.main [--fov 60] [--width 1080] [--height 1920] [--output-dir frames] [--interval 0.1]

import argparse
import logging
import os
import time
from typing import List, Optional, Tuple

from data_models import generate_blank_frame

from .ar_config import ARConfig
from .ar_tracker import ARTracker
from .models import GeoPoint, TrackingStatus
from .overlay import OverlayRenderer, save_overlay

logger = logging.getLogger(__name__)

# ------------------------------------------------------------------
# Simulation samples (Sıhhiye → Kurtuluş, Ankara): (position, heading)
# ------------------------------------------------------------------
TARGET = GeoPoint(39.9210086, 32.8529793)

SIMULATION: List[Tuple[GeoPoint, float]] = [
    (GeoPoint(39.92409,   32.845382),  0.0),     # facing north, target behind-right
    (GeoPoint(39.92409,   32.845382),  90.0),    # turn east
    (GeoPoint(39.9240467, 32.8451522), 115.0),   # target ahead
    (GeoPoint(39.9249406, 32.8462865), 140.0),
    (GeoPoint(39.9254588, 32.8477125), 150.0),
    (GeoPoint(39.9208164, 32.8533392), 300.0),   # overshoot, target back to the north-west
    (GeoPoint(39.920927,  32.8533893), 290.0),
    (GeoPoint(39.9210086, 32.8529793), 290.0),   # arrival
]


def build_parser() -> argparse.ArgumentParser:
    defaults = ARConfig()
    parser = argparse.ArgumentParser(
        description="AR wayfinder: replay a walking simulation through the tracker"
    )
    parser.add_argument("--fov", type=float, default=defaults.fov_deg,
                        help="Camera horizontal field of view in degrees (default: %(default)s)")
    parser.add_argument("--width", type=int, default=defaults.viewport_width,
                        help="Viewport width in pixels (default: %(default)s)")
    parser.add_argument("--height", type=int, default=defaults.viewport_height,
                        help="Viewport height in pixels (default: %(default)s)")
    parser.add_argument("--output-dir", default=defaults.output_dir,
                        help="Write one overlay PNG per sample into this directory")
    parser.add_argument("--interval", type=float, default=None,
                        help="Seconds between samples (default: the magnetometer interval)")
    parser.add_argument("--verbose", action="store_true",
                        help="Log every recomputation")
    return parser


def run_simulation(
    config: ARConfig,
    samples: List[Tuple[GeoPoint, float]] = SIMULATION,
    target: GeoPoint = TARGET,
    interval: Optional[float] = None,
) -> List[dict]:
    """
    Feed samples through a tracker and optionally render overlays.

    Args:
        interval: Seconds to sleep between samples; defaults to
                  config.magnetometer_interval_ms. Pass 0 to run flat out.

    Returns:
        One TrackingResult dict per sample.
    """
    if interval is None:
        interval = config.magnetometer_interval_ms / 1000
    tracker = ARTracker(target, config)
    renderer: Optional[OverlayRenderer] = None
    if config.output_dir:
        os.makedirs(config.output_dir, exist_ok=True)
        renderer = OverlayRenderer(config)

    results = []
    for i, (position, heading) in enumerate(samples):
        tracker.update_location(position)
        result = tracker.update_heading(heading)
        results.append(result.to_dict())

        logger.info(f"GPS {position} heading {heading:.0f}° → [{result.status.name}] {result.message}")
        if result.status == TrackingStatus.OUT_OF_VIEW and result.hint:
            logger.info(f"    {result.hint}")

        if renderer is not None:
            frame = generate_blank_frame(config.viewport_width, config.viewport_height, frame_id=i)
            save_overlay(renderer.render(frame, result), config.image_path(i))

        if interval:
            time.sleep(interval)
    return results


def main(argv: Optional[List[str]] = None) -> None:
    args = build_parser().parse_args(argv)

    # ------------------------------------------------------------------
    # Logging setup, configured once here; all modules inherit
    # ------------------------------------------------------------------
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%H:%M:%S",
    )

    config = ARConfig(
        fov_deg=args.fov,
        viewport_width=args.width,
        viewport_height=args.height,
        output_dir=args.output_dir,
    )

    logger.info(f"Tracking target {TARGET} (FOV {config.fov_deg:.0f}°)")
    run_simulation(config, interval=args.interval)
    logger.info("Session complete.")
    if config.output_dir:
        logger.info(f"Overlay frames written to: {config.output_dir}/")


if __name__ == "__main__":
    main()
