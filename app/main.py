"""
main.py: Application entry point.

    Camera → HandTracker → GestureEngine → events → print / overlay

The scene controller is out of scope here; events are printed instead.
"""
from __future__ import annotations
import argparse
import logging
from typing import List, Optional

from app.config import AppConfig, default_config, load_config
from app.ui import OpenCVUI
from core.camera import Camera
from core.gesture_engine import GestureEngine
from core.hand_tracker import HandTracker
from domain.models import HandsLost, SecondaryHandUpdate


def _describe(event) -> Optional[str]:
    if isinstance(event, HandsLost):
        return "[EVENT] HANDS_LOST"
    if isinstance(event, SecondaryHandUpdate) and event.transition is not None:
        reason = f" ({event.release_reason.value})" if event.release_reason else ""
        return f"[EVENT] PINCH → {event.transition.value}{reason} d={event.pinch_distance:.3f}"
    return None


def run(config: AppConfig = default_config) -> None:
    print("="*55)
    print("  TERRAHOLD - hand gesture engine demo")
    print("="*55)
    print(f"  Model   : {config.model_path}")
    print(f"  Camera  : {config.camera_device} (requested {config.frame_width}x{config.frame_height})")
    print(f"  FPS cap : {config.fps_limit}")
    print("  Press ESC to quit")
    print("="*55 + "\n")

    engine = GestureEngine(config.engine)
    ui     = OpenCVUI(config)

    try:
        with HandTracker(
            config.model_path,
            max_num_hands=config.max_num_hands,
            min_detection_confidence=config.min_detection_confidence,
            min_tracking_confidence=config.min_tracking_confidence,
        ) as tracker, Camera(
            config.camera_device, config.fps_limit, config.frame_width, config.frame_height
        ) as camera:
            width, height = camera.resolution
            print(f"[STATE] capturing at {width}x{height}")
            _loop(camera, tracker, engine, ui)
    finally:
        ui.close()
        print("\n✓ Application closed cleanly")


def _loop(camera: Camera, tracker: HandTracker, engine: GestureEngine, ui: OpenCVUI) -> None:
    prev_status = engine.status

    while True:
        # 1. Capture
        frame = camera.read()
        if frame is None:
            break

        # 2. Detect hands
        observation = tracker.process(frame)

        # 3. Interpret
        events = engine.process(observation)
        for event in events:
            line = _describe(event)
            if line:
                print(line)

        # Log presence changes
        status = engine.status
        if (status.primary, status.secondary) != (prev_status.primary, prev_status.secondary):
            print(f"[STATE] primary={status.primary.value} secondary={status.secondary.value}")
        prev_status = status

        # 4. Render
        ui.render(frame, observation, events, status)
        if ui.should_quit():
            break


def main(argv: Optional[List[str]] = None) -> None:
    parser = argparse.ArgumentParser(description="TerraHold hand gesture engine demo")
    parser.add_argument("--config", help="path to a JSON config file")
    parser.add_argument("--verbose", action="store_true", help="log engine transitions")
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s %(name)s %(levelname)s: %(message)s",
    )
    config = load_config(args.config) if args.config else default_config
    run(config)


if __name__ == "__main__":
    main()
