"""
OpenCVUI: debug overlay isolated from detection and gesture logic.

The pipeline never calls cv2 drawing functions directly, it delegates to
this class.
"""
from __future__ import annotations
from typing import Any, Iterable, Optional

import cv2

from app.config import AppConfig
from domain.enums import PinchState, Presence
from domain.models import EngineEvent, EngineStatus, FrameObservation, PrimaryHandUpdate, SecondaryHandUpdate

_PRIMARY_COLOR   = (0, 255, 0)
_SECONDARY_COLOR = (255, 200, 0)
_ENGAGED_COLOR   = (255, 0, 255)
_LANDMARK_COLOR  = (200, 200, 200)
_PRESENCE_COLORS = {
    Presence.LIVE:   (0, 255, 0),
    Presence.ABSENT: (64, 64, 64),
}


class OpenCVUI:
    """Renders debug overlays onto the frame and shows it in a window."""

    def __init__(self, config: AppConfig, window_name: str = "TerraHold") -> None:
        self._cfg  = config
        self._name = window_name
        self._last_scale: float = 1.0

    def render(
        self,
        frame: Any,
        observation: FrameObservation,
        events: Iterable[EngineEvent],
        status: EngineStatus,
    ) -> None:
        """Draw landmarks and palm markers, mirror, add text, show window."""
        h, w = frame.shape[:2]

        for det in observation.detections:
            for x, y, *_ in det.landmarks:
                cv2.circle(frame, (int(x * w), int(y * h)), 3, _LANDMARK_COLOR, -1)

        secondary: Optional[SecondaryHandUpdate] = None
        for event in events:
            if isinstance(event, PrimaryHandUpdate):
                self._marker(frame, event.position, _PRIMARY_COLOR)
            elif isinstance(event, SecondaryHandUpdate):
                secondary = event
                color = _ENGAGED_COLOR if event.is_pinching else _SECONDARY_COLOR
                self._marker(frame, event.position, color)

        if self._cfg.mirror_display:
            frame = cv2.flip(frame, 1)

        # Presence indicators
        for row, (label, presence) in enumerate(
            (("Primary", status.primary), ("Secondary", status.secondary))
        ):
            cv2.putText(frame, f"{label}: {presence.value}", (20, 40 + 30 * row),
                        cv2.FONT_HERSHEY_SIMPLEX, 0.8, _PRESENCE_COLORS[presence], 2)

        if secondary is not None:
            if secondary.is_pinching:
                self._last_scale = secondary.scale_factor
            pinch = secondary.pinch_state
            color = _ENGAGED_COLOR if pinch is PinchState.ENGAGED else (200, 200, 200)
            cv2.putText(frame, f"Pinch: {pinch.value}  d={secondary.pinch_distance:.3f}",
                        (20, 110), cv2.FONT_HERSHEY_SIMPLEX, 0.6, color, 1)
            cv2.putText(frame, f"Scale: x{self._last_scale:.2f}",
                        (20, 135), cv2.FONT_HERSHEY_SIMPLEX, 0.6, color, 1)

        cv2.putText(frame, "ESC to quit",
                    (w - 200, h - 20), cv2.FONT_HERSHEY_SIMPLEX, 0.6, (255, 255, 255), 1)

        cv2.imshow(self._name, frame)

    @staticmethod
    def _marker(frame: Any, position, color) -> None:
        h, w = frame.shape[:2]
        center = (int(position[0] * w), int(position[1] * h))
        cv2.circle(frame, center, 12, color, 2)

    def should_quit(self) -> bool:
        """Returns True if the user pressed ESC."""
        return (cv2.waitKey(1) & 0xFF) == 27

    def close(self) -> None:
        cv2.destroyAllWindows()
