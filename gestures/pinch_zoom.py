"""
PinchZoomGesture: thumb/index pinch turned into a continuous scale factor.

    IDLE ──(distance < engage  and  gate)──▶ ENGAGED
    ENGAGED ──(distance > release  or  velocity > clutch  or  not gate)──▶ IDLE

The engage and release thresholds differ so the state does not flicker
around a single boundary. The gate (middle, ring and pinky curled) rejects
open hands where thumb and index just happen to pass close to each other.
"""
from __future__ import annotations
import logging
from dataclasses import dataclass
from typing import Optional, Sequence

from domain.enums import PinchState, ReleaseReason
from gestures.base import Gesture, SecondarySample
from utils.constants import CURL_FINGERS
from utils.geometry import is_finger_curled

logger = logging.getLogger(__name__)


def strict_pinch_gate(landmarks: Sequence[Sequence[float]]) -> bool:
    """True when the middle, ring and pinky fingers are all curled."""
    return all(is_finger_curled(landmarks, tip, pip) for tip, pip in CURL_FINGERS.values())


@dataclass(frozen=True)
class PinchReading:
    state: PinchState
    scale_factor: float = 1.0
    zoom_start_distance: Optional[float] = None
    transition: Optional[PinchState] = None
    release_reason: Optional[ReleaseReason] = None


class PinchZoomGesture(Gesture):
    """
    Parameters
    ----------
    engage_threshold : float
        Smoothed pinch distance below which an idle pinch engages.
    release_threshold : float
        Smoothed pinch distance above which an engaged pinch releases.
    clutch_velocity : float
        Opening velocity (units/frame) that releases immediately.
    min_reference : float
        Zoom-start distances below this yield a neutral scale factor.
    """
    NAME = "PINCH_ZOOM"

    def __init__(
        self,
        engage_threshold: float = 0.05,
        release_threshold: float = 0.08,
        clutch_velocity: float = 0.02,
        min_reference: float = 1e-4,
    ) -> None:
        self._engage = engage_threshold
        self._release = release_threshold
        self._clutch = clutch_velocity
        self._min_reference = min_reference

        self._state = PinchState.IDLE
        self._zoom_start: Optional[float] = None

    # ------------------------------------------------------------------
    def update(self, sample: SecondarySample) -> PinchReading:
        distance = sample.pinch_distance

        if self._state is PinchState.IDLE:
            if distance < self._engage and sample.gate_holds:
                self._state = PinchState.ENGAGED
                self._zoom_start = distance
                logger.debug("frame %d: pinch engaged at %.4f", sample.frame_index, distance)
                return self._reading(distance, transition=PinchState.ENGAGED)
            return self._reading(distance)

        reason = self._release_reason(sample)
        if reason is not None:
            logger.debug("frame %d: pinch released (%s) at %.4f",
                         sample.frame_index, reason.value, distance)
            self._state = PinchState.IDLE
            self._zoom_start = None
            return self._reading(distance, transition=PinchState.IDLE, reason=reason)

        return self._reading(distance)

    def _release_reason(self, sample: SecondarySample) -> Optional[ReleaseReason]:
        if sample.pinch_distance > self._release:
            return ReleaseReason.DISTANCE
        if sample.pinch_velocity > self._clutch:
            return ReleaseReason.CLUTCH
        if not sample.gate_holds:
            return ReleaseReason.GATE
        return None

    def _reading(
        self,
        distance: float,
        transition: Optional[PinchState] = None,
        reason: Optional[ReleaseReason] = None,
    ) -> PinchReading:
        return PinchReading(
            state=self._state,
            scale_factor=self.scale_factor(distance),
            zoom_start_distance=self._zoom_start,
            transition=transition,
            release_reason=reason,
        )

    # ------------------------------------------------------------------
    def scale_factor(self, distance: float) -> float:
        """Current distance relative to the zoom-start distance; 1.0 while idle."""
        if self._state is not PinchState.ENGAGED or self._zoom_start is None:
            return 1.0
        if self._zoom_start < self._min_reference:
            return 1.0
        return distance / self._zoom_start

    @property
    def state(self) -> PinchState:
        return self._state

    @property
    def zoom_start_distance(self) -> Optional[float]:
        return self._zoom_start

    def reset(self) -> None:
        if self._state is PinchState.ENGAGED:
            logger.debug("pinch released (%s)", ReleaseReason.RESET.value)
        self._state = PinchState.IDLE
        self._zoom_start = None
