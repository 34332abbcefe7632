"""
GestureEngine: the single per-frame entry point.

Turns raw detector output into stable control signals:

    FrameObservation → HandRoleResolver → per role: palm center + smoothing
        primary   → PrimaryHandUpdate
        secondary → pinch smoothing → PinchZoomGesture + RotationGesture
                  → SecondaryHandUpdate
    both roles absent (debounced, edge only) → HandsLost

Frame-synchronous and single-threaded: every call fully updates the state
before returning, and callers must not invoke process() concurrently or
re-entrantly (e.g. from inside one of the callbacks).
"""
from __future__ import annotations
import logging
from typing import Callable, List, Optional

from core.presence import HandsLostLatch
from core.role_resolver import HandRoleResolver
from core.role_state import RoleState
from core.smoother import MovingAverage
from domain.config import EngineConfig
from domain.enums import HandRole
from domain.errors import ReentrantCallError
from domain.models import (
    EngineEvent,
    EngineStatus,
    FrameObservation,
    HandDetection,
    HandsLost,
    PrimaryHandUpdate,
    SecondaryHandUpdate,
)
from gestures.base import SecondarySample
from gestures.pinch_zoom import PinchZoomGesture, strict_pinch_gate
from gestures.rotation import RotationGesture
from utils.constants import INDEX_TIP, THUMB_TIP
from utils.geometry import dist, palm_center

logger = logging.getLogger(__name__)

PrimaryCallback = Callable[[PrimaryHandUpdate], None]
SecondaryCallback = Callable[[SecondaryHandUpdate], None]
HandsLostCallback = Callable[[HandsLost], None]


class GestureEngine:
    """
    Usage
    -----
    engine = GestureEngine(EngineConfig())
    events = engine.process(observation)

    Parameters
    ----------
    config : EngineConfig
        Thresholds and window sizes; defaults are used when omitted.
    """

    def __init__(self, config: Optional[EngineConfig] = None) -> None:
        self._config = config or EngineConfig()
        cfg = self._config

        self._resolver = HandRoleResolver(cfg.min_hand_separation)
        self._primary = RoleState(HandRole.PRIMARY, cfg.position_window, cfg.loss_debounce_frames)
        self._secondary = RoleState(HandRole.SECONDARY, cfg.position_window, cfg.loss_debounce_frames)
        self._hands_lost = HandsLostLatch()

        # ---- secondary-hand signals -----------------------------------
        self._pinch_window = MovingAverage(cfg.pinch_window)
        self._pinch_distance: Optional[float] = None
        self._pinch = PinchZoomGesture(
            engage_threshold=cfg.pinch_engage_threshold,
            release_threshold=cfg.pinch_release_threshold,
            clutch_velocity=cfg.clutch_velocity,
            min_reference=cfg.min_zoom_reference,
        )
        self._rotation = RotationGesture()

        self._on_primary: Optional[PrimaryCallback] = None
        self._on_secondary: Optional[SecondaryCallback] = None
        self._on_hands_lost: Optional[HandsLostCallback] = None

        self._frames = 0
        self._in_flight = False

    # ------------------------------------------------------------------
    def set_callbacks(
        self,
        on_primary: Optional[PrimaryCallback] = None,
        on_secondary: Optional[SecondaryCallback] = None,
        on_hands_lost: Optional[HandsLostCallback] = None,
    ) -> None:
        """Register listeners; any callback left out is cleared."""
        self._on_primary = on_primary
        self._on_secondary = on_secondary
        self._on_hands_lost = on_hands_lost

    # ------------------------------------------------------------------
    def process(self, observation: FrameObservation) -> List[EngineEvent]:
        """
        Process one frame and return the events it produced.

        Ordering:
        1. Role resolution.
        2. Primary role: smoothing / debounce → PrimaryHandUpdate.
        3. Secondary role: smoothing / debounce → pinch + rotation
           → SecondaryHandUpdate.
        4. HandsLost on the edge where both roles are absent.
        Callbacks run after the state for the frame is fully updated.
        """
        if self._in_flight:
            raise ReentrantCallError("GestureEngine.process() is not re-entrant")
        self._in_flight = True
        try:
            events = self._step(observation)
            self._dispatch(events)
        finally:
            self._in_flight = False
        return events

    def _step(self, observation: FrameObservation) -> List[EngineEvent]:
        self._frames += 1
        events: List[EngineEvent] = []
        assignment = self._resolver.resolve(observation)

        # 1. Primary (position)
        if assignment.primary is not None:
            events.append(self._update_primary(assignment.primary, observation.frame_index))
        else:
            self._primary.miss()

        # 2. Secondary (pinch / rotation)
        if assignment.secondary is not None:
            events.append(self._update_secondary(assignment.secondary, observation.frame_index))
        elif self._secondary.miss():
            self._reset_secondary_signals()

        # 3. Hands lost
        if self._hands_lost.update((self._primary.presence, self._secondary.presence)):
            logger.debug("frame %d: hands lost", observation.frame_index)
            events.append(HandsLost(frame_index=observation.frame_index))

        return events

    # ------------------------------------------------------------------
    def _update_primary(self, detection: HandDetection, frame_index: int) -> PrimaryHandUpdate:
        self._primary.observe(palm_center(detection.landmarks))
        return PrimaryHandUpdate(
            position=self._primary.position,
            landmarks=detection.landmarks,
            frame_index=frame_index,
        )

    def _update_secondary(self, detection: HandDetection, frame_index: int) -> SecondaryHandUpdate:
        landmarks = detection.landmarks

        if self._secondary.observe(palm_center(landmarks)):
            self._reset_secondary_signals()

        # ---- pinch distance + velocity ---------------------------------
        raw_distance = dist(landmarks[THUMB_TIP], landmarks[INDEX_TIP])
        previous = self._pinch_distance
        self._pinch_distance = self._pinch_window.push(raw_distance)
        velocity = 0.0 if previous is None else self._pinch_distance - previous

        sample = SecondarySample(
            position=self._secondary.position,
            pinch_distance=self._pinch_distance,
            pinch_velocity=velocity,
            gate_holds=strict_pinch_gate(landmarks),
            frame_index=frame_index,
        )
        reading = self._pinch.update(sample)
        rotation = self._rotation.update(sample)

        return SecondaryHandUpdate(
            position=sample.position,
            pinch_state=reading.state,
            scale_factor=reading.scale_factor,
            rotation_delta=rotation,
            pinch_distance=sample.pinch_distance,
            pinch_delta=velocity,
            transition=reading.transition,
            release_reason=reading.release_reason,
            landmarks=landmarks,
            frame_index=frame_index,
        )

    def _reset_secondary_signals(self) -> None:
        self._pinch_window.reset()
        self._pinch_distance = None
        self._pinch.reset()
        self._rotation.reset()

    # ------------------------------------------------------------------
    def _dispatch(self, events: List[EngineEvent]) -> None:
        for event in events:
            if isinstance(event, PrimaryHandUpdate):
                callback = self._on_primary
            elif isinstance(event, SecondaryHandUpdate):
                callback = self._on_secondary
            else:
                callback = self._on_hands_lost
            if callback is not None:
                callback(event)

    # ------------------------------------------------------------------
    @property
    def status(self) -> EngineStatus:
        return EngineStatus(
            primary=self._primary.presence,
            secondary=self._secondary.presence,
            pinch_state=self._pinch.state,
            frames_processed=self._frames,
        )

    @property
    def config(self) -> EngineConfig:
        return self._config

    @property
    def primary(self) -> RoleState:
        return self._primary

    @property
    def secondary(self) -> RoleState:
        return self._secondary

    def reset(self) -> None:
        """Back to initial defaults, e.g. when the camera stream is recreated."""
        self._primary.reset()
        self._secondary.reset()
        self._hands_lost.reset()
        self._reset_secondary_signals()
        self._frames = 0
        logger.debug("engine reset")
