from __future__ import annotations
from dataclasses import dataclass, field
from typing import Any, ClassVar, Optional, Tuple, Union
import math
import time

from domain.enums import GestureEvent, Handedness, PinchState, Presence, ReleaseReason
from domain.errors import MalformedObservationError
from utils.constants import NUM_LANDMARKS

# Type aliases
Keypoint = Tuple[float, ...]          # (x, y) or (x, y, z), normalized
LandmarkList = Tuple[Keypoint, ...]
Vector2D = Tuple[float, float]

ZERO_VECTOR: Vector2D = (0.0, 0.0)


def _as_keypoint(point: Any, index: int) -> Keypoint:
    try:
        coords = tuple(float(c) for c in point)
    except (TypeError, ValueError) as exc:
        raise MalformedObservationError(f"keypoint {index} is not a coordinate tuple") from exc
    if not 2 <= len(coords) <= 3:
        raise MalformedObservationError(
            f"keypoint {index} has {len(coords)} coordinates, expected 2 or 3"
        )
    if not all(math.isfinite(c) for c in coords):
        raise MalformedObservationError(f"keypoint {index} has a non-finite coordinate")
    return coords


@dataclass(frozen=True)
class HandDetection:
    """
    One hand reported by the landmark detector.

    The handedness label is taken as-is from the detector; it is mirrored
    and sometimes wrong, the role resolver corroborates it.
    """
    landmarks: LandmarkList
    handedness: Handedness = Handedness.UNKNOWN
    score: float = 1.0

    def __post_init__(self) -> None:
        points = tuple(self.landmarks)
        if len(points) != NUM_LANDMARKS:
            raise MalformedObservationError(
                f"hand detection has {len(points)} keypoints, expected {NUM_LANDMARKS}"
            )
        object.__setattr__(
            self, "landmarks", tuple(_as_keypoint(p, i) for i, p in enumerate(points))
        )
        object.__setattr__(self, "handedness", Handedness.parse(self.handedness))


@dataclass(frozen=True)
class FrameObservation:
    """
    Everything the detector produced for one processed frame.
    The order of the detections carries no meaning.
    """
    detections: Tuple[HandDetection, ...] = ()
    frame_index: int = 0
    timestamp: float = field(default_factory=time.time)

    MAX_HANDS: ClassVar[int] = 2

    def __post_init__(self) -> None:
        detections = tuple(self.detections)
        if len(detections) > self.MAX_HANDS:
            raise MalformedObservationError(
                f"frame has {len(detections)} hand detections, at most {self.MAX_HANDS} supported"
            )
        for det in detections:
            if not isinstance(det, HandDetection):
                raise MalformedObservationError(f"expected HandDetection, got {type(det).__name__}")
        object.__setattr__(self, "detections", detections)

    # ---- convenience accessors ----------------------------------------
    def __len__(self) -> int:
        return len(self.detections)

    @property
    def is_empty(self) -> bool:
        return not self.detections

    # ------------------------------------------------------------------
    @classmethod
    def from_landmarker_result(
        cls,
        result: Any,
        frame_index: int = 0,
        timestamp: Optional[float] = None,
    ) -> "FrameObservation":
        """
        Build an observation from a MediaPipe HandLandmarkerResult.

        Only the attributes are used (``hand_landmarks`` and ``handedness``),
        so any object with the same shape works.
        """
        hands = getattr(result, "hand_landmarks", None) or []
        labels = getattr(result, "handedness", None) or []

        detections = []
        for i, hand in enumerate(hands):
            label, score = Handedness.UNKNOWN, 1.0
            if i < len(labels) and labels[i]:
                category = labels[i][0]
                label = Handedness.parse(category.category_name)
                score = float(category.score)
            points = [(lm.x, lm.y, getattr(lm, "z", 0.0) or 0.0) for lm in hand]
            detections.append(HandDetection(tuple(points), label, score))

        return cls(
            detections=tuple(detections),
            frame_index=frame_index,
            timestamp=time.time() if timestamp is None else timestamp,
        )


@dataclass(frozen=True)
class RoleAssignment:
    """Output of the role resolver for one frame."""
    primary: Optional[HandDetection] = None
    secondary: Optional[HandDetection] = None
    split_artifact: bool = False
    separation: Optional[float] = None


# ---- emitted events ---------------------------------------------------
@dataclass(frozen=True)
class PrimaryHandUpdate:
    kind: ClassVar[GestureEvent] = GestureEvent.PRIMARY_UPDATE

    position: Vector2D
    landmarks: LandmarkList = ()
    frame_index: int = 0


@dataclass(frozen=True)
class SecondaryHandUpdate:
    """
    Secondary hand control signals for one frame.

    scale_factor is 1.0 ("no change") whenever pinch_state is IDLE.
    transition is the pinch state entered on this frame, if any.
    """
    kind: ClassVar[GestureEvent] = GestureEvent.SECONDARY_UPDATE

    position: Vector2D
    pinch_state: PinchState
    scale_factor: float
    rotation_delta: Vector2D
    pinch_distance: float = 0.0
    pinch_delta: float = 0.0
    transition: Optional[PinchState] = None
    release_reason: Optional[ReleaseReason] = None
    landmarks: LandmarkList = ()
    frame_index: int = 0

    @property
    def is_pinching(self) -> bool:
        return self.pinch_state is PinchState.ENGAGED


@dataclass(frozen=True)
class HandsLost:
    kind: ClassVar[GestureEvent] = GestureEvent.HANDS_LOST

    frame_index: int = 0


EngineEvent = Union[PrimaryHandUpdate, SecondaryHandUpdate, HandsLost]


@dataclass(frozen=True)
class EngineStatus:
    """Snapshot of the engine's debounced state, e.g. for status indicators."""
    primary: Presence = Presence.ABSENT
    secondary: Presence = Presence.ABSENT
    pinch_state: PinchState = PinchState.IDLE
    frames_processed: int = 0

    @property
    def primary_live(self) -> bool:
        return self.primary is Presence.LIVE

    @property
    def secondary_live(self) -> bool:
        return self.secondary is Presence.LIVE

