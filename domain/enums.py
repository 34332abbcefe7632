from enum import Enum


class Handedness(str, Enum):
    """Handedness labels as reported by the landmark detector."""
    LEFT    = "Left"
    RIGHT   = "Right"
    UNKNOWN = "Unknown"

    @classmethod
    def parse(cls, label: object) -> "Handedness":
        if isinstance(label, cls):
            return label
        try:
            return cls(str(label).strip().capitalize())
        except ValueError:
            return cls.UNKNOWN

    def mirrored(self) -> "Handedness":
        """The detector sees a mirrored view: its "Right" is the user's left."""
        if self is Handedness.LEFT:
            return Handedness.RIGHT
        if self is Handedness.RIGHT:
            return Handedness.LEFT
        return Handedness.UNKNOWN


class HandRole(str, Enum):
    """Role a detected hand plays for the current frame."""
    PRIMARY   = "PRIMARY"     # position
    SECONDARY = "SECONDARY"   # pinch-zoom + rotation


class Presence(str, Enum):
    """Debounced presence of a role."""
    ABSENT = "ABSENT"
    LIVE   = "LIVE"


class PinchState(str, Enum):
    IDLE    = "IDLE"
    ENGAGED = "ENGAGED"


class ReleaseReason(str, Enum):
    """Why an engaged pinch went back to idle."""
    DISTANCE = "DISTANCE"   # opened past the release threshold
    CLUTCH   = "CLUTCH"     # fast opening velocity
    GATE     = "GATE"       # middle/ring/pinky uncurled
    RESET    = "RESET"      # role lost or session reset


class GestureEvent(str, Enum):
    """Events emitted by the gesture engine."""
    PRIMARY_UPDATE   = "PRIMARY_UPDATE"
    SECONDARY_UPDATE = "SECONDARY_UPDATE"
    HANDS_LOST       = "HANDS_LOST"
