from core.smoother import MovingAverage
from core.role_resolver import HandRoleResolver
from core.presence import PresenceDebouncer, HandsLostLatch
from core.role_state import RoleState
from core.gesture_engine import GestureEngine

__all__ = [
    "MovingAverage",
    "HandRoleResolver",
    "PresenceDebouncer",
    "HandsLostLatch",
    "RoleState",
    "GestureEngine",
]
