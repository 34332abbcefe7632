"""
RoleState: everything the engine remembers about one role between frames.
"""
from __future__ import annotations
from typing import Optional

from core.presence import PresenceDebouncer
from core.smoother import MovingAverage
from domain.enums import HandRole, Presence
from domain.models import Vector2D


class RoleState:
    """
    Smoothed palm position, previous smoothed position and debounced presence
    of a single role.

    Parameters
    ----------
    role : HandRole
    window : int
        Capacity of the position smoothing window.
    loss_threshold : int
        Consecutive missed frames tolerated before the role is absent.
    """

    def __init__(self, role: HandRole, window: int = 4, loss_threshold: int = 5) -> None:
        self.role = role
        self._positions = MovingAverage(window)
        self._presence = PresenceDebouncer(loss_threshold, name=role.value.lower())
        self.position: Optional[Vector2D] = None
        self.previous_position: Optional[Vector2D] = None

    # ------------------------------------------------------------------
    def observe(self, raw_position: Vector2D) -> bool:
        """
        Feed the raw palm center of this frame's assigned detection.

        Returns True when the role was just (re)acquired. On acquisition the
        window is cleared first so a stale position is never blended with the
        new one, and there is no previous position.
        """
        acquired = self._presence.mark_seen()
        if acquired:
            self._positions.reset()
            self.position = None
        self.previous_position = self.position
        self.position = self._positions.push(raw_position)
        return acquired

    def miss(self) -> bool:
        """Record a frame without this role. Returns True when it was just lost."""
        return self._presence.mark_missed()

    # ------------------------------------------------------------------
    @property
    def presence(self) -> Presence:
        return self._presence.presence

    @property
    def is_live(self) -> bool:
        return self._presence.is_live

    def reset(self) -> None:
        self._positions.reset()
        self._presence.reset()
        self.position = None
        self.previous_position = None

    def __repr__(self) -> str:
        return f"<RoleState role={self.role.value} presence={self.presence.value} position={self.position}>"
