"""
Presence debouncing.

Detector false negatives (a hand silently missing for a few frames) are far
more common than false positives, so acquiring a role is immediate while
losing it requires a run of consecutive misses.
"""
from __future__ import annotations
import logging
from typing import Iterable

from domain.enums import Presence

logger = logging.getLogger(__name__)


class PresenceDebouncer:
    """
    Hysteresis over consecutive missed frames for one role.

    Parameters
    ----------
    loss_threshold : int
        The role is declared absent once the miss counter exceeds this value.
    name : str
        Used in log messages only.
    """

    def __init__(self, loss_threshold: int = 5, name: str = "role") -> None:
        self._threshold = loss_threshold
        self._name = name
        self._misses = 0
        self._presence = Presence.ABSENT

    # ------------------------------------------------------------------
    def mark_seen(self) -> bool:
        """Record an assigned frame. Returns True on the absent → live edge."""
        self._misses = 0
        if self._presence is Presence.ABSENT:
            self._presence = Presence.LIVE
            logger.debug("%s acquired", self._name)
            return True
        return False

    def mark_missed(self) -> bool:
        """Record a frame without the role. Returns True on the live → absent edge."""
        if self._presence is Presence.ABSENT:
            return False
        self._misses += 1
        if self._misses > self._threshold:
            self._presence = Presence.ABSENT
            self._misses = 0
            logger.debug("%s lost after %d missed frames", self._name, self._threshold + 1)
            return True
        return False

    # ------------------------------------------------------------------
    @property
    def presence(self) -> Presence:
        return self._presence

    @property
    def is_live(self) -> bool:
        return self._presence is Presence.LIVE

    @property
    def misses(self) -> int:
        return self._misses

    def reset(self) -> None:
        self._misses = 0
        self._presence = Presence.ABSENT


class HandsLostLatch:
    """
    Fires once when every role has become absent, then stays quiet until at
    least one role has been live again.
    """

    def __init__(self) -> None:
        self._armed = False

    def update(self, presences: Iterable[Presence]) -> bool:
        if any(p is Presence.LIVE for p in presences):
            self._armed = True
            return False
        if self._armed:
            self._armed = False
            return True
        return False

    def reset(self) -> None:
        self._armed = False
