"""
RotationGesture: frame-to-frame displacement of the secondary palm.
"""
from __future__ import annotations
from typing import Optional

from domain.models import ZERO_VECTOR, Vector2D
from gestures.base import Gesture, SecondarySample


class RotationGesture(Gesture):
    """
    Emits ``current - previous`` smoothed palm position.

    The first update after a reset has no previous position and yields a
    zero delta, so (re)acquiring the hand never produces a rotation spike.
    """
    NAME = "ROTATION"

    def __init__(self) -> None:
        self._previous: Optional[Vector2D] = None

    def update(self, sample: SecondarySample) -> Vector2D:
        current = sample.position
        previous, self._previous = self._previous, current
        if previous is None:
            return ZERO_VECTOR
        return (current[0] - previous[0], current[1] - previous[1])

    def reset(self) -> None:
        self._previous = None
