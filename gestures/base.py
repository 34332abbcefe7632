"""
Abstract base class for the secondary-hand gestures.

Every gesture must:
  - implement update(sample) → its per-frame reading
  - implement reset()
  - declare its NAME class attribute

Gestures only see smoothed signals; smoothing, role resolution and
presence tracking happen before them in GestureEngine.
"""
from __future__ import annotations
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any

from domain.models import Vector2D


@dataclass(frozen=True)
class SecondarySample:
    """
    Smoothed secondary-hand signals for one frame.
    Passed to every gesture instead of individual arguments.
    """
    position: Vector2D
    pinch_distance: float
    pinch_velocity: float      # current minus previous smoothed distance
    gate_holds: bool           # middle, ring and pinky curled
    frame_index: int = 0


class Gesture(ABC):
    """Base class for all gesture interpreters."""

    # Override in subclasses for logging
    NAME: str = "UNNAMED_GESTURE"

    @abstractmethod
    def update(self, sample: SecondarySample) -> Any:
        """
        Advance the gesture by one frame.

        Parameters
        ----------
        sample : SecondarySample
            Smoothed signals of the secondary hand for this frame.
        """

    @abstractmethod
    def reset(self) -> None:
        """
        Reset all internal state.
        Called by GestureEngine when the secondary role is (re)acquired or lost.
        """

    def __repr__(self) -> str:
        return f"<{self.__class__.__name__} name={self.NAME!r}>"
