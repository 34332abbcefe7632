"""
Secondary-hand gesture interpreters
"""

from .base import Gesture, SecondarySample
from .pinch_zoom import PinchZoomGesture, PinchReading, strict_pinch_gate
from .rotation import RotationGesture

__all__ = [
    'Gesture',
    'SecondarySample',
    'PinchZoomGesture',
    'PinchReading',
    'strict_pinch_gate',
    'RotationGesture',
]
