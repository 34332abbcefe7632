"""
Geometry helpers and landmark indices
"""

from .constants import *
from .geometry import dist, dist_sq, palm_center, is_finger_curled

__all__ = [
    'dist',
    'dist_sq',
    'palm_center',
    'is_finger_curled',
    'NUM_LANDMARKS',
    'WRIST',
    'THUMB_TIP',
    'INDEX_TIP',
    'PALM_INDICES',
    'CURL_FINGERS',
]
