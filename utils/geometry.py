"""
Pure geometric utility functions.
No imports from the rest of the project except landmark indices.
"""
from __future__ import annotations
import math
from typing import Sequence, Tuple

import numpy as np

from utils.constants import PALM_INDICES, WRIST

Point2D = Tuple[float, float]


def dist(a: Sequence[float], b: Sequence[float]) -> float:
    """Euclidean distance between two 2D points (z is ignored)."""
    return math.hypot(a[0] - b[0], a[1] - b[1])


def dist_sq(a: Sequence[float], b: Sequence[float]) -> float:
    """Squared 2D distance, for comparisons that don't need the root."""
    dx = a[0] - b[0]
    dy = a[1] - b[1]
    return dx * dx + dy * dy


def palm_center(landmarks: Sequence[Sequence[float]]) -> Point2D:
    """
    Unweighted centroid of the wrist and the four MCP joints.

    Unlike the full-hand centroid this does not move when the fingers curl
    or spread, so it is a good proxy for the hand's gross position.
    """
    palm = np.asarray([landmarks[i][:2] for i in PALM_INDICES], dtype=float)
    cx, cy = palm.mean(axis=0)
    return (float(cx), float(cy))


def is_finger_curled(
    landmarks: Sequence[Sequence[float]],
    tip: int,
    pip: int,
) -> bool:
    """A finger is curled when its tip is closer to the wrist than its PIP joint."""
    wrist = landmarks[WRIST]
    return dist_sq(landmarks[tip], wrist) < dist_sq(landmarks[pip], wrist)
