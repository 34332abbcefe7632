"""
HandRoleResolver: decides which detection drives the primary (position)
role and which drives the secondary (pinch / rotation) role.

Two detector failure modes are compensated here:

  - the handedness label is mirrored (the camera shows a mirror image) and
    occasionally both hands get the same label;
  - one hand with spread fingers is sometimes reported as two detections
    sitting almost on top of each other.

Known approximation: the label correction and the spatial fallback can
misclassify unusual poses such as crossed hands. That is an ambiguity of the
detector output, not something this class tries to resolve.

Roles are assigned per frame with no identity tracking: when one of two
hands leaves, the remaining hand becomes primary even if it was the
secondary, and the still-live primary window keeps averaging the departed
hand's positions until they age out.
"""
from __future__ import annotations
import logging
from typing import Tuple

from domain.enums import Handedness
from domain.models import FrameObservation, HandDetection, RoleAssignment
from utils.geometry import dist, palm_center

logger = logging.getLogger(__name__)


class HandRoleResolver:
    """
    Parameters
    ----------
    min_separation : float
        Two detections whose raw palm centers are closer than this are
        treated as a split artifact of a single physical hand.
    """

    def __init__(self, min_separation: float = 0.18) -> None:
        self._min_separation = min_separation

    # ------------------------------------------------------------------
    def resolve(self, observation: FrameObservation) -> RoleAssignment:
        detections = observation.detections

        if not detections:
            return RoleAssignment()

        # A lone hand is almost always used for positioning; never let it
        # drive the zoom gesture.
        if len(detections) == 1:
            return RoleAssignment(primary=detections[0])

        a, b = detections
        separation = dist(palm_center(a.landmarks), palm_center(b.landmarks))
        primary, secondary = self._order(a, b)

        if separation < self._min_separation:
            logger.debug(
                "frame %d: detections %.3f apart, treating as one hand",
                observation.frame_index, separation,
            )
            return RoleAssignment(primary=primary, split_artifact=True, separation=separation)

        return RoleAssignment(primary=primary, secondary=secondary, separation=separation)

    # ------------------------------------------------------------------
    @staticmethod
    def _order(a: HandDetection, b: HandDetection) -> Tuple[HandDetection, HandDetection]:
        """Return (user's left hand, user's right hand)."""
        side_a = a.handedness.mirrored()
        side_b = b.handedness.mirrored()

        if side_a is Handedness.LEFT and side_b is Handedness.RIGHT:
            return a, b
        if side_a is Handedness.RIGHT and side_b is Handedness.LEFT:
            return b, a

        # Same or missing labels: in the mirrored view the user's left hand
        # shows up with the larger x.
        logger.debug("handedness labels %s/%s inconclusive, using x position",
                     a.handedness.value, b.handedness.value)
        if palm_center(a.landmarks)[0] >= palm_center(b.landmarks)[0]:
            return a, b
        return b, a
