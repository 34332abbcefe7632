"""
HandTracker: encapsulates all MediaPipe logic.
The rest of the application never imports mediapipe directly: it only sees
FrameObservation values.
"""
from __future__ import annotations
import time
from pathlib import Path
from typing import Any, Union

import cv2
import mediapipe as mp
from mediapipe.tasks import python as mp_tasks
from mediapipe.tasks.python import vision

from domain.models import FrameObservation


class HandTracker:
    """
    Runs the MediaPipe HandLandmarker on BGR frames in video mode and returns
    the raw detections (normalized keypoints + unmodified handedness labels).

    Parameters
    ----------
    model_path : Path
        HandLandmarker ``.task`` bundle.
    max_num_hands : int
    min_detection_confidence : float
    min_tracking_confidence : float
    """

    def __init__(
        self,
        model_path: Union[str, Path],
        max_num_hands: int = 2,
        min_detection_confidence: float = 0.6,
        min_tracking_confidence: float = 0.5,
    ) -> None:
        model_path = Path(model_path)
        if not model_path.is_file():
            raise FileNotFoundError(f"HandLandmarker model not found: {model_path}")

        options = vision.HandLandmarkerOptions(
            base_options=mp_tasks.BaseOptions(model_asset_path=str(model_path)),
            running_mode=vision.RunningMode.VIDEO,
            num_hands=max_num_hands,
            min_hand_detection_confidence=min_detection_confidence,
            min_hand_presence_confidence=min_tracking_confidence,
            min_tracking_confidence=min_tracking_confidence,
        )
        self._landmarker = vision.HandLandmarker.create_from_options(options)
        self._frame_index = 0
        self._last_ts_ms = -1

    # ------------------------------------------------------------------
    def process(self, frame: Any) -> FrameObservation:
        """
        Parameters
        ----------
        frame : np.ndarray
            BGR frame from OpenCV (not mirrored).

        Returns
        -------
        FrameObservation
            Zero, one or two detections in detector order.
        """
        rgb = cv2.cvtColor(frame, cv2.COLOR_BGR2RGB)
        image = mp.Image(image_format=mp.ImageFormat.SRGB, data=rgb)

        # video mode requires strictly increasing timestamps
        now = time.time()
        ts_ms = max(int(now * 1000), self._last_ts_ms + 1)
        self._last_ts_ms = ts_ms

        result = self._landmarker.detect_for_video(image, ts_ms)
        self._frame_index += 1
        return FrameObservation.from_landmarker_result(result, self._frame_index, now)

    def release(self) -> None:
        self._landmarker.close()

    def __enter__(self) -> "HandTracker":
        return self

    def __exit__(self, *_) -> None:
        self.release()
