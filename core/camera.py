"""
Camera: thin wrapper around OpenCV VideoCapture with FPS limiting.
No detection, no gestures.
"""
from __future__ import annotations
import time
from typing import Optional

import cv2
import numpy as np


class Camera:
    """
    Parameters
    ----------
    device : int
        Camera index (0 = default webcam).
    fps_limit : int
        Maximum frames per second handed to the pipeline.
    width, height : int
        Requested capture resolution; the driver may pick another one.
    """

    def __init__(
        self,
        device: int = 0,
        fps_limit: int = 30,
        width: int = 1280,
        height: int = 720,
    ) -> None:
        self._cap = cv2.VideoCapture(device)
        self._frame_time = 1.0 / fps_limit
        self._prev_time: float = 0.0

        if not self._cap.isOpened():
            self._cap.release()
            raise RuntimeError(f"Cannot open camera device {device}")

        self._cap.set(cv2.CAP_PROP_FRAME_WIDTH, width)
        self._cap.set(cv2.CAP_PROP_FRAME_HEIGHT, height)

    # ------------------------------------------------------------------
    def read(self) -> Optional[np.ndarray]:
        """
        Wait until the next frame is due (FPS limiter), then return it.
        Returns None on read failure.
        """
        wait = self._frame_time - (time.time() - self._prev_time)
        if wait > 0:
            time.sleep(wait)
        self._prev_time = time.time()

        ret, frame = self._cap.read()
        return frame if ret else None

    @property
    def resolution(self) -> tuple:
        return (
            int(self._cap.get(cv2.CAP_PROP_FRAME_WIDTH)),
            int(self._cap.get(cv2.CAP_PROP_FRAME_HEIGHT)),
        )

    def release(self) -> None:
        self._cap.release()

    def __enter__(self) -> "Camera":
        return self

    def __exit__(self, *_) -> None:
        self.release()
