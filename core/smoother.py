"""
MovingAverage: fixed-capacity FIFO window whose value is the mean of the
samples it holds. Used to damp per-frame detector jitter on palm positions
and pinch distances.
"""
from __future__ import annotations
from collections import deque
from typing import Optional, Sequence, Tuple, Union

import numpy as np

Sample = Union[float, Tuple[float, ...]]


class MovingAverage:
    """
    Rolling mean over the last ``capacity`` samples.

    Samples may be scalars or fixed-length vectors; ``push`` returns a value
    of the same shape. Once full, every push evicts the oldest sample.

    Parameters
    ----------
    capacity : int
        Maximum number of samples kept in the window.
    """

    def __init__(self, capacity: int) -> None:
        if capacity < 1:
            raise ValueError("capacity must be >= 1")
        self._capacity = capacity
        self._window: deque = deque(maxlen=capacity)
        self._value: Optional[Sample] = None

    # ------------------------------------------------------------------
    def push(self, sample: Sample) -> Sample:
        """Append a sample and return the new mean."""
        self._window.append(sample)
        self._value = self._mean()
        return self._value

    def _mean(self) -> Sample:
        data = np.asarray(self._window, dtype=float)
        mean = data.mean(axis=0)
        if data.ndim == 1:
            return float(mean)
        return tuple(float(v) for v in mean)

    @property
    def value(self) -> Optional[Sample]:
        """Current mean, or None while the window is empty."""
        return self._value

    @property
    def capacity(self) -> int:
        return self._capacity

    def __len__(self) -> int:
        return len(self._window)

    def samples(self) -> Sequence[Sample]:
        return tuple(self._window)

    def reset(self) -> None:
        self._window.clear()
        self._value = None
