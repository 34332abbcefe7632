"""
Exception taxonomy.

Data-quality problems of the detector (mislabeled hands, split detections,
dropout) are absorbed by the engine and never raised. Only contract
violations at the boundary surface as exceptions.
"""


class GestureEngineError(Exception):
    """Base class for all errors raised by this package."""


class MalformedObservationError(GestureEngineError, ValueError):
    """A detection or frame observation does not satisfy the detector contract."""


class ConfigError(GestureEngineError, ValueError):
    """Invalid or unreadable configuration."""


class ReentrantCallError(GestureEngineError, RuntimeError):
    """GestureEngine.process() was called while another call was in flight."""
