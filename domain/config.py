from __future__ import annotations
from dataclasses import asdict, dataclass, fields
from typing import Any, Dict, Mapping

from domain.errors import ConfigError


@dataclass(frozen=True)
class EngineConfig:
    """
    Tuning of the gesture engine.

    Distances are in normalized image units, velocities in units per frame.
    Every value is a calibration default and may need adjusting per camera
    and resolution.
    """
    # ---- smoothing windows (samples) ----------------------------------
    position_window: int = 4
    pinch_window: int = 3

    # ---- presence ------------------------------------------------------
    loss_debounce_frames: int = 5

    # ---- role resolution ----------------------------------------------
    min_hand_separation: float = 0.18

    # ---- pinch-zoom ----------------------------------------------------
    pinch_engage_threshold: float = 0.05
    pinch_release_threshold: float = 0.08
    clutch_velocity: float = 0.02
    min_zoom_reference: float = 1e-4

    def __post_init__(self) -> None:
        for name in ("position_window", "pinch_window", "loss_debounce_frames"):
            value = getattr(self, name)
            if isinstance(value, bool) or not isinstance(value, int):
                raise ConfigError(f"{name} must be an integer (got {value!r})")
        if self.position_window < 1 or self.pinch_window < 1:
            raise ConfigError("smoothing windows must hold at least one sample")
        if self.loss_debounce_frames < 0:
            raise ConfigError("loss_debounce_frames must be >= 0")
        if self.min_hand_separation < 0:
            raise ConfigError("min_hand_separation must be >= 0")
        if not 0 < self.pinch_engage_threshold < self.pinch_release_threshold:
            raise ConfigError(
                "pinch thresholds need 0 < engage < release "
                f"(got {self.pinch_engage_threshold} / {self.pinch_release_threshold})"
            )
        if self.clutch_velocity <= 0:
            raise ConfigError("clutch_velocity must be > 0")
        if self.min_zoom_reference <= 0:
            raise ConfigError("min_zoom_reference must be > 0")

    # ------------------------------------------------------------------
    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "EngineConfig":
        if not isinstance(data, Mapping):
            raise ConfigError(f"engine settings must be an object (got {type(data).__name__})")
        known = {f.name for f in fields(cls)}
        unknown = sorted(set(data) - known)
        if unknown:
            raise ConfigError(f"unknown engine settings: {', '.join(unknown)}")
        try:
            return cls(**dict(data))
        except TypeError as exc:
            raise ConfigError(f"invalid engine settings: {exc}") from exc

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)
