from __future__ import annotations
from dataclasses import dataclass, field, fields
from pathlib import Path
from typing import Any, Dict, Union
import json

from domain.config import EngineConfig
from domain.errors import ConfigError


@dataclass
class AppConfig:
    """
    Central configuration for the demo runner.
    Engine tuning lives in the nested EngineConfig.
    """
    # ---- paths ---------------------------------------------------------
    model_path: Path = Path("models/hand_landmarker.task")

    # ---- camera --------------------------------------------------------
    camera_device: int = 0
    fps_limit: int = 30
    frame_width: int = 1280
    frame_height: int = 720

    # ---- detector ------------------------------------------------------
    max_num_hands: int = 2
    min_detection_confidence: float = 0.6
    min_tracking_confidence: float = 0.5

    # ---- display -------------------------------------------------------
    mirror_display: bool = True

    # ---- gesture engine -----------------------------------------------
    engine: EngineConfig = field(default_factory=EngineConfig)

    def __post_init__(self) -> None:
        self.model_path = Path(self.model_path)
        if self.fps_limit <= 0:
            raise ConfigError("fps_limit must be > 0")
        if not 1 <= self.max_num_hands <= 2:
            raise ConfigError("max_num_hands must be 1 or 2")

    # ------------------------------------------------------------------
    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "AppConfig":
        data = dict(data)
        engine = EngineConfig.from_dict(data.pop("engine", {}))

        known = {f.name for f in fields(cls)} - {"engine"}
        unknown = sorted(set(data) - known)
        if unknown:
            raise ConfigError(f"unknown settings: {', '.join(unknown)}")
        try:
            return cls(engine=engine, **data)
        except TypeError as exc:
            raise ConfigError(f"invalid settings: {exc}") from exc


def load_config(path: Union[str, Path]) -> AppConfig:
    """
    Load an AppConfig from a JSON file, e.g.::

        {"camera_device": 1, "engine": {"pinch_engage_threshold": 0.04}}
    """
    path = Path(path)
    try:
        with open(path, "r", encoding="utf-8") as f:
            data = json.load(f)
    except FileNotFoundError as exc:
        raise ConfigError(f"config file not found: {path}") from exc
    except json.JSONDecodeError as exc:
        raise ConfigError(f"error parsing config file {path}: {exc}") from exc

    if not isinstance(data, dict):
        raise ConfigError(f"config file {path} must contain a JSON object")
    return AppConfig.from_dict(data)


# Default singleton: import and use directly, or override in tests.
default_config = AppConfig()
