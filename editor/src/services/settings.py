"""
True Size Overlay - Settings

User-tunable gesture and viewport settings, stored as JSON in the user's home
directory. Missing files give defaults; unknown keys are ignored so older and
newer config files stay loadable.
"""

import json
import logging
import os
from dataclasses import asdict, dataclass, fields
from typing import Optional, Tuple

from constants import (
    COMMIT_MODES, CONFIG_DIR_NAME, CONFIG_FILE_NAME, DEFAULT_COMMIT_MODE,
    DEFAULT_MAP_CENTER, DEFAULT_MAP_ZOOM, DEFAULT_UNWRAP_ROTATION,
    EDGE_PAN_INTERVAL_MS, EDGE_PAN_SPEED, EDGE_PAN_THRESHOLD,
    MAX_MAP_ZOOM, MIN_MAP_ZOOM,
)
from utils.logger import loggerRaise

logger = logging.getLogger(__name__)


@dataclass
class Settings:
    edge_pan_threshold: float = EDGE_PAN_THRESHOLD
    edge_pan_speed: float = EDGE_PAN_SPEED
    edge_pan_interval_ms: int = EDGE_PAN_INTERVAL_MS
    commit_mode: str = DEFAULT_COMMIT_MODE
    unwrap_rotation: bool = DEFAULT_UNWRAP_ROTATION
    map_center: Tuple[float, float] = DEFAULT_MAP_CENTER
    map_zoom: int = DEFAULT_MAP_ZOOM

    def validate(self):
        """Raise ValueError if any value is out of range"""
        if self.commit_mode not in COMMIT_MODES:
            raise ValueError(f"Invalid commit_mode '{self.commit_mode}', expected one of {COMMIT_MODES}")
        for name in ('edge_pan_threshold', 'edge_pan_speed', 'edge_pan_interval_ms'):
            if getattr(self, name) <= 0:
                raise ValueError(f"{name} must be positive, got {getattr(self, name)}")
        if len(self.map_center) != 2:
            raise ValueError(f"map_center must be [lng, lat], got {self.map_center}")
        if not MIN_MAP_ZOOM <= self.map_zoom <= MAX_MAP_ZOOM:
            raise ValueError(f"map_zoom must be within {MIN_MAP_ZOOM}..{MAX_MAP_ZOOM}, got {self.map_zoom}")

    @classmethod
    def from_dict(cls, data: dict) -> 'Settings':
        known = {f.name for f in fields(cls)}
        unknown = set(data) - known
        if unknown:
            logger.debug(f"Ignoring unknown settings keys: {sorted(unknown)}")
        values = {k: v for k, v in data.items() if k in known}
        if 'map_center' in values:
            values['map_center'] = tuple(values['map_center'])
        settings = cls(**values)
        settings.validate()
        return settings

    def to_dict(self) -> dict:
        data = asdict(self)
        data['map_center'] = list(self.map_center)
        return data


def default_config_path() -> str:
    return os.path.join(os.path.expanduser('~'), CONFIG_DIR_NAME, CONFIG_FILE_NAME)


def load_settings(path: Optional[str] = None) -> Settings:
    """Load settings from a JSON config file.

    Returns defaults if the file does not exist. Unreadable or malformed files
    go through loggerRaise; out-of-range values raise ValueError.
    """
    path = path or default_config_path()
    if not os.path.exists(path):
        logger.debug(f"No config at {path}, using defaults")
        return Settings()

    try:
        with open(path, 'r', encoding='utf-8') as f:
            data = json.load(f)
    except (OSError, json.JSONDecodeError) as e:
        loggerRaise(e, f"Error loading settings from {path}")

    if not isinstance(data, dict):
        raise ValueError(f"Config file {path} must contain a JSON object")
    settings = Settings.from_dict(data)
    logger.info(f"Loaded settings from {path}")
    return settings


def save_settings(settings: Settings, path: Optional[str] = None) -> str:
    """Write settings as JSON, creating the config directory if needed.

    Returns:
        The path written
    """
    settings.validate()
    path = path or default_config_path()
    try:
        directory = os.path.dirname(path)
        if directory:
            os.makedirs(directory, exist_ok=True)
        with open(path, 'w', encoding='utf-8') as f:
            json.dump(settings.to_dict(), f, indent=2)
    except OSError as e:
        loggerRaise(e, f"Error saving settings to {path}")
    logger.info(f"Saved settings to {path}")
    return path
