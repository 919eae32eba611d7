"""
Configuration for monument_safezones.

Settings live in an optional JSON file; every key has a default so a missing
file is the same as an empty one.
"""

from __future__ import annotations

import json
import os
from dataclasses import dataclass, field, fields
from typing import Any, Dict, Optional

from .constants import (
    ANCHOR_MARKER_RADIUS,
    BOX_CORNER_RADIUS,
    DEFAULT_RADIUS,
    HOST_PLUGIN_NAME,
)
from .exceptions import ConfigError
from .log import LogComponent, LogLevel, get_logger
from .types import GREEN, Color

logger = get_logger(LogComponent.CONFIG)


@dataclass
class SafeZoneConfig:
    """
    Addon settings.

    Attributes:
        default_radius: Radius given to zones created without size or radius.
        draw_color: Color of debug drawings.
        marker_radius: Radius of the anchor marker sphere.
        corner_radius: Radius of the box corner spheres.
        host_plugin_name: Name of the host plugin to register with.
        log_level: Level for the package logger.
        log_file: Optional file that also receives log records.
    """

    default_radius: float = DEFAULT_RADIUS
    draw_color: Color = field(default_factory=lambda: GREEN)
    marker_radius: float = ANCHOR_MARKER_RADIUS
    corner_radius: float = BOX_CORNER_RADIUS
    host_plugin_name: str = HOST_PLUGIN_NAME
    log_level: str = "INFO"
    log_file: Optional[str] = None

    def __post_init__(self) -> None:
        if self.default_radius <= 0:
            raise ConfigError(f"default_radius must be positive, got {self.default_radius}")
        if self.marker_radius <= 0 or self.corner_radius <= 0:
            raise ConfigError("marker_radius and corner_radius must be positive")
        try:
            LogLevel.from_string(self.log_level)
        except (KeyError, AttributeError):
            raise ConfigError(f"Unknown log_level '{self.log_level}'")
        if self.log_file is not None and not isinstance(self.log_file, str):
            raise ConfigError("log_file must be a path string")

    @classmethod
    def from_dict(cls, data: Dict[str, Any], path: Optional[str] = None) -> "SafeZoneConfig":
        """Build from a decoded JSON object. Unknown keys are an error."""
        known = {f.name for f in fields(cls)}
        unknown = sorted(set(data) - known)
        if unknown:
            raise ConfigError(f"Unknown config keys: {', '.join(unknown)}", path=path)

        values = dict(data)
        if "draw_color" in values:
            color = values["draw_color"]
            if not isinstance(color, (list, tuple)) or len(color) not in (3, 4):
                raise ConfigError("draw_color must be [r, g, b] or [r, g, b, a]", path=path)
            values["draw_color"] = Color(*(float(c) for c in color))
        for key in ("default_radius", "marker_radius", "corner_radius"):
            if key in values:
                try:
                    values[key] = float(values[key])
                except (TypeError, ValueError):
                    raise ConfigError(f"{key} must be a number", path=path)
        return cls(**values)

    def to_dict(self) -> Dict[str, Any]:
        c = self.draw_color
        return {
            "default_radius": self.default_radius,
            "draw_color": [c.r, c.g, c.b, c.a],
            "marker_radius": self.marker_radius,
            "corner_radius": self.corner_radius,
            "host_plugin_name": self.host_plugin_name,
            "log_level": self.log_level,
            "log_file": self.log_file,
        }


def load_config(path: Optional[str]) -> SafeZoneConfig:
    """
    Load settings from a JSON file.

    Returns defaults when `path` is None or does not exist.

    Raises:
        ConfigError: if the file is not valid JSON or holds invalid settings.
    """
    if path is None or not os.path.exists(path):
        if path is not None:
            logger.info(f"No config at {path}, using defaults")
        return SafeZoneConfig()

    try:
        with open(path, "r", encoding="utf-8") as f:
            data = json.load(f)
    except json.JSONDecodeError as e:
        raise ConfigError(f"Invalid JSON: {e}", path=path) from e

    if not isinstance(data, dict):
        raise ConfigError("Config must be a JSON object", path=path)

    config = SafeZoneConfig.from_dict(data, path=path)
    logger.debug(f"Loaded config from {path}")
    return config
