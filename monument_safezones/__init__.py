"""
monument_safezones - safe zone addon for the Monument Addons host plugin

Adds a placeable `safezone` addon type: a sphere or box trigger volume that
the host spawns, edits, displays and kills at monuments.

Quick Start:
    from monument_safezones import SafeZonesAddon

    addon = SafeZonesAddon(host=monument_addons, lang_service=lang)
    addon.load_default_messages()
    addon.on_server_initialized()

Arguments accepted by `maspawn safezone` and `maedit safezone`:
    offset <x>,<y>,<z>   position relative to the addon origin
    size <x>,<y>,<z>     box zone
    radius <number>      sphere zone (default 10)
"""

from .addon import SafeZonesAddon
from .arguments import ParsedArgs, parse_args, parse_float, parse_vector3
from .config import SafeZoneConfig, load_config
from .ddraw import Ddraw, draw_zone
from .exceptions import (
    ArgumentError,
    ConfigError,
    ErrorSeverity,
    MissingHostError,
    OffsetSyntaxError,
    RadiusSyntaxError,
    RegistrationError,
    SafeZoneError,
    SizeOrRadiusConflictError,
    SizeSyntaxError,
    UnknownOptionError,
    UsageError,
)
from .log import LogLevel, configure_logging, get_logger
from .scene import BoxCollider, Layer, LayerMask, Node, SphereCollider, TriggerSettings
from .trigger import SafeZoneComponent
from .types import BoxShape, Color, Quaternion, SphereShape, Vector3, ZoneShape
from .zone import apply_update, create_zone, edit_zone

__version__ = "0.1.0"

__all__ = [
    "SafeZonesAddon",
    "ParsedArgs",
    "parse_args",
    "parse_float",
    "parse_vector3",
    "SafeZoneConfig",
    "load_config",
    "Ddraw",
    "draw_zone",
    "ArgumentError",
    "ConfigError",
    "ErrorSeverity",
    "MissingHostError",
    "OffsetSyntaxError",
    "RadiusSyntaxError",
    "RegistrationError",
    "SafeZoneError",
    "SizeOrRadiusConflictError",
    "SizeSyntaxError",
    "UnknownOptionError",
    "UsageError",
    "LogLevel",
    "configure_logging",
    "get_logger",
    "BoxCollider",
    "Layer",
    "LayerMask",
    "Node",
    "SphereCollider",
    "TriggerSettings",
    "SafeZoneComponent",
    "BoxShape",
    "Color",
    "Quaternion",
    "SphereShape",
    "Vector3",
    "ZoneShape",
    "apply_update",
    "create_zone",
    "edit_zone",
]
