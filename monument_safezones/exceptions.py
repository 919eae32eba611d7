"""
Exception hierarchy for monument_safezones.

All exceptions inherit from SafeZoneError. Argument errors carry the lang
entry used to explain them to the invoking player; the addon callbacks catch
them and reply, so none of them ever reaches the host plugin.

Example:
    from monument_safezones.arguments import parse_args
    from monument_safezones.exceptions import ArgumentError

    try:
        parsed = parse_args(["radius", "ten"], "maspawn")
    except ArgumentError as e:
        player.reply(e.lang_entry.format(e.lang_entry.english, *e.lang_args))
"""
from __future__ import annotations

from enum import Enum, auto
from typing import Any, Dict, Optional, Tuple

from . import lang
from .lang import LangEntry


class ErrorSeverity(Enum):
    """Severity level of an error."""
    WARNING = auto()      # Player input rejected, nothing changed
    ERROR = auto()        # Feature degraded, e.g. host unavailable
    CRITICAL = auto()     # Addon cannot operate


class SafeZoneError(Exception):
    """
    Base exception for all monument_safezones errors.

    Attributes:
        message: Human-readable error description
        severity: Error severity level
        details: Optional dictionary with additional context
        recoverable: Whether the error can be recovered from
    """

    def __init__(
        self,
        message: str,
        severity: ErrorSeverity = ErrorSeverity.ERROR,
        details: Optional[Dict[str, Any]] = None,
        recoverable: bool = True,
    ):
        super().__init__(message)
        self.message = message
        self.severity = severity
        self.details = details or {}
        self.recoverable = recoverable

    def __str__(self) -> str:
        base = f"[{self.severity.name}] {self.message}"
        if self.details:
            detail_str = ", ".join(f"{k}={v}" for k, v in self.details.items())
            base += f" ({detail_str})"
        return base


# Argument Errors

class ArgumentError(SafeZoneError):
    """Raised when command arguments are rejected. Reported to the player."""

    def __init__(
        self,
        message: str,
        lang_entry: LangEntry,
        lang_args: Tuple[Any, ...] = (),
        **kwargs
    ):
        kwargs.setdefault("severity", ErrorSeverity.WARNING)
        super().__init__(message, **kwargs)
        self.lang_entry = lang_entry
        self.lang_args = tuple(lang_args)


class ValueSyntaxError(ArgumentError):
    """Raised when an option value does not parse."""

    lang_entry_for_option: LangEntry = lang.GENERAL_SYNTAX
    option: str = ""

    def __init__(self, raw_value: str, command: str, addon_name: str, **kwargs):
        details = kwargs.pop("details", {})
        details["option"] = self.option
        details["value"] = raw_value
        super().__init__(
            f"Invalid value for {self.option}: '{raw_value}'",
            self.lang_entry_for_option,
            (raw_value, command, addon_name),
            details=details,
            **kwargs
        )
        self.raw_value = raw_value
        self.command = command
        self.addon_name = addon_name


class OffsetSyntaxError(ValueSyntaxError):
    """Raised when an offset is not three comma-separated numbers."""

    lang_entry_for_option = lang.ERROR_OFFSET_SYNTAX
    option = "offset"


class SizeSyntaxError(ValueSyntaxError):
    """Raised when a size is not three comma-separated numbers."""

    lang_entry_for_option = lang.ERROR_SIZE_SYNTAX
    option = "size"


class RadiusSyntaxError(ValueSyntaxError):
    """Raised when a radius is not a number."""

    lang_entry_for_option = lang.ERROR_RADIUS_SYNTAX
    option = "radius"


class UsageError(ArgumentError):
    """Raised when too few arguments were supplied."""

    def __init__(self, command: str, addon_name: str, **kwargs):
        super().__init__(
            f"Not enough arguments for {command} {addon_name}",
            lang.GENERAL_SYNTAX,
            (command, addon_name),
            **kwargs
        )
        self.command = command
        self.addon_name = addon_name


class UnknownOptionError(ArgumentError):
    """Raised when an option name is not recognized."""

    def __init__(self, option: str, **kwargs):
        details = kwargs.pop("details", {})
        details["option"] = option
        super().__init__(
            f"Unrecognized option: '{option}'",
            lang.ERROR_UNKNOWN_OPTION,
            (option,),
            details=details,
            **kwargs
        )
        self.option = option


class SizeOrRadiusConflictError(ArgumentError):
    """Raised when both size and radius were supplied."""

    def __init__(self, message: str = "Cannot specify both size and radius", **kwargs):
        super().__init__(message, lang.ERROR_SIZE_OR_RADIUS, (), **kwargs)


# Host Errors

class HostError(SafeZoneError):
    """Base class for problems talking to the host plugin."""

    def __init__(self, message: str, host_name: Optional[str] = None, **kwargs):
        details = kwargs.pop("details", {})
        if host_name:
            details["host"] = host_name
        super().__init__(message, details=details, **kwargs)
        self.host_name = host_name


class MissingHostError(HostError):
    """Raised when the host plugin is not loaded."""

    def __init__(self, host_name: str = "MonumentAddons", **kwargs):
        super().__init__(
            f"{host_name} is not loaded, get it at https://umod.org",
            host_name=host_name,
            **kwargs
        )


class RegistrationError(HostError):
    """Raised when the host plugin rejects the addon registration."""

    def __init__(
        self,
        message: str = "Error registering addon with Monument Addons.",
        addon_name: Optional[str] = None,
        **kwargs
    ):
        details = kwargs.pop("details", {})
        if addon_name:
            details["addon"] = addon_name
        super().__init__(message, details=details, **kwargs)
        self.addon_name = addon_name


# Configuration Errors

class ConfigError(SafeZoneError):
    """Raised when a configuration file is invalid."""

    def __init__(self, message: str, path: Optional[str] = None, **kwargs):
        details = kwargs.pop("details", {})
        if path:
            details["path"] = path
        super().__init__(message, severity=ErrorSeverity.CRITICAL, details=details,
                         recoverable=False, **kwargs)
        self.path = path


# Exports

__all__ = [
    "ErrorSeverity",
    "SafeZoneError",
    "ArgumentError",
    "ValueSyntaxError",
    "OffsetSyntaxError",
    "SizeSyntaxError",
    "RadiusSyntaxError",
    "UsageError",
    "UnknownOptionError",
    "SizeOrRadiusConflictError",
    "HostError",
    "MissingHostError",
    "RegistrationError",
    "ConfigError",
]
