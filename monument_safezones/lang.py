"""
Message catalog for monument_safezones.

Every player-facing string is keyed so the host's lang service can serve
translations. The English templates use positional `{0}`..`{2}` placeholders.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Tuple


@dataclass(frozen=True)
class LangEntry:
    """A localizable message: key, English template and placeholder count."""

    name: str
    english: str
    arg_count: int = 0

    def format(self, template: str, *args: object) -> str:
        """Fill `template` (English or translated) with this entry's arguments."""
        if len(args) != self.arg_count:
            raise ValueError(
                f"{self.name} takes {self.arg_count} argument(s), got {len(args)}"
            )
        return template.format(*args)


GENERAL_SYNTAX = LangEntry(
    "GeneralSyntax",
    "Syntax: {0} {1} offset <x>,<y>,<z> size <x>,<y>,<z> radius <number>",
    2,
)
ERROR_OFFSET_SYNTAX = LangEntry(
    "Error.Offset.Syntax",
    "Invalid value for offset: '{0}'\nSyntax: {1} {2} offset <x>,<y>,<z>\nExample: {1} {2} offset 0,15,0",
    3,
)
ERROR_SIZE_SYNTAX = LangEntry(
    "Error.Size.Syntax",
    "Invalid value for size: '{0}'\nSyntax: {1} {2} size <x>,<y>,<z>\nExample: {1} {2} size 30,30,30",
    3,
)
ERROR_RADIUS_SYNTAX = LangEntry(
    "Error.Radius.Syntax",
    "Invalid value for radius: '{0}'\nSyntax: {1} {2} radius <number>\nExample: {1} {2} radius 50",
    3,
)
ERROR_UNKNOWN_OPTION = LangEntry(
    "Error.UnknownOption",
    "Error: Unrecognized option: '{0}'",
    1,
)
ERROR_SIZE_OR_RADIUS = LangEntry(
    "Error.SizeOrRadius",
    "You cannot specify both size and radius. Use size for a box zone, or radius for a sphere zone.",
)

SHOW_OFFSET = LangEntry("Show.Offset", "Offset: {0}", 1)
SHOW_SIZE = LangEntry("Show.Size", "Size: {0}", 1)
SHOW_RADIUS = LangEntry("Show.Radius", "Radius: {0}", 1)

ALL_LANG_ENTRIES: Tuple[LangEntry, ...] = (
    GENERAL_SYNTAX,
    ERROR_OFFSET_SYNTAX,
    ERROR_SIZE_SYNTAX,
    ERROR_RADIUS_SYNTAX,
    ERROR_UNKNOWN_OPTION,
    ERROR_SIZE_OR_RADIUS,
    SHOW_OFFSET,
    SHOW_SIZE,
    SHOW_RADIUS,
)


def default_messages() -> Dict[str, str]:
    """English messages keyed by name, for registration with the lang service."""
    return {entry.name: entry.english for entry in ALL_LANG_ENTRIES}


__all__ = [
    "LangEntry",
    "ALL_LANG_ENTRIES",
    "default_messages",
    "GENERAL_SYNTAX",
    "ERROR_OFFSET_SYNTAX",
    "ERROR_SIZE_SYNTAX",
    "ERROR_RADIUS_SYNTAX",
    "ERROR_UNKNOWN_OPTION",
    "ERROR_SIZE_OR_RADIUS",
    "SHOW_OFFSET",
    "SHOW_SIZE",
    "SHOW_RADIUS",
]
