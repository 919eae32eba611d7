"""
Command argument parsing for the safezone addon.

Arguments arrive as alternating `option value` tokens, e.g.
`offset 0,5,0 radius 10`. Parsing produces a partial update holding only
the options that were supplied.
"""

from __future__ import annotations

import math
import re
from dataclasses import dataclass
from typing import Optional, Sequence

from .constants import ADDON_NAME
from .exceptions import (
    OffsetSyntaxError,
    RadiusSyntaxError,
    SizeOrRadiusConflictError,
    SizeSyntaxError,
    UnknownOptionError,
)
from .log import LogComponent, get_logger
from .types import Vector3

logger = get_logger(LogComponent.ARGUMENTS)

# Plain decimal text: optional sign, digits with an optional fraction, optional
# exponent. No digit separators, no hex, no spelled-out nan/infinity.
_DECIMAL = re.compile(r"\s*[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?\s*", re.ASCII)


@dataclass
class ParsedArgs:
    """Partial zone update. None means the option was not given."""

    offset: Optional[Vector3] = None
    size: Optional[Vector3] = None
    radius: Optional[float] = None


def parse_float(text: str) -> Optional[float]:
    """Parse a finite decimal number, or return None."""
    if not isinstance(text, str) or not _DECIMAL.fullmatch(text):
        return None
    try:
        value = float(text)
    except ValueError:
        return None
    if not math.isfinite(value):
        return None
    return value


def parse_vector3(text: str) -> Optional[Vector3]:
    """Parse `x,y,z`, or return None if it is not exactly three numbers."""
    parts = text.split(",")
    if len(parts) != 3:
        return None
    components = [parse_float(part) for part in parts]
    if any(c is None for c in components):
        return None
    return Vector3(*components)


def parse_args(
    args: Sequence[str], command: str, addon_name: str = ADDON_NAME
) -> ParsedArgs:
    """
    Parse `option value` pairs into a partial update.

    A trailing token without a value is ignored. Later occurrences of an
    option override earlier ones.

    Args:
        args: Raw tokens following `<command> <addon_name>`.
        command: Command name, used in syntax error messages.
        addon_name: Addon name, used in syntax error messages.

    Returns:
        ParsedArgs with the supplied options set.

    Raises:
        OffsetSyntaxError, SizeSyntaxError, RadiusSyntaxError: bad value.
        UnknownOptionError: unrecognized option name.
        SizeOrRadiusConflictError: both size and radius given.
    """
    parsed = ParsedArgs()

    for i in range(0, len(args) - 1, 2):
        name, value = args[i], args[i + 1]
        option = name.lower()

        if option == "offset":
            offset = parse_vector3(value)
            if offset is None:
                raise OffsetSyntaxError(value, command, addon_name)
            parsed.offset = offset
        elif option == "size":
            size = parse_vector3(value)
            if size is None:
                raise SizeSyntaxError(value, command, addon_name)
            parsed.size = size
        elif option == "radius":
            radius = parse_float(value)
            if radius is None:
                raise RadiusSyntaxError(value, command, addon_name)
            parsed.radius = radius
        else:
            raise UnknownOptionError(name)

    if len(args) % 2 == 1:
        logger.debug(f"Ignoring trailing argument '{args[-1]}'")

    if parsed.size is not None and parsed.radius is not None:
        raise SizeOrRadiusConflictError()

    return parsed
