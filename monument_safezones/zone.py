"""
Zone state merging.

Applies a parsed partial update to an existing (or blank) ZoneShape. Setting
a size selects a box and setting a radius selects a sphere, so the two can
never both be active.
"""

from __future__ import annotations

from typing import Optional

from .arguments import ParsedArgs
from .constants import DEFAULT_RADIUS
from .types import ZoneShape


def apply_update(existing: Optional[ZoneShape], update: ParsedArgs) -> ZoneShape:
    """Merge `update` onto `existing`. Pure; returns a new shape."""
    shape = existing if existing is not None else ZoneShape()

    if update.offset is not None:
        shape = shape.with_offset(update.offset)

    if update.size is not None:
        shape = shape.with_size(update.size)

    if update.radius is not None:
        shape = shape.with_radius(update.radius)

    return shape


def create_zone(update: ParsedArgs, default_radius: float = DEFAULT_RADIUS) -> ZoneShape:
    """
    Build a new zone from `update`.

    A zone created without usable geometry gets `default_radius`. This only
    happens at creation; edits never inject the default.
    """
    shape = apply_update(None, update)
    if not shape.is_box and shape.radius <= 0:
        shape = shape.with_radius(default_radius)
    return shape


def edit_zone(existing: Optional[ZoneShape], update: ParsedArgs) -> ZoneShape:
    """Apply an edit to a placed zone."""
    return apply_update(existing, update)
