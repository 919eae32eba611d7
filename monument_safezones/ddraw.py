"""
Debug drawing through client `ddraw.*` console commands.

Draw calls are visual hints only; they return nothing and touch no state.
"""

from __future__ import annotations

from typing import Optional

from .constants import ANCHOR_MARKER_RADIUS, BOX_CORNER_RADIUS
from .log import LogComponent, get_logger
from .protocols import PlayerProtocol
from .scene import Node
from .types import GREEN, WHITE, Color, Quaternion, Vector3, ZoneShape

logger = get_logger(LogComponent.DDRAW)


class Ddraw:
    """Draws for one player with a default duration and color."""

    def __init__(
        self,
        player: PlayerProtocol,
        duration: float,
        color: Optional[Color] = None,
        corner_radius: float = BOX_CORNER_RADIUS,
    ) -> None:
        self._player = player
        self._duration = duration
        self._color = color or WHITE
        self._corner_radius = corner_radius

    def sphere(self, origin: Vector3, radius: float) -> None:
        self._player.send_console_command(
            "ddraw.sphere", self._duration, self._color, origin, radius
        )

    def line(self, origin: Vector3, target: Vector3) -> None:
        self._player.send_console_command(
            "ddraw.line", self._duration, self._color, origin, target
        )

    def arrow(self, origin: Vector3, target: Vector3, head_size: float) -> None:
        self._player.send_console_command(
            "ddraw.arrow", self._duration, self._color, origin, target, head_size
        )

    def text(self, origin: Vector3, text: str) -> None:
        self._player.send_console_command(
            "ddraw.text", self._duration, self._color, origin, text
        )

    def box(self, center: Vector3, rotation: Quaternion, extents: Vector3) -> None:
        """Oriented box outline: a sphere on every corner and all 12 edges."""
        flipped_x = extents.with_x(-extents.x)
        flipped_y = extents.with_y(-extents.y)
        flipped_xy = flipped_x.with_y(-extents.y)

        forward_upper_left = center + rotation * flipped_x
        forward_upper_right = center + rotation * extents
        forward_lower_left = center + rotation * flipped_xy
        forward_lower_right = center + rotation * flipped_y

        back_lower_right = center + rotation * -flipped_x
        back_lower_left = center + rotation * -extents
        back_upper_right = center + rotation * -flipped_xy
        back_upper_left = center + rotation * -flipped_y

        for corner in (
            forward_upper_left,
            forward_upper_right,
            forward_lower_left,
            forward_lower_right,
            back_lower_right,
            back_lower_left,
            back_upper_right,
            back_upper_left,
        ):
            self.sphere(corner, self._corner_radius)

        self.line(forward_upper_left, forward_upper_right)
        self.line(forward_lower_left, forward_lower_right)
        self.line(forward_upper_left, forward_lower_left)
        self.line(forward_upper_right, forward_lower_right)

        self.line(back_upper_left, back_upper_right)
        self.line(back_lower_left, back_lower_right)
        self.line(back_upper_left, back_lower_left)
        self.line(back_upper_right, back_lower_right)

        self.line(forward_upper_left, back_upper_left)
        self.line(forward_lower_left, back_lower_left)
        self.line(forward_upper_right, back_upper_right)
        self.line(forward_lower_right, back_lower_right)


def draw_zone(
    player: PlayerProtocol,
    transform: Node,
    shape: ZoneShape,
    duration: float,
    color: Color = GREEN,
    marker_radius: float = ANCHOR_MARKER_RADIUS,
    corner_radius: float = BOX_CORNER_RADIUS,
) -> None:
    """Draw the anchor marker and the zone volume at its world offset."""
    drawer = Ddraw(player, duration, color, corner_radius=corner_radius)
    center = transform.transform_point(shape.offset)

    drawer.sphere(transform.position, marker_radius)

    if shape.is_box:
        drawer.box(center, transform.rotation, shape.extents)
    else:
        drawer.sphere(center, shape.radius)

    logger.debug(f"Drew safe zone for {player.user_id} ({duration}s)")
