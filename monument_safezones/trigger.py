"""
Safe zone trigger binding.

A placed safe zone is a root node at the addon's anchor pose with one child
node, offset by the zone's offset, that carries the trigger collider. The
collider is only replaced when the zone switches between box and sphere.
"""

from __future__ import annotations

from typing import Optional

from .constants import DEFAULT_RADIUS, TRIGGER_MAX_ALTITUDE, TRIGGER_MAX_DEPTH
from .log import LogComponent, get_logger
from .scene import (
    BoxCollider,
    Collider,
    Layer,
    LayerMask,
    Node,
    SphereCollider,
    TriggerSettings,
)
from .types import Quaternion, SphereShape, Vector3, ZoneShape

logger = get_logger(LogComponent.TRIGGER)


class SafeZoneComponent:
    """
    In-world safe zone owned by one addon instance.

    Attributes:
        node: Root node at the anchor pose; the host's handle transform.
        child: Offset node carrying the trigger.
        shape: Shape last applied.
    """

    def __init__(self, node: Node, child: Node) -> None:
        self.node = node
        self.child = child
        self.shape: Optional[ZoneShape] = None

    @classmethod
    def create(
        cls,
        position: Vector3,
        rotation: Quaternion,
        shape: Optional[ZoneShape],
        default_radius: float = DEFAULT_RADIUS,
    ) -> "SafeZoneComponent":
        """Build the node tree at the anchor pose and apply `shape`."""
        node = Node("SafeZone", position=position, rotation=rotation)

        # Separate child so the trigger can be offset from the addon origin.
        child = node.create_child("SafeZoneTrigger")
        child.layer = Layer.TRIGGER
        child.trigger = TriggerSettings(
            interest_layers=LayerMask.PLAYER_SERVER,
            max_altitude=TRIGGER_MAX_ALTITUDE,
            max_depth=TRIGGER_MAX_DEPTH,
        )

        component = cls(node, child)
        if shape is None:
            shape = ZoneShape(volume=SphereShape(default_radius))
        component.update_shape(shape)
        logger.debug(f"Created safe zone at {position}")
        return component

    @property
    def transform(self) -> Node:
        return self.node

    @property
    def collider(self) -> Optional[Collider]:
        return self.child.collider

    @property
    def destroyed(self) -> bool:
        return self.node.destroyed

    def update_shape(self, shape: ZoneShape) -> None:
        """Reposition the trigger and resize or replace its collider."""
        self.child.local_position = shape.offset

        current = self.child.collider
        if shape.is_box:
            if isinstance(current, BoxCollider):
                current.size = shape.size
            else:
                self._replace_collider(BoxCollider(shape.size, is_trigger=True))
        else:
            if isinstance(current, SphereCollider):
                current.radius = shape.radius
            else:
                self._replace_collider(SphereCollider(shape.radius, is_trigger=True))

        self.shape = shape

    def _replace_collider(self, collider: Collider) -> None:
        previous = self.child.collider
        self.child.set_collider(collider)
        if previous is not None:
            logger.debug(
                f"Replaced {type(previous).__name__} with {type(collider).__name__}"
            )

    def kill(self) -> None:
        """Destroy the zone and everything it owns."""
        self.node.destroy()
