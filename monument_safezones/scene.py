"""
World objects owned by a placed safe zone.

A small ownership tree: a Node owns its children and at most one collider.
Destroying a node destroys its whole subtree. World poses are derived from
the parent chain, so a child's local position follows its parent's rotation.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum, IntFlag
from typing import List, Optional, Union

from .log import LogComponent, get_logger
from .types import Quaternion, Vector3

logger = get_logger(LogComponent.SCENE)


class Layer(IntEnum):
    """Engine layers used by this addon."""

    DEFAULT = 0
    TRIGGER = 18
    PLAYER_SERVER = 17


class LayerMask(IntFlag):
    """Interest masks for triggers."""

    NONE = 0
    PLAYER_SERVER = 1 << Layer.PLAYER_SERVER


@dataclass
class BoxCollider:
    """Box collider centered on its node."""

    size: Vector3
    is_trigger: bool = True


@dataclass
class SphereCollider:
    """Sphere collider centered on its node."""

    radius: float
    is_trigger: bool = True


Collider = Union[BoxCollider, SphereCollider]


@dataclass
class TriggerSettings:
    """Detect-only trigger behaviour attached to a node."""

    interest_layers: LayerMask = LayerMask.PLAYER_SERVER
    max_altitude: float = -1
    max_depth: float = -1


class Node:
    """
    Spatial node with a local pose relative to its parent.

    Attributes:
        name: Debug name.
        parent: Owning node, None for a root.
        children: Owned child nodes.
        layer: Engine layer.
        collider: The node's single collider slot.
        trigger: Trigger settings, if the node acts as a trigger.
    """

    def __init__(
        self,
        name: str = "",
        position: Optional[Vector3] = None,
        rotation: Optional[Quaternion] = None,
        parent: Optional["Node"] = None,
    ) -> None:
        self.name = name
        self.local_position = position or Vector3.zero()
        self.local_rotation = rotation or Quaternion.identity()
        self.parent: Optional[Node] = None
        self.children: List[Node] = []
        self.layer = Layer.DEFAULT
        self.collider: Optional[Collider] = None
        self.trigger: Optional[TriggerSettings] = None
        self._destroyed = False
        if parent is not None:
            parent.add_child(self)

    @property
    def destroyed(self) -> bool:
        return self._destroyed

    @property
    def position(self) -> Vector3:
        """World position."""
        if self.parent is None:
            return self.local_position
        return self.parent.transform_point(self.local_position)

    @property
    def rotation(self) -> Quaternion:
        """World rotation."""
        if self.parent is None:
            return self.local_rotation
        return self.parent.rotation * self.local_rotation

    def transform_point(self, local_point: Vector3) -> Vector3:
        """Local point to world space."""
        return self.position + self.rotation.rotate(local_point)

    def add_child(self, child: "Node") -> "Node":
        if self._destroyed:
            raise RuntimeError(f"Cannot add child to destroyed node '{self.name}'")
        if child.parent is not None:
            child.parent.children.remove(child)
        child.parent = self
        self.children.append(child)
        return child

    def create_child(self, name: str = "") -> "Node":
        """Create a child at the parent's origin."""
        return Node(name, parent=self)

    def set_collider(self, collider: Optional[Collider]) -> Optional[Collider]:
        """Replace the collider slot. Returns the new collider."""
        if self._destroyed:
            raise RuntimeError(f"Cannot attach collider to destroyed node '{self.name}'")
        self.collider = collider
        return collider

    def destroy(self) -> None:
        """Destroy this node, its children and its collider."""
        if self._destroyed:
            return
        for child in list(self.children):
            child.destroy()
        self.collider = None
        self.trigger = None
        self._destroyed = True
        if self.parent is not None and self in self.parent.children:
            self.parent.children.remove(self)
        self.parent = None
        logger.debug(f"Destroyed node '{self.name}'")
