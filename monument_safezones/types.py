"""
Types for monument_safezones.

Dataclasses for Vector3, Quaternion, Color and the ZoneShape data entity.
"""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from typing import Any, Dict, Optional, Sequence, Union


def format_number(value: float) -> str:
    """Format with at most two decimals and no trailing zeros (`0.##`)."""
    text = f"{value:.2f}".rstrip("0").rstrip(".")
    return "0" if text == "-0" else text


def format_exact(value: float) -> str:
    """Shortest text that reads back as `value`; whole numbers drop the `.0`."""
    value = float(value)
    if value.is_integer():
        return str(int(value))
    return repr(value)


@dataclass(frozen=True)
class Vector3:
    """
    Engine-space vector, meters. Y is up.
    """

    x: float = 0.0
    y: float = 0.0
    z: float = 0.0

    @classmethod
    def zero(cls) -> "Vector3":
        return cls(0.0, 0.0, 0.0)

    def is_zero(self) -> bool:
        return self.x == 0 and self.y == 0 and self.z == 0

    def with_x(self, x: float) -> "Vector3":
        return Vector3(x, self.y, self.z)

    def with_y(self, y: float) -> "Vector3":
        return Vector3(self.x, y, self.z)

    def magnitude(self) -> float:
        """Length in meters."""
        return math.sqrt(self.x**2 + self.y**2 + self.z**2)

    def cross(self, o: "Vector3") -> "Vector3":
        if not isinstance(o, Vector3):
            raise TypeError()
        return Vector3(
            self.y * o.z - self.z * o.y,
            self.z * o.x - self.x * o.z,
            self.x * o.y - self.y * o.x,
        )

    def __add__(self, o: "Vector3") -> "Vector3":
        if not isinstance(o, Vector3):
            raise TypeError()
        return Vector3(self.x + o.x, self.y + o.y, self.z + o.z)

    def __sub__(self, o: "Vector3") -> "Vector3":
        if not isinstance(o, Vector3):
            raise TypeError()
        return Vector3(self.x - o.x, self.y - o.y, self.z - o.z)

    def __mul__(self, scalar: float) -> "Vector3":
        if not isinstance(scalar, (int, float)):
            raise TypeError()
        return Vector3(self.x * scalar, self.y * scalar, self.z * scalar)

    __rmul__ = __mul__

    def __truediv__(self, scalar: float) -> "Vector3":
        if not isinstance(scalar, (int, float)):
            raise TypeError()
        return Vector3(self.x / scalar, self.y / scalar, self.z / scalar)

    def __neg__(self) -> "Vector3":
        return Vector3(-self.x, -self.y, -self.z)

    def __str__(self) -> str:
        return f"({self.x:.1f}, {self.y:.1f}, {self.z:.1f})"

    def format(self) -> str:
        """Compact `x,y,z` form used in chat output and command arguments."""
        return ",".join(format_number(c) for c in (self.x, self.y, self.z))

    def to_dict(self) -> Dict[str, float]:
        return {"x": self.x, "y": self.y, "z": self.z}

    @classmethod
    def from_dict(cls, data: Union[Dict[str, Any], Sequence[float], None]) -> "Vector3":
        """Read the host's `{"x":..,"y":..,"z":..}` form (or a 3-item list)."""
        if data is None:
            return cls.zero()
        if isinstance(data, dict):
            return cls(
                float(data.get("x", 0.0)),
                float(data.get("y", 0.0)),
                float(data.get("z", 0.0)),
            )
        if len(data) != 3:
            raise ValueError(f"Expected 3 vector components, got {len(data)}")
        return cls(float(data[0]), float(data[1]), float(data[2]))


@dataclass(frozen=True)
class Quaternion:
    """Unit rotation quaternion (w, x, y, z)."""

    w: float = 1.0
    x: float = 0.0
    y: float = 0.0
    z: float = 0.0

    @classmethod
    def identity(cls) -> "Quaternion":
        return cls(1.0, 0.0, 0.0, 0.0)

    @classmethod
    def from_axis_angle(cls, axis: Vector3, angle_deg: float) -> "Quaternion":
        """Rotation of `angle_deg` degrees around `axis`."""
        length = axis.magnitude()
        if length == 0:
            return cls.identity()
        half = math.radians(angle_deg) / 2
        s = math.sin(half) / length
        return cls(math.cos(half), axis.x * s, axis.y * s, axis.z * s)

    def rotate(self, v: Vector3) -> Vector3:
        """Rotate vector by this quaternion."""
        u = Vector3(self.x, self.y, self.z)
        t = u.cross(v) * 2.0
        return v + t * self.w + u.cross(t)

    def __mul__(self, o: Union["Quaternion", Vector3]) -> Union["Quaternion", Vector3]:
        if isinstance(o, Vector3):
            return self.rotate(o)
        if not isinstance(o, Quaternion):
            raise TypeError()
        return Quaternion(
            self.w * o.w - self.x * o.x - self.y * o.y - self.z * o.z,
            self.w * o.x + self.x * o.w + self.y * o.z - self.z * o.y,
            self.w * o.y - self.x * o.z + self.y * o.w + self.z * o.x,
            self.w * o.z + self.x * o.y - self.y * o.x + self.z * o.w,
        )


@dataclass(frozen=True)
class Color:
    """RGBA color, components 0-1."""

    r: float
    g: float
    b: float
    a: float = 1.0

    def __str__(self) -> str:
        return f"RGBA({self.r:.3f}, {self.g:.3f}, {self.b:.3f}, {self.a:.3f})"


GREEN = Color(0.0, 1.0, 0.0)
WHITE = Color(1.0, 1.0, 1.0)


# --- Zone shape ---


@dataclass(frozen=True)
class BoxShape:
    """Box-shaped zone, full edge lengths."""

    size: Vector3

    @property
    def extents(self) -> Vector3:
        return self.size / 2


@dataclass(frozen=True)
class SphereShape:
    """Sphere-shaped zone."""

    radius: float


Volume = Union[BoxShape, SphereShape]


@dataclass(frozen=True)
class ZoneShape:
    """
    Safe zone geometry relative to the addon's anchor transform.

    Exactly one volume kind is active. On the wire this is the flat
    `Offset`/`Size`/`Radius` triple where a zero size or radius means unset;
    see `to_data` and `from_data`.

    Attributes:
        offset: Position of the volume relative to the anchor.
        volume: BoxShape or SphereShape.
    """

    offset: Vector3 = field(default_factory=Vector3.zero)
    volume: Volume = field(default_factory=lambda: SphereShape(0.0))

    @property
    def is_box(self) -> bool:
        return isinstance(self.volume, BoxShape)

    @property
    def size(self) -> Vector3:
        """Box size, zero for spheres."""
        return self.volume.size if isinstance(self.volume, BoxShape) else Vector3.zero()

    @property
    def radius(self) -> float:
        """Sphere radius, zero for boxes."""
        return self.volume.radius if isinstance(self.volume, SphereShape) else 0.0

    @property
    def extents(self) -> Vector3:
        return self.size / 2

    def with_offset(self, offset: Vector3) -> "ZoneShape":
        return ZoneShape(offset, self.volume)

    def with_size(self, size: Vector3) -> "ZoneShape":
        """Switch to a box. A zero size means no box, leaving an unset sphere."""
        if size.is_zero():
            return ZoneShape(self.offset, SphereShape(0.0))
        return ZoneShape(self.offset, BoxShape(size))

    def with_radius(self, radius: float) -> "ZoneShape":
        return ZoneShape(self.offset, SphereShape(radius))

    def to_data(self) -> Dict[str, Any]:
        """Serialize to the host's data blob."""
        return {
            "Offset": self.offset.to_dict(),
            "Size": self.size.to_dict(),
            "Radius": self.radius,
        }

    @classmethod
    def from_data(cls, data: Optional[Dict[str, Any]]) -> Optional["ZoneShape"]:
        """
        Deserialize from the host's data blob.

        Returns None when there is no blob. Missing fields read as zero.
        """
        if data is None:
            return None
        offset = Vector3.from_dict(data.get("Offset"))
        size = Vector3.from_dict(data.get("Size"))
        if not size.is_zero():
            return cls(offset, BoxShape(size))
        return cls(offset, SphereShape(float(data.get("Radius") or 0.0)))
