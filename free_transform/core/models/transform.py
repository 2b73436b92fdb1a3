"""
Transform record for the free-transform handle.

Conventions:
- Screen frame: x right, y down; local "up" is (0, -1)
- position is the shape centre, size the unscaled width/height
- rotation in radians, applied with vector.rotate (clockwise on screen)
"""

from dataclasses import dataclass, field, replace
from typing import Dict, Any, List

from .. import vector
from ..vector import Vector2, as_vector


CORNER_NAMES = ("top_left", "top_right", "bottom_right", "bottom_left")
EDGE_NAMES = ("top", "right", "bottom", "left")

# Normalized local positions on the outline, (±1, ±1) = corners
_HANDLE_ANCHORS = {
    "top_left": (-1, -1),
    "top_right": (1, -1),
    "bottom_right": (1, 1),
    "bottom_left": (-1, 1),
    "top": (0, -1),
    "right": (1, 0),
    "bottom": (0, 1),
    "left": (-1, 0),
}


@dataclass(frozen=True)
class Transform:
    """
    Position, size, scale and rotation of a manipulated shape.

    Attributes:
        position: Centre of the shape in screen coordinates
        size: Unscaled width and height (both >= 0)
        scale: Per-axis scale factors (non-zero, negative flips the axis)
        rotation: Rotation in radians
    """

    position: Vector2 = field(default_factory=Vector2)
    size: Vector2 = field(default_factory=Vector2)
    scale: Vector2 = field(default_factory=lambda: Vector2(1.0, 1.0))
    rotation: float = 0.0

    def __post_init__(self):
        """Coerce vector fields and validate."""
        object.__setattr__(self, "position", as_vector(self.position))
        object.__setattr__(self, "size", as_vector(self.size))
        object.__setattr__(self, "scale", as_vector(self.scale))
        object.__setattr__(self, "rotation", float(self.rotation))

        if self.size.x < 0 or self.size.y < 0:
            raise ValueError("size cannot be negative")
        if self.scale.x == 0 or self.scale.y == 0:
            raise ValueError("scale components cannot be zero")

    @property
    def extent(self) -> Vector2:
        """Scaled half-size (always non-negative)."""
        return Vector2(
            abs(self.size.x * self.scale.x) / 2,
            abs(self.size.y * self.scale.y) / 2,
        )

    def with_changes(self, **changes) -> 'Transform':
        """Return a copy with the given fields replaced."""
        return replace(self, **changes)

    def to_world(self, local) -> Vector2:
        """Map an unscaled point relative to the centre into screen space."""
        local = as_vector(local)
        scaled = Vector2(local.x * self.scale.x, local.y * self.scale.y)
        return vector.add(self.position, vector.rotate(scaled, self.rotation))

    def to_local(self, world) -> Vector2:
        """Inverse of :meth:`to_world`."""
        offset = vector.rotate(vector.subtract(world, self.position), -self.rotation)
        return Vector2(offset.x / self.scale.x, offset.y / self.scale.y)

    def corners(self) -> List[Vector2]:
        """Outline corners in top_left, top_right, bottom_right, bottom_left order."""
        handles = self.handles()
        return [handles[name] for name in CORNER_NAMES]

    def handles(self, rotate_offset: float = 20.0) -> Dict[str, Vector2]:
        """
        Screen positions of all drag handles.

        Args:
            rotate_offset: Distance of the rotate handle beyond the top edge

        Returns:
            Mapping of handle name to position: the four corners, the four
            edge midpoints and ``rotate``
        """
        half = vector.scale(self.size, 0.5)
        result = {
            name: self.to_world(Vector2(nx * half.x, ny * half.y))
            for name, (nx, ny) in _HANDLE_ANCHORS.items()
        }
        up = vector.rotate(Vector2(0.0, -rotate_offset), self.rotation)
        result["rotate"] = vector.add(result["top"], up)
        return result

    def to_dict(self) -> Dict[str, Any]:
        """
        Serialize transform to a plain dictionary.

        Returns:
            Nested dict with ``{x, y}`` records for vector fields
        """
        return {
            "position": self.position.to_dict(),
            "size": self.size.to_dict(),
            "scale": self.scale.to_dict(),
            "rotation": self.rotation,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'Transform':
        """
        Create a Transform from a dictionary.

        Raises:
            KeyError: If position or size is missing
            ValueError: If data is invalid
        """
        return cls(
            position=Vector2.from_dict(data["position"]),
            size=Vector2.from_dict(data["size"]),
            scale=Vector2.from_dict(data.get("scale", {"x": 1.0, "y": 1.0})),
            rotation=float(data.get("rotation", 0.0)),
        )

    def __repr__(self) -> str:
        return (
            f"Transform(pos=({self.position.x:.3f}, {self.position.y:.3f}), "
            f"size=({self.size.x:.3f}, {self.size.y:.3f}), "
            f"scale=({self.scale.x:.3f}, {self.scale.y:.3f}), "
            f"rot={self.rotation:.4f})"
        )
