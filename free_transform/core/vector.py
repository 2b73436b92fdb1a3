"""free_transform.core.vector

Pure 2D vector arithmetic.

Conventions:
  - Vectors and points share one type, ``Vector2`` (immutable x/y pair)
  - Angles: radians, never normalized
  - ``rotate`` is counter-clockwise in a y-up frame (clockwise on screen)

Numeric edge cases are not trapped: NaN and infinities propagate the way
IEEE-754 arithmetic produces them. Division and trigonometry run through
numpy float64 so that e.g. ``x / 0`` or ``cos(inf)`` yield ``inf``/``nan``
instead of raising like the ``math`` module does.
"""

from __future__ import annotations

import math
from collections.abc import Mapping, Sequence
from dataclasses import dataclass
from typing import Any, Dict, Iterator, Union

import numpy as np


@dataclass(frozen=True)
class Vector2:
    """Immutable 2D vector / point."""

    x: float = 0.0
    y: float = 0.0

    def __post_init__(self):
        object.__setattr__(self, "x", float(self.x))
        object.__setattr__(self, "y", float(self.y))

    def __iter__(self) -> Iterator[float]:
        """Allow tuple unpacking: x, y = v"""
        return iter((self.x, self.y))

    def to_dict(self) -> Dict[str, float]:
        return {"x": self.x, "y": self.y}

    @classmethod
    def from_dict(cls, data: Mapping) -> 'Vector2':
        """
        Create a Vector2 from an ``{x, y}`` record.

        Raises:
            KeyError: If ``x`` or ``y`` is missing
        """
        return cls(data["x"], data["y"])

    def __repr__(self) -> str:
        return f"Vector2({self.x!r}, {self.y!r})"


ORIGIN = Vector2(0.0, 0.0)

VectorLike = Union[Vector2, Mapping, Sequence]


def as_vector(value: Any) -> Vector2:
    """Coerce a Vector2, ``{x, y}`` mapping or 2-item sequence to Vector2."""
    if isinstance(value, Vector2):
        return value
    if isinstance(value, Mapping):
        return Vector2.from_dict(value)
    if isinstance(value, Sequence) and not isinstance(value, (str, bytes)):
        try:
            x, y = value
        except ValueError:
            raise TypeError("Expected a 2-item sequence") from None
        return Vector2(x, y)
    raise TypeError(f"Cannot interpret {type(value).__name__} as a 2D vector")


def _divide(a: float, b: float) -> float:
    """IEEE division: x/±0 -> ±inf, 0/0 -> nan."""
    with np.errstate(divide="ignore", invalid="ignore"):
        return float(np.float64(a) / np.float64(b))


def _cos_sin(angle: float):
    with np.errstate(invalid="ignore"):
        a = np.float64(angle)
        return float(np.cos(a)), float(np.sin(a))


def add(a: VectorLike, b: VectorLike) -> Vector2:
    """Component-wise sum a + b."""
    a, b = as_vector(a), as_vector(b)
    return Vector2(a.x + b.x, a.y + b.y)


def subtract(a: VectorLike, b: VectorLike) -> Vector2:
    """Component-wise difference a - b."""
    a, b = as_vector(a), as_vector(b)
    return Vector2(a.x - b.x, a.y - b.y)


def scale(p: VectorLike, factor: float) -> Vector2:
    """Multiply both components of ``p`` by ``factor``."""
    p = as_vector(p)
    return Vector2(p.x * factor, p.y * factor)


def rotate(p: VectorLike, angle: float, origin: VectorLike = ORIGIN) -> Vector2:
    """
    Rotate point ``p`` by ``angle`` radians about ``origin``.

    Positive angles turn x toward y (counter-clockwise with y up).

    Args:
        p: Point to rotate
        angle: Rotation in radians
        origin: Pivot, defaults to (0, 0)

    Returns:
        The rotated point
    """
    p, origin = as_vector(p), as_vector(origin)
    dx = p.x - origin.x
    dy = p.y - origin.y
    cos_a, sin_a = _cos_sin(angle)
    return Vector2(
        origin.x + (dx * cos_a) - (dy * sin_a),
        origin.y + (dy * cos_a) + (dx * sin_a),
    )


def direction(v: VectorLike) -> float:
    """
    Heading of ``v`` as ``atan(x / y)``, plus π when ``y > 0``.

    This is a two-branch correction, not a four-quadrant ``atan2``: up on
    screen, (0, -1), is 0 and angles decrease clockwise. At ``y == 0`` the
    ratio is ±inf (or nan for the zero vector), so (1, 0) gives π/2 and
    (-1, 0) gives -π/2.
    """
    v = as_vector(v)
    a = math.atan(_divide(v.x, v.y))
    if v.y > 0:
        return a + math.pi
    return a


def length(v: VectorLike) -> float:
    """Euclidean norm of ``v``."""
    v = as_vector(v)
    return math.sqrt((v.x * v.x) + (v.y * v.y))


# Short aliases. ``len`` shadows the builtin inside this module only.
sub = subtract
len = length  # noqa: A001
