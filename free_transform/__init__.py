"""
Free Transform - geometry for an interactive transform handle

Pure 2D vector arithmetic plus the drag gestures (move, rotate, resize)
that an on-screen free-transform widget feeds pointer positions into.

Conventions:
- Vectors/points: immutable Vector2(x, y), also accepted as {x, y} dicts
- Screen frame: x right, y down
- Angles: radians, never normalized
- Numeric edge cases (NaN, inf, division by zero) propagate, never raise
"""

__version__ = "1.0.0"

from .core import vector
from .core.vector import Vector2, ORIGIN
from .core.models import Transform, TransformOptions
from .core.gestures import move, spin, resize, handle_positions

__all__ = [
    # Version
    "__version__",

    # Vector module
    "vector",
    "Vector2",
    "ORIGIN",

    # Models
    "Transform",
    "TransformOptions",

    # Gestures
    "move",
    "spin",
    "resize",
    "handle_positions",
]
