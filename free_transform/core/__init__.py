"""
Core module for the free-transform handle.

Pure Python geometry with no UI dependencies: vector arithmetic, the
transform record and the drag gestures built on them.
"""

from .vector import (
    Vector2,
    ORIGIN,
    as_vector,
    add,
    subtract,
    sub,
    scale,
    rotate,
    direction,
    length,
)

from .models import Transform, TransformOptions, CORNER_NAMES, EDGE_NAMES

from .gestures import (
    handle_positions,
    move,
    spin,
    resize,
    rotation_delta,
    snap_angle,
)

__all__ = [
    # Vector arithmetic
    "Vector2",
    "ORIGIN",
    "as_vector",
    "add",
    "subtract",
    "sub",
    "scale",
    "rotate",
    "direction",
    "length",

    # Models
    "Transform",
    "TransformOptions",
    "CORNER_NAMES",
    "EDGE_NAMES",

    # Gestures
    "handle_positions",
    "move",
    "spin",
    "resize",
    "rotation_delta",
    "snap_angle",
]
