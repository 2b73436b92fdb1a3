"""free_transform.core.gestures

Drag gestures for the free-transform handle.

Every gesture is computed from the state captured when the drag started:
    gesture(start_transform, start_pointer, pointer, options) -> Transform

so repeated pointer events never accumulate rounding error. Pointers are
screen positions (anything ``vector.as_vector`` accepts).
"""

from __future__ import annotations

import logging
import math
from typing import Dict, Optional, Tuple

from . import vector
from .models.options import TransformOptions
from .models.transform import CORNER_NAMES, Transform
from .vector import ORIGIN, Vector2

logger = logging.getLogger(__name__)

# Handle name -> (scales x, scales y)
_RESIZE_AXES = {
    "corner": (True, True),
    **{name: (True, True) for name in CORNER_NAMES},
    "left": (True, False),
    "right": (True, False),
    "top": (False, True),
    "bottom": (False, True),
}


def handle_positions(
    transform: Transform, options: Optional[TransformOptions] = None
) -> Dict[str, Vector2]:
    """Handle positions using the configured rotate-handle offset."""
    options = options or TransformOptions()
    return transform.handles(rotate_offset=options.rotate_handle_offset)


def move(start: Transform, start_pointer, pointer) -> Transform:
    """Translate ``start`` by the pointer movement since the drag began."""
    delta = vector.subtract(pointer, start_pointer)
    logger.debug("move: delta=(%.3f, %.3f)", delta.x, delta.y)
    return start.with_changes(position=vector.add(start.position, delta))


def _heading(offset: Vector2) -> float:
    """``vector.direction`` with a level offset read as just above the centre line."""
    if offset.y == 0:
        offset = Vector2(offset.x, -0.0)
    return vector.direction(offset)


def rotation_delta(center, start_pointer, pointer) -> float:
    """Angle swept by the pointer around ``center`` since the drag began.

    Measured with ``vector.direction`` so that
    ``vector.rotate(start_pointer, delta, center)`` heads toward ``pointer``.
    """
    start_dir = _heading(vector.subtract(start_pointer, center))
    current_dir = _heading(vector.subtract(pointer, center))
    return start_dir - current_dir


def snap_angle(angle: float, step: float) -> float:
    """Round ``angle`` to the nearest multiple of ``step`` (0 = no snapping).

    Non-finite angles are returned unchanged.
    """
    if step <= 0 or not math.isfinite(angle):
        return angle
    return round(angle / step) * step


def spin(
    start: Transform,
    start_pointer,
    pointer,
    options: Optional[TransformOptions] = None,
) -> Transform:
    """Rotate ``start`` about its centre following the pointer.

    A pointer on the centre has no heading, so ``start`` is returned as is.
    """
    options = options or TransformOptions()
    start_offset = vector.subtract(start_pointer, start.position)
    offset = vector.subtract(pointer, start.position)
    if start_offset == ORIGIN or offset == ORIGIN:
        logger.debug("spin: pointer on centre, ignoring")
        return start

    delta = rotation_delta(start.position, start_pointer, pointer)
    rotation = start.rotation + delta
    if options.snaps_rotation:
        rotation = snap_angle(rotation, options.rotation_snap)
    logger.debug("spin: delta=%.5f rotation=%.5f", delta, rotation)
    return start.with_changes(rotation=rotation)


def _floor_scale(value: float, min_scale: float) -> float:
    """Keep |value| >= min_scale, preserving the sign."""
    if abs(value) < min_scale:
        return math.copysign(min_scale, value)
    return value


def _axis_factors(
    start: Transform, start_pointer, pointer, axes: Tuple[bool, bool]
) -> Optional[Tuple[float, float]]:
    """Per-axis scale factors from pointer offsets in the shape's local frame."""
    local_start = vector.rotate(
        vector.subtract(start_pointer, start.position), -start.rotation
    )
    local_now = vector.rotate(vector.subtract(pointer, start.position), -start.rotation)

    scales_x, scales_y = axes
    fx = fy = 1.0
    if scales_x and local_start.x != 0:
        fx = local_now.x / local_start.x
    if scales_y and local_start.y != 0:
        fy = local_now.y / local_start.y

    if (not scales_x or local_start.x == 0) and (not scales_y or local_start.y == 0):
        return None
    return fx, fy


def resize(
    start: Transform,
    start_pointer,
    pointer,
    options: Optional[TransformOptions] = None,
    handle: str = "corner",
) -> Transform:
    """
    Scale ``start`` about its centre by dragging a handle.

    Corner handles scale uniformly when ``options.keep_aspect_ratio`` is set,
    using the ratio of pointer distances from the centre. Otherwise the
    pointer offsets are taken in the shape's local frame and each affected
    axis scales independently; edge handles only affect their own axis.

    Args:
        start: Transform when the drag began
        start_pointer: Pointer position when the drag began
        pointer: Current pointer position
        options: Gesture options (defaults if None)
        handle: "corner", a corner name, or an edge name

    Returns:
        The resized transform, or ``start`` when the drag began at the centre

    Raises:
        ValueError: If ``handle`` is not a known handle name
    """
    options = options or TransformOptions()
    if handle not in _RESIZE_AXES:
        raise ValueError(f"Unknown resize handle: {handle!r}")
    axes = _RESIZE_AXES[handle]

    if axes == (True, True) and options.keep_aspect_ratio:
        start_dist = vector.length(vector.subtract(start_pointer, start.position))
        if start_dist == 0:
            logger.debug("resize: drag started at centre, ignoring")
            return start
        factor = vector.length(vector.subtract(pointer, start.position)) / start_dist
        fx = fy = factor
    else:
        factors = _axis_factors(start, start_pointer, pointer, axes)
        if factors is None:
            logger.debug("resize: no usable axis for handle %s, ignoring", handle)
            return start
        fx, fy = factors

    new_scale = Vector2(
        _floor_scale(start.scale.x * fx, options.min_scale),
        _floor_scale(start.scale.y * fy, options.min_scale),
    )
    logger.debug("resize(%s): factors=(%.4f, %.4f) scale=%r", handle, fx, fy, new_scale)
    return start.with_changes(scale=new_scale)
