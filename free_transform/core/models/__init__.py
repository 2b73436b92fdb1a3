"""
Data models for the free-transform handle.

This module provides the core data structures:
- Transform: Position, size, scale and rotation of a shape
- TransformOptions: Configuration for drag gestures
"""

from .transform import Transform, CORNER_NAMES, EDGE_NAMES
from .options import TransformOptions

__all__ = [
    # Transform
    "Transform",
    "CORNER_NAMES",
    "EDGE_NAMES",

    # Options
    "TransformOptions",
]
