"""
Gesture options for the free-transform handle.

This module defines configuration for drag gestures: scale limits,
aspect-ratio locking and rotation snapping.
"""

from dataclasses import dataclass
from typing import Dict, Any


@dataclass
class TransformOptions:
    """
    Configuration options for transform gestures.

    Attributes:
        min_scale: Smallest allowed absolute scale per axis (default: 0.01)
        keep_aspect_ratio: If True, corner resizes are uniform (default: True)
        rotation_snap: Snap increment in radians, 0 disables snapping (default: 0)
        rotate_handle_offset: Distance of the rotate handle above the top edge (default: 20)
    """

    min_scale: float = 0.01
    keep_aspect_ratio: bool = True
    rotation_snap: float = 0.0
    rotate_handle_offset: float = 20.0

    def __post_init__(self):
        """Validate options after initialization."""
        if self.min_scale <= 0:
            raise ValueError("min_scale must be positive")

        if self.rotation_snap < 0:
            raise ValueError("rotation_snap cannot be negative")

        if self.rotate_handle_offset < 0:
            raise ValueError("rotate_handle_offset cannot be negative")

    @property
    def snaps_rotation(self) -> bool:
        return self.rotation_snap > 0

    def to_dict(self) -> Dict[str, Any]:
        """
        Serialize options to dictionary.

        Returns:
            Dictionary representation suitable for JSON serialization
        """
        return {
            "min_scale": self.min_scale,
            "keep_aspect_ratio": self.keep_aspect_ratio,
            "rotation_snap": self.rotation_snap,
            "rotate_handle_offset": self.rotate_handle_offset,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'TransformOptions':
        """
        Create TransformOptions from a dictionary.

        Args:
            data: Dictionary with option values

        Returns:
            New TransformOptions instance
        """
        return cls(
            min_scale=data.get("min_scale", 0.01),
            keep_aspect_ratio=data.get("keep_aspect_ratio", True),
            rotation_snap=data.get("rotation_snap", 0.0),
            rotate_handle_offset=data.get("rotate_handle_offset", 20.0),
        )

    @classmethod
    def default(cls) -> 'TransformOptions':
        """Create options with default values."""
        return cls()

    def __repr__(self) -> str:
        return (
            f"TransformOptions("
            f"min_scale={self.min_scale}, "
            f"aspect={self.keep_aspect_ratio}, "
            f"snap={self.rotation_snap})"
        )
