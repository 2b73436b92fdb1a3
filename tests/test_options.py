"""
Tests for the TransformOptions class.
"""

import math

import pytest

from free_transform.core.models.options import TransformOptions


class TestOptionsCreation:
    """Tests for TransformOptions defaults and validation."""

    def test_defaults(self):
        """Test default option values."""
        options = TransformOptions()
        assert options.min_scale == 0.01
        assert options.keep_aspect_ratio is True
        assert options.rotation_snap == 0.0
        assert options.rotate_handle_offset == 20.0
        assert options.snaps_rotation is False

    def test_default_constructor(self):
        """Test that default() matches a bare constructor."""
        assert TransformOptions.default() == TransformOptions()

    def test_snapping_enabled(self):
        """Test that a positive snap step enables snapping."""
        assert TransformOptions(rotation_snap=math.pi / 12).snaps_rotation is True

    def test_non_positive_min_scale_raises_error(self):
        """Test that a zero min_scale raises ValueError."""
        with pytest.raises(ValueError, match="min_scale must be positive"):
            TransformOptions(min_scale=0)

    def test_negative_snap_raises_error(self):
        """Test that a negative snap step raises ValueError."""
        with pytest.raises(ValueError, match="rotation_snap cannot be negative"):
            TransformOptions(rotation_snap=-0.1)

    def test_negative_handle_offset_raises_error(self):
        """Test that a negative rotate-handle offset raises ValueError."""
        with pytest.raises(ValueError, match="rotate_handle_offset cannot be negative"):
            TransformOptions(rotate_handle_offset=-1)


class TestOptionsSerialization:
    """Tests for dict conversion."""

    def test_round_trip(self):
        """Test that options survive to_dict/from_dict."""
        options = TransformOptions(
            min_scale=0.5,
            keep_aspect_ratio=False,
            rotation_snap=0.25,
            rotate_handle_offset=8.0,
        )
        assert TransformOptions.from_dict(options.to_dict()) == options

    def test_from_empty_dict_uses_defaults(self):
        """Test that missing keys fall back to defaults."""
        assert TransformOptions.from_dict({}) == TransformOptions()

    def test_from_dict_validates(self):
        """Test that from_dict runs the same validation."""
        with pytest.raises(ValueError):
            TransformOptions.from_dict({"min_scale": -1})

    def test_repr(self):
        """Test string representation."""
        assert "min_scale=0.01" in repr(TransformOptions())
