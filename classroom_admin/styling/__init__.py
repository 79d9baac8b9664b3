"""Styling module for the ClassroomAdmin console."""

from .color_palette import ColorPalette, Theme

__all__ = ["ColorPalette", "Theme"]
