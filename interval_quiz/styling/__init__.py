"""Styling module for the IntervalQt application."""

from .color_palette import ColorPalette, Theme

__all__ = ["ColorPalette", "Theme"]
