"""Color palette for the IntervalQt application supporting light and dark themes."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, auto


class Theme(Enum):
    """Application theme options."""
    LIGHT = auto()
    DARK = auto()


@dataclass(frozen=True)
class ThemeColors:
    """Color definitions for a specific theme."""
    light: str
    dark: str

    def get(self, theme: Theme) -> str:
        """Get color value for the specified theme."""
        return self.light if theme == Theme.LIGHT else self.dark


class ColorPalette:
    """Centralized color definitions for the application."""

    # Text colors
    TEXT_PRIMARY = ThemeColors(light="#000000", dark="#F5F5F5")
    TEXT_DISABLED = ThemeColors(light="#AAAAAA", dark="#666666")

    # Background colors
    BACKGROUND_PRIMARY = ThemeColors(light="#FFFFFF", dark="#1E1E1E")
    BACKGROUND_SECONDARY = ThemeColors(light="#F5F5F5", dark="#2D2D2D")

    # Progress of the round
    ACCENT_PRIMARY = ThemeColors(light="#0078D4", dark="#4A9EFF")

    # Border colors
    BORDER_PRIMARY = ThemeColors(light="#D1D1D1", dark="#555555")
    BORDER_FOCUS = ThemeColors(light="#0078D4", dark="#4A9EFF")

    # Button colors
    BUTTON_SECONDARY_BG = ThemeColors(light="#F5F5F5", dark="#3A3A3A")
    BUTTON_HOVER_BG = ThemeColors(light="#E8E8E8", dark="#505050")
