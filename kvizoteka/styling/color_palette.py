"""Color palette for Kvizoteka supporting light and dark themes."""

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
    TEXT_PRIMARY = ThemeColors(
        light="#000000",      # Black
        dark="#F5F7FF"        # Ghost White
    )

    TEXT_SECONDARY = ThemeColors(
        light="#666666",      # Dark Gray
        dark="#94A3B8"        # Slate
    )

    # Background colors
    BACKGROUND_PRIMARY = ThemeColors(
        light="#FFFFFF",      # White
        dark="#0B1120"        # Midnight
    )

    BACKGROUND_CARD = ThemeColors(
        light="#F5F5F5",      # WhiteSmoke
        dark="#111A30"        # Navy
    )

    # Answer states
    ANSWER_NEUTRAL_BG = ThemeColors(
        light="#E8E8E8",      # Light Gray
        dark="#1E293B"        # Slate Blue
    )

    CORRECT = ThemeColors(
        light="#107C10",      # Green
        dark="#22C55E"        # Light Green
    )

    WRONG = ThemeColors(
        light="#D13438",      # Red
        dark="#EF4444"        # Light Red
    )

    # Accent colors
    ACCENT_PRIMARY = ThemeColors(
        light="#0078D4",      # Blue
        dark="#1F9AA5"        # Teal
    )

    BUTTON_PRIMARY_TEXT = ThemeColors(
        light="#FFFFFF",      # White
        dark="#FFFFFF"        # White
    )

    BORDER_PRIMARY = ThemeColors(
        light="#D1D1D1",      # Gray
        dark="#334155"        # Dark Slate
    )
