"""Colors and Qt style sheets for the Kvizoteka window."""

from .color_palette import ColorPalette, Theme

__all__ = ["ColorPalette", "Theme"]
