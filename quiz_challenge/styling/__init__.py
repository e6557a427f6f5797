"""Styling module for Quiz Challenge application."""

from .color_palette import ColorPalette
from .styles import Styles

__all__ = ["ColorPalette", "Styles"]
