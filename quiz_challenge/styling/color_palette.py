"""Color palette for the Quiz Challenge player."""

from __future__ import annotations


class ColorPalette:
    """Centralized color definitions for the application."""

    # Text
    TEXT_PRIMARY = "#000000"
    TEXT_SECONDARY = "#666666"

    # Backgrounds
    BACKGROUND_PRIMARY = "#FFFFFF"
    BACKGROUND_SECONDARY = "#F5F5F5"

    ACCENT_PRIMARY = "#7B2FBE"  # purple

    # Status
    SUCCESS = "#107C10"
    ERROR = "#D13438"

    BORDER_PRIMARY = "#D1D1D1"

    # Buttons
    BUTTON_PRIMARY_BG = ACCENT_PRIMARY
    BUTTON_PRIMARY_TEXT = "#FFFFFF"
    BUTTON_SECONDARY_BG = "#F5F5F5"
    BUTTON_HOVER_BG = "#E8E8E8"

    # Option feedback backgrounds
    OPTION_SELECTED_BG = "#EDE1FA"
    OPTION_CORRECT_BG = "#DFF6DD"
    OPTION_INCORRECT_BG = "#FDE7E9"
