"""Qt stylesheets for the player window and its quiz widgets."""

from .color_palette import ColorPalette


class Styles:
    """Helper class to generate Qt stylesheets from the color palette."""

    @staticmethod
    def get_main_window_style() -> str:
        return f"""
            QMainWindow, QWidget {{
                background-color: {ColorPalette.BACKGROUND_PRIMARY};
                color: {ColorPalette.TEXT_PRIMARY};
            }}
            QWidget {{
                font-family: 'Segoe UI', 'Roboto', sans-serif;
                font-size: 14px;
            }}
            QPushButton {{
                background-color: {ColorPalette.BUTTON_SECONDARY_BG};
                border: 1px solid {ColorPalette.BORDER_PRIMARY};
                border-radius: 4px;
                padding: 6px 12px;
            }}
            QPushButton:hover {{
                background-color: {ColorPalette.BUTTON_HOVER_BG};
            }}
            QPushButton:disabled {{
                color: {ColorPalette.TEXT_SECONDARY};
            }}
            QListWidget, QGroupBox {{
                border: 1px solid {ColorPalette.BORDER_PRIMARY};
                border-radius: 6px;
            }}
            QGroupBox {{
                margin-top: 6px;
                padding-top: 10px;
            }}
            QGroupBox::title {{
                subcontrol-origin: margin;
                left: 10px;
                padding: 0 3px;
            }}
        """

    @staticmethod
    def get_large_label_style() -> str:
        return "font-size: 16pt; font-weight: bold;"

    @staticmethod
    def get_primary_button_style() -> str:
        return (
            f"QPushButton {{ background-color: {ColorPalette.BUTTON_PRIMARY_BG}; "
            f"color: {ColorPalette.BUTTON_PRIMARY_TEXT}; font-weight: bold; "
            "border-radius: 6px; padding: 8px 16px; }"
        )

    @staticmethod
    def get_option_button_style(selected: bool = False, correct: bool | None = None) -> str:
        """Style an answer option; ``correct`` is None until feedback is shown."""
        if correct is True:
            background, border = ColorPalette.OPTION_CORRECT_BG, ColorPalette.SUCCESS
        elif correct is False:
            background, border = ColorPalette.OPTION_INCORRECT_BG, ColorPalette.ERROR
        elif selected:
            background, border = ColorPalette.OPTION_SELECTED_BG, ColorPalette.ACCENT_PRIMARY
        else:
            background, border = ColorPalette.BACKGROUND_SECONDARY, ColorPalette.BORDER_PRIMARY
        return (
            f"QPushButton {{ background-color: {background}; border: 2px solid {border}; "
            "border-radius: 8px; padding: 12px; text-align: left; }"
        )

    @staticmethod
    def get_timer_label_style(warning: bool) -> str:
        color = ColorPalette.ERROR if warning else ColorPalette.ACCENT_PRIMARY
        return f"padding: 2px 10px; border-radius: 10px; font-weight: bold; color: {color};"
