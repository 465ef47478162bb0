"""Centralized styles and font definitions for the application."""

from .color_palette import ColorPalette, Theme

class Styles:
    """Helper class to generate Qt stylesheets based on the current theme."""

    @staticmethod
    def get_main_window_style(theme: Theme = Theme.LIGHT) -> str:
        text = ColorPalette.TEXT_PRIMARY.get(theme)
        background = ColorPalette.BACKGROUND_PRIMARY.get(theme)
        border = ColorPalette.BORDER_PRIMARY.get(theme)
        return f"""
            QMainWindow, QWidget {{
                background-color: {background};
                color: {text};
                font-family: 'Segoe UI', 'Roboto', sans-serif;
                font-size: 14px;
            }}
            QPushButton {{
                background-color: {ColorPalette.BUTTON_SECONDARY_BG.get(theme)};
                border: 1px solid {border};
                border-radius: 4px;
                padding: 6px 12px;
            }}
            QPushButton:hover {{
                background-color: {ColorPalette.BUTTON_HOVER_BG.get(theme)};
            }}
            QPushButton:disabled {{
                color: {ColorPalette.TEXT_DISABLED.get(theme)};
            }}
            QLineEdit, QSpinBox {{
                border: 1px solid {border};
                border-radius: 4px;
                padding: 4px;
            }}
            QLineEdit:focus {{
                border: 1px solid {ColorPalette.BORDER_FOCUS.get(theme)};
            }}
            QProgressBar {{
                background-color: {ColorPalette.BACKGROUND_SECONDARY.get(theme)};
                border: 1px solid {border};
                border-radius: 4px;
                text-align: center;
            }}
            QProgressBar::chunk {{
                background-color: {ColorPalette.ACCENT_PRIMARY.get(theme)};
            }}
            QGroupBox {{
                border: 1px solid {border};
                border-radius: 6px;
                margin-top: 6px;
                padding-top: 10px;
            }}
        """

    @staticmethod
    def get_large_label_style() -> str:
        return "font-size: 16pt; font-weight: bold;"
