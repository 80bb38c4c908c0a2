"""Centralized styles and font definitions for the application."""

from kvizoteka.core.view_state import AnswerMark

from .color_palette import ColorPalette, Theme


class Styles:
    """Helper class to generate Qt stylesheets based on the current theme."""

    @staticmethod
    def get_main_window_style(theme: Theme = Theme.DARK) -> str:
        return f"""
            QMainWindow {{
                background-color: {ColorPalette.BACKGROUND_PRIMARY.get(theme)};
                color: {ColorPalette.TEXT_PRIMARY.get(theme)};
            }}
            QWidget {{
                background-color: {ColorPalette.BACKGROUND_PRIMARY.get(theme)};
                color: {ColorPalette.TEXT_PRIMARY.get(theme)};
                font-family: 'Segoe UI', 'Roboto', sans-serif;
                font-size: 14px;
            }}
            QLabel {{
                color: {ColorPalette.TEXT_PRIMARY.get(theme)};
            }}
            QPushButton {{
                background-color: {ColorPalette.ACCENT_PRIMARY.get(theme)};
                color: {ColorPalette.BUTTON_PRIMARY_TEXT.get(theme)};
                border: none;
                border-radius: 8px;
                padding: 10px 18px;
            }}
            QPushButton:disabled {{
                background-color: {ColorPalette.BORDER_PRIMARY.get(theme)};
                color: {ColorPalette.TEXT_SECONDARY.get(theme)};
            }}
            QProgressBar {{
                background-color: {ColorPalette.BACKGROUND_CARD.get(theme)};
                border: none;
                border-radius: 4px;
                height: 8px;
            }}
            QProgressBar::chunk {{
                background-color: {ColorPalette.ACCENT_PRIMARY.get(theme)};
                border-radius: 4px;
            }}
        """

    @staticmethod
    def get_answer_button_style(mark: AnswerMark, theme: Theme = Theme.DARK) -> str:
        border = "transparent"
        if mark is AnswerMark.CORRECT:
            border = ColorPalette.CORRECT.get(theme)
        elif mark is AnswerMark.WRONG:
            border = ColorPalette.WRONG.get(theme)
        return f"""
            QPushButton {{
                background-color: {ColorPalette.ANSWER_NEUTRAL_BG.get(theme)};
                color: {ColorPalette.TEXT_PRIMARY.get(theme)};
                border: 2px solid {border};
                border-radius: 10px;
                padding: 14px;
                text-align: left;
            }}
            QPushButton:disabled {{
                background-color: {ColorPalette.ANSWER_NEUTRAL_BG.get(theme)};
                color: {ColorPalette.TEXT_PRIMARY.get(theme)};
            }}
        """

    @staticmethod
    def get_large_label_style() -> str:
        return "font-size: 16pt; font-weight: bold;"

    @staticmethod
    def get_icon_label_style() -> str:
        return "font-size: 48pt;"

    @staticmethod
    def get_secondary_label_style(theme: Theme = Theme.DARK) -> str:
        return f"color: {ColorPalette.TEXT_SECONDARY.get(theme)};"

    @staticmethod
    def get_error_label_style(theme: Theme = Theme.DARK) -> str:
        return f"color: {ColorPalette.WRONG.get(theme)};"
