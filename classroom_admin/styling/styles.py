"""Centralized Qt stylesheets for the console."""

from .color_palette import ColorPalette, Theme

class Styles:
    """Helper class to generate Qt stylesheets based on the current theme."""

    @staticmethod
    def get_main_window_style(theme: Theme = Theme.LIGHT) -> str:
        return f"""
            QMainWindow, QWidget {{
                background-color: {ColorPalette.BACKGROUND_PRIMARY.get(theme)};
                color: {ColorPalette.TEXT_PRIMARY.get(theme)};
                font-family: 'Segoe UI', 'Roboto', sans-serif;
                font-size: 14px;
            }}
            QPushButton {{
                background-color: {ColorPalette.BUTTON_SECONDARY_BG.get(theme)};
                border: 1px solid {ColorPalette.BORDER_PRIMARY.get(theme)};
                border-radius: 4px;
                padding: 6px 12px;
            }}
            QPushButton:hover {{
                background-color: {ColorPalette.BUTTON_HOVER_BG.get(theme)};
            }}
            QPushButton:checked {{
                background-color: {ColorPalette.BUTTON_PRIMARY_BG.get(theme)};
                color: {ColorPalette.BUTTON_PRIMARY_TEXT.get(theme)};
                border: 1px solid {ColorPalette.BUTTON_PRIMARY_BG.get(theme)};
            }}
            QPushButton:disabled {{
                color: {ColorPalette.TEXT_MUTED.get(theme)};
            }}
            QLineEdit, QSpinBox, QDoubleSpinBox {{
                border: 1px solid {ColorPalette.BORDER_PRIMARY.get(theme)};
                border-radius: 4px;
                padding: 4px;
            }}
            QTableWidget, QListWidget {{
                border: 1px solid {ColorPalette.BORDER_PRIMARY.get(theme)};
                border-radius: 4px;
                selection-background-color: {ColorPalette.BACKGROUND_SELECTED.get(theme)};
                selection-color: {ColorPalette.TEXT_PRIMARY.get(theme)};
            }}
            QGroupBox {{
                border: 1px solid {ColorPalette.BORDER_PRIMARY.get(theme)};
                border-radius: 6px;
                margin-top: 6px;
                padding-top: 10px;
            }}
            QGroupBox::title {{
                subcontrol-origin: margin;
                left: 10px;
                padding: 0 3px 0 3px;
            }}
        """

    @staticmethod
    def get_large_label_style() -> str:
        return "font-size: 16pt; font-weight: bold;"

    @staticmethod
    def get_action_button_style(danger: bool = False, theme: Theme = Theme.LIGHT) -> str:
        color = ColorPalette.DANGER if danger else ColorPalette.SUCCESS
        return (
            f"QPushButton {{ background-color: {color.get(theme)}; color: #FFFFFF; "
            f"border: none; border-radius: 4px; padding: 8px 18px; }}"
            f"QPushButton:disabled {{ background-color: {ColorPalette.BORDER_PRIMARY.get(theme)}; }}"
        )

    @staticmethod
    def get_message_style(error: bool, theme: Theme = Theme.LIGHT) -> str:
        if error:
            return (
                f"color: {ColorPalette.DANGER.get(theme)}; background-color: {ColorPalette.DANGER_SOFT.get(theme)}; "
                "padding: 6px 10px; border-radius: 4px;"
            )
        return (
            f"color: {ColorPalette.SUCCESS.get(theme)}; background-color: {ColorPalette.SUCCESS_SOFT.get(theme)}; "
            "padding: 6px 10px; border-radius: 4px;"
        )

    @staticmethod
    def get_hint_style(theme: Theme = Theme.LIGHT) -> str:
        return f"color: {ColorPalette.TEXT_MUTED.get(theme)}; font-size: 11px;"
