"""
Theme definitions for the picker widget.
"""
from dataclasses import dataclass


class Colors:
    # Primary Colors
    PRIMARY_BLUE = "#0364B8"

    # Backgrounds
    SURFACE = "#ffffff"

    # Text
    TEXT_PRIMARY = "#1f1f1f"
    TEXT_SECONDARY = "#666666"

    # Dividers
    DIVIDER = "#eeeeee"

    # Selection
    SELECTION_BG = "#F0F9FF"
    SELECTION_TEXT = "#1f1f1f"


class ColorsDark:
    """Dark theme color palette."""

    PRIMARY_BLUE = "#4A9EFF"

    SURFACE = "#161B22"

    TEXT_PRIMARY = "#E6EDF3"
    TEXT_SECONDARY = "#8B949E"

    DIVIDER = "#21262D"

    SELECTION_BG = "#1F3A5F"
    SELECTION_TEXT = "#E6EDF3"


class Fonts:
    UI_FONT = "-apple-system, 'SF Pro Text', 'Segoe UI', Roboto, Helvetica, Arial, sans-serif"
    TITLE = "14pt"
    ITEM = "16pt"


_is_dark_mode = False


def set_dark_mode(enabled: bool) -> None:
    """Switch the palette returned by get_colors()."""
    global _is_dark_mode
    _is_dark_mode = enabled


def get_colors():
    """Get the appropriate color palette based on current theme."""
    return ColorsDark if _is_dark_mode else Colors


@dataclass(frozen=True)
class PickerTheme:
    """
    Sizes and colours of the picker (immutable).

    Colours left as None follow the active palette from get_colors().

    Attributes:
        picker_height: Height of the column area in pixels
        title_height: Height of the title bar in pixels
        item_height: Height of one column item in pixels
        show_title: Whether the cancel/value/confirm title bar is shown
        background_color: Column area background
        item_text_color: Column item text
        confirm_text_color: Confirm button text
        cancel_text_color: Cancel button text
    """

    picker_height: int = 210
    title_height: int = 44
    item_height: int = 36
    show_title: bool = True
    background_color: str | None = None
    item_text_color: str | None = None
    confirm_text_color: str | None = None
    cancel_text_color: str | None = None

    def __post_init__(self) -> None:
        """Validate sizes on construction."""
        for name in ("picker_height", "title_height", "item_height"):
            if getattr(self, name) <= 0:
                raise ValueError(f"{name} must be positive: {getattr(self, name)}")

    @property
    def total_height(self) -> int:
        """Column area plus the title bar when shown."""
        if self.show_title:
            return self.picker_height + self.title_height
        return self.picker_height

    def stylesheet(self) -> str:
        """Qt stylesheet for DateTimePickerWidget."""
        colors = get_colors()
        background = self.background_color or colors.SURFACE
        text = self.item_text_color or colors.TEXT_PRIMARY
        confirm = self.confirm_text_color or colors.PRIMARY_BLUE
        cancel = self.cancel_text_color or colors.TEXT_SECONDARY
        return f"""
            DateTimePickerWidget {{
                background-color: {background};
                font-family: {Fonts.UI_FONT};
            }}
            QListWidget {{
                background-color: {background};
                color: {text};
                border: none;
                font-size: {Fonts.ITEM};
                outline: 0;
            }}
            QListWidget::item:selected {{
                background-color: {colors.SELECTION_BG};
                color: {colors.SELECTION_TEXT};
                border-top: 1px solid {colors.DIVIDER};
                border-bottom: 1px solid {colors.DIVIDER};
            }}
            QLabel#pickerTitle {{
                color: {colors.TEXT_PRIMARY};
                font-size: {Fonts.TITLE};
            }}
            QPushButton#pickerConfirm {{
                color: {confirm};
                border: none;
                font-weight: bold;
            }}
            QPushButton#pickerCancel {{
                color: {cancel};
                border: none;
            }}
        """


DEFAULT_THEME = PickerTheme()
