"""
Enumerated values: each member's value is its exact wire token.
"""

from enum import Enum


class Version(str, Enum):
    V1_0 = "1.0"
    V1_1 = "1.1"
    V1_2 = "1.2"
    V1_3 = "1.3"
    V1_4 = "1.4"
    V1_5 = "1.5"
    V1_6 = "1.6"

    @classmethod
    def latest(cls) -> "Version":
        return cls.V1_6


class TextSize(str, Enum):
    DEFAULT = "default"
    SMALL = "small"
    MEDIUM = "medium"
    LARGE = "large"
    EXTRA_LARGE = "extraLarge"


class TextWeight(str, Enum):
    DEFAULT = "default"
    LIGHTER = "lighter"
    BOLDER = "bolder"


class Color(str, Enum):
    """Controls the color of text elements."""
    DEFAULT = "default"
    DARK = "dark"
    LIGHT = "light"
    ACCENT = "accent"
    GOOD = "good"
    WARNING = "warning"
    ATTENTION = "attention"


class HorizontalAlignment(str, Enum):
    LEFT = "left"
    CENTER = "center"
    RIGHT = "right"


class VerticalContentAlignment(str, Enum):
    TOP = "top"
    CENTER = "center"
    BOTTOM = "bottom"


class Height(str, Enum):
    AUTO = "auto"        # sized by content
    STRETCH = "stretch"  # fills available space


class FontType(str, Enum):
    DEFAULT = "default"
    MONOSPACE = "monospace"


class TextBlockStyle(str, Enum):
    """``heading`` marks a TextBlock as a heading for accessibility."""
    DEFAULT = "default"
    HEADING = "heading"


class ContainerStyle(str, Enum):
    DEFAULT = "default"
    EMPHASIS = "emphasis"
    GOOD = "good"
    ATTENTION = "attention"
    WARNING = "warning"
    ACCENT = "accent"


class Spacing(str, Enum):
    NONE = "none"
    SMALL = "small"
    DEFAULT = "default"
    MEDIUM = "medium"
    LARGE = "large"
    EXTRA_LARGE = "extraLarge"
    PADDING = "padding"


class ImageSize(str, Enum):
    AUTO = "auto"
    STRETCH = "stretch"
    SMALL = "small"
    MEDIUM = "medium"
    LARGE = "large"


class ImageStyle(str, Enum):
    DEFAULT = "default"
    PERSON = "person"  # cropped to a circle


class ActionStyle(str, Enum):
    DEFAULT = "default"
    POSITIVE = "positive"
    DESTRUCTIVE = "destructive"


class ActionMode(str, Enum):
    """``secondary`` actions are placed in an overflow menu."""
    PRIMARY = "primary"
    SECONDARY = "secondary"


class AssociatedInputs(str, Enum):
    """Which inputs a submit-style action validates and sends.

    Published capitalised, unlike the other enums.
    """
    AUTO = "Auto"
    NONE = "None"


class TextInputStyle(str, Enum):
    TEXT = "text"
    TEL = "tel"
    URL = "url"
    EMAIL = "email"
    PASSWORD = "password"


class ChoiceInputStyle(str, Enum):
    COMPACT = "compact"    # dropdown
    EXPANDED = "expanded"  # radio buttons / checkboxes
    FILTERED = "filtered"  # 1.5+


class MsTeamsWidth(str, Enum):
    FULL = "full"
