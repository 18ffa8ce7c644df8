"""
adaptive-card: typed Adaptive Card documents for Python.

Build cards from pydantic models and convert them to and from the JSON
wire format that Adaptive Card renderers consume.
"""

from adaptive_card.errors import (
    AdaptiveCardError,
    ParseError,
    UnknownVariantError,
    MissingFieldError,
    TypeMismatchError,
    UnknownEnumValueError,
)
from adaptive_card.models import (
    SCHEMA_URL,
    AdaptiveCard,
    MsTeams,
    Version,
    TextBlock,
    Image,
    ImageSet,
    FactSet,
    Fact,
    Container,
    ColumnSet,
    Column,
    ActionSet,
    InputText,
    InputNumber,
    InputDate,
    InputTime,
    InputToggle,
    InputChoiceSet,
    Choice,
    OpenUrlAction,
    SubmitAction,
    ShowCardAction,
    ToggleVisibilityAction,
    ExecuteAction,
    TextSize,
    TextWeight,
)
from adaptive_card.wire import to_wire, from_wire, to_json, from_json

__version__ = "0.1.0"
__all__ = [
    "SCHEMA_URL",
    "AdaptiveCard",
    "MsTeams",
    "Version",
    "TextBlock",
    "Image",
    "ImageSet",
    "FactSet",
    "Fact",
    "Container",
    "ColumnSet",
    "Column",
    "ActionSet",
    "InputText",
    "InputNumber",
    "InputDate",
    "InputTime",
    "InputToggle",
    "InputChoiceSet",
    "Choice",
    "OpenUrlAction",
    "SubmitAction",
    "ShowCardAction",
    "ToggleVisibilityAction",
    "ExecuteAction",
    "TextSize",
    "TextWeight",
    "to_wire",
    "from_wire",
    "to_json",
    "from_json",
    "AdaptiveCardError",
    "ParseError",
    "UnknownVariantError",
    "MissingFieldError",
    "TypeMismatchError",
    "UnknownEnumValueError",
]
