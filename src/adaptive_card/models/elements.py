"""
Card elements: the building blocks of a card body.

``CardElement`` is a closed union keyed on the wire ``type``; containers own
their children outright and nothing points back at a parent.
"""

from __future__ import annotations

from typing import Annotated, Literal, Optional, Union

from pydantic import Field, StrictBool, StrictInt, StrictStr

from adaptive_card.models.actions import Action
from adaptive_card.models.base import BaseElement, CardModel
from adaptive_card.models.common import (
    Color,
    ContainerStyle,
    FontType,
    HorizontalAlignment,
    ImageSize,
    ImageStyle,
    Spacing,
    TextBlockStyle,
    TextSize,
    TextWeight,
    VerticalContentAlignment,
)
from adaptive_card.models.inputs import (
    InputChoiceSet,
    InputDate,
    InputNumber,
    InputText,
    InputTime,
    InputToggle,
)


class TextBlock(BaseElement):
    type: Literal["TextBlock"] = "TextBlock"
    size: Optional[TextSize] = None
    weight: Optional[TextWeight] = None
    text: StrictStr
    wrap: Optional[StrictBool] = None  # renderers treat absent as false
    is_subtle: Optional[StrictBool] = None
    color: Optional[Color] = None
    font_type: Optional[FontType] = None
    horizontal_alignment: Optional[HorizontalAlignment] = None
    max_lines: Optional[StrictInt] = None
    style: Optional[TextBlockStyle] = None


class Image(BaseElement):
    type: Literal["Image"] = "Image"
    url: StrictStr
    size: Optional[ImageSize] = None
    style: Optional[ImageStyle] = None
    alt_text: Optional[StrictStr] = None
    horizontal_alignment: Optional[HorizontalAlignment] = None


class ImageSet(BaseElement):
    type: Literal["ImageSet"] = "ImageSet"
    images: list[Image]
    image_size: Optional[ImageSize] = None


class Fact(CardModel):
    title: StrictStr
    value: StrictStr


class FactSet(BaseElement):
    """A list of title/value pairs rendered as a two-column table."""
    type: Literal["FactSet"] = "FactSet"
    facts: list[Fact]


class Container(BaseElement):
    type: Literal["Container"] = "Container"
    style: Optional[ContainerStyle] = None
    items: list[CardElement]
    vertical_content_alignment: Optional[VerticalContentAlignment] = None
    bleed: Optional[StrictBool] = None
    min_height: Optional[StrictStr] = None  # e.g. "80px"


# Relative weight (int) or "auto" / "stretch" / "<n>px".
ColumnWidth = Union[StrictInt, StrictStr]


def width_auto() -> ColumnWidth:
    return "auto"


def width_stretch() -> ColumnWidth:
    return "stretch"


def width_pixels(px: int) -> ColumnWidth:
    return f"{px}px"


def width_weight(w: int) -> ColumnWidth:
    return w


class Column(CardModel):
    """One column of a ColumnSet. Not a body element on its own."""
    type: Literal["Column"] = "Column"
    width: Optional[ColumnWidth] = None
    items: list[CardElement]
    id: Optional[StrictStr] = None
    style: Optional[ContainerStyle] = None
    vertical_content_alignment: Optional[VerticalContentAlignment] = None
    spacing: Optional[Spacing] = None
    separator: Optional[StrictBool] = None
    is_visible: Optional[StrictBool] = None


class ColumnSet(BaseElement):
    type: Literal["ColumnSet"] = "ColumnSet"
    columns: list[Column]
    style: Optional[ContainerStyle] = None
    horizontal_alignment: Optional[HorizontalAlignment] = None
    bleed: Optional[StrictBool] = None


class ActionSet(BaseElement):
    """Actions placed inline in the body rather than in the card's action row."""
    type: Literal["ActionSet"] = "ActionSet"
    actions: list[Action]


CardElement = Annotated[
    Union[
        TextBlock,
        Image,
        ImageSet,
        FactSet,
        Container,
        ColumnSet,
        ActionSet,
        InputText,
        InputNumber,
        InputDate,
        InputTime,
        InputToggle,
        InputChoiceSet,
    ],
    Field(discriminator="type"),
]
