"""
AdaptiveCard: the root entity, plus the Teams host extension.
"""

from typing import ClassVar, Literal, Optional

from pydantic import Field, StrictStr

from adaptive_card.models.actions import Action, ShowCardAction
from adaptive_card.models.base import CardModel
from adaptive_card.models.common import MsTeamsWidth, VerticalContentAlignment, Version
from adaptive_card.models.elements import ActionSet, CardElement, Column, ColumnSet, Container

SCHEMA_URL = "http://adaptivecards.io/schemas/adaptive-card.json"


class MsTeams(CardModel):
    """Microsoft Teams specific card properties."""
    width: Optional[MsTeamsWidth] = None


class AdaptiveCard(CardModel):
    """
    A card: ``body`` renders top to bottom, ``actions`` as a row of controls
    underneath.

    Build it with only the fields you care about; everything else keeps its
    default: ``version`` is the latest known version, ``body`` and
    ``actions`` are empty, the rest is absent.
    """

    omit_when_empty: ClassVar[tuple[str, ...]] = ("actions",)

    type: Literal["AdaptiveCard"] = "AdaptiveCard"
    schema_url: Optional[StrictStr] = Field(default=None, alias="$schema")
    version: Version = Version.latest()
    body: list[CardElement] = Field(default_factory=list)
    actions: list[Action] = Field(default_factory=list)
    fallback_text: Optional[StrictStr] = None
    speak: Optional[StrictStr] = None
    lang: Optional[StrictStr] = None
    min_height: Optional[StrictStr] = None
    vertical_content_alignment: Optional[VerticalContentAlignment] = None
    msteams: Optional[MsTeams] = None

    def to_wire(self) -> dict:
        from adaptive_card.wire import to_wire
        return to_wire(self)

    @classmethod
    def from_wire(cls, doc: object) -> "AdaptiveCard":
        from adaptive_card.wire import from_wire
        return from_wire(doc)


# Resolve the cycles: ShowCard holds a card, containers hold elements.
for _model in (ShowCardAction, Container, Column, ColumnSet, ActionSet, AdaptiveCard):
    _model.model_rebuild()
