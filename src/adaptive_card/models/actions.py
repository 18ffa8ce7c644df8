"""
Action models: user-triggerable intents. They declare, never execute.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Annotated, Any, Literal, Optional, Union

from pydantic import Field, StrictBool, StrictStr

from adaptive_card.models.base import CardModel
from adaptive_card.models.common import ActionMode, ActionStyle, AssociatedInputs

if TYPE_CHECKING:
    from adaptive_card.models.card import AdaptiveCard


class BaseAction(CardModel):
    title: Optional[StrictStr] = None
    id: Optional[StrictStr] = None
    icon_url: Optional[StrictStr] = None
    style: Optional[ActionStyle] = None
    tooltip: Optional[StrictStr] = None  # shown on hover
    is_enabled: Optional[StrictBool] = None
    mode: Optional[ActionMode] = None


class OpenUrlAction(BaseAction):
    type: Literal["Action.OpenUrl"] = "Action.OpenUrl"
    url: StrictStr


class SubmitAction(BaseAction):
    """Gathers input values, merges them with ``data`` and hands them to the host."""
    type: Literal["Action.Submit"] = "Action.Submit"
    data: Optional[Any] = None
    associated_inputs: Optional[AssociatedInputs] = None


class ShowCardAction(BaseAction):
    type: Literal["Action.ShowCard"] = "Action.ShowCard"
    card: AdaptiveCard


class ToggleVisibilityAction(BaseAction):
    type: Literal["Action.ToggleVisibility"] = "Action.ToggleVisibility"
    target_elements: list[StrictStr]


class ExecuteAction(BaseAction):
    """Universal action (1.4+): ``verb`` and ``data`` go to the bot as an invoke."""
    type: Literal["Action.Execute"] = "Action.Execute"
    verb: Optional[StrictStr] = None
    data: Optional[Any] = None
    associated_inputs: Optional[AssociatedInputs] = None


Action = Annotated[
    Union[OpenUrlAction, SubmitAction, ShowCardAction, ToggleVisibilityAction, ExecuteAction],
    Field(discriminator="type"),
]
