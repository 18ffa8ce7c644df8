"""
Input elements: collect values that submit-style actions send to the host.
"""

from typing import Literal, Optional, Union

from pydantic import StrictBool, StrictFloat, StrictInt, StrictStr

from adaptive_card.models.base import BaseElement, CardModel
from adaptive_card.models.common import ChoiceInputStyle, TextInputStyle


class BaseInput(BaseElement):
    id: StrictStr  # key of the collected value
    label: Optional[StrictStr] = None
    is_required: Optional[StrictBool] = None
    error_message: Optional[StrictStr] = None


class InputText(BaseInput):
    type: Literal["Input.Text"] = "Input.Text"
    is_multiline: Optional[StrictBool] = None
    max_length: Optional[StrictInt] = None
    placeholder: Optional[StrictStr] = None
    regex: Optional[StrictStr] = None
    style: Optional[TextInputStyle] = None
    value: Optional[StrictStr] = None


class InputNumber(BaseInput):
    type: Literal["Input.Number"] = "Input.Number"
    min: Optional[Union[StrictInt, StrictFloat]] = None
    max: Optional[Union[StrictInt, StrictFloat]] = None
    placeholder: Optional[StrictStr] = None
    value: Optional[Union[StrictInt, StrictFloat]] = None


class InputDate(BaseInput):
    """``min``, ``max`` and ``value`` are ISO-8601 dates (``YYYY-MM-DD``)."""
    type: Literal["Input.Date"] = "Input.Date"
    min: Optional[StrictStr] = None
    max: Optional[StrictStr] = None
    placeholder: Optional[StrictStr] = None
    value: Optional[StrictStr] = None


class InputTime(BaseInput):
    """``min``, ``max`` and ``value`` are ISO-8601 times (``HH:MM``)."""
    type: Literal["Input.Time"] = "Input.Time"
    min: Optional[StrictStr] = None
    max: Optional[StrictStr] = None
    placeholder: Optional[StrictStr] = None
    value: Optional[StrictStr] = None


class InputToggle(BaseInput):
    type: Literal["Input.Toggle"] = "Input.Toggle"
    title: StrictStr
    value: Optional[StrictStr] = None      # "true" / "false" unless value_on/value_off say otherwise
    value_on: Optional[StrictStr] = None
    value_off: Optional[StrictStr] = None
    wrap: Optional[StrictBool] = None


class Choice(CardModel):
    title: StrictStr
    value: StrictStr  # what gets submitted


class InputChoiceSet(BaseInput):
    """
    Single or multi select. For multi select ``value`` is a comma-separated
    list of the initially selected choice values.
    """
    type: Literal["Input.ChoiceSet"] = "Input.ChoiceSet"
    choices: Optional[list[Choice]] = None
    is_multi_select: Optional[StrictBool] = None
    style: Optional[ChoiceInputStyle] = None
    value: Optional[StrictStr] = None
    placeholder: Optional[StrictStr] = None
    wrap: Optional[StrictBool] = None
