"""
Shared model base for every card entity.
"""

from typing import Any, ClassVar, Optional

from pydantic import BaseModel, SerializerFunctionWrapHandler, StrictBool, StrictStr, model_serializer
from pydantic.alias_generators import to_camel

from adaptive_card.models.common import Height, Spacing


class CardModel(BaseModel):
    """Python field names in, camelCase wire keys out.

    Instances are frozen. Absent optional fields are ``None`` and are dropped
    by ``to_wire``; ``type`` always leads the serialized object. Wire keys
    listed in ``omit_when_empty`` are dropped when they hold an empty list.
    """

    model_config = {
        "alias_generator": to_camel,
        "populate_by_name": True,
        "frozen": True,
    }

    omit_when_empty: ClassVar[tuple[str, ...]] = ()

    @model_serializer(mode="wrap")
    def serialize_type_first(self, handler: SerializerFunctionWrapHandler) -> Any:
        data = handler(self)
        if not isinstance(data, dict):
            return data
        for key in self.omit_when_empty:
            if data.get(key) == []:
                del data[key]
        if "type" in data:
            data = {"type": data.pop("type"), **data}
        return data


class BaseElement(CardModel):
    """Fields every body element accepts."""
    id: Optional[StrictStr] = None
    spacing: Optional[Spacing] = None
    separator: Optional[StrictBool] = None  # line above the element
    height: Optional[Height] = None
    is_visible: Optional[StrictBool] = None
