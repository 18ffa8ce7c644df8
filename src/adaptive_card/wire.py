"""
Wire codec: AdaptiveCard values to and from the JSON document form.

``to_wire``/``from_wire`` work on already-decoded documents (dicts and
lists); ``to_json``/``from_json`` are thin conveniences over the ``json``
module for callers that hold text.
"""

import json
import logging
from typing import Any, Optional, Union

from pydantic import ValidationError

from adaptive_card.errors import (
    MissingFieldError,
    ParseError,
    TypeMismatchError,
    UnknownEnumValueError,
    UnknownVariantError,
)
from adaptive_card.models.card import AdaptiveCard

logger = logging.getLogger(__name__)

ROOT_PATH = "$"

# pydantic error type -> what the wire should have held
EXPECTED_SHAPES = {
    "bool_type": "boolean",
    "string_type": "string",
    "int_type": "integer",
    "int_from_float": "integer",
    "float_type": "number",
    "list_type": "array",
    "dict_type": "object",
    "model_type": "object",
    "model_attributes_type": "object",
}


def to_wire(card: AdaptiveCard) -> dict[str, Any]:
    """Serialize a card; absent fields are left out entirely, never sent as null."""
    return card.model_dump(mode="json", by_alias=True, exclude_none=True)


def from_wire(doc: Any) -> AdaptiveCard:
    """Rebuild a card from a decoded wire document.

    Keys are looked up by wire name only, so snake_case field names are
    ignored like any unknown key. Absent optional fields take their defaults.
    Raises a ``ParseError`` subclass naming the path of the first offending
    value.
    """
    try:
        return AdaptiveCard.model_validate(doc, by_alias=True, by_name=False)
    except ValidationError as e:
        error = translate_error(doc, e)
        logger.debug("Rejected card document at %s: %s", error.path, error.code)
        raise error from e


def to_json(card: AdaptiveCard, indent: Optional[int] = None) -> str:
    return json.dumps(to_wire(card), indent=indent, ensure_ascii=False)


def from_json(text: Union[str, bytes]) -> AdaptiveCard:
    try:
        doc = json.loads(text)
    except (json.JSONDecodeError, UnicodeDecodeError) as e:
        raise TypeMismatchError(ROOT_PATH, "a JSON document", details={"error": str(e)}) from e
    return from_wire(doc)


def _walk(doc: Any, loc: tuple[Union[int, str], ...], missing: bool = False) -> tuple[str, Any]:
    path = ""
    node = doc
    for i, seg in enumerate(loc):
        if isinstance(seg, int) and isinstance(node, list) and 0 <= seg < len(node):
            path += f"[{seg}]"
            node = node[seg]
        elif isinstance(seg, str) and isinstance(node, dict) and seg in node:
            path += f".{seg}" if path else seg
            node = node[seg]
        elif missing and i == len(loc) - 1:
            path += f".{seg}" if path else str(seg)
    return path or ROOT_PATH, node


def field_path(doc: Any, loc: tuple[Union[int, str], ...], missing: bool = False) -> str:
    """Render a pydantic error location as ``body[2].size``.

    Segments that don't exist in the document (union tags such as
    ``TextBlock`` or ``int``) are skipped; a missing field keeps its name.
    """
    return _walk(doc, loc, missing)[0]


def translate_error(doc: Any, exc: ValidationError) -> ParseError:
    errors = exc.errors()
    first = errors[0]
    kind = first["type"]
    details = {"errors": len(errors)}

    if kind == "missing":
        return MissingFieldError(field_path(doc, first["loc"], missing=True), details=details)

    path, node = _walk(doc, first["loc"])
    if kind == "union_tag_not_found":
        if not isinstance(node, dict):
            return TypeMismatchError(path, "object", details=details)
        return MissingFieldError(f"{path}.type" if path != ROOT_PATH else "type", details=details)
    if kind == "union_tag_invalid":
        return UnknownVariantError(path, first.get("ctx", {}).get("tag"), details=details)
    if kind == "literal_error":
        return UnknownVariantError(path, first.get("input"), details=details)
    if kind == "enum":
        if not isinstance(first.get("input"), str):
            return TypeMismatchError(path, "string", details=details)
        return UnknownEnumValueError(path, first.get("input"), details=details)

    # A union of scalars reports one error per member at the same place.
    expected = []
    for err in errors:
        if field_path(doc, err["loc"]) != path:
            continue
        shape = EXPECTED_SHAPES.get(err["type"], err["msg"])
        if shape not in expected:
            expected.append(shape)
    return TypeMismatchError(path, " or ".join(expected), details=details)
