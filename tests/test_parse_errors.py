"""from_wire failure taxonomy and error paths."""

import logging

import pytest

from adaptive_card import (
    MissingFieldError,
    ParseError,
    TypeMismatchError,
    UnknownEnumValueError,
    UnknownVariantError,
    from_json,
    from_wire,
)


def card(*body, **extra):
    doc = {"type": "AdaptiveCard", "version": "1.3", "body": list(body)}
    doc.update(extra)
    return doc


class TestUnknownVariant:
    def test_unknown_element_type_names_its_index(self):
        with pytest.raises(UnknownVariantError) as exc:
            from_wire(card({"type": "Carousel", "pages": []}))
        assert exc.value.path == "body[0]"
        assert exc.value.variant == "Carousel"
        assert exc.value.code == "unknown_variant"

    def test_unknown_element_after_valid_ones(self):
        with pytest.raises(UnknownVariantError) as exc:
            from_wire(card({"type": "TextBlock", "text": "ok"}, {"type": "TextBlock", "text": "ok"}, {"type": "Rating"}))
        assert exc.value.path == "body[2]"

    def test_unknown_action_type(self):
        with pytest.raises(UnknownVariantError) as exc:
            from_wire(card(actions=[{"type": "Action.Http", "url": "https://example.com"}]))
        assert exc.value.path == "actions[0]"

    def test_unknown_type_nested_in_container(self):
        doc = card({"type": "Container", "items": [{"type": "TextBlock", "text": "a"}, {"type": "Media"}]})
        with pytest.raises(UnknownVariantError) as exc:
            from_wire(doc)
        assert exc.value.path == "body[0].items[1]"

    def test_element_type_is_case_sensitive(self):
        with pytest.raises(UnknownVariantError):
            from_wire(card({"type": "textblock", "text": "a"}))

    def test_wrong_root_type(self):
        with pytest.raises(UnknownVariantError) as exc:
            from_wire({"type": "HeroCard", "body": []})
        assert exc.value.path == "type"


class TestMissingField:
    def test_text_is_required(self):
        with pytest.raises(MissingFieldError) as exc:
            from_wire(card({"type": "TextBlock", "wrap": True}))
        assert exc.value.path == "body[0].text"

    def test_url_is_required_on_open_url(self):
        with pytest.raises(MissingFieldError) as exc:
            from_wire(card(actions=[{"type": "Action.OpenUrl", "title": "Go"}]))
        assert exc.value.path == "actions[0].url"

    def test_missing_discriminator(self):
        with pytest.raises(MissingFieldError) as exc:
            from_wire(card({"text": "no type"}))
        assert exc.value.path == "body[0].type"

    def test_show_card_requires_card(self):
        with pytest.raises(MissingFieldError) as exc:
            from_wire(card(actions=[{"type": "Action.ShowCard", "title": "More"}]))
        assert exc.value.path == "actions[0].card"

    def test_input_requires_id(self):
        with pytest.raises(MissingFieldError) as exc:
            from_wire(card({"type": "Input.Text", "label": "Name"}))
        assert exc.value.path == "body[0].id"


class TestTypeMismatch:
    def test_string_where_boolean_expected(self):
        with pytest.raises(TypeMismatchError) as exc:
            from_wire(card({"type": "TextBlock", "text": "a", "wrap": "true"}))
        assert exc.value.path == "body[0].wrap"
        assert exc.value.expected == "boolean"

    def test_number_where_string_expected(self):
        with pytest.raises(TypeMismatchError) as exc:
            from_wire(card({"type": "TextBlock", "text": 42}))
        assert exc.value.path == "body[0].text"
        assert exc.value.expected == "string"

    def test_body_must_be_a_list(self):
        with pytest.raises(TypeMismatchError) as exc:
            from_wire({"type": "AdaptiveCard", "body": {"type": "TextBlock"}})
        assert exc.value.path == "body"
        assert exc.value.expected == "array"

    def test_document_must_be_an_object(self):
        with pytest.raises(TypeMismatchError) as exc:
            from_wire(["not", "a", "card"])
        assert exc.value.path == "$"

    def test_column_width_accepts_number_or_string_only(self):
        doc = card({"type": "ColumnSet", "columns": [{"type": "Column", "width": True, "items": []}]})
        with pytest.raises(TypeMismatchError) as exc:
            from_wire(doc)
        assert exc.value.path == "body[0].columns[0].width"
        assert "integer" in exc.value.expected
        assert "string" in exc.value.expected

    def test_invalid_json_text(self):
        with pytest.raises(TypeMismatchError) as exc:
            from_json("{not json")
        assert exc.value.path == "$"

    def test_invalid_utf8_bytes(self):
        with pytest.raises(TypeMismatchError) as exc:
            from_json(b'{"type": "AdaptiveCard", "body": [{"type": "TextBlock", "text": "\xff"}]}')
        assert exc.value.path == "$"
        assert isinstance(exc.value.__cause__, UnicodeDecodeError)

    def test_number_where_enum_token_expected(self):
        with pytest.raises(TypeMismatchError) as exc:
            from_wire({"type": "AdaptiveCard", "version": 1.3, "body": []})
        assert exc.value.path == "version"
        assert exc.value.expected == "string"


class TestUnknownEnumValue:
    def test_unknown_text_size(self):
        with pytest.raises(UnknownEnumValueError) as exc:
            from_wire(card({"type": "TextBlock", "text": "a"}, {"type": "TextBlock", "text": "b", "size": "huge"}))
        assert exc.value.path == "body[1].size"
        assert exc.value.value == "huge"

    def test_enum_tokens_are_case_sensitive(self):
        with pytest.raises(UnknownEnumValueError) as exc:
            from_wire(card({"type": "TextBlock", "text": "a", "weight": "Bolder"}))
        assert exc.value.path == "body[0].weight"

    def test_unknown_version(self):
        with pytest.raises(UnknownEnumValueError) as exc:
            from_wire({"type": "AdaptiveCard", "version": "9.9", "body": []})
        assert exc.value.path == "version"

    def test_nested_in_show_card(self):
        doc = card(actions=[{
            "type": "Action.ShowCard",
            "card": {"type": "AdaptiveCard", "body": [{"type": "Image", "url": "x", "size": "giant"}]},
        }])
        with pytest.raises(UnknownEnumValueError) as exc:
            from_wire(doc)
        assert exc.value.path == "actions[0].card.body[0].size"


def test_errors_are_parse_errors_with_cause():
    with pytest.raises(ParseError) as exc:
        from_wire(card({"type": "Carousel"}))
    assert exc.value.__cause__ is not None
    assert str(exc.value).startswith("body[0]: ")


def test_rejection_is_logged_at_debug(caplog):
    with caplog.at_level(logging.DEBUG, logger="adaptive_card.wire"):
        with pytest.raises(UnknownEnumValueError):
            from_wire(card({"type": "TextBlock", "text": "a", "size": "huge"}))
    assert "body[0].size" in caplog.text
    assert "unknown_enum_value" in caplog.text
