"""Construction defaults and value semantics of the card models."""

import pytest
from pydantic import ValidationError

from adaptive_card import (
    AdaptiveCard,
    ActionSet,
    Container,
    OpenUrlAction,
    SubmitAction,
    TextBlock,
    TextSize,
    Version,
)
from adaptive_card.models.common import Spacing
from adaptive_card.models.elements import width_auto, width_pixels, width_stretch, width_weight


class TestConstruction:
    def test_defaults(self):
        card = AdaptiveCard()
        assert card.type == "AdaptiveCard"
        assert card.version is Version.V1_6
        assert card.body == []
        assert card.actions == []
        assert card.schema_url is None
        assert card.msteams is None

    def test_only_overridden_fields_are_set(self):
        block = TextBlock(text="hi", size=TextSize.SMALL)
        assert block.type == "TextBlock"
        assert block.size is TextSize.SMALL
        assert block.weight is None
        assert block.wrap is None
        assert block.spacing is None

    def test_enum_fields_accept_tokens(self):
        block = TextBlock(text="hi", size="extraLarge", spacing="padding")
        assert block.size is TextSize.EXTRA_LARGE
        assert block.spacing is Spacing.PADDING

    def test_wrong_shape_is_rejected(self):
        with pytest.raises(ValidationError):
            TextBlock(text="hi", wrap="yes")
        with pytest.raises(ValidationError):
            TextBlock(text="hi", size="huge")
        with pytest.raises(ValidationError):
            TextBlock(wrap=True)

    def test_default_lists_are_not_shared(self):
        first, second = AdaptiveCard(), AdaptiveCard()
        assert first.body is not second.body

    def test_column_width_helpers(self):
        assert width_auto() == "auto"
        assert width_stretch() == "stretch"
        assert width_pixels(120) == "120px"
        assert width_weight(3) == 3


class TestValueSemantics:
    def test_models_are_frozen(self):
        card = AdaptiveCard()
        with pytest.raises(ValidationError):
            card.version = Version.V1_0
        block = TextBlock(text="hi")
        with pytest.raises(ValidationError):
            block.text = "changed"

    def test_equality_is_field_by_field(self):
        assert TextBlock(text="a", wrap=True) == TextBlock(text="a", wrap=True)
        assert TextBlock(text="a", wrap=True) != TextBlock(text="a", wrap=False)
        assert TextBlock(text="a") != TextBlock(text="a", wrap=False)

    def test_nested_equality(self):
        def build():
            return AdaptiveCard(
                body=[Container(items=[ActionSet(actions=[OpenUrlAction(url="https://example.com")])])],
                actions=[SubmitAction(data={"k": "v"})],
            )

        assert build() == build()

    def test_model_copy_leaves_original_untouched(self):
        card = AdaptiveCard(version=Version.V1_2)
        newer = card.model_copy(update={"version": Version.V1_5})
        assert card.version is Version.V1_2
        assert newer.version is Version.V1_5
