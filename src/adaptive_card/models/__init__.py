from adaptive_card.models.actions import (
    Action,
    ExecuteAction,
    OpenUrlAction,
    ShowCardAction,
    SubmitAction,
    ToggleVisibilityAction,
)
from adaptive_card.models.card import SCHEMA_URL, AdaptiveCard, MsTeams
from adaptive_card.models.common import (
    ActionMode,
    ActionStyle,
    AssociatedInputs,
    ChoiceInputStyle,
    Color,
    ContainerStyle,
    FontType,
    Height,
    HorizontalAlignment,
    ImageSize,
    ImageStyle,
    MsTeamsWidth,
    Spacing,
    TextBlockStyle,
    TextInputStyle,
    TextSize,
    TextWeight,
    VerticalContentAlignment,
    Version,
)
from adaptive_card.models.elements import (
    ActionSet,
    CardElement,
    Column,
    ColumnSet,
    ColumnWidth,
    Container,
    Fact,
    FactSet,
    Image,
    ImageSet,
    TextBlock,
    width_auto,
    width_pixels,
    width_stretch,
    width_weight,
)
from adaptive_card.models.inputs import (
    Choice,
    InputChoiceSet,
    InputDate,
    InputNumber,
    InputText,
    InputTime,
    InputToggle,
)
