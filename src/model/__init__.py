"""Model classes for goprefs: settings models, preference fields and edits."""

from model.setting import Setting, SettingsBase
from model.settings import (
    BoardPositionModel,
    BoardSetupModel,
    BoardViewModel,
    GameVariationModel,
    GoSettings,
    GtpEngineProfile,
    MarkupModel,
    NodeTreeViewModel,
    Player,
    PlayerInGameError,
    PlayModel,
    ScoringModel,
    SgfSettingsModel,
    TouchModel,
)
from model.preference import (
    NO_DEFAULT,
    ActionField,
    ChoiceField,
    LinkField,
    NumberListField,
    PreferenceField,
    SliderField,
    SwitchField,
    TextField,
    ValueKind,
    bound,
)
from model.screen import PreferenceGroup, PreferenceScreen
from model.edits import (
    Cancel,
    Edit,
    EnterText,
    ListDelete,
    ListEntry,
    ListMove,
    Pick,
    SlideTo,
    Toggle,
)

__all__ = [
    # Settings
    "Setting",
    "SettingsBase",
    "BoardPositionModel",
    "BoardSetupModel",
    "BoardViewModel",
    "GameVariationModel",
    "GoSettings",
    "GtpEngineProfile",
    "MarkupModel",
    "NodeTreeViewModel",
    "Player",
    "PlayerInGameError",
    "PlayModel",
    "ScoringModel",
    "SgfSettingsModel",
    "TouchModel",
    # Preference fields
    "NO_DEFAULT",
    "ActionField",
    "ChoiceField",
    "LinkField",
    "NumberListField",
    "PreferenceField",
    "SliderField",
    "SwitchField",
    "TextField",
    "ValueKind",
    "bound",
    "PreferenceGroup",
    "PreferenceScreen",
    # Edits
    "Cancel",
    "Edit",
    "EnterText",
    "ListDelete",
    "ListEntry",
    "ListMove",
    "Pick",
    "SlideTo",
    "Toggle",
]
