"""SGF screens: the main SGF settings and the syntax checking level details."""

from __future__ import annotations

from constants import (
    CUSTOM_SYNTAX_CHECKING_LEVEL,
    DEFAULT_SYNTAX_CHECKING_LEVEL,
    MAXIMUM_SYNTAX_CHECKING_LEVEL,
    MINIMUM_SYNTAX_CHECKING_LEVEL,
)
from controller.validators import parse_positive_number, validate_text_encoding
from model.enums import SgfEncodingMode, SgfLoadSuccessType
from model.preference import (
    ActionField,
    ChoiceField,
    LinkField,
    NumberListField,
    SwitchField,
    TextField,
    bound,
)
from model.screen import PreferenceGroup, PreferenceScreen
from model.settings import GoSettings, SgfSettingsModel

SYNTAX_CHECKING_LEVEL_NAMES = {
    1: "Minimal",
    2: "Medium",
    3: "Strict",
    4: "Maximum",
}

LOAD_SUCCESS_TYPE_LABELS = {
    SgfLoadSuccessType.NO_WARNINGS_OR_ERRORS: "No warnings/errors",
    SgfLoadSuccessType.NO_CRITICAL_WARNINGS_OR_ERRORS: "No critical warnings/errors",
    SgfLoadSuccessType.WITH_CRITICAL_WARNINGS_OR_ERRORS: "With critical warnings/errors",
}

ENCODING_MODE_LABELS = {
    SgfEncodingMode.SINGLE_ENCODING: "Single encoding",
    SgfEncodingMode.MULTIPLE_ENCODINGS: "Multiple encodings",
    SgfEncodingMode.BOTH: "Try both modes",
}


def syntax_checking_level_name(level: int) -> str:
    if level == CUSTOM_SYNTAX_CHECKING_LEVEL:
        return "Custom"
    return SYNTAX_CHECKING_LEVEL_NAMES[level]


def build_sgf_screen(settings: GoSettings) -> PreferenceScreen:
    sgf = settings.sgf

    def set_level(level: int) -> None:
        sgf.syntax_checking_level = level

    levels = list(range(MINIMUM_SYNTAX_CHECKING_LEVEL, MAXIMUM_SYNTAX_CHECKING_LEVEL + 1))
    recommended = syntax_checking_level_name(DEFAULT_SYNTAX_CHECKING_LEVEL)
    both = ENCODING_MODE_LABELS[SgfEncodingMode.BOTH]
    single = ENCODING_MODE_LABELS[SgfEncodingMode.SINGLE_ENCODING]
    multiple = ENCODING_MODE_LABELS[SgfEncodingMode.MULTIPLE_ENCODINGS]

    return PreferenceScreen("sgf", "Smart Game Format (SGF)", [
        PreferenceGroup("syntax-checking-level", [
            ChoiceField(
                "syntax-checking-level", "Syntax checking level",
                values=levels, labels=[syntax_checking_level_name(level) for level in levels],
                picker_footer=f'The recommended syntax checking level is "{recommended}".',
                unmatched=syntax_checking_level_name,
                getter=lambda: sgf.syntax_checking_level, setter=set_level,
                default=DEFAULT_SYNTAX_CHECKING_LEVEL,
            ),
            LinkField(
                "syntax-checking-details", "Advanced configuration",
                target=lambda: build_sgf_syntax_checking_level_screen(sgf),
            ),
        ], header="Syntax checking level"),
        PreferenceGroup("encoding", [
            ChoiceField(
                "encoding-mode", "Encoding mode",
                values=list(ENCODING_MODE_LABELS), labels=list(ENCODING_MODE_LABELS.values()),
                picker_title="Select the encoding mode",
                picker_footer=f'"{both}" first tries loading SGF data with "{single}" mode. If '
                              f'that fails with a fatal error it tries again with "{multiple}" '
                              f'mode.\n\nThe recommended encoding mode is "{both}".',
                **bound(sgf, "encoding_mode"),
            ),
            TextField(
                "default-encoding", "Default encoding",
                validator=validate_text_encoding, empty_display="<None>",
                **bound(sgf, "default_encoding"),
            ),
            TextField(
                "forced-encoding", "Forced encoding",
                validator=validate_text_encoding, empty_display="<None>",
                **bound(sgf, "forced_encoding"),
            ),
        ], header="Text encoding"),
        PreferenceGroup("other", [
            SwitchField(
                "reverse-variation-ordering", "Reverse variation ordering",
                **bound(sgf, "reverse_variation_ordering"),
            ),
        ], header="Other"),
    ])


def build_sgf_syntax_checking_level_screen(sgf: SgfSettingsModel) -> PreferenceScreen:
    """Details behind the syntax checking level; resets to the recommended level."""
    recommended = LOAD_SUCCESS_TYPE_LABELS[SgfLoadSuccessType.NO_CRITICAL_WARNINGS_OR_ERRORS]
    return PreferenceScreen("sgf-syntax-checking-level", "Syntax checking level", [
        PreferenceGroup("load-success-type", [
            ChoiceField(
                "load-success-type", "Load success type",
                values=list(LOAD_SUCCESS_TYPE_LABELS), labels=list(LOAD_SUCCESS_TYPE_LABELS.values()),
                picker_title="Select load success type",
                picker_footer=f'The recommended load success type is "{recommended}".',
                **bound(sgf, "load_success_type"),
            ),
        ], footer="What kinds of warning and/or error messages may be present for SGF data "
                  "to still be accepted and loaded."),
        PreferenceGroup("restrictive-checking", [
            SwitchField(
                "restrictive-checking", "Restrictive checking",
                **bound(sgf, "enable_restrictive_checking"),
            ),
        ], footer="Make parsing even more pedantic than usual. Enable this only to examine "
                  "SGF data for bad style or uncommon characteristics."),
        PreferenceGroup("disable-all-warnings", [
            SwitchField(
                "disable-all-warning-messages", "Disable all warning messages",
                **bound(sgf, "disable_all_warning_messages"),
            ),
        ], footer="Loading SGF data generates no warnings whatsoever. Use with care!"),
        PreferenceGroup("disabled-messages", [
            NumberListField(
                "disabled-messages", "Disabled messages",
                parse_entry=parse_positive_number,
                **bound(sgf, "disabled_messages"),
            ),
        ], footer="Numbers of specific warning and/or error messages that are not generated "
                  "when SGF data is loaded."),
        PreferenceGroup("reset", [
            ActionField(
                "reset-syntax-checking-level",
                resetter=sgf.reset_syntax_checking_level,
                confirm_message="This will reset the syntax checking level settings to a set "
                                "of default values. Any changes you have made will be discarded.",
            ),
        ]),
    ])
