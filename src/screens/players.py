"""Player screen: name, human/computer and the engine profile of a computer player."""

from __future__ import annotations

from controller.validators import validate_name
from model.preference import ChoiceField, SwitchField, TextField
from model.screen import PreferenceGroup, PreferenceScreen
from model.settings import GoSettings, Player


def build_player_screen(settings: GoSettings, player: Player) -> PreferenceScreen:
    """Edit one player.

    The "Human player" switch is read-only while the player takes part in the
    current game. The engine profile group exists only for computer players.
    """
    return PreferenceScreen("player", "Edit player", [
        PreferenceGroup("name", [
            TextField(
                "player-name", "Player name",
                validator=validate_name, placeholder="Player name",
                getter=lambda: player.name, setter=lambda name: setattr(player, "name", name),
            ),
        ], header="Player name"),
        PreferenceGroup("human", [
            SwitchField(
                "human-player", "Human player",
                getter=lambda: player.human, setter=lambda human: setattr(player, "human", human),
                enabled_when=lambda: not player.is_playing,
                affects=("gtp-engine-profile",),
            ),
        ]),
        PreferenceGroup("gtp-engine-profile", [
            ChoiceField(
                "gtp-engine-profile", "Profile",
                values=lambda: [profile.uuid for profile in settings.profiles],
                labels=lambda: [profile.name for profile in settings.profiles],
                picker_title="Select GTP engine profile",
                unmatched=lambda uuid: "<None>",
                getter=lambda: player.gtp_engine_profile_uuid,
                setter=lambda uuid: setattr(player, "gtp_engine_profile_uuid", uuid),
            ),
        ], header="GTP engine profile", visible_when=lambda: not player.human),
    ])
