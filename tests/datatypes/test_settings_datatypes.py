import pytest

from belabot.datatypes.settings_datatypes import (
    Belabox,
    BotCommand,
    CommandInformation,
    Monitor,
    Permission,
    Settings,
    Twitch,
)


def test_enum_values_match_document_names():
    assert [c.value for c in BotCommand] == [
        "Bitrate", "Network", "Poweroff", "Restart", "Sensor", "Start", "Stats", "Stop",
    ]
    assert [p.value for p in Permission] == ["Broadcaster", "Moderator", "Vip", "Public"]
    assert str(BotCommand.START) == "Start"
    assert str(Permission.VIP) == "Vip"


def test_defaults():
    settings = Settings()

    assert settings.belabox == Belabox(remote_key="", custom_interface_name={}, monitor=Monitor(True, True))
    assert settings.twitch == Twitch("", "", "", [])
    assert settings.commands == {}


def test_to_dict_layout(sample_settings):
    data = sample_settings.to_dict()

    assert data == {
        "belabox": {
            "remote_key": "AbC123",
            "custom_interface_name": {"usb0": "Phone"},
            "monitor": {"modems": True, "notifications": True},
        },
        "twitch": {
            "bot_username": "BelaBot",
            "bot_oauth": "oauth:XYZ",
            "channel": "MyChannel",
            "admins": ["Foo", "BAR"],
        },
        "commands": {"Start": {"command": "!GoLive", "permission": "Moderator"}},
    }


def test_from_dict_restores_record(sample_settings):
    assert Settings.from_dict(sample_settings.to_dict()) == sample_settings


def test_from_dict_rejects_unknown_names():
    with pytest.raises(ValueError):
        Settings.from_dict({"commands": {"Dance": {"command": "!d", "permission": "Public"}}})
    with pytest.raises(ValueError):
        CommandInformation.from_dict({"command": "!d", "permission": "Owner"})


def test_command_for_trigger_ignores_case(sample_settings):
    assert sample_settings.command_for_trigger("!golive") is BotCommand.START
    assert sample_settings.command_for_trigger("  !GOLIVE ") is BotCommand.START
    assert sample_settings.command_for_trigger("!bbstop") is None


def test_interface_display_name_falls_back_to_interface():
    belabox = Belabox(custom_interface_name={"usb0": "Phone"})

    assert belabox.interface_display_name("usb0") == "Phone"
    assert belabox.interface_display_name("wlan0") == "wlan0"
