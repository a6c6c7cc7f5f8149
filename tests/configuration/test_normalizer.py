"""Tests for lowercasing of chat-facing settings."""

from belabot.configuration.normalizer import normalize_settings
from belabot.datatypes.settings_datatypes import (
    BotCommand,
    CommandInformation,
    Permission,
    Settings,
    Twitch,
)


def test_channel_and_admins_are_lowercased():
    settings = Settings(twitch=Twitch(channel="MyChannel", admins=["Foo", "BAR"]))

    normalized = normalize_settings(settings)

    assert normalized.twitch.channel == "mychannel"
    assert normalized.twitch.admins == ["foo", "bar"]


def test_bot_credentials_and_triggers_are_lowercased(sample_settings):
    normalized = normalize_settings(sample_settings)

    assert normalized.twitch.bot_username == "belabot"
    assert normalized.twitch.bot_oauth == "oauth:xyz"
    assert normalized.commands[BotCommand.START] == CommandInformation("!golive", Permission.MODERATOR)


def test_other_fields_are_left_alone(sample_settings):
    normalized = normalize_settings(sample_settings)

    assert normalized.belabox.remote_key == "AbC123"
    assert normalized.belabox.custom_interface_name == {"usb0": "Phone"}
    assert normalized.belabox.monitor == sample_settings.belabox.monitor


def test_input_record_is_not_modified(sample_settings):
    normalize_settings(sample_settings)

    assert sample_settings.twitch.channel == "MyChannel"
    assert sample_settings.twitch.admins == ["Foo", "BAR"]
    assert sample_settings.commands[BotCommand.START].command == "!GoLive"


def test_normalizing_twice_equals_normalizing_once(sample_settings):
    once = normalize_settings(sample_settings)

    assert normalize_settings(once) == once


def test_empty_settings_are_unchanged():
    assert normalize_settings(Settings()) == Settings()
