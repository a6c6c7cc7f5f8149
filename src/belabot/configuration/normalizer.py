"""Lowercasing of settings that are compared case-insensitively in chat."""

from __future__ import annotations

from dataclasses import replace

from belabot.datatypes.settings_datatypes import CommandInformation, Settings


def normalize_settings(settings: Settings) -> Settings:
    """Return a copy of ``settings`` with case-insensitive fields lowercased.

    Covers the Twitch channel, bot username, bot oauth token, every admin
    name and every command trigger. The input record is not modified and
    applying the function twice gives the same result as applying it once.
    """
    twitch = replace(
        settings.twitch,
        bot_username=settings.twitch.bot_username.lower(),
        bot_oauth=settings.twitch.bot_oauth.lower(),
        channel=settings.twitch.channel.lower(),
        admins=[admin.lower() for admin in settings.twitch.admins],
    )
    commands = {
        bot_command: CommandInformation(command=info.command.lower(), permission=info.permission)
        for bot_command, info in settings.commands.items()
    }
    belabox = replace(
        settings.belabox,
        custom_interface_name=dict(settings.belabox.custom_interface_name),
        monitor=replace(settings.belabox.monitor),
    )
    return Settings(belabox=belabox, twitch=twitch, commands=commands)
