"""Default chat triggers for every bot command."""

from __future__ import annotations

from typing import Dict, Tuple

from belabot.datatypes.settings_datatypes import BotCommand, CommandInformation, Permission

# Maps each BotCommand to its default (trigger, permission) pair
DEFAULT_CHAT_COMMANDS: Dict[BotCommand, Tuple[str, Permission]] = {
    BotCommand.START: ("!bbstart", Permission.BROADCASTER),
    BotCommand.STOP: ("!bbstop", Permission.BROADCASTER),
    BotCommand.STATS: ("!bbs", Permission.PUBLIC),
    BotCommand.RESTART: ("!bbrs", Permission.BROADCASTER),
    BotCommand.POWEROFF: ("!bbpo", Permission.BROADCASTER),
    BotCommand.BITRATE: ("!bbb", Permission.BROADCASTER),
    BotCommand.SENSOR: ("!bbsensor", Permission.PUBLIC),
    BotCommand.NETWORK: ("!bbt", Permission.BROADCASTER),
}


def default_chat_commands(
    commands: Dict[BotCommand, CommandInformation],
) -> Dict[BotCommand, CommandInformation]:
    """Insert the default binding for every command missing from ``commands``.

    Existing entries are never touched. The mapping is updated in place and
    also returned for chaining.
    """
    for bot_command, (trigger, permission) in DEFAULT_CHAT_COMMANDS.items():
        commands.setdefault(bot_command, CommandInformation(command=trigger, permission=permission))
    return commands
