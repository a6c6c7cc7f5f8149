"""
Typed records for the persisted bot configuration.

The layout mirrors ``config.json``:

- ``belabox``: remote key of the encoder, interface display names, monitor toggles
- ``twitch``: bot account, channel and admin list
- ``commands``: chat trigger and permission for every :class:`BotCommand`

Enum values are the exact names written to disk, so ``to_dict``/``from_dict``
are lossless for any document that passed schema validation.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, List, Optional


class BotCommand(Enum):
    """Chat commands the bot can be bound to."""

    BITRATE = "Bitrate"
    NETWORK = "Network"
    POWEROFF = "Poweroff"
    RESTART = "Restart"
    SENSOR = "Sensor"
    START = "Start"
    STATS = "Stats"
    STOP = "Stop"

    def __str__(self) -> str:
        return self.value


class Permission(Enum):
    """Role required in chat to run a command."""

    BROADCASTER = "Broadcaster"
    MODERATOR = "Moderator"
    VIP = "Vip"
    PUBLIC = "Public"

    def __str__(self) -> str:
        return self.value


@dataclass(slots=True)
class Monitor:
    """Which encoder events are announced in chat."""

    modems: bool = True
    notifications: bool = True

    def to_dict(self) -> Dict[str, Any]:
        return {"modems": self.modems, "notifications": self.notifications}

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> Monitor:
        return cls(
            modems=bool(data.get("modems", True)),
            notifications=bool(data.get("notifications", True)),
        )


@dataclass(slots=True)
class Belabox:
    """Encoder-side settings.

    Attributes:
        remote_key: Token from the cloud remote URL identifying the encoder.
        custom_interface_name: Display name overrides keyed by network interface.
        monitor: Chat announcement toggles.
    """

    remote_key: str = ""
    custom_interface_name: Dict[str, str] = field(default_factory=dict)
    monitor: Monitor = field(default_factory=Monitor)

    def interface_display_name(self, interface: str) -> str:
        """Return the configured display name for ``interface`` or the name itself."""
        return self.custom_interface_name.get(interface, interface)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "remote_key": self.remote_key,
            "custom_interface_name": dict(self.custom_interface_name),
            "monitor": self.monitor.to_dict(),
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> Belabox:
        return cls(
            remote_key=str(data.get("remote_key", "")),
            custom_interface_name={str(k): str(v) for k, v in (data.get("custom_interface_name") or {}).items()},
            monitor=Monitor.from_dict(data.get("monitor") or {}),
        )


@dataclass(slots=True)
class Twitch:
    """Twitch account the bot logs in with and the channel it serves."""

    bot_username: str = ""
    bot_oauth: str = ""
    channel: str = ""
    admins: List[str] = field(default_factory=list)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "bot_username": self.bot_username,
            "bot_oauth": self.bot_oauth,
            "channel": self.channel,
            "admins": list(self.admins),
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> Twitch:
        return cls(
            bot_username=str(data.get("bot_username", "")),
            bot_oauth=str(data.get("bot_oauth", "")),
            channel=str(data.get("channel", "")),
            admins=[str(admin) for admin in data.get("admins") or []],
        )


@dataclass(slots=True)
class CommandInformation:
    """Chat trigger and permission bound to a :class:`BotCommand`."""

    command: str
    permission: Permission

    def to_dict(self) -> Dict[str, Any]:
        return {"command": self.command, "permission": self.permission.value}

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> CommandInformation:
        """Build from a mapping; unknown permission names raise ValueError."""
        return cls(command=str(data["command"]), permission=Permission(data["permission"]))


@dataclass(slots=True)
class Settings:
    """Root configuration record handed to the rest of the bot."""

    belabox: Belabox = field(default_factory=Belabox)
    twitch: Twitch = field(default_factory=Twitch)
    commands: Dict[BotCommand, CommandInformation] = field(default_factory=dict)

    def command_for_trigger(self, trigger: str) -> Optional[BotCommand]:
        """Return the command bound to a chat trigger, ignoring case."""
        wanted = trigger.strip().lower()
        for bot_command, info in self.commands.items():
            if info.command.lower() == wanted:
                return bot_command
        return None

    def to_dict(self) -> Dict[str, Any]:
        """Serialize to the JSON document layout.

        Commands are emitted in :class:`BotCommand` declaration order so the
        written file does not shuffle between saves.
        """
        return {
            "belabox": self.belabox.to_dict(),
            "twitch": self.twitch.to_dict(),
            "commands": {
                bot_command.value: self.commands[bot_command].to_dict()
                for bot_command in BotCommand
                if bot_command in self.commands
            },
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> Settings:
        """Build a record from a decoded document.

        Raises:
            ValueError: If a command or permission name is not recognised.
            KeyError: If a command entry lacks ``command`` or ``permission``.
        """
        commands = {
            BotCommand(name): CommandInformation.from_dict(info)
            for name, info in (data.get("commands") or {}).items()
        }
        return cls(
            belabox=Belabox.from_dict(data.get("belabox") or {}),
            twitch=Twitch.from_dict(data.get("twitch") or {}),
            commands=commands,
        )
