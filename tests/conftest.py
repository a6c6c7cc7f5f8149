"""
Pytest configuration and fixtures for belabot tests.
"""

import sys
from pathlib import Path

import pytest

# Add src directory to path so imports work without installing
src_path = Path(__file__).parent.parent / "src"
sys.path.insert(0, str(src_path))

from belabot.configuration.settings_store import SettingsStore  # noqa: E402
from belabot.datatypes.settings_datatypes import (  # noqa: E402
    Belabox,
    BotCommand,
    CommandInformation,
    Permission,
    Settings,
    Twitch,
)


@pytest.fixture()
def workdir(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Run the test from an empty working directory."""
    monkeypatch.chdir(tmp_path)
    return tmp_path


@pytest.fixture()
def store(workdir: Path) -> SettingsStore:
    """Store bound to config.json in the test working directory."""
    return SettingsStore()


@pytest.fixture()
def sample_settings() -> Settings:
    return Settings(
        belabox=Belabox(remote_key="AbC123", custom_interface_name={"usb0": "Phone"}),
        twitch=Twitch(bot_username="BelaBot", bot_oauth="oauth:XYZ", channel="MyChannel", admins=["Foo", "BAR"]),
        commands={BotCommand.START: CommandInformation(command="!GoLive", permission=Permission.MODERATOR)},
    )
