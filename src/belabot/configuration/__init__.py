"""
Configuration management for belabot.

This package owns ``config.json`` from first run to every later start:

- **settings_store.py**: Reads and validates the file, lowercases chat-facing
  fields, fills in missing chat commands and writes the result back atomically.
- **wizard.py**: First-run prompts that build a fresh record when no file exists.
- **normalizer.py** / **command_defaults.py**: The two passes applied on every
  load and bootstrap.
"""

from belabot.configuration.errors import (
    ConfigError,
    ConfigIoError,
    ConfigJsonError,
    MalformedRemoteUrlError,
)
from belabot.configuration.settings_store import CONFIG_FILE_NAME, SettingsStore, default_store, load
from belabot.configuration.wizard import InteractiveWizard, bootstrap, load_or_bootstrap

__all__ = [
    "CONFIG_FILE_NAME",
    "ConfigError",
    "ConfigIoError",
    "ConfigJsonError",
    "InteractiveWizard",
    "MalformedRemoteUrlError",
    "SettingsStore",
    "bootstrap",
    "load",
    "load_or_bootstrap",
    "default_store",
]
