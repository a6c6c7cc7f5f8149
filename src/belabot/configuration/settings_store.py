from __future__ import annotations

import contextlib
import json
import os
from pathlib import Path

import jsonschema

from belabot.configuration.command_defaults import default_chat_commands
from belabot.configuration.errors import ConfigIoError, ConfigJsonError
from belabot.configuration.normalizer import normalize_settings
from belabot.configuration.settings_schema import SETTINGS_SCHEMA
from belabot.datatypes.settings_datatypes import Settings
from belabot.util.logger import get_logger

logger = get_logger("settings_store")


CONFIG_FILE_NAME = "config.json"


class SettingsStore:
    """Reads, validates and writes back ``config.json``.

    The canonical file lives in the current working directory unless an
    explicit ``config_path`` is given; the working directory is looked up on
    every call, not when the store is created. Every successful load writes
    the normalized, defaulted record back to the canonical file, even when
    it was read from somewhere else.
    """

    def __init__(self, config_path: Path | None = None) -> None:
        self._config_path = Path(config_path) if config_path is not None else None

    @property
    def config_path(self) -> Path:
        """Absolute path of the canonical configuration file."""
        if self._config_path is not None:
            return self._config_path.resolve()
        return Path.cwd() / CONFIG_FILE_NAME

    def exists(self) -> bool:
        """Return True if the canonical configuration file is present."""
        return self.config_path.is_file()

    # --------------------------
    # Public API
    # --------------------------
    def load(self, path: Path | None = None) -> Settings:
        """Load settings from ``path`` (default: the canonical file).

        The parsed record is lowercased, missing chat commands are filled in,
        and the result is saved to the canonical file before being returned.

        Raises:
            ConfigIoError: If the file cannot be read or the result cannot be written.
            ConfigJsonError: If the document is malformed; nothing is written.
        """
        source = Path(path) if path is not None else self.config_path
        try:
            raw = source.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as exc:
            logger.error("[SETTINGS STORE] Failed to read %s: %s", source, exc)
            raise ConfigIoError(source, "Failed to read settings") from exc

        settings = self.parse(raw, source)

        settings = normalize_settings(settings)
        default_chat_commands(settings.commands)

        self.save(settings)
        logger.info("[SETTINGS STORE] Loaded settings from %s", source)
        return settings

    def parse(self, raw: str, source: Path) -> Settings:
        """Decode and validate a configuration document without touching disk.

        Raises:
            ConfigJsonError: If ``raw`` is not JSON or does not match the schema.
        """
        try:
            payload = json.loads(raw)
            jsonschema.validate(instance=payload, schema=SETTINGS_SCHEMA)
            return Settings.from_dict(payload)
        except json.JSONDecodeError as exc:
            detail = str(exc)
            error = exc
        except jsonschema.ValidationError as exc:
            location = "/".join(str(part) for part in exc.absolute_path) or "<root>"
            detail = f"{location}: {exc.message}"
            error = exc
        except (KeyError, ValueError) as exc:
            detail = f"unexpected value {exc}"
            error = exc
        except RecursionError as exc:
            detail = "document is nested too deeply"
            error = exc

        logger.error("[SETTINGS STORE] Config error in %s: %s", source, detail)
        raise ConfigJsonError(source, detail) from error

    def save(self, settings: Settings) -> Path:
        """Write ``settings`` to the canonical file and return its path.

        The document goes to a temporary sibling first and is moved over the
        old file with ``os.replace``, so an interrupted write leaves the
        previous configuration intact.

        Raises:
            ConfigIoError: If the file cannot be written.
        """
        target = self.config_path
        tmp_path = target.with_name(f".{target.name}.tmp")
        payload = json.dumps(settings.to_dict(), indent=2, ensure_ascii=False)

        try:
            with tmp_path.open("w", encoding="utf-8") as handle:
                handle.write(payload + "\n")
                handle.flush()
                os.fsync(handle.fileno())
            os.replace(tmp_path, target)
        except OSError as exc:
            with contextlib.suppress(OSError):
                tmp_path.unlink(missing_ok=True)
            logger.error("[SETTINGS STORE] Failed to write %s: %s", target, exc)
            raise ConfigIoError(target, "Failed to write settings") from exc

        logger.debug("[SETTINGS STORE] Saved settings to %s", target)
        return target


# Shared store bound to config.json in the working directory
default_store = SettingsStore()


def load(path: Path | None = None) -> Settings:
    """Load settings through the shared store (see :meth:`SettingsStore.load`)."""
    return default_store.load(path)
