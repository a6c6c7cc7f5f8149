"""Exceptions raised while loading, bootstrapping or saving the configuration."""

from __future__ import annotations

from pathlib import Path


class ConfigError(Exception):
    """Base class for all configuration errors."""


class ConfigIoError(ConfigError):
    """Reading or writing the configuration file failed.

    The originating :class:`OSError` is kept as ``__cause__``.
    """

    def __init__(self, path: Path, message: str) -> None:
        super().__init__(f"{message}: {path}")
        self.path = path


class ConfigJsonError(ConfigError):
    """The configuration document is not valid JSON or does not match the schema."""

    def __init__(self, path: Path, detail: str) -> None:
        super().__init__(f"Invalid configuration in {path}: {detail}")
        self.path = path
        self.detail = detail


class MalformedRemoteUrlError(ConfigError):
    """The pasted BELABOX Cloud URL carries no ``?key=`` remote key."""

    def __init__(self, url: str) -> None:
        super().__init__(f"No remote key found in URL {url!r}")
        self.url = url
