"""
belabot
=======

Entry point: loads ``config.json`` from the base directory, or runs the
first-run setup wizard when there is none, and reports the resulting
configuration.
"""

import asyncio
import os
import sys
from pathlib import Path

from dotenv import load_dotenv

from belabot.configuration import ConfigError, MalformedRemoteUrlError, load_or_bootstrap, default_store
from belabot.datatypes.settings_datatypes import Settings
from belabot.ui.console import console_print, print_boxed_title
from belabot.util.logger import get_logger, handle_exception


logger = get_logger("main")


def resolve_base_dir() -> Path:
    """Determine the base directory of the project. Designed for compiled/bundled execution.
    Resolution order:
    1. BELABOT_HOME environment variable, if set.
    2. If running in a frozen/compiled context (e.g., PyInstaller, Nuitka), use the executable's directory.
    3. Otherwise, assume running from source and use the grandparent of this file's directory.
    """
    if env_home := os.getenv("BELABOT_HOME"):
        return Path(env_home).resolve()

    if getattr(sys, "frozen", False) or getattr(sys, "compiled", False):
        return Path(sys.argv[0]).resolve().parent

    return Path(__file__).resolve().parents[2]


def load_environment(base_dir: Path) -> Path | None:
    """Load ``.env`` from the base directory and return the config override, if any.

    Returns
    -------
    Path | None
        Value of ``BELABOT_CONFIG`` when set; that file is read instead of the
        canonical ``config.json`` (the result is still saved to the canonical file).
    """
    load_dotenv(dotenv_path=base_dir / ".env")
    override = os.getenv("BELABOT_CONFIG")
    return Path(override) if override else None


def report_settings(settings: Settings) -> None:
    """Print a short summary of the active configuration."""
    print_boxed_title("belabot configuration", "ansigreen")
    console_print(f"  Channel:  {settings.twitch.channel}")
    console_print(f"  Bot:      {settings.twitch.bot_username}")
    console_print(f"  Admins:   {', '.join(settings.twitch.admins) or '-'}")
    console_print("\n  Chat commands:", "ansicyan")
    for bot_command, info in settings.commands.items():
        console_print(f"    {info.command:<12} {bot_command} ({info.permission})")


async def async_main() -> int:
    """Load or create the configuration, returning an exit code.

    Returns
    -------
    int
        0 when a configuration is ready, 1 when it could not be loaded or created.
    """
    config_override = load_environment(Path.cwd())

    try:
        if config_override is not None:
            settings = default_store.load(config_override)
        else:
            settings = await load_or_bootstrap()
    except MalformedRemoteUrlError as exc:
        logger.critical("Setup aborted: %s", exc)
        return 1
    except ConfigError as exc:
        logger.critical("Failed to load configuration: %s", exc)
        return 1

    report_settings(settings)
    logger.info("Configuration ready (%d chat commands).", len(settings.commands))
    return 0


def main() -> int:
    """Entrypoint that runs the async startup and returns the process code.

    Returns
    -------
    int
        Exit code propagated to the operating system.
    """
    base_dir = resolve_base_dir()
    os.chdir(base_dir)
    logger.info("Starting belabot in %s", base_dir)
    try:
        return asyncio.run(async_main())
    except (KeyboardInterrupt, EOFError):
        logger.info("Setup cancelled by user.")
        return 0
    except Exception as exc:
        logger.critical("An unexpected error occurred during startup: %s", exc)
        return 1


if __name__ == "__main__":
    sys.excepthook = handle_exception
    sys.exit(main())
