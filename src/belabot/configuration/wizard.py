"""
First-run setup wizard.

Asks for the BELABOX Cloud remote URL and the Twitch bot account one prompt
at a time, fills in the defaults, and saves ``config.json``. Input and output
are injected so the whole sequence can be scripted in tests.
"""

from __future__ import annotations

from collections.abc import Awaitable, Callable

from belabot.configuration.command_defaults import default_chat_commands
from belabot.configuration.errors import MalformedRemoteUrlError
from belabot.configuration.normalizer import normalize_settings
from belabot.configuration.settings_store import CONFIG_FILE_NAME, SettingsStore, default_store
from belabot.datatypes.settings_datatypes import Belabox, Monitor, Settings, Twitch
from belabot.ui.console import clear_screen, console_print, prompt_line
from belabot.util.logger import get_logger

logger = get_logger("wizard")

# Type aliases for the injected terminal capabilities
PromptFunc = Callable[[str], Awaitable[str]]
OutputFunc = Callable[[str], None]
ClearFunc = Callable[[], None]

REMOTE_KEY_MARKER = "?key="
DEFAULT_INTERFACES = ("eth0", "usb0", "wlan0")

URL_HEADER = "Please paste your BELABOX Cloud remote URL below"
URL_PROMPT = "URL: "
URL_RETRY = "That URL does not contain a remote key, please paste the full remote URL"
TWITCH_HEADER = "\nPlease enter your Twitch details below"
BOT_USERNAME_PROMPT = "Bot username: "
BOT_OAUTH_PROMPT = "(You can generate an Oauth here: https://twitchapps.com/tmi/)\nBot oauth: "
CHANNEL_PROMPT = "Channel name: "


def extract_remote_key(url: str) -> str:
    """Return everything after the first ``?key=`` in ``url``.

    Raises:
        MalformedRemoteUrlError: If the marker is missing or nothing follows it.
    """
    _, marker, key = url.strip().partition(REMOTE_KEY_MARKER)
    if not marker or not key:
        raise MalformedRemoteUrlError(url)
    return key


class InteractiveWizard:
    """Builds a fresh :class:`Settings` record from terminal prompts.

    Prompts run strictly in order and the wizard keeps no state between
    runs; cancelling it part way leaves nothing on disk.
    """

    def __init__(
        self,
        store: SettingsStore | None = None,
        *,
        prompt: PromptFunc | None = None,
        output: OutputFunc | None = None,
        clear: ClearFunc | None = None,
        url_attempts: int = 3,
    ) -> None:
        self.store = store or default_store
        self._prompt = prompt or prompt_line
        self._output = output or console_print
        self._clear = clear or clear_screen
        self.url_attempts = max(1, url_attempts)

    async def _ask(self, message: str) -> str:
        answer = await self._prompt(message)
        return answer.strip()

    async def ask_remote_key(self) -> str:
        """Prompt for the remote URL until it yields a key or attempts run out.

        Raises:
            MalformedRemoteUrlError: After ``url_attempts`` URLs without a key.
        """
        self._output(URL_HEADER)
        attempt = 1
        while True:
            url = await self._ask(URL_PROMPT)
            try:
                return extract_remote_key(url)
            except MalformedRemoteUrlError:
                logger.warning("[WIZARD] Remote URL without key (attempt %d/%d)", attempt, self.url_attempts)
                if attempt >= self.url_attempts:
                    raise
            attempt += 1
            self._output(URL_RETRY)

    async def ask_twitch(self) -> Twitch:
        """Prompt for the bot account and channel; admins start empty."""
        self._output(TWITCH_HEADER)
        bot_username = await self._ask(BOT_USERNAME_PROMPT)
        bot_oauth = await self._ask(BOT_OAUTH_PROMPT)
        channel = await self._ask(CHANNEL_PROMPT)
        return Twitch(bot_username=bot_username, bot_oauth=bot_oauth, channel=channel, admins=[])

    async def run(self) -> Settings:
        """Run every prompt, save the result and return it.

        The record is normalized before it is written, so the saved file
        and the returned value are identical.

        Raises:
            MalformedRemoteUrlError: If no usable remote URL was entered.
            ConfigIoError: If the configuration file cannot be written.
        """
        logger.info("[WIZARD] No configuration found, starting setup")

        remote_key = await self.ask_remote_key()
        belabox = Belabox(
            remote_key=remote_key,
            custom_interface_name={name: name for name in DEFAULT_INTERFACES},
            monitor=Monitor(),
        )
        twitch = await self.ask_twitch()

        settings = Settings(belabox=belabox, twitch=twitch, commands=default_chat_commands({}))
        settings = normalize_settings(settings)

        saved_path = self.store.save(settings)

        self._clear()
        self._output(f"Saved settings to {CONFIG_FILE_NAME} in {saved_path}")
        logger.info("[WIZARD] Setup finished for channel %s", settings.twitch.channel)

        return settings


async def bootstrap(store: SettingsStore | None = None) -> Settings:
    """Run the setup wizard with the real terminal."""
    return await InteractiveWizard(store).run()


async def load_or_bootstrap(store: SettingsStore | None = None) -> Settings:
    """Load the canonical configuration, or run the wizard if there is none."""
    store = store or default_store
    if store.exists():
        return store.load()
    return await bootstrap(store)
