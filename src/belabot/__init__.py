"""
belabot - Twitch chat control for a BELABOX encoder

belabot bridges a BELABOX Cloud controlled encoder and a Twitch channel. This
package holds the configuration side of the bot: the record every other
component reads, and the first-run setup that produces it.

Core Components:

- **Configuration**: Loads ``config.json``, lowercases chat-facing fields,
  fills in the default chat commands and writes the result back atomically
- **Setup Wizard**: Interactive first-run prompts for the remote URL and the
  Twitch bot account
- **Logging**: Coloured prompt_toolkit console output plus a per-session log file

Usage:
    from belabot.main import main
    main()  # Loads or creates the configuration
"""
