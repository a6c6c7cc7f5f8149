from belabot.datatypes.settings_datatypes import BotCommand, Permission


def build_settings_schema() -> dict:
    """Build the JSON schema ``config.json`` is validated against.

    Every field is optional (absent values fall back to the record defaults),
    but present values must have the right type. Command keys and permission
    names are restricted to the known enum values. Unknown extra keys are
    allowed so older bots can read newer files.

    Returns:
        JSON schema dict (Draft 7)
    """
    command_information = {
        "type": "object",
        "properties": {
            "command": {"type": "string"},
            "permission": {"type": "string", "enum": [p.value for p in Permission]},
        },
        "required": ["command", "permission"],
    }

    return {
        "$schema": "http://json-schema.org/draft-07/schema#",
        "type": "object",
        "properties": {
            "belabox": {
                "type": "object",
                "properties": {
                    "remote_key": {"type": "string"},
                    "custom_interface_name": {
                        "type": "object",
                        "additionalProperties": {"type": "string"},
                    },
                    "monitor": {
                        "type": "object",
                        "properties": {
                            "modems": {"type": "boolean"},
                            "notifications": {"type": "boolean"},
                        },
                    },
                },
            },
            "twitch": {
                "type": "object",
                "properties": {
                    "bot_username": {"type": "string"},
                    "bot_oauth": {"type": "string"},
                    "channel": {"type": "string"},
                    "admins": {"type": "array", "items": {"type": "string"}},
                },
            },
            "commands": {
                "type": "object",
                "propertyNames": {"enum": [c.value for c in BotCommand]},
                "additionalProperties": command_information,
            },
        },
    }


SETTINGS_SCHEMA: dict = build_settings_schema()
