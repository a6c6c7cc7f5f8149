"""
Utility helpers for belabot.

- **logger.py**: Centralized logging configuration with colored console output,
  rotating file handlers, and per-session log aggregation. Uses prompt_toolkit
  so log lines do not break an active input prompt.
"""
