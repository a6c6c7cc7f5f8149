"""Terminal helpers (prompt_toolkit) used by the setup wizard and entry point."""
