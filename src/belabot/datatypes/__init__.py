"""Plain data records shared across belabot."""
