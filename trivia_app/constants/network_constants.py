"""Network configuration constants for the trivia application."""

DEFAULT_HOST: str = "0.0.0.0"
DEFAULT_PORT: int = 8000
AUDIENCE_POLL_INTERVAL_MS: int = 1000
