"""Network configuration constants for the browser page."""

DEFAULT_HOST: str = "127.0.0.1"
DEFAULT_PORT: int = 8000
# The browser page polls /state so it follows transitions made in the Qt window.
STATE_POLL_INTERVAL_MS: int = 1000
