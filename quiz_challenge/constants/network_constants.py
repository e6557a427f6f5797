"""Network configuration constants for the quiz application."""

DEFAULT_HOST: str = "0.0.0.0"
DEFAULT_PORT: int = 3001
DEFAULT_API_BASE_URL: str = f"http://localhost:{DEFAULT_PORT}"
DEFAULT_REQUEST_TIMEOUT_SECONDS: float = 10.0
