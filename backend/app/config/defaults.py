"""Static defaults for the insight service."""

DEFAULT_UPSTREAM_BASE_URL = "http://localhost:8000"
DEFAULT_UPSTREAM_TIMEOUT_SECONDS = 20.0

DEFAULT_STUCK_DAYS_THRESHOLD = 7

# Incoming request headers passed through to the upstream (session auth).
DEFAULT_FORWARD_HEADERS = [
    "cookie",
    "authorization",
]
