"""Shared HTTP client configuration."""

import httpx

from twilio_api._version import __version__

DEFAULT_BASE_URL = "https://api.twilio.com"
DEFAULT_TIMEOUT = 60.0


def create_http_client(
    *,
    username: str,
    password: str,
    timeout: float = DEFAULT_TIMEOUT,
) -> httpx.AsyncClient:
    """Create configured HTTP client.

    Every request sent through the client carries Basic authentication and
    asks for JSON.

    Args:
        username: Account SID or API key SID.
        password: Auth token or API key secret.
        timeout: Request timeout in seconds.

    Returns:
        Configured httpx.AsyncClient instance.
    """
    return httpx.AsyncClient(
        timeout=timeout,
        auth=httpx.BasicAuth(username, password),
        headers={
            "User-Agent": f"twilio-api/{__version__}",
            "Accept": "application/json",
        },
    )
