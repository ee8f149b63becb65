"""User-facing client for the Twilio REST API.

    from twilio_api import Client
    from twilio_api.models import CreateMessageRequest

    async with Client("ACXXXXXXXX", "your-auth-token") as client:
        message = await client.messages.create(
            "ACXXXXXXXX",
            CreateMessageRequest(to="+15558675310", from_="+15017122661", body="Hi"),
        )

Or build the client from TWILIO_USERNAME / TWILIO_PASSWORD:

    client = Client.from_env()
"""

import os
from typing import Any, TypeVar

import httpx
from pydantic import BaseModel, ConfigDict, SecretStr

from twilio_api._internal.dispatch import Dispatcher
from twilio_api._internal.dispatch.models import HttpMethod
from twilio_api._internal.http import DEFAULT_BASE_URL, DEFAULT_TIMEOUT, create_http_client
from twilio_api.exceptions import TwilioConfigError
from twilio_api.models import Page
from twilio_api.resources import (
    Accounts,
    Applications,
    Balances,
    Calls,
    IncomingPhoneNumbers,
    Keys,
    Messages,
    Queues,
    Recordings,
    SipCredentialLists,
)

P = TypeVar("P", bound=Page)


class Credentials(BaseModel):
    """Basic auth pair: account SID + auth token, or API key SID + secret."""

    model_config = ConfigDict(frozen=True)

    username: str
    password: SecretStr


class Client:
    """Entry point for the Twilio API.

    The handle is immutable once built. Unless one is passed in, it creates
    an httpx.AsyncClient whose connection pool is shared by every call; close
    it with `aclose()` or by using the client as an async context manager.
    """

    def __init__(
        self,
        username: str,
        password: str,
        *,
        base_url: str = DEFAULT_BASE_URL,
        timeout: float = DEFAULT_TIMEOUT,
        debug: bool = False,
        http_client: httpx.AsyncClient | None = None,
    ) -> None:
        """Initialize the client.

        Args:
            username: Account SID or API key SID.
            password: Auth token or API key secret.
            base_url: API host, without the version segment.
            timeout: Request timeout in seconds.
            debug: Enable debug logging to stderr.
            http_client: Preconfigured client to send requests with. The
                credentials are attached to each request; the caller keeps
                ownership and closes it.
        """
        self._credentials = Credentials(username=username, password=SecretStr(password))
        self._base_url = base_url.rstrip("/")
        self._timeout = timeout
        self._debug = debug
        self._owns_http = http_client is None
        self._http = http_client or create_http_client(
            username=username,
            password=password,
            timeout=timeout,
        )
        self._dispatcher = Dispatcher(
            self._http,
            base_url=self._base_url,
            auth=httpx.BasicAuth(username, password),
            debug=debug,
        )

        self.accounts = Accounts(self._dispatcher)
        self.balance = Balances(self._dispatcher)
        self.calls = Calls(self._dispatcher)
        self.messages = Messages(self._dispatcher)
        self.incoming_phone_numbers = IncomingPhoneNumbers(self._dispatcher)
        self.applications = Applications(self._dispatcher)
        self.queues = Queues(self._dispatcher)
        self.recordings = Recordings(self._dispatcher)
        self.keys = Keys(self._dispatcher)
        self.sip_credential_lists = SipCredentialLists(self._dispatcher)

    @classmethod
    def from_env(cls) -> "Client":
        """Create a client from environment variables.

        Required environment variables:
            TWILIO_USERNAME: Account SID or API key SID.
            TWILIO_PASSWORD: Auth token or API key secret.

        Optional environment variables:
            TWILIO_BASE_URL: API host (default: https://api.twilio.com).
            TWILIO_TIMEOUT_MS: Request timeout in milliseconds.
            TWILIO_DEBUG: Set to "1" to enable debug logging.

        Returns:
            A configured Client.

        Raises:
            TwilioConfigError: If a required variable is missing.
            ValueError: If TWILIO_TIMEOUT_MS is not an integer.
        """
        username = os.environ.get("TWILIO_USERNAME")
        password = os.environ.get("TWILIO_PASSWORD")
        if not username:
            raise TwilioConfigError("must set TWILIO_USERNAME")
        if not password:
            raise TwilioConfigError("must set TWILIO_PASSWORD")

        base_url = os.environ.get("TWILIO_BASE_URL") or DEFAULT_BASE_URL
        timeout_ms = int(os.environ.get("TWILIO_TIMEOUT_MS", str(int(DEFAULT_TIMEOUT * 1000))))
        debug = os.environ.get("TWILIO_DEBUG", "") == "1"

        return cls(
            username,
            password,
            base_url=base_url,
            timeout=timeout_ms / 1000,
            debug=debug,
        )

    @property
    def credentials(self) -> Credentials:
        return self._credentials

    @property
    def base_url(self) -> str:
        return self._base_url

    def with_base_url(self, base_url: str) -> "Client":
        """Return a client for another host, sharing this client's connections.

        The pool stays owned by this client: closing the returned one leaves
        it open.
        """
        return Client(
            self._credentials.username,
            self._credentials.password.get_secret_value(),
            base_url=base_url,
            timeout=self._timeout,
            debug=self._debug,
            http_client=self._http,
        )

    async def request_raw(
        self,
        method: HttpMethod,
        uri: str,
        *,
        params: dict[str, Any] | None = None,
        data: dict[str, Any] | None = None,
    ) -> httpx.Response:
        """Send an authenticated request to any path and return the raw response.

        No status classification or decoding is applied.
        """
        return await self._dispatcher.request_raw(method, uri, params=params, data=data)

    async def next_page(self, page: P) -> P | None:
        """Fetch the page after `page`, or None when it was the last one.

        Each call fetches exactly one page; nothing is followed automatically.
        """
        if not page.next_page_uri:
            return None
        return await self._dispatcher.fetch_uri(page.next_page_uri, type(page))

    async def aclose(self) -> None:
        """Close the connection pool if this client created it."""
        if self._owns_http:
            await self._http.aclose()

    async def __aenter__(self) -> "Client":
        return self

    async def __aexit__(self, *exc_info: object) -> None:
        await self.aclose()

    def __repr__(self) -> str:
        return f"Client(username={self._credentials.username!r}, base_url={self._base_url!r})"
