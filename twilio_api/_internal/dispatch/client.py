"""Generic request dispatch for the Twilio API."""

import json
from collections.abc import Mapping
from functools import lru_cache
from typing import Any, TypeVar, overload

import httpx
from pydantic import TypeAdapter, ValidationError

from twilio_api._internal.dispatch.models import Endpoint, HttpMethod
from twilio_api._internal.dispatch.redaction import redact_params
from twilio_api._internal.dispatch.template import render_path
from twilio_api.exceptions import DecodeError, TwilioTransportError, UnexpectedResponseError

T = TypeVar("T")

Params = Mapping[str, Any]


def _drop_unset(params: Params | None) -> dict[str, Any]:
    """Remove parameters whose value is None so they are never sent."""
    if not params:
        return {}
    return {key: value for key, value in params.items() if value is not None}


@lru_cache(maxsize=256)
def _adapter(result_type: Any) -> TypeAdapter[Any]:
    return TypeAdapter(result_type)


class Dispatcher:
    """Executes one HTTP round trip per call and classifies the outcome.

    The dispatcher holds no per-call state. Default headers live on the
    shared httpx.AsyncClient; the base URL and auth are fixed at
    construction. Any number of calls may run concurrently.
    """

    def __init__(
        self,
        http_client: httpx.AsyncClient,
        *,
        base_url: str,
        auth: httpx.Auth | None = None,
        debug: bool = False,
    ) -> None:
        """Initialize the dispatcher.

        Args:
            http_client: Client providing the connection pool and default headers.
            base_url: Scheme and host every endpoint path is appended to.
            auth: Authentication attached to every request. When None the
                http_client's own auth is used.
            debug: Enable debug logging to stderr.
        """
        self._http = http_client
        self._base_url = base_url.rstrip("/")
        self._auth = auth
        self._debug = debug

    @property
    def base_url(self) -> str:
        return self._base_url

    def _log_debug(self, message: str) -> None:
        """Log a debug message to stderr if debug mode is enabled."""
        if self._debug:
            import sys

            print(f"[twilio-api] {message}", file=sys.stderr)

    def _url(self, uri: str) -> str:
        if uri.startswith("https://") or uri.startswith("http://"):
            return uri
        return f"{self._base_url}/{uri.lstrip('/')}"

    @overload
    async def request(
        self,
        endpoint: Endpoint,
        *,
        path_params: Mapping[str, str] | None = None,
        params: Params | None = None,
        data: Params | None = None,
        result_type: None = None,
    ) -> None: ...

    @overload
    async def request(
        self,
        endpoint: Endpoint,
        *,
        path_params: Mapping[str, str] | None = None,
        params: Params | None = None,
        data: Params | None = None,
        result_type: type[T],
    ) -> T: ...

    async def request(
        self,
        endpoint: Endpoint,
        *,
        path_params: Mapping[str, str] | None = None,
        params: Params | None = None,
        data: Params | None = None,
        result_type: type[T] | None = None,
    ) -> T | None:
        """Call one endpoint and decode its response.

        Args:
            endpoint: Method and URL template of the operation.
            path_params: Values for the template's `{Placeholder}` tokens.
            params: Query parameters. None values are omitted.
            data: Form body fields. None values are omitted.
            result_type: Type to decode a successful body into. When None the
                body is ignored and the call returns None.

        Returns:
            The decoded result, or None when no result type is given.

        Raises:
            TwilioValidationError: If the path template cannot be rendered.
            TwilioTransportError: If no response was received.
            UnexpectedResponseError: If the status is outside 200-299.
            DecodeError: If a successful body does not decode into result_type.
        """
        path = render_path(endpoint.path, path_params)
        query = _drop_unset(params)
        form = _drop_unset(data) if endpoint.method == "POST" else {}

        self._log_debug(
            f"{endpoint.name}: {endpoint.method} {path} "
            f"params={redact_params(query)} data={redact_params(form)}"
        )
        response = await self._send(endpoint.method, self._url(path), query, form)
        return self._decode(response, result_type, label=endpoint.name)

    async def fetch_uri(self, uri: str, result_type: type[T]) -> T:
        """GET a server-supplied URI such as a page's `next_page_uri`.

        The URI may carry its own query string; it is used verbatim.
        """
        self._log_debug(f"fetch: GET {uri}")
        response = await self._send("GET", self._url(uri), {}, {})
        return self._decode(response, result_type, label="fetch")

    async def request_raw(
        self,
        method: HttpMethod,
        uri: str,
        *,
        params: Params | None = None,
        data: Params | None = None,
    ) -> httpx.Response:
        """Send one authenticated request and return the response untouched.

        Args:
            method: HTTP method.
            uri: Absolute URL, or a path relative to the base URL.
            params: Query parameters. None values are omitted.
            data: Form body fields. None values are omitted.

        Returns:
            The raw httpx.Response, whatever its status.

        Raises:
            TwilioTransportError: If no response was received.
        """
        self._log_debug(f"raw: {method} {uri}")
        return await self._send(method, self._url(uri), _drop_unset(params), _drop_unset(data))

    async def _send(
        self,
        method: str,
        url: str,
        params: dict[str, Any],
        data: dict[str, Any],
    ) -> httpx.Response:
        """Issue a single request. No retries."""
        try:
            return await self._http.request(
                method,
                url,
                params=params or None,
                data=data or None,
                auth=self._auth if self._auth is not None else httpx.USE_CLIENT_DEFAULT,
            )
        except httpx.TimeoutException as e:
            self._log_debug(f"{method} {url} timed out")
            raise TwilioTransportError(f"Request to {url} timed out") from e
        except httpx.TransportError as e:
            self._log_debug(f"{method} {url} transport error: {e}")
            raise TwilioTransportError(f"Request to {url} failed: {e}") from e

    def _decode(self, response: httpx.Response, result_type: type[T] | None, *, label: str) -> T | None:
        """Classify a response and decode its body."""
        status = response.status_code
        if not response.is_success:
            self._log_debug(f"{label}: failed with status {status}")
            raise UnexpectedResponseError(response)

        self._log_debug(f"{label}: succeeded with status {status}")
        if result_type is None:
            return None

        text = response.text
        try:
            payload = json.loads(text)
        except json.JSONDecodeError as e:
            raise DecodeError(text, e, status_code=status) from e

        try:
            return _adapter(result_type).validate_python(payload)
        except ValidationError as e:
            raise DecodeError(text, e, status_code=status) from e
