"""Public exceptions for the Twilio API client."""

import json
from typing import Any

import httpx
from pydantic import ValidationError

CONTEXT_LINES = 2


class TwilioError(Exception):
    """Base exception for all Twilio API client errors."""


class TwilioAPIError(TwilioError):
    """Error derived from a Twilio API response."""

    def __init__(self, message: str, status_code: int | None = None) -> None:
        super().__init__(message)
        self.status_code = status_code


class UnexpectedResponseError(TwilioAPIError):
    """The API answered with a status outside 200-299.

    The response is kept as-is: the body is never parsed, so callers can
    inspect whatever error payload Twilio returned.
    """

    def __init__(self, response: httpx.Response) -> None:
        super().__init__(
            f"Unexpected response status {response.status_code} "
            f"for {response.request.method} {response.request.url.path}",
            status_code=response.status_code,
        )
        self.response = response

    @property
    def text(self) -> str:
        return self.response.text

    @property
    def headers(self) -> httpx.Headers:
        return self.response.headers


class DecodeError(TwilioAPIError):
    """A successful response whose body did not decode into the expected type.

    Attributes:
        text: The raw response body, unmodified.
        error: The underlying json.JSONDecodeError or pydantic.ValidationError.
        line: 1-based line of a JSON syntax error, else None.
        column: 1-based column of a JSON syntax error, else None.
        location: Dotted path of the first mismatched field, else None.
    """

    def __init__(
        self,
        text: str,
        error: json.JSONDecodeError | ValidationError,
        *,
        status_code: int | None = None,
    ) -> None:
        self.text = text
        self.error = error
        self.line: int | None = None
        self.column: int | None = None
        self.location: str | None = None

        if isinstance(error, json.JSONDecodeError):
            self.line = error.lineno
            self.column = error.colno
            detail = f"{error.msg} at line {error.lineno} column {error.colno}"
        else:
            first: dict[str, Any] = error.errors(include_url=False)[0]
            self.location = ".".join(str(part) for part in first["loc"]) or None
            where = self.location or "<root>"
            detail = f"{first['msg']} at {where} ({error.error_count()} error(s))"

        super().__init__(f"Failed to decode response body: {detail}", status_code=status_code)

    def context(self) -> str:
        """Render the lines around a syntax error with a caret under the column.

        Shape errors have no text position, so the whole body is returned.
        """
        if self.line is None:
            return self.text

        # json counts lines on "\n" only and reports a position past a trailing newline
        lines = [line.rstrip("\r") for line in self.text.split("\n")]
        start = max(self.line - 1 - CONTEXT_LINES, 0)
        end = min(self.line + CONTEXT_LINES, len(lines))
        rendered = []
        for number in range(start, end):
            rendered.append(f"{number + 1:>4} | {lines[number]}")
            if number == self.line - 1:
                rendered.append("     | " + " " * ((self.column or 1) - 1) + "^")
        return "\n".join(rendered)


class TwilioTransportError(TwilioError):
    """The request never produced a response (connect failure, timeout, ...)."""


class TwilioConfigError(TwilioError):
    """Configuration error (missing env vars, invalid config)."""


class TwilioValidationError(TwilioError):
    """Invalid call arguments, such as an unfilled path placeholder."""
