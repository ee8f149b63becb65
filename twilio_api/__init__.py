"""Async Python client for the Twilio REST API (2010-04-01).

Public API:
    Client - Entry point holding credentials and the endpoint wrappers
    Credentials - Immutable Basic auth pair
    twilio_api.models - Typed request and response shapes
    twilio_api.exceptions - Errors raised by every call

Internal (not for direct use):
    _internal.dispatch - Generic request dispatch and decoding
"""

from twilio_api._version import __version__
from twilio_api.client import Client, Credentials
from twilio_api.exceptions import (
    DecodeError,
    TwilioAPIError,
    TwilioConfigError,
    TwilioError,
    TwilioTransportError,
    TwilioValidationError,
    UnexpectedResponseError,
)

__all__ = [
    "__version__",
    "Client",
    "Credentials",
    "TwilioError",
    "TwilioAPIError",
    "UnexpectedResponseError",
    "DecodeError",
    "TwilioTransportError",
    "TwilioConfigError",
    "TwilioValidationError",
]
