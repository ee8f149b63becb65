"""Request dispatch for the Twilio API.

WARNING: This is an internal module used by the resource wrappers.
Do not call directly from user code.
"""

from twilio_api._internal.dispatch.client import Dispatcher
from twilio_api._internal.dispatch.models import API_VERSION, Endpoint
from twilio_api._internal.dispatch.redaction import redact_params
from twilio_api._internal.dispatch.template import render_path

__all__ = [
    "Dispatcher",
    "Endpoint",
    "API_VERSION",
    "redact_params",
    "render_path",
]
