"""Endpoint wrappers, one class per Twilio resource."""

from twilio_api.resources.accounts import Accounts, Balances
from twilio_api.resources.applications import Applications
from twilio_api.resources.calls import Calls
from twilio_api.resources.incoming_phone_numbers import IncomingPhoneNumbers
from twilio_api.resources.keys import Keys
from twilio_api.resources.messages import Messages
from twilio_api.resources.queues import Queues
from twilio_api.resources.recordings import Recordings
from twilio_api.resources.sip import SipCredentialLists

__all__ = [
    "Accounts",
    "Balances",
    "Applications",
    "Calls",
    "IncomingPhoneNumbers",
    "Keys",
    "Messages",
    "Queues",
    "Recordings",
    "SipCredentialLists",
]
