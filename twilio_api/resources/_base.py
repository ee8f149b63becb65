"""Common plumbing for resource wrappers."""

from twilio_api._internal.dispatch import Dispatcher

ACCOUNTS = "/2010-04-01/Accounts"
ACCOUNT = ACCOUNTS + "/{AccountSid}"


class Resource:
    """A group of endpoints sharing one dispatcher."""

    def __init__(self, dispatcher: Dispatcher) -> None:
        self._dispatcher = dispatcher
