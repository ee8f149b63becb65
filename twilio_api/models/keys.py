"""Models for API keys."""

from twilio_api.models._base import Page, PageParams, TwilioParams, TwilioResource


class Key(TwilioResource):
    sid: str | None = None
    friendly_name: str | None = None
    date_created: str | None = None
    date_updated: str | None = None


class NewKey(Key):
    """A freshly created API key. The secret is only returned once."""

    secret: str | None = None


class KeyList(Page):
    keys: list[Key] = []


ListKeyParams = PageParams


class KeyRequest(TwilioParams):
    friendly_name: str | None = None
