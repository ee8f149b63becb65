"""Models for SIP credential lists and their credentials."""

from pydantic import Field

from twilio_api.models._base import Page, PageParams, TwilioParams, TwilioResource


class CredentialList(TwilioResource):
    """A named set of SIP username/password credentials."""

    sid: str | None = None
    account_sid: str | None = None
    friendly_name: str | None = None
    date_created: str | None = None
    date_updated: str | None = None
    subresource_uris: dict[str, str] | None = None
    uri: str | None = None


class CredentialListList(Page):
    credential_lists: list[CredentialList] = []


ListCredentialListParams = PageParams


class CredentialListRequest(TwilioParams):
    friendly_name: str = Field(max_length=64)


class Credential(TwilioResource):
    """One SIP credential. Twilio never returns the password."""

    sid: str | None = None
    account_sid: str | None = None
    credential_list_sid: str | None = None
    username: str | None = None
    date_created: str | None = None
    date_updated: str | None = None
    uri: str | None = None


class CredentialPage(Page):
    credentials: list[Credential] = []


ListCredentialParams = PageParams


class CreateCredentialRequest(TwilioParams):
    """Payload for adding a credential to a list.

    Required fields:
        username: SIP username, up to 32 characters
        password: SIP password; Twilio enforces its own complexity rules
    """

    username: str = Field(max_length=32)
    password: str


class UpdateCredentialRequest(TwilioParams):
    password: str
