"""Models for accounts and account balance."""

from typing import Literal

from twilio_api.models._base import Page, PageParams, TwilioParams, TwilioResource

AccountStatus = Literal["closed", "suspended", "active"]
AccountType = Literal["Trial", "Full"]


class Account(TwilioResource):
    """A Twilio account or subaccount."""

    sid: str | None = None
    auth_token: str | None = None
    date_created: str | None = None
    date_updated: str | None = None
    friendly_name: str | None = None
    owner_account_sid: str | None = None
    status: AccountStatus | None = None
    subresource_uris: dict[str, str] | None = None
    type: AccountType | None = None
    uri: str | None = None


class AccountList(Page):
    accounts: list[Account] = []


class ListAccountParams(PageParams):
    friendly_name: str | None = None
    status: AccountStatus | None = None


class CreateAccountRequest(TwilioParams):
    """Payload for creating a subaccount.

    Optional fields:
        friendly_name: Human readable description, up to 64 characters
    """

    friendly_name: str | None = None


class UpdateAccountRequest(TwilioParams):
    friendly_name: str | None = None
    status: AccountStatus | None = None


class Balance(TwilioResource):
    """Current balance of an account, as a decimal string."""

    account_sid: str | None = None
    balance: str | None = None
    currency: str | None = None
