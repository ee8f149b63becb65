"""Models for SMS/MMS messages."""

from typing import Literal

from pydantic import Field

from twilio_api.models._base import Page, PageParams, TwilioParams, TwilioResource

MessageStatus = Literal[
    "queued",
    "sending",
    "sent",
    "failed",
    "delivered",
    "undelivered",
    "receiving",
    "received",
    "accepted",
    "scheduled",
    "read",
    "partially_delivered",
    "canceled",
]

MessageDirection = Literal["inbound", "outbound-api", "outbound-call", "outbound-reply"]


class Message(TwilioResource):
    """An inbound or outbound message."""

    sid: str | None = None
    account_sid: str | None = None
    messaging_service_sid: str | None = None
    api_version: str | None = None
    body: str | None = None
    to: str | None = None
    from_: str | None = Field(default=None, alias="from")
    direction: MessageDirection | None = None
    status: MessageStatus | None = None
    num_media: str | None = None
    num_segments: str | None = None
    price: str | None = None
    price_unit: str | None = None
    error_code: int | None = None
    error_message: str | None = None
    date_created: str | None = None
    date_sent: str | None = None
    date_updated: str | None = None
    uri: str | None = None
    subresource_uris: dict[str, str] | None = None

    model_config = {"extra": "allow", "populate_by_name": True}


class MessageList(Page):
    messages: list[Message] = []


class ListMessageParams(PageParams):
    to: str | None = None
    from_: str | None = Field(default=None, alias="From")
    date_sent: str | None = None


class CreateMessageRequest(TwilioParams):
    """Payload for sending a message.

    Required fields:
        to: Recipient phone number or channel address

    A sender is either from_ or messaging_service_sid; content is body,
    media_url or content_sid.
    """

    to: str
    from_: str | None = Field(default=None, alias="From")
    messaging_service_sid: str | None = None
    body: str | None = None
    media_url: list[str] | None = None
    content_sid: str | None = None
    status_callback: str | None = None
    application_sid: str | None = None
    max_price: str | None = None
    provide_feedback: bool | None = None
    attempt: int | None = None
    validity_period: int | None = None
    send_at: str | None = None
    schedule_type: Literal["fixed"] | None = None
    shorten_urls: bool | None = None


class UpdateMessageRequest(TwilioParams):
    """Payload for redacting a message body or canceling a scheduled message."""

    body: str | None = None
    status: Literal["canceled"] | None = None
