"""Models for voice calls."""

from typing import Literal

from pydantic import Field

from twilio_api.models._base import CallbackMethod, Page, PageParams, TwilioParams, TwilioResource

CallStatus = Literal[
    "queued",
    "ringing",
    "in-progress",
    "completed",
    "busy",
    "failed",
    "no-answer",
    "canceled",
]

# Only these two transitions may be requested on a live call.
CallUpdateStatus = Literal["canceled", "completed"]

CallStatusCallbackEvent = Literal["initiated", "ringing", "answered", "completed"]


class Call(TwilioResource):
    """A phone call, inbound or outbound."""

    sid: str | None = None
    account_sid: str | None = None
    parent_call_sid: str | None = None
    date_created: str | None = None
    date_updated: str | None = None
    to: str | None = None
    to_formatted: str | None = None
    from_: str | None = Field(default=None, alias="from")
    from_formatted: str | None = None
    phone_number_sid: str | None = None
    status: CallStatus | None = None
    start_time: str | None = None
    end_time: str | None = None
    duration: str | None = None
    price: str | None = None
    price_unit: str | None = None
    direction: str | None = None
    answered_by: str | None = None
    api_version: str | None = None
    forwarded_from: str | None = None
    group_sid: str | None = None
    caller_name: str | None = None
    queue_time: str | None = None
    trunk_sid: str | None = None
    uri: str | None = None
    subresource_uris: dict[str, str] | None = None

    model_config = {"extra": "allow", "populate_by_name": True}


class CallList(Page):
    calls: list[Call] = []


class ListCallParams(PageParams):
    to: str | None = None
    from_: str | None = Field(default=None, alias="From")
    parent_call_sid: str | None = None
    status: CallStatus | None = None
    start_time: str | None = None
    end_time: str | None = None


class CreateCallRequest(TwilioParams):
    """Payload for placing an outbound call.

    Required fields:
        to: Phone number, SIP address or client identifier to call
        from_: Caller ID, a Twilio number or verified outgoing caller ID

    Exactly one of url, twiml or application_sid tells Twilio what to do once
    the call connects.
    """

    to: str
    from_: str = Field(alias="From")
    url: str | None = None
    twiml: str | None = None
    application_sid: str | None = None
    method: CallbackMethod | None = None
    fallback_url: str | None = None
    fallback_method: CallbackMethod | None = None
    status_callback: str | None = None
    status_callback_event: list[CallStatusCallbackEvent] | None = None
    status_callback_method: CallbackMethod | None = None
    send_digits: str | None = None
    timeout: int | None = None
    record: bool | None = None
    recording_channels: str | None = None
    recording_status_callback: str | None = None
    machine_detection: str | None = None
    caller_id: str | None = None
    time_limit: int | None = None


class UpdateCallRequest(TwilioParams):
    """Payload for redirecting or ending a live call."""

    url: str | None = None
    method: CallbackMethod | None = None
    status: CallUpdateStatus | None = None
    fallback_url: str | None = None
    fallback_method: CallbackMethod | None = None
    status_callback: str | None = None
    status_callback_method: CallbackMethod | None = None
    twiml: str | None = None
    time_limit: int | None = None
