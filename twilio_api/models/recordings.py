"""Models for call and conference recordings."""

from typing import Any, Literal

from twilio_api.models._base import Page, PageParams, TwilioParams, TwilioResource

RecordingStatus = Literal[
    "in-progress",
    "paused",
    "stopped",
    "processing",
    "completed",
    "absent",
    "deleted",
]


class Recording(TwilioResource):
    sid: str | None = None
    account_sid: str | None = None
    call_sid: str | None = None
    conference_sid: str | None = None
    api_version: str | None = None
    status: RecordingStatus | None = None
    source: str | None = None
    channels: int | None = None
    duration: str | None = None
    start_time: str | None = None
    price: str | None = None
    price_unit: str | None = None
    error_code: int | None = None
    encryption_details: dict[str, Any] | None = None
    media_url: str | None = None
    date_created: str | None = None
    date_updated: str | None = None
    uri: str | None = None
    subresource_uris: dict[str, str] | None = None


class RecordingList(Page):
    recordings: list[Recording] = []


class ListRecordingParams(PageParams):
    call_sid: str | None = None
    conference_sid: str | None = None
    date_created: str | None = None
    include_soft_deleted: bool | None = None


class FetchRecordingParams(TwilioParams):
    include_soft_deleted: bool | None = None
