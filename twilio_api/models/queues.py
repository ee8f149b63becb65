"""Models for call queues."""

from pydantic import Field

from twilio_api.models._base import Page, PageParams, TwilioParams, TwilioResource

QUEUE_MAX_SIZE = 5000


class Queue(TwilioResource):
    sid: str | None = None
    account_sid: str | None = None
    friendly_name: str | None = None
    current_size: int | None = None
    max_size: int | None = None
    average_wait_time: int | None = None
    date_created: str | None = None
    date_updated: str | None = None
    uri: str | None = None


class QueueList(Page):
    queues: list[Queue] = []


ListQueueParams = PageParams


class CreateQueueRequest(TwilioParams):
    """Payload for creating a queue.

    Required fields:
        friendly_name: Description of the queue, up to 64 characters
    """

    friendly_name: str = Field(max_length=64)
    max_size: int | None = Field(default=None, ge=1, le=QUEUE_MAX_SIZE)


class UpdateQueueRequest(TwilioParams):
    friendly_name: str | None = Field(default=None, max_length=64)
    max_size: int | None = Field(default=None, ge=1, le=QUEUE_MAX_SIZE)
