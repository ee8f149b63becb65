"""Base classes shared by all request and response models."""

from typing import Any, Literal

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_pascal

# HTTP method Twilio uses to call back into the account owner's application.
CallbackMethod = Literal["GET", "POST"]

# =============================================================================
# Response Models
# =============================================================================


class TwilioResource(BaseModel):
    """A JSON object returned by the API.

    Fields Twilio adds later are kept rather than dropped, so a decoded value
    dumps back to the JSON it came from.
    """

    model_config = ConfigDict(extra="allow")


class Page(TwilioResource):
    """Pagination envelope common to every list response."""

    first_page_uri: str | None = None
    next_page_uri: str | None = None
    previous_page_uri: str | None = None
    page: int | None = None
    page_size: int | None = None
    start: int | None = None
    end: int | None = None
    uri: str | None = None


# =============================================================================
# Request Models
# =============================================================================


class TwilioParams(BaseModel):
    """Query parameters or form fields sent to the API.

    Field names are snake_case in Python and PascalCase on the wire. Unset
    fields are left out of the request entirely.
    """

    model_config = ConfigDict(
        alias_generator=to_pascal,
        populate_by_name=True,
        frozen=True,
        extra="forbid",
    )

    def to_params(self) -> dict[str, Any]:
        return self.model_dump(mode="json", by_alias=True, exclude_none=True)


class PageParams(TwilioParams):
    """Paging controls accepted by every list endpoint."""

    page_size: int | None = None
    page: int | None = None
    page_token: str | None = None
