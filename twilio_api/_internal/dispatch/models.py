"""Endpoint descriptors consumed by the dispatcher."""

from typing import Literal

from pydantic import BaseModel, ConfigDict, Field, field_validator

from twilio_api._internal.dispatch.template import placeholders

# =============================================================================
# Constants
# =============================================================================

API_VERSION = "2010-04-01"
API_PREFIX = f"/{API_VERSION}/"
PATH_SUFFIX = ".json"

HttpMethod = Literal["GET", "POST", "DELETE"]

# =============================================================================
# Endpoint
# =============================================================================


class Endpoint(BaseModel):
    """One HTTP method + URL template pair of the Twilio API.

    Required fields:
        name: Operation identifier used in debug output (e.g. 'calls.create')
        method: HTTP method
        path: URL template with `{Placeholder}` tokens, relative to the base URL
    """

    model_config = ConfigDict(frozen=True)

    name: str = Field(min_length=1)
    method: HttpMethod
    path: str

    @field_validator("path")
    @classmethod
    def path_is_versioned_json(cls, v: str) -> str:
        if not v.startswith(API_PREFIX):
            raise ValueError(f"path must start with {API_PREFIX}")
        if not v.endswith(PATH_SUFFIX):
            raise ValueError(f"path must end with {PATH_SUFFIX}")
        return v

    @property
    def placeholders(self) -> tuple[str, ...]:
        return placeholders(self.path)


def get(name: str, path: str) -> Endpoint:
    return Endpoint(name=name, method="GET", path=path)


def post(name: str, path: str) -> Endpoint:
    return Endpoint(name=name, method="POST", path=path)


def delete(name: str, path: str) -> Endpoint:
    return Endpoint(name=name, method="DELETE", path=path)
