"""Models for TwiML applications."""

from twilio_api.models._base import CallbackMethod, Page, PageParams, TwilioParams, TwilioResource


class Application(TwilioResource):
    """A reusable set of voice and messaging URLs."""

    sid: str | None = None
    account_sid: str | None = None
    api_version: str | None = None
    friendly_name: str | None = None
    voice_url: str | None = None
    voice_method: CallbackMethod | None = None
    voice_fallback_url: str | None = None
    voice_fallback_method: CallbackMethod | None = None
    voice_caller_id_lookup: bool | None = None
    status_callback: str | None = None
    status_callback_method: CallbackMethod | None = None
    sms_url: str | None = None
    sms_method: CallbackMethod | None = None
    sms_fallback_url: str | None = None
    sms_fallback_method: CallbackMethod | None = None
    sms_status_callback: str | None = None
    message_status_callback: str | None = None
    public_application_connect_enabled: bool | None = None
    date_created: str | None = None
    date_updated: str | None = None
    uri: str | None = None


class ApplicationList(Page):
    applications: list[Application] = []


class ListApplicationParams(PageParams):
    friendly_name: str | None = None


class ApplicationRequest(TwilioParams):
    """Payload for creating or updating an application.

    All fields are optional; only the given ones are sent.
    """

    api_version: str | None = None
    friendly_name: str | None = None
    voice_url: str | None = None
    voice_method: CallbackMethod | None = None
    voice_fallback_url: str | None = None
    voice_fallback_method: CallbackMethod | None = None
    voice_caller_id_lookup: bool | None = None
    status_callback: str | None = None
    status_callback_method: CallbackMethod | None = None
    sms_url: str | None = None
    sms_method: CallbackMethod | None = None
    sms_fallback_url: str | None = None
    sms_fallback_method: CallbackMethod | None = None
    sms_status_callback: str | None = None
    message_status_callback: str | None = None
    public_application_connect_enabled: bool | None = None
