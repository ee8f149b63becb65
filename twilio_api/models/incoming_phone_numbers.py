"""Models for phone numbers provisioned on an account."""

from typing import Literal

from pydantic import model_validator

from twilio_api.models._base import CallbackMethod, Page, PageParams, TwilioParams, TwilioResource

AddressRequirement = Literal["none", "any", "local", "foreign"]
NumberOrigin = Literal["twilio", "hosted"]


class IncomingPhoneNumber(TwilioResource):
    """A phone number owned by the account, with its voice/SMS routing."""

    sid: str | None = None
    account_sid: str | None = None
    phone_number: str | None = None
    friendly_name: str | None = None
    origin: str | None = None
    status: str | None = None
    beta: bool | None = None
    capabilities: dict[str, bool] | None = None
    address_sid: str | None = None
    address_requirements: AddressRequirement | None = None
    bundle_sid: str | None = None
    identity_sid: str | None = None
    trunk_sid: str | None = None
    emergency_status: str | None = None
    emergency_address_sid: str | None = None
    api_version: str | None = None
    voice_url: str | None = None
    voice_method: CallbackMethod | None = None
    voice_fallback_url: str | None = None
    voice_fallback_method: CallbackMethod | None = None
    voice_application_sid: str | None = None
    voice_caller_id_lookup: bool | None = None
    sms_url: str | None = None
    sms_method: CallbackMethod | None = None
    sms_fallback_url: str | None = None
    sms_fallback_method: CallbackMethod | None = None
    sms_application_sid: str | None = None
    status_callback: str | None = None
    status_callback_method: CallbackMethod | None = None
    date_created: str | None = None
    date_updated: str | None = None
    uri: str | None = None


class IncomingPhoneNumberList(Page):
    incoming_phone_numbers: list[IncomingPhoneNumber] = []


class ListIncomingPhoneNumberParams(PageParams):
    beta: bool | None = None
    friendly_name: str | None = None
    phone_number: str | None = None
    origin: NumberOrigin | None = None


class _NumberRouting(TwilioParams):
    friendly_name: str | None = None
    voice_url: str | None = None
    voice_method: CallbackMethod | None = None
    voice_fallback_url: str | None = None
    voice_fallback_method: CallbackMethod | None = None
    voice_application_sid: str | None = None
    voice_caller_id_lookup: bool | None = None
    sms_url: str | None = None
    sms_method: CallbackMethod | None = None
    sms_fallback_url: str | None = None
    sms_fallback_method: CallbackMethod | None = None
    sms_application_sid: str | None = None
    status_callback: str | None = None
    status_callback_method: CallbackMethod | None = None
    address_sid: str | None = None
    bundle_sid: str | None = None
    identity_sid: str | None = None
    trunk_sid: str | None = None
    emergency_address_sid: str | None = None


class CreateIncomingPhoneNumberRequest(_NumberRouting):
    """Payload for purchasing a number.

    Either phone_number (a specific number) or area_code (any number in that
    area) must be given.
    """

    phone_number: str | None = None
    area_code: str | None = None

    @model_validator(mode="after")
    def number_or_area_code(self) -> "CreateIncomingPhoneNumberRequest":
        if self.phone_number is None and self.area_code is None:
            raise ValueError("one of phone_number or area_code is required")
        return self


class UpdateIncomingPhoneNumberRequest(_NumberRouting):
    """Payload for reconfiguring a number.

    Setting account_sid transfers the number to another (sub)account.
    """

    account_sid: str | None = None
