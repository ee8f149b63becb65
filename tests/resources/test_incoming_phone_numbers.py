"""Tests for the incoming phone numbers wrapper."""

from urllib.parse import parse_qs

import httpx

from twilio_api.models import (
    CreateIncomingPhoneNumberRequest,
    IncomingPhoneNumber,
    UpdateIncomingPhoneNumberRequest,
)

ACCOUNT_SID = "AC00000000000000000000000000000000"
NUMBERS_PATH = f"/2010-04-01/Accounts/{ACCOUNT_SID}/IncomingPhoneNumbers.json"
NUMBER_PATH = f"/2010-04-01/Accounts/{ACCOUNT_SID}/IncomingPhoneNumbers/PN123.json"

NUMBER_JSON = {
    "sid": "PN123",
    "phone_number": "+15105551234",
    "friendly_name": "(510) 555-1234",
    "capabilities": {"voice": True, "sms": True, "mms": True, "fax": False},
    "voice_url": "https://example.com/voice",
    "voice_method": "POST",
    "beta": False,
}


class TestIncomingPhoneNumbers:
    async def test_purchase_by_area_code(self, client, twilio_mock):
        route = twilio_mock.post(NUMBERS_PATH).mock(
            return_value=httpx.Response(201, json=NUMBER_JSON)
        )

        result = await client.incoming_phone_numbers.create(
            ACCOUNT_SID,
            CreateIncomingPhoneNumberRequest(
                area_code="510",
                voice_url="https://example.com/voice",
                voice_caller_id_lookup=True,
            ),
        )

        assert parse_qs(route.calls.last.request.content.decode()) == {
            "VoiceUrl": ["https://example.com/voice"],
            "VoiceCallerIdLookup": ["true"],
            "AreaCode": ["510"],
        }
        assert isinstance(result, IncomingPhoneNumber)
        assert result.capabilities == {"voice": True, "sms": True, "mms": True, "fax": False}

    async def test_list_beta_flag(self, client, twilio_mock):
        route = twilio_mock.get(NUMBERS_PATH).mock(
            return_value=httpx.Response(200, json={"incoming_phone_numbers": [NUMBER_JSON]})
        )

        result = await client.incoming_phone_numbers.list(ACCOUNT_SID, beta=False)

        assert dict(route.calls.last.request.url.params) == {"Beta": "false"}
        assert result.incoming_phone_numbers[0].phone_number == "+15105551234"

    async def test_transfer(self, client, twilio_mock):
        route = twilio_mock.post(NUMBER_PATH).mock(return_value=httpx.Response(200, json=NUMBER_JSON))

        await client.incoming_phone_numbers.update(
            ACCOUNT_SID, "PN123", UpdateIncomingPhoneNumberRequest(account_sid="AC2")
        )

        assert route.calls.last.request.content == b"AccountSid=AC2"

    async def test_release(self, client, twilio_mock):
        route = twilio_mock.delete(NUMBER_PATH).mock(return_value=httpx.Response(204))

        assert await client.incoming_phone_numbers.delete(ACCOUNT_SID, "PN123") is None
        assert route.call_count == 1
