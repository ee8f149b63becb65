"""Tests for the calls wrapper."""

from urllib.parse import parse_qs

import httpx

from twilio_api.models import Call, CreateCallRequest, UpdateCallRequest

ACCOUNT_SID = "AC00000000000000000000000000000000"
CALLS_PATH = f"/2010-04-01/Accounts/{ACCOUNT_SID}/Calls.json"
CALL_PATH = f"/2010-04-01/Accounts/{ACCOUNT_SID}/Calls/CA123.json"

CALL_JSON = {
    "sid": "CA123",
    "account_sid": ACCOUNT_SID,
    "to": "+15558675310",
    "from": "+15017122661",
    "status": "queued",
    "direction": "outbound-api",
    "api_version": "2010-04-01",
}


class TestCalls:
    async def test_create(self, client, twilio_mock):
        """Should send the call parameters as a form body."""
        route = twilio_mock.post(CALLS_PATH).mock(return_value=httpx.Response(201, json=CALL_JSON))

        result = await client.calls.create(
            ACCOUNT_SID,
            CreateCallRequest(
                to="+15558675310",
                from_="+15017122661",
                twiml="<Response><Say>Ahoy</Say></Response>",
                status_callback_event=["initiated", "answered"],
            ),
        )

        form = parse_qs(route.calls.last.request.content.decode())
        assert form == {
            "To": ["+15558675310"],
            "From": ["+15017122661"],
            "Twiml": ["<Response><Say>Ahoy</Say></Response>"],
            "StatusCallbackEvent": ["initiated", "answered"],
        }
        assert isinstance(result, Call)
        assert result.from_ == "+15017122661"
        assert result.model_dump(by_alias=True, exclude_unset=True) == CALL_JSON

    async def test_list_filters(self, client, twilio_mock):
        route = twilio_mock.get(CALLS_PATH).mock(
            return_value=httpx.Response(200, json={"calls": [CALL_JSON], "page": 0})
        )

        result = await client.calls.list(ACCOUNT_SID, from_="+15017122661", status="completed")

        assert dict(route.calls.last.request.url.params) == {
            "From": "+15017122661",
            "Status": "completed",
        }
        assert result.calls[0].sid == "CA123"

    async def test_update_ends_call(self, client, twilio_mock):
        route = twilio_mock.post(CALL_PATH).mock(
            return_value=httpx.Response(200, json={**CALL_JSON, "status": "completed"})
        )

        result = await client.calls.update(ACCOUNT_SID, "CA123", UpdateCallRequest(status="completed"))

        assert route.calls.last.request.content == b"Status=completed"
        assert result.status == "completed"

    async def test_delete(self, client, twilio_mock):
        """Should return None for a 204 with an empty body."""
        route = twilio_mock.delete(CALL_PATH).mock(return_value=httpx.Response(204))

        result = await client.calls.delete(ACCOUNT_SID, "CA123")

        assert result is None
        assert route.called
