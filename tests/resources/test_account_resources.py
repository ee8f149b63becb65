"""Tests for applications, queues, recordings and API keys."""

import httpx
import pytest

from twilio_api.exceptions import UnexpectedResponseError
from twilio_api.models import (
    ApplicationRequest,
    CreateQueueRequest,
    KeyRequest,
    NewKey,
    UpdateQueueRequest,
)

ACCOUNT_SID = "AC00000000000000000000000000000000"
ACCOUNT_PATH = f"/2010-04-01/Accounts/{ACCOUNT_SID}"


class TestApplications:
    async def test_create_without_body(self, client, twilio_mock):
        route = twilio_mock.post(f"{ACCOUNT_PATH}/Applications.json").mock(
            return_value=httpx.Response(201, json={"sid": "AP1"})
        )

        result = await client.applications.create(ACCOUNT_SID)

        assert route.calls.last.request.content == b""
        assert result.sid == "AP1"

    async def test_update(self, client, twilio_mock):
        route = twilio_mock.post(f"{ACCOUNT_PATH}/Applications/AP1.json").mock(
            return_value=httpx.Response(200, json={"sid": "AP1", "sms_method": "GET"})
        )

        result = await client.applications.update(
            ACCOUNT_SID, "AP1", ApplicationRequest(sms_method="GET")
        )

        assert route.calls.last.request.content == b"SmsMethod=GET"
        assert result.sms_method == "GET"

    async def test_list_by_name(self, client, twilio_mock):
        route = twilio_mock.get(f"{ACCOUNT_PATH}/Applications.json").mock(
            return_value=httpx.Response(200, json={"applications": [{"sid": "AP1"}]})
        )

        result = await client.applications.list(ACCOUNT_SID, friendly_name="IVR")

        assert dict(route.calls.last.request.url.params) == {"FriendlyName": "IVR"}
        assert [app.sid for app in result.applications] == ["AP1"]


class TestQueues:
    async def test_create(self, client, twilio_mock):
        route = twilio_mock.post(f"{ACCOUNT_PATH}/Queues.json").mock(
            return_value=httpx.Response(
                201,
                json={"sid": "QU1", "friendly_name": "support", "max_size": 100, "current_size": 0},
            )
        )

        result = await client.queues.create(
            ACCOUNT_SID, CreateQueueRequest(friendly_name="support", max_size=100)
        )

        assert route.calls.last.request.content == b"FriendlyName=support&MaxSize=100"
        assert result.current_size == 0

    async def test_update_then_fetch(self, client, twilio_mock):
        twilio_mock.post(f"{ACCOUNT_PATH}/Queues/QU1.json").mock(
            return_value=httpx.Response(200, json={"sid": "QU1", "max_size": 10})
        )
        twilio_mock.get(f"{ACCOUNT_PATH}/Queues/QU1.json").mock(
            return_value=httpx.Response(200, json={"sid": "QU1", "max_size": 10, "average_wait_time": 7})
        )

        await client.queues.update(ACCOUNT_SID, "QU1", UpdateQueueRequest(max_size=10))
        result = await client.queues.fetch(ACCOUNT_SID, "QU1")

        assert result.average_wait_time == 7

    async def test_delete_refused(self, client, twilio_mock):
        """Should surface the refusal as an unexpected response."""
        twilio_mock.delete(f"{ACCOUNT_PATH}/Queues/QU1.json").mock(
            return_value=httpx.Response(
                400, json={"code": 20001, "message": "Queue is not empty", "status": 400}
            )
        )

        with pytest.raises(UnexpectedResponseError) as exc_info:
            await client.queues.delete(ACCOUNT_SID, "QU1")

        assert exc_info.value.response.json()["code"] == 20001


class TestRecordings:
    async def test_list_for_call(self, client, twilio_mock):
        route = twilio_mock.get(f"{ACCOUNT_PATH}/Recordings.json").mock(
            return_value=httpx.Response(
                200,
                json={"recordings": [{"sid": "RE1", "call_sid": "CA1", "status": "completed", "channels": 1}]},
            )
        )

        result = await client.recordings.list(ACCOUNT_SID, call_sid="CA1")

        assert dict(route.calls.last.request.url.params) == {"CallSid": "CA1"}
        assert result.recordings[0].status == "completed"

    async def test_fetch_soft_deleted(self, client, twilio_mock):
        route = twilio_mock.get(f"{ACCOUNT_PATH}/Recordings/RE1.json").mock(
            return_value=httpx.Response(200, json={"sid": "RE1", "status": "deleted"})
        )

        result = await client.recordings.fetch(ACCOUNT_SID, "RE1", include_soft_deleted=True)

        assert dict(route.calls.last.request.url.params) == {"IncludeSoftDeleted": "true"}
        assert result.status == "deleted"

    async def test_fetch_without_options(self, client, twilio_mock):
        route = twilio_mock.get(f"{ACCOUNT_PATH}/Recordings/RE1.json").mock(
            return_value=httpx.Response(200, json={"sid": "RE1"})
        )

        await client.recordings.fetch(ACCOUNT_SID, "RE1")

        assert route.calls.last.request.url.query == b""

    async def test_delete(self, client, twilio_mock):
        twilio_mock.delete(f"{ACCOUNT_PATH}/Recordings/RE1.json").mock(
            return_value=httpx.Response(204)
        )

        assert await client.recordings.delete(ACCOUNT_SID, "RE1") is None


class TestKeys:
    async def test_create_returns_secret(self, client, twilio_mock):
        twilio_mock.post(f"{ACCOUNT_PATH}/Keys.json").mock(
            return_value=httpx.Response(
                201, json={"sid": "SK1", "friendly_name": "ci", "secret": "shh"}
            )
        )

        result = await client.keys.create(ACCOUNT_SID, KeyRequest(friendly_name="ci"))

        assert isinstance(result, NewKey)
        assert result.secret == "shh"

    async def test_list_pages(self, client, twilio_mock):
        route = twilio_mock.get(f"{ACCOUNT_PATH}/Keys.json").mock(
            return_value=httpx.Response(200, json={"keys": [{"sid": "SK1"}], "page_size": 1})
        )

        result = await client.keys.list(ACCOUNT_SID, page_size=1, page_token="PASK0")

        assert dict(route.calls.last.request.url.params) == {"PageSize": "1", "PageToken": "PASK0"}
        assert result.keys[0].sid == "SK1"
