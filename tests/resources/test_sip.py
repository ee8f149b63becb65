"""Tests for the SIP credential list wrapper."""

from urllib.parse import parse_qs

import httpx
import pytest

from twilio_api.exceptions import UnexpectedResponseError
from twilio_api.models import CreateCredentialRequest, CredentialListRequest, UpdateCredentialRequest

ACCOUNT_SID = "AC00000000000000000000000000000000"
LISTS_PATH = f"/2010-04-01/Accounts/{ACCOUNT_SID}/SIP/CredentialLists.json"
CREDENTIALS_PATH = f"/2010-04-01/Accounts/{ACCOUNT_SID}/SIP/CredentialLists/CL1/Credentials.json"
CREDENTIAL_PATH = f"/2010-04-01/Accounts/{ACCOUNT_SID}/SIP/CredentialLists/CL1/Credentials/CR1.json"


class TestSipCredentialLists:
    async def test_create_list(self, client, twilio_mock):
        route = twilio_mock.post(LISTS_PATH).mock(
            return_value=httpx.Response(201, json={"sid": "CL1", "friendly_name": "Office"})
        )

        result = await client.sip_credential_lists.create(
            ACCOUNT_SID, CredentialListRequest(friendly_name="Office")
        )

        assert route.calls.last.request.content == b"FriendlyName=Office"
        assert result.sid == "CL1"

    async def test_list_credentials(self, client, twilio_mock):
        route = twilio_mock.get(CREDENTIALS_PATH).mock(
            return_value=httpx.Response(
                200,
                json={"credentials": [{"sid": "CR1", "username": "alice"}], "page": 0},
            )
        )

        result = await client.sip_credential_lists.list_credentials(ACCOUNT_SID, "CL1")

        assert route.calls.last.request.url.query == b""
        assert result.credentials[0].username == "alice"

    async def test_create_credential(self, client, twilio_mock):
        """Should send username and password in the form body."""
        route = twilio_mock.post(CREDENTIALS_PATH).mock(
            return_value=httpx.Response(201, json={"sid": "CR1", "username": "alice"})
        )

        result = await client.sip_credential_lists.create_credential(
            ACCOUNT_SID,
            "CL1",
            CreateCredentialRequest(username="alice", password="Sup3rSecret!Value"),
        )

        assert parse_qs(route.calls.last.request.content.decode()) == {
            "Username": ["alice"],
            "Password": ["Sup3rSecret!Value"],
        }
        assert result.username == "alice"

    async def test_update_and_delete_credential(self, client, twilio_mock):
        update = twilio_mock.post(CREDENTIAL_PATH).mock(
            return_value=httpx.Response(200, json={"sid": "CR1"})
        )
        remove = twilio_mock.delete(CREDENTIAL_PATH).mock(return_value=httpx.Response(204))

        await client.sip_credential_lists.update_credential(
            ACCOUNT_SID, "CL1", "CR1", UpdateCredentialRequest(password="An0ther!Secret")
        )
        await client.sip_credential_lists.delete_credential(ACCOUNT_SID, "CL1", "CR1")

        assert update.calls.last.request.content == b"Password=An0ther%21Secret"
        assert remove.called

    async def test_path_values_are_not_validated(self, client, twilio_mock):
        """Should fill the template with whatever value it is given."""
        route = twilio_mock.get(
            f"/2010-04-01/Accounts/{ACCOUNT_SID}/SIP/CredentialLists/.json"
        ).mock(return_value=httpx.Response(404, text=""))

        with pytest.raises(UnexpectedResponseError):
            await client.sip_credential_lists.fetch(ACCOUNT_SID, "")

        assert route.called
