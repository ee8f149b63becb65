"""SIP credential lists and the credentials inside them."""

from twilio_api._internal.dispatch.models import delete, get, post
from twilio_api.models.sip import (
    CreateCredentialRequest,
    Credential,
    CredentialList,
    CredentialListList,
    CredentialListRequest,
    CredentialPage,
    ListCredentialListParams,
    ListCredentialParams,
    UpdateCredentialRequest,
)
from twilio_api.resources._base import ACCOUNT, Resource

CREDENTIAL_LISTS = ACCOUNT + "/SIP/CredentialLists"
CREDENTIALS = CREDENTIAL_LISTS + "/{CredentialListSid}/Credentials"

LIST = get("sip.credential_lists.list", CREDENTIAL_LISTS + ".json")
CREATE = post("sip.credential_lists.create", CREDENTIAL_LISTS + ".json")
FETCH = get("sip.credential_lists.fetch", CREDENTIAL_LISTS + "/{Sid}.json")
UPDATE = post("sip.credential_lists.update", CREDENTIAL_LISTS + "/{Sid}.json")
DELETE = delete("sip.credential_lists.delete", CREDENTIAL_LISTS + "/{Sid}.json")

LIST_CREDENTIALS = get("sip.credentials.list", CREDENTIALS + ".json")
CREATE_CREDENTIAL = post("sip.credentials.create", CREDENTIALS + ".json")
FETCH_CREDENTIAL = get("sip.credentials.fetch", CREDENTIALS + "/{Sid}.json")
UPDATE_CREDENTIAL = post("sip.credentials.update", CREDENTIALS + "/{Sid}.json")
DELETE_CREDENTIAL = delete("sip.credentials.delete", CREDENTIALS + "/{Sid}.json")


class SipCredentialLists(Resource):
    async def list(
        self,
        account_sid: str,
        *,
        page_size: int | None = None,
        page: int | None = None,
        page_token: str | None = None,
    ) -> CredentialListList:
        params = ListCredentialListParams(page_size=page_size, page=page, page_token=page_token)
        return await self._dispatcher.request(
            LIST,
            path_params={"AccountSid": account_sid},
            params=params.to_params(),
            result_type=CredentialListList,
        )

    async def create(self, account_sid: str, body: CredentialListRequest) -> CredentialList:
        return await self._dispatcher.request(
            CREATE,
            path_params={"AccountSid": account_sid},
            data=body.to_params(),
            result_type=CredentialList,
        )

    async def fetch(self, account_sid: str, sid: str) -> CredentialList:
        return await self._dispatcher.request(
            FETCH,
            path_params={"AccountSid": account_sid, "Sid": sid},
            result_type=CredentialList,
        )

    async def update(self, account_sid: str, sid: str, body: CredentialListRequest) -> CredentialList:
        return await self._dispatcher.request(
            UPDATE,
            path_params={"AccountSid": account_sid, "Sid": sid},
            data=body.to_params(),
            result_type=CredentialList,
        )

    async def delete(self, account_sid: str, sid: str) -> None:
        await self._dispatcher.request(
            DELETE,
            path_params={"AccountSid": account_sid, "Sid": sid},
        )

    # =========================================================================
    # Credentials
    # =========================================================================

    async def list_credentials(
        self,
        account_sid: str,
        credential_list_sid: str,
        *,
        page_size: int | None = None,
        page: int | None = None,
        page_token: str | None = None,
    ) -> CredentialPage:
        params = ListCredentialParams(page_size=page_size, page=page, page_token=page_token)
        return await self._dispatcher.request(
            LIST_CREDENTIALS,
            path_params={"AccountSid": account_sid, "CredentialListSid": credential_list_sid},
            params=params.to_params(),
            result_type=CredentialPage,
        )

    async def create_credential(
        self,
        account_sid: str,
        credential_list_sid: str,
        body: CreateCredentialRequest,
    ) -> Credential:
        return await self._dispatcher.request(
            CREATE_CREDENTIAL,
            path_params={"AccountSid": account_sid, "CredentialListSid": credential_list_sid},
            data=body.to_params(),
            result_type=Credential,
        )

    async def fetch_credential(
        self, account_sid: str, credential_list_sid: str, sid: str
    ) -> Credential:
        return await self._dispatcher.request(
            FETCH_CREDENTIAL,
            path_params={
                "AccountSid": account_sid,
                "CredentialListSid": credential_list_sid,
                "Sid": sid,
            },
            result_type=Credential,
        )

    async def update_credential(
        self,
        account_sid: str,
        credential_list_sid: str,
        sid: str,
        body: UpdateCredentialRequest,
    ) -> Credential:
        """Change a credential's password."""
        return await self._dispatcher.request(
            UPDATE_CREDENTIAL,
            path_params={
                "AccountSid": account_sid,
                "CredentialListSid": credential_list_sid,
                "Sid": sid,
            },
            data=body.to_params(),
            result_type=Credential,
        )

    async def delete_credential(self, account_sid: str, credential_list_sid: str, sid: str) -> None:
        await self._dispatcher.request(
            DELETE_CREDENTIAL,
            path_params={
                "AccountSid": account_sid,
                "CredentialListSid": credential_list_sid,
                "Sid": sid,
            },
        )
