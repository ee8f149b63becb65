"""API keys (SID + secret pairs usable as Basic auth credentials)."""

from twilio_api._internal.dispatch.models import delete, get, post
from twilio_api.models.keys import Key, KeyList, KeyRequest, ListKeyParams, NewKey
from twilio_api.resources._base import ACCOUNT, Resource

LIST = get("keys.list", ACCOUNT + "/Keys.json")
CREATE = post("keys.create", ACCOUNT + "/Keys.json")
FETCH = get("keys.fetch", ACCOUNT + "/Keys/{Sid}.json")
UPDATE = post("keys.update", ACCOUNT + "/Keys/{Sid}.json")
DELETE = delete("keys.delete", ACCOUNT + "/Keys/{Sid}.json")


class Keys(Resource):
    async def list(
        self,
        account_sid: str,
        *,
        page_size: int | None = None,
        page: int | None = None,
        page_token: str | None = None,
    ) -> KeyList:
        params = ListKeyParams(page_size=page_size, page=page, page_token=page_token)
        return await self._dispatcher.request(
            LIST,
            path_params={"AccountSid": account_sid},
            params=params.to_params(),
            result_type=KeyList,
        )

    async def create(self, account_sid: str, body: KeyRequest | None = None) -> NewKey:
        """Create an API key. Store the returned secret; it is not shown again."""
        data = body.to_params() if body is not None else None
        return await self._dispatcher.request(
            CREATE,
            path_params={"AccountSid": account_sid},
            data=data,
            result_type=NewKey,
        )

    async def fetch(self, account_sid: str, sid: str) -> Key:
        return await self._dispatcher.request(
            FETCH,
            path_params={"AccountSid": account_sid, "Sid": sid},
            result_type=Key,
        )

    async def update(self, account_sid: str, sid: str, body: KeyRequest) -> Key:
        return await self._dispatcher.request(
            UPDATE,
            path_params={"AccountSid": account_sid, "Sid": sid},
            data=body.to_params(),
            result_type=Key,
        )

    async def delete(self, account_sid: str, sid: str) -> None:
        await self._dispatcher.request(
            DELETE,
            path_params={"AccountSid": account_sid, "Sid": sid},
        )
