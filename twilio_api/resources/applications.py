"""TwiML applications."""

from twilio_api._internal.dispatch.models import delete, get, post
from twilio_api.models.applications import (
    Application,
    ApplicationList,
    ApplicationRequest,
    ListApplicationParams,
)
from twilio_api.resources._base import ACCOUNT, Resource

LIST = get("applications.list", ACCOUNT + "/Applications.json")
CREATE = post("applications.create", ACCOUNT + "/Applications.json")
FETCH = get("applications.fetch", ACCOUNT + "/Applications/{Sid}.json")
UPDATE = post("applications.update", ACCOUNT + "/Applications/{Sid}.json")
DELETE = delete("applications.delete", ACCOUNT + "/Applications/{Sid}.json")


class Applications(Resource):
    async def list(
        self,
        account_sid: str,
        *,
        friendly_name: str | None = None,
        page_size: int | None = None,
        page: int | None = None,
        page_token: str | None = None,
    ) -> ApplicationList:
        params = ListApplicationParams(
            friendly_name=friendly_name,
            page_size=page_size,
            page=page,
            page_token=page_token,
        )
        return await self._dispatcher.request(
            LIST,
            path_params={"AccountSid": account_sid},
            params=params.to_params(),
            result_type=ApplicationList,
        )

    async def create(self, account_sid: str, body: ApplicationRequest | None = None) -> Application:
        data = body.to_params() if body is not None else None
        return await self._dispatcher.request(
            CREATE,
            path_params={"AccountSid": account_sid},
            data=data,
            result_type=Application,
        )

    async def fetch(self, account_sid: str, sid: str) -> Application:
        return await self._dispatcher.request(
            FETCH,
            path_params={"AccountSid": account_sid, "Sid": sid},
            result_type=Application,
        )

    async def update(self, account_sid: str, sid: str, body: ApplicationRequest) -> Application:
        return await self._dispatcher.request(
            UPDATE,
            path_params={"AccountSid": account_sid, "Sid": sid},
            data=body.to_params(),
            result_type=Application,
        )

    async def delete(self, account_sid: str, sid: str) -> None:
        await self._dispatcher.request(
            DELETE,
            path_params={"AccountSid": account_sid, "Sid": sid},
        )
