"""Recordings of calls and conferences."""

from twilio_api._internal.dispatch.models import delete, get
from twilio_api.models.recordings import (
    FetchRecordingParams,
    ListRecordingParams,
    Recording,
    RecordingList,
)
from twilio_api.resources._base import ACCOUNT, Resource

LIST = get("recordings.list", ACCOUNT + "/Recordings.json")
FETCH = get("recordings.fetch", ACCOUNT + "/Recordings/{Sid}.json")
DELETE = delete("recordings.delete", ACCOUNT + "/Recordings/{Sid}.json")


class Recordings(Resource):
    async def list(
        self,
        account_sid: str,
        *,
        call_sid: str | None = None,
        conference_sid: str | None = None,
        date_created: str | None = None,
        include_soft_deleted: bool | None = None,
        page_size: int | None = None,
        page: int | None = None,
        page_token: str | None = None,
    ) -> RecordingList:
        params = ListRecordingParams(
            call_sid=call_sid,
            conference_sid=conference_sid,
            date_created=date_created,
            include_soft_deleted=include_soft_deleted,
            page_size=page_size,
            page=page,
            page_token=page_token,
        )
        return await self._dispatcher.request(
            LIST,
            path_params={"AccountSid": account_sid},
            params=params.to_params(),
            result_type=RecordingList,
        )

    async def fetch(
        self,
        account_sid: str,
        sid: str,
        *,
        include_soft_deleted: bool | None = None,
    ) -> Recording:
        params = FetchRecordingParams(include_soft_deleted=include_soft_deleted)
        return await self._dispatcher.request(
            FETCH,
            path_params={"AccountSid": account_sid, "Sid": sid},
            params=params.to_params(),
            result_type=Recording,
        )

    async def delete(self, account_sid: str, sid: str) -> None:
        await self._dispatcher.request(
            DELETE,
            path_params={"AccountSid": account_sid, "Sid": sid},
        )
