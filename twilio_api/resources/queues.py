"""Call queues."""

from twilio_api._internal.dispatch.models import delete, get, post
from twilio_api.models.queues import (
    CreateQueueRequest,
    ListQueueParams,
    Queue,
    QueueList,
    UpdateQueueRequest,
)
from twilio_api.resources._base import ACCOUNT, Resource

LIST = get("queues.list", ACCOUNT + "/Queues.json")
CREATE = post("queues.create", ACCOUNT + "/Queues.json")
FETCH = get("queues.fetch", ACCOUNT + "/Queues/{Sid}.json")
UPDATE = post("queues.update", ACCOUNT + "/Queues/{Sid}.json")
DELETE = delete("queues.delete", ACCOUNT + "/Queues/{Sid}.json")


class Queues(Resource):
    async def list(
        self,
        account_sid: str,
        *,
        page_size: int | None = None,
        page: int | None = None,
        page_token: str | None = None,
    ) -> QueueList:
        params = ListQueueParams(page_size=page_size, page=page, page_token=page_token)
        return await self._dispatcher.request(
            LIST,
            path_params={"AccountSid": account_sid},
            params=params.to_params(),
            result_type=QueueList,
        )

    async def create(self, account_sid: str, body: CreateQueueRequest) -> Queue:
        return await self._dispatcher.request(
            CREATE,
            path_params={"AccountSid": account_sid},
            data=body.to_params(),
            result_type=Queue,
        )

    async def fetch(self, account_sid: str, sid: str) -> Queue:
        return await self._dispatcher.request(
            FETCH,
            path_params={"AccountSid": account_sid, "Sid": sid},
            result_type=Queue,
        )

    async def update(self, account_sid: str, sid: str, body: UpdateQueueRequest) -> Queue:
        return await self._dispatcher.request(
            UPDATE,
            path_params={"AccountSid": account_sid, "Sid": sid},
            data=body.to_params(),
            result_type=Queue,
        )

    async def delete(self, account_sid: str, sid: str) -> None:
        """Remove a queue. Twilio refuses while callers are still waiting in it."""
        await self._dispatcher.request(
            DELETE,
            path_params={"AccountSid": account_sid, "Sid": sid},
        )
