"""SMS, MMS and channel messages."""

from twilio_api._internal.dispatch.models import delete, get, post
from twilio_api.models.messages import (
    CreateMessageRequest,
    ListMessageParams,
    Message,
    MessageList,
    UpdateMessageRequest,
)
from twilio_api.resources._base import ACCOUNT, Resource

LIST = get("messages.list", ACCOUNT + "/Messages.json")
CREATE = post("messages.create", ACCOUNT + "/Messages.json")
FETCH = get("messages.fetch", ACCOUNT + "/Messages/{Sid}.json")
UPDATE = post("messages.update", ACCOUNT + "/Messages/{Sid}.json")
DELETE = delete("messages.delete", ACCOUNT + "/Messages/{Sid}.json")


class Messages(Resource):
    async def list(
        self,
        account_sid: str,
        *,
        to: str | None = None,
        from_: str | None = None,
        date_sent: str | None = None,
        page_size: int | None = None,
        page: int | None = None,
        page_token: str | None = None,
    ) -> MessageList:
        """Retrieve one page of messages, most recent first.

        Args:
            account_sid: Account that owns the messages.
            to: Only messages sent to this address.
            from_: Only messages sent from this address.
            date_sent: Only messages sent on this date (YYYY-MM-DD).
            page_size: Results per page.
            page: Page index.
            page_token: Page token from a previous response.
        """
        params = ListMessageParams(
            to=to,
            from_=from_,
            date_sent=date_sent,
            page_size=page_size,
            page=page,
            page_token=page_token,
        )
        return await self._dispatcher.request(
            LIST,
            path_params={"AccountSid": account_sid},
            params=params.to_params(),
            result_type=MessageList,
        )

    async def create(self, account_sid: str, body: CreateMessageRequest) -> Message:
        """Send a message."""
        return await self._dispatcher.request(
            CREATE,
            path_params={"AccountSid": account_sid},
            data=body.to_params(),
            result_type=Message,
        )

    async def fetch(self, account_sid: str, sid: str) -> Message:
        return await self._dispatcher.request(
            FETCH,
            path_params={"AccountSid": account_sid, "Sid": sid},
            result_type=Message,
        )

    async def update(self, account_sid: str, sid: str, body: UpdateMessageRequest) -> Message:
        """Redact a message body (pass an empty body) or cancel a scheduled message."""
        return await self._dispatcher.request(
            UPDATE,
            path_params={"AccountSid": account_sid, "Sid": sid},
            data=body.to_params(),
            result_type=Message,
        )

    async def delete(self, account_sid: str, sid: str) -> None:
        await self._dispatcher.request(
            DELETE,
            path_params={"AccountSid": account_sid, "Sid": sid},
        )
