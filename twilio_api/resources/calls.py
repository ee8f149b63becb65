"""Voice calls."""

from twilio_api._internal.dispatch.models import delete, get, post
from twilio_api.models.calls import (
    Call,
    CallList,
    CallStatus,
    CreateCallRequest,
    ListCallParams,
    UpdateCallRequest,
)
from twilio_api.resources._base import ACCOUNT, Resource

LIST = get("calls.list", ACCOUNT + "/Calls.json")
CREATE = post("calls.create", ACCOUNT + "/Calls.json")
FETCH = get("calls.fetch", ACCOUNT + "/Calls/{Sid}.json")
UPDATE = post("calls.update", ACCOUNT + "/Calls/{Sid}.json")
DELETE = delete("calls.delete", ACCOUNT + "/Calls/{Sid}.json")


class Calls(Resource):
    async def list(
        self,
        account_sid: str,
        *,
        to: str | None = None,
        from_: str | None = None,
        parent_call_sid: str | None = None,
        status: CallStatus | None = None,
        start_time: str | None = None,
        end_time: str | None = None,
        page_size: int | None = None,
        page: int | None = None,
        page_token: str | None = None,
    ) -> CallList:
        """Retrieve one page of calls made to and from the account.

        Args:
            account_sid: Account that owns the calls.
            to: Only calls to this number or client.
            from_: Only calls from this number or client.
            parent_call_sid: Only children of this call.
            status: Only calls in this state.
            start_time: Only calls that started on this date (YYYY-MM-DD).
            end_time: Only calls that ended on this date (YYYY-MM-DD).
            page_size: Results per page.
            page: Page index.
            page_token: Page token from a previous response.

        Returns:
            CallList with the page's calls and its paging links.
        """
        params = ListCallParams(
            to=to,
            from_=from_,
            parent_call_sid=parent_call_sid,
            status=status,
            start_time=start_time,
            end_time=end_time,
            page_size=page_size,
            page=page,
            page_token=page_token,
        )
        return await self._dispatcher.request(
            LIST,
            path_params={"AccountSid": account_sid},
            params=params.to_params(),
            result_type=CallList,
        )

    async def create(self, account_sid: str, body: CreateCallRequest) -> Call:
        """Place an outbound call."""
        return await self._dispatcher.request(
            CREATE,
            path_params={"AccountSid": account_sid},
            data=body.to_params(),
            result_type=Call,
        )

    async def fetch(self, account_sid: str, sid: str) -> Call:
        return await self._dispatcher.request(
            FETCH,
            path_params={"AccountSid": account_sid, "Sid": sid},
            result_type=Call,
        )

    async def update(self, account_sid: str, sid: str, body: UpdateCallRequest) -> Call:
        """Redirect a live call to new TwiML, or end it."""
        return await self._dispatcher.request(
            UPDATE,
            path_params={"AccountSid": account_sid, "Sid": sid},
            data=body.to_params(),
            result_type=Call,
        )

    async def delete(self, account_sid: str, sid: str) -> None:
        """Delete a call record from the account's logs."""
        await self._dispatcher.request(
            DELETE,
            path_params={"AccountSid": account_sid, "Sid": sid},
        )
