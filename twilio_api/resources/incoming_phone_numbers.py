"""Phone numbers owned by an account."""

from twilio_api._internal.dispatch.models import delete, get, post
from twilio_api.models.incoming_phone_numbers import (
    CreateIncomingPhoneNumberRequest,
    IncomingPhoneNumber,
    IncomingPhoneNumberList,
    ListIncomingPhoneNumberParams,
    NumberOrigin,
    UpdateIncomingPhoneNumberRequest,
)
from twilio_api.resources._base import ACCOUNT, Resource

LIST = get("incoming_phone_numbers.list", ACCOUNT + "/IncomingPhoneNumbers.json")
CREATE = post("incoming_phone_numbers.create", ACCOUNT + "/IncomingPhoneNumbers.json")
FETCH = get("incoming_phone_numbers.fetch", ACCOUNT + "/IncomingPhoneNumbers/{Sid}.json")
UPDATE = post("incoming_phone_numbers.update", ACCOUNT + "/IncomingPhoneNumbers/{Sid}.json")
DELETE = delete("incoming_phone_numbers.delete", ACCOUNT + "/IncomingPhoneNumbers/{Sid}.json")


class IncomingPhoneNumbers(Resource):
    async def list(
        self,
        account_sid: str,
        *,
        beta: bool | None = None,
        friendly_name: str | None = None,
        phone_number: str | None = None,
        origin: NumberOrigin | None = None,
        page_size: int | None = None,
        page: int | None = None,
        page_token: str | None = None,
    ) -> IncomingPhoneNumberList:
        params = ListIncomingPhoneNumberParams(
            beta=beta,
            friendly_name=friendly_name,
            phone_number=phone_number,
            origin=origin,
            page_size=page_size,
            page=page,
            page_token=page_token,
        )
        return await self._dispatcher.request(
            LIST,
            path_params={"AccountSid": account_sid},
            params=params.to_params(),
            result_type=IncomingPhoneNumberList,
        )

    async def create(
        self, account_sid: str, body: CreateIncomingPhoneNumberRequest
    ) -> IncomingPhoneNumber:
        """Purchase a phone number and attach its routing configuration."""
        return await self._dispatcher.request(
            CREATE,
            path_params={"AccountSid": account_sid},
            data=body.to_params(),
            result_type=IncomingPhoneNumber,
        )

    async def fetch(self, account_sid: str, sid: str) -> IncomingPhoneNumber:
        return await self._dispatcher.request(
            FETCH,
            path_params={"AccountSid": account_sid, "Sid": sid},
            result_type=IncomingPhoneNumber,
        )

    async def update(
        self, account_sid: str, sid: str, body: UpdateIncomingPhoneNumberRequest
    ) -> IncomingPhoneNumber:
        return await self._dispatcher.request(
            UPDATE,
            path_params={"AccountSid": account_sid, "Sid": sid},
            data=body.to_params(),
            result_type=IncomingPhoneNumber,
        )

    async def delete(self, account_sid: str, sid: str) -> None:
        """Release a phone number. It cannot be recovered afterwards."""
        await self._dispatcher.request(
            DELETE,
            path_params={"AccountSid": account_sid, "Sid": sid},
        )
