"""Accounts and subaccounts."""

from twilio_api._internal.dispatch.models import get, post
from twilio_api.models.accounts import (
    Account,
    AccountList,
    AccountStatus,
    Balance,
    CreateAccountRequest,
    ListAccountParams,
    UpdateAccountRequest,
)
from twilio_api.resources._base import ACCOUNT, ACCOUNTS, Resource

LIST = get("accounts.list", ACCOUNTS + ".json")
CREATE = post("accounts.create", ACCOUNTS + ".json")
FETCH = get("accounts.fetch", ACCOUNTS + "/{Sid}.json")
UPDATE = post("accounts.update", ACCOUNTS + "/{Sid}.json")

FETCH_BALANCE = get("balance.fetch", ACCOUNT + "/Balance.json")


class Accounts(Resource):
    async def list(
        self,
        *,
        friendly_name: str | None = None,
        status: AccountStatus | None = None,
        page_size: int | None = None,
        page: int | None = None,
        page_token: str | None = None,
    ) -> AccountList:
        """Retrieve one page of the accounts visible to the credentials.

        Args:
            friendly_name: Only return accounts with this exact name.
            status: Only return accounts in this state.
            page_size: Results per page.
            page: Page index.
            page_token: Page token from a previous response.

        Returns:
            AccountList with the page's accounts and its paging links.
        """
        params = ListAccountParams(
            friendly_name=friendly_name,
            status=status,
            page_size=page_size,
            page=page,
            page_token=page_token,
        )
        return await self._dispatcher.request(LIST, params=params.to_params(), result_type=AccountList)

    async def create(self, body: CreateAccountRequest | None = None) -> Account:
        """Create a subaccount of the authenticating account."""
        data = body.to_params() if body is not None else None
        return await self._dispatcher.request(CREATE, data=data, result_type=Account)

    async def fetch(self, sid: str) -> Account:
        return await self._dispatcher.request(FETCH, path_params={"Sid": sid}, result_type=Account)

    async def update(self, sid: str, body: UpdateAccountRequest) -> Account:
        """Rename an account or change its status (suspend, reactivate, close)."""
        return await self._dispatcher.request(
            UPDATE,
            path_params={"Sid": sid},
            data=body.to_params(),
            result_type=Account,
        )


class Balances(Resource):
    async def fetch(self, account_sid: str) -> Balance:
        return await self._dispatcher.request(
            FETCH_BALANCE,
            path_params={"AccountSid": account_sid},
            result_type=Balance,
        )
