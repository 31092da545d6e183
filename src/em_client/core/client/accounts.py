"""Account endpoints."""

from abc import ABC, abstractmethod
from uuid import UUID

from em_client.models import (
    Account,
    AccountListResponse,
    AccountRequest,
    AccountUpdateRequest,
)
from .base import NO_CONTENT, BaseApiClient, path_segment


class AccountsApi(ABC):
    """Create, inspect and select accounts."""

    @abstractmethod
    def create_account(self, body: AccountRequest) -> Account:
        pass

    @abstractmethod
    def delete_account(self, account_id: UUID) -> None:
        pass

    @abstractmethod
    def get_account(self, account_id: UUID) -> Account:
        pass

    @abstractmethod
    def get_accounts(self) -> AccountListResponse:
        pass

    @abstractmethod
    def select_account(self, account_id: UUID) -> None:
        """Make an account the target of subsequent calls in this session."""

    @abstractmethod
    def update_account(self, account_id: UUID, body: AccountUpdateRequest) -> Account:
        pass


class AccountsClient(BaseApiClient, AccountsApi):

    def create_account(self, body: AccountRequest) -> Account:
        return self._request("POST", "/accounts", Account, body=body)

    def delete_account(self, account_id: UUID) -> None:
        self._request("DELETE", f"/accounts/{path_segment(account_id)}", expected=NO_CONTENT)

    def get_account(self, account_id: UUID) -> Account:
        return self._request("GET", f"/accounts/{path_segment(account_id)}", Account)

    def get_accounts(self) -> AccountListResponse:
        return self._request("GET", "/accounts", AccountListResponse)

    def select_account(self, account_id: UUID) -> None:
        self._request(
            "POST",
            f"/accounts/select_account/{path_segment(account_id)}",
            expected=NO_CONTENT,
        )

    def update_account(self, account_id: UUID, body: AccountUpdateRequest) -> Account:
        return self._request(
            "PATCH", f"/accounts/{path_segment(account_id)}", Account, body=body
        )
