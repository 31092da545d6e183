"""User management endpoints."""

from abc import ABC, abstractmethod
from typing import Optional
from uuid import UUID

from em_client.models import (
    ConfirmEmailRequest,
    ConfirmEmailResponse,
    ForgotPasswordRequest,
    GetAllUsersResponse,
    InviteUserRequest,
    PasswordChangeRequest,
    PasswordResetRequest,
    ProcessInviteRequest,
    SignupRequest,
    UpdateUserRequest,
    User,
    UserBlacklistRequest,
    ValidateTokenRequest,
    ValidateTokenResponse,
)
from .base import NO_CONTENT, BaseApiClient, path_segment

CREATED = (201,)


class UsersApi(ABC):
    """Sign-up, invitations, passwords and user administration."""

    @abstractmethod
    def accept_terms_and_conditions(self) -> None:
        pass

    @abstractmethod
    def blacklist_user(self, body: UserBlacklistRequest) -> None:
        pass

    @abstractmethod
    def change_password(self, body: PasswordChangeRequest) -> None:
        pass

    @abstractmethod
    def confirm_email(self, body: ConfirmEmailRequest) -> ConfirmEmailResponse:
        pass

    @abstractmethod
    def create_user(self, body: SignupRequest) -> User:
        pass

    @abstractmethod
    def delete_user_account(self, user_id: UUID) -> None:
        pass

    @abstractmethod
    def delete_user_from_account(self, user_id: UUID) -> None:
        """Remove a user from the currently selected account."""

    @abstractmethod
    def forgot_password(self, body: ForgotPasswordRequest) -> None:
        pass

    @abstractmethod
    def get_all_users(
        self,
        all_search: Optional[str] = None,
        limit: Optional[int] = None,
        offset: Optional[int] = None,
        sort_by: Optional[str] = None,
    ) -> GetAllUsersResponse:
        pass

    @abstractmethod
    def get_logged_in_user(self) -> User:
        pass

    @abstractmethod
    def get_user(self, user_id: UUID) -> User:
        pass

    @abstractmethod
    def invite_user(self, body: InviteUserRequest) -> User:
        pass

    @abstractmethod
    def process_invitations(self, body: ProcessInviteRequest) -> None:
        pass

    @abstractmethod
    def resend_confirm_email(self) -> None:
        pass

    @abstractmethod
    def resend_invitation(self, user_id: UUID) -> None:
        pass

    @abstractmethod
    def reset_password(self, user_id: UUID, body: PasswordResetRequest) -> None:
        pass

    @abstractmethod
    def update_user(self, user_id: UUID, body: UpdateUserRequest) -> User:
        pass

    @abstractmethod
    def validate_password_reset_token(
        self, user_id: UUID, body: ValidateTokenRequest
    ) -> ValidateTokenResponse:
        pass

    @abstractmethod
    def whitelist_user(self, user_id: UUID, user_token: str) -> User:
        pass


class UsersClient(BaseApiClient, UsersApi):

    def accept_terms_and_conditions(self) -> None:
        self._request("POST", "/users/terms_and_conditions", expected=NO_CONTENT)

    def blacklist_user(self, body: UserBlacklistRequest) -> None:
        self._request("POST", "/users/blacklist", body=body, expected=NO_CONTENT)

    def change_password(self, body: PasswordChangeRequest) -> None:
        self._request("POST", "/users/change_password", body=body, expected=NO_CONTENT)

    def confirm_email(self, body: ConfirmEmailRequest) -> ConfirmEmailResponse:
        return self._request("POST", "/users/confirm_email", ConfirmEmailResponse, body=body)

    def create_user(self, body: SignupRequest) -> User:
        return self._request("POST", "/users", User, body=body, expected=CREATED)

    def delete_user_account(self, user_id: UUID) -> None:
        self._request("DELETE", f"/users/{path_segment(user_id)}", expected=NO_CONTENT)

    def delete_user_from_account(self, user_id: UUID) -> None:
        self._request(
            "DELETE", f"/users/{path_segment(user_id)}/accounts", expected=NO_CONTENT
        )

    def forgot_password(self, body: ForgotPasswordRequest) -> None:
        self._request("POST", "/users/forgot_password", body=body, expected=NO_CONTENT)

    def get_all_users(
        self,
        all_search: Optional[str] = None,
        limit: Optional[int] = None,
        offset: Optional[int] = None,
        sort_by: Optional[str] = None,
    ) -> GetAllUsersResponse:
        params = {
            "all_search": all_search,
            "limit": limit,
            "offset": offset,
            "sort_by": sort_by,
        }
        return self._request("GET", "/users", GetAllUsersResponse, params=params)

    def get_logged_in_user(self) -> User:
        return self._request("GET", "/user", User)

    def get_user(self, user_id: UUID) -> User:
        return self._request("GET", f"/users/{path_segment(user_id)}", User)

    def invite_user(self, body: InviteUserRequest) -> User:
        return self._request("POST", "/users/invite", User, body=body, expected=CREATED)

    def process_invitations(self, body: ProcessInviteRequest) -> None:
        self._request("POST", "/users/process_invite", body=body, expected=NO_CONTENT)

    def resend_confirm_email(self) -> None:
        self._request("POST", "/users/resend_confirm_email", expected=NO_CONTENT)

    def resend_invitation(self, user_id: UUID) -> None:
        self._request(
            "POST", f"/users/{path_segment(user_id)}/resend_invite", expected=NO_CONTENT
        )

    def reset_password(self, user_id: UUID, body: PasswordResetRequest) -> None:
        self._request(
            "POST",
            f"/users/{path_segment(user_id)}/reset_password",
            body=body,
            expected=NO_CONTENT,
        )

    def update_user(self, user_id: UUID, body: UpdateUserRequest) -> User:
        return self._request("PATCH", f"/users/{path_segment(user_id)}", User, body=body)

    def validate_password_reset_token(
        self, user_id: UUID, body: ValidateTokenRequest
    ) -> ValidateTokenResponse:
        return self._request(
            "POST",
            f"/users/{path_segment(user_id)}/validate_token",
            ValidateTokenResponse,
            body=body,
        )

    def whitelist_user(self, user_id: UUID, user_token: str) -> User:
        return self._request(
            "GET",
            f"/users/whitelist/{path_segment(user_id)}",
            User,
            params={"user_token": user_token},
        )
