"""User management models."""

from typing import List, Optional
from uuid import UUID

from .base import EmModel
from .common import SearchMetadata
from .enums import AccessRoles, UserAccountStatus, UserStatus


class User(EmModel):
    user_id: UUID
    first_name: Optional[str] = None
    last_name: Optional[str] = None
    user_email: str
    last_logged_in_at: Optional[int] = None
    created_at: Optional[int] = None
    email_verified: Optional[bool] = None
    status: Optional[UserStatus] = None
    roles: Optional[List[AccessRoles]] = None
    user_account_status: Optional[UserAccountStatus] = None


class SignupRequest(EmModel):
    user_email: str
    user_password: str
    first_name: Optional[str] = None
    last_name: Optional[str] = None


class InviteUserRequest(EmModel):
    user_email: str
    roles: List[AccessRoles]
    first_name: Optional[str] = None
    last_name: Optional[str] = None


class ProcessInviteRequest(EmModel):
    accepts: Optional[List[UUID]] = None
    rejects: Optional[List[UUID]] = None


class UpdateUserRequest(EmModel):
    first_name: Optional[str] = None
    last_name: Optional[str] = None
    roles: Optional[List[AccessRoles]] = None


class UserBlacklistRequest(EmModel):
    email: str


class PasswordChangeRequest(EmModel):
    current_password: str
    new_password: str


class PasswordResetRequest(EmModel):
    reset_token: str
    new_password: str


class ForgotPasswordRequest(EmModel):
    user_email: str


class ConfirmEmailRequest(EmModel):
    confirm_token: str


class ConfirmEmailResponse(EmModel):
    user_email: str


class ValidateTokenRequest(EmModel):
    reset_token: str


class ValidateTokenResponse(EmModel):
    user_email: str


class GetAllUsersResponse(EmModel):
    metadata: Optional[SearchMetadata] = None
    items: List[User]
