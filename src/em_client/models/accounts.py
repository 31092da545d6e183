"""Account models."""

from typing import List, Optional
from uuid import UUID

from .base import ByteArray, EmModel
from .enums import AccessRoles, UserAccountStatus


class Account(EmModel):
    name: str
    acct_id: UUID
    created_at: int
    roles: List[AccessRoles]
    custom_logo: Optional[ByteArray] = None
    status: UserAccountStatus


class AccountListResponse(EmModel):
    items: Optional[List[Account]] = None


class AccountRequest(EmModel):
    name: str
    custom_logo: Optional[ByteArray] = None


class AccountUpdateRequest(EmModel):
    name: Optional[str] = None
    custom_logo: Optional[ByteArray] = None
