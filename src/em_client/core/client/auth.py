"""Authentication endpoint."""

from abc import ABC, abstractmethod

from em_client.models import AuthResponse
from .base import BaseApiClient
from .errors import ApiError


class AuthApi(ABC):

    @abstractmethod
    def authenticate_user(self) -> AuthResponse:
        """Exchange the Basic credentials set on the client for an access token."""


class AuthClient(BaseApiClient, AuthApi):

    def authenticate_user(self) -> AuthResponse:
        return self._request("POST", "/sys/auth", AuthResponse)

    def login(self, username: str, password: str) -> str:
        """Authenticate with username and password and switch to the returned token.

        Returns:
            The access token
        """
        self.set_basic_auth(username, password)
        response = self.authenticate_user()
        if not response.access_token:
            raise ApiError("Authentication response did not contain an access token")
        self.set_bearer_token(response.access_token)
        return response.access_token
