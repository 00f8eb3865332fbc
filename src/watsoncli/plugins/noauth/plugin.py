"""Authenticator plugin for services that need no credentials."""

from __future__ import annotations

from watsoncli.auth.base import AuthPlugin, AuthResult
from watsoncli.models import ServiceCredentials


class NoAuthPlugin(AuthPlugin):
    """Send requests without any authentication headers.

    Useful against local deployments and test doubles that do not check
    credentials.
    """

    @property
    def auth_type(self) -> str:
        return "noAuth"

    def authenticate(self, credentials: ServiceCredentials) -> AuthResult:
        return AuthResult()
