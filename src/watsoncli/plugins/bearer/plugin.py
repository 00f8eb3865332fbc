"""Bearer token authenticator plugin.

This module provides :class:`BearerAuthPlugin`, which implements the
``bearerToken`` auth type. A token that is already available in the
service's ``BEARER_TOKEN`` variable is sent as an
``Authorization: Bearer <token>`` header.

This plugin does not perform any token exchange or refresh. For API key
exchange, see :mod:`watsoncli.plugins.iam`.

See Also:
    :class:`watsoncli.auth.base.AuthPlugin` for the base interface.
"""

from __future__ import annotations

from watsoncli.auth.base import AuthPlugin, AuthResult
from watsoncli.exceptions import AuthConfigError
from watsoncli.models import ServiceCredentials


class BearerAuthPlugin(AuthPlugin):
    """Authenticate via Bearer token in the Authorization header."""

    @property
    def auth_type(self) -> str:
        return "bearerToken"

    def authenticate(self, credentials: ServiceCredentials) -> AuthResult:
        """Return a Bearer auth header for the configured token.

        Raises:
            AuthConfigError: If no bearer token is configured.
        """
        errors = self.validate_config(credentials)
        if errors:
            raise AuthConfigError("; ".join(errors))
        return AuthResult(headers={"Authorization": f"Bearer {credentials.bearer_token}"})

    def validate_config(self, credentials: ServiceCredentials) -> list[str]:
        errors: list[str] = []
        if not credentials.bearer_token:
            errors.append("Bearer token authentication requires a BEARER_TOKEN")
        return errors
