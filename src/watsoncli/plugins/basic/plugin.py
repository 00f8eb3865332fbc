"""HTTP Basic authenticator plugin.

This module provides :class:`BasicAuthPlugin`, which implements the
``basic`` auth type. The service's ``USERNAME`` and ``PASSWORD`` are
joined as ``username:password``, Base64-encoded, and sent as an
``Authorization: Basic <encoded>`` header per :rfc:`7617`.

See Also:
    :class:`watsoncli.auth.base.AuthPlugin` for the base interface.
"""

from __future__ import annotations

import base64

from watsoncli.auth.base import AuthPlugin, AuthResult
from watsoncli.exceptions import AuthConfigError
from watsoncli.models import ServiceCredentials


def basic_header(username: str, password: str) -> str:
    """Return the ``Authorization`` header value for *username* and *password*."""
    raw = f"{username}:{password}"
    encoded = base64.b64encode(raw.encode("utf-8")).decode("ascii")
    return f"Basic {encoded}"


class BasicAuthPlugin(AuthPlugin):
    """Authenticate via HTTP Basic authentication."""

    @property
    def auth_type(self) -> str:
        return "basic"

    def authenticate(self, credentials: ServiceCredentials) -> AuthResult:
        """Return a Basic auth header built from the username and password.

        Raises:
            AuthConfigError: If the username or password is missing.
        """
        errors = self.validate_config(credentials)
        if errors:
            raise AuthConfigError("; ".join(errors))
        header = basic_header(credentials.username or "", credentials.password or "")
        return AuthResult(headers={"Authorization": header})

    def validate_config(self, credentials: ServiceCredentials) -> list[str]:
        errors: list[str] = []
        if not credentials.username:
            errors.append("Basic authentication requires a USERNAME")
        if not credentials.password:
            errors.append("Basic authentication requires a PASSWORD")
        return errors
