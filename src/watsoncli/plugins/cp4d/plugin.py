"""Cloud Pak for Data authenticator plugin.

This module provides :class:`CP4DAuthPlugin`, which implements the
``cp4d`` auth type. The service's ``USERNAME`` and ``PASSWORD`` are sent
with Basic authentication to ``<AUTH_URL>/v1/preauth/validateAuth``; the
``accessToken`` in the response is then used as a bearer token.

See Also:
    :class:`watsoncli.auth.base.AuthPlugin` for the base interface.
    :mod:`watsoncli.plugins.iam` for the IBM Cloud token exchange.
"""

from __future__ import annotations

from typing import Any, Optional

import httpx

from watsoncli.auth.base import AuthPlugin, AuthResult
from watsoncli.exceptions import AuthConfigError
from watsoncli.models import ServiceCredentials
from watsoncli.plugins.basic.plugin import basic_header

VALIDATE_PATH = "/v1/preauth/validateAuth"


class CP4DAuthPlugin(AuthPlugin):
    """Authenticate against a Cloud Pak for Data cluster.

    Args:
        transport: Optional :class:`httpx.BaseTransport` for the token
            request, used by tests to substitute :class:`httpx.MockTransport`.
        timeout: Token request timeout in seconds.
    """

    def __init__(
        self,
        transport: Optional[httpx.BaseTransport] = None,
        timeout: Optional[float] = 30.0,
    ) -> None:
        self._transport = transport
        self._timeout = timeout

    @property
    def auth_type(self) -> str:
        return "cp4d"

    def authenticate(self, credentials: ServiceCredentials) -> AuthResult:
        """Fetch an access token from the cluster and return a Bearer header.

        Raises:
            AuthConfigError: If a required field is missing or the token
                request fails.
        """
        errors = self.validate_config(credentials)
        if errors:
            raise AuthConfigError("; ".join(errors))

        token = self._fetch_token(credentials)
        return AuthResult(headers={"Authorization": f"Bearer {token}"})

    def validate_config(self, credentials: ServiceCredentials) -> list[str]:
        errors: list[str] = []
        if not credentials.auth_url:
            errors.append("Cloud Pak for Data authentication requires an AUTH_URL")
        if not credentials.username:
            errors.append("Cloud Pak for Data authentication requires a USERNAME")
        if not credentials.password:
            errors.append("Cloud Pak for Data authentication requires a PASSWORD")
        return errors

    def _fetch_token(self, credentials: ServiceCredentials) -> str:
        base = (credentials.auth_url or "").rstrip("/")
        url = base if base.endswith(VALIDATE_PATH) else base + VALIDATE_PATH
        headers = {
            "Accept": "application/json",
            "Authorization": basic_header(credentials.username or "", credentials.password or ""),
        }
        try:
            with httpx.Client(
                transport=self._transport,
                verify=not credentials.disable_ssl,
                timeout=self._timeout,
            ) as client:
                response = client.get(url, headers=headers)
            response.raise_for_status()
            token_data: dict[str, Any] = response.json()
        except httpx.HTTPStatusError as exc:
            raise AuthConfigError(
                f"Cloud Pak for Data token request failed with status "
                f"{exc.response.status_code}"
            ) from exc
        except httpx.HTTPError as exc:
            raise AuthConfigError(f"Cloud Pak for Data token request failed: {exc}") from exc
        except ValueError as exc:
            raise AuthConfigError(f"Cloud Pak for Data token response is not JSON: {exc}") from exc

        if not isinstance(token_data, dict) or "accessToken" not in token_data:
            raise AuthConfigError("Cloud Pak for Data token response missing 'accessToken' field")
        return str(token_data["accessToken"])
