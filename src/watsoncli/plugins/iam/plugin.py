"""IBM Cloud IAM authenticator plugin.

This module provides :class:`IAMAuthPlugin`, which implements the ``iam``
auth type. The service's API key is exchanged for an access token at the
IAM token endpoint, and the token is sent as
``Authorization: Bearer <access_token>``.

The exchange posts the form fields
``grant_type=urn:ibm:params:oauth:grant-type:apikey`` and ``apikey`` to
``<AUTH_URL>/identity/token`` (``https://iam.cloud.ibm.com`` when no
``AUTH_URL`` is configured).

See Also:
    :class:`watsoncli.auth.base.AuthPlugin` for the base interface.
"""

from __future__ import annotations

from typing import Any, Optional

import httpx

from watsoncli.auth.base import AuthPlugin, AuthResult
from watsoncli.exceptions import AuthConfigError
from watsoncli.models import ServiceCredentials

DEFAULT_IAM_URL = "https://iam.cloud.ibm.com"
TOKEN_PATH = "/identity/token"
GRANT_TYPE = "urn:ibm:params:oauth:grant-type:apikey"


class IAMAuthPlugin(AuthPlugin):
    """Authenticate by exchanging an IBM Cloud API key for a bearer token.

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
        return "iam"

    def authenticate(self, credentials: ServiceCredentials) -> AuthResult:
        """Fetch an access token and return a Bearer auth header.

        Args:
            credentials: Must include ``apikey``. ``auth_url`` overrides the
                IAM endpoint and ``disable_ssl`` turns off certificate
                verification for the token request.

        Returns:
            An :class:`~watsoncli.auth.base.AuthResult` containing an
            ``Authorization: Bearer <token>`` header.

        Raises:
            AuthConfigError: If the API key is missing or the token request
                fails.
        """
        errors = self.validate_config(credentials)
        if errors:
            raise AuthConfigError("; ".join(errors))

        token_data = self._fetch_token(credentials)
        return AuthResult(headers={"Authorization": f"Bearer {token_data['access_token']}"})

    def validate_config(self, credentials: ServiceCredentials) -> list[str]:
        errors: list[str] = []
        if not credentials.apikey:
            errors.append("IAM authentication requires an APIKEY")
        return errors

    def _fetch_token(self, credentials: ServiceCredentials) -> dict[str, Any]:
        """POST the API key to the token endpoint and return the JSON response."""
        base = (credentials.auth_url or DEFAULT_IAM_URL).rstrip("/")
        url = base if base.endswith(TOKEN_PATH) else base + TOKEN_PATH

        data = {"grant_type": GRANT_TYPE, "apikey": credentials.apikey or ""}
        try:
            with httpx.Client(
                transport=self._transport,
                verify=not credentials.disable_ssl,
                timeout=self._timeout,
            ) as client:
                response = client.post(url, data=data, headers={"Accept": "application/json"})
            response.raise_for_status()
            token_data: dict[str, Any] = response.json()
        except httpx.HTTPStatusError as exc:
            raise AuthConfigError(
                f"IAM token request failed with status {exc.response.status_code}: "
                f"{' '.join(exc.response.text.split())[:200]}"
            ) from exc
        except httpx.HTTPError as exc:
            raise AuthConfigError(f"IAM token request failed: {exc}") from exc
        except ValueError as exc:
            raise AuthConfigError(f"IAM token response is not JSON: {exc}") from exc

        if not isinstance(token_data, dict) or "access_token" not in token_data:
            raise AuthConfigError("IAM token response missing 'access_token' field")

        return token_data
