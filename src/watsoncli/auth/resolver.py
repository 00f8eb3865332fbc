"""Resolve the endpoint and credentials a service call is made with.

:func:`resolve_auth` runs once per invocation, before any flag is bound:
it loads the service's credential set, selects the endpoint URL, and
asks the :class:`~watsoncli.auth.manager.AuthManager` for the request
credentials.
"""

from __future__ import annotations

import dataclasses
from collections.abc import Mapping
from typing import Optional

from watsoncli.auth.base import AuthResult
from watsoncli.auth.credentials import load_service_credentials
from watsoncli.auth.manager import AuthManager, create_default_manager
from watsoncli.models import GlobalConfig, ServiceSpec
from watsoncli.output import get_output


@dataclasses.dataclass
class ResolvedAuth:
    """Everything the HTTP client needs to reach one service."""

    base_url: str
    auth_result: AuthResult
    verify_ssl: bool
    timeout: Optional[float]
    source: str


def resolve_auth(
    service: ServiceSpec,
    config: Optional[GlobalConfig] = None,
    manager: Optional[AuthManager] = None,
    environ: Optional[Mapping[str, str]] = None,
) -> ResolvedAuth:
    """Resolve the endpoint and request credentials for *service*.

    Args:
        service: The service being called.
        config: Request settings; defaults are used when ``None``.
        manager: Authenticator registry; :func:`create_default_manager`
            when ``None``.
        environ: Environment to read; defaults to :data:`os.environ`.

    Returns:
        A :class:`ResolvedAuth`. The URL is the credential set's ``URL``
        when present, else the service default. ``DISABLE_SSL`` overrides
        the configured ``verify_ssl``.

    Raises:
        AuthConfigError: If no usable credential set exists or the token
            exchange fails.
    """
    config = config or GlobalConfig()
    manager = manager or create_default_manager()

    credentials = load_service_credentials(service.credential_name, environ)
    output = get_output()
    output.debug(
        f"Credentials for {service.credential_name} from {credentials.source} "
        f"(auth type {credentials.auth_type})"
    )

    auth_result = manager.authenticate(credentials)
    return ResolvedAuth(
        base_url=(credentials.url or service.default_url).rstrip("/"),
        auth_result=auth_result,
        verify_ssl=config.request.verify_ssl and not credentials.disable_ssl,
        timeout=config.request.timeout,
        source=credentials.source,
    )
