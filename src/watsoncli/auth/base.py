"""Abstract base class for authenticator plugins.

This module defines the two foundational types of the auth subsystem:

- :class:`AuthResult` -- a plain container for the HTTP headers and query
  parameters that an authenticator produces.
- :class:`AuthPlugin` -- the abstract base class that every authenticator
  must extend.

To implement a new authenticator, subclass :class:`AuthPlugin`, set the
:attr:`~AuthPlugin.auth_type` property, and implement
:meth:`~AuthPlugin.authenticate`. Optionally override
:meth:`~AuthPlugin.validate_config` for upfront credential checks.

See Also:
    :mod:`watsoncli.auth.manager` for plugin registration and dispatch.
"""

from __future__ import annotations

from abc import ABC, abstractmethod

from watsoncli.models import ServiceCredentials


class AuthResult:
    """Container for authentication artifacts to inject into HTTP requests.

    After a plugin authenticates, the resulting headers and query
    parameters are collected here and later merged into outgoing requests
    by :class:`~watsoncli.client.sync_client.SyncClient`.

    Args:
        headers: HTTP headers to add (e.g. ``{"Authorization": "Bearer ..."}``).
        params: Query-string parameters to add.

    Example::

        result = AuthResult(headers={"Authorization": "Bearer tok123"})
        assert result.headers["Authorization"] == "Bearer tok123"
    """

    def __init__(
        self,
        headers: dict[str, str] | None = None,
        params: dict[str, str] | None = None,
    ):
        self.headers = headers or {}
        self.params = params or {}


class AuthPlugin(ABC):
    """Abstract base class for authenticator plugins.

    Every concrete authenticator (IAM, basic, bearer token, etc.) must
    subclass this and provide:

    1. An :attr:`auth_type` property returning the identifier used in the
       ``<SERVICE>_AUTH_TYPE`` variable (e.g. ``"iam"``, ``"bearerToken"``).
    2. An :meth:`authenticate` implementation that turns the service's
       :class:`~watsoncli.models.ServiceCredentials` into an
       :class:`AuthResult`.

    Plugins are registered with :class:`~watsoncli.auth.manager.AuthManager`
    and looked up by their ``auth_type`` at runtime.
    """

    @property
    @abstractmethod
    def auth_type(self) -> str:
        """Return the auth type identifier this plugin handles."""
        ...

    @abstractmethod
    def authenticate(self, credentials: ServiceCredentials) -> AuthResult:
        """Resolve credentials and return auth artifacts for HTTP requests.

        Args:
            credentials: The credential set found for the service.

        Returns:
            An :class:`AuthResult` containing headers and/or params to
            inject into outgoing requests.

        Raises:
            AuthConfigError: If the credentials are incomplete or a token
                exchange fails.
        """
        ...

    def validate_config(self, credentials: ServiceCredentials) -> list[str]:
        """Validate the credential set before use.

        Override this to check that the fields the authenticator needs are
        present and well-formed.

        Args:
            credentials: The credential set to validate.

        Returns:
            A list of error message strings. An empty list means the
            credentials are usable.
        """
        return []
