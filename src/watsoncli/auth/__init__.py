"""Plugin-based authentication for watsoncli.

Every Watson service authenticates with one of a handful of schemes --
IBM Cloud IAM, HTTP Basic, a static bearer token, Cloud Pak for Data, or
none at all -- selected by the service's ``<SERVICE>_AUTH_TYPE`` variable.

The main entry points are:

- :class:`AuthPlugin` -- abstract base class for authenticators.
- :class:`AuthManager` -- registry mapping auth type strings to plugins.
- :func:`create_default_manager` -- an :class:`AuthManager` pre-loaded
  with all built-in plugins.
- :func:`load_service_credentials` -- credential discovery from the
  credentials file, the environment and ``VCAP_SERVICES``.
- :func:`resolve_auth` -- endpoint plus request credentials for a service.

Typical usage::

    from watsoncli.auth import resolve_auth

    resolved = resolve_auth(service)
    # resolved.auth_result.headers are ready to inject into requests.
"""

from watsoncli.auth.base import AuthPlugin, AuthResult
from watsoncli.auth.credentials import load_service_credentials
from watsoncli.auth.manager import AuthManager, create_default_manager
from watsoncli.auth.resolver import ResolvedAuth, resolve_auth

__all__ = [
    "AuthPlugin",
    "AuthResult",
    "AuthManager",
    "ResolvedAuth",
    "create_default_manager",
    "load_service_credentials",
    "resolve_auth",
]
