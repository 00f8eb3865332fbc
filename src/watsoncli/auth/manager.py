"""Auth manager -- registry and dispatcher for authenticator plugins.

The :class:`AuthManager` maintains a mapping from auth-type strings
(``"iam"``, ``"basic"``, ``"bearerToken"``, ...) to concrete
:class:`~watsoncli.auth.base.AuthPlugin` instances and exposes a single
:meth:`~AuthManager.authenticate` method that the pipeline calls once per
invocation.

Auth types are matched case-insensitively, so ``BEARERTOKEN`` and
``bearerToken`` select the same plugin.

For most use cases, call :func:`create_default_manager` to get a manager
pre-loaded with every built-in plugin.
"""

from __future__ import annotations

from watsoncli.auth.base import AuthPlugin, AuthResult
from watsoncli.exceptions import AuthConfigError
from watsoncli.models import ServiceCredentials


class AuthManager:
    """Registry and dispatcher for authenticator plugins.

    Example::

        from watsoncli.auth import AuthManager
        from watsoncli.plugins.bearer import BearerAuthPlugin

        manager = AuthManager()
        manager.register(BearerAuthPlugin())
        result = manager.authenticate(credentials)
    """

    def __init__(self) -> None:
        self._plugins: dict[str, AuthPlugin] = {}

    def register(self, plugin: AuthPlugin) -> None:
        """Register a plugin, keyed by its :attr:`~AuthPlugin.auth_type`.

        A plugin already registered for the same type is replaced.
        """
        self._plugins[plugin.auth_type.lower()] = plugin

    def get_plugin(self, auth_type: str) -> AuthPlugin:
        """Retrieve a registered plugin by its auth type identifier.

        Raises:
            AuthConfigError: If no plugin is registered for *auth_type*.
        """
        plugin = self._plugins.get(auth_type.lower())
        if plugin is None:
            available = ", ".join(self.list_types()) or "(none)"
            raise AuthConfigError(
                f"unsupported auth type '{auth_type}'. Available types: {available}"
            )
        return plugin

    def authenticate(self, credentials: ServiceCredentials) -> AuthResult:
        """Authenticate with the plugin selected by ``credentials.auth_type``.

        Raises:
            AuthConfigError: If the auth type has no registered plugin, or
                the plugin itself fails.
        """
        plugin = self.get_plugin(credentials.auth_type)
        return plugin.authenticate(credentials)

    def list_types(self) -> list[str]:
        """Return the identifiers of all registered auth types, sorted."""
        return sorted(plugin.auth_type for plugin in self._plugins.values())


def create_default_manager() -> AuthManager:
    """Create an :class:`AuthManager` pre-loaded with all built-in plugins.

    The following plugins are registered:

    - ``iam`` -- IBM Cloud API key exchanged for a bearer token.
    - ``basic`` -- HTTP Basic authentication.
    - ``bearerToken`` -- static bearer token.
    - ``noAuth`` -- no authentication.
    - ``cp4d`` -- Cloud Pak for Data username and password.
    """
    from watsoncli.plugins.basic import BasicAuthPlugin
    from watsoncli.plugins.bearer import BearerAuthPlugin
    from watsoncli.plugins.cp4d import CP4DAuthPlugin
    from watsoncli.plugins.iam import IAMAuthPlugin
    from watsoncli.plugins.noauth import NoAuthPlugin

    manager = AuthManager()
    manager.register(IAMAuthPlugin())
    manager.register(BasicAuthPlugin())
    manager.register(BearerAuthPlugin())
    manager.register(NoAuthPlugin())
    manager.register(CP4DAuthPlugin())
    return manager
