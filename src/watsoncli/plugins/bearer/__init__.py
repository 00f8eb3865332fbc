"""Bearer token authenticator plugin.

Implements the ``bearerToken`` auth type, which sends the service's
``BEARER_TOKEN`` as an ``Authorization: Bearer`` header.

See Also:
    :class:`~watsoncli.plugins.bearer.plugin.BearerAuthPlugin`
    :mod:`watsoncli.auth.base` for the plugin interface contract.
"""

from watsoncli.plugins.bearer.plugin import BearerAuthPlugin

__all__ = ["BearerAuthPlugin"]
