"""HTTP Basic authenticator plugin.

Implements the ``basic`` auth type, which encodes the service's
``USERNAME`` and ``PASSWORD`` using Base64 and sends them as an
``Authorization: Basic`` header per :rfc:`7617`.

See Also:
    :class:`~watsoncli.plugins.basic.plugin.BasicAuthPlugin`
    :mod:`watsoncli.auth.base` for the plugin interface contract.
"""

from watsoncli.plugins.basic.plugin import BasicAuthPlugin

__all__ = ["BasicAuthPlugin"]
