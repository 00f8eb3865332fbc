"""IBM Cloud IAM authenticator plugin.

Implements the ``iam`` auth type, which exchanges an API key for an
access token and sends it as an ``Authorization: Bearer`` header.

See Also:
    :class:`~watsoncli.plugins.iam.plugin.IAMAuthPlugin`
    :mod:`watsoncli.auth.base` for the plugin interface contract.
"""

from watsoncli.plugins.iam.plugin import IAMAuthPlugin

__all__ = ["IAMAuthPlugin"]
