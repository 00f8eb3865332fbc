"""Cloud Pak for Data authenticator plugin.

Implements the ``cp4d`` auth type, which trades a username and password
for a bearer token at the cluster's ``validateAuth`` endpoint.

See Also:
    :class:`~watsoncli.plugins.cp4d.plugin.CP4DAuthPlugin`
"""

from watsoncli.plugins.cp4d.plugin import CP4DAuthPlugin

__all__ = ["CP4DAuthPlugin"]
