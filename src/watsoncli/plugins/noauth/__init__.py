"""No-op authenticator plugin (``noAuth``)."""

from watsoncli.plugins.noauth.plugin import NoAuthPlugin

__all__ = ["NoAuthPlugin"]
