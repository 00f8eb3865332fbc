"""HTTP client module for watsoncli.

Provides :class:`SyncClient`, which wraps :mod:`httpx` with auth
injection, error mapping and body streaming.

Example::

    from watsoncli.client import SyncClient

    with SyncClient(base_url, auth_result=auth) as client:
        resp = client.request("GET", "/v1/voices")
"""

from watsoncli.client.sync_client import SyncClient

__all__ = ["SyncClient"]
