"""Synchronous HTTP client with auth injection and error mapping.

This module provides :class:`SyncClient`, the blocking HTTP client used by
the generic invoker. It wraps :class:`httpx.Client` and layers on:

- **Auth injection** -- credentials from :class:`~watsoncli.auth.base.AuthResult`
  are merged into every outgoing request.
- **Error mapping** -- non-2xx responses and transport failures become a
  single :class:`~watsoncli.exceptions.RemoteCallError` carrying the
  service's own error text.
- **Streaming** -- :meth:`SyncClient.stream` yields the response body in
  chunks so that binary results never have to fit in memory.

Every request is attempted exactly once.
"""

from __future__ import annotations

from collections.abc import Iterator
from typing import Any, Optional

import httpx

from watsoncli.auth.base import AuthResult
from watsoncli.exceptions import RemoteCallError
from watsoncli.output import get_output

STREAM_CHUNK_SIZE = 64 * 1024


class SyncClient:
    """Synchronous HTTP client for one service.

    Must be used as a context manager so that the underlying transport is
    properly opened and closed.

    Args:
        base_url: Service endpoint; request paths are appended to it.
        auth_result: Credentials to inject into every request. When
            ``None``, no auth is injected.
        timeout: Request timeout in seconds, or ``None`` to block
            indefinitely.
        verify: Whether to verify SSL certificates.
        transport: Optional :class:`httpx.BaseTransport`, used by tests to
            substitute :class:`httpx.MockTransport`.

    Example::

        with SyncClient("https://example.com/api", auth_result=auth) as client:
            response = client.request("GET", "/v3/models")
    """

    def __init__(
        self,
        base_url: str,
        auth_result: Optional[AuthResult] = None,
        timeout: Optional[float] = None,
        verify: bool = True,
        transport: Optional[httpx.BaseTransport] = None,
    ) -> None:
        self._base_url = base_url.rstrip("/")
        self._auth_result = auth_result
        self._timeout = timeout
        self._verify = verify
        self._transport = transport
        self._client: Optional[httpx.Client] = None

    @property
    def base_url(self) -> str:
        """The service endpoint requests are sent to."""
        return self._base_url

    # ------------------------------------------------------------------ #
    # Context manager
    # ------------------------------------------------------------------ #

    def __enter__(self) -> SyncClient:
        self._client = httpx.Client(
            base_url=self._base_url,
            timeout=self._timeout,
            verify=self._verify,
            follow_redirects=True,
            transport=self._transport,
        )
        return self

    def __exit__(self, *args: object) -> None:
        if self._client:
            self._client.close()
            self._client = None

    # ------------------------------------------------------------------ #
    # Public request methods
    # ------------------------------------------------------------------ #

    def request(
        self,
        method: str,
        path: str,
        params: Optional[dict[str, Any]] = None,
        headers: Optional[dict[str, str]] = None,
        json_body: Optional[Any] = None,
        content: Optional[Any] = None,
        data: Optional[dict[str, Any]] = None,
        files: Optional[list[tuple[str, Any]]] = None,
    ) -> httpx.Response:
        """Make one HTTP request with auth injection and error mapping.

        Args:
            method: HTTP method (GET, POST, PUT, PATCH, DELETE, HEAD).
            path: URL path appended to the base URL.
            params: Query parameters.
            headers: Extra request headers.
            json_body: JSON-serialisable body.
            content: Raw body (``bytes``, ``str`` or a binary file handle).
            data: Multipart form fields, sent together with *files*.
            files: Multipart file parts as ``(field, (filename, handle,
                content_type))`` tuples.

        Returns:
            The successful :class:`httpx.Response`, body fully read.

        Raises:
            RemoteCallError: On any non-2xx status or transport failure.
        """
        client = self._require_client()
        kwargs = self._build_kwargs(method, path, params, headers, json_body, content, data, files)
        try:
            response = client.request(**kwargs)
        except httpx.HTTPError as exc:
            raise RemoteCallError(f"{method.upper()} {path} failed: {exc}") from exc

        self._map_response_error(response)
        return response

    def stream(
        self,
        method: str,
        path: str,
        params: Optional[dict[str, Any]] = None,
        headers: Optional[dict[str, str]] = None,
        json_body: Optional[Any] = None,
        content: Optional[Any] = None,
        data: Optional[dict[str, Any]] = None,
        files: Optional[list[tuple[str, Any]]] = None,
    ) -> Iterator[bytes]:
        """Send a request and yield the response body in chunks.

        The request is sent when iteration starts. Arguments are the same
        as for :meth:`request`.

        Yields:
            Successive byte chunks of the response body.

        Raises:
            RemoteCallError: On a non-2xx status, or if the transfer fails
                part way through.
        """
        client = self._require_client()
        kwargs = self._build_kwargs(method, path, params, headers, json_body, content, data, files)
        try:
            with client.stream(**kwargs) as response:
                if response.status_code >= 400:
                    response.read()
                    self._map_response_error(response)
                yield from response.iter_bytes(STREAM_CHUNK_SIZE)
        except httpx.HTTPError as exc:
            raise RemoteCallError(f"{method.upper()} {path} failed: {exc}") from exc

    # ------------------------------------------------------------------ #
    # Private helpers
    # ------------------------------------------------------------------ #

    def _require_client(self) -> httpx.Client:
        if self._client is None:
            raise RuntimeError("Client not initialised -- use as context manager")
        return self._client

    def _build_kwargs(
        self,
        method: str,
        path: str,
        params: Optional[dict[str, Any]],
        headers: Optional[dict[str, str]],
        json_body: Optional[Any],
        content: Optional[Any],
        data: Optional[dict[str, Any]],
        files: Optional[list[tuple[str, Any]]],
    ) -> dict[str, Any]:
        merged_headers: dict[str, str] = {"Accept": "application/json"}
        merged_headers.update(headers or {})
        merged_params: dict[str, Any] = dict(params or {})
        merged_headers, merged_params = self._inject_auth(merged_headers, merged_params)

        get_output().debug(f"{method.upper()} {self._base_url}{path}")

        kwargs: dict[str, Any] = {
            "method": method.upper(),
            "url": path,
            "headers": merged_headers,
            "params": merged_params,
        }
        if files:
            kwargs["files"] = files
            if data:
                kwargs["data"] = data
        elif data is not None:
            kwargs["data"] = data
        elif json_body is not None:
            kwargs["json"] = json_body
        elif content is not None:
            kwargs["content"] = content
        return kwargs

    def _inject_auth(
        self,
        headers: dict[str, str],
        params: dict[str, Any],
    ) -> tuple[dict[str, str], dict[str, Any]]:
        """Merge auth credentials into *headers* and *params*."""
        if self._auth_result is None:
            return headers, params

        # Caller-supplied values override auth values.
        merged_headers = {**self._auth_result.headers, **headers}
        merged_params = {**self._auth_result.params, **params}
        return merged_headers, merged_params

    def _map_response_error(self, response: httpx.Response) -> None:
        """Raise :class:`RemoteCallError` for error HTTP status codes."""
        status = response.status_code
        if status < 400:
            return

        msg = error_message(response)
        prefix = f"HTTP {status}"
        full_msg = f"{prefix}: {msg}" if msg else prefix
        get_output().debug(f"Response {status}: {response.text[:500]}")
        raise RemoteCallError(full_msg, status_code=status)


def error_message(response: httpx.Response) -> str:
    """Extract the service's error text from an error response.

    Watson services report errors as ``{"error": ..., "code": ...}``,
    sometimes with a ``description``; newer ones use ``{"errors":
    [{"message": ...}]}``. Anything else falls back to the raw text.
    The result is always a single line.
    """
    try:
        detail = response.json()
    except ValueError:
        detail = None

    msg = ""
    if isinstance(detail, dict):
        errors = detail.get("errors")
        if isinstance(errors, list) and errors and isinstance(errors[0], dict):
            msg = str(errors[0].get("message") or "")
        if not msg:
            msg = str(
                detail.get("error")
                or detail.get("message")
                or detail.get("errorMessage")
                or detail.get("description")
                or ""
            )
    elif detail is not None:
        msg = str(detail)
    else:
        msg = response.text[:200] if response.text else ""

    return " ".join(msg.split())
