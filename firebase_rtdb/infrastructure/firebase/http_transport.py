"""HTTP transport for the Realtime Database REST API.

Uses a synchronous httpx.Client; every call is one blocking round trip with
no retries. Requests carry ``Connection: close`` so a connection is never
reused past a single call.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from functools import lru_cache

import httpx

from firebase_rtdb.domain.exceptions import (
    RemoteException,
    RequestConstructionException,
    TransportException,
)

logger = logging.getLogger(__name__)

SUFFIX = ".json"
AUTH_PARAM = "auth"
_DEFAULT_TIMEOUT = 30.0


def build_url(url: str) -> str:
    """Return ``url`` with a trailing ``/`` and the ``.json`` suffix."""
    if not url.endswith("/"):
        url += "/"
    return url + SUFFIX


def build_query(
    auth: str | None, params: Mapping[str, str] | None
) -> dict[str, str]:
    """Merge the default auth token with per-call params (params win)."""
    query: dict[str, str] = {}
    if auth:
        query[AUTH_PARAM] = auth
    if params:
        for key, value in params.items():
            query[key] = value
    return query


def _is_token(method: str) -> bool:
    # Every verb the database accepts is plain ASCII letters.
    return isinstance(method, str) and method.isascii() and method.isalpha()


class HTTPTransport:
    """Transport implementation backed by httpx.

    Stateless apart from the httpx.Client (a thread-safe connection pool),
    so a single instance can be shared by every Location.
    """

    def __init__(
        self,
        *,
        http_client: httpx.Client | None = None,
        log: logging.Logger | None = None,
    ) -> None:
        """Initialize the transport.

        Args:
            http_client: Optional client (e.g. with httpx.MockTransport in tests).
                A client passed in is never closed by this transport. The
                client created by default follows redirects, re-sending the body
                on 307/308.
            log: Optional logger for call diagnostics; defaults to this module's.
        """
        self._http = (
            http_client
            if http_client is not None
            else httpx.Client(timeout=_DEFAULT_TIMEOUT, follow_redirects=True)
        )
        self._owns_http = http_client is None
        self._log = log if log is not None else logger

    def close(self) -> None:
        """Close the HTTP client only if we created it (do not close injected client)."""
        if self._owns_http:
            self._http.close()

    def __enter__(self) -> HTTPTransport:
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()

    def call(
        self,
        method: str,
        url: str,
        auth: str | None,
        body: bytes | None,
        params: Mapping[str, str] | None,
    ) -> bytes:
        """Invoke ``method`` on a database URL and return the raw response body.

        Raises:
            RequestConstructionException: method or URL cannot form a request.
            TransportException: the request failed before a response arrived.
            RemoteException: status >= 400; message is the response body.
        """
        target = build_url(url)
        if not _is_token(method):
            self._log.warning("Cannot create Firebase request: invalid method %r", method)
            raise RequestConstructionException(
                f"Invalid method {method!r}", method, target
            )
        headers = {"Connection": "close"}
        if body is not None:
            headers["Content-Type"] = "application/json"
        try:
            request = self._http.build_request(
                method,
                target,
                params=build_query(auth, params),
                content=body,
                headers=headers,
            )
        except (httpx.InvalidURL, ValueError, TypeError) as e:
            self._log.warning("Cannot create Firebase request %s %s: %s", method, target, e)
            raise RequestConstructionException(
                f"Cannot create request: {e}", method, target
            ) from e

        # Log the path only; the query string may hold the auth token.
        self._log.debug("Calling %s %s", method, target)
        try:
            response = self._http.send(request)
        except httpx.UnsupportedProtocol as e:
            self._log.warning("Cannot create Firebase request %s %s: %s", method, target, e)
            raise RequestConstructionException(
                f"Cannot create request: {e}", method, target
            ) from e
        except httpx.HTTPError as e:
            self._log.warning("Request to Firebase failed %s %s: %s", method, target, e)
            raise TransportException(
                f"Request failed: {e}", method, target
            ) from e
        except (httpx.InvalidURL, ValueError) as e:
            # e.g. idna failure on an empty host label, raised only at send time
            self._log.warning("Cannot create Firebase request %s %s: %s", method, target, e)
            raise RequestConstructionException(
                f"Cannot create request: {e}", method, target
            ) from e
        except RuntimeError as e:
            # httpx refuses to send on a closed client
            self._log.warning("Request to Firebase failed %s %s: %s", method, target, e)
            raise TransportException(
                f"Request failed: {e}", method, target
            ) from e

        content = response.content
        if response.status_code >= 400:
            text = response.text
            self._log.warning(
                "Error from Firebase %s %s (%s): %s",
                method,
                target,
                response.status_code,
                text,
            )
            raise RemoteException(
                text, response.status_code, method=method, url=target
            )
        return content


@lru_cache
def get_default_transport() -> HTTPTransport:
    """Return the shared HTTPTransport (created once, on first use)."""
    return HTTPTransport()
