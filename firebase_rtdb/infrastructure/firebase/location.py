"""Location client for the Realtime Database REST API.

A Location is a handle on one node of the remote JSON tree: a URL, an
optional auth token, a Transport, and a lazily read value. Operations that
address another node (child, push, set) return a new Location sharing the
same transport and token.

    root = Location("https://<project>-default-rtdb.firebaseio.com", auth=token)
    users = root.child("users")
    ada = users.push({"name": "Ada"})
    root.update("users/" + ada.key, {"active": True})
"""

from __future__ import annotations

import logging
import threading
from collections.abc import Mapping
from typing import Any

from firebase_rtdb.core.config import Settings, get_settings
from firebase_rtdb.domain.exceptions import (
    ConfigurationException,
    FirebaseException,
)
from firebase_rtdb.infrastructure.firebase._json_encoding import (
    decode_push_key,
    decode_value,
    encode_diffgram,
    encode_value,
)
from firebase_rtdb.infrastructure.firebase.http_transport import get_default_transport
from firebase_rtdb.infrastructure.firebase.transport_protocol import Transport

logger = logging.getLogger(__name__)

# Marks "not read yet"; None is a real value (JSON null).
_UNSET: Any = object()


class Location:
    """Reference to a node; matches the Realtime Database REST API style.

    The cached value is guarded by a per-instance lock. value() holds the
    lock across its read, so concurrent callers trigger a single request and
    all see the same result.
    """

    def __init__(
        self,
        root: str,
        auth: str | None = None,
        transport: Transport | None = None,
    ) -> None:
        """Initialize a Location. No network call is made.

        Args:
            root: Base URL of the node, used as given.
            auth: Optional token sent as the ``auth`` query parameter. Can be
                overridden per call with ``params={"auth": ...}``.
            transport: Optional Transport (e.g. a fake for tests); defaults to
                the shared HTTPTransport.
        """
        self._url = root
        self._auth = auth or None
        self._transport = transport if transport is not None else get_default_transport()
        self._value: Any = _UNSET
        self._lock = threading.Lock()

    @classmethod
    def from_settings(
        cls,
        settings: Settings | None = None,
        transport: Transport | None = None,
    ) -> Location:
        """Build the root Location from FIREBASE_DATABASE_URL / FIREBASE_AUTH_TOKEN.

        Raises:
            ConfigurationException: the database URL is not set.
        """
        settings = settings if settings is not None else get_settings()
        if not settings.firebase_database_url:
            raise ConfigurationException(
                "FIREBASE_DATABASE_URL is required to build a Location from settings",
                setting="firebase_database_url",
            )
        return cls(settings.firebase_database_url, settings.auth_token(), transport)

    @property
    def url(self) -> str:
        return self._url

    @property
    def auth(self) -> str | None:
        return self._auth

    @property
    def key(self) -> str | None:
        """Last path segment of the URL, or None at the database root."""
        scheme, sep, rest = self._url.partition("://")
        path = rest if sep else scheme
        _, slash, tail = path.rstrip("/").partition("/")
        if not slash or not tail:
            return None
        return tail.rsplit("/", 1)[-1]

    def __repr__(self) -> str:
        return f"Location({self._url!r})"

    def _derive(self, url: str, value: Any = _UNSET) -> Location:
        loc = Location(url, self._auth, self._transport)
        loc._value = value
        return loc

    def _child_url(self, path: str) -> str:
        return f"{self._url}/{path}"

    def value(self) -> Any:
        """Return the value at this location, reading it on first use.

        Returns None when the read fails; the cache then stays empty so the
        next call tries again.
        """
        with self._lock:
            if self._value is _UNSET:
                loc = self.child("")
                if loc is None:
                    return None
                self._value = loc._value
            return self._value

    def fetch(
        self,
        path: str,
        params: Mapping[str, str] | None = None,
        shape: Any = None,
    ) -> Location:
        """Read ``path`` and return a populated Location for it.

        Args:
            path: Path relative to this location ("" for this node).
            params: Extra query parameters (``shallow``, ``orderBy``...).
            shape: Optional type the value is validated into (pydantic
                model, ``dict[str, SomeModel]``...).

        Raises:
            FirebaseException: transport, remote or decoding failure.
        """
        url = self._child_url(path)
        raw = self._transport.call("GET", url, self._auth, None, params)
        return self._derive(url, decode_value(raw, "child", shape))

    def child(
        self,
        path: str,
        params: Mapping[str, str] | None = None,
        shape: Any = None,
    ) -> Location | None:
        """Read ``path`` and return a populated Location, or None on any failure.

        Not found, transport errors and undecodable bodies all give None;
        use fetch() to get the error instead.
        """
        try:
            return self.fetch(path, params, shape)
        except FirebaseException as e:
            logger.debug("Child read of %s failed: %s", self._child_url(path), e)
            return None

    def push(self, value: Any, params: Mapping[str, str] | None = None) -> Location:
        """Append ``value`` under this location with a server-generated key.

        Returns:
            Location at ``{url}/{key}`` with ``value`` cached.

        Raises:
            SerializationException: value not encodable or no key in the response.
            FirebaseException: transport or remote failure.
        """
        body = encode_value(value, "push")
        raw = self._transport.call("POST", self._url, self._auth, body, params)
        name = decode_push_key(raw)
        return self._derive(self._child_url(name), value)

    def set(
        self,
        path: str,
        value: Any,
        params: Mapping[str, str] | None = None,
    ) -> Location:
        """Overwrite the value at ``path`` and return a Location for it.

        The stored value echoed by the server is cached on the returned
        Location; an empty response (e.g. ``print=silent``) leaves it unread.
        """
        url = self._child_url(path)
        body = encode_value(value, "set")
        raw = self._transport.call("PUT", url, self._auth, body, params)
        if not raw:
            return self._derive(url)
        return self._derive(url, decode_value(raw, "set"))

    def update(
        self,
        path: str,
        value: Mapping[str, Any],
        params: Mapping[str, str] | None = None,
    ) -> None:
        """Apply a partial update (sub-path -> value mapping) at ``path``.

        Updating this node itself (``path == ""``) drops the cached value,
        whether or not the request succeeded, so the next value() re-reads it.
        """
        body = encode_diffgram(value)
        try:
            self._transport.call(
                "PATCH", self._child_url(path), self._auth, body, params
            )
        finally:
            if not path:
                with self._lock:
                    self._value = _UNSET

    def remove(self, path: str, params: Mapping[str, str] | None = None) -> None:
        """Delete the data at ``path``."""
        self._transport.call("DELETE", self._child_url(path), self._auth, None, params)
