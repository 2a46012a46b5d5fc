"""Exceptions raised by the Realtime Database client.

Every failure that crosses the public API is a FirebaseException subclass;
httpx and json errors are wrapped and chained as the cause.
"""

from typing import Any


class FirebaseException(Exception):
    """Base exception for all client errors.

    Catch this to handle any failed database call. Subclasses fix
    error_code and fill details with request context; a 401 from a PUT
    carries ``{"status_code": 401, "method": "PUT",
    "url": "https://<db>.firebaseio.com/users/ada/.json"}``.

    Attributes:
        message: Human-readable error description; for RemoteException the
            raw response body, e.g. ``{"error" : "Permission denied"}``.
        error_code: Machine-readable error code (``REMOTE_ERROR``...).
        details: Request context: method, url, status_code, operation.
    """

    def __init__(
        self,
        message: str,
        error_code: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        """Initialize the exception.

        Args:
            message: Human-readable error description.
            error_code: Optional machine-readable code; defaults to class name.
            details: Optional dict of extra context.
        """
        self.message = message
        self.error_code = error_code or self.__class__.__name__
        self.details = details or {}
        super().__init__(self.message)


class RequestConstructionException(FirebaseException):
    """Raised when a request cannot be built (malformed method or address)."""

    def __init__(self, message: str, method: str, url: str) -> None:
        super().__init__(
            message,
            "REQUEST_CONSTRUCTION_ERROR",
            {"method": method, "url": url},
        )


class TransportException(FirebaseException):
    """Raised when the request could not be completed (network, timeout)."""

    def __init__(self, message: str, method: str, url: str) -> None:
        super().__init__(
            message,
            "TRANSPORT_ERROR",
            {"method": method, "url": url},
        )


class RemoteException(FirebaseException):
    """Raised when the database answers with status >= 400.

    The message is the raw response body, verbatim (Firebase sends JSON like
    ``{"error": "Permission denied"}``; it is not parsed).
    """

    def __init__(
        self,
        body: str,
        status_code: int,
        method: str | None = None,
        url: str | None = None,
    ) -> None:
        """Initialize with the response body and status.

        Args:
            body: Response body text; becomes the exception message.
            status_code: HTTP status code of the response.
            method: Optional HTTP method of the failed request.
            url: Optional URL of the failed request.
        """
        details: dict[str, Any] = {"status_code": status_code}
        if method:
            details["method"] = method
        if url:
            details["url"] = url
        super().__init__(body, "REMOTE_ERROR", details)
        self.status_code = status_code


class SerializationException(FirebaseException):
    """Raised when a value cannot be encoded to or decoded from JSON."""

    def __init__(self, message: str, operation: str) -> None:
        super().__init__(
            message,
            "SERIALIZATION_ERROR",
            {"operation": operation},
        )


class ConfigurationException(FirebaseException):
    """Raised when settings are missing or invalid."""

    def __init__(self, message: str, setting: str | None = None) -> None:
        details = {"setting": setting} if setting else {}
        super().__init__(message, "CONFIGURATION_ERROR", details)
