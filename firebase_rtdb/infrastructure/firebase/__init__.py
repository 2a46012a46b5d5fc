"""Realtime Database REST integration: Location client and HTTP transport."""

from firebase_rtdb.infrastructure.firebase.http_transport import (
    HTTPTransport,
    get_default_transport,
)
from firebase_rtdb.infrastructure.firebase.location import Location
from firebase_rtdb.infrastructure.firebase.transport_protocol import Transport

__all__ = [
    "HTTPTransport",
    "Location",
    "Transport",
    "get_default_transport",
]
