"""Client for the Firebase Realtime Database REST API."""

from firebase_rtdb.domain.exceptions import (
    ConfigurationException,
    FirebaseException,
    RemoteException,
    RequestConstructionException,
    SerializationException,
    TransportException,
)
from firebase_rtdb.infrastructure.firebase import (
    HTTPTransport,
    Location,
    Transport,
    get_default_transport,
)

__version__ = "1.0.0"

__all__ = [
    "ConfigurationException",
    "FirebaseException",
    "HTTPTransport",
    "Location",
    "RemoteException",
    "RequestConstructionException",
    "SerializationException",
    "Transport",
    "TransportException",
    "get_default_transport",
]
