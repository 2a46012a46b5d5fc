"""Domain layer: the client's exception hierarchy.

No dependencies on httpx or settings.
"""

from firebase_rtdb.domain.exceptions import (
    ConfigurationException,
    FirebaseException,
    RemoteException,
    RequestConstructionException,
    SerializationException,
    TransportException,
)

__all__ = [
    "ConfigurationException",
    "FirebaseException",
    "RemoteException",
    "RequestConstructionException",
    "SerializationException",
    "TransportException",
]
