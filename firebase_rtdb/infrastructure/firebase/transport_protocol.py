"""Transport protocol used by Location (DIP). Real implementation in http_transport."""

from collections.abc import Mapping
from typing import Protocol


class Transport(Protocol):
    """Performs one request/response cycle against the database.

    Implementations append the ``.json`` suffix to ``url``, send ``auth`` as
    the ``auth`` query parameter and overlay ``params`` on top of it (a
    caller-supplied ``auth`` wins). Test doubles only need this one method.
    """

    def call(
        self,
        method: str,
        url: str,
        auth: str | None,
        body: bytes | None,
        params: Mapping[str, str] | None,
    ) -> bytes:
        """Return the raw response body.

        Raises:
            FirebaseException subclass on any failure.
        """
        ...
