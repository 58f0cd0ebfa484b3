#
#
#

"""Protocol definition for the shared API client.

This module defines structural typing (PEP 544) for the HTTP collaborator
used by VirtualDNSClient, allowing type checking without requiring explicit
inheritance.
"""

from typing import Any, Optional, Protocol, runtime_checkable


@runtime_checkable
class APIClient(Protocol):
    """Protocol defining the request interface VirtualDNSClient relies on.

    CloudflareClient conforms to it; tests substitute a Mock. The client is
    responsible for authentication, base URL resolution and translating
    failed responses into CloudflareClientRequestError.
    """

    def make_request(
        self,
        method: str,
        uri: str,
        body: Optional[Any] = None,
        timeout: Optional[float] = None,
    ) -> bytes:
        """Issue a single request and return the raw response body.

        Args:
            method: HTTP method (GET, POST, PUT, DELETE)
            uri: Path relative to the API base, including any query string
            body: JSON-serializable request body, or None
            timeout: Caller deadline in seconds, forwarded to the transport

        Returns:
            Raw response body bytes

        Raises:
            CloudflareClientRequestError: On network failure or non-success
                status
        """
        ...
