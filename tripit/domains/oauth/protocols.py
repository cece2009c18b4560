"""Protocols for TripIt request authorization."""

from typing import Mapping, Optional, Protocol

import httpx


class AuthorizerProtocol(Protocol):
    """Request authorization capability.

    Implemented by ``OAuthSigner`` and ``WebAuthCredential``.
    """

    def authorize(self, request: httpx.Request, args: Optional[Mapping[str, str]] = None) -> None:
        """Add the Authorization header to ``request``, signing ``args`` where supported."""
        ...
