"""HTTP Basic credentials for the TripIt API.

Web authorization is meant for testing and has to be enabled on the TripIt
account.
"""

import base64
from dataclasses import dataclass, field
from typing import Mapping, Optional

import httpx


@dataclass(frozen=True)
class WebAuthCredential:
    """Account user name and password sent as HTTP Basic authorization."""

    username: str
    password: str = field(repr=False)

    def authorize(self, request: httpx.Request, args: Optional[Mapping[str, str]] = None) -> None:
        """Set the Basic ``Authorization`` header. Extra arguments are ignored."""
        token = base64.b64encode(f"{self.username}:{self.password}".encode("utf-8")).decode("ascii")
        request.headers["Authorization"] = f"Basic {token}"
