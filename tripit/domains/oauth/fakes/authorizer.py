"""Fake authorizer for testing."""

from typing import Dict, List, Mapping, Optional, Tuple

import httpx


class FakeAuthorizer:
    """In-memory fake for AuthorizerProtocol.

    Stamps a fixed header and records every call for assertions.
    """

    def __init__(self, header: str = "Fake token") -> None:
        self._header = header
        self._calls: List[Tuple[str, str, Dict[str, str]]] = []

    def authorize(self, request: httpx.Request, args: Optional[Mapping[str, str]] = None) -> None:
        self._calls.append((request.method, str(request.url), dict(args or {})))
        request.headers["Authorization"] = self._header

    @property
    def calls(self) -> List[Tuple[str, str, Dict[str, str]]]:
        return list(self._calls)

    def clear(self) -> None:
        self._calls.clear()
