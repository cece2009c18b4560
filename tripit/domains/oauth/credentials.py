"""OAuth consumer credentials for the TripIt API.

A credential is one of three variants, each carrying the consumer key/secret
TripIt issued to the application:

* ``RequestCredential``: no token, used to obtain a request token.
* ``ThreeLeggedCredential``: a request or access token with its secret.
* ``TwoLeggedCredential``: a requestor id for server-to-server calls.

All variants are frozen and expose ``token``, ``token_secret`` and
``requestor_id`` so the signer can treat them uniformly.
"""

from dataclasses import dataclass
from typing import Union

from tripit.core.exceptions import CredentialConfigurationError


@dataclass(frozen=True)
class _ConsumerCredential:
    consumer_key: str
    consumer_secret: str

    def __post_init__(self) -> None:
        if not self.consumer_key:
            raise CredentialConfigurationError("consumer_key")
        if not self.consumer_secret:
            raise CredentialConfigurationError("consumer_secret")

    @property
    def token(self) -> str:
        return ""

    @property
    def token_secret(self) -> str:
        return ""

    @property
    def requestor_id(self) -> str:
        return ""

    def __repr__(self) -> str:
        return f"{type(self).__name__}(consumer_key={self.consumer_key!r})"


@dataclass(frozen=True, repr=False)
class RequestCredential(_ConsumerCredential):
    """Credential with no token, used to get a request token."""


@dataclass(frozen=True, repr=False)
class ThreeLeggedCredential(_ConsumerCredential):
    """User-authorized credential holding a request or access token."""

    oauth_token: str = ""
    oauth_token_secret: str = ""

    @property
    def token(self) -> str:
        return self.oauth_token

    @property
    def token_secret(self) -> str:
        return self.oauth_token_secret


@dataclass(frozen=True, repr=False)
class TwoLeggedCredential(_ConsumerCredential):
    """Server-to-server credential acting for the user named by ``xoauth_requestor_id``."""

    xoauth_requestor_id: str = ""

    @property
    def requestor_id(self) -> str:
        return self.xoauth_requestor_id


OAuthCredential = Union[RequestCredential, ThreeLeggedCredential, TwoLeggedCredential]
