"""OAuth 1.0a and Basic authorization for TripIt requests."""

from tripit.domains.oauth.credentials import (
    OAuthCredential,
    RequestCredential,
    ThreeLeggedCredential,
    TwoLeggedCredential,
)
from tripit.domains.oauth.protocols import AuthorizerProtocol
from tripit.domains.oauth.signer import OAuthSigner
from tripit.domains.oauth.types import OAuth1TokenResponse
from tripit.domains.oauth.webauth import WebAuthCredential

__all__ = [
    "AuthorizerProtocol",
    "OAuth1TokenResponse",
    "OAuthCredential",
    "OAuthSigner",
    "RequestCredential",
    "ThreeLeggedCredential",
    "TwoLeggedCredential",
    "WebAuthCredential",
]
