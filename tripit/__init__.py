"""Python client for the TripIt travel-itinerary API with OAuth 1.0a signing."""

from tripit.core.config.enums import Filter, ListType, ObjectType
from tripit.domains.itinerary.client import TripItClient, build_authorization_url
from tripit.domains.oauth import (
    AuthorizerProtocol,
    OAuth1TokenResponse,
    OAuthCredential,
    OAuthSigner,
    RequestCredential,
    ThreeLeggedCredential,
    TwoLeggedCredential,
    WebAuthCredential,
)

__version__ = "0.1.0"

__all__ = [
    "AuthorizerProtocol",
    "Filter",
    "ListType",
    "OAuth1TokenResponse",
    "OAuthCredential",
    "OAuthSigner",
    "ObjectType",
    "RequestCredential",
    "ThreeLeggedCredential",
    "TripItClient",
    "TwoLeggedCredential",
    "WebAuthCredential",
    "build_authorization_url",
]
