"""Value types for the OAuth domain.

These live in a separate module to avoid circular imports between the
itinerary client and the signer.
"""

from typing import Dict, Mapping

from tripit.core.exceptions import InvalidResponseError


class OAuth1TokenResponse:
    """Token and secret returned by the request-token or access-token endpoint."""

    def __init__(self, oauth_token: str, oauth_token_secret: str, **kwargs: str) -> None:
        """Initialize with token, secret, and any additional provider params."""
        self.oauth_token = oauth_token
        self.oauth_token_secret = oauth_token_secret
        self.additional_params: Dict[str, str] = kwargs

    @classmethod
    def from_params(cls, params: Mapping[str, str]) -> "OAuth1TokenResponse":
        """Build from a decoded query-string body.

        Raises:
            InvalidResponseError: If the token or its secret is missing
        """
        if "oauth_token" not in params or "oauth_token_secret" not in params:
            raise InvalidResponseError(f"Token response lacks token information: {dict(params)}")
        return cls(
            oauth_token=params["oauth_token"],
            oauth_token_secret=params["oauth_token_secret"],
            **{k: v for k, v in params.items() if k not in ["oauth_token", "oauth_token_secret"]},
        )

    def __repr__(self) -> str:
        return f"OAuth1TokenResponse(oauth_token={self.oauth_token!r})"
