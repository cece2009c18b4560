"""OAuth 1.0a request signing for the TripIt API.

Implements HMAC-SHA1 signing (RFC 5849 section 3.4) on top of an
``OAuthCredential``:

1. Generate the protocol parameters (consumer key, nonce, timestamp, ...)
2. Build the signature base string from method, base URL and sorted params
3. Sign it with HMAC-SHA1 and base64-encode the digest
4. Assemble the ``Authorization`` header, or verify a signed URL

The HMAC key is ``consumer_secret&token_secret`` with the secrets taken raw.
Pass ``encode_secrets=True`` for the RFC 5849 form that percent-encodes both
secrets first.

Reference: RFC 5849 - The OAuth 1.0 Protocol
"""

import base64
import hashlib
import hmac
import json
import logging
import secrets
import time
from typing import Dict, Mapping, Optional
from urllib.parse import parse_qsl, quote, urlsplit

import httpx

from tripit.core.config import settings
from tripit.domains.oauth.credentials import OAuthCredential

logger = logging.getLogger(__name__)

OAUTH_SIGNATURE_METHOD = "HMAC-SHA1"
OAUTH_VERSION = "1.0"

NONCE_DIGITS = 40


def percent_encode(value: str) -> str:
    """Percent-encode a value according to RFC 3986.

    Encodes all characters except unreserved: A-Z, a-z, 0-9, -, ., _, ~
    """
    return quote(str(value), safe="~")


def generate_nonce() -> str:
    """Generate a unique one-time-use value.

    The current time followed by random decimal digits, hashed with MD5.
    """
    digits = "".join(str(secrets.randbelow(10)) for _ in range(NONCE_DIGITS))
    seed = f"{time.time_ns()}{digits}"
    return hashlib.md5(seed.encode("ascii")).hexdigest()


def generate_timestamp() -> str:
    """Get current Unix timestamp as string."""
    return str(int(time.time()))


def _origin(url: str) -> str:
    """Return scheme://host[:port] of ``url``. User info is never included."""
    parts = urlsplit(url)
    host = parts.hostname or ""
    if ":" in host:
        host = f"[{host}]"
    if parts.port is not None:
        host = f"{host}:{parts.port}"
    return f"{parts.scheme}://{host}"


def normalize_base_url(url: str) -> str:
    """Strip user info, query and fragment, keeping scheme://host/path."""
    return _origin(url) + urlsplit(url).path


def build_signature_base_string(method: str, url: str, params: Mapping[str, str]) -> str:
    """Build the signature base string.

    Format: HTTP_METHOD&URL&NORMALIZED_PARAMS

    ``oauth_signature`` is never part of its own input. The encoded
    ``key=value`` pairs are sorted as whole strings.
    """
    pairs = sorted(
        f"{percent_encode(k)}={percent_encode(v)}"
        for k, v in params.items()
        if k != "oauth_signature"
    )
    parts = [
        method.upper(),
        percent_encode(url),
        percent_encode("&".join(pairs)),
    ]
    return "&".join(parts)


def sign_hmac_sha1(
    base_string: str,
    consumer_secret: str,
    token_secret: str = "",
    encode_secrets: bool = False,
) -> str:
    """Sign the base string using HMAC-SHA1.

    Signing key: consumer_secret&token_secret, or with ``encode_secrets``
    percent_encode(consumer_secret)&percent_encode(token_secret).
    """
    if encode_secrets:
        consumer_secret = percent_encode(consumer_secret)
        token_secret = percent_encode(token_secret)
    key = f"{consumer_secret}&{token_secret}"

    digest = hmac.new(key.encode("utf-8"), base_string.encode("utf-8"), hashlib.sha1).digest()
    return base64.b64encode(digest).decode("utf-8")


class OAuthSigner:
    """Signs TripIt API requests with an OAuth credential.

    Stateless apart from the immutable credential, so one signer can be
    shared across concurrent requests.
    """

    def __init__(
        self, credential: OAuthCredential, *, encode_secrets: Optional[bool] = None
    ) -> None:
        """Initialize with the credential to sign with.

        ``encode_secrets`` falls back to ``settings.OAUTH_ENCODE_SECRETS``.
        """
        self.credential = credential
        self.encode_secrets = (
            settings.OAUTH_ENCODE_SECRETS if encode_secrets is None else encode_secrets
        )

    def authorize(self, request: httpx.Request, args: Optional[Mapping[str, str]] = None) -> None:
        """Set the OAuth ``Authorization`` header on ``request``.

        Args:
            request: Outgoing request, modified in place
            args: Extra arguments (e.g. form body fields) included in the
                signature but not in the header
        """
        request.headers["Authorization"] = self.generate_authorization_header(
            request.method, str(request.url), args
        )

    def generate_authorization_header(
        self, method: str, url: str, args: Optional[Mapping[str, str]] = None
    ) -> str:
        """Build the OAuth Authorization header value.

        Format: OAuth realm="scheme://host",oauth_consumer_key="...",...
        """
        realm = _origin(url)
        base_url = normalize_base_url(url)

        params = self.generate_oauth_parameters(method, base_url, args)
        pairs = [f'{percent_encode(k)}="{percent_encode(v)}"' for k, v in params.items()]
        return f'OAuth realm="{realm}",' + ",".join(pairs)

    def generate_oauth_parameters(
        self, method: str, url: str, args: Optional[Mapping[str, str]] = None
    ) -> Dict[str, str]:
        """Generate the protocol parameters for one request, signature included.

        ``args`` take part in the signature only and are not returned.
        """
        params = {
            "oauth_consumer_key": self.credential.consumer_key,
            "oauth_nonce": generate_nonce(),
            "oauth_timestamp": generate_timestamp(),
            "oauth_signature_method": OAUTH_SIGNATURE_METHOD,
            "oauth_version": OAUTH_VERSION,
        }
        if self.credential.token:
            params["oauth_token"] = self.credential.token
        if self.credential.requestor_id:
            params["xoauth_requestor_id"] = self.credential.requestor_id

        signed = dict(params)
        if args:
            signed.update(args)

        params["oauth_signature"] = self.generate_signature(method, url, signed)
        return params

    def generate_signature(self, method: str, url: str, params: Mapping[str, str]) -> str:
        """Compute the OAuth signature for a method, base URL and parameter set."""
        base_string = build_signature_base_string(method, url, params)
        logger.debug(f"Signing {method.upper()} {url} with {len(params)} parameters")
        return sign_hmac_sha1(
            base_string,
            self.credential.consumer_secret,
            self.credential.token_secret,
            encode_secrets=self.encode_secrets,
        )

    def validate_signature(self, url: str) -> bool:
        """Check the ``oauth_signature`` embedded in a URL's query string.

        Recomputes the signature for GET on the URL without its query and
        fragment. Malformed URLs and missing signatures yield False.
        """
        try:
            query = parse_qsl(urlsplit(url).query, keep_blank_values=True)
            base_url = normalize_base_url(url)
        except ValueError as e:
            logger.debug(f"Rejecting unparsable URL: {e}")
            return False

        params: Dict[str, str] = {}
        for k, v in query:
            params.setdefault(k, v)

        signature = params.get("oauth_signature")
        if not signature:
            return False

        expected = self.generate_signature("GET", base_url, params)
        return hmac.compare_digest(expected.encode("utf-8"), signature.encode("utf-8"))

    def get_session_parameters(self, redirect_url: str, action: str) -> str:
        """Return OAuth parameters for a web session hand-off, JSON-encoded.

        Signed for GET on ``action`` with ``redirect_url`` as an extra argument;
        both values are added to the result.
        """
        params = self.generate_oauth_parameters("GET", action, {"redirect_url": redirect_url})
        params["redirect_url"] = redirect_url
        params["action"] = action
        return json.dumps(params)
