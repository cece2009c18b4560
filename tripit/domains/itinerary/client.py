"""Client for the TripIt v1 JSON API.

Every request is authorized by an ``AuthorizerProtocol`` implementation,
either an ``OAuthSigner`` or a ``WebAuthCredential``. The OAuth handshake is:

1. ``get_request_token()`` with a ``RequestCredential``
2. Redirect the user to ``build_authorization_url()``
3. ``get_access_token()`` with a ``ThreeLeggedCredential`` holding the request token
"""

import logging
from enum import Enum
from typing import Dict, Mapping, Optional, Union
from urllib.parse import parse_qsl, quote

import httpx
from pydantic import ValidationError

from tripit.core.config import settings
from tripit.core.config.enums import ListType, ObjectType
from tripit.core.exceptions import InvalidResponseError, TripItAPIError
from tripit.domains.oauth.protocols import AuthorizerProtocol
from tripit.domains.oauth.types import OAuth1TokenResponse
from tripit.schemas.envelope import Request, Response

logger = logging.getLogger(__name__)

URL_OBTAIN_REQUEST_TOKEN = "/oauth/request_token"
URL_OBTAIN_ACCESS_TOKEN = "/oauth/access_token"
URL_OBTAIN_USER_AUTHORIZATION = "https://www.tripit.com/oauth/authorize"
URL_OBTAIN_USER_AUTHORIZATION_MOBILE = "https://m.tripit.com/oauth/authorize"

FilterValue = Union[str, int, bool, Enum]


def _segment(value: FilterValue) -> str:
    if isinstance(value, Enum):
        value = value.value
    if isinstance(value, bool):
        value = "true" if value else "false"
    return quote(str(value), safe="")


def build_authorization_url(oauth_token: str, callback_url: str, mobile: bool = False) -> str:
    """Build the URL the user is redirected to for authorizing a request token."""
    base = URL_OBTAIN_USER_AUTHORIZATION_MOBILE if mobile else URL_OBTAIN_USER_AUTHORIZATION
    return (
        f"{base}?oauth_token={quote(oauth_token, safe='')}"
        f"&oauth_callback={quote(callback_url, safe='')}"
    )


class TripItClient:
    """Talks to the TripIt API on behalf of one authorizer.

    Pass ``http_client`` to reuse a connection pool; the caller then owns its
    lifecycle. Without it a short-lived ``httpx.AsyncClient`` is opened per call.
    """

    def __init__(
        self,
        authorizer: AuthorizerProtocol,
        *,
        api_url: Optional[str] = None,
        api_version: Optional[str] = None,
        http_client: Optional[httpx.AsyncClient] = None,
        timeout: Optional[float] = None,
    ) -> None:
        """Initialize the client, falling back to settings for unset options."""
        self.authorizer = authorizer
        self.api_url = (api_url or settings.API_URL).rstrip("/")
        self.api_version = api_version or settings.API_VERSION
        self.timeout = timeout or settings.TIMEOUT
        self._http_client = http_client

    # ------------------------------------------------------------------
    # Object operations
    # ------------------------------------------------------------------

    async def get(self, object_type: Union[ObjectType, str], object_id: int) -> Response:
        """Get one object of the given type and id."""
        url = self._endpoint("get", _segment(object_type), "id", str(object_id))
        return await self._request_json(httpx.Request("GET", url))

    async def list(
        self,
        object_type: Union[ListType, str],
        filters: Optional[Mapping[FilterValue, FilterValue]] = None,
    ) -> Response:
        """List objects of the given type (trip, object, points_program).

        Which filters can be combined is decided by TripIt, see the TripIt API
        documentation.
        """
        segments = ["list", _segment(object_type)]
        for key, value in (filters or {}).items():
            segments.extend([_segment(key), _segment(value)])
        return await self._request_json(httpx.Request("GET", self._endpoint(*segments)))

    async def create(self, request: Request) -> Response:
        """Create the object held by ``request``."""
        return await self._post_form(self._endpoint("create"), request)

    async def replace(
        self, object_type: Union[ObjectType, str], object_id: int, request: Request
    ) -> Response:
        """Replace the object of the given type and id with the one in ``request``."""
        url = self._endpoint("replace", _segment(object_type), "id", str(object_id))
        return await self._post_form(url, request)

    async def delete(self, object_type: Union[ObjectType, str], object_id: int) -> Response:
        """Delete the object of the given type and id."""
        url = self._endpoint("delete", _segment(object_type), "id", str(object_id))
        return await self._request_json(httpx.Request("GET", url))

    # ------------------------------------------------------------------
    # OAuth token exchange
    # ------------------------------------------------------------------

    async def get_request_token(self) -> OAuth1TokenResponse:
        """Obtain a request token (step 1 of the OAuth flow).

        The token is temporary: if the user aborts authorization it can be
        discarded.
        """
        logger.info("Requesting OAuth request token from TripIt")
        return await self._request_token(self.api_url + URL_OBTAIN_REQUEST_TOKEN)

    async def get_access_token(self) -> OAuth1TokenResponse:
        """Exchange the authorized request token for an access token.

        Store the result with the user's id for later calls on their behalf.
        """
        logger.info("Exchanging OAuth request token for access token")
        return await self._request_token(self.api_url + URL_OBTAIN_ACCESS_TOKEN)

    # ------------------------------------------------------------------
    # Internals
    # ------------------------------------------------------------------

    def _endpoint(self, *segments: str) -> str:
        return f"{self.api_url}/{self.api_version}/{'/'.join(segments)}/format/json"

    async def _post_form(self, url: str, request: Request) -> Response:
        args = {"json": request.to_json()}
        return await self._request_json(httpx.Request("POST", url, data=args), args)

    async def _request_token(self, url: str) -> OAuth1TokenResponse:
        response = await self._send(httpx.Request("GET", url))
        params: Dict[str, str] = {}
        for k, v in parse_qsl(response.text, keep_blank_values=True):
            params.setdefault(k, v.strip())
        return OAuth1TokenResponse.from_params(params)

    async def _request_json(
        self, request: httpx.Request, args: Optional[Mapping[str, str]] = None
    ) -> Response:
        response = await self._send(request, args)
        try:
            return Response.model_validate_json(response.content)
        except ValidationError as e:
            logger.error(f"Undecodable TripIt response for {request.url.path}: {e}")
            raise InvalidResponseError(f"Could not decode TripIt response: {e}") from e

    async def _send(
        self, request: httpx.Request, args: Optional[Mapping[str, str]] = None
    ) -> httpx.Response:
        self.authorizer.authorize(request, args)
        logger.info(f"TripIt {request.method} {request.url.path}")

        if self._http_client is not None:
            response = await self._http_client.send(request)
        else:
            async with httpx.AsyncClient(timeout=self.timeout) as client:
                response = await client.send(request)

        if response.status_code != 200:
            logger.error(
                f"TripIt API error {response.status_code} for {request.url.path}: "
                f"{response.text[:300]}"
            )
            raise TripItAPIError(response.status_code, response.text or response.reason_phrase)
        return response
