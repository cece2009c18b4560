"""TripIt OAuth Sample App.

A minimal FastAPI app that walks a user through the three-legged OAuth flow
and lists their past trips.

Set ``TRIPIT_CONSUMER_KEY`` and ``TRIPIT_CONSUMER_SECRET`` (or put them in
``.env``), then:

Usage:
    uvicorn app:app --port 8080
"""

import html
import logging
import secrets
from typing import Any

from fastapi import FastAPI, Request
from fastapi.responses import HTMLResponse, RedirectResponse

from tripit.core.config import settings
from tripit.core.config.enums import Filter, ListType
from tripit.core.exceptions import TripItException
from tripit.domains.itinerary import TripItClient, build_authorization_url
from tripit.domains.oauth import OAuthSigner, RequestCredential, ThreeLeggedCredential
from tripit.schemas import Response

logger = logging.getLogger(__name__)

app = FastAPI(title="TripIt Sample App")

SESSION_COOKIE = "samplesession"

# ---------------------------------------------------------------------------
# Sessions
# ---------------------------------------------------------------------------

# In-memory only; restarting the app logs everyone out. Past MAX_SESSIONS the
# oldest session is dropped.
MAX_SESSIONS = 1000
sessions: dict[str, dict[str, str]] = {}


def get_session(request: Request) -> tuple[str, dict[str, str]]:
    """Return the caller's session id and data, creating a session if needed."""
    session_id = request.cookies.get(SESSION_COOKIE)
    if session_id not in sessions:
        session_id = secrets.token_urlsafe(16)
        while len(sessions) >= MAX_SESSIONS:
            sessions.pop(next(iter(sessions)))
        sessions[session_id] = {}
    return session_id, sessions[session_id]


def _with_cookie(response: Any, session_id: str) -> Any:
    response.set_cookie(SESSION_COOKIE, session_id, httponly=True)
    return response


def _client(session: dict[str, str]) -> TripItClient:
    if "oauth_token" in session:
        credential = ThreeLeggedCredential(
            settings.CONSUMER_KEY or "",
            settings.CONSUMER_SECRET or "",
            session["oauth_token"],
            session["oauth_token_secret"],
        )
    else:
        credential = RequestCredential(settings.CONSUMER_KEY or "", settings.CONSUMER_SECRET or "")
    return TripItClient(OAuthSigner(credential))


# ---------------------------------------------------------------------------
# Pages
# ---------------------------------------------------------------------------


def _page(title: str, body: str, status_code: int = 200) -> HTMLResponse:
    return HTMLResponse(
        f"<!doctype html><html><head><title>{html.escape(title)}</title></head>"
        f"<body><h1>{html.escape(title)}</h1>{body}</body></html>",
        status_code=status_code,
    )


def _error_page(error: Exception) -> HTMLResponse:
    logger.error(f"TripIt request failed: {error}")
    return _page("Error", f"<p>{html.escape(str(error))}</p>", status_code=500)


def _problems_page(response: Response) -> HTMLResponse:
    items = "".join(
        f"<li>{html.escape(str(p))}</li>" for p in [*response.errors, *response.warnings]
    )
    return _page("TripIt reported problems", f"<ul>{items}</ul>")


def _trips_page(response: Response) -> HTMLResponse:
    rows = "".join(
        f"<tr><td>{html.escape(t.display_name or '')}</td>"
        f"<td>{html.escape(t.start_date or '')}</td>"
        f"<td>{html.escape(t.end_date or '')}</td>"
        f"<td>{html.escape(t.primary_location or '')}</td></tr>"
        for t in response.trips
    )
    return _page(
        "Your past trips",
        "<table><tr><th>Trip</th><th>Start</th><th>End</th><th>Location</th></tr>"
        f"{rows}</table>",
    )


# ---------------------------------------------------------------------------
# Routes
# ---------------------------------------------------------------------------


@app.get("/", response_class=HTMLResponse)
async def index(request: Request) -> HTMLResponse:
    """Landing page with a link that starts authorization."""
    session_id, _ = get_session(request)
    page = _page("TripIt Sample", '<p><a href="/auth">Show my past trips</a></p>')
    return _with_cookie(page, session_id)


@app.get("/auth", response_model=None)
async def auth(request: Request) -> Any:
    """Obtain a request token and redirect the user to TripIt to authorize it."""
    session_id, session = get_session(request)
    session.pop("oauth_token", None)
    try:
        token = await _client(session).get_request_token()
    except TripItException as e:
        return _with_cookie(_error_page(e), session_id)

    session["oauth_token"] = token.oauth_token
    session["oauth_token_secret"] = token.oauth_token_secret
    callback = str(request.url_for("auth2"))
    return _with_cookie(
        RedirectResponse(build_authorization_url(token.oauth_token, callback), status_code=302),
        session_id,
    )


@app.get("/auth2", response_model=None)
async def auth2(request: Request) -> Any:
    """Exchange the authorized request token for an access token."""
    session_id, session = get_session(request)
    if "oauth_token" not in session:
        return _with_cookie(RedirectResponse("/", status_code=302), session_id)
    try:
        token = await _client(session).get_access_token()
    except TripItException as e:
        return _with_cookie(_error_page(e), session_id)

    session["oauth_token"] = token.oauth_token
    session["oauth_token_secret"] = token.oauth_token_secret
    return _with_cookie(RedirectResponse("/trips", status_code=302), session_id)


@app.get("/trips", response_model=None)
async def trips(request: Request) -> Any:
    """List the user's past trips on which they are a traveler."""
    session_id, session = get_session(request)
    if "oauth_token" not in session:
        return _with_cookie(RedirectResponse("/", status_code=302), session_id)
    try:
        response = await _client(session).list(
            ListType.TRIP, {Filter.TRAVELER: True, Filter.PAST: True}
        )
    except TripItException as e:
        return _with_cookie(_error_page(e), session_id)

    if response.has_problems:
        return _with_cookie(_problems_page(response), session_id)
    return _with_cookie(_trips_page(response), session_id)
