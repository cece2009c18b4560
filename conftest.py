"""Root conftest for pytest configuration and shared fixtures.

This conftest is loaded before both testpaths (tests/ and tripit/domains/),
making its fixtures available to centralized tests AND colocated domain tests.
"""

import os

import pytest

# Register pytest-asyncio plugin at the root level
pytest_plugins = ("pytest_asyncio",)

# ---------------------------------------------------------------------------
# Environment variables: must be set before any tripit module import
# Uses setdefault so real env vars (CI) are never overridden.
# ---------------------------------------------------------------------------
os.environ.setdefault("TRIPIT_ENVIRONMENT", "test")
os.environ.setdefault("TRIPIT_API_URL", "https://api.tripit.test")


# ---------------------------------------------------------------------------
# Shared fixtures
# ---------------------------------------------------------------------------


@pytest.fixture
def fake_authorizer():
    """Fake authorizer that records every authorized request."""
    from tripit.domains.oauth.fakes.authorizer import FakeAuthorizer

    return FakeAuthorizer()


@pytest.fixture
def two_legged_signer():
    """Signer for the two-legged foo/bar/app credential."""
    from tripit.domains.oauth.credentials import TwoLeggedCredential
    from tripit.domains.oauth.signer import OAuthSigner

    return OAuthSigner(TwoLeggedCredential("foo", "bar", "app"))


@pytest.fixture
def three_legged_signer():
    """Signer holding an access token and its secret."""
    from tripit.domains.oauth.credentials import ThreeLeggedCredential
    from tripit.domains.oauth.signer import OAuthSigner

    return OAuthSigner(ThreeLeggedCredential("ck", "cs", "tok", "tok secret"))
