"""Unit tests for client settings."""

import pytest
from pydantic import ValidationError

from tripit.core.config.enums import Environment
from tripit.core.config.settings import Settings


@pytest.fixture
def clean_env(monkeypatch):
    """Remove TRIPIT_ variables set by the root conftest or the shell."""
    for name in (
        "TRIPIT_ENVIRONMENT",
        "TRIPIT_API_URL",
        "TRIPIT_API_VERSION",
        "TRIPIT_TIMEOUT",
        "TRIPIT_CONSUMER_KEY",
        "TRIPIT_CONSUMER_SECRET",
        "TRIPIT_OAUTH_ENCODE_SECRETS",
    ):
        monkeypatch.delenv(name, raising=False)
    return monkeypatch


class TestDefaults:
    """Values used when nothing is configured."""

    def test_defaults(self, clean_env):
        """Test defaults point at the public TripIt API."""
        settings = Settings(_env_file=None)
        assert settings.ENVIRONMENT == Environment.LOCAL
        assert settings.API_URL == "https://api.tripit.com"
        assert settings.API_VERSION == "v1"
        assert settings.TIMEOUT == 30.0
        assert settings.CONSUMER_KEY is None
        assert settings.OAUTH_ENCODE_SECRETS is False


class TestEnvLoading:
    """Values read from TRIPIT_ environment variables."""

    def test_env_overrides(self, clean_env):
        """Test every field can be set through its prefixed variable."""
        clean_env.setenv("TRIPIT_ENVIRONMENT", "prd")
        clean_env.setenv("TRIPIT_API_URL", "https://api.example.com/")
        clean_env.setenv("TRIPIT_TIMEOUT", "5")
        clean_env.setenv("TRIPIT_CONSUMER_KEY", "ck")
        clean_env.setenv("TRIPIT_CONSUMER_SECRET", "cs")
        clean_env.setenv("TRIPIT_OAUTH_ENCODE_SECRETS", "true")

        settings = Settings(_env_file=None)

        assert settings.ENVIRONMENT == Environment.PRD
        assert settings.API_URL == "https://api.example.com"
        assert settings.TIMEOUT == 5.0
        assert settings.CONSUMER_KEY == "ck"
        assert settings.CONSUMER_SECRET == "cs"
        assert settings.OAUTH_ENCODE_SECRETS is True

    def test_env_file(self, clean_env, tmp_path):
        """Test values are read from a .env file."""
        env_file = tmp_path / ".env"
        env_file.write_text("TRIPIT_API_VERSION=v2\nTRIPIT_CONSUMER_KEY=from-file\n")

        settings = Settings(_env_file=env_file)

        assert settings.API_VERSION == "v2"
        assert settings.CONSUMER_KEY == "from-file"


class TestValidation:
    """Rejected configuration values."""

    @pytest.mark.parametrize("timeout", ["0", "-1"])
    def test_timeout_must_be_positive(self, clean_env, timeout):
        """Test zero and negative timeouts are rejected."""
        clean_env.setenv("TRIPIT_TIMEOUT", timeout)
        with pytest.raises(ValidationError):
            Settings(_env_file=None)

    def test_unknown_environment_rejected(self, clean_env):
        """Test environments outside the enum are rejected."""
        clean_env.setenv("TRIPIT_ENVIRONMENT", "staging")
        with pytest.raises(ValidationError):
            Settings(_env_file=None)
