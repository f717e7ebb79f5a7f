"""
Tests for environment-driven settings and startup validation.
"""

import pytest

from config.settings import Settings
from utils.validators import validate_oauth_settings

_ENV = {
    "OAUTH_CLIENT_ID": "client-123",
    "OAUTH_CLIENT_SECRET": "s3cret",
    "OAUTH_REDIRECT_URL": "http://localhost:9000/callback",
    "OAUTH_SCOPE": "https://www.googleapis.com/auth/drive",
    "HTTP_PORT": "9000",
}


@pytest.fixture
def oauth_env(monkeypatch):
    for key, value in _ENV.items():
        monkeypatch.setenv(key, value)


class TestSettings:
    def test_reads_environment(self, oauth_env):
        settings = Settings(_env_file=None)
        assert settings.oauth_client_id == "client-123"
        assert settings.oauth_client_secret == "s3cret"
        assert settings.oauth_redirect_url == "http://localhost:9000/callback"
        assert settings.http_port == 9000
        assert settings.scopes == ["https://www.googleapis.com/auth/drive"]

    def test_defaults_to_google_endpoints(self, oauth_env):
        settings = Settings(_env_file=None)
        assert settings.oauth_auth_url == "https://accounts.google.com/o/oauth2/auth"
        assert settings.oauth_token_url == "https://oauth2.googleapis.com/token"

    def test_reads_env_file(self, tmp_path, monkeypatch):
        for key in _ENV:
            monkeypatch.delenv(key, raising=False)
        env_file = tmp_path / ".env"
        env_file.write_text("OAUTH_CLIENT_ID=from-file\nHTTP_PORT=7000\n")

        settings = Settings(_env_file=str(env_file))

        assert settings.oauth_client_id == "from-file"
        assert settings.http_port == 7000

    def test_empty_scope(self):
        settings = Settings(_env_file=None, oauth_scope="")
        assert settings.scopes == []


class TestValidateOAuthSettings:
    def test_complete_configuration_passes(self, oauth_env):
        validate_oauth_settings(Settings(_env_file=None))

    def test_missing_fields_are_fatal(self, monkeypatch):
        for key in _ENV:
            monkeypatch.delenv(key, raising=False)

        with pytest.raises(RuntimeError) as excinfo:
            validate_oauth_settings(Settings(_env_file=None))

        message = str(excinfo.value)
        assert "OAUTH_CLIENT_ID" in message
        assert "OAUTH_CLIENT_SECRET" in message
        assert "OAUTH_REDIRECT_URL" in message

    def test_only_reports_what_is_missing(self, oauth_env, monkeypatch):
        monkeypatch.delenv("OAUTH_CLIENT_SECRET")

        with pytest.raises(RuntimeError, match="OAUTH_CLIENT_SECRET") as excinfo:
            validate_oauth_settings(Settings(_env_file=None))

        assert "OAUTH_CLIENT_ID" not in str(excinfo.value)
