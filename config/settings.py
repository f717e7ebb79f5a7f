"""
Application settings loaded from environment variables (and ``.env``).
"""

from typing import List

from pydantic_settings import BaseSettings

# Google OAuth2 endpoints (default provider)
_GOOGLE_AUTH_URL = "https://accounts.google.com/o/oauth2/auth"
_GOOGLE_TOKEN_URL = "https://oauth2.googleapis.com/token"


class Settings(BaseSettings):
    # ── OAuth2 provider ─────────────────────────────────────────────────
    oauth_client_id: str = ""
    oauth_client_secret: str = ""
    oauth_redirect_url: str = ""        # must match the provider's registered callback
    oauth_scope: str = ""               # passed through as a single scope entry
    oauth_auth_url: str = _GOOGLE_AUTH_URL
    oauth_token_url: str = _GOOGLE_TOKEN_URL

    # ── Server ───────────────────────────────────────────────────────────
    http_port: int = 8080
    host: str = "0.0.0.0"
    debug: bool = False

    model_config = {
        "env_file": ".env",
        "case_sensitive": False,
        "extra": "ignore",
    }

    @property
    def scopes(self) -> List[str]:
        return [self.oauth_scope] if self.oauth_scope else []

    def missing_oauth_fields(self) -> List[str]:
        """Names of required OAuth settings that are empty."""
        required = {
            "OAUTH_CLIENT_ID": self.oauth_client_id,
            "OAUTH_CLIENT_SECRET": self.oauth_client_secret,
            "OAUTH_REDIRECT_URL": self.oauth_redirect_url,
        }
        return [name for name, value in required.items() if not value]

config = Settings()
