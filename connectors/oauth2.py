"""
OAuth2Connector — authorization-code flow against a single provider.

Defaults to Google's endpoints; any provider that speaks the standard
authorization-code grant works by overriding ``OAUTH_AUTH_URL`` and
``OAUTH_TOKEN_URL``.
"""

from __future__ import annotations

import logging
from datetime import datetime, timedelta, timezone
from typing import Any, Dict, List, Optional
from urllib.parse import parse_qsl, urlencode

import httpx
from pydantic import ValidationError

from config.settings import Settings
from connectors.base import BaseConnector
from core.exceptions import TokenExchangeFailed
from utils.schemas import Token

logger = logging.getLogger(__name__)

# Upper bound on expires_in, in seconds; larger values overflow datetime
_MAX_EXPIRES_IN = 2**31 - 1


class OAuth2Connector(BaseConnector):
    """OAuth2 client adapter.  Configuration is immutable after construction."""

    def __init__(
        self,
        client_id: str,
        client_secret: str,
        redirect_url: str,
        auth_url: str,
        token_url: str,
        scopes: Optional[List[str]] = None,
        *,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self._client_id = client_id
        self._client_secret = client_secret
        self._redirect_url = redirect_url
        self._auth_url = auth_url
        self._token_url = token_url
        self._scopes = tuple(scopes or ())
        self._transport = transport

    @classmethod
    def from_settings(
        cls,
        settings: Settings,
        *,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ) -> "OAuth2Connector":
        return cls(
            client_id=settings.oauth_client_id,
            client_secret=settings.oauth_client_secret,
            redirect_url=settings.oauth_redirect_url,
            auth_url=settings.oauth_auth_url,
            token_url=settings.oauth_token_url,
            scopes=settings.scopes,
            transport=transport,
        )

    def get_auth_url(self, state: str) -> str:
        params = {
            "client_id": self._client_id,
            "redirect_uri": self._redirect_url,
            "response_type": "code",
        }
        if self._scopes:
            params["scope"] = " ".join(self._scopes)
        params["state"] = state
        params["access_type"] = "offline"       # ask for a refresh_token too

        joiner = "&" if "?" in self._auth_url else "?"
        return f"{self._auth_url}{joiner}{urlencode(params)}"

    async def exchange_code(self, code: str) -> Token:
        """Exchange auth code for a token.  Not retried on failure."""
        try:
            async with httpx.AsyncClient(transport=self._transport) as client:
                resp = await client.post(
                    self._token_url,
                    data={
                        "grant_type": "authorization_code",
                        "code": code,
                        "redirect_uri": self._redirect_url,
                        "client_id": self._client_id,
                        "client_secret": self._client_secret,
                    },
                    headers={"Accept": "application/json"},
                )
                resp.raise_for_status()
        except httpx.HTTPError as exc:
            logger.error("Unable to retrieve token from provider: %s", exc)
            raise TokenExchangeFailed(str(exc)) from exc

        payload = _parse_token_response(resp)
        return _token_from_payload(payload)


def _parse_token_response(resp: httpx.Response) -> Dict[str, Any]:
    """
    Decode the token endpoint body.

    Most providers answer with JSON; some (GitHub without an Accept header,
    older Facebook) answer with form-encoded text instead.
    """
    content_type = resp.headers.get("content-type", "").split(";", 1)[0].strip()
    if content_type in ("application/x-www-form-urlencoded", "text/plain"):
        return dict(parse_qsl(resp.text))

    try:
        payload = resp.json()
    except ValueError as exc:
        logger.error("Token endpoint returned an undecodable body (%s)", content_type or "no content-type")
        raise TokenExchangeFailed("undecodable token response") from exc

    if not isinstance(payload, dict):
        logger.error("Token endpoint returned %s instead of an object", type(payload).__name__)
        raise TokenExchangeFailed("token response is not an object")
    return payload


def _token_from_payload(payload: Dict[str, Any]) -> Token:
    access_token = payload.get("access_token")
    if not access_token:
        # Providers report grant errors with a 200 + error field surprisingly often
        logger.error(
            "Token endpoint response has no access_token (error=%s)",
            payload.get("error", "<none>"),
        )
        raise TokenExchangeFailed("server response missing access_token")

    expiry = None
    expires_in = payload.get("expires_in")
    if expires_in not in (None, ""):
        try:
            seconds = int(expires_in)
        except (TypeError, ValueError):
            logger.warning("Ignoring non-numeric expires_in=%r", expires_in)
        else:
            if seconds > 0:
                seconds = min(seconds, _MAX_EXPIRES_IN)
                expiry = datetime.now(timezone.utc) + timedelta(seconds=seconds)

    try:
        return Token(
            access_token=access_token,
            token_type=payload.get("token_type") or None,
            refresh_token=payload.get("refresh_token") or None,
            expiry=expiry,
        )
    except ValidationError as exc:
        logger.error("Token endpoint response has malformed fields: %s", exc)
        raise TokenExchangeFailed("malformed token response") from exc
