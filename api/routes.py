"""
Relay HTTP routes: /start, /callback, /fetch_token.

Missing and empty query parameters are treated the same way.
"""

from __future__ import annotations

import logging

from fastapi import APIRouter, Depends, Query, status
from fastapi.responses import PlainTextResponse, RedirectResponse, Response

from api.dependencies import get_connector, get_token_store
from connectors.base import BaseConnector
from connectors.token_store import TokenStore
from core import handshake

logger = logging.getLogger(__name__)

router = APIRouter(tags=["oauth"])


@router.get("/start")
async def start(
    identifier: str = Query(""),
    connector: BaseConnector = Depends(get_connector),
) -> RedirectResponse:
    """Redirect the user to the provider's consent page."""
    auth_url = handshake.start(identifier, connector)
    return RedirectResponse(auth_url, status_code=status.HTTP_302_FOUND)


@router.get("/callback")
async def callback(
    code: str = Query(""),
    state: str = Query(""),
    connector: BaseConnector = Depends(get_connector),
    store: TokenStore = Depends(get_token_store),
) -> PlainTextResponse:
    """Provider redirects here after consent."""
    message = await handshake.callback(code, state, connector, store)
    return PlainTextResponse(message)


@router.get("/fetch_token")
async def fetch_token(
    identifier: str = Query(""),
    store: TokenStore = Depends(get_token_store),
) -> Response:
    body = handshake.fetch(identifier, store)
    return Response(content=body, media_type="application/json")
