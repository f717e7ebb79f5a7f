"""
Authorization-code handshake: start → callback → fetch.

There is no state object.  The state of an identifier is implied by which
step the caller is on and by whether the store holds a token for it.
"""

from __future__ import annotations

import logging
from typing import Optional

from connectors.base import BaseConnector
from connectors.token_store import TokenStore
from core.exceptions import MissingCode, MissingIdentifier, NotFound, SerializationFailed

logger = logging.getLogger(__name__)

AUTHORIZATION_SUCCESS_MSG = "Authorization successful. You can close this window."


def start(identifier: Optional[str], connector: BaseConnector) -> str:
    """Return the provider authorization URL carrying ``identifier`` as state."""
    if not identifier:
        raise MissingIdentifier()
    return connector.get_auth_url(identifier)


async def callback(
    code: Optional[str],
    state: Optional[str],
    connector: BaseConnector,
    store: TokenStore,
) -> str:
    """
    Exchange ``code`` and file the token under ``state``.

    An empty ``state`` still performs the exchange, but the token is not
    stored anywhere and the caller is told the authorization succeeded.
    """
    if not code:
        raise MissingCode()

    token = await connector.exchange_code(code)

    if state:
        store.put(state, token)
        logger.info("Stored token for identifier %s", state)
    else:
        logger.warning("Callback without state — exchanged token discarded")

    return AUTHORIZATION_SUCCESS_MSG


def fetch(identifier: Optional[str], store: TokenStore) -> str:
    """Return the stored token for ``identifier`` as JSON."""
    if not identifier:
        raise MissingIdentifier()

    token = store.get(identifier)
    if token is None:
        raise NotFound()

    try:
        return token.to_json()
    except ValueError as exc:  # includes PydanticSerializationError
        logger.error("Failed to serialise token for %s: %s", identifier, exc)
        raise SerializationFailed(str(exc)) from exc
