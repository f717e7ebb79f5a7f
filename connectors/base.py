"""
BaseConnector — abstract interface for the OAuth2 client adapter.

The relay only ever talks to one provider; subclasses wrap that provider's
configuration and implement the two halves of the authorization-code flow.
"""

from __future__ import annotations

from abc import ABC, abstractmethod

from utils.schemas import Token


class BaseConnector(ABC):
    """Abstract base for OAuth2 authorization-code connectors."""

    # ── OAuth flow ──────────────────────────────────────────────────────

    @abstractmethod
    def get_auth_url(self, state: str) -> str:
        """
        Build the provider's OAuth2 authorization URL.

        Parameters
        ----------
        state : str
            Opaque correlation value, echoed back by the provider on callback.

        Returns
        -------
        The full URL to redirect the user to.
        """
        ...

    @abstractmethod
    async def exchange_code(self, code: str) -> Token:
        """
        Exchange the authorization code for a token.

        Raises
        ------
        TokenExchangeFailed
            If the provider call errors or the response is unusable.
        """
        ...
